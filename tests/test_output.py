"""Tests for display strings and command errors."""
import asyncio
from types import SimpleNamespace

import pytest
from discord.ext.commands import (
    CommandError, CommandInvokeError, CommandNotFound, TooManyArguments
)
from loguru import logger

from almanac import settings
from almanac.events.store import InvalidDateFormat
from almanac.output import disp_str
from almanac.output.error_handler import (
    AlmanacCommandError, handle_command_error
)
from tests.conftest import FakeChannel


def test_disp_str_uses_configured_language(monkeypatch):
    assert disp_str("month_3") == "March"
    monkeypatch.setattr(settings, "language", "por")
    assert disp_str("month_3") == "março"


def test_disp_str_falls_back_on_english():
    assert disp_str("command_error_logger_header", "por") == (
        "Command error {} triggered by command: {}"
    )
    assert disp_str("no_such_string", "por") == ""
    assert disp_str("month_1", "klingon") == "January"


def test_disp_str_substitutes_prefix(monkeypatch):
    monkeypatch.setattr(settings, "command_prefix", "!")

    assert "`!addevent" in disp_str("calendar_help_desc")


def test_command_error_from_validation_error():
    validation_error = InvalidDateFormat("2025-13-40")
    error = AlmanacCommandError(
        validation_error.disp_type,
        *validation_error.format_args
    )

    assert error.error_header == "⚠️ Invalid date"
    assert error.error_message == (
        "Use the date format: YYYY-MM-DD (got `2025-13-40`)."
    )
    assert str(error) == error.error_message


class FakeContext(FakeChannel):
    """Command context that records what is sent back."""

    def __init__(self) -> None:
        super().__init__()
        self.command = "addevent"
        self.channel = SimpleNamespace(id=5, name="calendar")


@pytest.fixture
def log_levels():
    levels = []
    sink_id = logger.add(
        lambda message: levels.append(message.record["level"].name),
        level="TRACE"
    )
    yield levels
    logger.remove(sink_id)


def test_internal_error_is_logged_and_answered_generically(log_levels):
    context = FakeContext()

    asyncio.run(handle_command_error(context, CommandInvokeError(OSError("disk"))))

    assert context.sent == ["❌ An error occurred while running the command."]
    assert "ERROR" in log_levels


def test_validation_error_warns_user_without_error_log(log_levels):
    context = FakeContext()
    error = AlmanacCommandError("calendar_not_found", "2025-12-25")

    asyncio.run(handle_command_error(context, error))

    assert context.sent == ["No events found on 2025-12-25."]
    assert "ERROR" not in log_levels


def test_argument_error_is_reported_with_detail():
    context = FakeContext()
    error = TooManyArguments("Too many arguments passed to addevent")

    asyncio.run(handle_command_error(context, error))

    assert context.sent == [
        "Too many arguments.\nToo many arguments passed to addevent"
    ]


def test_unknown_error_is_logged_and_ignored(log_levels):
    context = FakeContext()

    asyncio.run(handle_command_error(context, CommandError("strange")))

    assert context.sent == []
    assert "ERROR" in log_levels


def test_command_not_found_is_silent(log_levels):
    context = FakeContext()

    asyncio.run(handle_command_error(context, CommandNotFound("nope")))

    assert context.sent == []
    assert "ERROR" not in log_levels


def test_help_tells_users_to_quote_multi_word_arguments():
    assert '"<name>"' in disp_str("calendar_help_desc", "eng")
    assert '"<nome>"' in disp_str("calendar_help_desc", "por")
