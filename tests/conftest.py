"""Shared fixtures and Discord stand-ins."""
from datetime import date
from types import SimpleNamespace
from typing import List, Optional
from unittest.mock import MagicMock

import discord
import pytest

from almanac import settings
from almanac.events.store import Event, EventStore

BOT_USER_ID = 1000


class FakeMessage:
    """Message with an author and editable content."""

    def __init__(self, author_id: int, content: str = "") -> None:
        self.id = id(self)
        self.author = SimpleNamespace(id=author_id)
        self.content = content
        self.edits: List[str] = []

    async def edit(self, content: Optional[str] = None, **_) -> "FakeMessage":
        self.content = content
        self.edits.append(content)
        return self


class FakeChannel:
    """Text channel keeping its messages most recent first."""

    def __init__(self, messages=None, fail_with=None) -> None:
        self.messages: List[FakeMessage] = list(messages or [])
        self.sent: List[str] = []
        self.fail_with = fail_with

    async def history(self, limit: int = 100):
        if self.fail_with is not None:
            raise self.fail_with
        for message in self.messages[:limit]:
            yield message

    async def send(self, text=None, embed=None, **_) -> FakeMessage:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(text if embed is None else embed.description)
        message = FakeMessage(BOT_USER_ID, text)
        self.messages.insert(0, message)
        return message


def forbidden() -> discord.Forbidden:
    """Build a Forbidden error without a real HTTP response."""
    return discord.Forbidden(MagicMock(status=403, reason="Forbidden"), "no")


@pytest.fixture(autouse=True)
def english(monkeypatch):
    """Run every test in English with the default prefix."""
    monkeypatch.setattr(settings, "language", "eng")
    monkeypatch.setattr(settings, "command_prefix", "&")


@pytest.fixture
def events_path(tmp_path):
    return str(tmp_path / "calendar" / "events.json")


@pytest.fixture
def store(events_path):
    return EventStore(events_path)


@pytest.fixture
def feira():
    return Event(date(2025, 11, 10), "Feira", "Shopping Roma", "14h")
