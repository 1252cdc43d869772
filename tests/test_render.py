"""Tests for the calendar texts."""
from datetime import date

import pytest

from almanac.events.render import (
    parse_summary_header, render_full_listing, render_month_summary,
    render_reminder
)
from almanac.events.store import Event


def test_month_summary_scenario_in_portuguese(feira):
    text = render_month_summary([feira], date(2025, 11, 25), "por")
    lines = text.splitlines()

    assert lines[0] == "**📅 NOVEMBRO 2025**"
    assert lines[1] == ""
    assert lines[2] == "**10** – Feira (Shopping Roma 14h)"


def test_month_summary_empty_month_is_placeholder():
    events = [Event(date(2025, 10, 31), "October"), Event(date(2024, 11, 1), "Last year")]

    assert render_month_summary(events, date(2025, 11, 1), "eng") == (
        "**📅 NOVEMBER 2025**\n\n_No events registered this month._"
    )
    assert render_month_summary([], date(2025, 11, 1), "por").endswith(
        "_Sem eventos registrados neste mês._"
    )


def test_month_summary_sorts_and_keeps_past_days():
    events = [
        Event(date(2025, 11, 28), "Late"),
        Event(date(2025, 12, 1), "Next month"),
        Event(date(2025, 11, 3), "Early", "", "9h"),
        Event(date(2025, 11, 15), "Middle", "Park", "")
    ]

    text = render_month_summary(events, date(2025, 11, 20), "eng")

    assert text.splitlines()[2:] == [
        "**03** – Early ( 9h)",
        "**15** – Middle (Park )",
        "**28** – Late"
    ]
    assert "Next month" not in text


@pytest.mark.parametrize("lang", ["eng", "por"])
def test_summary_header_round_trip(lang):
    for month in range(1, 13):
        reference = date(2031, month, 1)
        text = render_month_summary([], reference, lang)

        assert parse_summary_header(text, lang) == (2031, month)


def test_parse_summary_header_rejects_other_messages():
    assert parse_summary_header("📣 **Reminder:** stuff", "eng") is None
    assert parse_summary_header("**📅 SMARCH 2025**", "eng") is None
    assert parse_summary_header("", "eng") is None


def test_full_listing_sorted_with_optional_fields(feira):
    events = [
        feira,
        Event(date(2025, 1, 2), "Plain"),
        Event(date(2025, 6, 1), "Timed", "", "18:30")
    ]

    assert render_full_listing(events, "eng").splitlines() == [
        "**🗓️ Registered events:**",
        "",
        "📅 2025-01-02 — **Plain**",
        "📅 2025-06-01 — **Timed** | 🕒18:30",
        "📅 2025-11-10 — **Feira** | 📍Shopping Roma | 🕒14h"
    ]


def test_full_listing_empty_placeholder():
    assert render_full_listing([], "eng") == "📭 No events registered."
    assert render_full_listing([], "por") == "📭 Nenhum evento cadastrado."


def test_reminder_text(feira):
    assert render_reminder(feira, "por") == (
        "📣 **Lembrete:** Hoje acontece **Feira**! 📍Shopping Roma 🕒 14h"
    )
    assert render_reminder(Event(date(2025, 1, 1), "Party"), "eng") == (
        "📣 **Reminder:** **Party** is happening today!"
    )
