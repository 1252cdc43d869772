"""
Calendar Render Module.

Turns the event list into the texts posted on Discord: the monthly
summary kept up to date in the calendar channel, the full listing, and
the same-day reminder. Every function here is pure.
"""

import re
from datetime import date
from typing import Iterable, List, Optional, Tuple

from almanac.output import disp_str


def month_name(month: int, lang: Optional[str] = None) -> str:
    """
    Localized name of a month.

    :param month: Month number, 1 to 12
    :param lang: Display language
    :return: Month name
    """
    return disp_str(f"month_{month}", lang)


def sort_events(events: Iterable) -> List:
    """Stable sort of events by date."""
    return sorted(events, key=lambda event: event.date)


def render_month_summary(
        events: Iterable,
        reference_date: date,
        lang: Optional[str] = None
) -> str:
    """
    Render the summary of every event in the month of the reference
    date.

    Events earlier in the month than the reference date are included.

    :param events: Events to pick from
    :param reference_date: Any day of the month to summarize
    :param lang: Display language
    :return: Summary message text
    """
    header = disp_str("calendar_summary_header", lang).format(
        month_name(reference_date.month, lang).upper(),
        f"{reference_date.year:04d}"
    )
    month_events = sort_events(
        event for event in events
        if (event.date.year, event.date.month)
        == (reference_date.year, reference_date.month)
    )

    if not month_events:
        return f"{header}\n\n{disp_str('calendar_summary_empty', lang)}"

    lines = []
    for event in month_events:
        line = f"**{event.date.day:02d}** – {event.name}"
        if event.location or event.time:
            line += f" ({event.location} {event.time})"
        lines.append(line)

    return header + "\n\n" + "\n".join(lines) + "\n"


def render_full_listing(events: Iterable, lang: Optional[str] = None) -> str:
    """
    Render every registered event.

    :param events: Events to list
    :param lang: Display language
    :return: Listing message text
    """
    sorted_events = sort_events(events)
    if not sorted_events:
        return disp_str("calendar_listing_empty", lang)

    lines = []
    for event in sorted_events:
        line = f"📅 {event.date_str} — **{event.name}**"
        if event.location:
            line += f" | 📍{event.location}"
        if event.time:
            line += f" | 🕒{event.time}"
        lines.append(line)

    return (
        disp_str("calendar_listing_header", lang)
        + "\n\n" + "\n".join(lines) + "\n"
    )


def render_reminder(event, lang: Optional[str] = None) -> str:
    """
    Render the same-day reminder for an event.

    :param event: Event happening today
    :param lang: Display language
    :return: Reminder message text
    """
    text = disp_str("calendar_reminder", lang).format(event.name)
    if event.location:
        text += f" 📍{event.location}"
    if event.time:
        text += f" 🕒 {event.time}"

    return text


def parse_summary_header(
        text: str,
        lang: Optional[str] = None
) -> Optional[Tuple[int, int]]:
    """
    Recover the month and year from a rendered summary.

    :param text: Message text
    :param lang: Display language the summary was rendered in
    :return: Tuple of year and month, or None if the text does not
        start with a summary header
    """
    pattern = "^" + re.escape(
        disp_str("calendar_summary_header", lang)
    ).replace(re.escape("{}"), "(.+?)", 1).replace(
        re.escape("{}"), r"(\d{4})", 1
    )
    match = re.match(pattern, text or "")
    if match is None:
        return None

    name, year = match.group(1), int(match.group(2))
    for month in range(1, 13):
        if month_name(month, lang).upper() == name:
            return year, month

    return None
