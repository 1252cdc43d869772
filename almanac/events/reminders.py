"""
Reminder Module.

Decides which events are due for a same-day reminder. "Today" is always
computed in one explicitly named timezone so that every caller agrees
on where the date boundary is.
"""

from datetime import date, datetime
from typing import Iterable, List, Optional

import pytz

from almanac.utils.time_utils import utc_time_now


def today_in_zone(tz_name: str, now: Optional[datetime] = None) -> date:
    """
    Get the calendar date in a named timezone.

    :param tz_name: IANA timezone name, e.g. "America/Sao_Paulo"
    :param now: Timezone aware instant to convert, defaults to the
        current time
    :return: Local calendar date
    :raises pytz.UnknownTimeZoneError: Invalid timezone name
    """
    if now is None:
        now = utc_time_now()

    return now.astimezone(pytz.timezone(tz_name)).date()


def find_today_events(events: Iterable, today: date) -> List:
    """
    Select every event happening on a given day.

    :param events: Events to pick from
    :param today: Day to match
    :return: Matching events in their original order
    """
    return [event for event in events if event.date == today]
