"""
Event Store Module.

Keeps the calendar events in memory and mirrors them to a flat JSON
file after every change. The file is always rewritten in full; a
missing or unreadable file is treated as an empty calendar.
"""

import json
import os
import re
import tempfile
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Union

from loguru import logger

DATE_REGEX = r"^\d{4}-\d{2}-\d{2}$"
DATE_FORMAT = "%Y-%m-%d"

# Keys used by files written by the first (Portuguese) deployment
LEGACY_KEYS = {
    "data": "date",
    "nome": "name",
    "local": "location",
    "hora": "time"
}


class EventValidationError(Exception):
    """
    When an event is rejected before reaching the store.

    Every subclass names the display string used to warn the user.
    """

    disp_type = "calendar_invalid_event"

    def __init__(self, *args) -> None:
        """
        Initializer for the EventValidationError class.

        :param args: Arguments to be formatted into the user warning
        """
        super().__init__(*args)
        self.format_args = args


class InvalidDateFormat(EventValidationError):
    """Date is not a real calendar date written as YYYY-MM-DD."""

    disp_type = "calendar_invalid_date"


class EmptyName(EventValidationError):
    """Event name is empty or blank."""

    disp_type = "calendar_empty_name"


class DuplicateEvent(EventValidationError):
    """An event with the same date and name already exists."""

    disp_type = "calendar_duplicate_event"


class EventLoadError(Exception):
    """When an event fails to load from a dictionary."""


def parse_event_date(date_str: str) -> date:
    """
    Parse a strict YYYY-MM-DD date.

    :param date_str: User or file provided date string
    :return: Calendar date
    :raises InvalidDateFormat: Date does not match the pattern or does
        not exist on the calendar
    """
    date_str = date_str.strip()
    if not re.match(DATE_REGEX, date_str):
        raise InvalidDateFormat(date_str)

    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormat(date_str) from e


@dataclass
class Event:
    """
    A single calendar entry.

    Parameters:
    - date: Day of the event
    - name: Event label, never empty
    - location: Where it happens, empty if unset
    - time: Free text time of day such as "14h" or "18:30", empty if
      unset
    """
    date: date
    name: str
    location: str = ""
    time: str = ""

    @property
    def date_str(self) -> str:
        """ISO representation of the event date."""
        return self.date.strftime(DATE_FORMAT)

    def to_dict(self) -> dict:
        """
        Save the event to a dictionary for JSON dumping.

        :return: Dictionary of event fields
        """
        return {
            "date": self.date_str,
            "name": self.name,
            "location": self.location,
            "time": self.time
        }

    @classmethod
    def from_dict(cls, event_dict: dict) -> "Event":
        """
        Load an event from a saved dictionary.

        :param event_dict: Dictionary of event fields, using either the
            current or the legacy key names
        :return: Event object
        :raises EventLoadError: Missing or invalid fields
        """
        try:
            fields = {
                LEGACY_KEYS.get(key, key): value
                for key, value in event_dict.items()
            }
            name = str(fields["name"])
            if not name.strip():
                raise EventLoadError("Event without a name")

            return cls(
                date=parse_event_date(str(fields["date"])),
                name=name,
                location=str(fields.get("location") or ""),
                time=str(fields.get("time") or "")
            )
        except (AttributeError, KeyError, InvalidDateFormat) as e:
            raise EventLoadError(str(event_dict)) from e


class EventStore:
    """
    In-memory event list with a JSON file mirror.

    The store is only ever mutated through its methods, none of which
    suspend, so a mutation and its file write always happen together.
    """

    __slots__ = ["file_path", "reject_duplicates", "events"]

    def __init__(
            self,
            file_path: str,
            reject_duplicates: bool = False
    ) -> None:
        """
        Initializer for the EventStore class.

        :param file_path: Path to the JSON state file
        :param reject_duplicates: Whether to reject an event with the
            same date and name as an existing event
        """
        self.file_path = file_path
        self.reject_duplicates = reject_duplicates
        self.events: List[Event] = []

    def load(self) -> None:
        """
        Load events from the state file.

        A missing file gives an empty store; an unreadable or malformed
        file is logged and also gives an empty store.
        """
        self.events = []
        if not os.path.exists(self.file_path):
            logger.info(
                "No event file found at {}; starting with an empty calendar",
                self.file_path
            )
            return

        try:
            with open(self.file_path, "r", encoding="utf-8") as file:
                raw_events = json.load(file)

            if not isinstance(raw_events, list):
                raise EventLoadError("Event file does not hold a list")

            events = [Event.from_dict(raw) for raw in raw_events]
        except (OSError, ValueError, EventLoadError) as e:
            logger.error(
                "Failed to read event file {}: {}",
                self.file_path,
                e
            )
            return

        self.events = events
        logger.info(
            "Loaded {} event(s) from {}",
            len(self.events),
            self.file_path
        )

    def save(self) -> None:
        """
        Write every event to the state file, replacing its contents.

        The new contents are written to a temporary file next to the
        target and moved over it, so a crash never leaves half a file.
        """
        directory = os.path.dirname(os.path.abspath(self.file_path))
        os.makedirs(directory, exist_ok=True)

        file_descriptor, temp_path = tempfile.mkstemp(
            dir=directory,
            prefix=".events-",
            suffix=".tmp"
        )
        try:
            with os.fdopen(file_descriptor, "w", encoding="utf-8") as file:
                json.dump(
                    [event.to_dict() for event in self.events],
                    file,
                    indent=2,
                    ensure_ascii=False
                )
            os.replace(temp_path, self.file_path)
        except OSError:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        logger.debug(
            "Saved {} event(s) to {}",
            len(self.events),
            self.file_path
        )

    def add(
            self,
            date_str: str,
            name: str,
            location: Optional[str] = "",
            time: Optional[str] = ""
    ) -> Event:
        """
        Validate, append and persist a new event.

        :param date_str: Event date as YYYY-MM-DD
        :param name: Event name
        :param location: Event location, may be empty
        :param time: Event time of day, may be empty
        :return: The stored event
        :raises InvalidDateFormat: Malformed or impossible date
        :raises EmptyName: Blank name
        :raises DuplicateEvent: Same date and name already stored, only
            when duplicates are rejected
        """
        event_date = parse_event_date(date_str)

        name = name.strip() if name else ""
        if not name:
            raise EmptyName()

        if self.reject_duplicates and any(
                event.date == event_date and event.name == name
                for event in self.events
        ):
            raise DuplicateEvent(name, date_str.strip())

        event = Event(
            date=event_date,
            name=name,
            location=(location or "").strip(),
            time=(time or "").strip()
        )
        self.events.append(event)
        try:
            self.save()
        except OSError:
            self.events.pop()
            raise

        logger.info("Added event {} on {}", event.name, event.date_str)
        return event

    def remove_by_date(self, event_date: Union[date, str]) -> int:
        """
        Remove every event on a date.

        :param event_date: Date to clear, as a date or a YYYY-MM-DD
            string
        :return: Number of events removed; the file is only written if
            this is not zero
        :raises InvalidDateFormat: Malformed date string
        """
        if isinstance(event_date, str):
            event_date = parse_event_date(event_date)

        survivors = [
            event for event in self.events if event.date != event_date
        ]
        removed = len(self.events) - len(survivors)
        if removed == 0:
            return 0

        previous = self.events
        self.events = survivors
        try:
            self.save()
        except OSError:
            self.events = previous
            raise

        logger.info("Removed {} event(s) on {}", removed, event_date)
        return removed

    def list_events(self) -> List[Event]:
        """
        Get every event sorted by date.

        :return: New list of events, ties kept in insertion order
        """
        return sorted(self.events, key=lambda event: event.date)
