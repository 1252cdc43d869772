"""Calendar Cog Module."""
from dataclasses import astuple
from datetime import date
from typing import Optional, Set, Tuple

from discord import Message
from discord.ext import commands, tasks
from discord.ext.commands import Context
from loguru import logger

from almanac import settings
from almanac.events.publisher import PublishAction, publish_summary
from almanac.events.reminders import find_today_events, today_in_zone
from almanac.events.render import (
    parse_summary_header, render_full_listing, render_month_summary,
    render_reminder
)
from almanac.events.store import Event, EventStore, EventValidationError
from almanac.output import disp_str, send_message, send_simple_embed
from almanac.output.error_handler import AlmanacCommandError
from almanac.utils.discord_utils import fetch_text_channel

REMINDER_INTERVAL_HOURS = settings.reminder_interval_hours


class CalendarCog(commands.Cog, name="calendar"):
    """
    Event Calendar.

    Register, list and remove events, keep the month summary message in
    the calendar channel up to date, and remind the channel on the day
    of each event.
    """

    __slots__ = [
        "bot",
        "store",
        "channel_id",
        "tz_name",
        "reminded",
        "reminded_date"
    ]

    # Using forward references to avoid cyclic imports
    # noinspection PyUnresolvedReferences
    def __init__(
            self,
            bot: "AlmanacBot",
            store: EventStore,
            channel_id: int = settings.calendar_channel,
            tz_name: str = settings.timezone
    ) -> None:
        """
        Initializer for the CalendarCog class.

        :param bot: Almanac bot object
        :param store: Loaded event store
        :param channel_id: ID of the calendar channel
        :param tz_name: Timezone used to decide what day it is
        """
        self.bot = bot
        self.store = store
        self.channel_id = channel_id
        self.tz_name = tz_name
        self.reminded: Set[Tuple] = set()
        self.reminded_date: Optional[date] = None

        self.reminder_sweep.start()  # pylint: disable=no-member

    def cog_unload(self) -> None:
        """Stop the reminder timer."""
        self.reminder_sweep.cancel()  # pylint: disable=no-member

    async def cog_save_all(self) -> None:
        """Save all events to file."""
        self.store.save()

    def today(self) -> date:
        """Current date in the configured timezone."""
        return today_in_zone(self.tz_name)

    async def update_summary(self) -> PublishAction:
        """
        Render the current month and publish it to the calendar channel.

        :return: What was done with the summary message
        """
        channel = await fetch_text_channel(self.bot, self.channel_id)
        if channel is None:
            return PublishAction.FAILED

        # Render only after fetching so that the summary reflects the
        # store as it is now
        today = self.today()
        text = render_month_summary(self.store.list_events(), today)
        action = await publish_summary(
            channel,
            self.bot.user.id,
            text,
            is_summary=self.is_summary_message
        )

        logger.debug(
            "Calendar summary for {}-{:02d} {}",
            today.year,
            today.month,
            action.value
        )
        return action

    @staticmethod
    def is_summary_message(message: Message) -> bool:
        """
        Tell the summary apart from reminders in the calendar channel.

        Summaries of any month match, so that the message rolls over
        to the next month in place.

        :param message: Message authored by the bot
        :return: Whether the message starts with a summary header
        """
        return parse_summary_header(message.content) is not None

    @tasks.loop(hours=REMINDER_INTERVAL_HOURS)
    async def reminder_sweep(self) -> None:
        """
        Send reminders for today's events and refresh the summary.

        Each event is only announced once per day even though the sweep
        runs several times a day.
        """
        today = self.today()
        if today != self.reminded_date:
            self.reminded_date = today
            self.reminded.clear()

        due = [
            event for event in find_today_events(self.store.events, today)
            if astuple(event) not in self.reminded
        ]

        if due:
            channel = await fetch_text_channel(self.bot, self.channel_id)
            if channel is not None:
                await self.send_reminders(channel, due)

        await self.update_summary()

    async def send_reminders(self, channel, due) -> None:
        """
        Announce events happening today.

        :param channel: Calendar channel
        :param due: Events to announce
        """
        for event in due:
            # Might have been removed while the last reminder was sent
            if event not in self.store.events:
                continue

            message = await send_message(channel, render_reminder(event))
            if message is not None:
                self.reminded.add(astuple(event))
                logger.info(
                    "Sent reminder for {} on {}",
                    event.name,
                    event.date_str
                )

    @reminder_sweep.before_loop
    async def before_reminder_sweep(self) -> None:
        """Wait for the bot to connect before the first sweep."""
        await self.bot.wait_until_ready()

    @staticmethod
    def describe_event(event: Event) -> str:
        """
        Event details appended to command confirmations.

        :param event: Event to describe
        :return: Location and time snippet, possibly empty
        """
        details = ""
        if event.location:
            details += f" 📍{event.location}"
        if event.time:
            details += f" 🕒{event.time}"

        return details

    @commands.command(name="help", aliases=["ajuda"])
    async def calendar_help(self, context: Context, *_) -> None:
        """
        Display the list of calendar commands.

        :param context: Command context
        """
        await send_simple_embed(context, "calendar_help")

    @commands.command(name="addevent", aliases=["addevento"])
    async def add_event(
            self,
            context: Context,
            date_str: str,
            name: str,
            location: str = "",
            time: str = ""
    ) -> None:
        """
        Register a new event.

        :param context: Command context
        :param date_str: Event date as YYYY-MM-DD
        :param name: Event name
        :param location: Event location
        :param time: Event time of day
        """
        try:
            event = self.store.add(date_str, name, location, time)
        except EventValidationError as e:
            raise AlmanacCommandError(e.disp_type, *e.format_args) from e

        await self.update_summary()
        await send_message(
            context,
            disp_str("calendar_add_success").format(
                event.name,
                event.date_str
            ) + self.describe_event(event)
        )

    @commands.command(name="listevents", aliases=["listeventos"])
    async def list_events(self, context: Context, *_) -> None:
        """
        List every registered event.

        :param context: Command context
        """
        await send_message(
            context,
            render_full_listing(self.store.list_events())
        )

    @commands.command(name="removeevent", aliases=["removeevento"])
    async def remove_event(self, context: Context, date_str: str) -> None:
        """
        Remove every event on a date.

        :param context: Command context
        :param date_str: Date as YYYY-MM-DD
        """
        try:
            removed = self.store.remove_by_date(date_str)
        except EventValidationError as e:
            raise AlmanacCommandError(e.disp_type, *e.format_args) from e

        if removed == 0:
            raise AlmanacCommandError("calendar_not_found", date_str.strip())

        await self.update_summary()
        await send_message(
            context,
            disp_str("calendar_remove_success").format(
                removed,
                date_str.strip()
            )
        )
