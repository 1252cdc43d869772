"""
Main bot module.

Entry point for running the bot.
"""
import sys
import traceback
from typing import Optional

from discord import Intents, TextChannel
from discord.ext import commands
from discord.ext.commands import Context
from loguru import logger

from almanac import settings
from almanac.events.calendar_cog import CalendarCog
from almanac.events.store import EventStore
from almanac.output import disp_str, send_message
from almanac.output.error_handler import handle_command_error

# Removing and replacing the default logger output
logger.remove(0)
logger.level("DEBUG", color="<fg 251>")
logger.add(
    sys.stderr,
    format="<bg 239><fg 15> {time:YYYY-MM-DD HH:mm:ss.SSS} </fg 15></bg 239>"
           "<bg 32><lvl><b> {level} </b></lvl></bg 32>"
           "<n> {message}</n>",
    level=settings.console_log_level
)


class AlmanacBot(commands.Bot):
    """Almanac Discord bot."""

    __slots__ = [
        "master_log_id",
        "log_channel",
        "first_start"
    ]

    def __init__(self) -> None:
        """Initializer for the AlmanacBot class."""
        intents = Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=settings.command_prefix,
            help_command=None,
            description=settings.bot_description,
            owner_ids=set(settings.bot_owners),
            intents=intents
        )

        self.log_channel: Optional[TextChannel] = None
        self.master_log_id: Optional[int] = None
        self.first_start = True

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        """
        Called when an event raises an uncaught exception.

        :param event_method: The name of the event that raised the
            exception
        :param args: Positional arguments for the event that raised the
            exception
        :param kwargs: Keyword arguments for the event that raised the
            exception
        """
        logger.error(
            "Exception raised in {}.\n\t{}",
            event_method,
            traceback.format_exc().replace("\n", "\n\t")
        )

    async def on_command_error(
            self,
            context: Context,
            exception: Exception
    ) -> None:
        """
        Called when a command triggers an error.

        :param context: Context of error-triggering command
        :param exception: Exception that the command raised
        """
        await handle_command_error(context, exception)

    async def on_ready(self) -> None:
        """
        Called when Almanac is done preparing the data received from
        Discord.

        This overrides the on_ready method from discord.Client.
        """
        if self.first_start:
            await self.on_first_ready()

    def setup_master_log(self) -> None:
        """Forward logs to the master log channel if one is configured."""
        if not settings.master_log_channel:
            return

        log_channel = self.get_channel(settings.master_log_channel)
        if log_channel is None or not isinstance(log_channel, TextChannel):
            logger.error(
                "Bot master logging channel ID {} not found; setting ignored.",
                settings.master_log_channel
            )
            return

        self.log_channel = log_channel
        logger.info(
            "Set up master log channel on #{} ({})",
            log_channel.name,
            log_channel.id
        )

        async def log_message(msg: str) -> None:
            await send_message(
                self.log_channel,
                msg,
                token_guard=True,
                path_guard=True
            )

        self.master_log_id = logger.add(
            log_message,
            colorize=False,
            backtrace=False,
            catch=False,
            format="**[{time:YYYY-MM-DD HH:mm:ss.SSS!UTC}][{level}]** "
                   "```\n{message}\n```",
            level=settings.master_log_level
        )

    async def on_first_ready(self) -> None:
        """Almanac's startup procedure."""
        self.first_start = False
        self.setup_master_log()

        logger.info(
            "Almanac has started on {} ({}) with {} server(s).",
            self.user.name,
            self.user.id,
            len(self.guilds)
        )

        # Load calendar cog
        logger.info("Loading calendar cog.")
        store = EventStore(
            settings.file_events_db,
            reject_duplicates=settings.reject_duplicate_events
        )
        store.load()

        calendar_cog = CalendarCog(self, store)
        # The first reminder sweep publishes the summary
        self.add_cog(calendar_cog)


def main() -> None:
    """Build the bot and run it until it is shut down."""
    almanac = AlmanacBot()

    @almanac.command("botshutdown")
    @commands.is_owner()
    async def stop_command(context: Context) -> None:
        """
        Bot shutdown command.

        This is used for the sole purpose of stopping the bot safely and
        can only be activated by the bot owners.

        :param context: Command context
        """
        await send_message(channel=context, text=disp_str("bot_shutdown"))
        logger.info("Bot shutting down...")

        for name, cog in list(almanac.cogs.items()):
            logger.info("Closing cog: {}", name)
            await cog.cog_save_all()

        await almanac.close()

    almanac.run(settings.bot_token)


if __name__ == "__main__":
    main()
