"""
Summary Publisher Module.

The calendar channel holds one summary message owned by the bot. It is
found by looking back over the most recent messages of the channel; if
the bot authored one of them it is edited in place, otherwise a new
summary is sent. A summary that scrolled out of the lookback window is
not found, and a second one will be sent.
"""

from enum import Enum
from typing import Callable, Iterable, Optional

from discord import Message
from discord.abc import Messageable
from loguru import logger

from almanac import settings
from almanac.utils.discord_utils import FETCH_FAIL_EXCEPTIONS


class PublishAction(Enum):
    """Outcome of a summary publication."""
    EDITED = "edited"
    SENT = "sent"
    FAILED = "failed"


def find_summary_message(
        messages: Iterable[Message],
        bot_user_id: int,
        is_summary: Optional[Callable[[Message], bool]] = None
) -> Optional[Message]:
    """
    Find the bot's own message among recent channel messages.

    :param messages: Recent messages, most recent first
    :param bot_user_id: User ID of the bot
    :param is_summary: Extra check on the message, for channels where
        the bot also posts messages other than the summary
    :return: First matching message authored by the bot, or None
    """
    for message in messages:
        if message.author.id != bot_user_id:
            continue
        if is_summary is None or is_summary(message):
            return message

    return None


async def publish_summary(
        channel: Messageable,
        bot_user_id: int,
        text: str,
        lookback: Optional[int] = None,
        is_summary: Optional[Callable[[Message], bool]] = None
) -> PublishAction:
    """
    Edit the existing summary message or send a new one.

    Discord failures are logged and reported as FAILED rather than
    raised.

    :param channel: Calendar channel
    :param bot_user_id: User ID of the bot
    :param text: Freshly rendered summary text
    :param lookback: Number of recent messages to search, defaults to
        the configured summary lookback limit
    :param is_summary: Extra check identifying the summary message
    :return: What was done
    """
    if lookback is None:
        lookback = settings.summary_lookback_limit

    try:
        recent = [
            message async for message in channel.history(limit=lookback)
        ]
        summary_message = find_summary_message(
            recent,
            bot_user_id,
            is_summary
        )

        if summary_message is not None:
            await summary_message.edit(content=text)
            logger.debug("Edited calendar summary {}", summary_message.id)
            return PublishAction.EDITED

        await channel.send(text)
        logger.debug("Sent new calendar summary to {}", channel)
        return PublishAction.SENT

    except FETCH_FAIL_EXCEPTIONS as e:
        logger.error("Failed to publish calendar summary: {}", e)
        return PublishAction.FAILED
