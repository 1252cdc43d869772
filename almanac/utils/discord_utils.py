"""
Discord utilities module.

A collection of useful functions that retrieve stuff from Discord.
"""
from typing import Optional

from discord import Client, Forbidden, HTTPException, NotFound, TextChannel
from loguru import logger

FETCH_FAIL_EXCEPTIONS = (NotFound, Forbidden, HTTPException)


async def fetch_text_channel(
        bot: Client,
        channel_id: int
) -> Optional[TextChannel]:
    """
    Get a text channel from the cache, fetching it if necessary.

    :param bot: Discord client
    :param channel_id: Channel ID
    :return: Text channel, or None if it could not be retrieved or is
        not a text channel
    """
    channel = bot.get_channel(channel_id)
    if channel is None:
        try:
            channel = await bot.fetch_channel(channel_id)
        except FETCH_FAIL_EXCEPTIONS:
            logger.error("Failed to fetch channel {}", channel_id)
            return None

    if not isinstance(channel, TextChannel):
        logger.error("Channel {} is not a text channel", channel_id)
        return None

    return channel
