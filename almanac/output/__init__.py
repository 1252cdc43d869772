"""
Output tools module.

Everything that the bot sends through discord is managed by this module;
this includes the functions that manage the sending of Discord messages
and embeds, Discord error messages, and the lookup of localized display
strings.
"""

import os
import re
from typing import Optional

from discord import Colour, Embed, Forbidden, HTTPException, Message
from discord.abc import Messageable
from loguru import logger

from almanac import settings
from almanac.output import eng_strings, por_strings

PARENT_DIRECTORY = os.getcwd().split("almanac")[0]
DEFAULT_LANG = "eng"
TOKEN_REGEX = r"[MN][A-Za-z\d]{23}\.[\w-]{6}\.[\w-]{27}"

# Turned into dicts at runtime, so that we don't have to use getattr.
LANG_STRINGS = {
    lang: {
        name: value for name, value in vars(module).items()
        if not name.startswith("__") and isinstance(value, str)
    }
    for lang, module in (("eng", eng_strings), ("por", por_strings))
}


def disp_str(str_name: str, lang: Optional[str] = None) -> str:
    """
    Retrieves display string based on string name.

    Strings missing from the requested language fall back on English.

    :param str_name: Name of string
    :param lang: Language of string, defaults to the configured language
    :return: Pre-formatted string
    """
    if lang is None:
        lang = settings.language

    strings = LANG_STRINGS.get(lang, {})
    value = strings.get(str_name, LANG_STRINGS[DEFAULT_LANG].get(str_name))
    if value is None:
        return ""

    return value.replace("%PREFIX%", settings.command_prefix)


async def send_message(
        channel: Messageable,
        text: Optional[str],
        embed: Optional[Embed] = None,
        token_guard: bool = False,
        path_guard: bool = False
) -> Optional[Message]:
    """
    Sends a message to a given context or channel.

    :param channel: Context or channel of message
    :param text: Text content of message
    :param embed: Embed of message
    :param token_guard: Censor discord bot tokens
    :param path_guard: Censor full project directory
    :return: Discord Message object, or None if sending failed
    """
    if token_guard and text is not None:
        text = re.sub(TOKEN_REGEX, "[REDACTED TOKEN]", text)

    if path_guard and text is not None:
        text = text.replace(PARENT_DIRECTORY, "../")

    try:
        message = await channel.send(text, embed=embed)
        return message
    except Forbidden:
        logger.warning(
            "Failed to send message to channel ID {}",
            str(channel)
        )
    except HTTPException:
        logger.error(
            "Failed to send message to channel {} "
            "due to invalid argument.",
            channel
        )

    return None


async def send_message_embed(
        channel: Messageable,
        title: str,
        desc: str,
        colour: Colour = Colour(settings.embed_color_normal)
) -> Optional[Message]:
    """
    Send a single embed with just a title, description and colour.

    Falls back on a plain message if the bot is not allowed to send
    embeds.

    :param channel: Channel to send embed to
    :param title: Embed title
    :param desc: Embed description
    :param colour: Embed colour
    :return: Sent message
    """
    embed = Embed(title=title, colour=colour, description=desc)

    try:
        # noinspection PyTypeChecker
        message = await channel.send(None, embed=embed)
        return message
    except Forbidden:
        logger.warning(
            "Failed to send embed to channel ID {}; "
            "falling back on plain message",
            str(channel)
        )

    return await send_message(channel, f"**{title}**\n\n{desc}")


async def send_simple_embed(
        channel: Messageable,
        disp_type: str,
        *args,
        colour: Colour = Colour(settings.embed_color_normal)
) -> Optional[Message]:
    """
    Send a simple default coloured embed with its title and description
    taken from disp_str.

    :param channel: Channel to send embed to
    :param disp_type: Display string descriptor, reflects the
        corresponding string in the list of strings that end with
        `_title` and `_desc` for the title and description respectively
    :param args: Arguments to be formatted into the description
    :param colour: Embed colour, defaults to normal colour defined in
        settings
    :return: Sent message
    """
    desc = disp_str(f"{disp_type}_desc")
    if args:
        desc = desc.format(*args)

    return await send_message_embed(
        channel=channel,
        title=disp_str(f"{disp_type}_title"),
        desc=desc,
        colour=colour
    )


async def send_error_embed(
        channel: Messageable,
        title: str,
        desc: str
) -> Optional[Message]:
    """
    Send an error embed.

    :param channel: Channel to send error to
    :param title: Embed title
    :param desc: Embed desc
    :return: Sent message
    """
    return await send_message_embed(
        channel,
        title,
        desc,
        Colour(settings.embed_color_severe)
    )
