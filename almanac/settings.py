# pylint: skip-file
"""
This is the settings file.

Secrets and the calendar channel are read from the environment (or a
.env file); everything else can be overridden by an optional YAML file
whose path is given by the ALMANAC_CONFIG environment variable
(defaults to "./config.yml"). Only keys that already exist in this
module are taken from the YAML file.

========================================================================
Log levels:

5  | Trace    | All debug messages, including every step in every
              | function.

10 | Debug    | Important debug messages showing results of certain
              | computations.

20 | Info     | All information that might be necessary for the user
              | to monitor what the bot is doing.

30 | Warning  | Errors that are not the result of incorrect
              | configuration or code; these do not affect the bot's
              | functionality.

40 | Error    | Errors that occur due to incorrect configuration or
              | failed I/O that may impact the execution of a specific
              | command.

50 | Critical | Unexpected errors that impact the entire bot.

The master log is a Discord channel dedicated for bot logs.
"""

import os

import yaml
from dotenv import load_dotenv

load_dotenv()

# Command prefix
command_prefix = "&"

# Bot Description (Shown in help)
bot_description = "Almanac: calendar keeper bot"

# Discord bot token
bot_token = os.environ.get("TOKEN", "")

# Bot owner user IDs (Set of ints)
bot_owners = set()

# Calendar channel ID (summary message and reminders are posted here)
calendar_channel = int(os.environ.get("CHANNEL_ID", "0") or 0)

# Master log channel ID (Leave as 0 for no logs)
master_log_channel = 0

# Log level
master_log_level = 30
console_log_level = 20

# Display language ("eng" or "por")
language = "eng"

# Timezone used to decide what "today" is
timezone = "America/Sao_Paulo"

# Embed colours
embed_color_normal = 0xa0e0f0
embed_color_warning = 0xe3ed1c
embed_color_success = 0x2ded43
embed_color_severe = 0xff2b4b
embed_color_important = 0x2d70ed

# File paths
file_events_db = "./resources/calendar/events.json"

# Timers
reminder_interval_hours = 6.0

# Number of recent channel messages searched for the summary message
summary_lookback_limit = 10

# Reject an event with the same date and name as an existing one
reject_duplicate_events = False

# Optional overrides
config_override_path = os.environ.get("ALMANAC_CONFIG", "./config.yml")
if os.path.exists(config_override_path):
    with open(config_override_path, "r", encoding="utf-8") as _file:
        _overrides = yaml.safe_load(_file) or {}

    for _key, _value in _overrides.items():
        if _key in globals() and not _key.startswith("_"):
            globals()[_key] = _value
