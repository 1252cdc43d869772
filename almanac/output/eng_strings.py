# pylint: skip-file

"""
English Strings.

All strings displayed to discord users will be taken from this file; all
logger messages are hardcoded and shouldn't be in here.

Pylint skips this file since this is more like a config file than actual
code.
"""

"""'''''''''''
Command Errors
'''''''''''"""

# General Headers
command_error_header = "**Error:** "
command_error_logger_header = "Command error {} triggered by command: {}"
command_error_failed_to_send = "Failed to send user error message to channel {}: {}"

# Command invocation exceptions
command_error_user_input_error = "User input error."
command_error_conversion_error = "Failed to convert argument."
command_error_bad_argument = "Invalid argument."
command_error_missing_required_argument = "Missing required argument."
command_error_unexpected_quote_error = "Encountered unexpected quote mark inside non-quoted string."
command_error_invalid_end_of_quoted_string_error = "Invalid end of quoted string."
command_error_expected_closing_quote_error = "Did not find closing quote character."
command_error_invoke_error = "❌ An error occurred while running the command."
command_error_too_many_arguments = "Too many arguments."
command_error_not_owner = "Command can only be used by the bot owner."


"""'''''''''''''
Calendar Months
'''''''''''''"""

month_1 = "January"
month_2 = "February"
month_3 = "March"
month_4 = "April"
month_5 = "May"
month_6 = "June"
month_7 = "July"
month_8 = "August"
month_9 = "September"
month_10 = "October"
month_11 = "November"
month_12 = "December"


"""''''''''''
Calendar Cog
''''''''''"""

calendar_help_title = "🧭 CALENDAR BOT COMMANDS"
calendar_help_desc = (
    "📅 `%PREFIX%addevent <YYYY-MM-DD> \"<name>\" [\"location\"] [time]` — Add a new event (quote names and locations with spaces)\n"
    "🗓️ `%PREFIX%listevents` — Show every registered event\n"
    "🗑️ `%PREFIX%removeevent <YYYY-MM-DD>` — Remove the events on a date\n"
    "🕐 The bot reminds the channel automatically on the day of an event!"
)

calendar_summary_header = "**📅 {} {}**"
calendar_summary_empty = "_No events registered this month._"
calendar_listing_header = "**🗓️ Registered events:**"
calendar_listing_empty = "📭 No events registered."
calendar_reminder = "📣 **Reminder:** **{}** is happening today!"

calendar_add_success = "✅ Event added: **{}** ({})"
calendar_remove_success = "🗑️ Removed {} event(s) on {}."

calendar_invalid_date_title = "⚠️ Invalid date"
calendar_invalid_date_desc = "Use the date format: YYYY-MM-DD (got `{}`)."
calendar_empty_name_title = "⚠️ Missing name"
calendar_empty_name_desc = "The event needs a name."
calendar_duplicate_event_title = "⚠️ Duplicate event"
calendar_duplicate_event_desc = "**{}** is already registered on {}."
calendar_not_found_title = "⚠️ Not found"
calendar_not_found_desc = "No events found on {}."

bot_shutdown = "I'll be back."
