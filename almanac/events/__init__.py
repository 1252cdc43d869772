"""
Event Calendar Module.

The calendar channel is how the bot shows registered events to users:
a single summary message covering the current month is kept up to date
there, and same-day reminders are posted to it. Events are stored in a
JSON file and managed through prefix commands.
"""
