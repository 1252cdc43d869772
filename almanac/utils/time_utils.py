"""Time utils module."""

from datetime import datetime

import pytz


def utc_time_now() -> datetime:
    """
    Get current UTC timezone aware time.

    :return: Timezone aware datetime
    """
    return datetime.now(pytz.utc)
