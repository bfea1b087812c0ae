"""Wall clock used for payment dates and report periods."""

from collections.abc import Callable
from datetime import datetime, tzinfo

Clock = Callable[[], datetime]


def system_clock(tz: tzinfo) -> Clock:
    """Clock returning the current time in ``tz``."""

    def now() -> datetime:
        return datetime.now(tz)

    return now
