"""Date/time helpers."""

from datetime import datetime


def end_of_day(moment: datetime) -> datetime:
    """Last representable instant of moment's calendar day, in moment's timezone."""
    return moment.replace(hour=23, minute=59, second=59, microsecond=999999)
