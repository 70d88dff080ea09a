# bluetraffic/traffic/minutes.py
from datetime import datetime

MINUTES_PER_DAY = 1440
ANY_TIME = -1


def minutes_since_midnight(dt: datetime) -> int:
    # date and seconds are dropped on purpose
    return dt.hour * 60 + dt.minute


def format_time(minute: int) -> str:
    """
    Slider label, e.g. 0 -> "12:00 AM", 810 -> "1:30 PM".
    ANY_TIME has no clock label and returns "".
    """
    if minute == ANY_TIME:
        return ""

    minute = int(minute) % MINUTES_PER_DAY
    hour, mm = divmod(minute, 60)
    suffix = "AM" if hour < 12 else "PM"
    h12 = hour % 12 or 12
    return f"{h12}:{mm:02d} {suffix}"
