"""A richer time value and helpers for formatting and shifting times.

Layouts use the reference time "2006-01-02 15:04:05"; templates use the
letters Y, y, M, D, H, I, S (see to_layout).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from utilbox import strconvert

__all__ = [
    "ONE_MIN_SEC",
    "ONE_HOUR_SEC",
    "ONE_DAY_SEC",
    "ONE_WEEK_SEC",
    "ONE_MIN",
    "ONE_HOUR",
    "ONE_DAY",
    "ONE_WEEK",
    "DEFAULT_LAYOUT",
    "TimeX",
    "now",
    "new",
    "local",
    "from_unix",
    "from_string",
    "local_by_name",
    "set_local_by_name",
    "now_unix",
    "format",
    "format_by",
    "date",
    "date_format",
    "format_by_tpl",
    "format_unix",
    "format_unix_by",
    "format_unix_by_tpl",
    "now_add_day",
    "now_add_hour",
    "now_add_minutes",
    "now_add_seconds",
    "add_day",
    "add_hour",
    "add_minutes",
    "add_seconds",
    "hour_start",
    "hour_end",
    "day_start",
    "day_end",
    "now_hour_start",
    "today_start",
    "today_end",
    "to_layout",
]

ONE_MIN_SEC = 60
ONE_HOUR_SEC = 3600
ONE_DAY_SEC = 86400
ONE_WEEK_SEC = 7 * 86400

ONE_MIN = timedelta(minutes=1)
ONE_HOUR = timedelta(hours=1)
ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(weeks=1)

DEFAULT_LAYOUT = "2006-01-02 15:04:05"

_LAST_MICRO = 999999

_local_zone: tzinfo | None = None

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _offset(t: datetime, colon: bool, z_for_utc: bool, hours_only: bool = False) -> str:
    off = t.utcoffset() or timedelta(0)
    total = int(off.total_seconds())
    if z_for_utc and total == 0:
        return "Z"
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    if hours_only:
        return f"{sign}{hours:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}" if colon else f"{sign}{hours:02d}{minutes:02d}"


def _hour12(t: datetime) -> int:
    return t.hour % 12 or 12


_TOKENS = (
    ("January", lambda t: _MONTHS[t.month - 1]),
    ("Jan", lambda t: _MONTHS[t.month - 1][:3]),
    ("Monday", lambda t: _WEEKDAYS[t.weekday()]),
    ("Mon", lambda t: _WEEKDAYS[t.weekday()][:3]),
    ("MST", lambda t: t.tzname() or _offset(t, False, False)),
    ("2006", lambda t: f"{t.year:04d}"),
    ("Z07:00", lambda t: _offset(t, True, True)),
    ("Z0700", lambda t: _offset(t, False, True)),
    ("-07:00", lambda t: _offset(t, True, False)),
    ("-0700", lambda t: _offset(t, False, False)),
    ("-07", lambda t: _offset(t, False, False, hours_only=True)),
    ("01", lambda t: f"{t.month:02d}"),
    ("02", lambda t: f"{t.day:02d}"),
    ("03", lambda t: f"{_hour12(t):02d}"),
    ("04", lambda t: f"{t.minute:02d}"),
    ("05", lambda t: f"{t.second:02d}"),
    ("06", lambda t: f"{t.year % 100:02d}"),
    ("15", lambda t: f"{t.hour:02d}"),
    ("PM", lambda t: "PM" if t.hour >= 12 else "AM"),
    ("pm", lambda t: "pm" if t.hour >= 12 else "am"),
    (".000000000", lambda t: f".{t.microsecond * 1000:09d}"),
    (".000000", lambda t: f".{t.microsecond:06d}"),
    (".000", lambda t: f".{t.microsecond // 1000:03d}"),
    ("1", lambda t: str(t.month)),
    ("2", lambda t: str(t.day)),
    ("3", lambda t: str(_hour12(t))),
    ("4", lambda t: str(t.minute)),
    ("5", lambda t: str(t.second)),
)


def _go_format(t: datetime, layout: str) -> str:
    if t.tzinfo is None:
        t = t.astimezone()
    parts: list[str] = []
    i = 0
    while i < len(layout):
        for token, render in _TOKENS:
            if layout.startswith(token, i):
                parts.append(render(t))
                i += len(token)
                break
        else:
            parts.append(layout[i])
            i += 1
    return "".join(parts)


def _now() -> datetime:
    if _local_zone is not None:
        return datetime.now(_local_zone)
    return datetime.now().astimezone()


def _from_timestamp(sec: int) -> datetime:
    if _local_zone is not None:
        return datetime.fromtimestamp(sec, _local_zone)
    return datetime.fromtimestamp(sec).astimezone()


def _add(t: datetime, delta: timedelta) -> datetime:
    """Add an absolute duration, independent of wall-clock changes."""
    if t.tzinfo is None:
        return t + delta
    return (t.astimezone(timezone.utc) + delta).astimezone(t.tzinfo)


def _as_datetime(u) -> datetime:
    return u.time if isinstance(u, TimeX) else u


@dataclass
class TimeX:
    """A datetime with a default layout and many convenience methods."""

    time: datetime
    layout: str = DEFAULT_LAYOUT

    def __str__(self) -> str:
        return str(self.time)

    def format(self, layout: str) -> str:
        """Format by a reference-time layout; without own layout the default is used."""
        if self.layout == "":
            layout = DEFAULT_LAYOUT
        return _go_format(self.time, layout)

    def datetime(self) -> str:
        """Format by this value's layout."""
        return self.format(self.layout)

    def tpl_format(self, template: str) -> str:
        return self.date_format(template)

    def date_format(self, template: str) -> str:
        """Format by a date template such as "Y-M-D H:I:S"."""
        return self.format(to_layout(template))

    def unix(self) -> int:
        """Seconds since the Unix epoch."""
        return int(self.time.timestamp() // 1)

    def yesterday(self) -> "TimeX":
        return self.add_seconds(-ONE_DAY_SEC)

    def day_ago(self, day: int) -> "TimeX":
        return self.add_seconds(-day * ONE_DAY_SEC)

    def add_day(self, day: int) -> "TimeX":
        return self.add_seconds(day * ONE_DAY_SEC)

    def tomorrow(self) -> "TimeX":
        return self.add_seconds(ONE_DAY_SEC)

    def day_after(self, day: int) -> "TimeX":
        return self.add_day(day)

    def add_hour(self, hours: int) -> "TimeX":
        return self.add_seconds(hours * ONE_HOUR_SEC)

    def add_minutes(self, minutes: int) -> "TimeX":
        return self.add_seconds(minutes * ONE_MIN_SEC)

    def add_seconds(self, seconds: int) -> "TimeX":
        return TimeX(_add(self.time, timedelta(seconds=seconds)), DEFAULT_LAYOUT)

    def sub_unix(self, u) -> int:
        """Whole seconds of ``self - u``."""
        return int((self.time - _as_datetime(u)).total_seconds())

    def diff(self, u) -> timedelta:
        return self.time - _as_datetime(u)

    def diff_sec(self, u) -> int:
        return int((self.time - _as_datetime(u)).total_seconds())

    def hour_start(self) -> "TimeX":
        return new(hour_start(self.time))

    def hour_end(self) -> "TimeX":
        return new(hour_end(self.time))

    def day_start(self) -> "TimeX":
        return new(day_start(self.time))

    def day_end(self) -> "TimeX":
        return new(day_end(self.time))

    def change_hms(self, hour: int, minute: int, sec: int) -> "TimeX":
        """Same date with the given hour, minute and second (at the end of that second)."""
        return new(self.time.replace(hour=hour, minute=minute, second=sec, microsecond=_LAST_MICRO))

    def is_before(self, u) -> bool:
        return self.time < _as_datetime(u)

    def is_after(self, u) -> bool:
        return self.time > _as_datetime(u)


def now() -> TimeX:
    return TimeX(_now(), DEFAULT_LAYOUT)


def new(t: datetime) -> TimeX:
    return TimeX(t, DEFAULT_LAYOUT)


def local() -> TimeX:
    return new(_now())


def from_unix(sec: int) -> TimeX:
    return new(_from_timestamp(sec))


def from_string(s: str, *args: str) -> TimeX:
    """Parse a date string; see strconvert.to_time."""
    return new(strconvert.to_time(s, *args))


def local_by_name(tz_name: str) -> TimeX:
    """Current time in the named zone; raises if the zone is unknown."""
    return new(datetime.now(ZoneInfo(tz_name)))


def set_local_by_name(tz_name: str) -> None:
    """Use the named zone as local zone for this module; raises if unknown."""
    global _local_zone
    _local_zone = ZoneInfo(tz_name)


def now_unix() -> int:
    return int(_now().timestamp() // 1)


def format(t: datetime) -> str:
    return _go_format(t, DEFAULT_LAYOUT)


def format_by(t: datetime, layout: str) -> str:
    return _go_format(t, layout)


def date(t: datetime, template: str) -> str:
    return format_by_tpl(t, template)


def date_format(t: datetime, template: str) -> str:
    return format_by_tpl(t, template)


def format_by_tpl(t: datetime, template: str) -> str:
    return _go_format(t, to_layout(template))


def format_unix(sec: int) -> str:
    return _go_format(_from_timestamp(sec), DEFAULT_LAYOUT)


def format_unix_by(sec: int, layout: str) -> str:
    return _go_format(_from_timestamp(sec), layout)


def format_unix_by_tpl(sec: int, template: str) -> str:
    return _go_format(_from_timestamp(sec), to_layout(template))


def now_add_day(day: int) -> datetime:
    return add_day(_now(), day)


def now_add_hour(hour: int) -> datetime:
    return add_hour(_now(), hour)


def now_add_minutes(minutes: int) -> datetime:
    return add_minutes(_now(), minutes)


def now_add_seconds(seconds: int) -> datetime:
    return add_seconds(_now(), seconds)


def add_day(t: datetime, day: int) -> datetime:
    """Add calendar days, keeping the wall-clock time."""
    return t + timedelta(days=day)


def add_hour(t: datetime, hour: int) -> datetime:
    return _add(t, timedelta(hours=hour))


def add_minutes(t: datetime, minutes: int) -> datetime:
    return _add(t, timedelta(minutes=minutes))


def add_seconds(t: datetime, seconds: int) -> datetime:
    return _add(t, timedelta(seconds=seconds))


def hour_start(t: datetime) -> datetime:
    return t.replace(minute=0, second=0, microsecond=0)


def hour_end(t: datetime) -> datetime:
    return t.replace(minute=59, second=59, microsecond=_LAST_MICRO)


def day_start(t: datetime) -> datetime:
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def day_end(t: datetime) -> datetime:
    return t.replace(hour=23, minute=59, second=59, microsecond=_LAST_MICRO)


def now_hour_start() -> datetime:
    return hour_start(_now())


def today_start() -> datetime:
    return day_start(_now())


def today_end() -> datetime:
    return day_end(_now())


_TEMPLATE_CHARS = {
    "Y": "2006",
    "y": "06",
    "M": "01",
    "m": "01",
    "D": "02",
    "d": "02",
    "H": "15",
    "h": "15",
    "I": "04",
    "i": "04",
    "S": "05",
    "s": "05",
}


def to_layout(template: str) -> str:
    """Turn a date template into a reference-time layout.

    Y: 2006, y: 06, M/m: 01, D/d: 02, H/h: 15, I/i: 04, S/s: 05.
    """
    if template == "":
        return DEFAULT_LAYOUT
    return "".join(_TEMPLATE_CHARS.get(c, c) for c in template)