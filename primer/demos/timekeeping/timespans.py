"""
Time spans

timedelta is the duration type. It stores days, seconds and microseconds,
so the finest unit is 1 microsecond (10 ticks of 100 ns).

The constant ("c") text format is  [-][d.]hh:mm:ss[.fffffff]
"""

import re
from datetime import timedelta
from typing import Optional

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo

TICKS_PER_SECOND = 10_000_000
TICKS_PER_MICROSECOND = 10

_ONE_MICROSECOND = timedelta(microseconds=1)
_MICROSECONDS_PER_DAY = 86_400 * 1_000_000

_TIMESPAN_PATTERN = re.compile(
    r"^(?P<sign>-)?"
    r"(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{1,2}):(?P<seconds>\d{1,2})"
    r"(?:\.(?P<fraction>\d{1,7}))?$"
)


def from_ticks(ticks: int) -> timedelta:
    return timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def to_ticks(span: timedelta) -> int:
    return (span // _ONE_MICROSECOND) * TICKS_PER_MICROSECOND


def compare(a: timedelta, b: timedelta) -> int:
    """Return -1, 0 or 1 as a is shorter than, equal to or longer than b."""
    return (a > b) - (a < b)


def parse_timespan(text: str) -> timedelta:
    """
    Parse ``[-][d.]hh:mm:ss[.fffffff]``.

    Raises:
        ValueError: if the text does not match or a component is out of range
    """
    match = _TIMESPAN_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Invalid time span: {text!r}")

    hours = int(match["hours"])
    minutes = int(match["minutes"])
    seconds = int(match["seconds"])
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"Time span component out of range: {text!r}")

    ticks = int((match["fraction"] or "").ljust(7, "0"))
    span = timedelta(
        days=int(match["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    ) + from_ticks(ticks)
    return -span if match["sign"] else span


def try_parse_timespan(text: str) -> Optional[timedelta]:
    try:
        return parse_timespan(text)
    except ValueError:
        return None


def format_timespan(span: timedelta) -> str:
    """Render a timedelta in the constant format."""
    total = span // _ONE_MICROSECOND
    sign = "-" if total < 0 else ""
    days, remainder = divmod(abs(total), _MICROSECONDS_PER_DAY)
    whole_seconds, micros = divmod(remainder, 1_000_000)
    hours, rest = divmod(whole_seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    text = f"{sign}{days}." if days else sign
    text += f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if micros:
        text += f".{micros * TICKS_PER_MICROSECOND:07d}"
    return text


@register_demo("timespans", "Time Spans", DemoCategory.TIMEKEEPING)
def run() -> None:
    """Construct, combine, compare, parse and format durations."""
    ts1 = timedelta(hours=1, minutes=30, seconds=45)
    ts2 = timedelta(hours=2, minutes=15, seconds=30, milliseconds=500)
    ts3 = from_ticks(TICKS_PER_SECOND * 90)
    ts4 = timedelta(minutes=90)

    print(f"ts1: {format_timespan(ts1)}")
    print(f"ts2: {format_timespan(ts2)}")
    print(f"ts3 (from ticks): {format_timespan(ts3)}")
    print(f"ts4 (from minutes): {format_timespan(ts4)}")

    print(f"\nSum: {format_timespan(ts1 + ts2)}")
    print(f"Difference: {format_timespan(ts2 - ts1)}")
    print(f"Multiplied: {format_timespan(ts1 * 2)}")
    print(f"Divided: {format_timespan(ts2 / 2)}")
    print(f"Ratio ts2 / ts1: {ts2 / ts1:.4f}")

    print(f"\nTotal hours: {ts2.total_seconds() / 3600}")
    print(f"Total minutes: {ts2.total_seconds() / 60}")
    print(f"Total seconds: {ts2.total_seconds()}")
    print(f"Total ticks: {to_ticks(ts2)}")

    hours, rest = divmod(ts2.seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    print(f"\nComponents of ts2: days={ts2.days} hours={hours} minutes={minutes} "
          f"seconds={seconds} milliseconds={ts2.microseconds // 1000}")

    print(f"\nNegated ts1: {format_timespan(-ts1)}")
    print(f"Absolute: {format_timespan(abs(-ts1))}")

    print(f"\nCompare ts1 with ts2: {compare(ts1, ts2)}")
    print(f"ts3 == ts4: {ts3 == ts4}")

    parsed = parse_timespan("02:45:30")
    print(f"\nParsed '02:45:30': {format_timespan(parsed)}")
    for text in ("1.12:00:00.25", "not a span"):
        result = try_parse_timespan(text)
        if result is None:
            print(f"Could not parse '{text}'")
        else:
            print(f"Parsed '{text}': {format_timespan(result)}")

    print(f"\nZero: {format_timespan(timedelta(0))}")
    print(f"Max: {format_timespan(timedelta.max)}")
    print(f"Min: {format_timespan(timedelta.min)}")
