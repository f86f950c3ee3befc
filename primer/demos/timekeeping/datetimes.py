"""Dates and times with the datetime module."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo

BIRTH_DATE = datetime(1990, 6, 15)


def try_parse_date(text: str, fmt: str) -> Optional[datetime]:
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


def describe_comparison(a: datetime, b: datetime) -> str:
    if a < b:
        return "earlier than"
    if a > b:
        return "later than"
    return "the same as"


@register_demo("datetimes", "Dates and Times", DemoCategory.TIMEKEEPING)
def run() -> None:
    """Creating, shifting, comparing, formatting and parsing datetimes."""
    now = datetime.now()
    print(f"Now: {now}")
    print(f"Today: {now.date()}")

    print(f"\nYear: {now.year}, Month: {now.month}, Day: {now.day}")
    print(f"Hour: {now.hour}, Minute: {now.minute}, Second: {now.second}")
    print(f"Day of week: {now.strftime('%A')}")
    print(f"Day of year: {now.timetuple().tm_yday}")

    tomorrow = now + timedelta(days=1)
    last_week = now - timedelta(weeks=1)
    in_90_minutes = now + timedelta(minutes=90)
    print(f"\nTomorrow: {tomorrow:%Y-%m-%d}")
    print(f"Last week: {last_week:%Y-%m-%d}")
    print(f"In 90 minutes: {in_90_minutes:%H:%M}")

    age = now - BIRTH_DATE
    print(f"\nDays since {BIRTH_DATE:%Y-%m-%d}: {age.days}")
    print(f"Approximate years: {age.days // 365}")

    print(f"\n{BIRTH_DATE:%Y-%m-%d} is {describe_comparison(BIRTH_DATE, now)} now")
    print(f"Equal to itself: {BIRTH_DATE == datetime(1990, 6, 15)}")

    print(f"\nFormatted (dd/mm/yyyy): {now:%d/%m/%Y}")
    print(f"Formatted (long): {now:%A, %d %B %Y}")
    print(f"Formatted (time): {now:%I:%M %p}")
    print(f"ISO format: {now.isoformat(timespec='seconds')}")

    parsed = datetime.strptime("31/12/2025", "%d/%m/%Y")
    print(f"\nParsed: {parsed:%Y-%m-%d}")
    for text in ("2025-02-28", "2025-02-30"):
        result = try_parse_date(text, "%Y-%m-%d")
        if result is None:
            print(f"'{text}' is not a valid date")
        else:
            print(f"'{text}' parsed as {result:%d %b %Y}")

    utc_now = datetime.now(timezone.utc)
    print(f"\nUTC now: {utc_now.isoformat(timespec='seconds')}")
    print(f"UTC offset: {utc_now.utcoffset()}")

    stamp = int(utc_now.timestamp())
    restored = datetime.fromtimestamp(stamp, tz=timezone.utc)
    print(f"Unix timestamp: {stamp}")
    print(f"Round trip matches: {restored == utc_now.replace(microsecond=0)}")

    print(f"\nMin: {datetime.min}")
    print(f"Max: {datetime.max}")
