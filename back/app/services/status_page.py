# app/services/status_page.py
from __future__ import annotations

import html
from datetime import datetime, timezone
from typing import Iterable, Optional

from app.schemas.ping import PingEvent

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

PAGE_TEMPLATE = """<!DOCTYPE html>
<meta charset="utf-8">
<title>presence canary</title>
<style>
    body {
        max-width: 960px;
        font-family: sans-serif;
        font-size: 1.25em;
        margin: 0 auto;
    }
</style>

<h1>presence canary</h1>
<p>known pings (up to __CAPACITY__):</p>
<ol>
    __ENTRIES__
</ol>
"""


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}s"


def _period(seconds: int) -> str:
    # границы строгие, количество округляется вниз, но не меньше 2
    if seconds > 547 * DAY:
        return _plural(max(2, seconds // YEAR), "year")
    if seconds > 345 * DAY:
        return "a year"
    if seconds > 45 * DAY:
        return _plural(max(2, seconds // MONTH), "month")
    if seconds > 29 * DAY:
        return "a month"
    if seconds > 10 * DAY + 12 * HOUR:
        return _plural(max(2, seconds // WEEK), "week")
    if seconds > 6 * DAY + 12 * HOUR:
        return "a week"
    if seconds > 36 * HOUR:
        return _plural(max(2, seconds // DAY), "day")
    if seconds > 22 * HOUR:
        return "a day"
    if seconds > 90 * MINUTE:
        return _plural(max(2, seconds // HOUR), "hour")
    if seconds > 45 * MINUTE:
        return "an hour"
    if seconds > 90:
        return _plural(max(2, seconds // MINUTE), "minute")
    if seconds > 45:
        return "a minute"
    return _plural(seconds, "second")


def humanize_delta(then: datetime, now: datetime) -> str:
    """
    Относительное время: "now", "3 minutes ago", "in an hour".
    10 секунд и меньше в любую сторону считается "now".
    """
    delta = (now - then).total_seconds()
    seconds = int(abs(delta))
    if seconds <= 10:
        return "now"
    period = _period(seconds)
    return f"{period} ago" if delta > 0 else f"in {period}"


class StatusPageRenderer:
    def __init__(self, capacity: int):
        self.capacity = capacity

    def render_entry(self, ping: PingEvent, now: datetime) -> str:
        reason = html.escape(ping.reason)
        utc_time = ping.timestamp.astimezone(timezone.utc).isoformat()
        ago = humanize_delta(ping.timestamp, now)
        return f'<li>{reason} - <time datetime="{html.escape(utc_time)}">{ago}</time></li>'

    def render(self, pings: Iterable[PingEvent], now: Optional[datetime] = None) -> str:
        """Полная HTML-страница; пинги выводятся в переданном порядке."""
        now = now or datetime.now(timezone.utc)
        entries = "\n    ".join(self.render_entry(ping, now) for ping in pings)

        page = PAGE_TEMPLATE.replace("__CAPACITY__", str(self.capacity))
        return page.replace("__ENTRIES__", entries)
