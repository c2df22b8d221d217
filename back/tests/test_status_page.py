from datetime import datetime, timedelta, timezone

import pytest

from app.schemas.ping import PingEvent
from app.services.status_page import StatusPageRenderer, humanize_delta

NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=0), "now"),
        (timedelta(seconds=9), "now"),
        (timedelta(seconds=10), "now"),
        (timedelta(seconds=11), "11 seconds ago"),
        (timedelta(seconds=45), "45 seconds ago"),
        (timedelta(seconds=46), "a minute ago"),
        (timedelta(seconds=91), "2 minutes ago"),
        (timedelta(minutes=45), "45 minutes ago"),
        (timedelta(minutes=45, seconds=1), "an hour ago"),
        (timedelta(minutes=150), "2 hours ago"),
        (timedelta(seconds=30), "30 seconds ago"),
        (timedelta(seconds=60), "a minute ago"),
        (timedelta(minutes=3), "3 minutes ago"),
        (timedelta(hours=1), "an hour ago"),
        (timedelta(hours=5), "5 hours ago"),
        (timedelta(days=1), "a day ago"),
        (timedelta(days=3), "3 days ago"),
        (timedelta(days=8), "a week ago"),
        (timedelta(days=11), "2 weeks ago"),
        (timedelta(days=21), "3 weeks ago"),
        (timedelta(days=35), "a month ago"),
        (timedelta(days=90), "3 months ago"),
        (timedelta(days=345), "11 months ago"),
        (timedelta(days=400), "a year ago"),
        (timedelta(days=365 * 3), "3 years ago"),
    ],
)
def test_humanize_past(delta, expected):
    assert humanize_delta(NOW - delta, NOW) == expected


def test_humanize_future():
    assert humanize_delta(NOW + timedelta(minutes=3), NOW) == "in 3 minutes"


def test_render_empty_page():
    page = StatusPageRenderer(capacity=8).render([], now=NOW)

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>presence canary</title>" in page
    assert "<h1>presence canary</h1>" in page
    assert "known pings (up to 8):" in page
    assert "<ol>" in page and "</ol>" in page
    assert "<li>" not in page


def test_render_entries_in_given_order():
    pings = [
        PingEvent(reason="newer", timestamp=NOW - timedelta(minutes=3)),
        PingEvent(reason="older", timestamp=NOW - timedelta(hours=2)),
    ]
    page = StatusPageRenderer(capacity=8).render(pings, now=NOW)

    assert page.index("newer") < page.index("older")
    assert page.count("<li>") == 2
    assert "3 minutes ago" in page
    assert "2 hours ago" in page


def test_render_uses_utc_datetime_attribute():
    local = timezone(timedelta(hours=3))
    ping = PingEvent(reason="tz", timestamp=datetime(2026, 1, 1, 15, 0, 0, tzinfo=local))
    entry = StatusPageRenderer(capacity=8).render_entry(ping, NOW)

    assert '<time datetime="2026-01-01T12:00:00+00:00">now</time>' in entry


def test_reason_is_html_escaped():
    ping = PingEvent(reason="<script>alert('x')</script>", timestamp=NOW)
    page = StatusPageRenderer(capacity=8).render([ping], now=NOW)

    assert "<script>" not in page
    assert "&lt;script&gt;" in page


def test_configured_capacity_in_caption():
    page = StatusPageRenderer(capacity=3).render([], now=NOW)
    assert "known pings (up to 3):" in page
