#!/usr/bin/env python
"""Core utilities - 日期解析与日期序列"""

from datetime import date, datetime, timezone

from modelradar.core import as_utc, days_back, parse_iso, today


class TestParseIso:
    """测试 ISO-8601 解析"""

    def test_zulu_suffix(self):
        dt = parse_iso("2024-04-17T08:30:00Z")
        assert dt == datetime(2024, 4, 17, 8, 30, tzinfo=timezone.utc)

    def test_fractional_seconds(self):
        dt = parse_iso("2022-03-02T23:29:04.000Z")
        assert dt == datetime(2022, 3, 2, 23, 29, 4, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        assert parse_iso("2024-01-01T00:00:00").tzinfo == timezone.utc

    def test_invalid_returns_default(self):
        fallback = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert parse_iso("yesterday", default=fallback) is fallback
        assert parse_iso(None) is None
        assert parse_iso("") is None

    def test_as_utc(self):
        naive = datetime(2024, 1, 1, 12, 0)
        assert as_utc(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        aware = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert as_utc(aware) is aware


class TestDaysBack:
    """测试日期序列"""

    def test_inclusive_range(self):
        days = days_back(2, end=date(2024, 3, 1))
        assert days == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]

    def test_defaults_to_today(self):
        days = days_back(30)
        assert len(days) == 31
        assert days[-1].isoformat() == today()
