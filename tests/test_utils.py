"""유틸리티 테스트 — KST 시간, 저장소 타임스탬프 변환, 평균 평점 포맷."""

from datetime import datetime, timedelta, timezone

import pytest

from utils import KST, format_average, kst_now, parse_store_timestamp


class TestKstNow:
    def test_offset_is_plus_nine(self):
        now = kst_now()
        assert now.utcoffset() == timedelta(hours=9)
        assert now.tzinfo == KST


class TestParseStoreTimestamp:
    def test_sqlite_text_with_millis(self):
        parsed = parse_store_timestamp("2026-02-18 05:00:00.123")
        assert parsed == datetime(2026, 2, 18, 5, 0, 0, 123000, tzinfo=timezone.utc)

    def test_sqlite_text_without_fraction(self):
        parsed = parse_store_timestamp("2026-02-18 05:00:00")
        assert parsed.tzinfo == timezone.utc
        assert parsed.hour == 5

    def test_aware_datetime_kept(self):
        original = datetime(2026, 2, 18, 14, 0, tzinfo=KST)
        assert parse_store_timestamp(original) is original


class TestFormatAverage:
    def test_none_is_zero_sentinel(self):
        assert format_average(None) == "0.00"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (4.0, "4.00"),
            (5, "5.00"),
            (3.3333333333333335, "3.33"),
            (3.6666666666666665, "3.67"),
            (4.125, "4.13"),
            (1.005, "1.01"),
        ],
    )
    def test_two_decimals_half_up(self, value, expected):
        assert format_average(value) == expected
