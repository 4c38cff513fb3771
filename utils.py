"""공통 유틸리티 — KST 시간, 저장소 타임스탬프 변환, 평균 평점 포맷."""

from __future__ import annotations

from datetime import datetime, timezone, timedelta
from decimal import ROUND_HALF_UP, Decimal

KST = timezone(timedelta(hours=9))

_TWO_PLACES = Decimal("0.01")


def kst_now() -> datetime:
    """현재 KST 시각을 반환한다."""
    return datetime.now(KST)


def parse_store_timestamp(value: str | datetime) -> datetime:
    """SQLite 가 기록한 UTC 텍스트(YYYY-MM-DD HH:MM:SS[.fff])를 aware datetime 으로 변환한다."""
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_average(value: float | None) -> str:
    """평균 평점을 소수 둘째 자리 문자열로 만든다. 값이 없으면 "0.00".

    반올림은 half-up (4.125 → "4.13").
    """
    if value is None:
        return "0.00"
    return str(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
