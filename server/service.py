"""피드백 레코드 서비스 — 입력 검증, 저장, 조회, 삭제, 대시보드 집계.

검증은 저장소 호출 전에 끝낸다. 서비스는 주입받은 저장소 외에 상태를 갖지 않는다.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from config import REQUIRED_FIELD_MESSAGES, RATING_MAX, RATING_MIN
from logger import get_logger
from server.errors import NotFoundError, ValidationError
from server.schemas.api_contracts import DashboardStats, FeedbackCreate, FeedbackRecord
from server.store import FeedbackStore
from utils import format_average

logger = get_logger("feedback_service")

_FIELD_ORDER = list(REQUIRED_FIELD_MESSAGES)
_RANGE_ERROR_TYPES = {"greater_than_equal", "less_than_equal"}


def _is_blank(error: dict) -> bool:
    if error["type"] in ("missing", "string_too_short"):
        return True
    value = error.get("input")
    return value is None or (isinstance(value, str) and not value.strip())


def _error_message(error: dict) -> str:
    loc = error["loc"]
    if not loc:
        return "Request body must be a JSON object"
    field = str(loc[0])
    if error["type"] == "extra_forbidden":
        return f"Unexpected field: {field}"
    if field == "rating":
        if error["type"] in _RANGE_ERROR_TYPES:
            return f"Rating must be between {RATING_MIN} and {RATING_MAX}"
        return "Rating must be an integer"
    if error["type"] == "string_type":
        return f"{field} must be a string"
    return error["msg"]


def first_validation_message(errors: list[dict]) -> str:
    """pydantic 오류 목록에서 사용자에게 보여줄 메시지 하나를 고른다.

    본문 형태 오류 → 필수 필드 누락(studentName, courseCode, comments, rating 순)
    → 나머지 오류(필드 순) 순서로 우선한다.
    """
    for error in errors:
        if not error["loc"]:
            return _error_message(error)

    blanks = [
        e for e in errors
        if e["loc"][0] in REQUIRED_FIELD_MESSAGES and _is_blank(e)
    ]
    if blanks:
        first = min(blanks, key=lambda e: _FIELD_ORDER.index(e["loc"][0]))
        return REQUIRED_FIELD_MESSAGES[first["loc"][0]]

    def _order(e: dict) -> int:
        name = e["loc"][0]
        return _FIELD_ORDER.index(name) if name in _FIELD_ORDER else len(_FIELD_ORDER)

    return _error_message(min(errors, key=_order))


class FeedbackService:
    """피드백 레코드의 검증/저장/집계를 담당한다."""

    def __init__(self, store: FeedbackStore) -> None:
        self.store = store

    def validate(self, candidate: Any) -> FeedbackCreate:
        """요청 본문을 FeedbackCreate 로 검증한다. 실패하면 ValidationError."""
        try:
            return FeedbackCreate.model_validate(candidate)
        except PydanticValidationError as e:
            message = first_validation_message(e.errors())
            logger.warning(f"Feedback rejected: {message}", extra={"operation": "submit"})
            raise ValidationError(message) from e

    def submit(self, candidate: Any) -> FeedbackRecord:
        """피드백을 검증 후 저장하고 저장된 레코드를 반환한다."""
        data = self.validate(candidate)
        record = self.store.insert(
            student_name=data.student_name,
            course_code=data.course_code,
            comments=data.comments,
            rating=data.rating,
        )
        logger.info(
            f"Feedback {record.id} created for {record.course_code}",
            extra={"operation": "submit", "feedback_id": record.id, "course_code": record.course_code},
        )
        return record

    def list(self) -> list[FeedbackRecord]:
        return self.store.list_all()

    def delete(self, feedback_id: int) -> FeedbackRecord:
        """id 에 해당하는 피드백을 지우고 지운 레코드를 반환한다."""
        record = self.store.delete(feedback_id)
        if record is None:
            raise NotFoundError("Feedback not found")
        logger.info(
            f"Feedback {feedback_id} deleted",
            extra={"operation": "delete", "feedback_id": feedback_id},
        )
        return record

    def dashboard_stats(self) -> DashboardStats:
        """전체 레코드로 건수, 평균 평점, 과목별 건수를 매번 새로 계산한다."""
        return DashboardStats(
            total_count=self.store.count(),
            average_rating=format_average(self.store.average_rating()),
            count_by_course=self.store.count_by_course(),
        )
