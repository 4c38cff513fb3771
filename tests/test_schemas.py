"""Pydantic 모델 테스트 — camelCase 와이어 이름, 입력 구조 제약."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from server.schemas.api_contracts import (
    CourseCount,
    DashboardStats,
    DeleteResponse,
    FeedbackCreate,
    FeedbackRecord,
    HealthResponse,
)

NOW = datetime(2026, 2, 18, 5, 0, 0, tzinfo=timezone.utc)


def _record(**overrides) -> FeedbackRecord:
    fields = dict(
        id=1,
        student_name="Alice",
        course_code="CS101",
        comments="Great course",
        rating=5,
        created_at=NOW,
    )
    fields.update(overrides)
    return FeedbackRecord(**fields)


class TestFeedbackCreate:
    def test_accepts_camel_case_body(self):
        data = FeedbackCreate.model_validate({
            "studentName": "Alice",
            "courseCode": "CS101",
            "comments": "Great course",
            "rating": 5,
        })
        assert data.student_name == "Alice"
        assert data.course_code == "CS101"
        assert data.rating == 5

    def test_strips_whitespace(self):
        data = FeedbackCreate.model_validate({
            "studentName": "  Alice ",
            "courseCode": " CS101",
            "comments": "Great course\n",
            "rating": 4,
        })
        assert data.student_name == "Alice"
        assert data.course_code == "CS101"
        assert data.comments == "Great course"

    def test_rejects_snake_case_keys(self):
        with pytest.raises(ValidationError):
            FeedbackCreate.model_validate({
                "student_name": "Alice",
                "course_code": "CS101",
                "comments": "Great course",
                "rating": 5,
            })

    def test_rejects_bool_rating(self):
        with pytest.raises(ValidationError):
            FeedbackCreate.model_validate({
                "studentName": "Alice",
                "courseCode": "CS101",
                "comments": "Great course",
                "rating": True,
            })

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rejects_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            FeedbackCreate.model_validate({
                "studentName": "Alice",
                "courseCode": "CS101",
                "comments": "Great course",
                "rating": rating,
            })


class TestWireNames:
    def test_record_dumps_camel_case(self):
        data = _record().model_dump(by_alias=True)
        assert set(data) == {"id", "studentName", "courseCode", "comments", "rating", "createdAt"}

    def test_delete_response_default_message(self):
        resp = DeleteResponse(feedback=_record())
        data = resp.model_dump(by_alias=True)
        assert data["message"] == "Feedback deleted successfully"
        assert data["feedback"]["studentName"] == "Alice"

    def test_dashboard_stats_aliases(self):
        stats = DashboardStats(
            total_count=2,
            average_rating="4.00",
            count_by_course=[CourseCount(course_code="CS101", count=2)],
        )
        assert stats.model_dump(by_alias=True) == {
            "totalFeedback": 2,
            "averageRating": "4.00",
            "feedbackByCourse": [{"courseCode": "CS101", "count": 2}],
        }

    def test_health_defaults(self):
        health = HealthResponse(status="ok")
        assert health.database is False
        assert health.uptime_sec == 0.0
