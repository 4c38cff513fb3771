"""Pydantic 모델 — 피드백 입력 구조 + API 응답 스키마.

와이어(JSON) 이름은 camelCase, 파이썬 속성은 snake_case 이다.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import RATING_MAX, RATING_MIN


class WireModel(BaseModel):
    """camelCase 별칭으로 직렬화되는 응답 모델 공통 베이스."""

    model_config = ConfigDict(populate_by_name=True)


# ──────────────────────────── 입력 ────────────────────────────


class FeedbackCreate(BaseModel):
    """POST /api/feedback 요청 본문. 저장 전에 반드시 이 구조로 검증한다."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    student_name: str = Field(alias="studentName", min_length=1, description="학생 이름")
    course_code: str = Field(alias="courseCode", min_length=1, description="과목 코드")
    comments: str = Field(min_length=1, description="의견")
    rating: int = Field(ge=RATING_MIN, le=RATING_MAX, description=f"평점 ({RATING_MIN}~{RATING_MAX})")

    @field_validator("rating", mode="before")
    @classmethod
    def reject_bool_rating(cls, value):
        # bool 은 int 의 하위 타입이라 그대로 두면 True → 1 로 통과한다
        if isinstance(value, bool):
            raise ValueError("Rating must be an integer")
        return value


# ──────────────────────────── 레코드 ────────────────────────────


class FeedbackRecord(WireModel):
    id: int = Field(description="저장소가 부여한 ID")
    student_name: str = Field(alias="studentName")
    course_code: str = Field(alias="courseCode")
    comments: str
    rating: int = Field(ge=RATING_MIN, le=RATING_MAX)
    created_at: datetime = Field(alias="createdAt", description="생성 시각 (UTC)")


class DeleteResponse(WireModel):
    message: str = Field(default="Feedback deleted successfully")
    feedback: FeedbackRecord


# ──────────────────────────── 대시보드 ────────────────────────────


class CourseCount(WireModel):
    course_code: str = Field(alias="courseCode")
    count: int


class DashboardStats(WireModel):
    total_count: int = Field(alias="totalFeedback", description="전체 피드백 수")
    average_rating: str = Field(alias="averageRating", description="평균 평점 (소수 둘째 자리)")
    count_by_course: list[CourseCount] = Field(alias="feedbackByCourse", default_factory=list)


# ──────────────────────────── 공통 ────────────────────────────


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: Literal["ok", "error"]
    database: bool = Field(default=False, description="저장소 응답 여부")
    uptime_sec: float = Field(default=0.0)
