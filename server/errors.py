"""피드백 서비스 예외 — HTTP 상태 코드와 공개 메시지를 함께 가진다."""

from __future__ import annotations


class FeedbackError(Exception):
    """모든 서비스 예외의 베이스."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FeedbackError):
    """입력이 비었거나 형식/범위가 잘못됨 → 400."""

    status_code = 400


class NotFoundError(FeedbackError):
    """존재하지 않는 ID 참조 → 404."""

    status_code = 404


class StoreError(FeedbackError):
    """저장소 실패 (연결, 잠금 타임아웃, 제약 위반) → 500."""

    status_code = 500
