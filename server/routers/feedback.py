"""피드백 API — GET/POST /api/feedback, DELETE /api/feedback/{id}."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from logger import get_logger
from server.errors import StoreError
from server.schemas.api_contracts import DeleteResponse, ErrorResponse, FeedbackRecord
from server.service import FeedbackService

logger = get_logger("feedback_api")

router = APIRouter(tags=["feedback"])


def get_service(request: Request) -> FeedbackService:
    """앱 수명 주기에 묶인 저장소로 요청별 서비스를 만든다."""
    return FeedbackService(request.app.state.store)


@router.get(
    "/feedback",
    response_model=list[FeedbackRecord],
    responses={500: {"model": ErrorResponse}},
)
def list_feedback(service: FeedbackService = Depends(get_service)):
    """전체 피드백을 최신순으로 반환한다."""
    try:
        return service.list()
    except StoreError:
        logger.exception("Error fetching feedback", extra={"operation": "list"})
        raise HTTPException(status_code=500, detail="Failed to retrieve feedback")


@router.post(
    "/feedback",
    status_code=201,
    response_model=FeedbackRecord,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def submit_feedback(
    payload: Any = Body(None),
    service: FeedbackService = Depends(get_service),
):
    """피드백을 기록한다. 검증 실패는 ValidationError 로 400 처리된다."""
    try:
        return service.submit(payload)
    except StoreError:
        logger.exception("Error adding feedback", extra={"operation": "submit"})
        raise HTTPException(status_code=500, detail="Failed to add feedback")


@router.delete(
    "/feedback/{feedback_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_feedback(feedback_id: int, service: FeedbackService = Depends(get_service)):
    """피드백 하나를 삭제한다."""
    try:
        record = service.delete(feedback_id)
    except StoreError:
        logger.exception(
            "Error deleting feedback",
            extra={"operation": "delete", "feedback_id": feedback_id},
        )
        raise HTTPException(status_code=500, detail="Failed to delete feedback")
    return DeleteResponse(feedback=record)
