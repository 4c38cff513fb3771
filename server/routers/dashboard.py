"""대시보드 집계 API — GET /api/dashboard/stats."""

from __future__ import annotations

import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fastapi import APIRouter, Depends, HTTPException

from logger import get_logger
from server.errors import StoreError
from server.routers.feedback import get_service
from server.schemas.api_contracts import DashboardStats, ErrorResponse
from server.service import FeedbackService

logger = get_logger("dashboard_api")

router = APIRouter(tags=["dashboard"])


@router.get(
    "/dashboard/stats",
    response_model=DashboardStats,
    responses={500: {"model": ErrorResponse}},
)
def dashboard_stats(service: FeedbackService = Depends(get_service)):
    """전체 건수, 평균 평점, 과목별 건수를 반환한다."""
    try:
        return service.dashboard_stats()
    except StoreError:
        logger.exception("Error fetching dashboard stats", extra={"operation": "stats"})
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard statistics")
