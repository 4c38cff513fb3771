"""시스템 헬스 API — GET /api/health."""

from __future__ import annotations

import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fastapi import APIRouter, Request

from server.schemas.api_contracts import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    """저장소 응답 여부와 가동 시간을 반환한다."""
    from server.app import get_uptime

    database = request.app.state.store.ping()
    return HealthResponse(
        status="ok" if database else "error",
        database=database,
        uptime_sec=get_uptime(),
    )
