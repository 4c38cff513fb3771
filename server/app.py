"""FastAPI 엔트리포인트 — 피드백 API.

실행: uvicorn server.app:app --host 0.0.0.0 --port 5000
"""

from __future__ import annotations

import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import API_TITLE, API_VERSION, CORS_ALLOW_ORIGINS
from logger import get_logger
from server.errors import FeedbackError, StoreError
from server.routers import dashboard, feedback, health
from server.store import FeedbackStore

logger = get_logger("api_server")

_START_TIME = time.monotonic()


def _request_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first["type"] == "json_invalid":
        return "Request body must be valid JSON"
    loc = first.get("loc", ())
    if loc and loc[0] == "path":
        return f"Invalid path parameter: {loc[-1]}"
    return first.get("msg", "Invalid request")


def create_app(store: FeedbackStore | None = None) -> FastAPI:
    """저장소를 주입받아 앱을 만든다. 저장소는 시작 시 열고 종료 시 닫는다."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store.open()
        try:
            yield
        finally:
            app.state.store.close()

    app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)
    app.state.store = store or FeedbackStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.monotonic()
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path} → {response.status_code}",
            extra={
                "status_code": response.status_code,
                "duration_sec": round(time.monotonic() - started, 4),
            },
        )
        return response

    # 오류 응답은 모두 {"error": message} 형태
    @app.exception_handler(FeedbackError)
    async def handle_feedback_error(request: Request, exc: FeedbackError):
        if isinstance(exc, StoreError):
            logger.error(f"Unhandled store error on {request.url.path}: {exc.message}")
            return JSONResponse(status_code=500, content={"error": "Something went wrong!"})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def handle_request_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _request_error_message(exc)})

    # 라우터 등록
    app.include_router(feedback.router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    return app


app = create_app()


def get_uptime() -> float:
    return time.monotonic() - _START_TIME
