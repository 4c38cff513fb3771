"""피드백 API 서버 실행기.

사용법:
    python scripts/run_server.py                  # config 의 호스트/포트
    python scripts/run_server.py --port 8080
    python scripts/run_server.py --reload         # 개발용 자동 재시작
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

import uvicorn

from config import API_HOST, API_PORT
from logger import get_logger

logger = get_logger("run_server")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Course Feedback API 서버")
    parser.add_argument("--host", type=str, default=API_HOST, help=f"바인드 주소 (기본: {API_HOST})")
    parser.add_argument("--port", type=int, default=API_PORT, help=f"포트 (기본: {API_PORT})")
    parser.add_argument("--reload", action="store_true", help="코드 변경 시 자동 재시작")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logger.info(f"Server is starting on {args.host}:{args.port}")
    uvicorn.run(
        "server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        app_dir=str(_PROJECT_ROOT),
    )


if __name__ == "__main__":
    main()
