"""전역 설정 — 경로, DB, 평점 범위, API 서버, 로그 설정."""

from __future__ import annotations

import os
from pathlib import Path

# ──────────────────────────── 경로 ────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = PROJECT_ROOT / "output"
LOG_DIR = Path(os.environ.get("FEEDBACK_LOG_DIR", OUTPUT_DIR / "logs"))

# ──────────────────────────── DB ────────────────────────────
FEEDBACK_DB_PATH = Path(os.environ.get("FEEDBACK_DB_PATH", DATA_DIR / "feedback.sqlite3"))
DB_TIMEOUT_SEC = float(os.environ.get("FEEDBACK_DB_TIMEOUT_SEC", "5"))  # 잠금 대기 한도

# ──────────────────────────── 피드백 제약 ────────────────────────────
RATING_MIN = 1
RATING_MAX = 5

# 필수 필드 검사 순서 (와이어 이름 → 오류 메시지)
REQUIRED_FIELD_MESSAGES = {
    "studentName": "Student name is required",
    "courseCode": "Course code is required",
    "comments": "Comments are required",
    "rating": "Rating is required",
}

# ──────────────────────────── API 서버 ────────────────────────────
API_TITLE = "Course Feedback API"
API_VERSION = "1.0.0"
API_HOST = os.environ.get("FEEDBACK_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("FEEDBACK_PORT", "5000"))
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("FEEDBACK_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
