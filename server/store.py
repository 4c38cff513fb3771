"""피드백 레코드 저장소 — SQLite 단일 테이블.

평점 범위와 필수 필드는 서비스 검증과 별개로 테이블 제약으로도 강제한다.
연산마다 연결을 새로 열어 한 문장만 실행하므로 요청 간 공유 상태가 없다.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Iterator

from config import DB_TIMEOUT_SEC, FEEDBACK_DB_PATH, RATING_MAX, RATING_MIN
from logger import get_logger
from server.errors import StoreError
from server.schemas.api_contracts import CourseCount, FeedbackRecord
from utils import parse_store_timestamp

logger = get_logger("feedback_store")

_CREATE_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS feedback (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    student_name TEXT NOT NULL CHECK (length(trim(student_name)) > 0),
    course_code TEXT NOT NULL CHECK (length(trim(course_code)) > 0),
    comments TEXT NOT NULL CHECK (length(trim(comments)) > 0),
    rating INTEGER NOT NULL
        CHECK (typeof(rating) = 'integer' AND rating BETWEEN {RATING_MIN} AND {RATING_MAX}),
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
)
"""

_COLUMNS = "id, student_name, course_code, comments, rating, created_at"

# SQLite INTEGER 는 부호 있는 64비트
_SQLITE_INT_MIN = -(2 ** 63)
_SQLITE_INT_MAX = 2 ** 63 - 1


def _to_record(row: sqlite3.Row) -> FeedbackRecord:
    return FeedbackRecord(
        id=row["id"],
        student_name=row["student_name"],
        course_code=row["course_code"],
        comments=row["comments"],
        rating=row["rating"],
        created_at=parse_store_timestamp(row["created_at"]),
    )


class FeedbackStore:
    """feedback 테이블 접근 계층.

    open() 으로 스키마를 준비하고 close() 로 닫는다. 닫힌 상태의 연산은 StoreError.
    """

    def __init__(self, db_path: Path | str | None = None, *, timeout: float = DB_TIMEOUT_SEC) -> None:
        self.db_path = Path(db_path or FEEDBACK_DB_PATH)
        self.timeout = timeout
        self._opened = False

    @property
    def is_open(self) -> bool:
        return self._opened

    # ──────────────────────────── 수명 주기 ────────────────────────────

    def open(self) -> None:
        """데이터 디렉터리와 feedback 테이블을 준비한다."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"cannot create data directory: {e}") from e
        self._opened = True
        try:
            with self._connection() as conn:
                conn.execute(_CREATE_TABLE_SQL)
        except StoreError:
            self._opened = False
            raise
        logger.info(f"Feedback store ready: {self.db_path}")

    def close(self) -> None:
        if self._opened:
            self._opened = False
            logger.info("Feedback store closed")

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """연산 1회용 연결. 정상 종료 시 commit, 실패 시 rollback 후 StoreError."""
        if not self._opened:
            raise StoreError("feedback store is not open")
        try:
            with closing(sqlite3.connect(str(self.db_path), timeout=self.timeout)) as conn:
                conn.row_factory = sqlite3.Row
                with conn:
                    yield conn
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    # ──────────────────────────── 쓰기 ────────────────────────────

    def insert(self, student_name: str, course_code: str, comments: str, rating: int) -> FeedbackRecord:
        """한 행을 추가하고 저장소가 부여한 id/created_at 을 포함한 행을 반환한다."""
        with self._connection() as conn:
            # RETURNING 문은 commit 전에 끝까지 읽어야 한다
            rows = conn.execute(
                "INSERT INTO feedback (student_name, course_code, comments, rating) "
                f"VALUES (?, ?, ?, ?) RETURNING {_COLUMNS}",
                (student_name, course_code, comments, rating),
            ).fetchall()
        return _to_record(rows[0])

    def delete(self, feedback_id: int) -> FeedbackRecord | None:
        """id 로 한 행을 지우고 지운 행을 반환한다. 없으면 None."""
        if not _SQLITE_INT_MIN <= feedback_id <= _SQLITE_INT_MAX:
            return None
        with self._connection() as conn:
            rows = conn.execute(
                f"DELETE FROM feedback WHERE id = ? RETURNING {_COLUMNS}",
                (feedback_id,),
            ).fetchall()
        return _to_record(rows[0]) if rows else None

    # ──────────────────────────── 읽기 ────────────────────────────

    def list_all(self) -> list[FeedbackRecord]:
        """전체 레코드를 최신순으로 반환한다."""
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM feedback ORDER BY created_at DESC, id DESC"
            ).fetchall()
        return [_to_record(row) for row in rows]

    def count(self) -> int:
        with self._connection() as conn:
            row = conn.execute("SELECT COUNT(*) AS count FROM feedback").fetchone()
        return int(row["count"])

    def average_rating(self) -> float | None:
        """평점 평균. 레코드가 없으면 None."""
        with self._connection() as conn:
            row = conn.execute("SELECT AVG(rating) AS average FROM feedback").fetchone()
        return row["average"]

    def count_by_course(self) -> list[CourseCount]:
        """과목별 건수. 건수 내림차순, 동률이면 먼저 등록된 과목이 앞."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT course_code, COUNT(*) AS count FROM feedback "
                "GROUP BY course_code ORDER BY COUNT(*) DESC, MIN(id) ASC"
            ).fetchall()
        return [CourseCount(course_code=row["course_code"], count=row["count"]) for row in rows]

    def ping(self) -> bool:
        try:
            with self._connection() as conn:
                conn.execute("SELECT 1").fetchone()
        except StoreError:
            return False
        return True
