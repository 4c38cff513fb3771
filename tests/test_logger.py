"""구조화 로그 테스트 — 일별 JSONL 파일, extra 필드, 핸들러 중복 방지."""

import json
import logging
import uuid

from freezegun import freeze_time

from logger import get_logger


def _fresh_logger(tmp_path):
    return get_logger(f"test.{uuid.uuid4().hex[:8]}", log_dir=tmp_path)


def _read_entries(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line]


class TestJsonlLogging:
    @freeze_time("2026-02-18 20:00:00")
    def test_daily_file_uses_kst_date(self, tmp_path):
        """UTC 20시는 KST 다음날 05시 → 2026-02-19.jsonl 에 기록된다."""
        logger = _fresh_logger(tmp_path)
        logger.info("Feedback 1 created")

        path = tmp_path / "2026-02-19.jsonl"
        assert path.exists()
        entry = _read_entries(path)[0]
        assert entry["msg"] == "Feedback 1 created"
        assert entry["level"] == "INFO"
        assert entry["ts"].startswith("2026-02-19T05:00:00")

    @freeze_time("2026-02-18 01:00:00")
    def test_extra_fields_recorded(self, tmp_path):
        logger = _fresh_logger(tmp_path)
        logger.info(
            "Feedback 7 deleted",
            extra={"operation": "delete", "feedback_id": 7, "unrelated": "x"},
        )

        entry = _read_entries(tmp_path / "2026-02-18.jsonl")[0]
        assert entry["operation"] == "delete"
        assert entry["feedback_id"] == 7
        assert "unrelated" not in entry
        assert "course_code" not in entry

    @freeze_time("2026-02-18 01:00:00")
    def test_exception_traceback_recorded(self, tmp_path):
        logger = _fresh_logger(tmp_path)
        try:
            raise RuntimeError("disk I/O error")
        except RuntimeError:
            logger.exception("Error fetching feedback")

        entry = _read_entries(tmp_path / "2026-02-18.jsonl")[0]
        assert entry["level"] == "ERROR"
        assert any("disk I/O error" in line for line in entry["exc"])

    def test_handlers_not_duplicated(self, tmp_path):
        name = f"test.{uuid.uuid4().hex[:8]}"
        first = get_logger(name, log_dir=tmp_path)
        second = get_logger(name, log_dir=tmp_path)
        assert first is second
        assert len(second.handlers) == 2
        assert any(isinstance(h, logging.StreamHandler) for h in second.handlers)
