"""
Tests for dmu/logging_config.py.

Verifies JSON Lines output, run_id stamping, and that packaging steps are
logged as structured step summaries.
"""

import json
import logging
import os

import pytest

from dmu.errors import ShapeMismatchError
from dmu.logging_config import (
    JsonFormatter,
    StepTimer,
    get_dmu_logger,
    get_run_id,
    log_step_summary,
    reset_logging,
    set_run_id,
    setup_logging,
)


def _read_jsonl(path):
    with open(path) as f:
        return [json.loads(line) for line in f if line.strip()]


class TestRunId:

    def test_generated_once(self):
        reset_logging()
        first = get_run_id()
        assert len(first) == 8
        assert get_run_id() == first

    def test_set_explicit(self):
        assert set_run_id("abc12345") == "abc12345"
        assert get_run_id() == "abc12345"


class TestSetupLogging:

    def test_no_file_without_log_dir(self, tmp_dir, monkeypatch):
        monkeypatch.delenv("DMU_LOG_DIR", raising=False)
        reset_logging()
        get_dmu_logger("dmu.test").warning("hello")
        assert os.listdir(tmp_dir) == []

    def test_file_handler_writes_jsonl(self, tmp_dir):
        reset_logging()
        set_run_id("run00001")
        setup_logging(log_dir=tmp_dir)
        get_dmu_logger("dmu.test").info("packaged %s", "cat", extra={"step_name": "write"})
        reset_logging()

        entries = _read_jsonl(os.path.join(tmp_dir, "dmu.jsonl"))
        assert entries[-1]["message"] == "packaged cat"
        assert entries[-1]["step_name"] == "write"
        assert entries[-1]["run_id"] == "run00001"
        assert entries[-1]["level"] == "INFO"

    def test_log_dir_from_env(self, tmp_dir, monkeypatch):
        monkeypatch.setenv("DMU_LOG_DIR", tmp_dir)
        reset_logging()
        get_dmu_logger("dmu.test").debug("from env")
        reset_logging()
        assert os.path.exists(os.path.join(tmp_dir, "dmu.jsonl"))

    def test_packaging_steps_logged(self, tmp_dir, run_dmu):
        log_dir = os.path.join(tmp_dir, "logs")
        reset_logging()
        setup_logging(log_dir=log_dir)
        run_dmu(output_dir=tmp_dir)
        reset_logging()

        steps = [e.get("step_name") for e in _read_jsonl(os.path.join(log_dir, "dmu.jsonl"))]
        assert steps.count("placeholder_guard") == 1
        assert steps.count("shape_checks") == 1
        assert steps.count("enrich") == 1
        assert steps.count("write") == 1


class TestLogStepSummary:

    def test_error_logged_at_error_level(self, caplog):
        logger = logging.getLogger("dmu.test.summary")
        with caplog.at_level(logging.DEBUG, logger="dmu"):
            log_step_summary(logger, "shape_checks", "error",
                             dmu_name="cat", warnings_list=["column_ucds"])
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.step_name == "shape_checks"
        assert record.warnings == ["column_ucds"]

    def test_success_logged_at_debug(self, caplog):
        logger = logging.getLogger("dmu.test.summary")
        with caplog.at_level(logging.DEBUG, logger="dmu"):
            log_step_summary(logger, "write", timing_seconds=0.25,
                             output_summary={"rows": 10})
        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert "(0.250s)" in record.getMessage()

    def test_shape_failure_logged(self, run_dmu, caplog):
        with caplog.at_level(logging.DEBUG, logger="dmu"):
            with pytest.raises(ShapeMismatchError):
                run_dmu(column_units=[])
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert any(getattr(r, "step_name", None) == "shape_checks" for r in errors)


class TestFormatters:

    def test_json_formatter_extra_fields(self):
        record = logging.LogRecord("dmu.x", logging.INFO, __file__, 1, "msg", None, None)
        record.dmu_name = "cat"
        record.timing_seconds = 0.1
        entry = json.loads(JsonFormatter().format(record))
        assert entry["dmu_name"] == "cat"
        assert entry["timing_seconds"] == 0.1
        assert entry["run_id"] is None


class TestStepTimer:

    def test_elapsed_recorded(self):
        with StepTimer() as t:
            sum(range(1000))
        assert t.elapsed >= 0
