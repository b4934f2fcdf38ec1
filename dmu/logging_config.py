"""
Centralized logging configuration for DMU packaging.

Provides structured JSON Lines logging to an optional log directory and a
terse console handler. Operator-facing progress text is printed by
dmu.report; the log stream records the same events in machine-readable
form. All modules should use get_dmu_logger() instead of calling
logging.basicConfig() directly.

Usage:
    from dmu.logging_config import get_dmu_logger
    log = get_dmu_logger(__name__)
"""

import json
import logging
import os
import time
import uuid

from dmu import config


# Module-level run_id stamped on every file log entry via RunIdFilter.
_run_id = None

_LOGGER_ROOT = "dmu"


def get_run_id():
    """Return the current packaging run_id, generating one if needed."""
    global _run_id
    if _run_id is None:
        _run_id = str(uuid.uuid4())[:8]
    return _run_id


def set_run_id(run_id=None):
    """Set (or regenerate) the packaging run_id."""
    global _run_id
    _run_id = run_id or str(uuid.uuid4())[:8]
    return _run_id


class RunIdFilter(logging.Filter):
    """Inject run_id into every log record."""

    def filter(self, record):
        record.run_id = get_run_id()
        return True


class JsonFormatter(logging.Formatter):
    """Format log records as JSON Lines for machine parsing."""

    def format(self, record):
        entry = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S.") +
                         f"{int(record.msecs):03d}",
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "run_id": getattr(record, "run_id", None),
            "message": record.getMessage(),
        }
        for key in ("step_name", "dmu_name", "input_summary",
                    "output_summary", "timing_seconds", "warnings"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console format."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


_configured = False
_file_handler = None


def _console_level_from_env():
    env_level = os.environ.get("LOG_LEVEL", config.DEFAULT_CONSOLE_LOG_LEVEL)
    return getattr(logging, env_level.upper(), logging.WARNING)


def setup_logging(log_dir=None, console_level=None, file_level=logging.DEBUG):
    """Configure the ``dmu`` logger with console and optional file handlers.

    Subsequent calls are no-ops except that a file handler is added the
    first time a log directory becomes available.

    Parameters
    ----------
    log_dir : str, optional
        Directory for ``dmu.jsonl``. Falls back to the DMU_LOG_DIR
        environment variable; no file is written when neither is set.
    console_level : int, optional
        Console handler log level. Default: from LOG_LEVEL env var or WARNING.
    file_level : int
        File handler log level. Default: DEBUG.
    """
    global _configured, _file_handler

    if console_level is None:
        console_level = _console_level_from_env()

    logger = logging.getLogger(_LOGGER_ROOT)

    if not _configured:
        logger.setLevel(logging.DEBUG)

        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(ConsoleFormatter())
        logger.addHandler(console)
        _configured = True

    log_dir = log_dir or os.environ.get(config.LOG_DIR_ENV_VAR)
    if log_dir and _file_handler is None:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, config.LOG_FILE_NAME))
        fh.setLevel(file_level)
        fh.setFormatter(JsonFormatter())
        fh.addFilter(RunIdFilter())
        logger.addHandler(fh)
        _file_handler = fh


def reset_logging():
    """Reset all logging state, primarily for test isolation."""
    global _configured, _file_handler, _run_id

    logger = logging.getLogger(_LOGGER_ROOT)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    _configured = False
    _file_handler = None
    _run_id = None


def get_dmu_logger(name, log_dir=None):
    """Get a logger for a dmu module.

    If logging has not been set up yet, initialises with defaults.

    Parameters
    ----------
    name : str
        Logger name (typically ``__name__``).
    log_dir : str, optional
        Passed to setup_logging() if not yet configured.

    Returns
    -------
    logging.Logger
    """
    if not _configured:
        setup_logging(log_dir=log_dir)
    return logging.getLogger(name)


def log_step_summary(
    logger,
    step_name,
    status="success",
    dmu_name=None,
    input_summary=None,
    output_summary=None,
    timing_seconds=None,
    warnings_list=None,
):
    """Log a structured packaging-step summary.

    Successful steps are logged at DEBUG, failures at ERROR.

    Parameters
    ----------
    logger : logging.Logger
    step_name : str
    status : str
        "success" or "error".
    dmu_name : str, optional
    input_summary : dict, optional
    output_summary : dict, optional
    timing_seconds : float, optional
    warnings_list : list[str], optional
    """
    parts = [f"[{step_name}] {status}"]
    if timing_seconds is not None:
        parts.append(f"({timing_seconds:.3f}s)")
    if output_summary:
        parts.append(f"output={output_summary}")

    extra = {"step_name": step_name}
    if dmu_name is not None:
        extra["dmu_name"] = dmu_name
    if input_summary:
        extra["input_summary"] = input_summary
    if output_summary:
        extra["output_summary"] = output_summary
    if timing_seconds is not None:
        extra["timing_seconds"] = timing_seconds
    if warnings_list:
        extra["warnings"] = warnings_list

    level = logging.ERROR if status == "error" else logging.DEBUG
    logger.log(level, " ".join(parts), extra=extra)


class StepTimer:
    """Context manager for timing packaging steps.

    Usage:
        with StepTimer() as t:
            do_work()
        print(t.elapsed)
    """

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start
