"""
Generation-time facts about the packaging act: wall-clock time, host name
and runtime description.

The packager only talks to an environment object exposing ``now()``,
``hostname()`` and ``runtime_info()``, so tests can inject a fixed one.
"""

import platform
import socket
import subprocess
import sys
from datetime import datetime

import numpy as np
import pandas as pd


def _get_git_sha():
    """Return the short git SHA of the current HEAD, or None."""
    try:
        return subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
            text=True,
        ).strip()
    except (subprocess.SubprocessError, FileNotFoundError):
        return None


class SystemEnvironment:
    """Environment backed by the local clock, host and interpreter."""

    def now(self) -> datetime:
        return datetime.now()

    def hostname(self) -> str:
        return socket.gethostname()

    def runtime_info(self) -> dict:
        """Describe the interpreter and key library versions."""
        return {
            "python_version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "version_string": sys.version,
            "platform": platform.platform(),
            "executable": sys.executable,
            "pandas_version": pd.__version__,
            "numpy_version": np.__version__,
            "git_sha": _get_git_sha(),
        }


class FrozenEnvironment:
    """Environment that always reports the same facts.

    Useful for reproducible rebuilds and for tests.
    """

    def __init__(self, now, host="localhost", runtime=None):
        self._now = now
        self._host = host
        self._runtime = dict(runtime) if runtime else {}

    def now(self) -> datetime:
        return self._now

    def hostname(self) -> str:
        return self._host

    def runtime_info(self) -> dict:
        return dict(self._runtime)
