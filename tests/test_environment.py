"""
Tests for dmu/environment.py generation-time fact providers.
"""

import socket
from datetime import datetime

import pandas as pd

from dmu.environment import FrozenEnvironment, SystemEnvironment


class TestSystemEnvironment:

    def test_now_is_current(self):
        before = datetime.now()
        now = SystemEnvironment().now()
        assert before <= now <= datetime.now()

    def test_hostname(self):
        assert SystemEnvironment().hostname() == socket.gethostname()

    def test_runtime_info_keys(self):
        info = SystemEnvironment().runtime_info()
        for key in ("python_version", "implementation", "platform",
                    "pandas_version", "git_sha"):
            assert key in info
        assert info["pandas_version"] == pd.__version__


class TestFrozenEnvironment:

    def test_fixed_values(self):
        when = datetime(2020, 1, 1)
        env = FrozenEnvironment(when, "h", {"python_version": "3.0"})
        assert env.now() == when
        assert env.hostname() == "h"
        assert env.runtime_info() == {"python_version": "3.0"}

    def test_runtime_info_is_a_copy(self):
        env = FrozenEnvironment(datetime(2020, 1, 1))
        env.runtime_info()["x"] = 1
        assert env.runtime_info() == {}
