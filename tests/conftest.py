"""
Shared fixtures for DMU packaging tests.

Provides a small synthetic catalogue, a complete set of non-placeholder
metadata, a fixed environment and temporary output directories so each
test module can focus on packaging behaviour against known inputs.
"""

import io
import tempfile
from datetime import datetime

import numpy as np
import pandas as pd
import pytest

from dmu.environment import FrozenEnvironment


# ---------------------------------------------------------------------------
# Constants for the synthetic catalogue and environment
# ---------------------------------------------------------------------------
N_ROWS = 10
FIXED_NOW = datetime(2026, 10, 17, 21, 30, 5)
FIXED_HOST = "obs-node-01"
FIXED_RUNTIME = {"python_version": "3.12.0", "implementation": "CPython"}


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after test."""
    with tempfile.TemporaryDirectory(prefix="dmu_test_") as d:
        yield d


@pytest.fixture
def fixed_env():
    return FrozenEnvironment(FIXED_NOW, FIXED_HOST, FIXED_RUNTIME)


@pytest.fixture
def catalogue():
    """3-column, 10-row catalogue: ID, RA, DEC."""
    rng = np.random.default_rng(42)
    return pd.DataFrame({
        "cataid": np.arange(1, N_ROWS + 1),
        "ra": rng.uniform(0, 360, N_ROWS),
        "dec": rng.uniform(-90, 90, N_ROWS),
    })


@pytest.fixture
def dmu_kwargs(catalogue):
    """Complete, non-placeholder arguments for make_dmu()."""
    return {
        "name": "gama_positions",
        "table": catalogue,
        "summary": "Positions of spectroscopic targets in the G09 field",
        "generating_user": "L. Davies",
        "contact": "l.davies@example.org",
        "script_name": "build_positions.py",
        "version": 1.2,
        "column_descriptions": [
            "Unique catalogue ID",
            "Right ascension (J2000)",
            "Declination (J2000)",
        ],
        "column_ucds": ["meta.id;meta.main", "pos.eq.ra", "pos.eq.dec"],
        "column_units": ["none", "deg", "deg"],
        "readme": "Target positions.\nSee the survey paper for selection.\n",
    }


@pytest.fixture
def run_dmu(dmu_kwargs, fixed_env, tmp_dir):
    """Call make_dmu() with defaults that keep tests hermetic.

    Keyword overrides replace entries of ``dmu_kwargs``; progress text is
    captured in ``run_dmu.stream``.
    """
    from dmu.packager import make_dmu

    def _run(**overrides):
        kwargs = dict(dmu_kwargs)
        kwargs.setdefault("output_dir", tmp_dir)
        kwargs.setdefault("environment", fixed_env)
        kwargs.update(overrides)
        _run.stream = io.StringIO()
        kwargs.setdefault("stream", _run.stream)
        return make_dmu(**kwargs)

    _run.stream = io.StringIO()
    return _run

