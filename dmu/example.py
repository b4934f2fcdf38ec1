"""
The documentation example: a small random catalogue described with the
template values the placeholder guard knows about.

    from dmu.example import example_inputs
    from dmu.packager import make_dmu
    unit = make_dmu(**example_inputs(), test_mode=True)
"""

import numpy as np
import pandas as pd

from dmu.placeholders import DEFAULT_PLACEHOLDERS


def example_catalogue(n_rows=10, seed=None):
    """ID / RA / DEC catalogue with ``n_rows`` uniformly random rows."""
    rng = np.random.default_rng(seed)
    return pd.DataFrame({
        "col1": np.round(rng.uniform(1, 10, n_rows)),
        "col2": rng.uniform(0, 360, n_rows),
        "col3": rng.uniform(-90, 90, n_rows),
    })


def example_inputs(seed=None):
    """Keyword arguments for make_dmu() reproducing the documented example."""
    return {
        "name": DEFAULT_PLACEHOLDERS["name"],
        "table": example_catalogue(seed=seed),
        "summary": DEFAULT_PLACEHOLDERS["summary"],
        "generating_user": DEFAULT_PLACEHOLDERS["generating_user"],
        "contact": DEFAULT_PLACEHOLDERS["contact"],
        "script_name": "myScript.py",
        "version": 0.1,
        "column_descriptions": [
            DEFAULT_PLACEHOLDERS["column_description"],
            "This is column2, supprisingly it has column2-like things in it - maybe an RA",
            "This is column2, supprisingly it has column2-like things in it - maybe a DEC",
        ],
        "column_ucds": ["meta.id", "pos.eq.ra", "pos.eq.dec"],
        "column_units": ["none", "deg", "deg"],
        "readme": DEFAULT_PLACEHOLDERS["readme"],
    }
