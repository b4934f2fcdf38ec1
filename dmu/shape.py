"""
Length checks for the per-column descriptor vectors.

Every vector is checked and reported; the caller decides whether a failure
aborts. require_column_vectors() raises once all checks have run so the
error names every offending vector at once.
"""

from dataclasses import dataclass

from dmu.errors import ShapeMismatchError


@dataclass
class ShapeCheck:
    """Outcome of comparing one vector's length to the column count."""

    vector: str
    expected: int
    actual: int

    @property
    def ok(self):
        return self.expected == self.actual


def check_column_vectors(n_cols, **vectors):
    """Compare each named vector's length with ``n_cols``.

    Returns
    -------
    list[ShapeCheck]
        One check per vector, in keyword order.
    """
    return [
        ShapeCheck(vector=name, expected=n_cols, actual=len(values))
        for name, values in vectors.items()
    ]


def require_column_vectors(n_cols, **vectors):
    """Run check_column_vectors() and raise if any check failed."""
    checks = check_column_vectors(n_cols, **vectors)
    if not all(c.ok for c in checks):
        raise ShapeMismatchError(checks)
    return checks
