"""
Exception hierarchy for DMU packaging.

Every failure is terminal for the current call: nothing is written and the
caller receives one of the typed errors below.
"""


class DMUError(Exception):
    """Base class for all packaging failures."""


class PlaceholderValueError(DMUError, ValueError):
    """One or more fields still hold their example/template value."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__(
            "Fields still set to placeholder values, please change: "
            + ", ".join(self.fields)
        )


class ShapeMismatchError(DMUError, ValueError):
    """A per-column descriptor vector does not match the column count."""

    def __init__(self, checks):
        self.checks = list(checks)
        failed = [c for c in self.checks if not c.ok]
        self.vectors = tuple(c.vector for c in failed)
        details = ", ".join(
            f"{c.vector} has length {c.actual} (expected {c.expected})"
            for c in failed
        )
        super().__init__(f"Column vector length mismatch: {details}")


class IOFailure(DMUError, OSError):
    """Serializing, writing or reading back a DMU file failed."""

    def __init__(self, path, reason, action="write"):
        self.path = path
        self.action = action
        super().__init__(f"Could not {action} DMU file {path}: {reason}")
