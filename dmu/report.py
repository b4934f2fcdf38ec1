"""
Operator-facing progress text for DMU packaging.

Everything here writes plain text to a stream (stdout by default). None of
it affects what the packager returns.
"""

import sys

import pandas as pd

from dmu import config


class Reporter:
    """Writes packaging progress to ``stream``; silent when ``quiet``."""

    def __init__(self, stream=None, quiet=False):
        self.stream = stream
        self.quiet = quiet

    def _write(self, text=""):
        if self.quiet:
            return
        print(text, file=self.stream or sys.stdout)

    def banner(self):
        self._write()
        self._write(config.BANNER_RULE)
        self._write(config.BANNER_TITLE)
        self._write(config.BANNER_RULE)
        self._write()

    def placeholder_warnings(self, fields):
        for field in fields:
            self._write(
                f"**WARNING** {field} is still set to dummy value, please change"
            )

    def shape_checks(self, checks):
        for check in checks:
            if check.ok:
                self._write(
                    f"**CHECK PASSED** - {check.vector} has correct length"
                )
            else:
                self._write(
                    f"**CHECK FAILED** - {check.vector} does not have the "
                    f"correct length ({check.actual} != {check.expected}), "
                    f"please check"
                )
        self._write()

    def schema_warnings(self, warnings_list):
        for msg in warnings_list:
            self._write(f"**WARNING** {msg}")

    def summary(self, unit):
        self._write(
            f"You have generated a catalogue with {unit.n_rows} rows and "
            f"{unit.n_cols} columns"
        )
        self._write()
        self._write("This catalogue has columns:")
        self._write(format_column_info(unit.column_info()))
        self._write()
        self._write("Your meta data is:")
        self._write(format_metadata(unit.metadata))
        self._write()

    def finished(self, path):
        self._write("***** Finished *****")
        self._write(f" Catalogue generated as: {path}")


def format_column_info(info):
    """Render the column-info table as aligned text."""
    if info.empty:
        return "  (no columns)"
    return info.to_string()


def format_metadata(meta):
    lines = [
        f"name - {meta.name}",
        f"summary - {meta.summary}",
        f"usr - {meta.generating_user}",
        f"contact - {meta.contact}",
        f"script - {meta.script_name}",
        f"version - {meta.version}",
        f"date - {meta.generation_timestamp}",
        f"host - {meta.generation_host}",
    ]
    return "\n".join(lines)


def describe_dmu(unit):
    """Full text description of a DMU: shape, columns, metadata and README."""
    env = unit.metadata.generation_environment or {}
    parts = [
        f"DMU: {unit.metadata.name} (v{unit.metadata.version})",
        f"{unit.n_rows} rows x {unit.n_cols} columns",
        "",
        "Columns:",
        format_column_info(unit.column_info()),
        "",
        "Metadata:",
        format_metadata(unit.metadata),
    ]
    if env:
        parts.append(
            "python - " + str(env.get("python_version", "unknown"))
        )
    if unit.has_added:
        added = unit.added
        if isinstance(added, (pd.DataFrame, pd.Series)):
            kind = f"{type(added).__name__} with {len(added)} rows"
        else:
            kind = type(added).__name__
        parts.append(f"added - {kind}")
    parts += ["", "README:", unit.readme]
    return "\n".join(parts)
