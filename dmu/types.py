"""
Typed records for the Data Management Unit (DMU).

DMUMeta holds provenance; DataManagementUnit is the packaged artifact.
Both round-trip through plain dicts, which is what gets serialized.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

import pandas as pd

from dmu import config


# Distinguishes "no attachment" from an attachment that happens to be falsy.
_ABSENT = object()


@dataclass
class DMUMeta:
    """Provenance metadata for a DMU."""

    name: str
    summary: str
    generating_user: str
    contact: str  # email-like
    script_name: str
    version: Union[str, float, int]
    generation_timestamp: str = ""
    generation_host: str = ""
    generation_environment: dict = field(default_factory=dict)

    def to_dict(self):
        return {
            "name": self.name,
            "summary": self.summary,
            "generating_user": self.generating_user,
            "contact": self.contact,
            "script_name": self.script_name,
            "version": self.version,
            "generation_timestamp": self.generation_timestamp,
            "generation_host": self.generation_host,
            "generation_environment": self.generation_environment,
        }

    @classmethod
    def from_dict(cls, d):
        """Reconstruct DMUMeta from a serialized dict."""
        return cls(
            name=d["name"],
            summary=d["summary"],
            generating_user=d["generating_user"],
            contact=d["contact"],
            script_name=d["script_name"],
            version=d["version"],
            generation_timestamp=d.get("generation_timestamp", ""),
            generation_host=d.get("generation_host", ""),
            generation_environment=d.get("generation_environment", {}),
        )


@dataclass(eq=False)
class DataManagementUnit:
    """A catalogue packaged with its metadata and column descriptors.

    ``added`` holds an optional caller-supplied payload of any shape; use
    ``has_added`` to test for it. ``path`` records where the unit was
    written and is not part of the serialized record.
    """

    table: pd.DataFrame
    metadata: DMUMeta
    column_descriptions: list
    column_ucds: list
    column_units: list
    readme: str
    column_names: list = field(default_factory=list)
    added: Any = _ABSENT
    path: Optional[str] = None

    @property
    def n_rows(self):
        return self.table.shape[0]

    @property
    def n_cols(self):
        return self.table.shape[1]

    @property
    def has_added(self):
        return self.added is not _ABSENT

    def column_info(self):
        """One row per catalogue column: name, unit, ucd, description."""
        return pd.DataFrame(
            {
                "name": self.column_names,
                "unit": self.column_units,
                "ucd": self.column_ucds,
                "description": self.column_descriptions,
            },
            columns=config.COLUMN_INFO_COLUMNS,
        )

    def to_dict(self):
        record = {
            "table": self.table,
            "metadata": self.metadata.to_dict(),
            "column_descriptions": list(self.column_descriptions),
            "column_ucds": list(self.column_ucds),
            "column_units": list(self.column_units),
            "readme": self.readme,
            "column_names": list(self.column_names),
        }
        if self.has_added:
            record["added"] = self.added
        return record

    @classmethod
    def from_dict(cls, d, path=None):
        """Reconstruct a DataManagementUnit from a serialized dict."""
        return cls(
            table=d["table"],
            metadata=DMUMeta.from_dict(d["metadata"]),
            column_descriptions=list(d["column_descriptions"]),
            column_ucds=list(d["column_ucds"]),
            column_units=list(d["column_units"]),
            readme=d["readme"],
            column_names=list(d.get("column_names", d["table"].columns)),
            added=d.get("added", _ABSENT),
            path=path,
        )

    def equals(self, other):
        """Field-by-field equality, ignoring ``path``."""
        if not isinstance(other, DataManagementUnit):
            return False
        return (
            self.table.equals(other.table)
            and list(self.table.columns) == list(other.table.columns)
            and self.metadata == other.metadata
            and self.column_descriptions == other.column_descriptions
            and self.column_ucds == other.column_ucds
            and self.column_units == other.column_units
            and self.readme == other.readme
            and self.column_names == other.column_names
            and self.has_added == other.has_added
            and (not self.has_added or _payload_equal(self.added, other.added))
        )


def _payload_equal(a, b):
    if isinstance(a, (pd.DataFrame, pd.Series)):
        return isinstance(b, type(a)) and a.equals(b)
    return a == b
