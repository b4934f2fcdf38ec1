"""
Package a catalogue and its metadata into a self-describing Data
Management Unit (DMU) file.
"""

from dmu.errors import DMUError, IOFailure, PlaceholderValueError, ShapeMismatchError
from dmu.packager import dmu_filename, make_dmu, package, read_dmu, write_dmu
from dmu.types import DataManagementUnit, DMUMeta

__all__ = [
    "DMUError",
    "DMUMeta",
    "DataManagementUnit",
    "IOFailure",
    "PlaceholderValueError",
    "ShapeMismatchError",
    "dmu_filename",
    "make_dmu",
    "package",
    "read_dmu",
    "write_dmu",
]

__version__ = "0.1.0"
