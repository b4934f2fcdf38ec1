"""
Centralized configuration for DMU packaging.

File naming, serialization and report layout are defined here so that the
packager, the CLI and the tests agree on a single set of conventions.
"""

# ─── ARCHIVE FORMAT ──────────────────────────────────────────────────────
# The record is pickled with pandas (lossless for DataFrames, nested dicts
# and arbitrary attached payloads) and gzip-compressed, mirroring the
# compressed single-object .rds archives this format stands in for.
ARCHIVE_EXTENSION = ".pkl.gz"
ARCHIVE_COMPRESSION = "gzip"

# ─── NAMING AND TIMESTAMPS ───────────────────────────────────────────────
# {name}_{DD_MM_YYYY}_v{version}{ext}
FILENAME_DATE_FORMAT = "%d_%m_%Y"
FILENAME_TEMPLATE = "{name}_{date}_v{version}{ext}"

# Human-readable generation timestamp, e.g. "Sat Oct 17 21:30:05 2026"
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Y"

# ─── COLUMN DESCRIPTORS ──────────────────────────────────────────────────
# Column order of the summary table printed after validation.
COLUMN_INFO_COLUMNS = ["name", "unit", "ucd", "description"]

# IVOA Unified Content Descriptors reference tree.
UCD_REFERENCE_URL = "http://cdsweb.u-strasbg.fr/UCD/tree/js/"

# ─── REPORT LAYOUT ───────────────────────────────────────────────────────
BANNER_RULE = "*" * 40
BANNER_TITLE = "****** GENERATING DMU FILE ******"

# ─── LOGGING ─────────────────────────────────────────────────────────────
# Operator-facing progress goes to stdout; the console log handler only
# surfaces warnings unless LOG_LEVEL says otherwise.
DEFAULT_CONSOLE_LOG_LEVEL = "WARNING"
LOG_DIR_ENV_VAR = "DMU_LOG_DIR"
LOG_FILE_NAME = "dmu.jsonl"
