"""
Build, validate and write a Data Management Unit (DMU).

make_dmu() takes a catalogue plus its metadata, refuses to proceed while
template values or mismatched column vectors remain, stamps generation-time
provenance, prints a summary for the operator and writes the unit to
``{name}_{DD_MM_YYYY}_v{version}.pkl.gz``.

Usage:
    from dmu.packager import make_dmu, read_dmu
    unit = make_dmu("gama_sizes", df, ..., readme=text)
    again = read_dmu(unit.path)
"""

import os
import pickle
import tempfile

import pandas as pd

from dmu import config
from dmu.environment import SystemEnvironment
from dmu.errors import IOFailure, PlaceholderValueError, ShapeMismatchError
from dmu.logging_config import StepTimer, get_dmu_logger, log_step_summary
from dmu.placeholders import check_placeholders, guarded_fields
from dmu.report import Reporter
from dmu.schemas import ColumnInfoSchema, validate_schema
from dmu.shape import require_column_vectors
from dmu.types import DataManagementUnit, DMUMeta

log = get_dmu_logger(__name__)


def dmu_filename(name, version, when=None):
    """Deterministic DMU filename for ``name``/``version`` on ``when``'s date.

    >>> from datetime import date
    >>> dmu_filename("dummy", 0.1, date(2026, 10, 17))
    'dummy_17_10_2026_v0.1.pkl.gz'
    """
    if when is None:
        when = SystemEnvironment().now()
    return config.FILENAME_TEMPLATE.format(
        name=name,
        date=when.strftime(config.FILENAME_DATE_FORMAT),
        version=version,
        ext=config.ARCHIVE_EXTENSION,
    )


def _default_file_mode():
    """Mode a plain ``open(path, "w")`` would give under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_dmu(unit, path):
    """Serialize ``unit`` to ``path`` in a single all-or-nothing step.

    The record is written to a temporary file beside ``path`` and renamed
    over it, so an existing file at ``path`` is replaced only by a complete
    archive. The temporary file is removed whenever the rename did not
    happen. The final file gets the caller's umask-derived permissions.

    Raises
    ------
    IOFailure
        If the directory is unwritable or the record cannot be pickled.
    """
    record = unit.to_dict()
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    replaced = False
    try:
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=".dmu_", suffix=config.ARCHIVE_EXTENSION, dir=directory
            )
            os.close(fd)
            pd.to_pickle(
                record, tmp_path, compression=config.ARCHIVE_COMPRESSION
            )
            os.chmod(tmp_path, _default_file_mode())
            os.replace(tmp_path, path)
            replaced = True
        except Exception as exc:
            log.error("Failed to write DMU to %s: %s", path, exc)
            raise IOFailure(path, exc) from exc
    finally:
        if not replaced and tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
    return path


def read_dmu(path):
    """Load a DMU written by make_dmu()/write_dmu().

    Raises
    ------
    IOFailure
        If the file is missing or does not hold a DMU record.
    """
    try:
        record = pd.read_pickle(path, compression="infer")
    except (OSError, EOFError, pickle.UnpicklingError) as exc:
        raise IOFailure(path, exc, action="read") from exc
    if not isinstance(record, dict) or "metadata" not in record:
        raise IOFailure(path, "not a DMU record", action="read")
    return DataManagementUnit.from_dict(record, path=path)


def _as_table(table):
    if table is None:
        raise TypeError("table must not be None")
    if isinstance(table, pd.DataFrame):
        return table.copy()
    return pd.DataFrame(table)


def make_dmu(
    name,
    table,
    summary,
    generating_user,
    contact,
    script_name,
    version,
    column_descriptions,
    column_ucds,
    column_units,
    readme,
    extra=None,
    test_mode=False,
    *,
    output_dir=".",
    environment=None,
    placeholders=None,
    stream=None,
    quiet=False,
):
    """Package a catalogue and its metadata into a DMU file.

    Parameters
    ----------
    name : str
        DMU name; first component of the output filename.
    table : pd.DataFrame or dict-like
        The catalogue. Copied, never modified.
    summary : str
        One or two sentence overview of the DMU.
    generating_user : str
        Person generating the DMU.
    contact : str
        Email contact of the generating user.
    script_name : str
        Script used to generate the DMU.
    version : str or number
        Version identifier; last component of the output filename.
    column_descriptions, column_ucds, column_units : sequence of str
        One entry per table column. UCDs follow the IVOA Unified Content
        Descriptor vocabulary (see config.UCD_REFERENCE_URL).
    readme : str
        Free-text README; may contain line breaks.
    extra : any, optional
        Payload attached to the unit as ``added``.
    test_mode : bool
        Skip the placeholder guard so the documentation example can run.
    output_dir : str
        Directory the DMU file is written to. Must exist.
    environment : object, optional
        Provides ``now()``, ``hostname()`` and ``runtime_info()``.
        Default: SystemEnvironment().
    placeholders : dict, optional
        Field name -> placeholder value used by the guard.
    stream : file-like, optional
        Where progress text is printed. Default: stdout.
    quiet : bool
        Suppress progress text.

    Returns
    -------
    DataManagementUnit
        The unit as written, with ``path`` set.

    Raises
    ------
    PlaceholderValueError
        A guarded field still holds its placeholder (unless test_mode).
    ShapeMismatchError
        A column vector's length differs from the table's column count.
    IOFailure
        The file could not be written.
    """
    env = environment or SystemEnvironment()
    report = Reporter(stream=stream, quiet=quiet)
    report.banner()

    table = _as_table(table)
    column_descriptions = list(column_descriptions)
    column_ucds = list(column_ucds)
    column_units = list(column_units)

    if not test_mode:
        fields = guarded_fields(
            name, summary, generating_user, contact,
            column_descriptions, readme,
        )
        timer = StepTimer()
        try:
            with timer:
                check_placeholders(fields, placeholders)
        except PlaceholderValueError as exc:
            report.placeholder_warnings(exc.fields)
            log_step_summary(log, "placeholder_guard", "error",
                             dmu_name=name, timing_seconds=timer.elapsed,
                             warnings_list=list(exc.fields))
            raise
        log_step_summary(log, "placeholder_guard", dmu_name=name,
                         timing_seconds=timer.elapsed)
    else:
        log.debug("Test mode: placeholder guard skipped for %s", name)

    n_cols = table.shape[1]
    timer = StepTimer()
    try:
        with timer:
            checks = require_column_vectors(
                n_cols,
                column_descriptions=column_descriptions,
                column_ucds=column_ucds,
                column_units=column_units,
            )
    except ShapeMismatchError as exc:
        report.shape_checks(exc.checks)
        log_step_summary(log, "shape_checks", "error", dmu_name=name,
                         input_summary={"n_cols": n_cols},
                         timing_seconds=timer.elapsed,
                         warnings_list=list(exc.vectors))
        raise
    report.shape_checks(checks)
    log_step_summary(log, "shape_checks", dmu_name=name,
                     input_summary={"n_cols": n_cols},
                     timing_seconds=timer.elapsed)

    with StepTimer() as timer:
        now = env.now()
        meta = DMUMeta(
            name=name,
            summary=summary,
            generating_user=generating_user,
            contact=contact,
            script_name=script_name,
            version=version,
            generation_timestamp=now.strftime(config.TIMESTAMP_FORMAT),
            generation_host=env.hostname(),
            generation_environment=env.runtime_info(),
        )
        unit = DataManagementUnit(
            table=table,
            metadata=meta,
            column_descriptions=column_descriptions,
            column_ucds=column_ucds,
            column_units=column_units,
            readme=readme,
            column_names=[str(c) for c in table.columns],
        )
        if extra is not None:
            unit.added = extra
    log_step_summary(log, "enrich", dmu_name=name,
                     output_summary={"host": meta.generation_host,
                                     "added": unit.has_added},
                     timing_seconds=timer.elapsed)

    schema_warnings = validate_schema(
        unit.column_info(), ColumnInfoSchema, "column_info"
    )
    if schema_warnings:
        for msg in schema_warnings:
            log.warning(msg)
        report.schema_warnings(schema_warnings)

    report.summary(unit)

    path = os.path.join(output_dir, dmu_filename(name, version, now))
    with StepTimer() as timer:
        write_dmu(unit, path)
    unit.path = path
    log_step_summary(log, "write", dmu_name=name,
                     output_summary={"path": path, "rows": unit.n_rows,
                                     "cols": unit.n_cols},
                     timing_seconds=timer.elapsed)
    log.info("DMU %s written to %s", name, path)

    report.finished(path)
    return unit


# Alias matching the packaging contract's verb.
package = make_dmu
