"""
Pandera schema for the column-info table of a DMU.

The column-info table has one row per catalogue column (name, unit, ucd,
description). It is checked after the length checks pass; violations are
reported as warnings rather than aborting packaging.

Usage:
    from dmu.schemas import ColumnInfoSchema, validate_schema
    warnings = validate_schema(unit.column_info(), ColumnInfoSchema, "column_info")
"""

import pandera as pa
from pandera import Column, Check, DataFrameSchema


# UCD words are dot-separated atoms, several words joined by ';'
# e.g. "pos.eq.ra;meta.main". Units are free text ("deg", "mag", "none").
_UCD_PATTERN = r"^[A-Za-z0-9_\-]+(\.[A-Za-z0-9_\-]+)*(;[A-Za-z0-9_\-]+(\.[A-Za-z0-9_\-]+)*)*$"

_is_string = Check(
    lambda s: s.map(lambda v: isinstance(v, str)),
    name="is_string",
)

ColumnInfoSchema = DataFrameSchema(
    columns={
        "name": Column(None, [_is_string, Check.str_length(min_value=1)],
                       nullable=False, unique=True),
        "unit": Column(None, _is_string, nullable=False),
        "ucd": Column(None, [_is_string, Check.str_matches(_UCD_PATTERN)],
                      nullable=False),
        "description": Column(None, [_is_string, Check.str_length(min_value=1)],
                              nullable=False),
    },
    strict=True,
    coerce=False,
    name="ColumnInfoSchema",
)


def validate_schema(df, schema, step_name, strict=False):
    """Validate a DataFrame against a Pandera schema.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to validate.
    schema : pa.DataFrameSchema
        Schema to validate against.
    step_name : str
        Step name used to prefix messages.
    strict : bool
        If True, raise on failure. If False, return warnings list.

    Returns
    -------
    list[str]
        Validation warning messages (empty if all pass).

    Raises
    ------
    ValueError
        Only if strict=True and validation fails.
    """
    warnings_list = []

    if df is None:
        msg = f"[{step_name}] DataFrame is None"
        if strict:
            raise ValueError(msg)
        return [msg]

    if len(df) == 0:
        return warnings_list

    try:
        schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as exc:
        for failure in exc.failure_cases.itertuples():
            msg = (
                f"[{step_name}] Schema violation: "
                f"column='{failure.column}' check='{failure.check}' "
                f"failure_case={failure.failure_case}"
            )
            warnings_list.append(msg)

        if strict:
            raise ValueError(
                f"[{step_name}] Schema validation failed with "
                f"{len(warnings_list)} errors"
            ) from exc

    return warnings_list
