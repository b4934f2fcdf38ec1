"""
Guard against releasing a DMU that still carries template values.

The defaults are the example values shipped with the packaging
documentation (see dmu.example). Callers with their own templates can pass
a different mapping of field name to placeholder value.
"""

from dmu.errors import PlaceholderValueError
from dmu.logging_config import get_dmu_logger

log = get_dmu_logger(__name__)

DEFAULT_PLACEHOLDERS = {
    "name": "dummy",
    "summary": "This is my catalogue, with things in it that I measured",
    "generating_user": "G. M. Bluth",
    "contact": "g.m.bluth@thebluthfamily.com",
    "column_description": (
        "This is column1, it has column1-like things in it - maybe an ID"
    ),
    "readme": (
        "The is a README that describes this table. I can put in lots of "
        "information about hot the catalogue is generated and its "
        "providance. If I wane to start a new line, I should use \n. Or I "
        "can skip lines with \n\n. This way if someone wants to read it, "
        "they can easily do print(dmu.readme)"
    ),
}

# Fields checked, in reporting order.
GUARDED_FIELDS = tuple(DEFAULT_PLACEHOLDERS)


def guarded_fields(name, summary, generating_user, contact,
                   column_descriptions, readme):
    """Collect the values the guard inspects into a field -> value dict.

    Only the first column description is guarded; an empty vector is left
    for the shape checks to reject.
    """
    return {
        "name": name,
        "summary": summary,
        "generating_user": generating_user,
        "contact": contact,
        "column_description": (
            column_descriptions[0] if len(column_descriptions) else None
        ),
        "readme": readme,
    }


def find_placeholders(fields, placeholders=None):
    """Return the names of fields whose value equals their placeholder.

    Parameters
    ----------
    fields : dict
        Field name -> supplied value.
    placeholders : dict, optional
        Field name -> placeholder value. Default: DEFAULT_PLACEHOLDERS.

    Returns
    -------
    list[str]
        Matching field names, in the order of ``fields``.
    """
    if placeholders is None:
        placeholders = DEFAULT_PLACEHOLDERS

    found = []
    for key, value in fields.items():
        if key not in placeholders or not isinstance(value, str):
            continue
        if value == placeholders[key]:
            found.append(key)
    return found


def check_placeholders(fields, placeholders=None):
    """Raise PlaceholderValueError if any field still holds its placeholder."""
    found = find_placeholders(fields, placeholders)
    if found:
        log.warning("Placeholder values detected in: %s", ", ".join(found))
        raise PlaceholderValueError(found)
