"""
Record Sanitizer

Pure functions that strip remote bookkeeping fields from raw records.
No I/O; never raises for dict input.
"""

from typing import Any, Dict, Iterable


def sanitize_record(record: Dict[str, Any], internal_fields: Iterable[str]) -> Dict[str, Any]:
    """
    Return a copy of record without the given internal fields.

    Every other field is kept unchanged and in its original order,
    including fields the caller already rewrote (local asset references).

    Args:
        record: Raw record from the remote source
        internal_fields: Field names meaningful only to the remote source

    Returns:
        New dictionary; the input is not modified
    """
    drop = set(internal_fields)
    return {key: value for key, value in record.items() if key not in drop}


def project_record(record: Dict[str, Any], keep_fields: Iterable[str]) -> Dict[str, Any]:
    """
    Return a copy of record restricted to keep_fields, in keep_fields order.

    Missing fields are filled with None so the output shape is stable.
    """
    return {key: record.get(key) for key in keep_fields}
