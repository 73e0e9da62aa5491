"""
recordkit
=========

Helpers for sorting and filtering record collections, validating UUIDs,
sequencing sync/async callables and comparing plain data structures.
"""

from recordkit.core.errors import ErrorCodes, RecordKitError, ValidationError
from recordkit.schemas.query import RecordQuery
from recordkit.utils import (
    IDB_SYMBOLS,
    RE_UUID,
    attach_fake_idb_symbols_to,
    deep_equal,
    filter_objects,
    is_uuid,
    p_finally,
    parse_order,
    quote,
    reduce_records,
    sort_objects,
    unquote,
    validate_uuid,
    waterfall,
)

__version__ = "1.0.0"

__all__ = [
    "ErrorCodes",
    "IDB_SYMBOLS",
    "RE_UUID",
    "RecordKitError",
    "RecordQuery",
    "ValidationError",
    "attach_fake_idb_symbols_to",
    "deep_equal",
    "filter_objects",
    "is_uuid",
    "p_finally",
    "parse_order",
    "quote",
    "reduce_records",
    "sort_objects",
    "unquote",
    "validate_uuid",
    "waterfall",
]
