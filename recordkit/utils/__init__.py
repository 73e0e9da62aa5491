"""
Utilities Module
================

Helper functions and utility classes.
"""

from recordkit.utils.async_helpers import p_finally, waterfall
from recordkit.utils.compat import IDB_SYMBOLS, attach_fake_idb_symbols_to
from recordkit.utils.helpers import deep_equal, quote, unquote
from recordkit.utils.records import (
    filter_objects,
    parse_order,
    reduce_records,
    sort_objects,
)
from recordkit.utils.validators import RE_UUID, is_uuid, validate_uuid

__all__ = [
    "IDB_SYMBOLS",
    "RE_UUID",
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
