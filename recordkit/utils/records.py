"""
Record Helpers
==============

Sorting and filtering of in-memory record collections.

A record is any mapping of field name to value. A field is *absent* when
the key is missing; ``None`` is a regular value.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Mapping, Optional, Sequence

from recordkit.core.errors import ErrorCodes, ValidationError
from recordkit.utils.helpers import _kind

logger = logging.getLogger(__name__)

# Marks a field missing from a record
_MISSING = object()

# Filter values of these types are sets of acceptable values
_CANDIDATE_TYPES = (list, tuple, set, frozenset)


def parse_order(order: str) -> tuple[str, int]:
    """
    Split an order specifier into its field name and direction.

    Args:
        order: Field name, optionally prefixed with ``-``, eg. ``-last_modified``

    Returns:
        ``(field, direction)`` where direction is ``1`` (ASC) or ``-1`` (DESC)

    Raises:
        ValidationError: If no field name is given
    """
    descending = order.startswith("-")
    field = order[1:] if descending else order

    if not field:
        raise ValidationError(
            message=f"Invalid order specifier: {order!r}",
            field="order",
            code=ErrorCodes.INVALID_ORDER,
        )

    return field, -1 if descending else 1


def _greater(a: Any, b: Any) -> bool:
    if a is _MISSING or b is _MISSING:
        return False
    try:
        return bool(a > b)
    except TypeError:
        # Unorderable mix (eg. str vs int): order by type name instead
        return type(a).__name__ > type(b).__name__


def sort_objects(order: str, records: Sequence[Mapping[str, Any]]) -> list:
    """
    Sort records according to an order specifier.

    The input sequence is left untouched; a new list is returned.

    Args:
        order: The ordering, eg. ``-last_modified``
        records: The collection to order

    Returns:
        Sorted list of records
    """
    field, direction = parse_order(order)

    def compare(a: Mapping[str, Any], b: Mapping[str, Any]) -> int:
        value_a = a.get(field, _MISSING)
        value_b = b.get(field, _MISSING)

        # Present-vs-absent only short-circuits for a *truthy* value, and the
        # result follows direction: absent records land first in ASC order and
        # last in DESC order. A falsy value against an absent one falls
        # through to the relational check below, which is then false.
        # Truthiness is Python's: empty lists and dicts count as falsy here,
        # NaN as truthy.
        if value_b is _MISSING and value_a is not _MISSING and value_a:
            return direction
        if value_a is _MISSING and value_b is not _MISSING and value_b:
            return -direction
        if value_a is _MISSING and value_b is _MISSING:
            return 0

        # Equal values map to -direction, not 0.
        return direction if _greater(value_a, value_b) else -direction

    return sorted(records, key=cmp_to_key(compare))


def _same(a: Any, b: Any) -> bool:
    # Exact equality: True never matches 1, nor False 0
    return _kind(a) == _kind(b) and a == b


def _matches(entry: Mapping[str, Any], field: str, expected: Any) -> bool:
    value = entry.get(field, _MISSING)
    if value is _MISSING:
        return False
    if isinstance(expected, _CANDIDATE_TYPES):
        return any(_same(candidate, value) for candidate in expected)
    return _same(value, expected)


def filter_objects(
    filters: Mapping[str, Any],
    records: Sequence[Mapping[str, Any]],
) -> list:
    """
    Keep the records matching all given filters.

    A filter value that is a list, tuple or set matches any of its elements.

    Args:
        filters: Mapping of field name to expected value(s)
        records: The collection to filter

    Returns:
        Matching records, in their original order
    """
    return [
        entry
        for entry in records
        if all(
            _matches(entry, field, expected)
            for field, expected in filters.items()
        )
    ]


def reduce_records(
    filters: Optional[Mapping[str, Any]],
    order: Optional[str],
    records: Sequence[Mapping[str, Any]],
) -> list:
    """
    Filter, then sort, a list of records.

    Either stage is skipped when its specifier is empty.

    Args:
        filters: The filters to apply
        order: The order to apply
        records: The list to reduce

    Returns:
        Reduced list of records
    """
    filtered = filter_objects(filters, records) if filters else list(records)
    if filters:
        logger.debug(
            "reduce_records kept %d of %d records", len(filtered), len(records)
        )
    return sort_objects(order, filtered) if order else filtered
