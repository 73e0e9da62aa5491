"""
Storage Compatibility
=====================

Placeholder IndexedDB symbols for environments without a native indexed
storage API. Code that only checks for the *presence* of these names can
then run; nothing here stores anything.
"""

import logging
from types import SimpleNamespace
from typing import MutableMapping

logger = logging.getLogger(__name__)

IDB_SYMBOLS = (
    "IDBCursor",
    "IDBCursorWithValue",
    "IDBIndex",
    "IDBKeyRange",
    "IDBObjectStore",
    "IDBTransaction",
    "indexedDB",
)


def _open(*args, **kwargs) -> None:
    """No-op ``indexedDB.open``."""


def attach_fake_idb_symbols_to(env: MutableMapping) -> MutableMapping:
    """
    Attach placeholder IndexedDB symbols to a caller-owned environment.

    Nothing is attached when ``env`` already provides ``indexedDB``.

    Args:
        env: The environment mapping to augment (mutated in place)

    Returns:
        The same ``env`` mapping
    """
    if "indexedDB" in env:
        return env

    for name in IDB_SYMBOLS:
        env[name] = SimpleNamespace()
    env["indexedDB"] = SimpleNamespace(open=_open)

    logger.debug("Attached %d placeholder IDB symbols", len(IDB_SYMBOLS))
    return env
