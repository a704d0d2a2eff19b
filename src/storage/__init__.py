"""
Snapshot storage.

Modules:
    persistence - Atomic JSON snapshot write/read
    local_store - LocalSnapshotStore read-side queries
"""

from .persistence import read_snapshot, serialize_snapshot, write_snapshot
from .local_store import LocalSnapshotStore

__all__ = [
    'write_snapshot',
    'read_snapshot',
    'serialize_snapshot',
    'LocalSnapshotStore',
]
