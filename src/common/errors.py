"""
Sync error taxonomy.

Two families that callers must not confuse:

- RecoverableSyncError: a single item (one image) could not be resolved.
  The synchronizer drops that item, records a warning and carries on.
- FatalSyncError: the run cannot produce a trustworthy snapshot (remote
  query or snapshot write failed). It propagates to the orchestrator.

MalformedWritePayload belongs to the write service and maps to HTTP 400.
"""


class SyncError(Exception):
    """Base class for all pipeline errors."""


class RecoverableSyncError(SyncError):
    """Per-item failure; the affected item is dropped."""


class FatalSyncError(SyncError):
    """Per-run failure; aborts the synchronizer that raised it."""


class AssetUnavailable(RecoverableSyncError):
    """A single asset could not be downloaded."""

    def __init__(self, url, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class RemoteQueryFailed(FatalSyncError):
    """A settings or products query against the remote source failed."""


class PersistenceFailed(FatalSyncError):
    """A snapshot could not be written; the previous file is left intact."""


class MalformedWritePayload(SyncError):
    """The write service received a payload of the wrong shape."""
