"""
Settings Synchronizer

Fetches the active store-settings record, mirrors its logo and favicon,
strips remote bookkeeping fields and writes the settings snapshot.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..common.config_loader import SyncConfig
from ..common.constants import (
    DEFAULT_STORE_SETTINGS,
    SETTINGS_ASSET_FIELDS,
    SETTINGS_INTERNAL_FIELDS,
)
from ..common.errors import RecoverableSyncError, RemoteQueryFailed
from ..models import SyncResult
from ..remote.source import RemoteSource
from ..storage.persistence import write_snapshot
from .asset_fetcher import AssetFetcher, store_asset_path
from .sanitizer import sanitize_record

logger = logging.getLogger(__name__)


class SettingsSynchronizer:
    """Produces the settings snapshot from the remote source."""

    name = "settings"

    def __init__(self, source: RemoteSource, fetcher: AssetFetcher, config: SyncConfig):
        self.source = source
        self.fetcher = fetcher
        self.config = config

    def run(self) -> SyncResult:
        """
        Run one settings sync.

        Returns:
            SyncResult with warnings for images that could not be mirrored

        Raises:
            RemoteQueryFailed: Settings query failed (or no record in strict mode)
            PersistenceFailed: Snapshot could not be written
        """
        logger.info("Extracting store settings...")
        result = SyncResult(name=self.name, snapshot_path=str(self.config.settings_path))

        record = self.source.get_active_settings()

        if record is None:
            if self.config.strict_settings:
                raise RemoteQueryFailed("No active store settings record found")
            logger.warning("No store settings found, writing default settings")
            result.warnings.append("settings: no active record, default settings written")
            result.used_default = True
            snapshot = dict(DEFAULT_STORE_SETTINGS)
        else:
            record = dict(record)
            self._resolve_images(record, result)
            snapshot = sanitize_record(record, SETTINGS_INTERNAL_FIELDS)

        write_snapshot(snapshot, self.config.settings_path)
        result.records = 1

        logger.info("Store settings extracted successfully")
        return result

    def _resolve_images(self, record: Dict[str, Any], result: SyncResult) -> None:
        """Replace logo/favicon URLs with local references; None where a download fails."""
        for field, stem, default_ext in SETTINGS_ASSET_FIELDS:
            url = record.get(field)
            if url is None:
                continue

            dest = store_asset_path(self.config.assets_root, stem, url, default_ext)
            try:
                stored = self.fetcher.fetch(url, dest)
            except RecoverableSyncError as e:
                logger.warning("Failed to download %s: %s", stem, e)
                result.warnings.append(f"settings: {stem} unavailable ({e})")
                result.assets_failed += 1
                record[field] = None
                continue

            record[field] = self.config.public_reference(stored)
            result.assets_downloaded += 1
            logger.info("Downloaded %s", stem)
