"""
Content synchronization modules.

Modules:
    asset_fetcher - AssetFetcher and asset path helpers
    sanitizer - sanitize_record / project_record (pure)
    settings_sync - SettingsSynchronizer for the store settings snapshot
    catalog_sync - CatalogSynchronizer for the products snapshot
    orchestrator - SyncOrchestrator and the run_sync entry point
"""

from .asset_fetcher import (
    AssetFetcher,
    asset_extension,
    product_image_path,
    store_asset_path,
)
from .sanitizer import project_record, sanitize_record
from .settings_sync import SettingsSynchronizer
from .catalog_sync import CatalogSynchronizer
from .orchestrator import SyncOrchestrator, run_sync

__all__ = [
    # Asset fetching
    'AssetFetcher',
    'asset_extension',
    'product_image_path',
    'store_asset_path',
    # Sanitization
    'sanitize_record',
    'project_record',
    # Synchronizers
    'SettingsSynchronizer',
    'CatalogSynchronizer',
    # Orchestration
    'SyncOrchestrator',
    'run_sync',
]
