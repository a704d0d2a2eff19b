"""
Catalog Synchronizer

Fetches every product record, mirrors each product's images in order,
and writes the catalog snapshot.

Products and their images are processed strictly one at a time. Image
files are named by their 1-based position in the source list; a failed
image is dropped from the output and its slot is never reused.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..common.config_loader import SyncConfig
from ..common.constants import DEFAULT_PRODUCT_IMAGE_EXT, PRODUCT_FIELDS
from ..common.errors import RecoverableSyncError
from ..models import ProductSnapshot, SyncResult
from ..remote.source import RemoteSource
from ..storage.persistence import write_snapshot
from .asset_fetcher import AssetFetcher, product_image_path
from .sanitizer import project_record

logger = logging.getLogger(__name__)


class CatalogSynchronizer:
    """Produces the catalog snapshot from the remote source."""

    name = "catalog"

    def __init__(self, source: RemoteSource, fetcher: AssetFetcher, config: SyncConfig):
        self.source = source
        self.fetcher = fetcher
        self.config = config

    def run(self) -> SyncResult:
        """
        Run one catalog sync.

        Returns:
            SyncResult with per-image warnings

        Raises:
            RemoteQueryFailed: Products query failed
            PersistenceFailed: Snapshot could not be written
        """
        logger.info("Extracting products...")
        result = SyncResult(name=self.name, snapshot_path=str(self.config.products_path))

        products = self.source.list_products()

        if not products:
            logger.info("No products found, writing empty products file")
            write_snapshot([], self.config.products_path)
            return result

        snapshot: List[Dict[str, Any]] = []
        total = len(products)
        for i, product in enumerate(products, 1):
            logger.info("[%d/%d] Processing product: %s", i, total, product.get("name"))
            images = self._resolve_images(product, result)
            snapshot.append(self.build_snapshot_record(product, images))

        write_snapshot(snapshot, self.config.products_path)
        result.records = len(snapshot)

        logger.info("Extracted %d products successfully", len(snapshot))
        return result

    @staticmethod
    def build_snapshot_record(product: Dict[str, Any], images: List[str]) -> Dict[str, Any]:
        """Keep only the catalog fields, with images replaced by local references."""
        fields = project_record(product, PRODUCT_FIELDS)
        fields["images"] = list(images)
        return ProductSnapshot(**fields).to_dict()

    def _resolve_images(self, product: Dict[str, Any], result: SyncResult) -> List[str]:
        urls = product.get("images") or []
        if not isinstance(urls, list):
            logger.warning("  Product %s: images is not a list, skipping", product.get("id"))
            result.warnings.append(f"product {product.get('id')}: images field is not a list")
            return []

        product_id = product.get("id")
        resolved: List[str] = []

        for position, url in enumerate(urls, 1):
            if product_id is None or str(product_id) == "":
                reason = "product has no identifier"
                logger.warning("  Failed to download image %d: %s", position, reason)
                result.warnings.append(f"product {product.get('name')}: image {position} skipped ({reason})")
                result.assets_failed += 1
                continue

            dest = product_image_path(
                self.config.assets_root, product_id, position, url, DEFAULT_PRODUCT_IMAGE_EXT
            )
            try:
                stored = self.fetcher.fetch(url, dest)
            except RecoverableSyncError as e:
                logger.warning("  Failed to download image %d: %s", position, e)
                result.warnings.append(f"product {product_id}: image {position} unavailable ({e})")
                result.assets_failed += 1
                continue

            resolved.append(self.config.public_reference(stored))
            result.assets_downloaded += 1
            logger.info("  Downloaded image %d", position)

        return resolved
