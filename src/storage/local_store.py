"""
Local Snapshot Store

Read side of the snapshot files, the way the storefront consumes them:
settings, all products, lookups by id/category, text search, categories.
Read errors are logged and reported as empty results.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .persistence import read_snapshot

logger = logging.getLogger(__name__)


class LocalSnapshotStore:
    """Query helpers over the committed settings and products snapshots."""

    def __init__(self, settings_path: str | Path, products_path: str | Path):
        self.settings_path = Path(settings_path)
        self.products_path = Path(products_path)

    def _load(self, path: Path, expected: type):
        try:
            value = read_snapshot(path)
        except FileNotFoundError:
            logger.debug("Snapshot not found: %s", path)
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading snapshot %s: %s", path, e)
            return None

        if not isinstance(value, expected):
            logger.error("Snapshot %s holds %s, expected %s", path, type(value).__name__, expected.__name__)
            return None
        return value

    def load_settings(self) -> Optional[Dict[str, Any]]:
        return self._load(self.settings_path, dict)

    def load_products(self) -> List[Dict[str, Any]]:
        products = self._load(self.products_path, list)
        if products is None:
            return []
        return [p for p in products if isinstance(p, dict)]

    def get_product(self, product_id) -> Optional[Dict[str, Any]]:
        for product in self.load_products():
            if product.get("id") == product_id:
                return product
        return None

    def products_by_category(self, category: str) -> List[Dict[str, Any]]:
        return [p for p in self.load_products() if p.get("category") == category]

    def search_products(self, query: str) -> List[Dict[str, Any]]:
        """Case-insensitive substring match on name or description."""
        needle = query.lower()
        return [
            p for p in self.load_products()
            if needle in (p.get("name") or "").lower()
            or needle in (p.get("description") or "").lower()
        ]

    def categories(self) -> List[str]:
        """Unique non-empty categories in first-seen order."""
        seen: List[str] = []
        for product in self.load_products():
            category = product.get("category")
            if category and category not in seen:
                seen.append(category)
        return seen
