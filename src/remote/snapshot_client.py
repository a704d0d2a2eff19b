"""
Snapshot Service Client

Pushes full replacement snapshots to a running write service. A push that
fails is logged and reported as False, never raised: the caller's own
change has already succeeded and the local files can be resynced later.
"""

import logging
from typing import Any, Dict, List
from urllib.parse import urljoin

import requests

logger = logging.getLogger(__name__)


class SnapshotServiceClient:
    """
    Client for the snapshot write service.

    Usage:
        with SnapshotServiceClient("http://localhost:3001") as client:
            if client.health():
                client.push_products(products)
    """

    SETTINGS_ENDPOINT = "api/update-store-settings"
    PRODUCTS_ENDPOINT = "api/update-products"
    HEALTH_ENDPOINT = "api/health"

    def __init__(self, base_url: str = "http://localhost:3001", timeout: int = 10):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _post(self, endpoint: str, payload: Any) -> bool:
        url = urljoin(self.base_url, endpoint)
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Could not update local file (API not available): %s", e)
            return False

        if response.status_code >= 400:
            logger.warning("API call failed: %d %s", response.status_code, response.text[:200])
            return False
        return True

    def push_settings(self, settings: Dict[str, Any]) -> bool:
        ok = self._post(self.SETTINGS_ENDPOINT, settings)
        if ok:
            logger.info("Local store settings file updated successfully")
        return ok

    def push_products(self, products: List[Dict[str, Any]]) -> bool:
        ok = self._post(self.PRODUCTS_ENDPOINT, products)
        if ok:
            logger.info("Local products file updated successfully (%d products)", len(products))
        return ok

    def health(self) -> bool:
        """Return True if the service answers its health check."""
        try:
            response = self.session.get(urljoin(self.base_url, self.HEALTH_ENDPOINT), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Health check failed: %s", e)
            return False
        return response.status_code == 200
