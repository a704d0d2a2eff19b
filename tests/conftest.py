"""Shared test fixtures."""

import copy
from unittest.mock import MagicMock

import pytest

from src.common.config_loader import SyncConfig
from src.sync.asset_fetcher import AssetFetcher


def make_response(status_code: int = 200, body: bytes = b"\x89PNG fake image bytes"):
    """Build a streamed requests.Response stand-in."""
    response = MagicMock()
    response.status_code = status_code
    response.iter_content.return_value = [body]
    return response


class FakeSession:
    """
    Minimal requests.Session replacement.

    routes maps URL -> status code, (status code, body) or an exception
    instance to raise. Unknown URLs answer 404.
    """

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.requested = []
        self.closed = False

    def get(self, url, **kwargs):
        self.requested.append(url)
        route = self.routes.get(url, 404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, tuple):
            return make_response(*route)
        return make_response(route)

    def close(self):
        self.closed = True


class FakeSource:
    """In-memory RemoteSource."""

    def __init__(self, settings=None, products=None, settings_error=None, products_error=None):
        self.settings = settings
        self.products = products or []
        self.settings_error = settings_error
        self.products_error = products_error
        self.settings_calls = 0
        self.products_calls = 0

    def get_active_settings(self):
        self.settings_calls += 1
        if self.settings_error:
            raise self.settings_error
        return copy.deepcopy(self.settings)

    def list_products(self):
        self.products_calls += 1
        if self.products_error:
            raise self.products_error
        return copy.deepcopy(self.products)


@pytest.fixture
def sync_config(tmp_path):
    """SyncConfig rooted in a temporary project directory."""
    return SyncConfig(project_root=tmp_path)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def fetcher(sync_config, fake_session):
    """AssetFetcher over the temporary assets root with a fake session."""
    return AssetFetcher(sync_config.assets_root, session=fake_session, timeout=5)


@pytest.fixture
def remote_settings():
    """An active settings record as the remote source returns it."""
    return {
        "id": "6f1c2b1e-0000-4000-8000-000000000001",
        "store_name": "Corner Shop",
        "store_description": "Fresh goods daily",
        "currency": "EUR",
        "theme_primary_color": "#112233",
        "theme_secondary_color": "#445566",
        "theme_accent_color": "#778899",
        "logo_url": "https://cdn.example.com/brand/logo.svg",
        "logo_storage_path": "store/logo-123.svg",
        "favicon_url": "https://cdn.example.com/brand/favicon",
        "favicon_storage_path": "store/favicon-123",
        "is_active": True,
        "created_at": "2024-05-01T10:00:00+00:00",
        "updated_at": "2024-05-02T10:00:00+00:00",
    }


@pytest.fixture
def remote_products():
    """Two product records, newest first."""
    return [
        {
            "id": "p-200",
            "name": "Ceramic Mug",
            "description": "Stoneware mug, 350ml",
            "price": 12.5,
            "images": ["https://x/a.png", "https://x/missing"],
            "category": "Kitchen",
            "stock": 40,
            "created_at": "2024-06-02T00:00:00+00:00",
            "updated_at": "2024-06-03T00:00:00+00:00",
            "owner_id": "internal-user-7",
        },
        {
            "id": "p-100",
            "name": "Linen Towel",
            "description": "Natural linen",
            "price": 8,
            "images": [],
            "category": "Bath",
            "stock": 0,
            "created_at": "2024-06-01T00:00:00+00:00",
            "updated_at": "2024-06-01T00:00:00+00:00",
        },
    ]
