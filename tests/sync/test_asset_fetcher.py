"""Tests for src/sync/asset_fetcher.py"""

import os
import stat

import pytest
import requests

from src.common.errors import AssetUnavailable, RecoverableSyncError
from src.sync.asset_fetcher import (
    AssetFetcher,
    asset_extension,
    product_image_path,
    store_asset_path,
)


class TestAssetExtension:
    def test_uses_path_suffix(self):
        assert asset_extension("https://cdn.example.com/a/logo.svg", ".png") == ".svg"

    def test_ignores_query_string(self):
        assert asset_extension("https://cdn.example.com/a/logo.webp?v=3", ".png") == ".webp"

    def test_default_when_no_suffix(self):
        assert asset_extension("https://x/missing", ".jpg") == ".jpg"

    def test_default_for_dotfile(self):
        assert asset_extension("https://x/.hidden", ".jpg") == ".jpg"

    def test_default_for_non_string(self):
        assert asset_extension(None, ".ico") == ".ico"

    def test_default_for_unparseable_host(self):
        assert asset_extension("http://[broken/logo.png", ".png") == ".png"


class TestAssetPaths:
    def test_store_asset_path(self, tmp_path):
        path = store_asset_path(tmp_path, "favicon", "https://x/favicon", ".ico")
        assert path == tmp_path / "store" / "favicon.ico"

    def test_product_image_path_is_one_based(self, tmp_path):
        path = product_image_path(tmp_path, "p-1", 1, "https://x/a.png")
        assert path == tmp_path / "products" / "p-1" / "image-1.png"

    def test_product_image_path_default_extension(self, tmp_path):
        path = product_image_path(tmp_path, 42, 3, "https://x/raw")
        assert path == tmp_path / "products" / "42" / "image-3.jpg"


class TestFetch:
    def test_successful_download(self, fetcher, fake_session, sync_config):
        fake_session.routes["https://x/a.png"] = (200, b"image-bytes")
        dest = sync_config.assets_root / "store" / "logo.png"

        result = fetcher.fetch("https://x/a.png", dest)

        assert result == dest.resolve()
        assert dest.read_bytes() == b"image-bytes"
        assert fetcher.downloaded == 1

    def test_creates_parent_directories(self, fetcher, fake_session, sync_config):
        fake_session.routes["https://x/a.png"] = 200
        dest = sync_config.assets_root / "products" / "p-1" / "image-1.png"

        fetcher.fetch("https://x/a.png", dest)

        assert dest.exists()

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_downloaded_file_honours_umask(self, fetcher, fake_session, sync_config):
        fake_session.routes["https://x/a.png"] = 200
        dest = sync_config.assets_root / "store" / "logo.png"

        old = os.umask(0o022)
        try:
            fetcher.fetch("https://x/a.png", dest)
        finally:
            os.umask(old)

        assert stat.S_IMODE(dest.stat().st_mode) == 0o644

    def test_non_2xx_raises(self, fetcher, fake_session, sync_config):
        fake_session.routes["https://x/a.png"] = 404
        dest = sync_config.assets_root / "store" / "logo.png"

        with pytest.raises(AssetUnavailable, match="HTTP 404"):
            fetcher.fetch("https://x/a.png", dest)

        assert not dest.exists()
        assert fetcher.failed == 1

    def test_asset_unavailable_is_recoverable(self):
        assert issubclass(AssetUnavailable, RecoverableSyncError)

    def test_network_error_raises(self, fetcher, fake_session, sync_config):
        fake_session.routes["https://x/a.png"] = requests.exceptions.ConnectionError("refused")
        dest = sync_config.assets_root / "store" / "logo.png"

        with pytest.raises(AssetUnavailable, match="ConnectionError"):
            fetcher.fetch("https://x/a.png", dest)

        assert not dest.exists()

    def test_failure_removes_previous_file(self, fetcher, fake_session, sync_config):
        dest = sync_config.assets_root / "store" / "logo.png"
        dest.parent.mkdir(parents=True)
        dest.write_bytes(b"old")
        fake_session.routes["https://x/a.png"] = 500

        with pytest.raises(AssetUnavailable):
            fetcher.fetch("https://x/a.png", dest)

        assert not dest.exists()

    def test_no_partial_file_on_stream_error(self, fetcher, fake_session, sync_config):
        from conftest import make_response

        response = make_response(200)
        response.iter_content.side_effect = requests.exceptions.ChunkedEncodingError("cut")
        fake_session.get = lambda url, **kwargs: response
        dest = sync_config.assets_root / "store" / "logo.png"

        with pytest.raises(AssetUnavailable):
            fetcher.fetch("https://x/a.png", dest)

        assert not dest.exists()
        assert list(dest.parent.iterdir()) == []
        response.close.assert_called_once()

    @pytest.mark.parametrize("url", ["", "   ", "ftp://x/a.png", "not a url", "/relative/a.png", None, "https://[x/a.png"])
    def test_rejects_bad_urls_without_request(self, fetcher, fake_session, sync_config, url):
        dest = sync_config.assets_root / "store" / "logo.png"

        with pytest.raises(AssetUnavailable):
            fetcher.fetch(url, dest)

        assert fake_session.requested == []

    def test_rejects_destination_outside_root(self, fetcher, fake_session, tmp_path):
        outside = tmp_path / "elsewhere" / "logo.png"

        with pytest.raises(AssetUnavailable, match="outside"):
            fetcher.fetch("https://x/a.png", outside)

        assert fake_session.requested == []

    def test_rejects_traversal_in_destination(self, fetcher, sync_config):
        dest = sync_config.assets_root / "products" / ".." / ".." / "escape.png"

        with pytest.raises(AssetUnavailable):
            fetcher.fetch("https://x/a.png", dest)

    def test_passes_timeout_and_streams(self, sync_config):
        from unittest.mock import MagicMock

        from conftest import make_response

        session = MagicMock()
        session.get.return_value = make_response(200)
        fetcher = AssetFetcher(sync_config.assets_root, session=session, timeout=7)

        fetcher.fetch("https://x/a.png", sync_config.assets_root / "store" / "logo.png")

        session.get.assert_called_once_with("https://x/a.png", stream=True, timeout=7)


class TestSessionOwnership:
    def test_borrowed_session_not_closed(self, fetcher, fake_session):
        fetcher.close()
        assert fake_session.closed is False

    def test_creates_session_when_none_given(self, tmp_path):
        with AssetFetcher(tmp_path) as fetcher:
            assert isinstance(fetcher.session, requests.Session)
