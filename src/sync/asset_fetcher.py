"""
Asset Fetcher

Downloads a single binary resource (logo, favicon, product image) to a path
under the assets root. Knows nothing about records.

The body is streamed into a temporary file next to the destination and
renamed into place only once complete, so a failed download never leaves a
partial file behind. Failures raise AssetUnavailable; there are no retries
here, retry policy belongs to the caller.
"""

from __future__ import annotations

import logging
import os
import posixpath
import tempfile
from pathlib import Path
from urllib.parse import urlparse

import requests

from ..common.errors import AssetUnavailable
from ..storage.persistence import apply_default_mode

logger = logging.getLogger(__name__)


def asset_extension(url: str, default: str) -> str:
    """
    Extension of the URL path component, or default when it has none.

    Examples:
        https://cdn.example.com/a/logo.svg?v=3 -> .svg
        https://cdn.example.com/a/missing      -> default
    """
    try:
        path = urlparse(url).path if isinstance(url, str) else ""
    except ValueError:
        return default
    ext = posixpath.splitext(posixpath.basename(path))[1]
    return ext or default


def store_asset_path(assets_root: str | Path, stem: str, url: str, default_ext: str) -> Path:
    """Path for a settings image, e.g. <root>/store/logo.png"""
    return Path(assets_root) / "store" / f"{stem}{asset_extension(url, default_ext)}"


def product_image_path(
    assets_root: str | Path,
    product_id,
    position: int,
    url: str,
    default_ext: str = ".jpg",
) -> Path:
    """Path for a product image, e.g. <root>/products/<id>/image-1.jpg (1-based position)."""
    name = f"image-{position}{asset_extension(url, default_ext)}"
    return Path(assets_root) / "products" / str(product_id) / name


class AssetFetcher:
    """
    Single-asset downloader confined to an assets root.

    Usage:
        with AssetFetcher("src/assets/images") as fetcher:
            fetcher.fetch("https://cdn.example.com/logo.png", dest)
    """

    ALLOWED_SCHEMES = {"http", "https"}
    CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        assets_root: str | Path,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ):
        """
        Initialize the fetcher.

        Args:
            assets_root: Every destination must resolve under this directory
            session: Shared session for connection reuse (created if omitted)
            timeout: Per-request timeout in seconds
        """
        self.assets_root = Path(assets_root)
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

        self.downloaded = 0
        self.failed = 0

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        if self._owns_session:
            self.session.close()

    def _check_destination(self, url, destination: str | Path) -> Path:
        root = self.assets_root.resolve()
        dest = Path(destination).resolve()
        if dest == root or root not in dest.parents:
            raise AssetUnavailable(url, f"destination {destination} is outside {self.assets_root}")
        return dest

    def _check_url(self, url) -> None:
        if not isinstance(url, str) or not url.strip():
            raise AssetUnavailable(url, "empty or non-string URL")
        try:
            parsed = urlparse(url.strip())
        except ValueError as e:
            raise AssetUnavailable(url, f"malformed URL: {e}") from e
        if parsed.scheme.lower() not in self.ALLOWED_SCHEMES or not parsed.netloc:
            raise AssetUnavailable(url, "not an http(s) URL")

    def fetch(self, url: str, destination: str | Path) -> Path:
        """
        Download url to destination.

        Args:
            url: http or https URL of the resource
            destination: File path under the assets root

        Returns:
            Resolved destination path (file exists and is complete)

        Raises:
            AssetUnavailable: Bad URL, non-2xx status, transfer or write error.
                The destination file does not exist afterwards.
        """
        try:
            dest = self._check_destination(url, destination)
        except AssetUnavailable:
            self.failed += 1
            raise

        tmp_name = None
        try:
            self._check_url(url)
            dest.parent.mkdir(parents=True, exist_ok=True)

            response = self.session.get(url.strip(), stream=True, timeout=self.timeout)
            try:
                if not 200 <= response.status_code < 300:
                    raise AssetUnavailable(url, f"HTTP {response.status_code}")

                with tempfile.NamedTemporaryFile(
                    "wb", dir=dest.parent, prefix=f".{dest.name}.", suffix=".part", delete=False
                ) as tmp:
                    tmp_name = tmp.name
                    for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                        if chunk:
                            tmp.write(chunk)
            finally:
                response.close()

            apply_default_mode(tmp_name)
            os.replace(tmp_name, dest)
            tmp_name = None

        except AssetUnavailable:
            self.failed += 1
            self._discard(dest)
            raise
        except (requests.RequestException, OSError) as e:
            self.failed += 1
            self._discard(dest)
            raise AssetUnavailable(url, f"{type(e).__name__}: {str(e)[:100]}") from e
        finally:
            if tmp_name is not None:
                self._discard(Path(tmp_name))

        self.downloaded += 1
        logger.debug("Downloaded %s -> %s", url, dest)
        return dest

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove %s: %s", path, e)
