"""
Configuration Loader

Loads YAML configuration files and builds the pipeline's SyncConfig
(snapshot locations, assets directory, download timeout).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'sync.yaml') or a path to one

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    candidate = Path(filename)
    if candidate.is_absolute() or candidate.exists():
        config_path = candidate
    else:
        config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@dataclass
class SyncConfig:
    """
    Locations and knobs for one sync run.

    All relative directories are resolved against project_root, which is
    also the root that local asset references are rendered relative to.
    """
    project_root: Path = field(default_factory=Path.cwd)
    data_dir: str = "src/assets/data"
    assets_dir: str = "src/assets/images"
    settings_file: str = "store-settings.json"
    products_file: str = "products.json"
    request_timeout: float = 30.0
    strict_settings: bool = False

    def __post_init__(self):
        self.project_root = Path(self.project_root)

    @property
    def settings_path(self) -> Path:
        return self.project_root / self.data_dir / self.settings_file

    @property
    def products_path(self) -> Path:
        return self.project_root / self.data_dir / self.products_file

    @property
    def assets_root(self) -> Path:
        return self.project_root / self.assets_dir

    def public_reference(self, path: Path) -> str:
        """
        Render a stored asset path as the reference written into snapshots.

        Example:
            <root>/src/assets/images/store/logo.png -> /src/assets/images/store/logo.png
        """
        relative = Path(path).resolve().relative_to(self.project_root.resolve())
        return "/" + relative.as_posix()


def load_sync_config(
    filename: str = "sync.yaml",
    project_root: Optional[str] = None,
) -> SyncConfig:
    """
    Load the pipeline configuration.

    Args:
        filename: Config file name in the config directory, or a path
        project_root: Overrides the configured project root

    Returns:
        SyncConfig with defaults applied for missing keys
    """
    config = load_config(filename).get('sync', {})

    kwargs: Dict[str, Any] = {}
    for key in ('data_dir', 'assets_dir', 'settings_file', 'products_file'):
        if config.get(key):
            kwargs[key] = str(config[key])
    if config.get('request_timeout') is not None:
        kwargs['request_timeout'] = float(config['request_timeout'])
    if config.get('strict_settings') is not None:
        kwargs['strict_settings'] = bool(config['strict_settings'])

    root = project_root or config.get('project_root')
    if root:
        kwargs['project_root'] = Path(root)

    return SyncConfig(**kwargs)
