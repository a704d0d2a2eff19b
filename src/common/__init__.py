# Common utilities
from .config_loader import SyncConfig, load_config, load_sync_config
from .constants import (
    DEFAULT_STORE_SETTINGS,
    PRODUCT_FIELDS,
    SETTINGS_ASSET_FIELDS,
    SETTINGS_INTERNAL_FIELDS,
)
from .env_settings import EnvSettings, get_env_settings
from .log_config import setup_logging
from .errors import (
    AssetUnavailable,
    FatalSyncError,
    MalformedWritePayload,
    PersistenceFailed,
    RecoverableSyncError,
    RemoteQueryFailed,
    SyncError,
)
