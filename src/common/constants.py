"""
Shared constants for the sync pipeline.

Field lists and the fallback settings record have a single source of truth here.
"""

# Written when the remote source has no active settings record
DEFAULT_STORE_SETTINGS = {
    "store_name": "Jolly Store",
    "store_description": "Your amazing online store",
    "currency": "USD",
    "theme_primary_color": "#3b82f6",
    "theme_secondary_color": "#64748b",
    "theme_accent_color": "#f59e0b",
}

# Bookkeeping columns of the remote store_settings table
SETTINGS_INTERNAL_FIELDS = (
    "id",
    "created_at",
    "updated_at",
    "is_active",
    "logo_storage_path",
    "favicon_storage_path",
)

# (record field, local file stem, default extension)
SETTINGS_ASSET_FIELDS = (
    ("logo_url", "logo", ".png"),
    ("favicon_url", "favicon", ".ico"),
)

# Product snapshot fields, in output order
PRODUCT_FIELDS = (
    "id",
    "name",
    "description",
    "price",
    "images",
    "category",
    "stock",
    "created_at",
    "updated_at",
)

DEFAULT_PRODUCT_IMAGE_EXT = ".jpg"
