"""
Snapshot write service.

Modules:
    app - FastAPI application factory (create_app) and payload validators
"""

from .app import create_app, validate_catalog_payload, validate_settings_payload

__all__ = [
    'create_app',
    'validate_settings_payload',
    'validate_catalog_payload',
]
