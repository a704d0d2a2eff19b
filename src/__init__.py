"""
Storefront Content Sync Tool

Modules:
    models      - Data models (ProductSnapshot, SyncResult, SyncRunReport)
    common      - Shared utilities (config loader, environment settings, logging)
    remote      - Remote source interface, Supabase source, write-service client
    storage     - Atomic snapshot persistence and the local read-side store
    sync        - Asset fetching, sanitization, settings/catalog synchronizers
    service     - Snapshot write service (FastAPI)
"""
