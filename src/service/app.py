"""
Snapshot Write Service

Local HTTP endpoint the admin UI uses to push full replacement snapshots.
No remote fetch and no asset download: validate the payload shape, then
hand it to the same atomic persistence primitive the synchronizers use.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..common.errors import MalformedWritePayload, PersistenceFailed
from ..storage.persistence import write_snapshot

logger = logging.getLogger(__name__)


def validate_settings_payload(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise MalformedWritePayload(
            f"Store settings must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def validate_catalog_payload(payload: Any) -> list:
    if not isinstance(payload, list):
        raise MalformedWritePayload(
            f"Products must be a JSON array, got {type(payload).__name__}"
        )
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            raise MalformedWritePayload(
                f"Products[{i}] must be a JSON object, got {type(item).__name__}"
            )
    return payload


def _reject_constant(name: str):
    raise MalformedWritePayload(f"Request body is not valid JSON: {name} is not allowed")


async def _read_json(request: Request) -> Any:
    body = await request.body()
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedWritePayload(f"Request body is not valid JSON: {exc}") from exc


def create_app(settings_path: str | Path, products_path: str | Path) -> FastAPI:
    """
    Build the write service for the given snapshot files.

    Args:
        settings_path: Store settings snapshot file
        products_path: Products snapshot file
    """
    settings_path = Path(settings_path)
    products_path = Path(products_path)

    app = FastAPI(title="Snapshot Write Service", version="0.1.0")

    # The admin UI is served from another port
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MalformedWritePayload)
    async def malformed_payload_handler(request: Request, exc: MalformedWritePayload):
        logger.warning("Rejected %s: %s", request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    @app.get("/api/health")
    def healthcheck():
        return {"status": "OK", "message": "Sync API server is running"}

    @app.post("/api/update-store-settings")
    async def update_store_settings(request: Request):
        settings = validate_settings_payload(await _read_json(request))
        try:
            await run_in_threadpool(write_snapshot, settings, settings_path)
        except PersistenceFailed as e:
            logger.error("Error updating store settings: %s", e)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Failed to update store settings"},
            )
        logger.info("Store settings updated successfully")
        return {"success": True, "message": "Store settings updated successfully"}

    @app.post("/api/update-products")
    async def update_products(request: Request):
        products = validate_catalog_payload(await _read_json(request))
        try:
            await run_in_threadpool(write_snapshot, products, products_path)
        except PersistenceFailed as e:
            logger.error("Error updating products: %s", e)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Failed to update products"},
            )
        logger.info("Products updated successfully (%d products)", len(products))
        return {"success": True, "message": "Products updated successfully"}

    return app
