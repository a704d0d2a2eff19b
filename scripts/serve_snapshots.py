#!/usr/bin/env python3
"""
Snapshot Write Service

Runs the local API the admin UI calls to write settings/products snapshots.

Usage:
    python3 scripts/serve_snapshots.py
    python3 scripts/serve_snapshots.py --port 3001 --project-root ../storefront
"""

import argparse
import logging
import os
import sys

import uvicorn

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.config_loader import load_sync_config
from src.common.log_config import setup_logging
from src.service import create_app

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Serve the snapshot write API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", "-p", type=int, default=3001, help="Port (default: 3001)")
    parser.add_argument("--config", "-c", default="sync.yaml", help="Config file (default: sync.yaml)")
    parser.add_argument("--project-root", "-r", help="Snapshot root directory (default: cwd)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (debug) logging")
    args = parser.parse_args()

    setup_logging(verbose=args.verbose)

    try:
        config = load_sync_config(args.config, project_root=args.project_root)
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(2)

    app = create_app(config.settings_path, config.products_path)

    print(f"🚀 Sync API server running on http://{args.host}:{args.port}")
    print(f"📁 Writing snapshots to {config.settings_path.parent}")
    uvicorn.run(app, host=args.host, port=args.port, log_level="debug" if args.verbose else "info")


if __name__ == "__main__":
    main()
