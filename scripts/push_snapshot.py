#!/usr/bin/env python3
"""
Push a snapshot file to a running write service.

Usage:
    python3 scripts/push_snapshot.py --settings edited-settings.json
    python3 scripts/push_snapshot.py --products products.json --url http://localhost:3001
"""

import argparse
import json
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.log_config import setup_logging
from src.remote import SnapshotServiceClient

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Push a full snapshot to the write service")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--settings", help="JSON file with the store settings object")
    group.add_argument("--products", help="JSON file with the products array")
    parser.add_argument("--url", default="http://localhost:3001", help="Service base URL")
    args = parser.parse_args()

    setup_logging()

    path = args.settings or args.products
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        sys.exit(1)

    with SnapshotServiceClient(args.url) as client:
        if not client.health():
            print(f"❌ Write service not reachable at {args.url}")
            sys.exit(1)
        ok = client.push_settings(payload) if args.settings else client.push_products(payload)

    print("✅ Snapshot updated" if ok else "❌ Snapshot update failed")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
