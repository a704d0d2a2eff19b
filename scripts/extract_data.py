#!/usr/bin/env python3
"""
Data Extraction Script

Migrates store settings and the product catalog from Supabase into local
JSON snapshots, mirroring every referenced image under the assets directory.

Features:
- Settings first, then catalog (fail-fast unless --keep-going)
- Unreachable images are skipped with a warning, never fatal
- Snapshots are replaced atomically; a failed run leaves the old files intact

Environment:
    SUPABASE_URL / SUPABASE_KEY (or VITE_SUPABASE_URL / VITE_SUPABASE_ANON_KEY)

Usage:
    python3 scripts/extract_data.py
    python3 scripts/extract_data.py --project-root ../storefront
    python3 scripts/extract_data.py --keep-going --verbose
"""

import argparse
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.config_loader import load_sync_config
from src.common.env_settings import get_env_settings
from src.common.log_config import setup_logging
from src.remote import SupabaseSource, create_supabase_client
from src.sync import run_sync
from src.sync.orchestrator import EXIT_CONFIG_ERROR

logger = logging.getLogger(__name__)


def build_source() -> SupabaseSource:
    return SupabaseSource(create_supabase_client(get_env_settings()))


def main():
    parser = argparse.ArgumentParser(
        description="Extract store settings and products from Supabase to local JSON"
    )
    parser.add_argument(
        "--config", "-c",
        default="sync.yaml",
        help="Config file name in config/ or a path (default: sync.yaml)"
    )
    parser.add_argument(
        "--project-root", "-r",
        help="Directory the snapshot and asset paths are relative to (default: cwd)"
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Attempt the catalog step even if the settings step fails"
    )
    parser.add_argument(
        "--strict-settings",
        action="store_true",
        help="Fail instead of writing default settings when no active record exists"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_sync_config(args.config, project_root=args.project_root)
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(EXIT_CONFIG_ERROR)

    if args.strict_settings:
        config.strict_settings = True

    print("=" * 60)
    print("Data Extraction")
    print("=" * 60)
    print(f"  Project root:     {config.project_root}")
    print(f"  Settings file:    {config.settings_path}")
    print(f"  Products file:    {config.products_path}")
    print(f"  Assets dir:       {config.assets_root}")
    print(f"  Keep going:       {args.keep_going}")

    sys.exit(run_sync(config, build_source, keep_going=args.keep_going))


if __name__ == "__main__":
    main()
