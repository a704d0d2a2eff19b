"""
Sync Orchestrator

Runs the settings synchronizer, then the catalog synchronizer, and turns
the outcome into a printed summary and a process exit status.

Default behavior is fail-fast: a fatal error in the settings step stops
the run before the catalog step starts. keep_going=True treats the two
steps as independent and attempts both.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Callable, List, Optional

from ..common.config_loader import SyncConfig
from ..common.errors import FatalSyncError
from ..models import SyncRunReport
from ..remote.source import RemoteSource
from .asset_fetcher import AssetFetcher
from .catalog_sync import CatalogSynchronizer
from .settings_sync import SettingsSynchronizer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2


class SyncOrchestrator:
    """
    Sequential runner for the two synchronizers.

    Usage:
        orchestrator = SyncOrchestrator(source, config)
        report = orchestrator.run()
        orchestrator.print_summary(report)
        sys.exit(0 if report.ok else 1)
    """

    def __init__(
        self,
        source: RemoteSource,
        config: SyncConfig,
        fetcher: Optional[AssetFetcher] = None,
        keep_going: bool = False,
    ):
        self.source = source
        self.config = config
        self.keep_going = keep_going
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or AssetFetcher(config.assets_root, timeout=config.request_timeout)
        self.start_time: Optional[datetime] = None

    def steps(self) -> List:
        return [
            SettingsSynchronizer(self.source, self.fetcher, self.config),
            CatalogSynchronizer(self.source, self.fetcher, self.config),
        ]

    def run(self) -> SyncRunReport:
        """Run both steps in order and collect their outcome."""
        self.start_time = datetime.now()
        report = SyncRunReport()
        steps = self.steps()

        logger.info("Starting data extraction...")
        try:
            for i, step in enumerate(steps):
                try:
                    report.results.append(step.run())
                except FatalSyncError as e:
                    logger.error("Error extracting %s: %s", step.name, e)
                    report.failures.append((step.name, str(e)))
                    if not self.keep_going:
                        report.skipped.extend(s.name for s in steps[i + 1:])
                        break
        finally:
            if self._owns_fetcher:
                self.fetcher.close()

        return report

    def print_summary(self, report: SyncRunReport) -> None:
        """Print the run summary: stdout on success, stderr on failure."""
        elapsed = (datetime.now() - self.start_time).total_seconds() if self.start_time else 0.0

        if not report.ok:
            print("\n❌ Data extraction failed!", file=sys.stderr)
            for step, message in report.failures:
                print(f"   {step}: {message}", file=sys.stderr)
            for step in report.skipped:
                print(f"   {step}: not attempted", file=sys.stderr)
            print("   Previous snapshot files were left untouched.", file=sys.stderr)
            return

        warnings = report.warnings
        if warnings:
            print(f"\n✅ Data extraction completed with {len(warnings)} warning(s)")
        else:
            print("\n✅ Data extraction completed successfully!")

        print("\n" + "=" * 60)
        print("Extraction Summary")
        print("=" * 60)
        for result in report.results:
            print(f"\n  {result.name.capitalize()}:")
            print(f"     Records written:    {result.records}")
            print(f"     Assets downloaded:  {result.assets_downloaded}")
            print(f"     Assets failed:      {result.assets_failed}")
            if result.used_default:
                print("     Default settings:   YES (no active record)")
            print(f"     Snapshot:           {result.snapshot_path}")
        if warnings:
            print("\n  Warnings:")
            for warning in warnings:
                print(f"     - {warning}")
        print(f"\n  Time elapsed: {elapsed:.1f} seconds")
        print("=" * 60)

        print("\nNext steps:")
        print(f"1. Review the extracted data in {self.config.data_dir}/")
        print(f"2. Check downloaded images in {self.config.assets_dir}/")
        print("3. Point the storefront at the local snapshot files")


def run_sync(
    config: SyncConfig,
    source_factory: Callable[[], RemoteSource],
    keep_going: bool = False,
    fetcher: Optional[AssetFetcher] = None,
) -> int:
    """
    Build the source, run the orchestrator, print the summary.

    Returns:
        Process exit status (0 ok, 1 run failure, 2 configuration error)
    """
    try:
        source = source_factory()
    except RuntimeError as e:
        logger.error("Configuration error: %s", e)
        print(f"\n❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    orchestrator = SyncOrchestrator(source, config, fetcher=fetcher, keep_going=keep_going)
    report = orchestrator.run()
    orchestrator.print_summary(report)
    return EXIT_OK if report.ok else EXIT_FAILED
