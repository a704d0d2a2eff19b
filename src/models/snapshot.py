"""
Snapshot data models.

Pure data classes for the catalog snapshot entries and sync run bookkeeping.
No business logic - only data structure definitions.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class ProductSnapshot:
    """
    One catalog entry as written to the products snapshot.

    Field order is the serialized key order. `images` holds local asset
    references for the downloads that succeeded, in source order.
    """
    id: Any
    name: Optional[str] = None
    description: Optional[str] = None
    price: Any = None
    images: List[str] = field(default_factory=list)
    category: Optional[str] = None
    stock: Any = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SyncResult:
    """Outcome of one successful synchronizer run."""
    name: str
    snapshot_path: str
    records: int = 0
    assets_downloaded: int = 0
    assets_failed: int = 0
    used_default: bool = False
    warnings: List[str] = field(default_factory=list)


@dataclass
class SyncRunReport:
    """Aggregated outcome of an orchestrator run."""
    results: List[SyncResult] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)  # (step, message)
    skipped: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def warnings(self) -> List[str]:
        return [w for result in self.results for w in result.warnings]
