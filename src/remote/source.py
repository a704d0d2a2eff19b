"""
Remote source interface.

Synchronizers depend only on these two queries, so the concrete remote
system can be swapped without touching synchronizer logic.
"""

from typing import Any, Dict, List, Optional, Protocol


class RemoteSource(Protocol):
    """Read-only query surface the synchronizers consume."""

    def get_active_settings(self) -> Optional[Dict[str, Any]]:
        """
        Most recently created active settings record, or None if there is none.

        Raises:
            RemoteQueryFailed: If the query could not complete
        """
        ...

    def list_products(self) -> List[Dict[str, Any]]:
        """
        All product records, most recently created first.

        Raises:
            RemoteQueryFailed: If the query could not complete
        """
        ...
