"""
Remote collaborators.

Modules:
    source - RemoteSource interface consumed by the synchronizers
    supabase_source - SupabaseSource and client factory
    snapshot_client - SnapshotServiceClient for the write service
"""

from .source import RemoteSource
from .supabase_source import SupabaseSource, create_supabase_client
from .snapshot_client import SnapshotServiceClient

__all__ = [
    'RemoteSource',
    'SupabaseSource',
    'create_supabase_client',
    'SnapshotServiceClient',
]
