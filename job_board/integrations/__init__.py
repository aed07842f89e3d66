"""
Data store integrations for job board records.
"""

from .base import COLLECTIONS, DataStore, DataStoreError
from .memory import InMemoryStore
from .local import LocalStore
from .supabase import SupabaseStore

__all__ = [
    "COLLECTIONS",
    "DataStore",
    "DataStoreError",
    "InMemoryStore",
    "LocalStore",
    "SupabaseStore",
    "create_store",
]


def create_store(config) -> DataStore:
    """
    Create the data store named by the ``store.backend`` config value.

    Args:
        config: Config instance

    Returns:
        A ready DataStore
    """
    backend = (config.get("store.backend", "local") or "").strip().lower()

    if backend == "memory":
        return InMemoryStore()
    if backend == "local":
        return LocalStore(config.get_data_dir())
    if backend == "supabase":
        return SupabaseStore(
            url=config.get_store_url(),
            api_key=config.get_api_key("supabase"),
            timeout=config.get("store.timeout", SupabaseStore.DEFAULT_TIMEOUT),
        )

    raise ValueError(f"Unknown store backend: {backend!r}. Use 'memory', 'local' or 'supabase'.")
