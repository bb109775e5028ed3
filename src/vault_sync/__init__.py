"""Minimal attachment/icon pools and storage sync for password databases."""

from vault_sync.core.pool.attachments import get_minimal_attachment_pool
from vault_sync.core.pool.compact import compact_database
from vault_sync.core.pool.icons import get_minimal_icon_pool
from vault_sync.protocols import StorageProviderError, StorageProviderProtocol
from vault_sync.storage.local import LocalStorageProvider

__all__ = [
    "LocalStorageProvider",
    "StorageProviderError",
    "StorageProviderProtocol",
    "compact_database",
    "get_minimal_attachment_pool",
    "get_minimal_icon_pool",
]
