"""Protocols for storage backends the serialized database flows through."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class StorageProviderError(RuntimeError):
    """A storage backend failed to sign out, read or write."""


class StorageId(str, Enum):
    """Kinds of storage backend."""

    LOCAL_DEVICE = "local-device"
    ONE_DRIVE = "onedrive"
    DROPBOX = "dropbox"
    GOOGLE_DRIVE = "google-drive"
    WEBDAV = "webdav"
    SFTP = "sftp"


@dataclass(frozen=True)
class ProviderAttributes:
    """Static description of how a storage backend behaves."""

    storage_id: StorageId
    provides_icons: bool = False
    browsable_new: bool = True
    browsable_existing: bool = True
    root_folder_only: bool = False
    immediately_offer_cache_if_offline: bool = False
    supports_concurrent_requests: bool = False


@runtime_checkable
class StorageProviderProtocol(Protocol):
    """Protocol for storage backends."""

    @property
    def attributes(self) -> ProviderAttributes:
        """Describe the backend."""
        ...

    def is_signed_in(self) -> bool:
        """Return True if the backend has a usable session."""
        ...

    def sign_out(self) -> Exception | None:
        """End the session. Returns None on success, or the error."""
        ...

    def read(self, file_ref: str) -> bytes:
        """Read the blob stored under file_ref."""
        ...

    def write(self, file_ref: str, data: bytes) -> bool:
        """Store data under file_ref. Returns True if stored bytes changed."""
        ...
