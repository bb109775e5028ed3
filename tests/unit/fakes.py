"""Fake implementations and sample identifiers for tests."""

from uuid import UUID

from vault_sync.protocols import ProviderAttributes, StorageId, StorageProviderError

ICON_1 = UUID("11111111-1111-1111-1111-111111111111")
ICON_2 = UUID("22222222-2222-2222-2222-222222222222")
ICON_ORPHAN = UUID("33333333-3333-3333-3333-333333333333")


def make_uuid(n: int) -> UUID:
    """Deterministic uuid for node number n."""
    return UUID(int=n)


class FakeStorageProvider:
    """In-memory fake for a remote storage backend.

    Stores blobs in a dict and records all writes for assertions.
    """

    attributes = ProviderAttributes(
        storage_id=StorageId.ONE_DRIVE,
        provides_icons=True,
        immediately_offer_cache_if_offline=True,
    )

    def __init__(self, *, signed_in: bool = True, sign_out_error: Exception | None = None) -> None:
        self.files: dict[str, bytes] = {}
        self.writes: list[str] = []
        self.signed_in = signed_in
        self.sign_out_error = sign_out_error

    def is_signed_in(self) -> bool:
        return self.signed_in

    def sign_out(self) -> Exception | None:
        if self.sign_out_error is not None:
            return self.sign_out_error
        self.signed_in = False
        return None

    def read(self, file_ref: str) -> bytes:
        if file_ref not in self.files:
            msg = f"FakeStorageProvider: no file {file_ref!r}"
            raise StorageProviderError(msg)
        return self.files[file_ref]

    def write(self, file_ref: str, data: bytes) -> bool:
        self.writes.append(file_ref)
        if self.files.get(file_ref) == data:
            return False
        self.files[file_ref] = data
        return True
