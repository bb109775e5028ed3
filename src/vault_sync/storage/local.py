"""Storage provider backed by a local directory."""

from pathlib import Path

from loguru import logger

from vault_sync.protocols import ProviderAttributes, StorageId, StorageProviderError


class LocalStorageProvider:
    """Store database files in a local directory.

    - Do not rewrite files whose contents are the same.
    - Refuse file references which would leave the directory.
    """

    attributes = ProviderAttributes(
        storage_id=StorageId.LOCAL_DEVICE,
        provides_icons=False,
        browsable_new=True,
        browsable_existing=True,
        root_folder_only=True,
        immediately_offer_cache_if_offline=False,
        supports_concurrent_requests=True,
    )

    def __init__(self, datadir: str | Path, *, dry_run: bool = False) -> None:
        self.datadir = str(Path(datadir).resolve())
        self.dry_run = dry_run

        if not dry_run and not Path(self.datadir).is_dir():
            msg = f"Data directory {self.datadir!r} not found"
            raise ValueError(msg)

        logger.debug(f"Local storage ready, datadir {self.datadir!r}, dry_run {dry_run!r}")

    def _resolve(self, file_ref: str) -> Path:
        if Path(file_ref).is_absolute():
            msg = f"must be relative: {file_ref!r}"
            raise ValueError(msg)
        fname = str((Path(self.datadir) / file_ref).resolve())
        if not fname.startswith(self.datadir + "/"):
            msg = f"Path escapes datadir: {fname!r}"
            raise ValueError(msg)
        return Path(fname)

    def is_signed_in(self) -> bool:
        return True

    def sign_out(self) -> Exception | None:
        # Nothing to tear down for a local directory.
        return None

    def read(self, file_ref: str) -> bytes:
        path = self._resolve(file_ref)
        try:
            return path.read_bytes()
        except OSError as e:
            msg = f"Cannot read {file_ref!r}: {e}"
            raise StorageProviderError(msg) from e

    def write(self, file_ref: str, data: bytes) -> bool:
        path = self._resolve(file_ref)
        action = "create"
        try:
            if path.read_bytes() == data:
                logger.debug(f"Unchanged, not writing {str(path)!r}")
                return False
            action = "update"
        except FileNotFoundError:
            pass
        except OSError as e:
            msg = f"Cannot read existing {file_ref!r}: {e}"
            raise StorageProviderError(msg) from e

        if self.dry_run:
            logger.info(f"dry-run: would {action} {str(path)!r}")
            return True

        logger.debug(f"Writing ({action}) {str(path)!r}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            msg = f"Cannot write {file_ref!r}: {e}"
            raise StorageProviderError(msg) from e
        return True
