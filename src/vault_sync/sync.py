"""Push and pull databases through a storage provider."""

from loguru import logger

from vault_sync.core.export.json_writer import serialize_database
from vault_sync.core.importer.json_reader import load_database
from vault_sync.core.pool.compact import compact_database, pool_stats
from vault_sync.models.node import Database
from vault_sync.protocols import StorageProviderError, StorageProviderProtocol


def _require_session(provider: StorageProviderProtocol) -> None:
    if not provider.is_signed_in():
        msg = f"Not signed in to {provider.attributes.storage_id.value} storage"
        raise StorageProviderError(msg)


def push_database(
    db: Database,
    provider: StorageProviderProtocol,
    file_ref: str,
    *,
    compact: bool = True,
) -> bool:
    """Serialize the database and write it through the provider.

    Args:
        db: Database snapshot to store.
        provider: Storage backend to write to.
        file_ref: Name of the file within the backend.
        compact: If True, store only the minimal attachment and icon pools.

    Returns:
        True if the stored bytes changed.
    """
    _require_session(provider)

    if compact:
        stats = pool_stats(db)
        if stats.attachments_removed or stats.icons_removed:
            logger.info(
                f"Compacting: {stats.attachments_removed} attachment(s), "
                f"{stats.icons_removed} icon(s) dropped"
            )
        db = compact_database(db)

    changed = provider.write(file_ref, serialize_database(db))
    if changed:
        logger.info(f"Stored {file_ref!r} ({provider.attributes.storage_id.value})")
    else:
        logger.debug(f"{file_ref!r} up to date, nothing stored")
    return changed


def pull_database(provider: StorageProviderProtocol, file_ref: str) -> Database:
    """Read and parse a database through the provider."""
    _require_session(provider)
    db = load_database(provider.read(file_ref))
    logger.debug(
        f"Loaded {file_ref!r}: {len(db.attachments)} attachment(s), "
        f"{len(db.custom_icons)} icon(s)"
    )
    return db


def sign_out(provider: StorageProviderProtocol) -> None:
    """Sign out of the provider, raising if it reports an error."""
    error = provider.sign_out()
    if error is None:
        logger.debug(f"Signed out of {provider.attributes.storage_id.value} storage")
        return
    if isinstance(error, StorageProviderError):
        raise error
    msg = f"Sign-out from {provider.attributes.storage_id.value} storage failed: {error}"
    raise StorageProviderError(msg) from error
