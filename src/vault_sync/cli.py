"""CLI for vault-sync (inspect, compact, push and pull databases)."""

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from vault_sync.config import DEFAULT_FILE_REF, resolve_data_directory
from vault_sync.core.export.json_writer import serialize_database
from vault_sync.core.importer.json_reader import load_database
from vault_sync.core.pool.compact import compact_database, pool_stats
from vault_sync.core.tree.traversal import count_nodes, walk_with_depth
from vault_sync.logging_config import configure_logging
from vault_sync.models.node import Database
from vault_sync.protocols import StorageProviderError
from vault_sync.storage.local import LocalStorageProvider
from vault_sync.sync import pull_database, push_database

app = typer.Typer(help="vault-sync: minimal attachment/icon pools and database sync.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load(path: Path) -> Database:
    """Load a database file, exiting if it is missing or malformed."""
    if not path.exists():
        logger.error("Database file not found: {}", path)
        raise typer.Exit(1)
    try:
        return load_database(path.read_bytes())
    except ValueError as e:
        logger.error("Cannot parse {}: {}", path, e)
        raise typer.Exit(1) from e


def _open_storage(data_dir: Path | None, *, dry_run: bool = False) -> LocalStorageProvider:
    dst = data_dir or resolve_data_directory()
    try:
        return LocalStorageProvider(dst, dry_run=dry_run)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


@app.command()
def stats(
    database: Path = typer.Argument(..., help="Database file (.vault.json)"),
) -> None:
    """Show table sizes and what compaction would remove."""
    db = _load(database)
    groups, entries = count_nodes(db.root)
    s = pool_stats(db)
    typer.echo(f"{db.name or database.name}: {groups} groups, {entries} entries")
    typer.echo(
        f"  attachments: {s.attachments_before} stored, {s.attachments_after} needed "
        f"({s.attachments_removed} removable)"
    )
    typer.echo(
        f"  custom icons: {s.icons_before} stored, {s.icons_after} needed "
        f"({s.icons_removed} removable)"
    )


@app.command()
def tree(
    database: Path = typer.Argument(..., help="Database file (.vault.json)"),
) -> None:
    """Print the group/entry tree with attachment and icon references."""
    db = _load(database)
    for item in walk_with_depth(db.root):
        node, depth = item.first, item.second
        marker = "+" if node.is_group else "-"
        extras: list[str] = []
        if node.attachments:
            extras.append("attachments=" + ",".join(a.filename for a in node.attachments))
        if node.custom_icon is not None:
            extras.append(f"icon={node.custom_icon}")
        suffix = f"  [{' '.join(extras)}]" if extras else ""
        typer.echo(f"{'    ' * depth}{marker} {node.title}{suffix}")


@app.command()
def compact(
    database: Path = typer.Argument(..., help="Database file (.vault.json)"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write here instead of in place"),
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
) -> None:
    """Rewrite a database keeping only the minimal attachment and icon pools."""
    db = _load(database)
    s = pool_stats(db)
    data = serialize_database(compact_database(db))
    dst = output or database

    if dry_run:
        typer.echo(
            f"dry-run: would write {dst} ({s.attachments_removed} attachment(s), "
            f"{s.icons_removed} icon(s) removed)"
        )
        return

    dst.write_bytes(data)
    typer.echo(
        f"Wrote {dst}: {s.attachments_after} attachment(s), {s.icons_after} icon(s) "
        f"({s.attachments_removed} + {s.icons_removed} removed)"
    )


@app.command()
def push(
    database: Path = typer.Argument(..., help="Database file (.vault.json)"),
    data_dir: Annotated[
        Path | None,
        typer.Option("--data-dir", "-d", help="Local storage directory"),
    ] = None,
    ref: str = typer.Option(DEFAULT_FILE_REF, "--ref", "-r", help="Name in storage"),
    no_compact: bool = typer.Option(False, "--no-compact", help="Store tables as they are"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
) -> None:
    """Store a database through the local storage provider."""
    db = _load(database)
    provider = _open_storage(data_dir, dry_run=dry_run)
    try:
        changed = push_database(db, provider, ref, compact=not no_compact)
    except (StorageProviderError, ValueError) as e:
        logger.error("Push failed: {}", e)
        raise typer.Exit(1) from e
    typer.echo(f"Stored {ref}" if changed else f"{ref} already up to date")


@app.command()
def pull(
    ref: str = typer.Argument(DEFAULT_FILE_REF, help="Name in storage"),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the database"),
    data_dir: Annotated[
        Path | None,
        typer.Option("--data-dir", "-d", help="Local storage directory"),
    ] = None,
) -> None:
    """Fetch a database from the local storage provider."""
    provider = _open_storage(data_dir)
    try:
        db = pull_database(provider, ref)
    except (StorageProviderError, ValueError) as e:
        logger.error("Pull failed: {}", e)
        raise typer.Exit(1) from e
    output.write_bytes(serialize_database(db))
    typer.echo(f"Wrote {output}")
