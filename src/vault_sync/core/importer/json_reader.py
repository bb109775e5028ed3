"""Parse JSON database documents into domain models."""

import base64
import binascii
import json
from typing import Any
from uuid import UUID

from vault_sync.config import FORMAT_VERSION
from vault_sync.models.node import AttachmentRef, CustomIcon, Database, DatabaseAttachment, Node


def _decode_bytes(value: str, *, what: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, TypeError) as e:
        msg = f"Invalid base64 data in {what}"
        raise ValueError(msg) from e


def _parse_node(raw: dict[str, Any]) -> Node:
    icon = raw.get("icon")
    return Node(
        uuid=UUID(raw["uuid"]),
        title=raw.get("title", ""),
        is_group=bool(raw.get("group", False)),
        children=tuple(_parse_node(c) for c in raw.get("children", [])),
        attachments=tuple(
            AttachmentRef(filename=a["filename"], index=int(a["index"]))
            for a in raw.get("attachments", [])
        ),
        custom_icon=UUID(icon) if icon else None,
        history=tuple(_parse_node(h) for h in raw.get("history", [])),
    )


def _parse_attachments(raw_attachments: list[dict[str, Any]]) -> tuple[DatabaseAttachment, ...]:
    return tuple(
        DatabaseAttachment(
            data=_decode_bytes(a["data"], what=f"attachment {i}"),
            protected=bool(a.get("protected", False)),
        )
        for i, a in enumerate(raw_attachments)
    )


def _parse_custom_icons(raw_icons: list[dict[str, Any]]) -> dict[UUID, CustomIcon]:
    custom_icons: dict[UUID, CustomIcon] = {}
    for raw_icon in raw_icons:
        icon_id = UUID(raw_icon["uuid"])
        if icon_id in custom_icons:
            msg = f"Duplicate custom icon uuid: {icon_id}"
            raise ValueError(msg)
        custom_icons[icon_id] = CustomIcon(
            uuid=icon_id,
            data=_decode_bytes(raw_icon["data"], what=f"icon {icon_id}"),
            name=raw_icon.get("name", ""),
        )
    return custom_icons


def parse_database_data(data: dict[str, Any]) -> Database:
    """Parse a database document dict into a Database.

    Args:
        data: Raw document data (as loaded from a .vault.json file).

    Returns:
        The parsed Database snapshot.
    """
    if not isinstance(data, dict):
        msg = f"Database document must be an object, got {type(data).__name__}"
        raise ValueError(msg)

    version = data.get("format")
    if version != FORMAT_VERSION:
        msg = f"Unsupported database format: {version!r}"
        raise ValueError(msg)

    missing = {"root", "attachments", "custom_icons"} - data.keys()
    if missing:
        msg = f"Database document is missing keys: {sorted(missing)!r}"
        raise ValueError(msg)

    try:
        root = _parse_node(data["root"])
    except KeyError as e:
        msg = f"Node is missing key: {e.args[0]!r}"
        raise ValueError(msg) from e
    except (TypeError, AttributeError) as e:
        msg = f"Malformed node: {e}"
        raise ValueError(msg) from e

    try:
        attachments = _parse_attachments(data["attachments"])
        custom_icons = _parse_custom_icons(data["custom_icons"])
    except KeyError as e:
        msg = f"Table record is missing key: {e.args[0]!r}"
        raise ValueError(msg) from e
    except (TypeError, AttributeError) as e:
        msg = f"Malformed table record: {e}"
        raise ValueError(msg) from e

    return Database(
        root=root,
        attachments=attachments,
        custom_icons=custom_icons,
        name=data.get("name", ""),
    )


def load_database(contents: bytes | str) -> Database:
    """Decode and parse a serialized database document."""
    return parse_database_data(json.loads(contents))
