"""Serialize databases to JSON documents.

The output is optimized for stable diffs: keys are sorted and the same
Database always produces the same bytes.
"""

import base64
import json
from typing import Any

from vault_sync.config import FORMAT_VERSION
from vault_sync.models.node import Database, Node


def _encode_bytes(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _node_to_data(node: Node) -> dict[str, Any]:
    return {
        "uuid": str(node.uuid),
        "title": node.title,
        "group": node.is_group,
        "icon": str(node.custom_icon) if node.custom_icon is not None else None,
        "attachments": [{"filename": a.filename, "index": a.index} for a in node.attachments],
        "history": [_node_to_data(h) for h in node.history],
        "children": [_node_to_data(c) for c in node.children],
    }


def database_to_data(db: Database) -> dict[str, Any]:
    """Convert a Database to a JSON-compatible dict."""
    return {
        "format": FORMAT_VERSION,
        "name": db.name,
        "attachments": [
            {"data": _encode_bytes(a.data), "protected": a.protected} for a in db.attachments
        ],
        # Icon table order follows the dict order, which pools fill by first discovery.
        "custom_icons": [
            {"uuid": str(icon.uuid), "name": icon.name, "data": _encode_bytes(icon.data)}
            for icon in db.custom_icons.values()
        ],
        "root": _node_to_data(db.root),
    }


def serialize_database(db: Database) -> bytes:
    """Serialize a Database to UTF-8 JSON bytes."""
    return (json.dumps(database_to_data(db), sort_keys=True, indent=4) + "\n").encode("utf-8")
