"""Minimal icon pool: every custom icon referenced below a root, keyed by uuid."""

import dataclasses
from collections.abc import Mapping
from uuid import UUID

from loguru import logger

from vault_sync.core.tree.traversal import iterate_nodes
from vault_sync.models.node import CustomIcon, Node


def get_minimal_icon_pool(
    root: Node | None,
    icons: Mapping[UUID, CustomIcon],
) -> dict[UUID, bytes]:
    """Map each custom icon uuid reachable from root to its image bytes.

    Icons are keyed by uuid only; two icons with the same bytes stay distinct.
    Keys are in order of first discovery. A node whose icon does not resolve
    in `icons` is skipped.
    """
    pool: dict[UUID, bytes] = {}
    for node in iterate_nodes(root):
        icon_id = node.custom_icon
        if icon_id is None or icon_id in pool:
            continue
        icon = icons.get(icon_id)
        if icon is None:
            logger.debug(f"Skipping unknown custom icon {icon_id} on node {node.uuid}")
            continue
        pool[icon_id] = icon.data
    return pool


def drop_dangling_icons(root: Node, icons: Mapping[UUID, CustomIcon]) -> Node:
    """Return a copy of the tree with unresolvable custom icon references cleared."""
    custom_icon = root.custom_icon if root.custom_icon in icons else None
    return dataclasses.replace(
        root,
        custom_icon=custom_icon,
        history=tuple(drop_dangling_icons(h, icons) for h in root.history),
        children=tuple(drop_dangling_icons(c, icons) for c in root.children),
    )
