"""Minimal attachment pool: every reachable attachment, stored once per content."""

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from vault_sync.core.tree.traversal import iterate_nodes
from vault_sync.models.node import DatabaseAttachment, Node


@dataclass(frozen=True)
class AttachmentPool:
    """The minimal attachment pool and where each old table index ended up.

    index_map maps every resolvable attachment index referenced below the root
    to its slot in `attachments`.
    """

    attachments: tuple[DatabaseAttachment, ...]
    index_map: dict[int, int]


def build_attachment_pool(
    root: Node | None,
    attachments: Sequence[DatabaseAttachment],
) -> AttachmentPool:
    """Collect the attachments reachable from root, deduplicated by content.

    Pool order is the order of first discovery during a depth-first walk.
    References to indices outside the attachment table are skipped.

    Args:
        root: Root of the (sub)tree to walk. None is treated as an empty tree.
        attachments: The database attachment table, indexed by position.

    Returns:
        The pool along with the old index -> pool slot mapping.
    """
    pool: list[DatabaseAttachment] = []
    index_map: dict[int, int] = {}
    slot_by_digest: dict[str, int] = {}

    for node in iterate_nodes(root):
        for ref in node.attachments:
            if ref.index in index_map:
                continue
            if not 0 <= ref.index < len(attachments):
                logger.debug(
                    "Skipping dangling attachment {!r} (index {}) on node {}",
                    ref.filename,
                    ref.index,
                    node.uuid,
                )
                continue

            attachment = attachments[ref.index]
            digest = attachment.digest
            slot = slot_by_digest.get(digest)
            if slot is None:
                slot = len(pool)
                slot_by_digest[digest] = slot
                pool.append(attachment)
            index_map[ref.index] = slot

    return AttachmentPool(attachments=tuple(pool), index_map=index_map)


def get_minimal_attachment_pool(
    root: Node | None,
    attachments: Sequence[DatabaseAttachment],
) -> list[DatabaseAttachment]:
    """Return the minimal ordered attachment pool for the tree below root."""
    return list(build_attachment_pool(root, attachments).attachments)


def relink_attachments(root: Node, index_map: dict[int, int]) -> Node:
    """Return a copy of the tree with attachment refs pointing at pool slots.

    References whose index is not in index_map are dropped.
    """
    new_refs = tuple(
        dataclasses.replace(ref, index=index_map[ref.index])
        for ref in root.attachments
        if ref.index in index_map
    )
    return dataclasses.replace(
        root,
        attachments=new_refs,
        history=tuple(relink_attachments(h, index_map) for h in root.history),
        children=tuple(relink_attachments(c, index_map) for c in root.children),
    )
