"""Apply the minimal pools to a database before it is serialized."""

import dataclasses
from dataclasses import dataclass

from vault_sync.core.pool.attachments import build_attachment_pool, relink_attachments
from vault_sync.core.pool.icons import drop_dangling_icons, get_minimal_icon_pool
from vault_sync.models.node import CustomIcon, Database


@dataclass(frozen=True)
class PoolStats:
    """Table sizes before and after compaction."""

    attachments_before: int
    attachments_after: int
    icons_before: int
    icons_after: int

    @property
    def attachments_removed(self) -> int:
        return self.attachments_before - self.attachments_after

    @property
    def icons_removed(self) -> int:
        return self.icons_before - self.icons_after


def compact_database(db: Database) -> Database:
    """Return a database holding only the minimal attachment and icon pools.

    The tree is relinked to the new attachment slots, and custom icon
    references that do not resolve are cleared.
    """
    pool = build_attachment_pool(db.root, db.attachments)
    root = relink_attachments(db.root, pool.index_map)
    root = drop_dangling_icons(root, db.custom_icons)

    icon_pool = get_minimal_icon_pool(root, db.custom_icons)
    custom_icons = {
        icon_id: CustomIcon(uuid=icon_id, data=data, name=db.custom_icons[icon_id].name)
        for icon_id, data in icon_pool.items()
    }

    return dataclasses.replace(
        db,
        root=root,
        attachments=pool.attachments,
        custom_icons=custom_icons,
    )


def pool_stats(db: Database) -> PoolStats:
    """Compute table sizes before and after compaction."""
    pool = build_attachment_pool(db.root, db.attachments)
    icon_pool = get_minimal_icon_pool(db.root, db.custom_icons)
    return PoolStats(
        attachments_before=len(db.attachments),
        attachments_after=len(pool.attachments),
        icons_before=len(db.custom_icons),
        icons_after=len(icon_pool),
    )
