"""Shared test fixtures."""

import pytest

from tests.unit.fakes import ICON_1, ICON_2, ICON_ORPHAN, make_uuid
from vault_sync.models.node import AttachmentRef, CustomIcon, Database, DatabaseAttachment, Node


@pytest.fixture
def scenario_db() -> Database:
    """Three entries sharing content and icons.

    E1 holds A ("x") and icon 1, E2 holds B ("x") and C ("y") and icon 1,
    E3 has no attachments and icon 2. The tables also hold an unreferenced
    attachment and an unreferenced icon.
    """
    attachments = (
        DatabaseAttachment(data=b"x"),  # A
        DatabaseAttachment(data=b"x"),  # B
        DatabaseAttachment(data=b"y"),  # C
        DatabaseAttachment(data=b"unreferenced"),
    )
    icons = {
        ICON_1: CustomIcon(uuid=ICON_1, data=b"bytes1", name="one"),
        ICON_2: CustomIcon(uuid=ICON_2, data=b"bytes2", name="two"),
        ICON_ORPHAN: CustomIcon(uuid=ICON_ORPHAN, data=b"orphan"),
    }
    e1 = Node(
        uuid=make_uuid(1),
        title="E1",
        attachments=(AttachmentRef("a.txt", 0),),
        custom_icon=ICON_1,
    )
    e2 = Node(
        uuid=make_uuid(2),
        title="E2",
        attachments=(AttachmentRef("b.txt", 1), AttachmentRef("c.txt", 2)),
        custom_icon=ICON_1,
    )
    e3 = Node(uuid=make_uuid(3), title="E3", custom_icon=ICON_2)
    root = Node(uuid=make_uuid(100), title="Root", is_group=True, children=(e1, e2, e3))
    return Database(root=root, attachments=attachments, custom_icons=icons, name="Scenario")


@pytest.fixture
def nested_db() -> Database:
    """Nested groups, an entry with history, and dangling references."""
    attachments = (
        DatabaseAttachment(data=b"current"),
        DatabaseAttachment(data=b"old version"),
        DatabaseAttachment(data=b"deep"),
        DatabaseAttachment(data=b"current"),
    )
    icons = {ICON_1: CustomIcon(uuid=ICON_1, data=b"bytes1")}
    old = Node(
        uuid=make_uuid(10),
        title="Mail (old)",
        attachments=(AttachmentRef("key.pem", 1),),
        custom_icon=ICON_1,
    )
    mail = Node(
        uuid=make_uuid(10),
        title="Mail",
        attachments=(AttachmentRef("key.pem", 0), AttachmentRef("gone.bin", 42)),
        history=(old,),
    )
    deep = Node(
        uuid=make_uuid(11),
        title="Deep",
        attachments=(AttachmentRef("deep.txt", 2), AttachmentRef("copy.txt", 3)),
        custom_icon=ICON_2,
    )
    sub = Node(uuid=make_uuid(20), title="Sub", is_group=True, children=(deep,))
    root = Node(uuid=make_uuid(100), title="Root", is_group=True, children=(mail, sub))
    return Database(root=root, attachments=attachments, custom_icons=icons, name="Nested")
