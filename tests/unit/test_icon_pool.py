"""Tests for the minimal icon pool."""

from tests.unit.fakes import ICON_1, ICON_2, ICON_ORPHAN, make_uuid
from vault_sync.core.pool.icons import drop_dangling_icons, get_minimal_icon_pool
from vault_sync.core.tree.traversal import iterate_nodes
from vault_sync.models.node import CustomIcon, Database, Node


def test_scenario_icon_pool(scenario_db: Database) -> None:
    """Three icon references, two distinct icons."""
    pool = get_minimal_icon_pool(scenario_db.root, scenario_db.custom_icons)

    assert pool == {ICON_1: b"bytes1", ICON_2: b"bytes2"}
    assert list(pool) == [ICON_1, ICON_2]


def test_orphaned_icons_are_excluded(scenario_db: Database) -> None:
    pool = get_minimal_icon_pool(scenario_db.root, scenario_db.custom_icons)

    assert ICON_ORPHAN not in pool


def test_icons_with_equal_bytes_stay_distinct() -> None:
    icons = {
        ICON_1: CustomIcon(uuid=ICON_1, data=b"same"),
        ICON_2: CustomIcon(uuid=ICON_2, data=b"same"),
    }
    root = Node(
        uuid=make_uuid(1),
        title="Root",
        is_group=True,
        custom_icon=ICON_1,
        children=(Node(uuid=make_uuid(2), title="E", custom_icon=ICON_2),),
    )

    assert get_minimal_icon_pool(root, icons) == {ICON_1: b"same", ICON_2: b"same"}


def test_unknown_icon_is_skipped_for_that_node_only(nested_db: Database) -> None:
    """Deep references ICON_2, which is not stored; history still contributes ICON_1."""
    pool = get_minimal_icon_pool(nested_db.root, nested_db.custom_icons)

    assert pool == {ICON_1: b"bytes1"}


def test_key_set_matches_referenced_icons(scenario_db: Database) -> None:
    referenced = {
        n.custom_icon
        for n in iterate_nodes(scenario_db.root)
        if n.custom_icon in scenario_db.custom_icons
    }

    assert set(get_minimal_icon_pool(scenario_db.root, scenario_db.custom_icons)) == referenced


def test_empty_tree_yields_empty_icon_pool() -> None:
    root = Node(uuid=make_uuid(1), title="Root", is_group=True)

    assert get_minimal_icon_pool(root, {}) == {}
    assert get_minimal_icon_pool(None, {}) == {}


def test_drop_dangling_icons_clears_unknown_refs(nested_db: Database) -> None:
    root = drop_dangling_icons(nested_db.root, nested_db.custom_icons)

    deep = root.children[1].children[0]
    assert deep.custom_icon is None
    assert root.children[0].history[0].custom_icon == ICON_1


def test_icon_pool_is_deterministic(scenario_db: Database) -> None:
    first = get_minimal_icon_pool(scenario_db.root, scenario_db.custom_icons)
    second = get_minimal_icon_pool(scenario_db.root, scenario_db.custom_icons)

    assert list(first.items()) == list(second.items())
