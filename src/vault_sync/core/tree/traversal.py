"""Depth-first traversal of the database tree."""

from collections.abc import Iterator

from vault_sync.models.node import Node, Pair


def iterate_nodes(root: Node | None, *, include_history: bool = True) -> Iterator[Node]:
    """Walk all nodes below (and including) root in pre-order.

    Children are visited in their stored order. When include_history is set,
    the history entries of a node are yielded right after the node itself,
    before its children.
    """
    if root is None:
        return

    todo: list[Node] = [root]
    while todo:
        node = todo.pop()
        yield node
        if include_history:
            yield from node.history
        # Stack: push in reverse so the first child is popped first.
        todo.extend(reversed(node.children))


def walk_with_depth(root: Node | None) -> Iterator[Pair[Node, int]]:
    """Walk the tree in pre-order, pairing each node with its depth below root."""
    if root is None:
        return

    todo: list[Pair[Node, int]] = [Pair(root, 0)]
    while todo:
        item = todo.pop()
        yield item
        todo.extend(Pair(child, item.second + 1) for child in reversed(item.first.children))


def count_nodes(root: Node | None) -> tuple[int, int]:
    """Count (groups, entries) in the tree, not including history entries."""
    groups = entries = 0
    for node in iterate_nodes(root, include_history=False):
        if node.is_group:
            groups += 1
        else:
            entries += 1
    return groups, entries
