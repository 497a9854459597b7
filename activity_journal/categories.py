"""Hierarchical categorization of activity labels.

Labels are split into lowercase whitespace tokens and each token sequence is
stored as a path from the root, e.g. "Work email urgent" becomes
ROOT > work > email > urgent. Every node keeps the cumulative hours of all
entries whose path passes through it, so a node's total always includes the
totals of its descendants.

Trees are always rebuilt from a full entry set; there are no incremental
updates. Use :func:`build_category_tree` for a fresh tree per call, or
:class:`CategoryAggregator` when a caller wants the reset/rebuild workflow.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence

from activity_journal.schema import Entry

logger = logging.getLogger(__name__)

ROOT_TOKEN = "ROOT"
PATH_SEPARATOR = " > "


def tokenize(label: Optional[str]) -> list[str]:
    """Split a label into lowercase tokens; blank or missing labels give []."""

    if label is None or not label.strip():
        return []
    return label.strip().lower().split()


class CategoryNode:
    """A single category; parent owns children through ``children``."""

    def __init__(self, token: str, parent: Optional[CategoryNode] = None) -> None:
        self.token = token
        self.parent = parent
        self.children: dict[str, CategoryNode] = {}
        self.cumulative_hours = 0.0

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        if self.parent is None:
            return 0
        return self.parent.depth + 1

    @property
    def full_path(self) -> str:
        if self.parent is None or self.parent.is_root:
            return self.token
        return f"{self.parent.full_path}{PATH_SEPARATOR}{self.token}"

    def get_or_create_child(self, token: str) -> CategoryNode:
        child = self.children.get(token)
        if child is None:
            child = CategoryNode(token, parent=self)
            self.children[token] = child
        return child

    def add_time(self, hours: float) -> None:
        """Add hours to this node and every ancestor up to the root."""

        node: Optional[CategoryNode] = self
        while node is not None:
            node.cumulative_hours += hours
            node = node.parent

    def children_list(self) -> list[CategoryNode]:
        return list(self.children.values())

    def __repr__(self) -> str:
        return (
            f"CategoryNode(token={self.token!r}, children={len(self.children)}, "
            f"hours={self.cumulative_hours:.2f})"
        )


class CategoryTree:
    """Rooted token tree with cumulative hours per node."""

    def __init__(self) -> None:
        self.root = CategoryNode(ROOT_TOKEN)

    def process_entry(self, entry: Optional[Entry]) -> None:
        if entry is None:
            return

        tokens = tokenize(entry.label)
        if not tokens:
            logger.debug("Skipping entry without label starting at %s", entry.start)
            return

        node = self.root
        for token in tokens:
            node = node.get_or_create_child(token)
        node.add_time(entry.duration_hours)

    def process_entries(self, entries: Iterable[Entry]) -> None:
        for entry in entries:
            self.process_entry(entry)

    def main_categories(self) -> list[CategoryNode]:
        return self.root.children_list()

    def main_category_hours(self) -> dict[str, float]:
        return {node.token: node.cumulative_hours for node in self.main_categories()}

    def categories_at_depth(self, depth: int) -> list[CategoryNode]:
        """Return every node whose distance from the root equals ``depth``."""

        result: list[CategoryNode] = []
        if depth < 0:
            return result
        _collect_at_depth(self.root, depth, 0, result)
        return result

    def find_by_path(self, tokens: Sequence[str]) -> Optional[CategoryNode]:
        node = self.root
        for token in tokens:
            child = node.children.get(token.lower())
            if child is None:
                return None
            node = child
        return node

    def walk(self) -> Iterator[tuple[CategoryNode, int]]:
        """Pre-order traversal of (node, depth) pairs, root excluded."""

        stack = [(child, 1) for child in reversed(self.root.children_list())]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((child, depth + 1) for child in reversed(node.children_list()))


def _collect_at_depth(
    node: CategoryNode,
    target_depth: int,
    current_depth: int,
    result: list[CategoryNode],
) -> None:
    if current_depth == target_depth:
        result.append(node)
        return
    for child in node.children_list():
        _collect_at_depth(child, target_depth, current_depth + 1, result)


def build_category_tree(entries: Iterable[Entry]) -> CategoryTree:
    """Build a fresh tree from the given entries."""

    tree = CategoryTree()
    tree.process_entries(entries)
    return tree


class CategoryAggregator:
    """Reset/rebuild wrapper owning one current tree at a time.

    Nodes from a previous build are not updated by later rebuilds; keep the
    root returned by :meth:`rebuild` instead of holding on to older nodes.
    """

    def __init__(self) -> None:
        self._tree = CategoryTree()

    @property
    def tree(self) -> CategoryTree:
        return self._tree

    @property
    def root(self) -> CategoryNode:
        return self._tree.root

    def reset(self) -> None:
        self._tree = CategoryTree()

    def process_entry(self, entry: Optional[Entry]) -> None:
        self._tree.process_entry(entry)

    def process_entries(self, entries: Iterable[Entry]) -> None:
        self._tree.process_entries(entries)

    def rebuild(self, entries: Iterable[Entry]) -> CategoryNode:
        """Discard the current tree, rebuild it from ``entries`` and return the new root."""

        self.reset()
        self.process_entries(entries)
        return self._tree.root

    def main_categories(self) -> list[CategoryNode]:
        return self._tree.main_categories()

    def categories_at_depth(self, depth: int) -> list[CategoryNode]:
        return self._tree.categories_at_depth(depth)

    def find_by_path(self, tokens: Sequence[str]) -> Optional[CategoryNode]:
        return self._tree.find_by_path(tokens)
