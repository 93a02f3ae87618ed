"""A binary search tree of named string variables, ordered by name."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from ftkit.formatting import fprintf

__all__ = ["Variable", "VarTree"]


@dataclass
class Variable:
    """A name and its value; the value is None until one is set."""

    name: str
    value: Optional[str] = None


@dataclass(eq=False)
class _Node:
    var: Variable
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class VarTree:
    """Variables kept in a binary search tree keyed on their names."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def _nodes(self) -> Iterator[_Node]:
        """Nodes in ascending name order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _locate(self, name: str) -> tuple[Optional[_Node], Optional[_Node]]:
        """The node holding *name* (or None) and its parent."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.var.name != name:
            parent = node
            node = node.left if name < node.var.name else node.right
        return node, parent

    def fetch(self, name: str) -> Variable:
        """The variable called *name*, created with no value if missing."""
        if self._root is None:
            self._root = _Node(Variable(name))
            return self._root.var
        node = self._root
        while True:
            if name == node.var.name:
                return node.var
            if name < node.var.name:
                if node.left is None:
                    node.left = _Node(Variable(name))
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(Variable(name))
                node = node.right

    def get(self, name: str) -> Optional[str]:
        """Value of *name*; the name is registered, without a value, if missing."""
        return self.fetch(name).value

    def set(self, name: str, value: Optional[str]) -> None:
        """Give *name* the value *value*, creating the variable if needed."""
        self.fetch(name).value = value

    def find(self, name: str) -> Optional[Variable]:
        """The variable called *name*, or None; nothing is created."""
        node, _ = self._locate(name)
        return None if node is None else node.var

    def find_min(self) -> Optional[Variable]:
        """The variable with the smallest name, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.var

    def _replace_child(
        self, parent: Optional[_Node], old: _Node, new: Optional[_Node]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, name: str) -> Optional[Variable]:
        """Remove *name* from the tree and return its variable, or None if absent."""
        node, parent = self._locate(name)
        if node is None:
            return None
        removed = node.var
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
            return removed
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        self._replace_child(successor_parent, successor, successor.right)
        node.var = successor.var
        return removed

    def export(self) -> list[str]:
        """``name=value`` strings in name order; a missing value exports as empty."""
        return [
            f"{node.var.name}={'' if node.var.value is None else node.var.value}"
            for node in self._nodes()
        ]

    def dump(self, stream: Optional[TextIO] = None) -> None:
        """Write ``'name'='value'`` lines in name order to *stream* (stdout by default)."""
        out = sys.stdout if stream is None else stream
        for node in self._nodes():
            fprintf(out, "'%s'='%s'\n", node.var.name, node.var.value)

    def clear(self) -> None:
        """Remove every variable."""
        self._root = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Variable]:
        return (node.var for node in self._nodes())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None