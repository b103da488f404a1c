"""Single vertex of the wildcard trie."""

from __future__ import annotations


class Node:
    """Single node in the trie.

    ``symbol`` is the character on the edge leading into this node, or
    ``None`` for the root (the empty prefix).
    """

    __slots__ = ("symbol", "children", "is_terminal")

    def __init__(self, symbol: str | None = None):
        self.symbol = symbol
        self.children: dict[str, Node] = {}
        self.is_terminal: bool = False

    @property
    def is_root(self) -> bool:
        return self.symbol is None

    def __str__(self) -> str:
        keys = "".join(f" {key}" for key in self.children)
        return f"[{self.symbol} ->{keys}]"

    def __repr__(self) -> str:
        mark = " (word)" if self.is_terminal else ""
        return f"Node({self.symbol!r}, {len(self.children)} children){mark}"
