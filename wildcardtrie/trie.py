"""Trie with single-character wildcard lookups."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from wildcardtrie.node import Node

DEFAULT_WILDCARD = "*"


class InvalidWordError(ValueError):
    """Raised when a word cannot be stored in the trie."""

    def __init__(self, word: str | None):
        super().__init__(f"Passed invalid word ({word!r}) to insert().")
        self.word = word


class WildcardTrie:
    """Prefix trie whose search terms may contain a wildcard character.

    The wildcard matches exactly one arbitrary character at its position.
    With ``wildcard=None`` every character of a term is literal.
    """

    def __init__(self, wildcard: str | None = DEFAULT_WILDCARD):
        if wildcard is not None and (not isinstance(wildcard, str) or len(wildcard) != 1):
            raise ValueError(f"Wildcard must be a single character, got {wildcard!r}")
        self._wildcard = wildcard
        self._size = 0
        self.root = Node()

    @property
    def wildcard(self) -> str | None:
        return self._wildcard

    # insertion

    def insert(self, word: str) -> None:
        """Store *word*; inserting it again changes nothing.

        Raises InvalidWordError if *word* is missing, empty or contains
        the wildcard.
        """
        if not isinstance(word, str) or not word or (
            self._wildcard is not None and self._wildcard in word
        ):
            raise InvalidWordError(word)

        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = Node(ch)
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def insert_all(self, words: Iterable[str] | None) -> None:
        """Insert every word in order, stopping at the first invalid one."""
        if isinstance(words, str):
            raise TypeError("insert_all() takes a collection of words, not a single str")
        if not words:
            return
        for word in words:
            self.insert(word)

    # lookups

    def is_prefix(self, term: str | None) -> bool:
        """True if some resolution of *term* can still be extended.

        A stored word only counts when a longer stored word continues it.
        """
        return any(node.children for node, _ in self._walk(term))

    def is_word(self, term: str | None) -> bool:
        """True if some resolution of *term* is a stored word."""
        return any(node.is_terminal for node, _ in self._walk(term))

    def get_matching_words(self, term: str | None) -> set[str]:
        """All stored words that some resolution of *term* spells."""
        return {path for node, path in self._walk(term) if node.is_terminal}

    def _walk(self, term: str | None) -> Iterator[tuple[Node, str]]:
        """Yield ``(node, path)`` for every node the term resolves to.

        ``path`` holds the characters actually consumed, so wildcard
        positions carry the child key they were resolved to.  Each
        wildcard forks into every existing child of the current node.
        """
        if not isinstance(term, str) or not term:
            return

        wildcard = self._wildcard
        end = len(term)
        stack: list[tuple[Node, int, str]] = [(self.root, 0, "")]
        while stack:
            node, idx, path = stack.pop()
            if idx == end:
                yield node, path
                continue

            ch = term[idx]
            if ch == wildcard:
                for key, child in node.children.items():
                    stack.append((child, idx + 1, path + key))
            else:
                child = node.children.get(ch)
                if child is not None:
                    stack.append((child, idx + 1, path + ch))

    # traversal

    def traverse(self) -> Iterator[Node]:
        """Lazy breadth-first walk over every node, root first."""
        queue: deque[Node] = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children.values())

    def render(self) -> str:
        """Diagnostic dump: each node and its child keys in level order."""
        return "".join(str(node) for node in self.traverse())

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, term: str) -> bool:
        return self.is_word(term)
