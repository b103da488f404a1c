"""Word list loaded line by line into a wildcard trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from wildcardtrie.trie import DEFAULT_WILDCARD, InvalidWordError, WildcardTrie

log = logging.getLogger("wildcardtrie")

DEFAULT_SEARCH_PATHS = (
    "words.txt",
    "dictionary.txt",
    "/usr/share/dict/words",
)


def load_words(trie: WildcardTrie, lines: Iterable[str]) -> tuple[int, int]:
    """Feed each stripped line to *trie*; returns (inserted, skipped).

    Lines the trie refuses (blank, or containing the wildcard) are skipped.
    """
    inserted = skipped = 0
    for line in lines:
        word = line.strip()
        try:
            trie.insert(word)
        except InvalidWordError:
            log.debug("Skipping invalid dictionary line %r", line)
            skipped += 1
        else:
            inserted += 1
    return inserted, skipped


class Dictionary:
    """Word list backed by a WildcardTrie."""

    def __init__(self, dict_path: str | None = None, wildcard: str | None = DEFAULT_WILDCARD):
        self.trie = WildcardTrie(wildcard)
        self.path: str | None = None
        self.skipped = 0
        self._load(dict_path)

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            if not os.path.exists(dict_path):
                log.warning("Dictionary %s not found, trying defaults.", dict_path)
            search_paths.append(dict_path)
        search_paths.extend(DEFAULT_SEARCH_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                with open(path, "r", encoding="utf-8", errors="replace") as f:
                    _, skipped = load_words(self.trie, f)
                if len(self.trie):
                    self.path = path
                    self.skipped = skipped
                    log.info("Loaded %s words from %s", f"{len(self.trie):,}", path)
                    if skipped:
                        log.info("Skipped %d invalid lines", skipped)
                    return
                log.warning("No usable words in %s, trying next source.", path)

        log.warning("No dictionary file found -- using built-in minimal word list.")
        log.warning("Pass --dict PATH or install a words file at /usr/share/dict/words.")
        self._load_minimal()

    def _load_minimal(self) -> None:
        common = {
            "potato", "potatos", "tomato", "tomatoes", "fun", "fund",
            "funds", "funding", "farm", "fame", "fate", "gate", "game",
            "hate", "late", "mate", "rate", "date", "dare", "care",
            "cart", "card", "cord", "word", "ward", "warm", "worm",
            "form", "fork", "cork", "work", "walk", "talk", "tall",
        }
        _, self.skipped = load_words(self.trie, common)

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word: str) -> bool:
        return word in self.trie
