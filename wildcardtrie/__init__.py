"""Wildcard trie -- exact, prefix and single-character wildcard lookups."""

from wildcardtrie.node import Node
from wildcardtrie.trie import DEFAULT_WILDCARD, InvalidWordError, WildcardTrie
from wildcardtrie.dictionary import Dictionary, load_words
from wildcardtrie.cli import format_matches, interactive_lookup, run_lookup

__all__ = [
    "DEFAULT_WILDCARD",
    "Dictionary",
    "InvalidWordError",
    "Node",
    "WildcardTrie",
    "format_matches",
    "interactive_lookup",
    "load_words",
    "run_lookup",
]
