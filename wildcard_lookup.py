#!/usr/bin/env python3
"""
Wildcard Lookup

Loads a word list (one word per line, /usr/share/dict/words by default)
into a wildcard trie and prints every word matching a search term.
The wildcard ('*' unless --wildcard says otherwise) stands for exactly
one character, so "pot*to" finds "potato".
"""

from __future__ import annotations

import argparse
import logging

from wildcardtrie.cli import interactive_lookup, run_lookup
from wildcardtrie.dictionary import Dictionary
from wildcardtrie.trie import DEFAULT_WILDCARD

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wildcardtrie")

DEFAULT_SEARCH_TERM = "pot*to"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Wildcard Lookup -- finds dictionary words matching a wildcard term",
    )
    parser.add_argument("term", nargs="?", default=DEFAULT_SEARCH_TERM,
                        help=f"Search term (default: {DEFAULT_SEARCH_TERM})")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--wildcard", type=str, default=DEFAULT_WILDCARD,
                        help="Single-character wildcard symbol")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Prompt for terms instead of a single lookup")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if len(args.wildcard) != 1:
        parser.error("--wildcard must be exactly one character")

    dictionary = Dictionary(args.dict, wildcard=args.wildcard)

    if args.interactive:
        interactive_lookup(dictionary)
    else:
        run_lookup(dictionary, args.term)


if __name__ == "__main__":
    main()
