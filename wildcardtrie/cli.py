"""Terminal front end for wildcard lookups."""

from __future__ import annotations

import logging
import time
from typing import Iterable

from wildcardtrie.dictionary import Dictionary

log = logging.getLogger("wildcardtrie.cli")


def format_matches(term: str, matches: Iterable[str]) -> str:
    """Match count header followed by one word per line (sorted)."""
    words = sorted(matches)
    lines = [f"{len(words)} words match {term} in provided dict:"]
    lines.extend(words)
    return "\n".join(lines)


def run_lookup(dictionary: Dictionary, term: str) -> set[str]:
    """Print every stored word matching *term*."""
    t0 = time.time()
    matches = dictionary.trie.get_matching_words(term)
    elapsed = time.time() - t0
    log.debug("Search for %r resolved %d words", term, len(matches))

    print(format_matches(term, matches))
    print(f"Searched in {elapsed:.4f}s.")
    return matches


def _print_help(wildcard: str | None) -> None:
    print("Commands:")
    print("  TERM           -- list matching words   (e.g. pot*to)")
    print("  word TERM      -- is TERM a stored word?")
    print("  prefix TERM    -- does TERM extend to a longer word?")
    print("  help           -- show this message")
    print("  quit           -- leave")
    if wildcard is not None:
        print(f"  '{wildcard}' matches any single character.")
    else:
        print("  No wildcard configured; every character is literal.")


def interactive_lookup(dictionary: Dictionary) -> None:
    """Prompt for terms until quit / EOF."""
    trie = dictionary.trie
    print("\n" + "=" * 60)
    print(f"  WILDCARD LOOKUP -- {len(trie):,} words loaded")
    print("=" * 60)
    _print_help(trie.wildcard)
    print()

    while True:
        try:
            inp = input("  term> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd = inp.lower()
        if cmd in ("quit", "done", "exit"):
            break
        if cmd == "help":
            _print_help(trie.wildcard)
            continue

        parts = inp.split(maxsplit=1)
        if len(parts) == 2 and parts[0].lower() == "word":
            found = trie.is_word(parts[1])
            print(f"  {parts[1]}: {'word' if found else 'not a word'}")
        elif len(parts) == 2 and parts[0].lower() == "prefix":
            found = trie.is_prefix(parts[1])
            print(f"  {parts[1]}: {'prefix' if found else 'not a prefix'}")
        else:
            run_lookup(dictionary, inp)
