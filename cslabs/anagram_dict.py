"""Look up anagrams of words from a word list."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Optional, Sequence

USAGE = (
    "USAGE: anagram_finder -w [WORD_LIST] -o [FILE]\n"
    "Finds anagrams using a given word list file (where each word is newline-separated).\n"
    "\n"
    "  -a       Finds all anagrams in the word list."
)


def _signature(word: str) -> str:
    return "".join(sorted(word))


class AnagramDict:
    """Groups words by their sorted letters."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._groups: dict[str, list[str]] = {}
        for word in words:
            self._groups.setdefault(_signature(word), []).append(word)

    @classmethod
    def from_file(cls, filename: str) -> "AnagramDict":
        """Build from a file of newline-separated words; a missing file gives none."""
        try:
            with open(filename, encoding="utf-8") as handle:
                return cls(line.rstrip("\n") for line in handle)
        except OSError:
            return cls()

    def get_anagrams(self, word: str) -> list[str]:
        """Return every listed word made of the letters of ``word``."""
        return list(self._groups.get(_signature(word), ()))

    def get_all_anagrams(self) -> list[list[str]]:
        """Return each group of two or more mutual anagrams, ordered by letters."""
        return [list(self._groups[key]) for key in sorted(self._groups)
                if len(self._groups[key]) > 1]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: print anagrams of the given words, or all with ``-a``."""
    args = list(sys.argv[1:] if argv is None else argv)
    word_list = "words.txt"
    out_filename = ""
    find_all = False
    words: list[str] = []

    it = iter(args)
    for arg in it:
        if arg == "-w":
            word_list = next(it, word_list)
        elif arg == "-o":
            out_filename = next(it, out_filename)
        elif arg == "-a":
            find_all = True
        else:
            words.append(arg)

    if os.path.isfile(word_list) and (words or find_all):
        anagrams = AnagramDict.from_file(word_list)
        if find_all:
            lines = [line for group in anagrams.get_all_anagrams()
                     for line in (*group, "")]
        else:
            lines = []
            for word in words:
                lines.append(f"Anagrams for {word}:")
                lines.extend(anagrams.get_anagrams(word))
        text = "".join(line + "\n" for line in lines)
        try:
            with open(out_filename, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError:
            sys.stdout.write(text)
        return 0

    if not words:
        print(USAGE, file=sys.stderr)
    else:
        print(f"File {word_list} does not exist.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())