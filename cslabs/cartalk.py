"""Find words that stay homophones with either of their first two letters removed."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from cslabs.pronounce_dict import PronounceDict

StringTriple = tuple[str, str, str]

DEFAULT_WORD_LIST = "words.txt"
DEFAULT_PRONOUNCE_DICT = "cmudict.0.7a"


def cartalk_puzzle(d: PronounceDict, word_list_fname: str) -> list[StringTriple]:
    """Return ``(word, without_first, without_second)`` for each word that sounds
    the same after removing its first letter and, separately, its second letter.

    A missing word list gives no results.
    """
    results: list[StringTriple] = []
    try:
        with open(word_list_fname, encoding="latin-1") as handle:
            for line in handle:
                word = line.rstrip("\n")
                if len(word) < 3:
                    continue
                first_removed = word[1:]
                second_removed = word[0] + word[2:]
                if d.homophones(word, first_removed) and d.homophones(word, second_removed):
                    results.append((word, first_removed, second_removed))
    except OSError:
        pass
    return results


def format_results(results: Iterable[StringTriple]) -> str:
    """Lay the results out in aligned columns, one line per word."""
    results = list(results)
    pad = max((len(word) for word, _, _ in results), default=0) + 1
    return "".join(
        f"{'Original word: ':<15}{word:<{pad}}{'homophones: ':<12}"
        f"{first:<{pad}}{second:<{pad}}\n"
        for word, first, second in results
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: ``-w`` word list, ``-d`` pronunciation dictionary."""
    args = list(sys.argv[1:] if argv is None else argv)
    word_list = DEFAULT_WORD_LIST
    dict_file = DEFAULT_PRONOUNCE_DICT

    it = iter(args)
    for arg in it:
        if arg == "-w":
            word_list = next(it, word_list)
        elif arg == "-d":
            dict_file = next(it, dict_file)

    d = PronounceDict.from_file(dict_file)
    sys.stdout.write(format_results(cartalk_puzzle(d, word_list)))
    return 0


if __name__ == "__main__":
    sys.exit(main())