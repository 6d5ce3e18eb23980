"""Find words that occur often across a set of text files."""

from __future__ import annotations

import re
import string
import sys
from collections import Counter
from typing import Optional, Sequence

USAGE = (
    "USAGE: find_common_words [TEXT FILE ..] -n [NUM] -o [FILE]\n"
    "Finds all words who appear >= n times in ALL the parameter text files."
)

_PUNCT_TABLE = str.maketrans("", "", string.punctuation)
_SPACE = re.compile(r"[ \t\n\v\f\r]+")
_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2 ** 31), 2 ** 31 - 1
_UINT_MOD = 2 ** 32


def remove_punct(text: str) -> str:
    """Return ``text`` with ASCII punctuation removed."""
    return text.translate(_PUNCT_TABLE)


def _file_words(filename: str) -> list[str]:
    try:
        with open(filename, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return []
    words = [w for w in _SPACE.split(text) if w]
    # A final word not followed by whitespace is not counted.
    if words and not text[-1] in " \t\n\v\f\r":
        words.pop()
    return [remove_punct(w) for w in words]


class CommonWords:
    """Counts words over several files."""

    def __init__(self, filenames: Sequence[str]) -> None:
        self.file_word_maps: list[Counter[str]] = [
            Counter(_file_words(name)) for name in filenames
        ]
        self.common: Counter[str] = Counter()
        for counts in self.file_word_maps:
            self.common.update(counts)

    def get_common_words(self, n: int) -> list[str]:
        """Return, sorted, every word seen at least ``n`` times over all files."""
        return sorted(word for word, count in self.common.items() if count >= n)


def _parse_int(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"number out of range: {text!r}")
    return value % _UINT_MOD


def _readable(name: str) -> bool:
    try:
        with open(name, "rb"):
            return True
    except OSError:
        return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: files, ``-n`` minimum count, ``-o`` output file."""
    args = list(sys.argv[1:] if argv is None else argv)
    in_files: list[str] = []
    out_filename = ""
    n = 0

    it = iter(args)
    for arg in it:
        if arg == "-o":
            out_filename = next(it, out_filename)
        elif arg == "-n":
            value = next(it, None)
            if value is None:
                continue
            try:
                n = _parse_int(value)
            except OverflowError:
                print("Number too large to take as input.", file=sys.stderr)
                return 1
            except ValueError:
                print(USAGE, file=sys.stderr)
                return 1
        elif _readable(arg):
            in_files.append(arg)
        else:
            print(f"Could not read file: {arg}", file=sys.stderr)

    words = CommonWords(in_files).get_common_words(n)
    text = "".join(word + "\n" for word in words)
    try:
        with open(out_filename, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError:
        sys.stdout.write(text)

    if not in_files:
        print(USAGE, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())