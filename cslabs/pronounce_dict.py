"""Word pronunciations and homophone checks."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

COMMENT_MARK = ";;;"


class PronounceDict:
    """Maps upper-case words to their phoneme sequences."""

    def __init__(self, mapping: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        self._dict: dict[str, list[str]] = {
            word: list(phonemes) for word, phonemes in (mapping or {}).items()
        }

    @classmethod
    def from_file(cls, filename: str) -> "PronounceDict":
        """Read a pronunciation dictionary in CMU format.

        Each line holds a word followed by its phonemes, separated by
        whitespace. Lines starting with ``#`` or ``;;;`` are comments. A
        missing file gives an empty dictionary.
        """
        entries: dict[str, list[str]] = {}
        try:
            with open(filename, encoding="latin-1") as handle:
                for line in handle:
                    tokens = line.split()
                    if not tokens or line.startswith("#") or tokens[0] == COMMENT_MARK:
                        continue
                    entries[tokens[0]] = tokens[1:]
        except OSError:
            pass
        return cls(entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._dict

    def __len__(self) -> int:
        return len(self._dict)

    def homophones(self, word1: str, word2: str) -> bool:
        """Return whether both words are known and pronounced the same."""
        first = self._dict.get(word1.upper())
        second = self._dict.get(word2.upper())
        if first is None or second is None:
            return False
        return first == second