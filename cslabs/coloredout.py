"""Terminal colouring and a coloured diff of actual against expected output."""

from __future__ import annotations

import enum
import sys
from typing import Any, Callable, Optional, TextIO

BORDER_CHAR = "~"

_GREEN_CHARS = frozenset("0123456789/\\_-")
_END = "\0"


class EnableMode(enum.Enum):
    """When colouring applies."""

    DISABLE = enum.auto()
    ENABLE = enum.auto()
    TTY = enum.auto()
    COUT = enum.auto()


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


_WAS_ORIGINALLY_TTY = _stdout_is_tty()


def _is_enabled(out: TextIO, enable: EnableMode) -> bool:
    return (
        enable is EnableMode.ENABLE
        or (enable is EnableMode.TTY and _WAS_ORIGINALLY_TTY)
        or (enable is EnableMode.COUT and _WAS_ORIGINALLY_TTY and out is sys.stdout)
    )


def red(text: Any) -> str:
    """Return ``text`` wrapped in red."""
    return f"\033[31m{text}\033[39m"


def green(text: Any) -> str:
    """Return ``text`` wrapped in green."""
    return f"\033[32m{text}\033[39m"


def notfound(text: Any) -> str:
    """Return ``text`` in underlined red, marking missing output."""
    return f"\033[31;4m{text}\033[39;24m"


def bold(text: Any, out: Optional[TextIO] = None,
         enable: EnableMode = EnableMode.COUT) -> None:
    """Write ``text`` to ``out``, in bold when ``enable`` allows it."""
    out = out if out is not None else sys.stdout
    if _is_enabled(out, enable):
        out.write(f"\033[1m{text}\033[22m")
    else:
        out.write(str(text))


def bold_digits(text: str, out: Optional[TextIO] = None,
                enable: EnableMode = EnableMode.COUT) -> None:
    """Write ``text`` to ``out`` with digits and minus signs in bold."""
    out = out if out is not None else sys.stdout
    if not _is_enabled(out, enable):
        out.write(text)
        return
    out.write("".join(
        f"\033[1m{ch}\033[22m" if ch.isdigit() or ch == "-" else ch for ch in text
    ))


def _char_reader(actual: str, emit: Callable[[str], None]) -> Callable[[], str]:
    """Return a reader yielding visible characters; escape codes go to ``emit``."""
    it = iter(actual)

    def read() -> Optional[str]:
        return next(it, None)

    def next_char() -> str:
        c = read()
        if c is None or c == _END:
            return _END
        while c == "\033":
            opcode = []
            while c is not None and c != "m" and c != _END:
                opcode.append(c)
                c = read()
            emit("".join(opcode) + "m")
            c = read()
            if c is None or c == _END:
                return _END
        return c

    return next_char


def compare_output(actual: str, expected: str) -> str:
    """Colour ``actual`` against ``expected``.

    Matching characters pass through (digits and tree branches in green),
    wrong ones are red, and expected characters that never appeared are
    underlined red. Lines and ``~`` borders are kept aligned.
    """
    parts: list[str] = []
    emit = parts.append
    next_char = _char_reader(actual, emit)
    n = len(expected)
    i = 0

    def take() -> str:
        nonlocal i
        e = expected[i] if i < n else _END
        i += 1
        return e

    c = _END
    while True:
        c = next_char()
        if c == _END:
            break
        e = take()

        for align in (BORDER_CHAR, "\n"):
            while c != e and (c == align or e == align):
                if c == align and e != c and i < n:
                    emit(e if e in ("\n", " ") else notfound(e))
                    e = take()
                elif c == _END:
                    break
                if e == align and c != e and c != _END:
                    emit(red(c))
                    c = next_char()
                elif i >= n:
                    break

        if c == _END:
            break

        if e in _GREEN_CHARS:
            emit(green(c) if c == e else red(c))
        else:
            emit(c if c == e else red(c))

        if i >= n:
            c = next_char()
            break

    while c != _END:
        emit(red(c))
        c = next_char()

    while i < n:
        e = take()
        emit(e if e == "\n" else notfound(e))

    return "".join(parts)