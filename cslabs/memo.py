"""Fibonacci numbers and factorials, plain and memoized.

Results wrap modulo 2**64, as an unsigned 64-bit machine word does, so the
command-line drivers can report overflow.
"""

from __future__ import annotations

import math
import re
import sys
from typing import Callable, Optional, Sequence

ULONG_MAX = 2 ** 64 - 1

FIB_USAGE = (
    "USAGE: fib [NUM] [OPTIONS]\n"
    "Finds the NUMth Fibonacci number.\n"
    "\n"
    "  -m      Use memoization (defaults to not).\n"
)

FAC_USAGE = (
    "USAGE: fac [NUM] [OPTIONS]\n"
    "Calculates [NUM]! .\n"
    "\n"
    "  -m      Use memoization (defaults to not).\n"
)

OVERFLOW_MESSAGE = "Overflowed unsigned long!"
TOO_LARGE_MESSAGE = "Number too large to take as input."

_fib_memo = [0, 1]
_fac_memo = [1]


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def _fib(n: int) -> int:
    if n < 2:
        return n
    return (_fib(n - 1) + _fib(n - 2)) & ULONG_MAX


def fib(n: int) -> int:
    """Return the ``n``th Fibonacci number (the zeroth is 0), by plain recursion."""
    _check(n)
    return _fib(n)


def memoized_fib(n: int) -> int:
    """Return the ``n``th Fibonacci number, remembering every one computed."""
    _check(n)
    while len(_fib_memo) <= n:
        _fib_memo.append((_fib_memo[-1] + _fib_memo[-2]) & ULONG_MAX)
    return _fib_memo[n]


def fac(n: int) -> int:
    """Return ``n`` factorial."""
    _check(n)
    return math.prod(range(1, n + 1)) & ULONG_MAX


def memoized_fac(n: int) -> int:
    """Return ``n`` factorial, remembering every one computed."""
    _check(n)
    while len(_fac_memo) <= n:
        _fac_memo.append((len(_fac_memo) * _fac_memo[-1]) & ULONG_MAX)
    return _fac_memo[n]


_NUMBER = re.compile(r"\s*([+-]?)(\d+)")


def _parse_ulong(text: str) -> int:
    """Parse a leading unsigned number; a minus sign wraps around."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(2))
    if value > ULONG_MAX:
        raise OverflowError(f"number out of range: {text!r}")
    return (-value) & ULONG_MAX if match.group(1) == "-" else value


def _parse_args(args: Sequence[str]) -> tuple[int, bool]:
    n = 0
    memoize = False
    for arg in args:
        if arg == "-m":
            memoize = True
        else:
            n = _parse_ulong(arg)
    return n, memoize


def fib_main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: print Fibonacci numbers 0 through NUM, ``-m`` to memoize."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(FIB_USAGE, file=sys.stderr)
        return 1
    try:
        n, memoize = _parse_args(args)
    except OverflowError:
        print(TOO_LARGE_MESSAGE, file=sys.stderr)
        return 1
    except ValueError:
        print(FIB_USAGE, file=sys.stderr)
        return 1

    func: Callable[[int], int] = memoized_fib if memoize else fib
    previous = 0
    i = 0
    while i <= n:
        result = func(i)
        if previous > result:
            print(OVERFLOW_MESSAGE)
            break
        print(result)
        previous = result
        i += 1
    return 0


def fac_main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: print NUM factorial, ``-m`` to memoize."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(FAC_USAGE, file=sys.stderr)
        return 1
    try:
        n, memoize = _parse_args(args)
    except OverflowError:
        print(TOO_LARGE_MESSAGE, file=sys.stderr)
        return 1
    except ValueError:
        print("Please enter a valid number.", file=sys.stderr)
        return 1

    func: Callable[[int], int] = memoized_fac if memoize else fac
    previous = 0
    result = 1
    i = 0
    while i <= n:
        result = func(i)
        if previous > result:
            print(previous)
            print(OVERFLOW_MESSAGE)
            return 1
        previous = result
        i += 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(fib_main())