"""Demonstrations of AVL tree rotations, insertions and removals."""

from __future__ import annotations

import io
import sys
from typing import Optional, Sequence, TextIO

from cslabs.avltree import AVLTree
from cslabs.coloredout import BORDER_CHAR, bold, compare_output

BORDER = BORDER_CHAR * 64
EXPECTED_FILE = "soln_testavl.out"

MANY_KEYS = (94, 87, 61, 96, 76, 92, 42, 78, 17, 11, 41, 95, 36,
             26, 23, 93, 31, 3, 45, 18, 73, 24, 74, 1, 71, 82)
REMOVED_KEYS = (95, 94, 45, 61, 41, 42, 71)


def _stream(out: Optional[TextIO]) -> TextIO:
    return out if out is not None else sys.stdout


def print_header(headline: str, out: Optional[TextIO] = None) -> None:
    """Write ``headline`` framed by two border lines."""
    out = _stream(out)
    out.write(BORDER + "\n")
    bold(headline, out)
    out.write("\n" + BORDER + "\n")


def _print_before(out: TextIO) -> None:
    out.write(BORDER_CHAR)
    bold("Before", out)
    out.write(BORDER_CHAR + "\n")


def _print_after(out: TextIO, action: str, key: int) -> None:
    out.write("\n" + BORDER_CHAR)
    bold(f"After {action}(", out)
    bold(key, out)
    bold(")", out)
    out.write(BORDER_CHAR + "\n")


def _print_end(out: TextIO) -> None:
    out.write("\n\n")


def _int_tree(keys: Sequence[int], out: TextIO) -> AVLTree:
    tree = AVLTree(out)
    for key in keys:
        tree.insert(key, key)
    return tree


def _insertion_demo(out: Optional[TextIO], title: str,
                    keys: Sequence[int], new_key: int) -> None:
    out = _stream(out)
    tree = _int_tree(keys, out)
    print_header(title, out)
    _print_before(out)
    tree.print(out)
    _print_after(out, "insert", new_key)
    tree.insert(new_key, new_key)
    tree.print(out)
    _print_end(out)


def rotate_left_demo(out: Optional[TextIO] = None) -> None:
    """Show an insertion that needs a single left rotation."""
    _insertion_demo(out, "Left Rotation", (4, 6, 2, 7, 5), 9)


def rotate_right_demo(out: Optional[TextIO] = None) -> None:
    """Show an insertion that needs a single right rotation."""
    _insertion_demo(out, "Right Rotation", (3, 0, 8, 6), 5)


def rotate_left_right_demo(out: Optional[TextIO] = None) -> None:
    """Show an insertion that needs a left-right rotation."""
    _insertion_demo(out, "Left-Right Rotation", (5, 1, 8, 0, 3), 2)


def rotate_right_left_demo(out: Optional[TextIO] = None) -> None:
    """Show an insertion that needs a right-left rotation."""
    _insertion_demo(out, "Right-Left Rotation", (3, 8), 6)


def removal_demo(out: Optional[TextIO] = None) -> None:
    """Show removal of a node with two children."""
    out = _stream(out)
    tree = _int_tree((9, 5, 11, 4, 6, 10, 12, 3), out)
    print_header("Removal Case 2", out)
    _print_before(out)
    tree.print(out)
    _print_after(out, "remove", 9)
    tree.remove(9)
    tree.print(out)
    _print_end(out)


def _many_tree(out: TextIO) -> AVLTree:
    tree = AVLTree(out)
    for key in MANY_KEYS:
        tree.insert(key, f"data for {key}")
    return tree


def many_insertions_demo(out: Optional[TextIO] = None) -> None:
    """Insert many keys and draw the resulting tree."""
    out = _stream(out)
    print_header("Testing Many Insertions", out)
    tree = _many_tree(out)
    tree.print(out)
    _print_end(out)


def many_removals_demo(out: Optional[TextIO] = None) -> None:
    """Insert many keys, remove several, and draw the resulting tree."""
    out = _stream(out)
    print_header("Testing Many Removals", out)
    tree = _many_tree(out)
    for key in REMOVED_KEYS:
        tree.remove(key)
    tree.print(out)
    _print_end(out)


def find_demo(out: Optional[TextIO] = None) -> None:
    """Insert string pairs and look each of them up."""
    out = _stream(out)
    tree = AVLTree(out)
    print_header("Testing Find", out)
    pairs = (("C", "C++"), ("free", "delete"), ("malloc", "new"), ("bool", "void"))
    for key, value in pairs:
        tree.insert(key, value)
    tree.print(out)
    for key, _ in pairs:
        out.write(f"find({key}) -> {tree.find(key)}\n")
    _print_end(out)


def run_demos(out: Optional[TextIO] = None, reduced: bool = False) -> None:
    """Run the rotation and removal demos, and the large ones unless ``reduced``."""
    out = _stream(out)
    rotate_left_demo(out)
    rotate_right_demo(out)
    rotate_left_right_demo(out)
    rotate_right_left_demo(out)
    removal_demo(out)
    if not reduced:
        many_insertions_demo(out)
        many_removals_demo(out)


def _stdout_is_tty() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demos; ``c`` colours against the expected file, ``r`` shortens."""
    args = list(sys.argv[1:] if argv is None else argv)
    flags = {arg[:1].lower() for arg in args[:2]}
    reduced = "r" in flags
    colored = "c" in flags and _stdout_is_tty()

    if not colored:
        run_demos(sys.stdout, reduced)
        return 0

    buffer = io.StringIO()
    run_demos(buffer, reduced)
    try:
        with open(EXPECTED_FILE, encoding="utf-8") as handle:
            expected = handle.read()
    except OSError:
        expected = ""
    sys.stdout.write(compare_output(buffer.getvalue(), expected))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())