"""A self-balancing AVL tree of strings with an interactive menu front end."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["AVLTree", "main"]


@dataclass(eq=False)
class _Node:
    data: str
    count: int = 1
    left: _Node | None = None
    right: _Node | None = None
    parent: _Node | None = None


def _height(node: _Node | None) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _set_child(parent: _Node, child: _Node | None, *, left: bool) -> None:
    if left:
        parent.left = child
    else:
        parent.right = child
    if child is not None:
        child.parent = parent


def _render_jpg(dot_file: str) -> str | None:
    """Render ``dot_file`` with Graphviz; return the image name or None on failure."""
    jpg_file = dot_file[:-4] + ".jpg"
    try:
        result = subprocess.run(["dot", "-Tjpg", dot_file, "-o", jpg_file], check=False)
    except FileNotFoundError:
        return None
    return jpg_file if result.returncode == 0 else None


class AVLTree:
    """An AVL tree of strings; inserting a present string bumps its count."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: str) -> None:
        """Insert ``value`` and rebalance every ancestor of the new node."""
        new_node = _Node(value)
        if self._root is None:
            self._root = new_node
            return
        current = self._root
        while True:
            if value == current.data:
                current.count += 1
                return
            if value < current.data:
                if current.left is None:
                    _set_child(current, new_node, left=True)
                    break
                current = current.left
            else:
                if current.right is None:
                    _set_child(current, new_node, left=False)
                    break
                current = current.right
        node = new_node.parent
        while node is not None:
            self._rebalance(node)
            node = node.parent

    def _rebalance(self, node: _Node) -> None:
        factor = _balance(node)
        if factor == 2:
            assert node.left is not None
            if _balance(node.left) == -1:
                self._rotate_left(node.left)
            self._rotate_right(node)
        elif factor == -2:
            assert node.right is not None
            if _balance(node.right) == 1:
                self._rotate_right(node.right)
            self._rotate_left(node)

    def _lift(self, node: _Node, replacement: _Node) -> None:
        parent = node.parent
        if parent is None:
            self._root = replacement
            replacement.parent = None
        elif parent.left is node:
            _set_child(parent, replacement, left=True)
        elif parent.right is node:
            _set_child(parent, replacement, left=False)

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        assert pivot is not None
        orphan = pivot.right
        self._lift(node, pivot)
        _set_child(pivot, node, left=False)
        _set_child(node, orphan, left=True)

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        assert pivot is not None
        orphan = pivot.left
        self._lift(node, pivot)
        _set_child(pivot, node, left=True)
        _set_child(node, orphan, left=False)

    def balance_factors(self) -> list[tuple[str, int]]:
        """In-order pairs of each value and its node's balance factor."""
        return list(self._in_order(self._root))

    def _in_order(self, node: _Node | None) -> Iterator[tuple[str, int]]:
        if node is None:
            return
        yield from self._in_order(node.left)
        yield node.data, _balance(node)
        yield from self._in_order(node.right)

    def format_balance_factors(self) -> str:
        """In-order listing in the form ``value(factor), ``."""
        return "".join(f"{data}({factor}), " for data, factor in self.balance_factors())

    def to_dot(self) -> str:
        """The tree's edges as a Graphviz digraph."""
        body = "".join(f"{line}\n" for line in self._dot_lines(self._root))
        return "digraph G {\n" + body + "}"

    def _dot_lines(self, node: _Node | None) -> Iterator[str]:
        if node is None:
            return
        if node.left is not None:
            yield from self._dot_lines(node.left)
            yield f"{node.data} -> {node.left.data};"
        if node.right is not None:
            yield from self._dot_lines(node.right)
            yield f"{node.data} -> {node.right.data};"

    def visualize_tree(self, output_filename: str) -> str | None:
        """Write the dot file and render it to a JPEG; return the image name if rendered."""
        with open(output_filename, "w", encoding="utf-8") as out:
            out.write(self.to_dot())
        return _render_jpg(output_filename)


# ------------------------------------------------------------------ command
_MENU = ("1. Insert", "2. Print", "3. Quit")
_QUIT = 3


def _read_line() -> str | None:
    try:
        return input()
    except EOFError:
        return None


def _menu() -> int:
    print()
    print("Enter menu choice: ")
    for entry in _MENU:
        print(entry)
    while True:
        line = _read_line()
        if line is None:
            return _QUIT
        if line.strip():
            break
    match = re.match(r"\s*([+-]?\d+)", line)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run the interactive AVL tree menu, then write ``output.txt`` as a dot file."""
    parser = argparse.ArgumentParser(description="Interactive AVL tree of strings.")
    parser.parse_args(sys.argv[1:] if argv is None else argv)

    tree = AVLTree()
    choice = _menu()
    while choice != _QUIT:
        if choice == 1:
            print("Enter string to insert: ", end="")
            entry = _read_line()
            print()
            if entry is None:
                break
            tree.insert(entry)
        elif choice == 2:
            print(tree.format_balance_factors())
        choice = _menu()
    tree.visualize_tree("output.txt")
    return 0


if __name__ == "__main__":
    sys.exit(main())