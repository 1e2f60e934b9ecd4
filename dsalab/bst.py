"""A binary search tree of strings that counts duplicates, with a menu front end."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["BSTree", "main"]


@dataclass(eq=False)
class _Node:
    value: str
    count: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _height(node: _Node | None) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


class BSTree:
    """An unbalanced binary search tree; inserting a present string bumps its count."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: str) -> None:
        """Insert ``value``, or count one more occurrence if it is present."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if node.value == value:
                node.count += 1
                return
            if node.value < value:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left

    def _find(self, value: str) -> tuple[_Node | None, _Node | None]:
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.right if node.value < value else node.left
        return parent, node

    def search(self, value: str) -> bool:
        """Return whether ``value`` is stored in the tree."""
        return self._find(value)[1] is not None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.search(value)

    def largest(self) -> str:
        """The greatest string, or an empty string for an empty tree."""
        node = self._root
        if node is None:
            return ""
        while node.right is not None:
            node = node.right
        return node.value

    def smallest(self) -> str:
        """The least string, or an empty string for an empty tree."""
        node = self._root
        if node is None:
            return ""
        while node.left is not None:
            node = node.left
        return node.value

    def height(self, value: str) -> int:
        """Height of the subtree rooted at ``value``, or -1 if it is absent."""
        node = self._find(value)[1]
        return -1 if node is None else _height(node)

    def remove(self, value: str) -> None:
        """Remove one occurrence of ``value``; a missing value changes nothing."""
        parent, node = self._find(value)
        if node is not None:
            self._remove_node(parent, node)

    def _remove_node(self, parent: _Node | None, node: _Node) -> None:
        if node.count > 1:
            node.count -= 1
            return
        if node.left is None and node.right is None:
            if node is self._root:
                self._root = None
            elif parent is not None and parent.right is node:
                parent.right = None
            elif parent is not None:
                parent.left = None
            return
        # Replace with the successor when there is no left subtree, else the predecessor.
        holder = node
        if node.left is None:
            assert node.right is not None
            replacement = node.right
            while replacement.left is not None:
                holder, replacement = replacement, replacement.left
        else:
            replacement = node.left
            while replacement.right is not None:
                holder, replacement = replacement, replacement.right
        value, count = replacement.value, replacement.count
        replacement.count = 1
        self._remove_node(holder, replacement)
        node.value, node.count = value, count

    def pre_order(self) -> list[tuple[str, int]]:
        """Pairs of value and count in pre-order."""
        return list(self._pre(self._root))

    def in_order(self) -> list[tuple[str, int]]:
        """Pairs of value and count in sorted order."""
        return list(self._in(self._root))

    def post_order(self) -> list[tuple[str, int]]:
        """Pairs of value and count in post-order."""
        return list(self._post(self._root))

    def _pre(self, node: _Node | None) -> Iterator[tuple[str, int]]:
        if node is None:
            return
        yield node.value, node.count
        yield from self._pre(node.left)
        yield from self._pre(node.right)

    def _in(self, node: _Node | None) -> Iterator[tuple[str, int]]:
        if node is None:
            return
        yield from self._in(node.left)
        yield node.value, node.count
        yield from self._in(node.right)

    def _post(self, node: _Node | None) -> Iterator[tuple[str, int]]:
        if node is None:
            return
        yield from self._post(node.left)
        yield from self._post(node.right)
        yield node.value, node.count


# ------------------------------------------------------------------ command
_MENU = (
    "1. Insert",
    "2. Remove",
    "3. Print",
    "4. Search",
    "5. Smallest",
    "6. Largest",
    "7. Height",
    "8. Quit",
)
_QUIT = 8


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


def _prompt(text: str) -> str | None:
    print(text)
    return _read_line()


def _format(items: list[tuple[str, int]]) -> str:
    return "".join(f"{value}({count}), " for value, count in items)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary search tree menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive binary search tree of strings.")
    parser.parse_args(sys.argv[1:] if argv is None else argv)

    tree = BSTree()
    choice = _menu()
    while choice != _QUIT:
        if choice == 1:
            entry = _prompt("Enter string to insert: ")
            if entry is None:
                break
            tree.insert(entry)
        elif choice == 2:
            entry = _prompt("Enter string to remove: ")
            if entry is None:
                break
            tree.remove(entry)
        elif choice == 3:
            print(f"Preorder = {_format(tree.pre_order())}")
            print(f"Inorder = {_format(tree.in_order())}")
            print(f"Postorder = {_format(tree.post_order())}")
        elif choice == 4:
            entry = _prompt("Enter string to search for: ")
            if entry is None:
                break
            print("Found" if tree.search(entry) else "Not Found")
        elif choice == 5:
            print(f"Smallest: {tree.smallest()}")
        elif choice == 6:
            print(f"Largest: {tree.largest()}")
        elif choice == 7:
            entry = _prompt("Enter string: ")
            if entry is None:
                break
            print(f"Height of subtree rooted at {entry}: {tree.height(entry)}")
        choice = _menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())