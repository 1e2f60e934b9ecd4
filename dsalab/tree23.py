"""A 2-3 tree of strings with an interactive menu front end."""

from __future__ import annotations

import argparse
import re
import sys
from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["Tree23", "main"]


@dataclass
class _Node:
    """A 2-node (one key, two children) or a 3-node (two keys, three children)."""

    keys: list[str]
    children: list[_Node] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_three_node(self) -> bool:
        return len(self.keys) == 2


class Tree23:
    """A balanced 2-3 search tree holding distinct strings."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    # ----------------------------------------------------------------- insert
    def insert(self, word: str) -> None:
        """Insert ``word``; inserting a word already present changes nothing."""
        if self._root is None:
            self._root = _Node([word])
            return
        promoted = self._insert(self._root, word)
        if promoted is not None:
            middle, left, right = promoted
            self._root = _Node([middle], [left, right])

    def _insert(self, node: _Node, word: str) -> tuple[str, _Node, _Node] | None:
        if word in node.keys:
            return None
        index = bisect_left(node.keys, word)
        if node.is_leaf:
            node.keys.insert(index, word)
        else:
            promoted = self._insert(node.children[index], word)
            if promoted is None:
                return None
            middle, left, right = promoted
            node.keys.insert(index, middle)
            node.children[index:index + 1] = [left, right]
        if len(node.keys) < 3:
            return None
        return self._split(node)

    @staticmethod
    def _split(node: _Node) -> tuple[str, _Node, _Node]:
        small, middle, large = node.keys
        left = _Node([small], node.children[:2])
        right = _Node([large], node.children[2:])
        return middle, left, right

    # ----------------------------------------------------------------- remove
    def remove(self, word: str) -> None:
        """Remove ``word`` if present; removing a missing word changes nothing."""
        if self._root is None:
            return
        self._remove(self._root, word)
        if not self._root.keys:
            self._root = self._root.children[0] if self._root.children else None

    def _remove(self, node: _Node, word: str) -> bool:
        if word in node.keys:
            index = node.keys.index(word)
            if node.is_leaf:
                del node.keys[index]
                return True
            successor = self._minimum(node.children[index + 1])
            node.keys[index] = successor
            self._remove(node.children[index + 1], successor)
            self._repair(node, index + 1)
            return True
        if node.is_leaf:
            return False
        index = bisect_left(node.keys, word)
        found = self._remove(node.children[index], word)
        if found:
            self._repair(node, index)
        return found

    @staticmethod
    def _minimum(node: _Node) -> str:
        while not node.is_leaf:
            node = node.children[0]
        return node.keys[0]

    @staticmethod
    def _repair(parent: _Node, index: int) -> None:
        """Restore the child at ``index`` if it has been left with no keys."""
        child = parent.children[index]
        if child.keys:
            return
        siblings = parent.children
        if index > 0 and siblings[index - 1].is_three_node:
            left = siblings[index - 1]
            child.keys = [parent.keys[index - 1]]
            parent.keys[index - 1] = left.keys.pop()
            if left.children:
                child.children.insert(0, left.children.pop())
            return
        if index + 1 < len(siblings) and siblings[index + 1].is_three_node:
            right = siblings[index + 1]
            child.keys = [parent.keys[index]]
            parent.keys[index] = right.keys.pop(0)
            if right.children:
                child.children.append(right.children.pop(0))
            return
        if index > 0:
            left = siblings[index - 1]
            left.keys.append(parent.keys.pop(index - 1))
            left.children.extend(child.children)
        else:
            right = siblings[1]
            right.keys.insert(0, parent.keys.pop(0))
            right.children[0:0] = child.children
        del siblings[index]

    # ----------------------------------------------------------------- search
    def search(self, word: str) -> bool:
        """Return whether ``word`` is stored in the tree."""
        node = self._root
        while node is not None:
            if word in node.keys:
                return True
            if node.is_leaf:
                return False
            node = node.children[bisect_left(node.keys, word)]
        return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    # ------------------------------------------------------------- traversals
    def pre_order(self) -> list[str]:
        """Keys in pre-order: small, left, [large, middle], right."""
        return list(self._pre(self._root))

    def in_order(self) -> list[str]:
        """Keys in sorted order."""
        return list(self._in(self._root))

    def post_order(self) -> list[str]:
        """Keys in post-order: left, [middle, small], right, then small or large."""
        return list(self._post(self._root))

    def _pre(self, node: _Node | None) -> Iterator[str]:
        if node is None:
            return
        left, middle, right = self._parts(node)
        yield node.keys[0]
        yield from self._pre(left)
        if node.is_three_node:
            yield node.keys[1]
            yield from self._pre(middle)
        yield from self._pre(right)

    def _in(self, node: _Node | None) -> Iterator[str]:
        if node is None:
            return
        left, middle, right = self._parts(node)
        yield from self._in(left)
        yield node.keys[0]
        if node.is_three_node:
            yield from self._in(middle)
            yield node.keys[1]
        yield from self._in(right)

    def _post(self, node: _Node | None) -> Iterator[str]:
        if node is None:
            return
        left, middle, right = self._parts(node)
        yield from self._post(left)
        if node.is_three_node:
            yield from self._post(middle)
            yield node.keys[0]
        yield from self._post(right)
        yield node.keys[-1]

    @staticmethod
    def _parts(node: _Node) -> tuple[_Node | None, _Node | None, _Node | None]:
        if node.is_leaf:
            return None, None, None
        if node.is_three_node:
            left, middle, right = node.children
            return left, middle, right
        left, right = node.children
        return left, None, right


# ------------------------------------------------------------------ command
_MENU = ("1. Insert", "2. Remove", "3. Print", "4. Search", "5. Quit")
_QUIT = 5


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
    print(text, end="")
    entry = _read_line()
    print()
    return entry


def _format(items: list[str]) -> str:
    return "".join(f"{item}, " for item in items)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive 2-3 tree menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive 2-3 tree of movie titles.")
    parser.parse_args(sys.argv[1:] if argv is None else argv)

    tree = Tree23()
    choice = _menu()
    while choice != _QUIT:
        if choice == 1:
            entry = _prompt("Enter movie title to insert: ")
            if entry is None:
                break
            tree.insert(entry)
        elif choice == 2:
            entry = _prompt("Enter movie title to remove: ")
            if entry is None:
                break
            tree.remove(entry)
        elif choice == 3:
            print(f"Preorder = {_format(tree.pre_order())}")
            print(f"Inorder = {_format(tree.in_order())}")
            print(f"Postorder = {_format(tree.post_order())}")
        elif choice == 4:
            entry = _prompt("Enter movie title to search for: ")
            if entry is None:
                break
            print("Found" if tree.search(entry) else "Not Found")
        choice = _menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())