"""Arithmetic expression trees built from infix expressions of single-character operands."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["ExpressionNode", "ArithmeticExpression", "priority", "infix_to_postfix", "main"]

_OPERATORS = "+-*/()"


def priority(op: str) -> int:
    """Operator priority: 3 for '(', 2 for '*' and '/', 1 for '+' and '-', 0 otherwise."""
    if op == "(":
        return 3
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix, ignoring spaces."""
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char == " ":
            continue
        if char not in _OPERATORS:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while True:
                if not stack:
                    raise ValueError(f"unbalanced ')' in {expression!r}")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            while stack and priority(char) <= priority(stack[-1]):
                if stack[-1] == "(":
                    break
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


@dataclass(eq=False)
class ExpressionNode:
    """One operand or operator of an expression tree, with its graph key."""

    data: str
    key: str
    left: ExpressionNode | None = None
    right: ExpressionNode | None = None


def _render_jpg(dot_file: str) -> str | None:
    jpg_file = dot_file[:-4] + ".jpg"
    try:
        result = subprocess.run(["dot", "-Tjpg", dot_file, "-o", jpg_file], check=False)
    except FileNotFoundError:
        return None
    return jpg_file if result.returncode == 0 else None


class ArithmeticExpression:
    """An infix expression and the binary tree built from it."""

    def __init__(self, infix_expression: str) -> None:
        self.infix_expression = infix_expression
        self.root: ExpressionNode | None = None

    def build_tree(self) -> None:
        """Build the tree from the postfix form; node keys run 'a', 'b', ... in postfix order."""
        postfix = infix_to_postfix(self.infix_expression)
        stack: list[ExpressionNode] = []
        for index, char in enumerate(postfix):
            node = ExpressionNode(char, chr(ord("a") + index))
            if priority(char) == 0:
                stack.append(node)
                continue
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands in {self.infix_expression!r}")
            node.right = stack.pop()
            node.left = stack.pop()
            stack.append(node)
            self.root = node

    def infix(self) -> str:
        """Fully parenthesised infix form of the tree."""
        return "".join(self._infix(self.root))

    def prefix(self) -> str:
        """Prefix form of the tree."""
        return "".join(self._prefix(self.root))

    def postfix(self) -> str:
        """Postfix form of the tree."""
        return "".join(self._postfix(self.root))

    def _infix(self, node: ExpressionNode | None) -> Iterator[str]:
        if node is None:
            return
        wrap = priority(node.data) != 0
        if wrap:
            yield "("
        yield from self._infix(node.left)
        yield node.data
        yield from self._infix(node.right)
        if wrap:
            yield ")"

    def _prefix(self, node: ExpressionNode | None) -> Iterator[str]:
        if node is None:
            return
        yield node.data
        yield from self._prefix(node.left)
        yield from self._prefix(node.right)

    def _postfix(self, node: ExpressionNode | None) -> Iterator[str]:
        if node is None:
            return
        yield from self._postfix(node.left)
        yield from self._postfix(node.right)
        yield node.data

    def to_dot(self) -> str:
        """The tree as a labelled Graphviz digraph."""
        body = "".join(f"{line}\n" for line in self._dot_lines(self.root))
        return "digraph G {\n" + body + "}"

    def _dot_lines(self, node: ExpressionNode | None) -> Iterator[str]:
        if node is None:
            return
        yield f'{node.key}[ label = "{node.data}" ]'
        if node.left is not None:
            yield f'{node.key}->{node.left.key}[ label = "{node.left.data}" ]'
            yield from self._dot_lines(node.left)
        if node.right is not None:
            yield f'{node.key} -> {node.right.key}[ label =  "{node.right.data}" ]'
            yield from self._dot_lines(node.right)
        yield ""

    def visualize_tree(self, output_filename: str) -> str | None:
        """Write the dot file and render it to a JPEG; return the image name if rendered."""
        with open(output_filename, "w", encoding="utf-8") as out:
            out.write(self.to_dot())
        return _render_jpg(output_filename)


_EXAMPLES = ("a+b*c", "(a+b)*(c-d)", "a + b * c - ( d * e + f ) * g")


def main(argv: list[str] | None = None) -> int:
    """Build and print the example expressions, writing ``exprN.dot`` for each."""
    parser = argparse.ArgumentParser(description="Show arithmetic expression trees.")
    parser.parse_args(sys.argv[1:] if argv is None else argv)

    for number, text in enumerate(_EXAMPLES, start=1):
        expression = ArithmeticExpression(text)
        expression.build_tree()
        print(f"expression {number}: {text}")
        print(f"infix: {expression.infix()}")
        print(f"prefix: {expression.prefix()}")
        print(f"postfix: {expression.postfix()}")
        expression.visualize_tree(f"expr{number}.dot")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())