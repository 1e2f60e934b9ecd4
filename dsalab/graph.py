"""A weighted directed graph explored breadth-first from its first vertex."""

from __future__ import annotations

import re
import subprocess
import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

__all__ = ["Color", "Vertex", "Graph", "main"]


class Color(Enum):
    """Visiting state of a vertex during a search."""

    WHITE = "WHITE"
    GREY = "GREY"
    BLACK = "BLACK"


@dataclass(eq=False)
class Vertex:
    """A labelled vertex with its outgoing edges as (vertex index, weight) pairs."""

    label: str
    neighbors: list[tuple[int, int]] = field(default_factory=list)
    distance: int | None = None
    color: Color = Color.WHITE
    previous: Vertex | None = field(default=None, repr=False)


def _render_jpg(dot_file: str) -> str | None:
    jpg_file = dot_file[:-4] + ".jpg"
    try:
        result = subprocess.run(["dot", "-Tjpg", dot_file, "-o", jpg_file], check=False)
    except FileNotFoundError:
        return None
    return jpg_file if result.returncode == 0 else None


class Graph:
    """Vertices in input order; the first vertex is the search start."""

    def __init__(self, vertices: Iterable[Vertex] = ()) -> None:
        self.vertices: list[Vertex] = list(vertices)

    @classmethod
    def parse(cls, text: str) -> Graph:
        """Read a vertex count, an edge count, one label per line, then ``from to weight`` edges."""
        header = re.match(r"\s*(\d+)\s+(\d+)", text)
        if header is None:
            raise ValueError("graph text must start with the vertex and edge counts")
        count = int(header.group(1))
        rest = text[header.end() + 1:]
        lines = rest.split("\n")
        if len(lines) < count or (count and not rest):
            raise ValueError(f"expected {count} vertex labels")
        vertices = [Vertex(line.rstrip("\r")) for line in lines[:count]]
        index = {vertex.label: position for position, vertex in enumerate(vertices)}

        tokens = "\n".join(lines[count:]).split()
        if len(tokens) % 3:
            raise ValueError("every edge needs a source, a target and a weight")
        for source, target, weight in zip(tokens[0::3], tokens[1::3], tokens[2::3]):
            for label in (source, target):
                if label not in index:
                    raise ValueError(f"edge names unknown vertex {label!r}")
            vertices[index[source]].neighbors.append((index[target], int(weight)))
        return cls(vertices)

    @classmethod
    def from_file(cls, path: str) -> Graph:
        """Parse the graph stored in ``path``."""
        with open(path, encoding="utf-8") as source:
            return cls.parse(source.read())

    def bfs(self) -> None:
        """Breadth-first search from the first vertex, summing weights along the tree."""
        if not self.vertices:
            raise ValueError("graph has no vertices")
        for vertex in self.vertices:
            vertex.distance = None
            vertex.color = Color.WHITE
            vertex.previous = None
        start = self.vertices[0]
        start.distance = 0
        queue = deque([start])
        while queue:
            front = queue.popleft()
            front.color = Color.GREY
            assert front.distance is not None
            for position, weight in front.neighbors:
                neighbor = self.vertices[position]
                if neighbor.color is Color.WHITE:
                    neighbor.previous = front
                    neighbor.color = Color.GREY
                    neighbor.distance = front.distance + weight
                    queue.append(neighbor)
            front.color = Color.BLACK

    def distance(self, key: str) -> int | None:
        """Distance found for ``key``; None if unreached. Unknown labels raise KeyError."""
        for vertex in self.vertices:
            if vertex.label == key:
                return vertex.distance
        raise KeyError(key)

    def previous(self, key: str) -> str | None:
        """Label of the vertex ``key`` was reached from; None for the start or unreached."""
        for position, vertex in enumerate(self.vertices):
            if vertex.label == key and position:
                return vertex.previous.label if vertex.previous is not None else None
        if any(vertex.label == key for vertex in self.vertices):
            return None
        raise KeyError(key)

    def to_dot(self) -> str:
        """Reached vertices with their distances, and their edges, as a Graphviz digraph."""
        lines = ["digraph G {"]
        for vertex in self.vertices:
            if vertex.distance is None:
                continue
            lines.append(
                f'{vertex.label} [label= "Label: {vertex.label}, Distance: {vertex.distance}"];'
            )
            lines.extend(
                f"{vertex.label} -> {self.vertices[position].label}"
                for position, _ in vertex.neighbors
            )
        return "\n".join(lines) + "\n}"

    def output_graph(self, output_filename: str) -> str | None:
        """Write the dot file and render it to a JPEG; return the image name if rendered."""
        with open(output_filename, "w", encoding="utf-8") as out:
            out.write(self.to_dot())
        return _render_jpg(output_filename)


def main(argv: list[str] | None = None) -> int:
    """Search the graph in the given file and write ``<input>.dot``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage error: expected <executable> <input>", file=sys.stderr)
        return 1
    try:
        graph = Graph.from_file(args[0])
    except OSError:
        print("Input file not found.", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Invalid graph: {error}", file=sys.stderr)
        return 1
    graph.bfs()
    graph.output_graph(args[0] + ".dot")
    print("The End.")
    return 0


if __name__ == "__main__":
    sys.exit(main())