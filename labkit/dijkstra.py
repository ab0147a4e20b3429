"""Single-source shortest paths on small undirected graphs, with an interactive front end."""

from __future__ import annotations

import math
import re
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from typing import TextIO

BANNER = "-- Dijkstra's Algorithm --\n"
VERTICES_PROMPT = "Enter the number of vertices: "
EDGES_PROMPT = "Enter the number of edges: "
SOURCE_PROMPT = "Enter the source vertex: "
EDGE_FORMAT_HINT = "Enter the edges in the format: src dest weight\n"
INVALID_VERTICES = "Invalid number of vertices.\n"
INVALID_EDGES = "Invalid number of edges.\n"
INVALID_FORMAT = (
    "Invalid input format. Enter exactly three integers separated by spaces "
    "(src dest weight).\n"
)
INVALID_EDGE = "Invalid edge (self-loop, out of range or negative weight), try again.\n"
DUPLICATE_EDGE = "Edge already exists, pick another combination of vertices.\n"
INVALID_SOURCE = "Invalid source vertex.\n"
CONTINUE_PROMPT = (
    "\nYou are about to create a new graph. Enter '0' if you want to stop the "
    "running of the script or enter something else to continue: "
)
_HEADER = "Vertex \t Distance from Source\n"


class InvalidEdgeError(ValueError):
    """The edge is a self-loop, leaves the graph or has a negative weight."""


class DuplicateEdgeError(ValueError):
    """An edge between the two vertices already exists."""


class Graph:
    """An undirected weighted graph stored as an adjacency matrix."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("a graph needs at least one vertex")
        self.vertices = vertices
        self._weights: list[list[int | None]] = [
            [0 if row == col else None for col in range(vertices)]
            for row in range(vertices)
        ]

    def _contains(self, vertex: int) -> bool:
        return 0 <= vertex < self.vertices

    def has_edge(self, src: int, dest: int) -> bool:
        """Whether ``src`` and ``dest`` are joined; a vertex always reaches itself."""
        if not (self._contains(src) and self._contains(dest)):
            raise IndexError(f"vertex out of range: {src}, {dest}")
        return self._weights[src][dest] is not None

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Join ``src`` and ``dest`` in both directions with ``weight``."""
        if (
            not self._contains(src)
            or not self._contains(dest)
            or src == dest
            or weight < 0
        ):
            raise InvalidEdgeError(f"invalid edge {src} -> {dest} ({weight})")
        if self.has_edge(src, dest):
            raise DuplicateEdgeError(f"edge {src} -> {dest} already exists")
        self._weights[src][dest] = weight
        self._weights[dest][src] = weight


def shortest_distances(graph: Graph, source: int) -> list[int | None]:
    """Distance from ``source`` to every vertex; ``None`` where unreachable."""
    count = graph.vertices
    if not 0 <= source < count:
        raise ValueError(f"source vertex out of range: {source}")
    dist: list[float] = [math.inf] * count
    dist[source] = 0
    included = [False] * count

    for _ in range(count - 1):
        # Ties go to the highest-numbered vertex.
        u = min(
            (v for v in range(count) if not included[v]),
            key=lambda v: (dist[v], -v),
        )
        included[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph._weights[u]):
            if not included[v] and weight is not None and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight

    return [None if d == math.inf else int(d) for d in dist]


def format_solution(distances: Iterable[int | None]) -> str:
    """Render the distance table, writing INF for unreachable vertices."""
    rows = [_HEADER]
    for vertex, distance in enumerate(distances):
        shown = "INF" if distance is None else str(distance)
        rows.append(f"{vertex} \t\t {shown}\n")
    return "".join(rows)


_INT_PREFIX = re.compile(r"[+-]?\d+")


class _Scanner:
    """Whitespace-separated reading with the ability to drop the rest of a line."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines = iter(stream)
        self._pending: deque[str] = deque()

    def _token(self) -> str:
        while not self._pending:
            try:
                line = next(self._lines)
            except StopIteration:
                raise EOFError from None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def drop_line(self) -> None:
        self._pending.clear()

    def read_int(self) -> int | None:
        """Next integer; on malformed input the line is dropped and None returned."""
        token = self._token()
        match = _INT_PREFIX.match(token)
        if match is None:
            self.drop_line()
            return None
        rest = token[match.end():]
        if rest:
            self._pending.appendleft(rest)
        return int(match.group())

    def read_ints(self, count: int) -> list[int] | None:
        values = []
        for _ in range(count):
            value = self.read_int()
            if value is None:
                return None
            values.append(value)
        return values

    def read_char(self) -> str:
        token = self._token()
        if len(token) > 1:
            self._pending.appendleft(token[1:])
        return token[0]


def _session(scanner: _Scanner, out: TextIO) -> bool:
    """Handle one graph; return False when the user asks to stop."""
    out.write(BANNER)
    out.write(VERTICES_PROMPT)
    vertices = scanner.read_int()
    if vertices is None or vertices <= 0:
        out.write(INVALID_VERTICES)
        return True
    graph = Graph(vertices)

    out.write(EDGES_PROMPT)
    edges = scanner.read_int()
    scanner.drop_line()
    if edges is None or edges < 0 or edges > vertices * (vertices - 1) // 2:
        out.write(INVALID_EDGES)
        return True

    if edges:
        out.write(EDGE_FORMAT_HINT)
    added = 0
    while added < edges:
        triple = scanner.read_ints(3)
        if triple is None:
            out.write(INVALID_FORMAT)
            continue
        try:
            graph.add_edge(*triple)
        except InvalidEdgeError:
            out.write(INVALID_EDGE)
        except DuplicateEdgeError:
            out.write(DUPLICATE_EDGE)
        else:
            added += 1

    out.write(SOURCE_PROMPT)
    source = scanner.read_int()
    while source is None or not 0 <= source < vertices:
        out.write(INVALID_SOURCE)
        out.write(SOURCE_PROMPT)
        source = scanner.read_int()

    out.write(format_solution(shortest_distances(graph, source)))
    out.write(CONTINUE_PROMPT)
    return scanner.read_char() != "0"


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Read graphs interactively and print their distance tables until told to stop."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    scanner = _Scanner(stdin)
    try:
        while _session(scanner, stdout):
            stdout.flush()
    except EOFError:
        pass
    stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive session on the standard streams."""
    return run()


if __name__ == "__main__":
    sys.exit(main())