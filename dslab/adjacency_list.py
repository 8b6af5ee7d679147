"""A directed graph stored as a list of vertices, each with its own edge list.

Vertices keep the order they were added in and every vertex keeps its
outgoing edges in the order they were added. Keys are looked up from the
first vertex onwards, so when a key is added twice the earliest vertex wins.
A vertex can only be removed once no edge enters or leaves it.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional


class VertexNotFoundError(KeyError):
    """Raised when no vertex has the requested key."""


class VertexInUseError(ValueError):
    """Raised when a vertex that still has edges is removed."""


class EdgeNotFoundError(KeyError):
    """Raised when the requested edge does not exist."""


@dataclass(eq=False)
class Vertex:
    """One vertex: its key, its name and its outgoing edges."""

    key: str
    name: str
    neighbors: list[Vertex] = field(default_factory=list, repr=False)
    in_degree: int = 0

    @property
    def out_degree(self) -> int:
        return len(self.neighbors)


class AdjacencyListGraph:
    """A directed graph of :class:`Vertex` values keyed by short strings."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []

    def _locate(self, key: str) -> Optional[Vertex]:
        return next((vertex for vertex in self._vertices if vertex.key == key), None)

    def _require(self, key: str) -> Vertex:
        vertex = self._locate(key)
        if vertex is None:
            raise VertexNotFoundError(key)
        return vertex

    def add_vertex(self, key: str, name: str) -> Vertex:
        """Append a vertex with no edges and return it."""
        vertex = Vertex(key, name)
        self._vertices.append(vertex)
        return vertex

    def add_edge(self, source: str, destination: str) -> None:
        """Add an edge from ``source`` to ``destination``.

        Raises VertexNotFoundError if either end is missing.
        """
        start = self._require(source)
        end = self._require(destination)
        start.neighbors.append(end)
        end.in_degree += 1

    def remove_vertex(self, key: str) -> Vertex:
        """Remove the vertex with ``key`` and return it.

        Raises VertexNotFoundError if it is missing and VertexInUseError if
        any edge still enters or leaves it.
        """
        vertex = self._require(key)
        if vertex.in_degree or vertex.out_degree:
            raise VertexInUseError(f"vertex {key!r} still has edges")
        self._vertices.remove(vertex)
        return vertex

    def remove_edge(self, source: str, destination: str) -> None:
        """Remove the first edge from ``source`` to ``destination``.

        Raises VertexNotFoundError if either end is missing and
        EdgeNotFoundError if no such edge exists.
        """
        start = self._require(source)
        end = self._require(destination)
        for index, neighbor in enumerate(start.neighbors):
            if neighbor.key == destination:
                del start.neighbors[index]
                end.in_degree -= 1
                return
        raise EdgeNotFoundError((source, destination))

    def in_degree(self, key: str) -> int:
        """Return the number of edges entering the vertex with ``key``."""
        return self._require(key).in_degree

    def out_degree(self, key: str) -> int:
        """Return the number of edges leaving the vertex with ``key``."""
        return self._require(key).out_degree

    def bfs(self) -> list[str]:
        """Return every key in breadth-first order.

        Each vertex not yet reached starts a new search, in insertion order.
        """
        order: list[str] = []
        seen: set[int] = set()
        for start in self._vertices:
            if id(start) in seen:
                continue
            seen.add(id(start))
            pending = deque([start])
            while pending:
                vertex = pending.popleft()
                order.append(vertex.key)
                for neighbor in vertex.neighbors:
                    if id(neighbor) not in seen:
                        seen.add(id(neighbor))
                        pending.append(neighbor)
        return order

    def dfs(self) -> list[str]:
        """Return every key in depth-first order using an explicit stack.

        Each vertex not yet reached starts a new search, in insertion order.
        """
        order: list[str] = []
        seen: set[int] = set()
        for start in self._vertices:
            if id(start) in seen:
                continue
            seen.add(id(start))
            stack = [start]
            while stack:
                vertex = stack.pop()
                order.append(vertex.key)
                for neighbor in vertex.neighbors:
                    if id(neighbor) not in seen:
                        seen.add(id(neighbor))
                        stack.append(neighbor)
        return order

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._vertices.clear()

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, key: object) -> bool:
        return any(vertex.key == key for vertex in self._vertices)