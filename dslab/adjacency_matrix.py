"""A directed graph stored as an adjacency matrix of single-character names.

The number of vertices is fixed when the graph is made. Each slot starts
with a blank name (a space) and is named with :meth:`set_vertex`. Names are
looked up from the first slot onwards, so when a name is used twice the
earliest slot wins.
"""

from __future__ import annotations

from collections import deque
from typing import Callable

BLANK = " "


class SourceNotFoundError(KeyError):
    """Raised when no vertex has the requested source name."""


class DestinationNotFoundError(KeyError):
    """Raised when no vertex has the requested destination name."""


class AdjacencyMatrixGraph:
    """A directed, unweighted graph over a fixed number of named vertices."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._names: list[str] = [BLANK] * vertex_count
        self._matrix: list[list[int]] = [[0] * vertex_count for _ in range(vertex_count)]

    def set_vertex(self, index: int, name: str) -> None:
        """Give the vertex in slot ``index`` the name ``name``."""
        if not 0 <= index < len(self._names):
            raise IndexError(f"vertex slot {index} out of range")
        self._names[index] = name

    @property
    def names(self) -> list[str]:
        """The vertex names in slot order."""
        return list(self._names)

    def _index(self, name: str) -> int:
        return self._names.index(name)

    def _endpoints(self, source: str, destination: str) -> tuple[int, int]:
        try:
            start = self._index(source)
        except ValueError:
            raise SourceNotFoundError(source) from None
        try:
            end = self._index(destination)
        except ValueError:
            raise DestinationNotFoundError(destination) from None
        return start, end

    def add_edge(self, source: str, destination: str) -> None:
        """Add an edge from ``source`` to ``destination``.

        Raises SourceNotFoundError or DestinationNotFoundError if an end is missing.
        """
        start, end = self._endpoints(source, destination)
        self._matrix[start][end] = 1

    def remove_edge(self, source: str, destination: str) -> None:
        """Remove the edge from ``source`` to ``destination``, if there is one.

        Raises SourceNotFoundError or DestinationNotFoundError if an end is missing.
        """
        start, end = self._endpoints(source, destination)
        self._matrix[start][end] = 0

    def has_edge(self, source: str, destination: str) -> bool:
        """Return whether an edge leads from ``source`` to ``destination``."""
        start, end = self._endpoints(source, destination)
        return self._matrix[start][end] == 1

    def _traverse(self, take: Callable[[deque[str]], str]) -> list[str]:
        size = len(self._names)
        reached = [False] * size
        order: list[str] = []
        pending: deque[str] = deque()
        for slot in range(size):
            if not reached[slot]:
                pending.append(self._names[slot])
                reached[slot] = True
            while pending:
                name = take(pending)
                order.append(name)
                row = self._matrix[self._index(name)]
                for target, linked in enumerate(row):
                    if linked and not reached[target]:
                        pending.append(self._names[target])
                        reached[target] = True
        return order

    def bfs(self) -> list[str]:
        """Return vertex names in breadth-first order, one search per unreached slot."""
        return self._traverse(deque.popleft)

    def dfs(self) -> list[str]:
        """Return vertex names in depth-first order using an explicit stack."""
        return self._traverse(deque.pop)

    def render(self) -> str:
        """Return the matrix as rows of 0s and 1s, each entry followed by a space."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._matrix
        )

    def __len__(self) -> int:
        return len(self._names)