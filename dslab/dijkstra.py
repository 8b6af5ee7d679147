"""Single-source shortest paths over an adjacency matrix.

A weight of zero means there is no edge. Unreachable vertices keep the
distance ``INFINITY`` and report the start vertex as their predecessor.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

INFINITY = 9999
MAX_VERTICES = 10


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found from ``start``."""

    start: int
    distances: tuple[int, ...]
    predecessors: tuple[int, ...]

    def path(self, node: int) -> list[int]:
        """Return the vertices from ``node`` back to the start, inclusive."""
        if not 0 <= node < len(self.distances):
            raise IndexError(f"vertex {node} out of range")
        route = [node]
        while route[-1] != self.start:
            route.append(self.predecessors[route[-1]])
        return route

    def report(self) -> str:
        """Return the distance and path of every vertex other than the start."""
        parts = []
        for node, distance in enumerate(self.distances):
            if node == self.start:
                continue
            route = " <= ".join(str(vertex) for vertex in self.path(node))
            parts.append(f"\nDistance of node {node} = {distance}\nPath = {route}")
        return "".join(parts)


def dijkstra(matrix: Sequence[Sequence[int]], start: int) -> ShortestPaths:
    """Compute shortest distances from ``start`` over a square weight matrix."""
    size = len(matrix)
    if size == 0 or size > MAX_VERTICES:
        raise ValueError(f"number of vertices must be between 1 and {MAX_VERTICES}")
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"starting node {start} out of range")

    cost = [[weight if weight != 0 else INFINITY for weight in row] for row in matrix]
    distances = list(cost[start])
    predecessors = [start] * size
    visited = [False] * size
    distances[start] = 0
    visited[start] = True

    for _ in range(size - 2):
        candidates = [
            (distance, node)
            for node, distance in enumerate(distances)
            if not visited[node] and distance < INFINITY
        ]
        if not candidates:
            break
        nearest, current = min(candidates)
        visited[current] = True
        for node, weight in enumerate(cost[current]):
            if not visited[node] and nearest + weight < distances[node]:
                distances[node] = nearest + weight
                predecessors[node] = current

    return ShortestPaths(start, tuple(distances), tuple(predecessors))


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Read a vertex count, a matrix and a start vertex, then print the paths."""
    tokens = iter(stdin.read().split())
    try:
        stdout.write("Enter no. of vertices:")
        size = int(next(tokens))
        if not 1 <= size <= MAX_VERTICES:
            raise ValueError(f"number of vertices must be between 1 and {MAX_VERTICES}")
        stdout.write(
            "\nEnter the adjacency matrix (0 means no edge, 999 stands for a "
            "very long edge):\n->"
        )
        matrix = [[int(next(tokens)) for _ in range(size)] for _ in range(size)]
        stdout.write("\nEnter the starting node:")
        start = int(next(tokens))
        result = dijkstra(matrix, start)
    except StopIteration:
        stdout.write("\nInput ended early\n")
        return 1
    except ValueError as error:
        stdout.write(f"\nInvalid input: {error}\n")
        return 1
    stdout.write(result.report())
    stdout.write("\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: read the graph from standard input."""
    parser = argparse.ArgumentParser(
        prog="dslab-dijkstra", description="Shortest paths over an adjacency matrix."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())