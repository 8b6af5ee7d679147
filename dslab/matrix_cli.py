"""Interactive menu over an :class:`~dslab.adjacency_matrix.AdjacencyMatrixGraph`."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, TextIO

from dslab.adjacency_matrix import (
    AdjacencyMatrixGraph,
    DestinationNotFoundError,
    SourceNotFoundError,
)

MENU = "\n1.insertEdge\n2.removeEdge\n3.BFS\n4.DFS\n5.displayGraph\n6.Exit\n"
NO_VERTICES = "\nMatrix have no vertices."


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _read_name(lines: Iterator[str]) -> Optional[str]:
    """Return the first non-blank character of the next non-blank line."""
    for line in lines:
        text = line.strip()
        if text:
            return text[0]
    return None


def _read_pair(lines: Iterator[str], stdout: TextIO, source_prompt: str) -> Optional[tuple[str, str]]:
    stdout.write(source_prompt)
    source = _read_name(lines)
    if source is None:
        return None
    stdout.write("\nEnter name of destination vertex: ")
    destination = _read_name(lines)
    if destination is None:
        return None
    return source, destination


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Read the vertex count and names, then run the menu until exit or end of input."""
    lines = iter(stdin)
    stdout.write("<<<<<Adjacent Matrix>>>>>")
    stdout.write("\nEnter the Number of Vertices\n")
    line = next(lines, None)
    count = None if line is None else _parse_int(line)
    if count is None or count < 0:
        stdout.write("Invalid input please enter any Integer Value\n")
        return 0
    stdout.write("\nValid Input\n")
    graph = AdjacencyMatrixGraph(count)
    stdout.write("\nNew matrix adjacency matrix to be inserted.")
    for index in range(count):
        stdout.write("\nEnter name of vertex: ")
        name = _read_name(lines)
        if name is None:
            stdout.write("\n")
            return 0
        graph.set_vertex(index, name)
        stdout.write("\nNew vertex added in the matrix.")

    while True:
        stdout.write(MENU)
        line = next(lines, None)
        if line is None:
            break
        choice = _parse_int(line)
        if choice is None or choice < 0:
            stdout.write("Invalid input please enter any Integer\n")
            continue
        if choice == 1:
            pair = _read_pair(lines, stdout, "\nEnter name of source vertex: ")
            if pair is None:
                break
            try:
                graph.add_edge(*pair)
            except SourceNotFoundError:
                stdout.write("\nSource vertex could not be found. Enter valid input. Try again.")
            except DestinationNotFoundError:
                stdout.write(
                    "\nDestination vertex could not be found. Enter valid input. Try again."
                )
            else:
                stdout.write("\nNew edge added in the matrix.")
        elif choice == 2:
            if len(graph) == 0:
                stdout.write(NO_VERTICES)
                continue
            pair = _read_pair(lines, stdout, "\nEnter name of source vertex:\n ")
            if pair is None:
                break
            try:
                graph.remove_edge(*pair)
            except (SourceNotFoundError, DestinationNotFoundError):
                stdout.write("\nEdge not be found in the matrix adjacency list.")
            else:
                stdout.write("\nEdge deleted Successfully from the adjacency list.")
        elif choice in (3, 4):
            if len(graph) == 0:
                stdout.write(NO_VERTICES)
            else:
                order = graph.bfs() if choice == 3 else graph.dfs()
                stdout.write("".join(f"\n{name}" for name in order))
        elif choice == 5:
            stdout.write(graph.render())
        elif choice == 6:
            stdout.write("Exit")
            break
        else:
            stdout.write("Invalid choice choose between 1-6")
    stdout.write("\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: run the menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslab-matrix", description="Directed graph kept as an adjacency matrix."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())