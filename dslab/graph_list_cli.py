"""Interactive menu over an :class:`~dslab.adjacency_list.AdjacencyListGraph`."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, TextIO

from dslab.adjacency_list import (
    AdjacencyListGraph,
    EdgeNotFoundError,
    VertexInUseError,
    VertexNotFoundError,
)

MENU = (
    "\n1.InsertVertex\n2.InsertEdge\n3.DeleteVertex\n4.DeleteEdge\n"
    "5.Bfs\n6.Dfs\n7.Exit\n"
)


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _read_tokens(lines: Iterator[str], count: int, stdout: TextIO) -> Optional[list[str]]:
    """Return the first non-blank line holding ``count`` tokens, or None at end."""
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) == count and len(tokens[0]) == 1:
            return tokens
        stdout.write(f"Invalid input! Please enter {count} value(s); keys are single characters.\n")
    return None


def _write_order(stdout: TextIO, heading: str, keys: list[str]) -> None:
    stdout.write(heading)
    stdout.write("".join(f"{key}\n" for key in keys))
    stdout.write("\n")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends."""
    stdout.write("<<Graph Using linked list>>\n")
    graph = AdjacencyListGraph()
    lines = iter(stdin)
    while True:
        stdout.write(MENU)
        line = next(lines, None)
        if line is None:
            break
        choice = _parse_int(line)
        if choice is None or choice < 0:
            stdout.write("Invalid input please select any Integer between 1-to-7\n")
            continue
        if choice == 1:
            stdout.write("Enter the Key and name to be inserted in the Graph\n")
            tokens = _read_tokens(lines, 2, stdout)
            if tokens is None:
                break
            graph.add_vertex(tokens[0], tokens[1])
            stdout.write("\nInserted Successfull\n")
        elif choice == 2:
            stdout.write("Enter the Key to Key to be inserted in the Graph\n")
            tokens = _read_tokens(lines, 2, stdout)
            if tokens is None:
                break
            try:
                graph.add_edge(tokens[0], tokens[1])
            except VertexNotFoundError:
                stdout.write("\nkey not found to insert an edge\n")
            else:
                stdout.write("\nInserted Successfull\n")
        elif choice == 3:
            stdout.write("Enter the key to be deleted from the graph\n")
            tokens = _read_tokens(lines, 1, stdout)
            if tokens is None:
                break
            try:
                graph.remove_vertex(tokens[0])
            except (VertexNotFoundError, VertexInUseError):
                stdout.write("\n Deleted Unsuccessfull\n")
            else:
                stdout.write("\nDeleted Successfully\n")
        elif choice == 4:
            stdout.write("Enter The key to key to be deleted from the graph\n")
            tokens = _read_tokens(lines, 2, stdout)
            if tokens is None:
                break
            try:
                graph.remove_edge(tokens[0], tokens[1])
            except (VertexNotFoundError, EdgeNotFoundError):
                stdout.write("Deleted Unsuccessfull\n")
            else:
                stdout.write("Deleted Successfull\n")
        elif choice == 5:
            _write_order(stdout, "Breadth-first-traversal is : ", graph.bfs())
        elif choice == 6:
            _write_order(stdout, "Depth-first-traversal is : ", graph.dfs())
        elif choice == 7:
            stdout.write("EXIT")
            break
        else:
            stdout.write("Invalid Choice choose between 1 - 7 \n")
    graph.clear()
    stdout.write("\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: run the menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslab-graph-list", description="Directed graph kept as adjacency lists."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())