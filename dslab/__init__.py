"""Binary search trees, a B-tree, Dijkstra's algorithm, a patient priority
queue and directed graphs, each with an interactive console program."""

__version__ = "0.1.0"