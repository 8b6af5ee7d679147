# dslab

A small collection of classic data structures and algorithms. Each one can be
used as a Python library, and each comes with an interactive menu program
that reads from standard input. There are no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dslab.bst` | `BinarySearchTree` of `Record` entries (integer `key` and a `name`), and `KeyTree` of bare integer keys |
| `dslab.bst_cli` | menu program over a `BinarySearchTree` of roll numbers and names |
| `dslab.btree` | `BTree` holding at most four values per node, `DuplicateValueError`, and a menu program |
| `dslab.dijkstra` | `dijkstra(matrix, start)` returning a `ShortestPaths` result, and a program that reads a matrix |
| `dslab.priority_queue` | `PatientQueue` of `Patient` records ordered by priority |
| `dslab.hospital` | patient registration menu program and `format_bill` |
| `dslab.adjacency_list` | `AdjacencyListGraph`, a directed graph kept as adjacency lists |
| `dslab.graph_list_cli` | menu program over an `AdjacencyListGraph` |
| `dslab.adjacency_matrix` | `AdjacencyMatrixGraph`, a directed graph kept as an adjacency matrix |
| `dslab.matrix_cli` | menu program over an `AdjacencyMatrixGraph` |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

### Binary search trees

```python
from dslab.bst import BinarySearchTree

tree = BinarySearchTree()
tree.insert(8, "eight")     # returns the new Record
tree.insert(3, "three")
tree.insert(10, "ten")

8 in tree                   # True
len(tree)                   # 3
tree.search(3)              # Record(key=3, name='three'); KeyError if absent
tree.delete(8)              # returns the removed Record; KeyError if absent
[r.key for r in tree.inorder()]   # [3, 10]
```

Equal keys are placed to the right. A deleted node with two children is
replaced by its in-order predecessor. `preorder()` and `postorder()` yield
records in the other two orders, `clear()` empties the tree and `is_empty()`
reports whether anything is left.

`KeyTree` stores plain integers. Its `delete(key)` replaces a node with two
children by its in-order successor and silently ignores a missing key:

```python
from dslab.bst import KeyTree

keys = KeyTree()
for key in (8, 3, 1, 6, 7, 10, 14, 4):
    keys.insert(key)
keys.delete(10)
list(keys.inorder())        # [1, 3, 4, 6, 7, 8, 14]
```

### B-tree

```python
from dslab.btree import BTree, DuplicateValueError

btree = BTree()
for value in (10, 20, 5, 6, 12, 30, 7, 17):
    btree.insert(value)

list(btree.traverse())      # values in ascending order
btree.search(12)            # True
12 in btree                 # True
len(btree)                  # 8
btree.delete(6)             # KeyError if the value is not present

try:
    btree.insert(10)
except DuplicateValueError:
    ...
```

Nodes hold at most four values; every node except the root keeps at least
two. An underfull child borrows from its left sibling, then its right
sibling, and is merged with a sibling otherwise.

### Dijkstra's shortest paths

The matrix is square, with between 1 and 10 vertices. A weight of zero means
there is no edge; anything else raises `ValueError`.

```python
from dslab.dijkstra import dijkstra

matrix = [
    [0, 1, 0, 0],
    [1, 0, 2, 3],
    [0, 2, 0, 1],
    [0, 3, 1, 0],
]
paths = dijkstra(matrix, 0)
paths.distances      # tuple of distances from vertex 0
paths.predecessors   # tuple of predecessor vertices
paths.path(3)        # vertices from 3 back to the start, inclusive
print(paths.report())
```

An unreachable vertex keeps the distance `9999` (`dslab.dijkstra.INFINITY`)
and has the start vertex as its predecessor.

### Patient priority queue

```python
from dslab.priority_queue import Patient, PatientQueue

first = Patient("Asha", "ward-7", "North", "fever", "Rao", "500")
second = Patient("Ben", "ward-2", "South", "fracture", "Iyer", "900")

queue = PatientQueue()
queue.enqueue(first, 2)
queue.enqueue(second, 1)
len(queue)                 # 2
list(queue)                # [(1, second), (2, first)]
queue.dequeue()            # second: lower numbers are served first
print(queue.format_table())
```

Patients with equal priority are served in the order they were added.
`dequeue()` on an empty queue raises `IndexError`.

`dslab.hospital.format_bill(patient, when)` returns a fee receipt for a
patient, stamped with the `datetime` given.

### Graphs

```python
from dslab.adjacency_list import AdjacencyListGraph

graph = AdjacencyListGraph()
graph.add_vertex("A", "alpha")
graph.add_vertex("B", "beta")
graph.add_edge("A", "B")
graph.out_degree("A")      # 1
graph.in_degree("B")       # 1
graph.bfs()                # ['A', 'B']
graph.dfs()                # ['A', 'B']
graph.remove_edge("A", "B")
graph.remove_vertex("B")
```

Traversals return lists of keys; every vertex not yet reached starts a new
search, in the order vertices were added. A vertex can only be removed once
no edge enters or leaves it (`VertexInUseError`); unknown keys raise
`VertexNotFoundError` and missing edges `EdgeNotFoundError`. `clear()`
removes everything.

```python
from dslab.adjacency_matrix import AdjacencyMatrixGraph

graph = AdjacencyMatrixGraph(3)
graph.set_vertex(0, "A")
graph.set_vertex(1, "B")
graph.set_vertex(2, "C")
graph.add_edge("A", "C")
graph.has_edge("A", "C")   # True
graph.bfs()                # ['A', 'C', 'B']
print(graph.render())
```

The number of vertices is fixed when the graph is made; unnamed slots hold a
blank name. Naming a vertex that is not in the graph raises
`SourceNotFoundError` or `DestinationNotFoundError`.

## Console programs

```
dslab-bst           # binary search tree of roll numbers and names
dslab-btree         # B-tree insertion, deletion, search and traversal
dslab-dijkstra      # shortest paths from an adjacency matrix
dslab-hospital      # patient registration, listing and billing
dslab-graph-list    # adjacency-list graph with BFS and DFS
dslab-graph-matrix  # adjacency-matrix graph with BFS and DFS
```

Each program takes no options beyond `--help`. The menu programs read one
choice per line; invalid menu input is reported and the menu is shown again.
They stop at their exit choice or at the end of input. `dslab-dijkstra`
reads the vertex count, the matrix and the start vertex as whitespace-separated
integers and exits with status 1 on bad or incomplete input.

The same programs can be driven from Python with `run(stdin, stdout)` in each
module (`dslab.hospital.run` also takes an optional `clock`).

## Limitations

Everything is kept in memory. The hospital desk in particular does not store
patients anywhere: the queue is lost when the program ends, and the bill is
always produced for the most recently registered patient.