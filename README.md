# ssspath

`ssspath` runs Dijkstra's single-source shortest-path algorithm over a
weighted graph read from a file. Queries come from standard input. The search
stops once the requested destination leaves the priority queue. It can also
print every operation it performs on that queue.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Graph file format

The file starts with the number of vertices `n` and the number of edges `m`.
After them come `m` records of the form `id source destination weight`. Tokens
may be split by any whitespace. Vertices are numbered from 1 to `n`.

```
4 4
1 1 2 1.5
2 2 3 2.0
3 1 3 5.0
4 3 4 1.0
```

Edges that name a vertex outside `1..n` are ignored. A file that ends early,
or that holds a token that is not a number, is rejected.

## Command line

```
ssspath <graph_file> <directed/undirected>
```

The graph is directed only if the second argument is exactly `directed`. Any
other value loads it as undirected. The program then reads queries from
standard input until it reads `stop` or the input ends:

- `find <source> <destination> <flag>` computes shortest paths from `source`.
  The search ends when `destination` is taken off the queue. If `flag` is
  `1`, each heap insert, delete and decrease-key is printed. A source outside
  the graph, a destination equal to the source, or a flag other than `0` or
  `1` gives `Error: invalid find query`.
- `write path <source> <destination>` reports on the path to `destination`
  found by the last search. It prints either the path and its weight or a
  message that no path exists or none has been computed. A path to a vertex
  that was reached but not yet taken off the queue is reported as "Path not
  known to be shortest". A `source` that differs from the last `find` gives
  `Error: invalid source destination pair`.
- `stop` ends the session.

Unknown words in the input are skipped. Exit status is `1` for wrong usage and
`2` for a graph file that cannot be opened or is malformed.

Example:

```
$ printf 'find 1 4 0\nwrite path 1 4\nstop\n' | ssspath graph.txt directed
Query: find 1 4 0
Query: write path 1 4
Shortest Path: <1, 2, 3, 4>
The path weight is:      4.5000
Query: stop
```

## Library use

```python
import sys

from ssspath.graph import Graph, read_graph
from ssspath.cli import parse_commands, run_queries

graph = Graph(3, directed=True, trace=sys.stdout)
graph.add_edge(1, 1, 2, 2.0)
graph.add_edge(2, 2, 3, 3.0)
graph.find(1, 3, verbose=False)
print(graph.describe_path(1, 3), end="")

graph = read_graph("graph.txt", directed=False, trace=sys.stdout)
with open("queries.txt") as stream:
    run_queries(graph, parse_commands(stream), sys.stdout)
```

- `Graph.add_edge` returns `False` and ignores an edge that touches an unknown
  vertex.
- `Graph.edge_exists` and `Graph.contains_vertex` answer membership questions.
- `str(graph)` lists each vertex's neighbours.
- `Graph.find` raises `ValueError` for a source outside the graph.
- `Graph.describe_path` raises `ValueError` for a destination outside the
  graph.
- Trace lines go to the graph's `trace` stream, or to standard output when
  `trace` is `None`.
- `parse_commands` yields `Command` objects and raises `ValueError` for an
  incomplete or non-numeric `find` or `write`.

`ssspath.minheap.MinHeap` is the fixed-capacity binary min-heap that the
search uses:

- `insert` raises `HeapFullError` when the heap is at capacity.
- `peek` and `remove_min` raise `IndexError` on an empty heap.
- `decrease_key` returns whether the vertex was found.

## Limitations

- Only the most recent search is remembered.
- Edge weights are expected to be non-negative.
- A vertex whose tentative distance is within 0.01 of zero is treated as not
  yet reached. Paths made only of zero-weight edges are therefore not handled
  exactly.