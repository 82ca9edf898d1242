# combalgs

A small collection of combinatorial algorithms with no dependencies beyond
the standard library:

- **Graphs** (`combalgs.graph`): an undirected weighted graph built from an
  edge list, with its adjacency matrix, an iterative depth-first traversal
  that records entry and exit times, and articulation points.
- **Bamboo garden trimming** (`combalgs.bamboo`): a step-by-step simulation
  of a robot that travels out to growing bamboos and cuts them.
- **Triangulation** (`combalgs.triangulation`): a divide-and-conquer
  triangulation over a half-edge mesh (`combalgs.mesh`), using the plane
  predicates in `combalgs.geometry`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Command line

### Articulation points

```
combalgs-graph graph.txt
```

The file's first line is the number of nodes; every following line is an
edge `from to weight`:

```
3
0 1 1
1 2 1
```

The command prints the adjacency matrix, one row per line, followed by the
articulation points on one line. A line with fewer than three fields, or
with a field that is not an integer, is read as an edge from node 0 to
node 0 of weight 0. If the file cannot be opened, its first line is not an
integer, or an edge names a node outside the graph, a message goes to
standard error and the exit status is 1. Called with anything other than
exactly one argument, the command does nothing.

### Bamboo garden trimming

```
combalgs-bamboo 20
```

Runs the built-in garden of three bamboos (distance, speed: 5, 5; 10, 2;
7, 3) for the given number of steps (0 when omitted) and prints each
bamboo's distance, speed and height.

## Library use

### Graphs

```python
from combalgs.graph import Graph, GraphEdge, format_points

graph = Graph(3, [GraphEdge(0, 1, 1), GraphEdge(1, 2, 1)])
print(graph.format_adjacency_matrix())
print(graph.articulation_points())            # [1]
print(format_points([1]))                     # "1 "
print(graph.dfs())                            # (index, entry, exit) per finished node
```

A weight of zero means "no edge". `Graph.add_edges` adds more edges; an
edge that names a node outside the graph, or a negative node count, raises
`GraphError` (a `ValueError`). `Graph.adjacency_matrix` returns a copy of
the matrix and `Graph.nodes` the linked `Node` objects.

`combalgs.graph_cli` also offers `parse_edge(line)` and `load_graph(path)`,
which returns the node count and the list of edges.

### Bamboo garden trimming

```python
from combalgs.bamboo import BambooController, BambooNode

controller = BambooController([BambooNode(5, 5), BambooNode(10, 2), BambooNode(7, 3)])
for _ in range(10):
    controller.on_input()
garden = controller.garden
print([node.height for node in garden.nodes], garden.lower_limit, garden.upper_limit)
```

`BambooGardenTrimming.update()` advances one time step: every bamboo grows,
bamboos whose speed reaches the lower limit ask to be serviced, and the
robot heads for the tallest of them, cutting it half-way along its trip.
The garden works on copies of the nodes it is given. An empty garden raises
`ValueError`.

### Triangulation

```python
from combalgs.mesh import Position
from combalgs.triangulation import Triangulation

triangulation = Triangulation()
triangulation.delaunay([Position(0, 0), Position(1, 0), Position(0, 1)])
print(len(triangulation.triangles))           # 1
print(len(triangulation.edges))               # 6 half-edges: 3 edges and their twins
```

`delaunay` accepts any objects with `x` and `y` attributes. The result is
exposed through `vertices`, `edges` (`HalfEdge` objects, each with its
twin) and `triangles` (`Triangle` objects). If the merge of two halves
cannot be completed, `RuntimeError` is raised.

The helpers `create_edge`, `create_triangle`, `edges_intersect` and
`find_edge_by_points` work on the same half-edge mesh, and
`combalgs.geometry` provides `cross_product`, `is_convex`, `distance`,
`angle_cos`, `angle_sin`, `in_circle` and `segments_intersect`.

## What it does not do

- The triangulation takes point coordinates only: the package does not
  detect feature points in images and does not draw or display a
  triangulation.
- The bamboo simulation has no display; `combalgs-bamboo` prints the final
  state as text.

## Tests

```
pytest
```