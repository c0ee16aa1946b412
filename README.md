# grafoalg

Textbook graph algorithms that compute an answer and also report how they
got there, step by step: greedy graph colouring, four maximum-flow
algorithms and the Hungarian method for the assignment problem. Handy for
checking hand-worked exercises.

The package uses only the standard library. The printed reports are in
Spanish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command reads its input from the file named as its only argument, or
from standard input when no file is given. On malformed input it prints
`error: ...` to standard error and exits with status 1.

| Command                   | Module                    |
|---------------------------|---------------------------|
| `grafoalg-coloring`       | `grafoalg.coloring`       |
| `grafoalg-greedy-flow`    | `grafoalg.greedy_flow`    |
| `grafoalg-ford-fulkerson` | `grafoalg.ford_fulkerson` |
| `grafoalg-edmonds-karp`   | `grafoalg.edmonds_karp`   |
| `grafoalg-dinic`          | `grafoalg.dinic`          |
| `grafoalg-hungarian`      | `grafoalg.hungarian`      |

## Graph colouring

`grafoalg.coloring` holds the greedy colouring algorithm: each vertex, taken
in a given order, receives the smallest positive colour not used by any of
its already coloured neighbours.

* `greedy_coloring(adjacency, order)` colours the graph (0-based adjacency
  lists) following `order` and returns one colour per vertex, starting at 1.
  Vertices missing from `order` keep colour 0.
* `best_greedy_coloring(adjacency)` runs the greedy colouring over every
  vertex order and returns `(number_of_colours, colours)` for the first order
  that uses the fewest colours. The number of orders grows as n!, so this is
  for small graphs only.
* `parse_graph(text, with_order=True)` reads the text format below and
  returns the 0-based adjacency lists and the 0-based order (`None` when
  `with_order` is false). It raises `ValueError` on missing or out-of-range
  values.

Input: `n m`, then `m` edges `u v` (vertices numbered from 1), then the `n`
vertex numbers giving the colouring order.

```
4 4
1 2
2 3
3 4
4 1
1 3 2 4
```

```
grafoalg-coloring graph.txt
```

With `--brute` the input has no order; every order is tried and the
smallest colouring found is printed together with its number of colours:

```
grafoalg-coloring --brute graph.txt
```

## Maximum flow

`grafoalg.network` holds the shared pieces:

* `parse_network(text)` returns a `NodeNames` mapping and a list of
  `(u, v, capacity)` edges with 0-based node indices. It raises
  `NetworkError` (a `ValueError`) on malformed input.
* `NodeNames` maps single-character labels to indices (`add`, `index`,
  `label`, `len()`).
* `ResidualGraph` keeps every edge paired with a zero-capacity backward
  edge, and offers `add_edge`, `residual`, `augment`, `min_cut` and
  `cut_flow`.
* `Step` is one augmenting path (`amount`, `path`); `FlowResult` holds
  `max_flow`, `steps` and `min_cut`.
* `format_path(names, path)` renders the labels of a path.

Node 0 (the first label read) is the source and node 1 (the second label)
is the sink. The four algorithms each take `(node_count, edges)`:

* `greedy_flow.greedy_max_flow` pushes flow along forward edges only and
  never undoes it, so the result need not be the maximum.
* `ford_fulkerson.ford_fulkerson` augments along depth-first residual paths.
* `edmonds_karp.edmonds_karp` augments along shortest (breadth-first)
  residual paths and also returns the minimum cut.
* `dinic.dinic` works in phases: each `Phase` holds the nodes of a layered
  auxiliary network and the paths of its blocking flow. It returns a
  `DinicResult` with `max_flow`, `phases`, `min_cut` and a `steps` property
  listing every path.

Edmonds–Karp and Dinic check that the flow across the minimum cut equals
the maximum flow and raise `NetworkError` if it does not. The minimum cut is
the list of nodes reachable from the source in the final residual graph.

Each of these modules has `format_report(names, result)`, which renders the
same report its command prints.

Input format: every node is one character.

```
st -1
sa 10
sb 5
ab 15
at 5
bt 10
END
```

* `st -1` names the source (`s`) and the sink (`t`); it adds no edge.
* `ab 15` is an edge from `a` to `b` with capacity 15.
* `END` ends the input.

```
grafoalg-edmonds-karp network.txt
grafoalg-dinic network.txt
```

## Hungarian method

`grafoalg.hungarian` finds a minimum-sum perfect matching (assignment) on a
square cost matrix.

* `Hungarian(matrix)` takes the rows of the matrix and raises `ValueError`
  if it is not square.
* `solve(out=None)` returns the minimum sum and writes every stage to the
  text stream `out`: the reduced matrix with the current matching in
  brackets, the row and column labels, the sets S and Gamma(S) on every
  matrix change, and the final assignment. Afterwards `assignment` holds
  the chosen column for each row.
* `parse_matrix(text)` reads `n` followed by the `n × n` entries.
* `int_to_roman(value)` writes 0..3999 as a Roman numeral; columns are
  labelled this way, rows with letters (so the tables are meant for fewer
  than 27 rows).

```
3
4 1 3
2 0 5
3 2 2
```

```
grafoalg-hungarian costs.txt
```

## What it does not do

Graphs and matrices are read only from the text formats above; there is no
other input format, no drawing of graphs and no output other than the
plain-text reports.