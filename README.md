# deprank

`deprank` reads a dependency graph as a list of edges and splits it into
ranks. Rank 0 holds the nodes with no dependencies. Each later rank holds
nodes whose dependencies all appear in earlier ranks. The nodes in one rank
can therefore be built, installed or processed in parallel.

## Installation

```
pip install .
```

This installs the `deprank` command. It needs no packages outside the
standard library.

## Usage

The graph comes in on standard input. Each line holds one edge: the name of
a node, a space, and then the name of a node it depends on. The line is split
at its first space, so everything after that space is the second name.
Leading and trailing whitespace is removed from each line. Blank lines are
skipped. Repeated edges are counted once.

```
$ printf 'app lib\napp util\nlib util\n' | deprank
Ranking<len=3>:
	Rank 0:
		util
	Rank 1:
		lib
	Rank 2:
		app
```

Within a rank the node names are printed in sorted order.

Only the nodes that can be reached from the root are ranked. By default the
root is the source node of the first edge. Use `-root` (or `--root`) to pick
another one:

```
$ printf 'app lib\nlib util\n' | deprank -root lib
```

`deprank` prints `fatal error: ...` on standard error and exits with status 1
in these cases:

- a line has no space in it;
- the input holds no edges;
- the root node does not exist;
- the graph reachable from the root contains a cycle.

## Library use

```python
import io

from deprank.graph import read_dag
from deprank.ranking import rank_graph

root = read_dag(io.StringIO("app lib\nlib util\n"), None)
ranking = rank_graph(root)
print(len(ranking))  # 3
print(ranking)
for rank in ranking:
    print(sorted(node.name for node in rank))
```

- `deprank.graph.read_dag(stream, root_name)` reads edge lines from a text
  stream and returns the root `Node`. It raises `DAGError` (a `ValueError`)
  when the input is invalid.
- `deprank.graph.Node` has a `name` and a list of `children`. Nodes compare
  and hash by identity. `str(node)` gives an indented tree of the node and
  its descendants, marking where a path comes back to a node already on it.
- `deprank.graph.new_node_set(*nodes)` and `merge_node_sets(a, b)` build
  frozensets of nodes.
- `deprank.ranking.rank_graph(root)` returns a `Ranking`; given `None` it
  returns an empty one. It raises `LoopError` (a `ValueError`, with the
  offending node in its `node` attribute) when it finds a cycle.
- `Ranking` is immutable: it holds a tuple of frozensets in `ranks`, supports
  `len()` and iteration, and `Ranking.merge` and `Ranking.append` return new
  rankings without changing the ones they are called on.
- `deprank.cli.main(argv=None)` runs the command and returns its exit status.

## Running the tests

```
pip install .[test]
pytest
```