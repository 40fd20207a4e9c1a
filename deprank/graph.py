"""Dependency graph nodes and reading a DAG from an edge list."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, Optional, TextIO

NodeSet = frozenset


class DAGError(ValueError):
    """Raised when an edge list cannot be turned into a graph."""


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass(eq=False, repr=False)
class Node:
    """A named graph node; nodes compare and hash by identity."""

    name: str
    children: list[Node] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Node(name={self.name!r})"

    def _pretty_lines(self, prefix: str, visited: frozenset) -> Iterable[str]:
        if self in visited:
            yield f"{prefix}... recursion goes to Node<Name={_quote(self.name)}> ...\n"
            return
        suffix = ":" if self.children else ""
        yield f"{prefix}Node<Name={_quote(self.name)}>{suffix}\n"
        visited = visited | {self}
        for child in self.children:
            yield from child._pretty_lines(prefix + "\t", visited)

    def __str__(self) -> str:
        return "".join(self._pretty_lines("", frozenset()))


def new_node_set(*args: Node) -> frozenset:
    """Return an immutable set holding the given nodes."""
    return frozenset(args)


def merge_node_sets(a: AbstractSet[Node], b: AbstractSet[Node]) -> frozenset:
    """Return the union of two node sets."""
    return frozenset(a) | frozenset(b)


def read_dag(stream: TextIO, root_name: Optional[str] = None) -> Node:
    """Read "source target" lines and return the root node of the graph.

    The root defaults to the source node of the first edge.
    """
    nodes: dict[str, Node] = {}
    seen_edges: set[tuple[str, str]] = set()

    def node_for(name: str) -> Node:
        node = nodes.get(name)
        if node is None:
            node = nodes[name] = Node(name)
        return node

    try:
        for raw_line in stream:
            line = raw_line.strip()
            if not line:
                continue
            src_name, sep, dst_name = line.partition(" ")
            if not sep:
                raise DAGError(f"got line without space delimiter: {_quote(line)}")
            edge = (src_name, dst_name)
            if edge in seen_edges:
                continue
            seen_edges.add(edge)

            src = node_for(src_name)
            dst = node_for(dst_name)
            if root_name is None:
                root_name = src_name
            src.children.append(dst)
    except OSError as exc:
        raise DAGError(f"unable to read graph edges: {exc}") from exc

    if not nodes:
        raise DAGError("no edges were read")
    root = nodes.get(root_name) if root_name is not None else None
    if root is None:
        raise DAGError("specified root node was not found")
    return root