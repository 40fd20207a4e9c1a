"""Ranking of DAG nodes by their depth from the leaves."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Iterator, Optional

from deprank.graph import Node, merge_node_sets, new_node_set


class LoopError(ValueError):
    """Raised when the graph contains a cycle."""

    def __init__(self, node: Node) -> None:
        super().__init__(f"loop detected: {node}")
        self.node = node


@dataclass(frozen=True)
class Ranking:
    """Immutable sequence of node sets; rank 0 holds the leaves."""

    ranks: tuple[frozenset, ...] = ()

    def append(self, node: Node) -> Ranking:
        """Return a ranking with a new top rank holding only ``node``."""
        return Ranking(self.ranks + (new_node_set(node),))

    def merge(self, other: Ranking) -> Ranking:
        """Return the rank-wise union of two rankings."""
        empty = frozenset()
        return Ranking(
            tuple(
                merge_node_sets(mine, theirs)
                for mine, theirs in zip_longest(self.ranks, other.ranks, fillvalue=empty)
            )
        )

    def __len__(self) -> int:
        return len(self.ranks)

    def __iter__(self) -> Iterator[frozenset]:
        return iter(self.ranks)

    def __str__(self) -> str:
        lines = [f"Ranking<len={len(self.ranks)}>:\n"]
        for index, node_set in enumerate(self.ranks):
            lines.append(f"\tRank {index}:\n")
            lines.extend(f"\t\t{name}\n" for name in sorted(n.name for n in node_set))
        return "".join(lines)


@dataclass
class _Frame:
    node: Node
    children: Iterator[Node]
    acc: Ranking = field(default_factory=Ranking)


def rank_graph(root: Optional[Node]) -> Ranking:
    """Rank every node reachable from ``root``; raise LoopError on a cycle."""
    if root is None:
        return Ranking()

    finished: dict[Node, Ranking] = {}
    on_path = {root}
    stack = [_Frame(root, iter(root.children))]

    while True:
        frame = stack[-1]
        descended = False
        for child in frame.children:
            if child in on_path:
                raise LoopError(child)
            if child is None:
                continue
            done = finished.get(child)
            if done is not None:
                frame.acc = frame.acc.merge(done)
                continue
            on_path.add(child)
            stack.append(_Frame(child, iter(child.children)))
            descended = True
            break
        if descended:
            continue

        stack.pop()
        on_path.discard(frame.node)
        result = frame.acc.append(frame.node)
        finished[frame.node] = result
        if not stack:
            return result
        stack[-1].acc = stack[-1].acc.merge(result)