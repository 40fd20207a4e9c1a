"""Command line entry point: rank a DAG read from standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from deprank.graph import DAGError, read_dag
from deprank.ranking import LoopError, rank_graph


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deprank",
        description="Rank nodes of a dependency DAG given as 'source target' lines on stdin.",
    )
    parser.add_argument(
        "-root",
        "--root",
        dest="root",
        default=None,
        help="specifies name of root node. Default: first (source) node of the first edge.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    try:
        try:
            root = read_dag(sys.stdin, args.root)
        except DAGError as exc:
            raise RuntimeError(f"DAG read failed: {exc}") from exc
        try:
            ranking = rank_graph(root)
        except LoopError as exc:
            raise RuntimeError(f"DAG ranking failed: {exc}") from exc
    except RuntimeError as exc:
        print(f"fatal error: {exc}", file=sys.stderr)
        return 1
    print(ranking)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())