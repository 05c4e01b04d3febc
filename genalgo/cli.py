"""Command line entry point: pick a candidate kind and run the search."""

from __future__ import annotations

import argparse
import sys

from .algorithm import Algorithm
from .candidate import Candidate, ProductCandidate, ProductPlusCandidate, SumCandidate

CANDIDATE_KINDS: dict[int, type[Candidate]] = {
    1: ProductCandidate,
    2: ProductPlusCandidate,
    3: SumCandidate,
}


def make_candidate(kind: int) -> Candidate:
    """Return a pattern candidate for ``kind``; unknown kinds give the first one."""
    return CANDIDATE_KINDS.get(kind, ProductCandidate)()


def _read_kind() -> int:
    print("Choose candidate type: ")
    words = sys.stdin.readline().split()
    try:
        return int(words[0])
    except (IndexError, ValueError):
        return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a genetic search over integer genes.")
    parser.add_argument("kind", nargs="?", type=int, help="candidate type: 1, 2 or 3")
    parser.add_argument("--candidates", type=int, default=20)
    parser.add_argument("--max-populations", type=int, default=200)
    parser.add_argument("--min-improvement", type=float, default=2)
    parser.add_argument("--pop-check", type=int, default=5)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    kind = args.kind if args.kind is not None else _read_kind()
    algorithm = Algorithm(
        make_candidate(kind),
        args.candidates,
        args.max_populations,
        args.min_improvement,
        args.pop_check,
    )
    algorithm.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())