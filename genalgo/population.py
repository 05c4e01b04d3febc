"""A generation of candidates with roulette selection, crossover and mutation."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from itertools import count
from typing import ClassVar

from .candidate import Candidate
from .param import _fmt

MUTATION_PERCENT = 5
"""Chance, in percent, that a single bit flips during mutation."""

MUTATION_THRESHOLD = 75
"""Draws from 1..100 at or above this mutate a pair; lower draws cross it."""


@dataclass(frozen=True)
class SelectionResult:
    """How often one candidate was picked in a selection test."""

    id: int
    hits: int
    percent: float


class Population:
    """A set of candidates forming one generation of the search."""

    _ids: ClassVar[count] = count(1)

    def __init__(
        self,
        candidates_count: int = 0,
        pattern: Candidate | None = None,
        *,
        id: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if candidates_count and pattern is None:
            raise ValueError("a pattern candidate is needed to fill a population")
        self.id = next(Population._ids) if id is None else id
        self._rng = rng if rng is not None else random.Random()
        self.candidates: list[Candidate] = [
            pattern.create() for _ in range(candidates_count)
        ] if pattern is not None else []
        self.best_val = 0.0
        self.rate_sum = 0.0
        self.best_candidate: Candidate | None = None

    def __len__(self) -> int:
        return len(self.candidates)

    @property
    def candidates_count(self) -> int:
        return len(self.candidates)

    def calculate(self) -> None:
        """Rate every candidate and record the sum and the best one."""
        self.rate_sum = sum(candidate.calc_rate() for candidate in self.candidates)
        self.best_candidate = max(self.candidates, key=lambda c: c.rate, default=None)
        best = self.best_candidate.rate if self.best_candidate is not None else 0.0
        self.best_val = max(0.0, best)

    def best_rate(self) -> float:
        """Return the highest stored rating, or -1 for an empty population."""
        return max([-1.0, *(candidate.rate for candidate in self.candidates)])

    def select(self) -> Candidate:
        """Pick a candidate with probability proportional to its rating."""
        if not self.candidates:
            raise ValueError("cannot select from an empty population")
        target = self._rng.random() * self.rate_sum
        cumulative = 0.0
        for candidate in self.candidates:
            cumulative += candidate.rate
            if target <= cumulative:
                return candidate
        return self.candidates[-1]

    def mutation(self, binary: str) -> str:
        """Flip each bit with a small fixed probability."""
        return "".join(
            ("1" if bit == "0" else "0")
            if self._rng.randrange(100) < MUTATION_PERCENT
            else bit
            for bit in binary
        )

    def cross(self, first: Candidate, second: Candidate) -> None:
        """Swap the bit tails of two candidates, mutate them and add both."""
        split = self._rng.randrange(first.max_bits()) + 1
        bits1, bits2 = first.to_binary(), second.to_binary()
        first.set_from_binary(self.mutation(bits1[:split] + bits2[split:]))
        second.set_from_binary(self.mutation(bits2[:split] + bits1[split:]))
        self.candidates += [first, second]

    def next_generation(self) -> Population:
        """Breed a new population of the same id from this rated one."""
        child = Population(id=self.id, rng=self._rng)
        child.best_val = self.best_rate()
        for _ in range(len(self.candidates) // 2):
            draw = self._rng.randrange(100) + 1
            first = self.select().copy()
            second = self.select().copy()
            if draw >= MUTATION_THRESHOLD:
                for candidate in (first, second):
                    candidate.set_from_binary(child.mutation(candidate.to_binary()))
                child.candidates += [first, second]
            else:
                child.cross(first, second)
        for number, candidate in enumerate(child.candidates, 1):
            candidate.id = number
        return child

    def selection_test(self, num_testing: int) -> list[SelectionResult]:
        """Run selection ``num_testing`` times and report hits, most picked first."""
        if num_testing <= 0:
            raise ValueError("num_testing must be positive")
        hits = Counter(self.select().id for _ in range(num_testing))
        results = [
            SelectionResult(c.id, hits[c.id], hits[c.id] * 100 / num_testing)
            for c in self.candidates
        ]
        return sorted(results, key=lambda result: result.hits, reverse=True)

    def describe(self) -> str:
        """Return a listing of the candidates' ratings and the best one."""
        lines = ["====================", f"Population: {self.id}"]
        lines += [f"candidate#{c.id}: {_fmt(c.rate)}" for c in self.candidates]
        lines.append("")
        if self.best_candidate is not None:
            best = self.best_candidate
            lines.append(f"Best candidate id#{best.id} Rate: {_fmt(best.rate)}")
        return "\n".join(lines) + "\n"