"""The generational loop with its stopping rules."""

from __future__ import annotations

import random
import sys
from collections import deque
from typing import TextIO

from .candidate import Candidate
from .param import _fmt
from .population import Population


class Algorithm:
    """Evolve populations until a generation limit or a plateau is reached.

    The run stops when the population number reaches ``max_population_count``
    or when each of the last ``pop_check - 1`` generation-to-generation changes
    of the best rating was below ``min_improvement_proc`` percent.
    """

    def __init__(
        self,
        pattern: Candidate,
        candidates_count: int,
        max_population_count: int,
        min_improvement_proc: float,
        pop_check: int,
        *,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        if pop_check < 1:
            raise ValueError("pop_check must be at least 1")
        self.pattern = pattern
        self.max_population_count = max_population_count
        self.min_improvement_proc = min_improvement_proc
        self.pop_check = pop_check
        self.population = Population(candidates_count, pattern, id=1, rng=rng)
        self.previous: Population | None = None
        self.result = 0.0
        self._best_rates: deque[float] = deque(maxlen=pop_check)
        self._small_changes: deque[bool] = deque(maxlen=pop_check - 1)
        self._out = out

    def _print(self, text: str) -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    def _record(self, best: float) -> None:
        self._best_rates.append(best)
        if len(self._best_rates) >= 2:
            before, after = self._best_rates[-2], self._best_rates[-1]
            if before == 0:
                small = False
            else:
                small = abs(after - before) / before * 100.0 < self.min_improvement_proc
            self._small_changes.append(small)

    def run(self) -> float:
        """Run to completion, report progress, and return the best rating found."""
        while True:
            population = self.population
            population.calculate()
            best = population.best_rate()
            self._record(best)
            self._print(f"== Population #{population.id} || best val: {_fmt(best)}")
            self.result = max(self.result, best)
            if self.is_stop():
                break
            self.previous = population
            self.population = population.next_generation()
            self.population.id = population.id + 1

        self._print(f"\nAlgorithm stopped after {self.population.id} generations.")
        if self.population.best_candidate is not None:
            self._print(self.population.best_candidate.describe().rstrip("\n"))
        self._print(f"Best value found: {_fmt(self.result)}")
        return self.result

    def is_max_population(self) -> bool:
        return self.population.id >= self.max_population_count

    def is_min_improvement(self) -> bool:
        if len(self._small_changes) < self.pop_check - 1:
            return False
        return all(self._small_changes)

    def is_stop(self) -> bool:
        if self.previous is None:
            return self.is_max_population()
        return self.is_max_population() or self.is_min_improvement()