"""Candidates: fixed sets of genes with a fitness rating and a binary encoding."""

from __future__ import annotations

import copy as _copy
import random
from abc import ABC, abstractmethod
from itertools import count
from typing import ClassVar

from .param import Param, _fmt


def decimal_to_binary(number: int) -> str:
    """Return the binary digits of ``number``; ``"0"`` for zero, empty if negative."""
    if number == 0:
        return "0"
    if number < 0:
        return ""
    return format(number, "b")


def needed_bits(max_value: int) -> int:
    """Return how many bits are needed to write ``max_value`` in binary."""
    return max(int(max_value), 0).bit_length()


class Candidate(ABC):
    """A candidate solution made of genes, rated by :meth:`calc_rate`.

    Subclasses declare their genes in ``GENES`` as ``(name, start, end, step)``.
    """

    GENES: ClassVar[tuple[tuple[str, float, float, float], ...]] = ()
    _ids: ClassVar[count] = count()

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.id = next(Candidate._ids)
        self.rate = 0.0
        self.genotype = [
            Param(start, end, step, name=name, rng=self._rng)
            for name, start, end, step in self.GENES
        ]

    def __repr__(self) -> str:
        values = ", ".join(_fmt(g.value) for g in self.genotype)
        return f"{type(self).__name__}(id={self.id}, genes=[{values}], rate={self.rate})"

    @property
    def gens_count(self) -> int:
        return len(self.genotype)

    def create(self) -> Candidate:
        """Return a fresh random candidate of the same kind."""
        return type(self)(rng=self._rng)

    def copy(self) -> Candidate:
        """Return an independent copy with the same genes, rate and id."""
        twin = _copy.copy(self)
        twin.genotype = [_copy.copy(gene) for gene in self.genotype]
        return twin

    @abstractmethod
    def calc_rate(self) -> float:
        """Compute, store and return the fitness rating."""

    def to_binary(self) -> str:
        """Encode the genes as one bit string, each padded to its range's width."""
        return "".join(
            decimal_to_binary(int(gene.value)).zfill(needed_bits(int(gene.x_end)))
            for gene in self.genotype
        )

    def set_from_binary(self, binary: str) -> None:
        """Decode a bit string made by :meth:`to_binary`, clamping to each range.

        Raises ValueError if the string is too short or not binary.
        """
        start = 0
        for gene in self.genotype:
            width = needed_bits(int(gene.x_end))
            chunk = binary[start:start + width]
            try:
                value = int(chunk, 2)
            except ValueError:
                raise ValueError(f"invalid gene bits {chunk!r} in {binary!r}") from None
            gene.value = min(value, int(gene.x_end))
            start += width

    def gene_value(self, num: int) -> float:
        return self.genotype[num].value

    def max_bits(self) -> int:
        """Bits needed for the largest rating the first two genes can produce."""
        first, second = int(self.genotype[0].x_end), int(self.genotype[1].x_end)
        return needed_bits(first * first + second)

    def describe(self) -> str:
        """Return a human-readable report of the genes and the rating."""
        lines = ["====================", "Best candidate", f"gens count: {self.gens_count}"]
        lines += [f"x{i}: {_fmt(gene.value)}" for i, gene in enumerate(self.genotype, 1)]
        lines += [f"Rate: {_fmt(self.rate)}", "===================="]
        return "\n".join(lines) + "\n"


class ProductCandidate(Candidate):
    """Two genes in 0..10, rated ``2 * x1 * x2``."""

    GENES = (("X1", 0, 10, 1), ("X2", 0, 10, 1))

    def calc_rate(self) -> float:
        x1, x2 = (g.value for g in self.genotype)
        self.rate = 2 * (x1 * x2)
        return self.rate


class ProductPlusCandidate(Candidate):
    """Two genes in 0..100, rated ``x1 * x2 + x2``."""

    GENES = (("X1", 0, 100, 1), ("X2", 0, 100, 1))

    def calc_rate(self) -> float:
        x1, x2 = (g.value for g in self.genotype)
        self.rate = x1 * x2 + x2
        return self.rate


class SumCandidate(Candidate):
    """Three genes in 0..100, rated ``x1 + x2 + x3``."""

    GENES = (("X1", 0, 100, 1), ("X2", 0, 100, 1), ("X3", 0, 100, 1))

    def calc_rate(self) -> float:
        self.rate = sum(g.value for g in self.genotype)
        return self.rate