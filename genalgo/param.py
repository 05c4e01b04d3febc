"""A single discretised gene: a value chosen from an evenly spaced range."""

from __future__ import annotations

import random
from itertools import count


def _fmt(number: float) -> str:
    """Format a number the way a default-precision stream would print it."""
    return f"{number:g}"


class Param:
    """A gene whose value is one of ``x_start, x_start + dx, ...`` up to ``x_end``.

    The value is stored as an index into that grid. When no value is given
    the index is drawn at random.
    """

    def __init__(
        self,
        x_start: float,
        x_end: float,
        dx: float,
        val: float | None = None,
        *,
        name: str = "",
        rng: random.Random | None = None,
    ) -> None:
        self.name = name
        self._rng = rng if rng is not None else random.Random()
        self.val_id = 0
        self.set_range(x_start, x_end, dx)
        if val is not None:
            self.value = val

    def __repr__(self) -> str:
        return (
            f"Param(name={self.name!r}, x_start={self.x_start!r}, "
            f"x_end={self.x_end!r}, dx={self.dx!r}, value={self.value!r})"
        )

    @property
    def value(self) -> float:
        """The current value on the grid."""
        return self.x_start + self.val_id * self.dx

    @value.setter
    def value(self, val: float) -> None:
        self.val_id = self.index_of(val)

    @property
    def values_count(self) -> int:
        """How many grid points the range holds."""
        return int(abs(self.x_end - self.x_start) / self.dx + 1)

    def set_range(self, x_start: float, x_end: float, dx: float) -> None:
        """Set a new range and step, then pick a fresh random value."""
        self.x_start = x_start
        self.x_end = x_end
        self.dx = dx
        self.randomize()

    def randomize(self) -> None:
        """Pick a random grid point."""
        self.val_id = self._rng.randrange(self.values_count)

    def index_of(self, val: float) -> int:
        """Return the grid index nearest to ``val``, clamped to the range."""
        if val < self.x_start:
            return 0
        if val > self.x_end:
            return int((self.x_end - self.x_start) / self.dx)
        half = self.dx / 2
        return next(
            i for i in count() if abs(self.x_start + i * self.dx - val) <= half
        )

    def describe(self) -> str:
        """Return a human-readable summary of the gene."""
        return (
            "\n"
            "==================\n"
            f"== name: {self.name}\n"
            f"== range: [{_fmt(self.x_start)}; {_fmt(self.x_end)}; {_fmt(self.dx)}]\n"
            f"== value: {_fmt(self.value)}\t (id: #{self.val_id})\n"
            "==================\n"
        )