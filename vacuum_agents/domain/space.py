"""Bounded N-dimensional integer space.

A ``Space`` is an ordered tuple of half-open intervals, one per dimension.
Zero intervals is legal and denotes the empty ("nothing") space, which
contains no location at all.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass
from random import Random
from typing import Any

import numpy as np

Location = tuple[int, ...]
"""A point in a space: one integer coordinate per dimension."""

Interval = tuple[int, int]
"""Half-open ``(start, end)`` integer interval."""


@dataclass(frozen=True)
class Space:
    """Cartesian product of half-open integer intervals."""

    intervals: tuple[Interval, ...] = ()

    def __post_init__(self) -> None:
        for start, end in self.intervals:
            if start > end:
                raise ValueError(f"interval start must be <= end, got ({start}, {end})")

    @classmethod
    def from_shape(cls, *sizes: int) -> Space:
        """Build a space of ``range(0, size)`` intervals, e.g. ``from_shape(2)``."""
        return cls(tuple((0, size) for size in sizes))

    def dimension(self) -> int:
        return len(self.intervals)

    def shape(self) -> tuple[int, ...]:
        return tuple(end - start for start, end in self.intervals)

    def contains(self, location: Location) -> bool:
        """Return True iff ``location`` lies inside this space.

        An empty space or empty location never matches, and a location with
        more coordinates than the space has dimensions is never inside it.
        A shorter location is checked only on the dimensions it provides.
        """
        if not self.intervals or not location:
            return False
        if len(location) > len(self.intervals):
            return False
        return all(
            start <= x < end for x, (start, end) in zip(location, self.intervals, strict=False)
        )

    def random_location(self, rng: Random | None = None) -> Location:
        """Draw one coordinate uniformly from each interval.

        Raises ValueError if any interval is zero-width.
        """
        if any(start == end for start, end in self.intervals):
            raise ValueError(f"{self} has no locations to sample")
        rng = rng if rng is not None else Random()
        return tuple(rng.randrange(start, end) for start, end in self.intervals)

    def locations(self) -> Iterator[Location]:
        """Iterate every location in row-major order (nothing for the empty space)."""
        if not self.intervals:
            return iter(())
        return itertools.product(*(range(start, end) for start, end in self.intervals))

    def to_array(self, fill: Any) -> np.ndarray | None:
        """Return an object array shaped like this space with every cell set to ``fill``.

        Returns None for the empty space.
        """
        if not self.intervals:
            return None
        array = np.empty(self.shape(), dtype=object)
        array.fill(fill)
        return array

    def index_of(self, location: Location) -> tuple[int, ...]:
        """Translate a full-length location into zero-based array indices."""
        if len(location) != len(self.intervals) or not self.contains(location):
            raise KeyError(f"location {location} is not a cell of {self}")
        return tuple(x - start for x, (start, _) in zip(location, self.intervals, strict=True))
