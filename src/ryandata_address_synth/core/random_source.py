"""Uniform random primitives used by the generator.

Everything random in the package goes through a ``RandomSource`` so that a
generator can be seeded for reproducible output, and so tests can swap in a
scripted source.
"""

from __future__ import annotations

import random
import string
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal_suffix(value: int) -> str:
    """Return the English ordinal form of ``value`` ("1st", "12th", "23rd")."""
    if 10 <= value % 100 <= 20:
        suffix = "th"
    else:
        suffix = _ORDINAL_SUFFIXES.get(value % 10, "th")
    return f"{value}{suffix}"


class RandomSource:
    """Seedable source of uniform draws.

    Example:
        >>> rng = RandomSource(seed=42)
        >>> rng.digits(5)        # e.g. "03917"
        >>> rng.ordinal(1, 50)   # e.g. "22nd"
        >>> rng.sample(["a", "b", "c"])
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the random source.

        Args:
            seed: Optional seed for reproducible draws. None uses OS entropy.
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in the inclusive range [low, high]."""
        return self._rng.randint(low, high)

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def digits(self, count: int, *, leading_zero: bool = True) -> str:
        """Random digit string of exactly ``count`` characters.

        Args:
            count: Number of digits. Zero or less yields an empty string.
            leading_zero: If False, the first digit is never '0', so the
                string reads as a number with exactly ``count`` digits.

        Returns:
            String of digits.
        """
        if count <= 0:
            return ""
        chars = [str(self._rng.randint(0, 9)) for _ in range(count)]
        if not leading_zero:
            chars[0] = str(self._rng.randint(1, 9))
        return "".join(chars)

    def upper(self) -> str:
        """Single random uppercase ASCII letter."""
        return self._rng.choice(string.ascii_uppercase)

    def ordinal(self, low: int, high: int) -> str:
        """Random ordinal ("1st", "2nd", ...) drawn from [low, high]."""
        return ordinal_suffix(self.randint(low, high))

    def sample(self, items: Sequence[T]) -> T:
        """Uniformly pick one element of a non-empty sequence."""
        return self._rng.choice(items)
