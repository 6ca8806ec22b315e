"""Weighted random selection.

Probabilities are the caller's responsibility: they should be non-negative
and sum to 1 over the alternatives. They are not checked here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar

if TYPE_CHECKING:
    from ryandata_address_synth.protocols import RandomSourceProtocol

T = TypeVar("T")


class WeightedChoice(NamedTuple, Generic[T]):
    """One alternative of a weighted selection."""

    value: T
    probability: float


def chance(
    choices: Sequence[WeightedChoice[T] | tuple[T, float]],
    random_source: RandomSourceProtocol,
) -> T:
    """Pick one value according to the given probabilities.

    Draws a single uniform ``r`` in [0, 1) and walks the alternatives in
    order, returning the first whose cumulative probability exceeds ``r``.
    Each bucket is the half-open range ``[previous sum, own sum)``, so a draw
    landing exactly on a boundary goes to the bucket that starts there.

    Args:
        choices: Ordered ``(value, probability)`` pairs.
        random_source: Source of the uniform draw.

    Returns:
        The selected value.

    Example:
        >>> chance([("general", 1 / 3), ("size", 1 / 3), ("function", 1 / 3)], rng)
    """
    r = random_source.random()
    cumulative = 0.0
    last_reachable: T | None = None
    for value, probability in choices:
        if probability > 0:
            last_reachable = value
        cumulative += probability
        if cumulative > r:
            return value
    # r fell past the last cumulative sum through rounding
    return last_reachable  # type: ignore[return-value]


def coin(first: T, second: T, p: float, random_source: RandomSourceProtocol) -> T:
    """Binary weighted choice: ``first`` with probability ``p``, else ``second``."""
    return chance([(first, p), (second, 1 - p)], random_source)
