from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ryandata_address_synth.models import ReferenceData, State

T = TypeVar("T")


@runtime_checkable
class RandomSourceProtocol(Protocol):
    """Protocol for the uniform random primitives the generator consumes.

    The default implementation is ``core.random_source.RandomSource``; tests
    may supply scripted implementations to force specific draws.
    """

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in the inclusive range [low, high]."""
        ...

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def digits(self, count: int, *, leading_zero: bool = True) -> str:
        """Random digit string of exactly ``count`` characters."""
        ...

    def upper(self) -> str:
        """Single random uppercase letter."""
        ...

    def ordinal(self, low: int, high: int) -> str:
        """Random ordinal string ("1st", "2nd"...) drawn from [low, high]."""
        ...

    def sample(self, items: Sequence[T]) -> T:
        """Uniformly pick one element of a non-empty sequence."""
        ...


@runtime_checkable
class DataSourceProtocol(Protocol):
    """Protocol for reference data sources.

    Implementations provide the immutable tables addresses are composed
    from, supporting different backends (bundled CSV, database, ...).
    """

    def get_reference_data(self) -> ReferenceData:
        """Get the full, validated reference tables.

        Returns:
            ReferenceData, loaded once and reused.
        """
        ...

    def get_state(self, abbreviation: str) -> State | None:
        """Exact lookup of a state by its key (abbreviation)."""
        ...

    def find_state(self, state: str | None) -> State | None:
        """Resolve a state by exact abbreviation, then by exact full name.

        Args:
            state: State abbreviation or full name.

        Returns:
            State if found, None otherwise.
        """
        ...

    def normalize_state(self, state: str) -> str | None:
        """Normalize a state name or abbreviation to its abbreviation."""
        ...

    def is_valid_state(self, state: str) -> bool:
        """Check if a state name or abbreviation is valid."""
        ...

    def get_valid_state_abbrevs(self) -> set[str]:
        """Get set of valid state abbreviations."""
        ...
