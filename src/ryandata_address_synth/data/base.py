from __future__ import annotations

from abc import ABC, abstractmethod

from ryandata_address_synth.models import ReferenceData, State


class BaseDataSource(ABC):
    """Abstract base class for reference data sources.

    Implementations build a ``ReferenceData`` once; the lookup helpers here
    navigate it. Nothing is reloaded after the first successful build.
    """

    def __init__(self) -> None:
        self._reference: ReferenceData | None = None

    @abstractmethod
    def _load_data(self) -> ReferenceData:
        """Load and validate every table from the underlying source.

        Returns:
            Fully validated ReferenceData.
        """
        ...

    def get_reference_data(self) -> ReferenceData:
        """Get the reference tables, loading them on first use."""
        if self._reference is None:
            self._reference = self._load_data()
        return self._reference

    def get_state(self, abbreviation: str) -> State | None:
        """Exact lookup by state key (abbreviation).

        Args:
            abbreviation: State key, e.g. "TX".

        Returns:
            State if found, None otherwise.
        """
        return self.get_reference_data().states.get(abbreviation)

    def find_state(self, state: str | None) -> State | None:
        """Resolve a state by exact abbreviation, then by exact full name.

        Args:
            state: State abbreviation ("TX") or full name ("Texas").

        Returns:
            State if found, None otherwise.
        """
        return self.get_reference_data().find_state(state)

    def normalize_state(self, state: str) -> str | None:
        """Normalize a state name or abbreviation to its abbreviation.

        Unlike ``find_state`` this ignores case and surrounding whitespace.

        Returns:
            State abbreviation if valid, None otherwise.
        """
        cleaned = state.strip()
        states = self.get_reference_data().states
        if cleaned.upper() in states:
            return cleaned.upper()
        lowered = cleaned.lower()
        for abbreviation, candidate in states.items():
            if candidate.name.lower() == lowered:
                return abbreviation
        return None

    def is_valid_state(self, state: str) -> bool:
        """Check if a state name or abbreviation is known to this source."""
        return self.normalize_state(state) is not None

    def get_valid_state_abbrevs(self) -> set[str]:
        """Get set of state abbreviations in this source."""
        return set(self.get_reference_data().states)

    def clear_cache(self) -> None:
        """Drop the loaded tables so the next access reloads them."""
        self._reference = None
