"""Reference data sources for address generation.

This module provides data source implementations and convenience
lookups against the bundled en-US dataset.
"""

from __future__ import annotations

from ryandata_address_synth.data.base import BaseDataSource
from ryandata_address_synth.data.csv_source import CSVDataSource, get_default_csv_source
from ryandata_address_synth.data.factory import DataSourceFactory
from ryandata_address_synth.models import ReferenceData, State

__all__ = [
    "BaseDataSource",
    "CSVDataSource",
    "DataSourceFactory",
    "ReferenceData",
    "get_default_csv_source",
    "get_reference_data",
    "find_state",
    "is_valid_state",
    "normalize_state",
    "get_valid_state_abbrevs",
]


def get_reference_data() -> ReferenceData:
    """Get the bundled reference tables."""
    return get_default_csv_source().get_reference_data()


def find_state(state: str) -> State | None:
    """Resolve a state by exact abbreviation, then exact full name.

    Args:
        state: State abbreviation or full name.

    Returns:
        State if found, None otherwise.
    """
    return get_default_csv_source().find_state(state)


def is_valid_state(state: str) -> bool:
    """Check if a state name or abbreviation is in the bundled dataset."""
    return get_default_csv_source().is_valid_state(state)


def normalize_state(state: str) -> str | None:
    """Normalize a state name to its abbreviation (case-insensitive).

    Returns:
        Two-letter state abbreviation if valid, None otherwise.
    """
    return get_default_csv_source().normalize_state(state)


def get_valid_state_abbrevs() -> set[str]:
    """Get set of state abbreviations in the bundled dataset."""
    return get_default_csv_source().get_valid_state_abbrevs()
