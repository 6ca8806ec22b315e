"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from hypothesis import Verbosity, settings

from ryandata_address_synth.data import CSVDataSource, get_default_csv_source
from ryandata_address_synth.generator import AddressGenerator, reset_default_generator
from ryandata_address_synth.models import ReferenceData

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

CSV_HEADER = "state_id,state_name,city,county_name,zip_prefix"


@pytest.fixture(scope="session")
def data_source() -> CSVDataSource:
    """The bundled CSV source, loaded once per session."""
    return get_default_csv_source()


@pytest.fixture(scope="session")
def reference_data(data_source: CSVDataSource) -> ReferenceData:
    return data_source.get_reference_data()


@pytest.fixture
def generator(reference_data: ReferenceData) -> AddressGenerator:
    """A seeded generator over the bundled tables."""
    return AddressGenerator(reference_data=reference_data, seed=1234)


@pytest.fixture
def write_cities_csv(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Write CSV rows (without header) to a temporary file and return its path."""

    def _write(rows: Iterable[str], header: str = CSV_HEADER) -> Path:
        path = tmp_path / "cities.csv"
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _fresh_default_generator():
    """Each test sees a default generator built from its own environment."""
    reset_default_generator()
    yield
    reset_default_generator()


class ScriptedRandom:
    """Random source returning pre-scripted values, for exact-outcome tests.

    ``random()`` pops from ``floats``, ``randint()`` from ``ints`` and
    ``sample()`` picks the item at the next index in ``indexes``.
    """

    def __init__(
        self,
        floats: Iterable[float] = (),
        ints: Iterable[int] = (),
        indexes: Iterable[int] = (),
    ) -> None:
        self.floats = list(floats)
        self.ints = list(ints)
        self.indexes = list(indexes)

    def random(self) -> float:
        return self.floats.pop(0)

    def randint(self, low: int, high: int) -> int:
        value = self.ints.pop(0)
        assert low <= value <= high
        return value

    def digits(self, count: int, *, leading_zero: bool = True) -> str:
        return "7" * max(count, 0)

    def upper(self) -> str:
        return "Q"

    def ordinal(self, low: int, high: int) -> str:
        return "4th"

    def sample(self, items):
        return items[self.indexes.pop(0) if self.indexes else 0]


@pytest.fixture
def scripted_random() -> type[ScriptedRandom]:
    return ScriptedRandom
