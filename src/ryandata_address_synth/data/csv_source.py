from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from ryandata_address_synth.data import constants
from ryandata_address_synth.data.base import BaseDataSource
from ryandata_address_synth.models import ReferenceData, RyanDataValidationError

logger = logging.getLogger(__name__)

BUNDLED_CSV = "us_cities.csv"
REQUIRED_COLUMNS = ("state_id", "state_name", "city", "county_name", "zip_prefix")


class CSVDataSource(BaseDataSource):
    """Data source that loads state and city records from a CSV file.

    By default, loads from the bundled us_cities.csv file, but can be
    configured to load from a custom file path. Street vocabulary,
    directions and patterns come from ``data.constants`` unless overridden.

    The CSV needs the columns ``state_id``, ``state_name``, ``city``,
    ``county_name`` and ``zip_prefix``; one row per city.
    """

    def __init__(
        self,
        csv_path: Union[str, Path] | None = None,
        street_patterns: list[str] | None = None,
        street_names: list[str] | None = None,
    ) -> None:
        """Initialize CSV data source.

        Args:
            csv_path: Path to CSV file. If None, uses bundled us_cities.csv.
            street_patterns: Optional replacement for the bundled street patterns.
            street_names: Optional replacement for the bundled street names.
        """
        self._csv_path = csv_path
        self._street_patterns = street_patterns
        self._street_names = street_names
        super().__init__()

    @property
    def source_name(self) -> str:
        return str(self._csv_path) if self._csv_path else BUNDLED_CSV

    def _iter_csv_rows(self) -> Iterator[dict[str, str]]:
        """Iterate over CSV rows.

        Yields:
            Dict for each row in the CSV.
        """
        if self._csv_path:
            with open(Path(self._csv_path), encoding="utf-8", newline="") as f:
                yield from csv.DictReader(f)
        else:
            data_file = resources.files("ryandata_address_synth.data").joinpath(BUNDLED_CSV)
            with data_file.open("r", encoding="utf-8", newline="") as f:
                yield from csv.DictReader(f)

    def _collect_states(self) -> dict[str, dict[str, Any]]:
        """Group CSV rows into state dicts, preserving file order."""
        states: dict[str, dict[str, Any]] = {}
        for line_number, row in enumerate(self._iter_csv_rows(), start=2):
            missing = [column for column in REQUIRED_COLUMNS if row.get(column) is None]
            if missing:
                raise RyanDataValidationError(
                    ValueError(f"Missing columns {missing} at line {line_number}"),
                    context={"source": self.source_name, "line": line_number},
                )

            state_id = row["state_id"].strip()
            state_name = row["state_name"].strip()
            known_abbrev = constants.STATE_NAME_TO_ABBREV.get(state_name.lower())
            if known_abbrev is not None and known_abbrev != state_id:
                logger.warning(
                    "State name %r is usually %s, not %s (%s line %d)",
                    state_name,
                    known_abbrev,
                    state_id,
                    self.source_name,
                    line_number,
                )

            state = states.setdefault(
                state_id,
                {"name": state_name, "abbreviation": state_id, "cities": []},
            )
            if state["name"] != state_name:
                logger.warning(
                    "State %s is named %r at %s line %d but %r earlier; keeping the first name",
                    state_id,
                    state_name,
                    self.source_name,
                    line_number,
                    state["name"],
                )
            state["cities"].append(
                {
                    "city": row["city"],
                    "county": row["county_name"],
                    "zip_code_prefix": row["zip_prefix"].strip(),
                }
            )
        return states

    def _load_data(self) -> ReferenceData:
        """Load data from the CSV file and the bundled constants."""
        try:
            states = self._collect_states()
        except (UnicodeDecodeError, csv.Error) as exc:
            raise RyanDataValidationError(exc, context={"source": self.source_name}) from exc

        try:
            reference = ReferenceData.model_validate(
                {
                    "country_code": constants.COUNTRY_CODE,
                    "directions": {
                        "cardinal": constants.CARDINAL_DIRECTIONS,
                        "intercardinal": constants.INTERCARDINAL_DIRECTIONS,
                    },
                    "street_names": self._street_names or constants.STREET_NAMES,
                    "street_patterns": self._street_patterns or constants.STREET_PATTERNS,
                    "street_descriptors": {
                        category: [
                            {"name": name, "abbreviation": abbreviation}
                            for name, abbreviation in descriptors.items()
                        ]
                        for category, descriptors in constants.STREET_DESCRIPTORS.items()
                    },
                    "secondary_descriptors": constants.SECONDARY_DESCRIPTORS,
                    "states": states,
                }
            )
        except ValidationError as exc:
            raise RyanDataValidationError.from_validation_error(
                exc, context={"source": self.source_name}
            ) from exc

        logger.debug(
            "Loaded %d states / %d cities from %s",
            len(reference.states),
            reference.city_count,
            self.source_name,
        )
        return reference


@lru_cache(maxsize=1)
def get_default_csv_source() -> CSVDataSource:
    """Get the default CSV data source singleton.

    Uses lru_cache to ensure only one instance is created.

    Returns:
        Shared CSVDataSource instance.
    """
    return CSVDataSource()
