"""Reference data models.

Immutable Pydantic models for the tables the generator draws from. A
``ReferenceData`` instance is built once by a data source and shared,
read-only, by every generator that uses it.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ryandata_address_synth.models.enums import (
    DirectionClass,
    SecondaryDescriptorType,
    StreetDescriptorType,
)

_FROZEN = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")


class DirectionEntry(BaseModel):
    """A compass direction, e.g. North / N."""

    model_config = _FROZEN

    name: str = Field(min_length=1)
    abbreviation: str = Field(min_length=1)


class DirectionTable(BaseModel):
    """Cardinal (N, E, S, W) and intercardinal (NE, SE, SW, NW) directions."""

    model_config = _FROZEN

    cardinal: tuple[DirectionEntry, ...] = Field(min_length=4, max_length=4)
    intercardinal: tuple[DirectionEntry, ...] = Field(min_length=4, max_length=4)

    def for_class(self, direction_class: DirectionClass) -> tuple[DirectionEntry, ...]:
        if direction_class is DirectionClass.CARDINAL:
            return self.cardinal
        return self.intercardinal


class StreetDescriptor(BaseModel):
    """A street suffix such as Boulevard / Blvd."""

    model_config = _FROZEN

    name: str = Field(min_length=1)
    abbreviation: str = Field(min_length=1)


class City(BaseModel):
    """A city record. ``city``, ``county`` and ZIP prefix are always used together."""

    model_config = _FROZEN

    city: str = Field(min_length=1)
    county: str = Field(min_length=1)
    zip_code_prefix: str = Field(
        default="",
        description="Leading digits of the city's ZIP code (up to 9, dashes ignored)",
    )

    @field_validator("zip_code_prefix")
    @classmethod
    def _check_zip_prefix(cls, value: str) -> str:
        digits = value.replace("-", "")
        if not digits.isdigit() and digits:
            raise ValueError(f"ZIP prefix must contain only digits and dashes: {value!r}")
        if len(digits) > 9:
            raise ValueError(f"ZIP prefix longer than 9 digits: {value!r}")
        return value


class State(BaseModel):
    """A state with its non-empty, ordered list of cities."""

    model_config = _FROZEN

    name: str = Field(min_length=1)
    abbreviation: str = Field(min_length=1)
    cities: tuple[City, ...] = Field(min_length=1)


class ReferenceData(BaseModel):
    """All tables needed to generate addresses for one locale.

    Every category must be non-empty, state keys must equal the state's
    abbreviation, and street patterns must be non-empty strings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    country_code: str = Field(default="US", min_length=2)
    directions: DirectionTable
    street_names: tuple[str, ...] = Field(min_length=1)
    street_patterns: tuple[str, ...] = Field(min_length=1)
    street_descriptors: dict[StreetDescriptorType, tuple[StreetDescriptor, ...]]
    secondary_descriptors: dict[SecondaryDescriptorType, tuple[str, ...]]
    states: dict[str, State] = Field(min_length=1)

    @field_validator("street_patterns")
    @classmethod
    def _check_patterns(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not pattern.strip() for pattern in value):
            raise ValueError("Street patterns must not be blank")
        return value

    @model_validator(mode="after")
    def _check_tables(self) -> Self:
        for descriptor_type in StreetDescriptorType:
            if not self.street_descriptors.get(descriptor_type):
                raise ValueError(f"No street descriptors for category '{descriptor_type.value}'")
        for secondary_type in SecondaryDescriptorType:
            if not self.secondary_descriptors.get(secondary_type):
                raise ValueError(
                    f"No secondary descriptors for category '{secondary_type.value}'"
                )
        for key, state in self.states.items():
            if key != state.abbreviation:
                raise ValueError(
                    f"State key '{key}' does not match abbreviation '{state.abbreviation}'"
                )
        return self

    @property
    def state_keys(self) -> tuple[str, ...]:
        """State abbreviations in table order."""
        return tuple(self.states)

    @property
    def city_count(self) -> int:
        return sum(len(state.cities) for state in self.states.values())

    def find_state(self, state: str | None) -> State | None:
        """Exact match on the state key (abbreviation), then on the full name."""
        if not state:
            return None
        found = self.states.get(state)
        if found is not None:
            return found
        return next((s for s in self.states.values() if s.name == state), None)
