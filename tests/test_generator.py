"""Tests for AddressGenerator and the module-level helpers."""

from __future__ import annotations

import logging
import re

import pytest

import ryandata_address_synth as synth
from ryandata_address_synth.data.factory import DATA_FILE_ENV
from ryandata_address_synth.generator import (
    SEED_ENV,
    AddressGenerator,
    create_generator_from_env,
    get_default_generator,
)
from ryandata_address_synth.models import (
    AddressItem,
    AtFailure,
    ReferenceData,
    SecondaryDescriptorType,
    StateNotFoundError,
)

STREET2_RE = re.compile(r"^(?P<descriptor>.+) (?P<number>[1-9][0-9]?)(?P<letter>[A-Z])$")
ZIP_RE = re.compile(r"^\d{5}(-?\d{4})?$")


class TestDirection:
    def test_cardinal_only(self, generator: AddressGenerator) -> None:
        names = {generator.direction(exclude_intercardinals=True) for _ in range(300)}
        assert names == {"North", "East", "South", "West"}

    def test_all_directions_reachable(self, generator: AddressGenerator) -> None:
        abbreviations = {generator.direction(abbreviated=True) for _ in range(500)}
        assert abbreviations == {"N", "E", "S", "W", "NE", "SE", "SW", "NW"}

    def test_index_mapping(self, reference_data: ReferenceData, scripted_random) -> None:
        generator = AddressGenerator(
            reference_data=reference_data, random_source=scripted_random(ints=[0, 4, 7, 3])
        )
        assert generator.direction(abbreviated=True) == "N"
        assert generator.direction(abbreviated=True) == "NE"
        assert generator.direction() == "Northwest"
        assert generator.direction() == "West"


class TestState:
    def test_state_names_and_abbreviations(
        self, generator: AddressGenerator, reference_data: ReferenceData
    ) -> None:
        names = {state.name for state in reference_data.states.values()}
        for _ in range(100):
            assert generator.state() in names
            assert generator.state(abbreviated=True) in reference_data.states


class TestCity:
    def test_city_within_state(self, generator: AddressGenerator) -> None:
        texas = {"Austin", "Houston", "Dallas", "San Antonio"}
        for _ in range(50):
            assert generator.city("TX") in texas
            assert generator.city("Texas") in texas

    def test_unknown_state_error_policy(self, generator: AddressGenerator) -> None:
        with pytest.raises(StateNotFoundError) as exc_info:
            generator.city("ZZ", "error")
        assert exc_info.value.type == "state_not_found"
        assert exc_info.value.context["state"] == "ZZ"
        assert 'Specified state "ZZ" is not available.' in str(exc_info.value)

    def test_unknown_state_random_policy(
        self, generator: AddressGenerator, reference_data: ReferenceData
    ) -> None:
        all_cities = {c.city for s in reference_data.states.values() for c in s.cities}
        assert generator.city("ZZ") in all_cities
        assert generator.city("ZZ", AtFailure.RANDOM) in all_cities

    def test_lookup_is_case_sensitive(self, generator: AddressGenerator) -> None:
        with pytest.raises(StateNotFoundError):
            generator.city("tx", AtFailure.ERROR)

    def test_empty_state_is_unknown(self, generator: AddressGenerator) -> None:
        with pytest.raises(StateNotFoundError):
            generator.city("", "error")

    def test_no_state_never_errors(self, generator: AddressGenerator) -> None:
        assert generator.city(None, "error")

    def test_invalid_policy(self, generator: AddressGenerator) -> None:
        with pytest.raises(ValueError):
            generator.city("TX", "explode")

    def test_fallback_is_logged(self, generator: AddressGenerator, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="ryandata_address_synth.generator"):
            generator.city("Atlantis")
        assert "Atlantis" in caplog.text


class TestCounty:
    def test_county_is_from_dataset(
        self, generator: AddressGenerator, reference_data: ReferenceData
    ) -> None:
        counties = {c.county for s in reference_data.states.values() for c in s.cities}
        for _ in range(50):
            assert generator.county() in counties

    def test_county_uses_its_own_draws(
        self, reference_data: ReferenceData, scripted_random
    ) -> None:
        """county() picks a fresh state and city; it does not reuse a prior city() pick."""
        # city("TX") picks Austin (index 0); county() then picks state index 1 (AK)
        generator = AddressGenerator(
            reference_data=reference_data, random_source=scripted_random(indexes=[0, 1, 0])
        )
        assert generator.city("TX") == "Austin"
        assert generator.county() == reference_data.states["AK"].cities[0].county


class TestZipCode:
    def test_default_is_five_random_digits(self, generator: AddressGenerator) -> None:
        for _ in range(100):
            assert re.fullmatch(r"\d{5}", generator.zip_code())

    @pytest.mark.parametrize(
        ("prefix", "nine", "no_dash", "pattern"),
        [
            ("900", False, False, r"900\d{2}"),
            ("90001", False, False, r"90001"),
            ("90001", True, False, r"90001-\d{4}"),
            ("90001", True, True, r"90001\d{4}"),
            ("90001-12", True, False, r"90001-12\d{2}"),
            ("900011234", True, False, r"90001-1234"),
            ("900011234", True, True, r"900011234"),
            ("900011234", False, False, r"90001"),
            ("06", False, False, r"06\d{3}"),
        ],
    )
    def test_prefix_handling(
        self,
        generator: AddressGenerator,
        prefix: str,
        nine: bool,
        no_dash: bool,
        pattern: str,
    ) -> None:
        value = generator.zip_code(prefix=prefix, nine_digit_zip=nine, no_dash_in_zip=no_dash)
        assert re.fullmatch(pattern, value), value

    def test_no_dash_ignored_for_five_digit(self, generator: AddressGenerator) -> None:
        assert re.fullmatch(r"\d{5}", generator.zip_code(no_dash_in_zip=True))


class TestStreetLines:
    def test_street1_without_number(self, generator: AddressGenerator) -> None:
        for _ in range(100):
            line = generator.street1()
            assert line
            assert "{" not in line and "}" not in line
            assert not line[0].isdigit() or re.match(r"^\d+(st|nd|rd|th) ", line)

    def test_street1_with_number(self, generator: AddressGenerator) -> None:
        for _ in range(100):
            number, _, rest = generator.street1(include_street_number=True).partition(" ")
            assert re.fullmatch(r"[1-9]\d{2,4}", number)
            assert rest

    def test_street1_uses_vocabulary(
        self, reference_data: ReferenceData, scripted_random
    ) -> None:
        # pattern 0 is "{street} {descriptor}"; descriptor draw 0.0 picks the general
        # category, and 0.0 on the coin picks the abbreviation
        generator = AddressGenerator(
            reference_data=reference_data,
            random_source=scripted_random(floats=[0.0, 0.0], indexes=[0, 0, 0]),
        )
        name = reference_data.street_names[0]
        descriptor = reference_data.street_descriptors["general"][0]
        assert reference_data.street_patterns[0] == "{street} {descriptor}"
        assert generator.street1() == f"{name} {descriptor.abbreviation}"

    @pytest.mark.parametrize("descriptor_type", list(SecondaryDescriptorType))
    def test_street2_format(
        self,
        generator: AddressGenerator,
        reference_data: ReferenceData,
        descriptor_type: SecondaryDescriptorType,
    ) -> None:
        descriptors = reference_data.secondary_descriptors[descriptor_type]
        for _ in range(100):
            match = STREET2_RE.match(generator.street2(descriptor_type))
            assert match
            assert match.group("descriptor") in descriptors

    def test_street2_accepts_plain_strings(self, generator: AddressGenerator) -> None:
        assert STREET2_RE.match(generator.street2("commercial"))

    def test_street2_rejects_unknown_type(self, generator: AddressGenerator) -> None:
        with pytest.raises(ValueError):
            generator.street2("industrial")

    def test_street2_random_type_covers_both(
        self, generator: AddressGenerator, reference_data: ReferenceData
    ) -> None:
        residential = set(reference_data.secondary_descriptors["residential"])
        seen = {STREET2_RE.match(generator.street2()).group("descriptor") for _ in range(300)}
        assert seen & residential
        assert seen - residential


class TestFull:
    def test_fields_are_consistent(
        self, generator: AddressGenerator, reference_data: ReferenceData
    ) -> None:
        for _ in range(200):
            item = generator.full()
            state = next(s for s in reference_data.states.values() if s.name == item.state)
            matches = [
                c
                for c in state.cities
                if c.city == item.city
                and c.county == item.county
                and item.zip.startswith(c.zip_code_prefix[:5])
            ]
            assert matches, item

    def test_options(self, generator: AddressGenerator) -> None:
        item = generator.full(state_abbreviated=True, nine_digit_zip=True, no_dash_in_zip=True)
        assert len(item.state) == 2
        assert re.fullmatch(r"\d{9}", item.zip)
        assert item.country == "US"

        item = generator.full(nine_digit_zip=True)
        assert re.fullmatch(r"\d{5}-\d{4}", item.zip)

    def test_anchored_state(self, generator: AddressGenerator) -> None:
        for _ in range(20):
            item = generator.full(state="IL", state_abbreviated=True)
            assert item.state == "IL"
            assert item.city in {"Chicago", "Springfield", "Peoria"}

    def test_anchored_unknown_state(self, generator: AddressGenerator) -> None:
        with pytest.raises(StateNotFoundError):
            generator.full(state="ZZ", at_failure="error")
        assert generator.full(state="ZZ").state

    def test_street_lines_populated(self, generator: AddressGenerator) -> None:
        item = generator.full()
        assert re.match(r"^[1-9]\d{2,4} ", item.street1)
        assert STREET2_RE.match(item.street2)
        assert ZIP_RE.match(item.zip)

    def test_returns_address_item(self, generator: AddressGenerator) -> None:
        item = generator.full()
        assert isinstance(item, AddressItem)
        assert list(item.to_dict()) == [
            "street1",
            "street2",
            "city",
            "county",
            "state",
            "zip",
            "country",
        ]

    def test_batch(self, generator: AddressGenerator) -> None:
        items = generator.full_batch(5, state="CA", state_abbreviated=True)
        assert len(items) == 5
        assert {item.state for item in items} == {"CA"}
        assert generator.full_batch(0) == []
        with pytest.raises(ValueError):
            generator.full_batch(-1)

    def test_batch_forwards_options(self, generator: AddressGenerator) -> None:
        items = generator.full_batch(
            3, state="Texas", nine_digit_zip=True, no_dash_in_zip=True, at_failure="error"
        )
        assert {item.state for item in items} == {"Texas"}
        assert all(re.fullmatch(r"\d{9}", item.zip) for item in items)
        with pytest.raises(StateNotFoundError):
            generator.full_batch(2, state="ZZ", at_failure=AtFailure.ERROR)


class TestSeeding:
    def test_same_seed_same_output(self, reference_data: ReferenceData) -> None:
        first = AddressGenerator(reference_data=reference_data, seed=2024)
        second = AddressGenerator(reference_data=reference_data, seed=2024)
        assert first.full_batch(10) == second.full_batch(10)
        assert first.street1() == second.street1()

    def test_different_seeds_differ(self, reference_data: ReferenceData) -> None:
        first = AddressGenerator(reference_data=reference_data, seed=1)
        second = AddressGenerator(reference_data=reference_data, seed=2)
        assert first.full_batch(10) != second.full_batch(10)

    def test_random_source_exposed(self, generator: AddressGenerator) -> None:
        assert generator.random_source.seed == 1234
        assert generator.data_source is None


class TestEnvironmentConfig:
    def test_seed_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv(SEED_ENV, "77")
        first = create_generator_from_env().full()
        second = create_generator_from_env().full()
        assert first == second

    def test_invalid_seed(self, monkeypatch) -> None:
        monkeypatch.setenv(SEED_ENV, "abc")
        with pytest.raises(ValueError, match=SEED_ENV):
            create_generator_from_env()

    def test_data_file_from_env(self, monkeypatch, write_cities_csv) -> None:
        path = write_cities_csv(["VT,Vermont,Montpelier,Washington County,05602"])
        monkeypatch.setenv(DATA_FILE_ENV, str(path))
        item = get_default_generator().full(state_abbreviated=True)
        assert (item.city, item.county, item.state) == ("Montpelier", "Washington County", "VT")
        assert item.zip == "05602"

    def test_default_generator_is_shared(self) -> None:
        assert get_default_generator() is get_default_generator()


class TestModuleHelpers:
    def test_helpers_use_default_generator(self, monkeypatch) -> None:
        monkeypatch.setenv(SEED_ENV, "5")
        assert synth.direction() in {
            "North",
            "East",
            "South",
            "West",
            "Northeast",
            "Southeast",
            "Southwest",
            "Northwest",
        }
        assert synth.street1(include_street_number=True)[0].isdigit()
        assert STREET2_RE.match(synth.street2("residential"))
        assert synth.city("Maine") in {"Portland", "Augusta", "Bangor"}
        assert synth.county()
        assert len(synth.state(abbreviated=True)) == 2
        assert synth.zip_code(prefix="12").startswith("12")
        assert synth.full(state="Ohio").state == "Ohio"
