"""Tests for the AddressItem record, formatting and ZIP normalization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ryandata_address_synth.core import (
    ZipCodeNormalizer,
    compute_full_address_from_parts,
    get_formatter,
    get_zip_normalizer,
)
from ryandata_address_synth.models import ADDRESS_FIELDS, AddressItem


@pytest.fixture
def item() -> AddressItem:
    return AddressItem(
        street1="4821 N Oak St",
        street2="Apt. 12C",
        city="Springfield",
        county="Sangamon County",
        state="IL",
        zip="62701-0042",
    )


class TestAddressItem:
    def test_formatted(self, item: AddressItem) -> None:
        assert item.formatted == "4821 N Oak St, Apt. 12C, Springfield, IL 62701-0042"
        assert get_formatter().compute_full_address(item) == item.formatted

    def test_mailing_lines(self, item: AddressItem) -> None:
        assert item.mailing_lines() == [
            "4821 N Oak St",
            "Apt. 12C",
            "Springfield, IL 62701-0042",
        ]
        assert item.mailing_lines(include_country=True)[-1] == "US"

    def test_to_dict_order(self, item: AddressItem) -> None:
        data = item.to_dict()
        assert list(data) == ADDRESS_FIELDS
        assert data["county"] == "Sangamon County"
        assert data["country"] == "US"

    def test_frozen(self, item: AddressItem) -> None:
        with pytest.raises(ValidationError):
            item.city = "Peoria"  # type: ignore[misc]

    def test_equality(self, item: AddressItem) -> None:
        assert item == AddressItem(**item.to_dict())


class TestComputeFullAddressFromParts:
    @pytest.mark.parametrize(
        ("parts", "expected"),
        [
            (("1 Main St", None, "Austin", "TX", "78749"), "1 Main St, Austin, TX 78749"),
            ((None, None, "Austin", "TX", None), "Austin, TX"),
            ((None, None, None, None, "78749"), "78749"),
            ((None, None, None, None, None), ""),
        ],
    )
    def test_parts(self, parts: tuple, expected: str) -> None:
        assert compute_full_address_from_parts(*parts) == expected


class TestZipCodeNormalizer:
    @pytest.mark.parametrize(
        ("prefix", "expected"),
        [
            ("", ("", "")),
            (None, ("", "")),
            ("900", ("900", "")),
            ("90001", ("90001", "")),
            ("90001-12", ("90001", "12")),
            ("900011234", ("90001", "1234")),
            (" 90001-1234 ", ("90001", "1234")),
        ],
    )
    def test_split_prefix(self, prefix: str | None, expected: tuple[str, str]) -> None:
        assert ZipCodeNormalizer().split_prefix(prefix) == expected

    def test_normalize(self) -> None:
        assert ZipCodeNormalizer.normalize("90001") == "90001"
        assert ZipCodeNormalizer.normalize("90001", "1234") == "90001-1234"
        assert ZipCodeNormalizer.normalize("90001", "1234", dash=False) == "900011234"

    @pytest.mark.parametrize(
        ("value", "zip5", "zip4"),
        [
            ("90001", "90001", None),
            ("90001-1234", "90001", "1234"),
            ("900011234", "90001", "1234"),
        ],
    )
    def test_parse_valid(self, value: str, zip5: str, zip4: str | None) -> None:
        result = get_zip_normalizer().parse(value)
        assert result.is_valid
        assert (result.zip5, result.zip4) == (zip5, zip4)

    @pytest.mark.parametrize("value", ["", "9000", "90001-", "90001-123", "9000A", None])
    def test_parse_invalid(self, value: str | None) -> None:
        result = get_zip_normalizer().parse(value)
        assert not result.is_valid
        assert result.error

    def test_singleton(self) -> None:
        assert get_zip_normalizer() is get_zip_normalizer()
