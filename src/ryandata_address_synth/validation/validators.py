from __future__ import annotations

from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_address_synth.core.zip_normalizer import ZipCodeNormalizer
from ryandata_address_synth.protocols import DataSourceProtocol

if TYPE_CHECKING:
    from ryandata_address_synth.models import AddressItem


class ZipFormatValidator(BaseValidator["AddressItem"]):
    """Validates the ZIP shape: 5 digits, ZIP+4 with dash, or 9 digits.

    This is a fast format validator that doesn't require any lookups.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "zip_format"

    def validate(self, address: AddressItem) -> ValidationResult:
        """Validate the ZIP format.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with any format errors.
        """
        result = ValidationResult(is_valid=True)
        parsed = _zip_normalizer.parse(address.zip)
        if not parsed.is_valid:
            result.add_error("zip", parsed.error or "Invalid zip code", address.zip)
        return result


class StateValidator(BaseValidator["AddressItem"]):
    """Validates that the state is known to the data source."""

    def __init__(self, data_source: DataSourceProtocol) -> None:
        """Initialize state validator.

        Args:
            data_source: Data source for state lookups.
        """
        self._data_source = data_source

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "state"

    def validate(self, address: AddressItem) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if not self._data_source.is_valid_state(address.state):
            result.add_error(
                field="state",
                message=f"Unknown state: {address.state}",
                value=address.state,
            )
        return result


class CityConsistencyValidator(BaseValidator["AddressItem"]):
    """Validates that city, county and ZIP come from one city record.

    Passes when the address's state contains a city record with the same
    city and county whose ZIP prefix (truncated to 5 digits) starts the
    address's ZIP code.
    """

    def __init__(self, data_source: DataSourceProtocol) -> None:
        """Initialize consistency validator.

        Args:
            data_source: Data source holding the city records.
        """
        self._data_source = data_source

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "city_consistency"

    def validate(self, address: AddressItem) -> ValidationResult:
        """Validate that the address fields match one city record.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with an error if no city record matches.
        """
        result = ValidationResult(is_valid=True)

        abbreviation = self._data_source.normalize_state(address.state)
        state = self._data_source.get_state(abbreviation) if abbreviation else None
        if state is None:
            # Unknown states are reported by StateValidator
            return result

        zip5 = _zip_normalizer.sanitize(address.zip)[:5]
        for record in state.cities:
            if record.city != address.city or record.county != address.county:
                continue
            base, _ = _zip_normalizer.split_prefix(record.zip_code_prefix)
            if zip5.startswith(base):
                return result

        result.add_error(
            field="city",
            message=(
                f"No city record in {state.abbreviation} matches "
                f"{address.city} / {address.county} / {address.zip}"
            ),
            value=address.city,
        )
        return result


def create_default_validators(
    data_source: DataSourceProtocol,
    include_format_validators: bool = True,
) -> CompositeValidator[AddressItem]:
    """Create default validation pipeline for generated addresses.

    Args:
        data_source: Data source for state and city lookups.
        include_format_validators: If True, include the ZIP format validator.

    Returns:
        CompositeValidator with default validators configured.
    """
    builder: ValidatorPipelineBuilder[AddressItem] = ValidatorPipelineBuilder(
        "address_item_validation"
    )

    if include_format_validators:
        builder.add(ZipFormatValidator())

    builder.add(StateValidator(data_source))
    builder.add(CityConsistencyValidator(data_source))

    return builder.build()


def validate_address(
    address: AddressItem,
    data_source: DataSourceProtocol | None = None,
) -> ValidationResult:
    """Run the default validators against one address.

    Args:
        address: Address to check.
        data_source: Data source to check against; the bundled CSV by default.

    Returns:
        ValidationResult aggregating every validator's errors.
    """
    if data_source is None:
        from ryandata_address_synth.data import get_default_csv_source

        data_source = get_default_csv_source()
    return create_default_validators(data_source).validate(address)


# Module-level normalizer instance for validators
_zip_normalizer = ZipCodeNormalizer()
