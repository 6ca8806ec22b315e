"""ryandata-address-synth: synthetic, internally consistent US addresses.

This package provides a seedable address generator with:
- Weighted random selection and placeholder-based street patterns
- Pluggable reference data sources (default: bundled en-US CSV)
- Composable validators for generated records
- Pandas integration, a CLI and an optional HTTP API

Quick Start:
    >>> from ryandata_address_synth import AddressGenerator
    >>> generator = AddressGenerator(seed=42)
    >>> generator.street1(include_street_number=True)  # e.g. "4821 N Oak St"
    >>> generator.city("Texas")  # e.g. "Austin"

    # Complete records keep city, county, state and ZIP consistent
    >>> item = generator.full(state_abbreviated=True, nine_digit_zip=True)
    >>> print(item.formatted)

    # Module-level helpers use a shared default generator
    >>> from ryandata_address_synth import full
    >>> full().to_dict()

    # Pandas integration
    >>> from ryandata_address_synth import generate_address_frame
    >>> df = generate_address_frame(100, state="CA")
"""

from __future__ import annotations  # noqa: I001

from ryandata_address_synth.core import (
    MissingResolverError,
    PatternInterpolator,
    RandomSource,
    RyanDataError,
    WeightedChoice,
    chance,
    coin,
)
from ryandata_address_synth.data import (
    BaseDataSource,
    CSVDataSource,
    DataSourceFactory,
    find_state,
    get_reference_data,
    is_valid_state,
    normalize_state,
)
from ryandata_address_synth.models import (
    ADDRESS_FIELDS,
    AddressField,
    AddressItem,
    AtFailure,
    ReferenceData,
    RyanDataAddressError,
    RyanDataValidationError,
    SecondaryDescriptorType,
    StateNotFoundError,
)
from ryandata_address_synth.generator import (
    AddressGenerator,
    city,
    county,
    create_generator_from_env,
    direction,
    full,
    get_default_generator,
    reset_default_generator,
    state,
    street1,
    street2,
    zip_code,
)
from ryandata_address_synth.pandas_ext import generate_address_frame, register_accessor
from ryandata_address_synth.protocols import DataSourceProtocol, RandomSourceProtocol
from ryandata_address_synth.validation import (
    CityConsistencyValidator,
    StateValidator,
    ZipFormatValidator,
    create_default_validators,
    validate_address,
)

__version__ = "0.1.0"
__package_name__ = "ryandata-address-synth"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "AddressGenerator",
    "get_default_generator",
    "reset_default_generator",
    "create_generator_from_env",
    "direction",
    "street1",
    "street2",
    "city",
    "county",
    "state",
    "zip_code",
    "full",
    # Models
    "AddressItem",
    "AddressField",
    "ADDRESS_FIELDS",
    "AtFailure",
    "ReferenceData",
    "SecondaryDescriptorType",
    # Core utilities
    "RandomSource",
    "WeightedChoice",
    "chance",
    "coin",
    "PatternInterpolator",
    # Errors
    "RyanDataError",
    "RyanDataAddressError",
    "RyanDataValidationError",
    "MissingResolverError",
    "StateNotFoundError",
    # Protocols
    "DataSourceProtocol",
    "RandomSourceProtocol",
    # Data sources
    "BaseDataSource",
    "CSVDataSource",
    "DataSourceFactory",
    "get_reference_data",
    "find_state",
    "is_valid_state",
    "normalize_state",
    # Validators
    "CityConsistencyValidator",
    "StateValidator",
    "ZipFormatValidator",
    "create_default_validators",
    "validate_address",
    # Pandas integration
    "generate_address_frame",
    "register_accessor",
]
