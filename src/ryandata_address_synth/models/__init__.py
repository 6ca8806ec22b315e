"""Address models package.

Reference-data models, the generated ``AddressItem`` record, the closed
category enumerations and the address-specific errors.
"""

from __future__ import annotations

from ryandata_address_synth.models.address import AddressItem
from ryandata_address_synth.models.enums import (
    ADDRESS_FIELDS,
    AddressField,
    AtFailure,
    DirectionClass,
    PatternToken,
    SecondaryDescriptorType,
    StreetDescriptorType,
)
from ryandata_address_synth.models.errors import (
    PACKAGE_NAME,
    RyanDataAddressError,
    RyanDataValidationError,
    StateNotFoundError,
)
from ryandata_address_synth.models.reference import (
    City,
    DirectionEntry,
    DirectionTable,
    ReferenceData,
    State,
    StreetDescriptor,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RyanDataAddressError",
    "RyanDataValidationError",
    "StateNotFoundError",
    # Enums and constants
    "AddressField",
    "ADDRESS_FIELDS",
    "AtFailure",
    "DirectionClass",
    "PatternToken",
    "SecondaryDescriptorType",
    "StreetDescriptorType",
    # Reference data
    "City",
    "DirectionEntry",
    "DirectionTable",
    "ReferenceData",
    "State",
    "StreetDescriptor",
    # Output
    "AddressItem",
]
