"""Validation of generated address records.

Checks that a generated (or hand-edited) ``AddressItem`` is well formed and
consistent with the reference data it claims to come from.
"""

from abstract_validation_base import BaseValidator, CompositeValidator, ValidatorPipelineBuilder

from ryandata_address_synth.validation.validators import (
    CityConsistencyValidator,
    StateValidator,
    ZipFormatValidator,
    create_default_validators,
    validate_address,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "CityConsistencyValidator",
    "StateValidator",
    "ZipFormatValidator",
    "create_default_validators",
    "validate_address",
]
