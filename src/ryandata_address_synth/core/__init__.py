"""RyanData Address Synth Core - randomization and templating primitives.

This module contains the domain-agnostic building blocks of the generator:
a seedable random source, weighted selection, placeholder interpolation,
ZIP handling, address formatting and the package error types.

Usage:
    from ryandata_address_synth.core import (
        RandomSource,
        WeightedChoice,
        chance,
        coin,
        PatternInterpolator,
        MissingResolverError,
    )
"""

from __future__ import annotations

from ryandata_address_synth.core.address_formatter import (
    AddressFormatter,
    compute_full_address_from_parts,
    get_formatter,
)
from ryandata_address_synth.core.chance import WeightedChoice, chance, coin
from ryandata_address_synth.core.errors import (
    PACKAGE_NAME,
    MissingResolverError,
    RyanDataError,
    RyanDataValidationError,
)
from ryandata_address_synth.core.interpolation import PatternInterpolator, Resolver
from ryandata_address_synth.core.random_source import RandomSource, ordinal_suffix
from ryandata_address_synth.core.zip_normalizer import (
    ZipCodeNormalizer,
    ZipCodeResult,
    get_zip_normalizer,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "MissingResolverError",
    "RyanDataError",
    "RyanDataValidationError",
    # Randomness
    "RandomSource",
    "ordinal_suffix",
    "WeightedChoice",
    "chance",
    "coin",
    # Templating
    "PatternInterpolator",
    "Resolver",
    # ZIP code handling
    "ZipCodeNormalizer",
    "ZipCodeResult",
    "get_zip_normalizer",
    # Address formatting
    "AddressFormatter",
    "compute_full_address_from_parts",
    "get_formatter",
]
