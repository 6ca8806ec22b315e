"""Closed enumerations for reference-data categories and generator options."""

from __future__ import annotations

from enum import Enum


class StreetDescriptorType(str, Enum):
    """Categories of street descriptors (e.g. 'Street', 'Court', 'Parkway')."""

    GENERAL = "general"
    SIZE = "size"
    FUNCTION = "function"


class SecondaryDescriptorType(str, Enum):
    """Categories of secondary unit descriptors ('Apt.' vs 'Dept.')."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class DirectionClass(str, Enum):
    """Direction tables: the four cardinals and the four intercardinals."""

    CARDINAL = "cardinal"
    INTERCARDINAL = "intercardinal"


class AtFailure(str, Enum):
    """What a state lookup does when the requested state is unknown."""

    ERROR = "error"
    RANDOM = "random"


class PatternToken(str, Enum):
    """Placeholder tokens that may appear in street patterns."""

    ORD = "ord"
    STREET = "street"
    DESCRIPTOR = "descriptor"
    DIR = "dir"


class AddressField(str, Enum):
    """Fields of a generated address record."""

    STREET1 = "street1"
    STREET2 = "street2"
    CITY = "city"
    COUNTY = "county"
    STATE = "state"
    ZIP = "zip"
    COUNTRY = "country"


# All field names in output order
ADDRESS_FIELDS: list[str] = [f.value for f in AddressField]
