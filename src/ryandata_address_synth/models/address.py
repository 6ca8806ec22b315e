"""Generated address model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ryandata_address_synth.core.address_formatter import AddressFormatter
from ryandata_address_synth.models.enums import ADDRESS_FIELDS


class AddressItem(BaseModel):
    """One synthetic address record.

    ``city``, ``county`` and the first five digits of ``zip`` come from the
    same city record when produced by ``AddressGenerator.full``.
    """

    model_config = ConfigDict(frozen=True)

    street1: str = Field(description="Street line, e.g. '4821 N Oak St'")
    street2: str = Field(description="Secondary unit line, e.g. 'Apt. 12C'")
    city: str
    county: str
    state: str = Field(description="State name or abbreviation")
    zip: str = Field(description="5-digit ZIP, ZIP+4 with dash, or 9 contiguous digits")
    country: str = Field(default="US", description="Country code of the dataset")

    @property
    def formatted(self) -> str:
        """Single-line rendering, e.g. '4821 N Oak St, Apt. 12C, Springfield, IL 62701'."""
        return AddressFormatter.compute_full_address(self)

    def mailing_lines(self, include_country: bool = False) -> list[str]:
        """Mailing-label lines for this address."""
        return AddressFormatter.compute_mailing_lines(self, include_country=include_country)

    def to_dict(self) -> dict[str, str]:
        """Convert to a dict keyed by field name, in output order."""
        data = self.model_dump()
        return {field: data[field] for field in ADDRESS_FIELDS}
