"""Address formatting utilities.

Renders generated address records as single-line or multi-line strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ryandata_address_synth.models.address import AddressItem


class AddressFormatter:
    """Utility class for formatting address strings from components.

    Example:
        >>> from ryandata_address_synth.core.address_formatter import get_formatter
        >>> formatter = get_formatter()
        >>> formatter.compute_full_address(item)
        '4821 N Oak St, Apt. 12C, Springfield, IL 62701'
    """

    @staticmethod
    def compute_full_address(address: AddressItem) -> str:
        """Single-line rendering: street lines, then "City, ST ZIP"."""
        return compute_full_address_from_parts(
            address1=address.street1,
            address2=address.street2,
            place_name=address.city,
            state_name=address.state,
            zip_code_full=address.zip,
        )

    @staticmethod
    def compute_mailing_lines(address: AddressItem, include_country: bool = False) -> list[str]:
        """Mailing-label lines for an address.

        Args:
            address: Address to render.
            include_country: Append the country code as a final line.

        Returns:
            List of non-empty lines.
        """
        lines = [line for line in (address.street1, address.street2) if line]
        locality = compute_full_address_from_parts(
            None, None, address.city, address.state, address.zip
        )
        if locality:
            lines.append(locality)
        if include_country and address.country:
            lines.append(address.country)
        return lines


def compute_full_address_from_parts(
    address1: str | None,
    address2: str | None,
    place_name: str | None,
    state_name: str | None,
    zip_code_full: str | None,
) -> str:
    """Compute the full formatted address string from individual parts.

    Args:
        address1: Street address line (e.g., "123 Main St")
        address2: Unit/apartment line (e.g., "Apt. 2B")
        place_name: City name
        state_name: State abbreviation or name
        zip_code_full: Full ZIP code (5-digit or ZIP+4)

    Returns:
        Complete formatted address string with components separated by commas.
    """
    full_parts: list[str] = []

    if address1:
        full_parts.append(address1)
    if address2:
        full_parts.append(address2)

    city_state_zip_parts: list[str] = []
    if place_name:
        city_state_zip_parts.append(place_name)

    if state_name and zip_code_full:
        city_state_zip_parts.append(f"{state_name} {zip_code_full}")
    elif state_name:
        city_state_zip_parts.append(state_name)
    elif zip_code_full:
        city_state_zip_parts.append(zip_code_full)

    if city_state_zip_parts:
        full_parts.append(", ".join(city_state_zip_parts))

    return ", ".join(full_parts)


# Module-level singleton for convenience
_formatter: AddressFormatter | None = None


def get_formatter() -> AddressFormatter:
    """Get the singleton AddressFormatter instance."""
    global _formatter
    if _formatter is None:
        _formatter = AddressFormatter()
    return _formatter
