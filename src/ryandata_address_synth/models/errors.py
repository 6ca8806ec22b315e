"""Address-specific error classes.

These classes provide package-specific error handling for reference-data
lookups made while generating addresses.
"""

from __future__ import annotations

from ryandata_address_synth.core.errors import (
    PACKAGE_NAME,
    RyanDataError,
    RyanDataValidationError,
)

__all__ = [
    "PACKAGE_NAME",
    "RyanDataAddressError",
    "RyanDataValidationError",
    "StateNotFoundError",
]


class RyanDataAddressError(RyanDataError):
    """Base class for errors about address reference data.

    Inherits from PydanticCustomError (through RyanDataError), so
    ``error.type`` and ``error.context`` are available alongside the
    rendered message.
    """


class StateNotFoundError(RyanDataAddressError):
    """A requested state matches neither a state abbreviation nor a state name."""

    @classmethod
    def for_state(cls, state: str | None) -> StateNotFoundError:
        """Build the error for an unknown state.

        Args:
            state: The offending input, as given by the caller.

        Returns:
            StateNotFoundError naming the input.
        """
        return cls.create(  # type: ignore[return-value]
            "state_not_found",
            'Specified state "{state}" is not available.',
            {"state": state},
        )
