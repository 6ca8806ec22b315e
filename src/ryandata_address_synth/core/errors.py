"""Generic error classes with package identification.

Errors raised by the generation core are ``PydanticCustomError`` subclasses,
so they carry a machine-readable ``type``, a message template and a context
dict, and are also plain ``ValueError`` instances for callers that do not
care about pydantic.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_address_synth"


class RyanDataError(PydanticCustomError):
    """Pydantic custom error tagged with the package name."""

    @classmethod
    def create(
        cls,
        error_type: str,
        message_template: str,
        context: dict[str, Any] | None = None,
    ) -> RyanDataError:
        """Build an error whose context always includes the package name.

        Args:
            error_type: Type/category of the error.
            message_template: Error message (can include {placeholders}).
            context: Additional context merged into the error context.

        Returns:
            Error instance of the calling class.
        """
        ctx = {"package": PACKAGE_NAME, **(context or {})}
        return cls(error_type, message_template, ctx)


class MissingResolverError(RyanDataError):
    """A pattern references a placeholder token with no bound resolver.

    This is a programming defect (template set and resolver set disagree),
    so it is raised immediately rather than skipped.
    """

    @classmethod
    def for_token(cls, token: str, pattern: str) -> MissingResolverError:
        return cls.create(  # type: ignore[return-value]
            "missing_resolver",
            'No resolver bound for token "{token}" in pattern "{pattern}"',
            {"token": token, "pattern": pattern},
        )


class RyanDataValidationError(Exception):
    """Exception wrapper for pydantic.ValidationError with package identification.

    Raised when reference data cannot be turned into valid models; gives
    access to the original error while adding context such as the source path.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"RyanDataValidationError({self.original_error!r}, context={self.context})"
