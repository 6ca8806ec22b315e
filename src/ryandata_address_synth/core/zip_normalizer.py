"""ZIP code splitting, formatting and validation utilities.

Consolidates the ZIP handling shared by the generator (turning a city's
stored prefix into a full code) and the validators (checking generated codes).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ZipCodeResult:
    """Result of ZIP code parsing and validation.

    Attributes:
        zip5: The 5-digit ZIP code (None if invalid).
        zip4: The 4-digit ZIP+4 extension (None if not present or invalid).
        full: The full formatted ZIP code ("12345" or "12345-6789").
        is_valid: True if the ZIP code is valid.
        error: Error message if invalid, None otherwise.
    """

    zip5: str | None
    zip4: str | None
    full: str | None
    is_valid: bool
    error: str | None


class ZipCodeNormalizer:
    """Single source of truth for ZIP code operations.

    Example:
        >>> normalizer = ZipCodeNormalizer()
        >>> normalizer.split_prefix("90001-12")
        ('90001', '12')
        >>> normalizer.normalize("90001", "1234", dash=False)
        '900011234'
        >>> normalizer.parse("900011234").full
        '90001-1234'
    """

    @staticmethod
    def sanitize(prefix: str | None) -> str:
        """Strip whitespace and every dash from a ZIP or ZIP prefix."""
        if not prefix:
            return ""
        return prefix.strip().replace("-", "")

    def split_prefix(self, prefix: str | None) -> tuple[str, str]:
        """Split a stored prefix into its ZIP5 part and its up-to-4-digit rest.

        Either part may be shorter than its final length; characters past
        the ninth are dropped.

        Returns:
            Tuple of (base, remainder).
        """
        cleaned = self.sanitize(prefix)
        return cleaned[:5], cleaned[5:9]

    @staticmethod
    def validate_zip5(zip5: str | None) -> tuple[str | None, str | None]:
        """Validate a 5-digit ZIP code.

        Returns:
            Tuple of (cleaned_value, error_message).
        """
        if not zip5 or not isinstance(zip5, str):
            return None, "Missing or invalid zip code"

        cleaned = zip5.strip()
        if len(cleaned) == 5 and cleaned.isdigit():
            return cleaned, None
        return None, f"Invalid zip5 format: {zip5}"

    @staticmethod
    def validate_zip4(zip4: str | None) -> tuple[str | None, str | None]:
        """Validate a 4-digit ZIP+4 extension. An empty extension is valid."""
        if not zip4:
            return None, None

        if isinstance(zip4, str):
            cleaned = zip4.strip()
            if len(cleaned) == 4 and cleaned.isdigit():
                return cleaned, None

        return None, f"Invalid zip4 format: {zip4}"

    @staticmethod
    def normalize(zip5: str, zip4: str | None = None, *, dash: bool = True) -> str:
        """Format ZIP code as "12345", "12345-6789" or "123456789".

        Args:
            zip5: The 5-digit ZIP code.
            zip4: The optional 4-digit extension.
            dash: Separate the extension with a dash.

        Returns:
            Formatted ZIP string.
        """
        if zip4:
            return f"{zip5}{'-' if dash else ''}{zip4}"
        return zip5

    def parse(self, zip_string: str | None) -> ZipCodeResult:
        """Parse "12345", "12345-6789" or "123456789" into components.

        Args:
            zip_string: The ZIP code string to parse.

        Returns:
            ZipCodeResult with parsed components and validation status.
        """
        if not zip_string or not isinstance(zip_string, str) or not zip_string.strip():
            return ZipCodeResult(None, None, None, False, "Missing or invalid zip code")

        cleaned = zip_string.strip()

        if "-" in cleaned:
            zip5, _, zip4 = cleaned.partition("-")
            if not zip4:
                return ZipCodeResult(None, None, None, False, f"Invalid zip4 format: {cleaned}")
        elif len(cleaned) == 9 and cleaned.isdigit():
            zip5, zip4 = cleaned[:5], cleaned[5:]
        else:
            zip5, zip4 = cleaned, ""

        validated_zip5, zip5_error = self.validate_zip5(zip5)
        if zip5_error:
            return ZipCodeResult(None, None, None, False, zip5_error)

        validated_zip4, zip4_error = self.validate_zip4(zip4)
        if zip4_error:
            return ZipCodeResult(validated_zip5, None, None, False, zip4_error)

        full = self.normalize(validated_zip5, validated_zip4)  # type: ignore[arg-type]
        return ZipCodeResult(validated_zip5, validated_zip4, full, True, None)


# Module-level singleton for convenience
_default_normalizer: ZipCodeNormalizer | None = None


def get_zip_normalizer() -> ZipCodeNormalizer:
    """Get the default ZipCodeNormalizer singleton.

    Returns:
        Shared ZipCodeNormalizer instance.
    """
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = ZipCodeNormalizer()
    return _default_normalizer
