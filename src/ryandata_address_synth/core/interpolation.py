"""Placeholder interpolation for street patterns.

Patterns look like ``"{dir} {ord} {descriptor}"``. Each ``{token}`` is
replaced by calling the resolver bound to that token name.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping

from ryandata_address_synth.core.errors import MissingResolverError

Resolver = Callable[[], str]

TOKEN_PATTERN = re.compile(r"\{(\w+)\}")


class PatternInterpolator:
    """Substitutes placeholder tokens with freshly generated values.

    Every occurrence of a token calls its resolver again, so a pattern such
    as ``"{street} and {street}"`` gets two independent draws.

    Example:
        >>> interpolator = PatternInterpolator({"street": lambda: "Oak"})
        >>> interpolator.interpolate("{street} Court")
        'Oak Court'
    """

    def __init__(self, resolvers: Mapping[str, Resolver]) -> None:
        """Initialize the interpolator.

        Args:
            resolvers: Mapping of token name to zero-argument resolver. Keys
                may be plain strings or ``str`` enum members.
        """
        self._resolvers: dict[str, Resolver] = {
            str(_token_name(key)): resolver for key, resolver in resolvers.items()
        }

    @property
    def token_names(self) -> set[str]:
        """Names of all tokens that have a bound resolver."""
        return set(self._resolvers)

    @staticmethod
    def tokens(pattern: str) -> list[str]:
        """List the token names in ``pattern``, left to right, with repeats."""
        return TOKEN_PATTERN.findall(pattern)

    def validate(self, patterns: Iterable[str]) -> None:
        """Check that every token used by ``patterns`` has a resolver.

        Raises:
            MissingResolverError: For the first unbound token found.
        """
        for pattern in patterns:
            for token in self.tokens(pattern):
                if token not in self._resolvers:
                    raise MissingResolverError.for_token(token, pattern)

    def interpolate(self, pattern: str) -> str:
        """Replace every placeholder in ``pattern`` with its resolver's output.

        Raises:
            MissingResolverError: If the pattern uses a token with no resolver.
        """

        def _replace(match: re.Match[str]) -> str:
            token = match.group(1)
            resolver = self._resolvers.get(token)
            if resolver is None:
                raise MissingResolverError.for_token(token, pattern)
            return resolver()

        return TOKEN_PATTERN.sub(_replace, pattern)


def _token_name(key: object) -> object:
    # str enums stringify as "Class.MEMBER"; use the value instead
    return getattr(key, "value", key)
