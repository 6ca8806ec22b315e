from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from ryandata_address_synth.core.chance import WeightedChoice, chance, coin
from ryandata_address_synth.core.interpolation import PatternInterpolator
from ryandata_address_synth.core.random_source import RandomSource
from ryandata_address_synth.core.zip_normalizer import get_zip_normalizer
from ryandata_address_synth.data import DataSourceFactory
from ryandata_address_synth.models import (
    AddressItem,
    AtFailure,
    DirectionClass,
    PatternToken,
    ReferenceData,
    SecondaryDescriptorType,
    State,
    StateNotFoundError,
    StreetDescriptorType,
)

if TYPE_CHECKING:
    from ryandata_address_synth.protocols import DataSourceProtocol, RandomSourceProtocol

logger = logging.getLogger(__name__)

SEED_ENV = "RYANDATA_SYNTH_SEED"

ORDINAL_RANGE = (1, 50)
STREET_NUMBER_DIGITS = (3, 5)
UNIT_NUMBER_DIGITS = (1, 2)

_DESCRIPTOR_TYPE_CHOICES: list[WeightedChoice[StreetDescriptorType]] = [
    WeightedChoice(StreetDescriptorType.GENERAL, 1 / 3),
    WeightedChoice(StreetDescriptorType.SIZE, 1 / 3),
    WeightedChoice(StreetDescriptorType.FUNCTION, 1 / 3),
]


class AddressGenerator:
    """Composes synthetic addresses from reference tables.

    Holds one read-only ``ReferenceData`` and one random source. Every
    public method is an independent call that consumes a handful of draws;
    none of them mutate shared state.

    Example:
        >>> generator = AddressGenerator(seed=7)
        >>> generator.street1(include_street_number=True)   # e.g. "4821 N Oak St"
        >>> generator.city("Texas")                          # e.g. "Austin"
        >>> item = generator.full(state_abbreviated=True, nine_digit_zip=True)
        >>> item.formatted

        # Custom components
        >>> from ryandata_address_synth.data import CSVDataSource
        >>> generator = AddressGenerator(data_source=CSVDataSource("/path/to/cities.csv"))
    """

    def __init__(
        self,
        data_source: DataSourceProtocol | None = None,
        reference_data: ReferenceData | None = None,
        random_source: RandomSourceProtocol | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            data_source: Source of reference tables. Defaults to the bundled CSV.
                Ignored when ``reference_data`` is given.
            reference_data: Already-loaded tables to use directly.
            random_source: Source of uniform draws. Defaults to a RandomSource.
            seed: Seed for the default RandomSource. Ignored when
                ``random_source`` is given.

        Raises:
            MissingResolverError: If a street pattern uses an unknown token.
        """
        if reference_data is None:
            self._data_source = data_source or DataSourceFactory.create()
            reference_data = self._data_source.get_reference_data()
        else:
            self._data_source = data_source
        self._reference = reference_data
        self._random = random_source or RandomSource(seed)
        self._zip = get_zip_normalizer()

        self._interpolator = PatternInterpolator(
            {
                PatternToken.ORD: self._resolve_ordinal,
                PatternToken.STREET: self._resolve_street_name,
                PatternToken.DESCRIPTOR: self._resolve_descriptor,
                PatternToken.DIR: self._resolve_direction,
            }
        )
        self._interpolator.validate(self._reference.street_patterns)

    @property
    def reference_data(self) -> ReferenceData:
        return self._reference

    @property
    def data_source(self) -> DataSourceProtocol | None:
        return self._data_source

    @property
    def random_source(self) -> RandomSourceProtocol:
        return self._random

    # ------------------------------------------------------------------
    # Street pattern resolvers
    # ------------------------------------------------------------------

    def _resolve_ordinal(self) -> str:
        return self._random.ordinal(*ORDINAL_RANGE)

    def _resolve_street_name(self) -> str:
        return self._random.sample(self._reference.street_names)

    def _resolve_descriptor(self) -> str:
        descriptor_type = chance(_DESCRIPTOR_TYPE_CHOICES, self._random)
        descriptor = self._random.sample(self._reference.street_descriptors[descriptor_type])
        return coin(descriptor.abbreviation, descriptor.name, 0.5, self._random)

    def _resolve_direction(self) -> str:
        return self.direction(
            exclude_intercardinals=False,
            abbreviated=coin(True, False, 0.5, self._random),
        )

    # ------------------------------------------------------------------
    # Reference lookups
    # ------------------------------------------------------------------

    def direction(self, exclude_intercardinals: bool = False, abbreviated: bool = False) -> str:
        """Generate a random cardinal or intercardinal direction.

        With intercardinals allowed, cardinals and intercardinals each take
        half of the probability mass.

        Args:
            exclude_intercardinals: Only return N/E/S/W directions.
            abbreviated: Return "NE" rather than "Northeast".

        Returns:
            A direction name or abbreviation.
        """
        index = self._random.randint(0, 3 if exclude_intercardinals else 7)
        direction_class = DirectionClass.INTERCARDINAL if index > 3 else DirectionClass.CARDINAL
        entry = self._reference.directions.for_class(direction_class)[index % 4]
        return entry.abbreviation if abbreviated else entry.name

    def state(self, abbreviated: bool = False) -> str:
        """Pick a state uniformly; return its abbreviation or full name."""
        key = self._random.sample(self._reference.state_keys)
        return key if abbreviated else self._reference.states[key].name

    def _random_state(self) -> State:
        return self._reference.states[self.state(abbreviated=True)]

    def _resolve_state(self, state: str | None, at_failure: AtFailure | str) -> State:
        """Find a state by abbreviation or name, applying the failure policy.

        ``None`` means "any state" and always resolves to a random one.

        Raises:
            StateNotFoundError: If the state is unknown and at_failure is ERROR.
        """
        policy = AtFailure(at_failure)
        if state is None:
            return self._random_state()

        found = self._reference.find_state(state)
        if found is not None:
            return found
        if policy is AtFailure.ERROR:
            raise StateNotFoundError.for_state(state)

        logger.debug("State %r not found; falling back to a random state", state)
        return self._random_state()

    def city(
        self,
        state: str | None = None,
        at_failure: AtFailure | str = AtFailure.RANDOM,
    ) -> str:
        """Generate a random city name.

        Args:
            state: Optional state abbreviation ("TX") or full name ("Texas")
                to draw the city from.
            at_failure: ``"error"`` raises when ``state`` is unknown;
                ``"random"`` (default) silently uses a random state instead.

        Returns:
            A city name.

        Raises:
            StateNotFoundError: If ``state`` is unknown and at_failure is "error".
        """
        state_record = self._resolve_state(state, at_failure)
        return self._random.sample(state_record.cities).city

    def county(self) -> str:
        """Random county name.

        Drawn from its own random state and city, so it is not related to
        any earlier ``city()`` result. Use ``full()`` for matching fields.
        """
        return self._random.sample(self._random_state().cities).county

    def zip_code(
        self,
        prefix: str = "",
        nine_digit_zip: bool = False,
        no_dash_in_zip: bool = False,
    ) -> str:
        """Generate a ZIP code that starts with ``prefix``.

        Args:
            prefix: Leading digits (up to 9, dashes ignored). Missing digits
                are filled in at random.
            nine_digit_zip: Produce a ZIP+4 code.
            no_dash_in_zip: Omit the dash in a ZIP+4 code ("900011234").
                Only applies when ``nine_digit_zip`` is True.

        Returns:
            "12345", "12345-6789" or "123456789".
        """
        base, remainder = self._zip.split_prefix(prefix)
        if len(base) < 5:
            base += self._random.digits(5 - len(base))

        if not nine_digit_zip:
            return base

        if len(remainder) < 4:
            remainder += self._random.digits(4 - len(remainder))
        return self._zip.normalize(base, remainder, dash=not no_dash_in_zip)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def street1(self, include_street_number: bool = False) -> str:
        """Generate a street address line, e.g. "4821 N Oak St".

        Args:
            include_street_number: Prepend a random 3 to 5 digit number.

        Returns:
            The street line.
        """
        street_number = ""
        if include_street_number:
            digit_count = self._random.randint(*STREET_NUMBER_DIGITS)
            street_number = f"{self._random.digits(digit_count, leading_zero=False)} "
        pattern = self._random.sample(self._reference.street_patterns)
        return f"{street_number}{self._interpolator.interpolate(pattern)}"

    def street2(self, descriptor_type: SecondaryDescriptorType | str | None = None) -> str:
        """Generate a secondary address line, e.g. "Apt. 12C" or "Dept. 4K".

        Args:
            descriptor_type: ``"residential"`` or ``"commercial"``; picked
                50/50 when omitted.

        Returns:
            Descriptor, a space, then 1-2 digits and an uppercase letter.
        """
        if descriptor_type is None:
            resolved_type = coin(
                SecondaryDescriptorType.RESIDENTIAL,
                SecondaryDescriptorType.COMMERCIAL,
                0.5,
                self._random,
            )
        else:
            resolved_type = SecondaryDescriptorType(descriptor_type)
        descriptor = self._random.sample(self._reference.secondary_descriptors[resolved_type])
        digit_count = self._random.randint(*UNIT_NUMBER_DIGITS)
        identifier = f"{self._random.digits(digit_count, leading_zero=False)}{self._random.upper()}"
        return f"{descriptor} {identifier}"

    def full(
        self,
        state_abbreviated: bool = False,
        nine_digit_zip: bool = False,
        no_dash_in_zip: bool = False,
        state: str | None = None,
        at_failure: AtFailure | str = AtFailure.RANDOM,
    ) -> AddressItem:
        """Generate a complete address record.

        One city record is chosen inside the resolved state and supplies
        the city, the county and the ZIP prefix, so those three always agree.

        Args:
            state_abbreviated: Use "CA" rather than "California".
            nine_digit_zip: Produce a ZIP+4 code.
            no_dash_in_zip: Omit the dash in a ZIP+4 code.
            state: Optional state (abbreviation or name) to anchor the
                address in; random when omitted.
            at_failure: Policy for an unknown ``state``, as in ``city()``.

        Returns:
            AddressItem with every field populated.

        Raises:
            StateNotFoundError: If ``state`` is unknown and at_failure is "error".
        """
        state_record = self._resolve_state(state, at_failure)
        anchor = self._random.sample(state_record.cities)
        zip_code = self.zip_code(
            prefix=anchor.zip_code_prefix,
            nine_digit_zip=nine_digit_zip,
            no_dash_in_zip=no_dash_in_zip,
        )
        logger.debug("Anchored address in %s, %s", anchor.city, state_record.abbreviation)

        return AddressItem(
            street1=self.street1(include_street_number=True),
            street2=self.street2(),
            city=anchor.city,
            county=anchor.county,
            state=state_record.abbreviation if state_abbreviated else state_record.name,
            zip=zip_code,
            country=self._reference.country_code,
        )

    def full_batch(
        self,
        count: int,
        state_abbreviated: bool = False,
        nine_digit_zip: bool = False,
        no_dash_in_zip: bool = False,
        state: str | None = None,
        at_failure: AtFailure | str = AtFailure.RANDOM,
    ) -> list[AddressItem]:
        """Generate ``count`` independent address records.

        Args:
            count: Number of records (zero allowed).
            state_abbreviated, nine_digit_zip, no_dash_in_zip, state, at_failure:
                As in ``full()``, applied to every record.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [
            self.full(
                state_abbreviated=state_abbreviated,
                nine_digit_zip=nine_digit_zip,
                no_dash_in_zip=no_dash_in_zip,
                state=state,
                at_failure=at_failure,
            )
            for _ in range(count)
        ]


def _seed_from_env() -> int | None:
    raw = os.getenv(SEED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{SEED_ENV} must be an integer, got {raw!r}") from exc


def create_generator_from_env() -> AddressGenerator:
    """Build a generator configured by RYANDATA_SYNTH_SEED / RYANDATA_SYNTH_DATA_FILE."""
    return AddressGenerator(data_source=DataSourceFactory.from_env(), seed=_seed_from_env())


# Module-level convenience functions
_default_generator: AddressGenerator | None = None


def get_default_generator() -> AddressGenerator:
    """Get the default AddressGenerator singleton.

    Returns:
        Shared AddressGenerator configured from the environment.
    """
    global _default_generator
    if _default_generator is None:
        _default_generator = create_generator_from_env()
    return _default_generator


def reset_default_generator() -> None:
    """Forget the default generator so the next call re-reads the environment."""
    global _default_generator
    _default_generator = None


def direction(exclude_intercardinals: bool = False, abbreviated: bool = False) -> str:
    """Random direction from the default generator."""
    return get_default_generator().direction(
        exclude_intercardinals=exclude_intercardinals, abbreviated=abbreviated
    )


def street1(include_street_number: bool = False) -> str:
    """Street line from the default generator."""
    return get_default_generator().street1(include_street_number=include_street_number)


def street2(descriptor_type: SecondaryDescriptorType | str | None = None) -> str:
    """Secondary unit line from the default generator."""
    return get_default_generator().street2(descriptor_type)


def city(state: str | None = None, at_failure: AtFailure | str = AtFailure.RANDOM) -> str:
    """City name from the default generator."""
    return get_default_generator().city(state, at_failure)


def county() -> str:
    """County name from the default generator."""
    return get_default_generator().county()


def state(abbreviated: bool = False) -> str:
    """State name or abbreviation from the default generator."""
    return get_default_generator().state(abbreviated=abbreviated)


def zip_code(prefix: str = "", nine_digit_zip: bool = False, no_dash_in_zip: bool = False) -> str:
    """ZIP code from the default generator."""
    return get_default_generator().zip_code(
        prefix=prefix, nine_digit_zip=nine_digit_zip, no_dash_in_zip=no_dash_in_zip
    )


def full(
    state_abbreviated: bool = False,
    nine_digit_zip: bool = False,
    no_dash_in_zip: bool = False,
    state: str | None = None,
    at_failure: AtFailure | str = AtFailure.RANDOM,
) -> AddressItem:
    """Complete address record from the default generator."""
    return get_default_generator().full(
        state_abbreviated=state_abbreviated,
        nine_digit_zip=nine_digit_zip,
        no_dash_in_zip=no_dash_in_zip,
        state=state,
        at_failure=at_failure,
    )
