"""Registry of reference data sources, selectable by name or by environment."""

from __future__ import annotations

import logging
import os
from typing import Any, ClassVar

from ryandata_address_synth.protocols import DataSourceProtocol

logger = logging.getLogger(__name__)

DATA_FILE_ENV = "RYANDATA_SYNTH_DATA_FILE"


class DataSourceFactory:
    """Creates reference data sources.

    ``"csv"`` is always available and reads the bundled ``us_cities.csv``
    unless given a ``csv_path``. Other sources register a class whose
    instances provide ``get_reference_data()``.

    Example:
        >>> source = DataSourceFactory.create()
        >>> source = DataSourceFactory.create("csv", csv_path="/path/to/cities.csv")
        >>> source = DataSourceFactory.from_env()  # honours RYANDATA_SYNTH_DATA_FILE

        >>> DataSourceFactory.register("sqlite", SQLiteDataSource)
        >>> source = DataSourceFactory.create("sqlite", db_path="cities.db")
    """

    default_type: ClassVar[str] = "csv"
    _sources: ClassVar[dict[str, type[DataSourceProtocol]]] = {}

    @classmethod
    def _registry(cls) -> dict[str, type[DataSourceProtocol]]:
        if cls.default_type not in cls._sources:
            from ryandata_address_synth.data.csv_source import CSVDataSource

            cls._sources[cls.default_type] = CSVDataSource
        return cls._sources

    @classmethod
    def register(cls, name: str, source_class: type[DataSourceProtocol]) -> None:
        """Register a data source class under ``name``.

        Raises:
            TypeError: If the class has no callable ``get_reference_data``.
        """
        if not callable(getattr(source_class, "get_reference_data", None)):
            raise TypeError(
                f"{source_class.__name__} cannot be a data source: "
                "it does not define get_reference_data()"
            )
        cls._registry()[name] = source_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Forget a registered source. The bundled ``"csv"`` source always remains."""
        cls._sources.pop(name, None)

    @classmethod
    def available_types(cls) -> list[str]:
        return sorted(cls._registry())

    @classmethod
    def create(cls, source_type: str | None = None, **kwargs: Any) -> DataSourceProtocol:
        """Instantiate a registered data source.

        Args:
            source_type: Registered name; ``"csv"`` when omitted.
            **kwargs: Constructor arguments, e.g. ``csv_path`` for ``"csv"``.

        Raises:
            ValueError: If ``source_type`` is not registered.
        """
        name = source_type or cls.default_type
        source_class = cls._registry().get(name)
        if source_class is None:
            raise ValueError(
                f"Unknown data source type: {name}. "
                f"Available types: {', '.join(cls.available_types())}"
            )
        return source_class(**kwargs)

    @classmethod
    def from_env(cls) -> DataSourceProtocol:
        """CSV source for the file named by RYANDATA_SYNTH_DATA_FILE, else the bundled one."""
        data_file = os.getenv(DATA_FILE_ENV, "").strip()
        if not data_file:
            return cls.create()
        logger.debug("Using reference data from %s=%s", DATA_FILE_ENV, data_file)
        return cls.create(csv_path=data_file)
