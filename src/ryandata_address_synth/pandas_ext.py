from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ryandata_address_synth.models import ADDRESS_FIELDS

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_address_synth.generator import AddressGenerator


class AddressSynthAccessor:
    """Pandas accessor for filling DataFrames with synthetic addresses.

    Usage:
        >>> from ryandata_address_synth.pandas_ext import register_accessor
        >>> register_accessor()
        >>> customers = pd.DataFrame({"name": ["Ada", "Grace"]})
        >>> customers.synth.add_addresses(prefix="billing_")
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj

    def add_addresses(
        self,
        *,
        prefix: str = "",
        generator: AddressGenerator | None = None,
        inplace: bool = False,
        **options: Any,
    ) -> pd.DataFrame:
        """Add one generated address per row, one column per address field.

        Args:
            prefix: Prefix for the new column names.
            generator: Optional AddressGenerator to use.
            inplace: If True, modify the DataFrame in place.
            **options: Keyword arguments forwarded to ``AddressGenerator.full``.

        Returns:
            DataFrame with the address columns added.
        """
        frame = generate_address_frame(
            len(self._obj), generator=generator, prefix=prefix, **options
        )
        frame.index = self._obj.index

        df = self._obj if inplace else self._obj.copy()
        for col in frame.columns:
            df[col] = frame[col]
        return df


def register_accessor(name: str = "synth") -> None:
    """Register the address accessor on pandas DataFrame.

    After calling this, you can use:
        >>> df.synth.add_addresses()

    Args:
        name: Name for the accessor (default: "synth").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(AddressSynthAccessor)


def generate_address_frame(
    count: int,
    generator: AddressGenerator | None = None,
    prefix: str = "",
    **options: Any,
) -> pd.DataFrame:
    """Generate ``count`` addresses as a DataFrame.

    Args:
        count: Number of rows.
        generator: Optional AddressGenerator; the default generator otherwise.
        prefix: Prefix to add to column names.
        **options: Keyword arguments forwarded to ``AddressGenerator.full``.

    Returns:
        DataFrame with one column per address field, in field order.
    """
    import pandas as pd

    from ryandata_address_synth.generator import get_default_generator

    gen = generator or get_default_generator()
    items = gen.full_batch(count, **options)
    df = pd.DataFrame([item.to_dict() for item in items], columns=ADDRESS_FIELDS)

    if prefix:
        df.columns = [f"{prefix}{col}" for col in df.columns]
    return df
