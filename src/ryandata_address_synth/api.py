"""Minimal FastAPI service for synthetic US address generation."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query

from ryandata_address_synth.generator import AddressGenerator, get_default_generator
from ryandata_address_synth.models import AtFailure, SecondaryDescriptorType, StateNotFoundError

app = FastAPI(title="RyanData Address Synth API", version="0.1.0")

MAX_BATCH = 1000


def _generator(seed: Optional[int]) -> AddressGenerator:
    """Seeded requests get their own generator so they are reproducible."""
    if seed is None:
        return get_default_generator()
    default = get_default_generator()
    return AddressGenerator(reference_data=default.reference_data, seed=seed)


def _state_not_found(exc: StateNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/address")
def address(
    state: Optional[str] = None,
    at_failure: AtFailure = AtFailure.RANDOM,
    state_abbreviated: bool = False,
    nine_digit_zip: bool = False,
    no_dash_in_zip: bool = False,
    seed: Optional[int] = None,
) -> dict[str, Any]:
    """Generate one complete address record."""
    try:
        item = _generator(seed).full(
            state_abbreviated=state_abbreviated,
            nine_digit_zip=nine_digit_zip,
            no_dash_in_zip=no_dash_in_zip,
            state=state,
            at_failure=at_failure,
        )
    except StateNotFoundError as exc:
        raise _state_not_found(exc) from exc
    return {**item.to_dict(), "formatted": item.formatted}


@app.get("/addresses")
def addresses(
    count: int = Query(10, ge=0, le=MAX_BATCH),
    state: Optional[str] = None,
    at_failure: AtFailure = AtFailure.RANDOM,
    state_abbreviated: bool = False,
    nine_digit_zip: bool = False,
    no_dash_in_zip: bool = False,
    seed: Optional[int] = None,
) -> dict[str, Any]:
    """Generate a batch of independent address records."""
    try:
        items = _generator(seed).full_batch(
            count,
            state_abbreviated=state_abbreviated,
            nine_digit_zip=nine_digit_zip,
            no_dash_in_zip=no_dash_in_zip,
            state=state,
            at_failure=at_failure,
        )
    except StateNotFoundError as exc:
        raise _state_not_found(exc) from exc
    return {"count": len(items), "addresses": [item.to_dict() for item in items]}


@app.get("/street1")
def street1(include_street_number: bool = True, seed: Optional[int] = None) -> dict[str, str]:
    return {"street1": _generator(seed).street1(include_street_number=include_street_number)}


@app.get("/street2")
def street2(
    descriptor_type: Optional[SecondaryDescriptorType] = None,
    seed: Optional[int] = None,
) -> dict[str, str]:
    return {"street2": _generator(seed).street2(descriptor_type)}


@app.get("/city")
def city(
    state: Optional[str] = None,
    at_failure: AtFailure = AtFailure.RANDOM,
    seed: Optional[int] = None,
) -> dict[str, str]:
    """Generate a city, optionally within a state."""
    try:
        return {"city": _generator(seed).city(state, at_failure)}
    except StateNotFoundError as exc:
        raise _state_not_found(exc) from exc


@app.get("/county")
def county(seed: Optional[int] = None) -> dict[str, str]:
    return {"county": _generator(seed).county()}


@app.get("/state")
def state(abbreviated: bool = False, seed: Optional[int] = None) -> dict[str, str]:
    return {"state": _generator(seed).state(abbreviated=abbreviated)}


@app.get("/zip")
def zip_code(
    prefix: str = Query("", max_length=10, pattern=r"^[0-9-]*$"),
    nine_digit_zip: bool = False,
    no_dash_in_zip: bool = False,
    seed: Optional[int] = None,
) -> dict[str, str]:
    """Generate a ZIP code starting with the given digits."""
    return {
        "zip": _generator(seed).zip_code(
            prefix=prefix, nine_digit_zip=nine_digit_zip, no_dash_in_zip=no_dash_in_zip
        )
    }


# To run: uvicorn ryandata_address_synth.api:app --host 0.0.0.0 --port 8000
