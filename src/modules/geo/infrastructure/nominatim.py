"""Nominatim reverse-geocoding response parsing."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from src.modules.geo.models import Coordinate, GeocodingResult

_KEY_QUANTUM = Decimal("0.0001")  # ~11 m

_ADDRESS_FIELDS = {
    "country": "country",
    "state": "state",
    "county": "county",
    "city": "city",
    "town": "town",
    "village": "village",
    "hamlet": "hamlet",
    "suburb": "suburb",
    "road": "road",
    "house_number": "house_number",
    "postcode": "postcode",
}


def cache_key(coordinate: Coordinate) -> str:
    """Bucket a coordinate to 4 decimal places (half-up) on each axis."""
    lat = Decimal(str(coordinate.latitude)).quantize(_KEY_QUANTUM, ROUND_HALF_UP)
    lng = Decimal(str(coordinate.longitude)).quantize(_KEY_QUANTUM, ROUND_HALF_UP)
    return f"{lat},{lng}"


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def format_address(
    house_number: str | None = None,
    road: str | None = None,
    city: str | None = None,
    town: str | None = None,
    village: str | None = None,
    hamlet: str | None = None,
    county: str | None = None,
    state: str | None = None,
    country: str | None = None,
    display_name: str | None = None,
) -> str | None:
    """
    "<house number> <road>, <locality>, <county>, <state>, <country>".

    The locality is the first of city, town, village, hamlet. Falls back to
    ``display_name`` when every component is empty.
    """
    parts = []
    if road:
        parts.append(f"{house_number} {road}" if house_number else road)

    locality = city or town or village or hamlet
    for component in (locality, county, state, country):
        if component:
            parts.append(component)

    return ", ".join(parts) if parts else display_name


def parse_result(result: dict[str, Any], coordinate: Coordinate) -> GeocodingResult:
    """Build a GeocodingResult from a single Nominatim place object."""
    address = result.get("address") or {}
    if not isinstance(address, dict):
        raise ValueError("'address' is not an object")

    fields = {
        attr: _text(address.get(key)) for key, attr in _ADDRESS_FIELDS.items()
    }
    display_name = _text(result.get("display_name"))
    importance = result.get("importance")

    return GeocodingResult(
        coordinate=coordinate,
        success=True,
        display_name=display_name,
        formatted_address=format_address(
            house_number=fields["house_number"],
            road=fields["road"],
            city=fields["city"],
            town=fields["town"],
            village=fields["village"],
            hamlet=fields["hamlet"],
            county=fields["county"],
            state=fields["state"],
            country=fields["country"],
            display_name=display_name,
        ),
        place_type=_text(result.get("type")),
        place_class=_text(result.get("class")),
        importance=float(importance) if importance is not None else None,
        **fields,
    )


def parse_response(payload: Any, coordinate: Coordinate) -> GeocodingResult:
    """
    Parse a decoded Nominatim response: an object, or an array whose first
    element is used. An object with an ``error`` key is a provider-side miss.
    """
    if isinstance(payload, list):
        if not payload:
            return GeocodingResult.failure(coordinate, "No geocoding results found")
        payload = payload[0]

    if not isinstance(payload, dict):
        return GeocodingResult.failure(coordinate, "No geocoding results found")

    if "error" in payload:
        return GeocodingResult.failure(coordinate, str(payload["error"]))

    return parse_result(payload, coordinate)
