"""Exceptions raised by the spatial engine's external collaborators."""


class GeoEngineError(Exception):
    """Base exception for the GPS validation and analysis engine."""


class RegionLookupError(GeoEngineError):
    """The region directory could not be queried."""

    def __init__(self, region_code: str, detail: str):
        self.region_code = region_code
        self.detail = detail
        super().__init__(f"Region lookup failed for '{region_code}': {detail}")


class PointSourceError(GeoEngineError):
    """The price point store could not be queried."""

    def __init__(self, detail: str, region_code: str | None = None):
        self.region_code = region_code
        self.detail = detail
        scope = f" for region '{region_code}'" if region_code else ""
        super().__init__(f"Price point lookup failed{scope}: {detail}")
