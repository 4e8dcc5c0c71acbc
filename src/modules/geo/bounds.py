"""Country bounds and implausible-zone checks."""

from collections.abc import Iterable

from src.modules.geo.models import BoundingBox, Coordinate, ImplausibleZone, Plausibility
from src.utils.settings.geo import GeoValidationSettings

PLAUSIBLE_REASON = "Coordinates appear to be in a plausible location"


class BoundsChecker:
    """Tests coordinates against one country rectangle and a list of implausible zones.

    Zones are checked in order and the first match supplies the reason.
    """

    def __init__(
        self,
        country_bounds: BoundingBox,
        implausible_zones: Iterable[ImplausibleZone] = (),
    ):
        self.country_bounds = country_bounds
        self.implausible_zones = tuple(implausible_zones)

    @classmethod
    def from_settings(cls, settings: GeoValidationSettings) -> "BoundsChecker":
        return cls(settings.GEO_COUNTRY_BOUNDS, settings.GEO_IMPLAUSIBLE_ZONES)

    def is_within_country(self, coordinate: Coordinate) -> bool:
        return self.country_bounds.contains(coordinate)

    def check_plausibility(self, coordinate: Coordinate) -> Plausibility:
        for zone in self.implausible_zones:
            if zone.contains(coordinate):
                return Plausibility(plausible=False, reason=zone.reason)
        return Plausibility(plausible=True, reason=PLAUSIBLE_REASON)
