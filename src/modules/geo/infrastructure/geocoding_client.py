"""Client for the reverse-geocoding provider (Nominatim)."""

import asyncio
from typing import Any

import aiohttp

from src.cache import LRUCache
from src.modules.geo.infrastructure.nominatim import cache_key, parse_response
from src.modules.geo.models import Coordinate, GeocodingResult
from src.utils.logger import get_logger
from src.utils.settings.geocoding import GeocodingSettings

logger = get_logger(__name__)


class GeocodingClient:
    """
    Reverse-geocodes coordinates through an HTTP provider.

    Successful results are kept in a bounded LRU cache keyed on the
    coordinate rounded to 4 decimal places. Failures are never cached so a
    transient outage does not stick.
    """

    def __init__(
        self,
        settings: GeocodingSettings | None = None,
        cache: LRUCache[str, GeocodingResult] | None = None,
    ):
        self.settings = settings or GeocodingSettings()
        if cache is None and self.settings.GEOCODING_CACHE_ENABLED:
            cache = LRUCache(self.settings.GEOCODING_CACHE_CAPACITY)
        self.cache = cache
        self.timeout = aiohttp.ClientTimeout(
            total=self.settings.GEOCODING_TIMEOUT_SECONDS
        )
        self.headers = {"User-Agent": self.settings.GEOCODING_USER_AGENT}

    @property
    def enabled(self) -> bool:
        return self.settings.GEOCODING_ENABLED

    def build_params(self, coordinate: Coordinate) -> dict[str, Any]:
        params = {
            "lat": str(coordinate.latitude),
            "lon": str(coordinate.longitude),
            "format": "json",
            "addressdetails": 1,
            "accept-language": self.settings.GEOCODING_ACCEPT_LANGUAGE,
            "zoom": self.settings.GEOCODING_ZOOM,
        }
        if self.settings.GEOCODING_CONTACT_EMAIL:
            params["email"] = self.settings.GEOCODING_CONTACT_EMAIL
        return params

    async def reverse_geocode(self, coordinate: Coordinate | None) -> GeocodingResult:
        """Address for a coordinate. Never raises on provider errors."""
        if not self.enabled:
            return GeocodingResult.disabled_result(coordinate)
        if coordinate is None:
            return GeocodingResult.failure(None, "Coordinates are required")

        key = cache_key(coordinate)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Geocoding cache hit", key=key)
                return cached

        try:
            payload = await self._fetch(self.build_params(coordinate))
            result = parse_response(payload, coordinate)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(
                "Geocoding request failed",
                latitude=coordinate.latitude,
                longitude=coordinate.longitude,
                error=str(e),
            )
            return GeocodingResult.failure(
                coordinate, f"Geocoding service unavailable: {e}"
            )
        except (ValueError, TypeError, KeyError) as e:
            logger.error(
                "Unparseable geocoding response",
                latitude=coordinate.latitude,
                longitude=coordinate.longitude,
                error=str(e),
            )
            return GeocodingResult.failure(
                coordinate, "Error parsing geocoding response"
            )

        if result.success and self.cache is not None:
            self.cache.put(key, result)
        elif not result.success:
            logger.info(
                "Geocoding returned no result", key=key, reason=result.error_message
            )
        return result

    async def _fetch(self, params: dict[str, Any]) -> Any:
        async with aiohttp.ClientSession(
            headers=self.headers, timeout=self.timeout
        ) as session:
            async with session.get(
                self.settings.GEOCODING_ENDPOINT, params=params
            ) as response:
                response.raise_for_status()
                return await response.json(content_type=None)

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()
            logger.info("Geocoding cache cleared")

    def cache_stats(self) -> dict[str, Any]:
        if self.cache is None:
            return {"size": 0, "max_size": 0, "enabled": False}
        stats = self.cache.stats()
        return {
            "size": stats["size"],
            "max_size": stats["max_size"],
            "enabled": True,
        }
