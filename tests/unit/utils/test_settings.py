"""Tests for the GPS and geocoding settings."""

import pytest
from pydantic import ValidationError

from src.utils.settings.geo import DEFAULT_COUNTRY_BOUNDS, GeoValidationSettings
from src.utils.settings.geocoding import GeocodingSettings


def test_geo_defaults():
    settings = GeoValidationSettings()

    assert settings.GEO_COUNTRY_BOUNDS == DEFAULT_COUNTRY_BOUNDS
    assert settings.GEO_ACCURACY_THRESHOLDS == (10.0, 25.0, 50.0, 100.0)
    assert settings.GEO_REGION_CONSISTENCY_THRESHOLD_M == 50_000.0
    assert settings.GEO_CLUSTER_RADIUS_M == 1_000.0
    assert settings.GEO_CLUSTER_MODE == "seed"
    assert len(settings.GEO_IMPLAUSIBLE_ZONES) == 5


def test_geo_env_override(monkeypatch):
    monkeypatch.setenv("GEO_CLUSTER_RADIUS_M", "250")
    monkeypatch.setenv("GEO_CLUSTER_MODE", "connected")

    settings = GeoValidationSettings()

    assert settings.GEO_CLUSTER_RADIUS_M == 250.0
    assert settings.GEO_CLUSTER_MODE == "connected"


@pytest.mark.parametrize(
    "thresholds",
    [(10, 10, 50, 100), (25, 10, 50, 100), (0, 25, 50, 100)],
)
def test_accuracy_thresholds_validated(thresholds):
    with pytest.raises(ValidationError):
        GeoValidationSettings(GEO_ACCURACY_THRESHOLDS=thresholds)


def test_unknown_cluster_mode_rejected():
    with pytest.raises(ValidationError):
        GeoValidationSettings(GEO_CLUSTER_MODE="dbscan")


def test_geocoding_defaults():
    settings = GeocodingSettings()

    assert settings.GEOCODING_ENDPOINT == "https://nominatim.openstreetmap.org/reverse"
    assert settings.GEOCODING_CACHE_CAPACITY == 1000
    assert settings.GEOCODING_TIMEOUT_SECONDS == 10.0


def test_geocoding_env_override(monkeypatch):
    monkeypatch.setenv("GEOCODING_ENABLED", "false")
    monkeypatch.setenv("GEOCODING_CACHE_CAPACITY", "5")

    settings = GeocodingSettings()

    assert settings.GEOCODING_ENABLED is False
    assert settings.GEOCODING_CACHE_CAPACITY == 5


@pytest.mark.parametrize("capacity", [0, -3])
def test_cache_capacity_must_be_positive(capacity):
    with pytest.raises(ValidationError):
        GeocodingSettings(GEOCODING_CACHE_CAPACITY=capacity)
