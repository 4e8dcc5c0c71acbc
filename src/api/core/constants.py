API_VERSION_HEADER = "X-PriceGeo-Version"
REQUEST_ID_HEADER = "X-Request-ID"

# Paths excluded from request logging
SKIP_LOGGING_PATHS = {
    "/health",
    "/health/",
    "/health/liveness",
}

# Nearby search parameters
DEFAULT_NEARBY_RADIUS_KM = 10.0
MAX_NEARBY_RADIUS_KM = 500.0
DEFAULT_NEARBY_MAX_RESULTS = 20
MAX_NEARBY_MAX_RESULTS = 200
