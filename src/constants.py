"""Application constants - centralized configuration values."""

APP_VERSION = "0.1.0"

# =============================================================================
# Persisted configuration
# =============================================================================
CONFIG_PRIMARY_PATH = "/app/data/config.json"  # Docker volume
CONFIG_FALLBACK_PATH = "config.json"

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
API_TIMEOUT_EXTERNAL = 15.0

# =============================================================================
# Jellyfin
# =============================================================================
JELLYFIN_AUTH_HEADER = "X-Emby-Token"
JELLYFIN_ITEM_TYPE_MOVIE = "Movie"
JELLYFIN_COLLECTION_MOVIES = "movies"
JELLYFIN_MOVIE_FIELDS = "ProductionYear,RunTimeTicks,CommunityRating,Overview"
MAX_MOVIES_PER_LIBRARY = 1000

# Runtime ticks (1 tick = 100 nanoseconds)
TICKS_PER_SECOND = 10_000_000
SECONDS_PER_MINUTE = 60

# =============================================================================
# HTTP
# =============================================================================
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}
