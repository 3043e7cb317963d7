"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DB_PORT = 3306
DEFAULT_POOL_NAME = "asistencia_pool"
DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_TIMEOUT_SECONDS = 5.0
POOL_POLL_INTERVAL_SECONDS = 0.05

DATE_FORMAT = "%Y-%m-%d"
