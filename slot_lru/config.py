"""Configuration and constants for the slot-lru project."""

# Store defaults
DEFAULT_CAPACITY = 128

# Environment
CAPACITY_ENV_KEY = "SLOT_LRU_CAPACITY"
LOG_LEVEL_ENV_KEY = "SLOT_LRU_LOG_LEVEL"


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
