"""Constants for the Aranet4 integration."""

DOMAIN = "aranet4"

DEFAULT_NAME = "Aranet4"

# Update interval in seconds
UPDATE_INTERVAL = 60
