"""Constants for the Aranet4 BLE client."""

# Advertised service, used as a scan filter
ADVERTISED_SERVICE_UUID = "0000fce0-0000-1000-8000-00805f9b34fb"

# Vendor characteristic carrying the current readings payload
CURRENT_READINGS_UUID = "f0cd3001-95da-4f4b-9ac8-aa55d312af0c"

# Device Information Service characteristics
MANUFACTURER_NAME_UUID = "00002a29-0000-1000-8000-00805f9b34fb"
MODEL_NUMBER_UUID = "00002a24-0000-1000-8000-00805f9b34fb"
SERIAL_NUMBER_UUID = "00002a25-0000-1000-8000-00805f9b34fb"
HARDWARE_REVISION_UUID = "00002a27-0000-1000-8000-00805f9b34fb"
FIRMWARE_REVISION_UUID = "00002a26-0000-1000-8000-00805f9b34fb"
SOFTWARE_REVISION_UUID = "00002a28-0000-1000-8000-00805f9b34fb"

# Characteristic UUID -> identity field name
IDENTITY_CHARACTERISTICS: dict[str, str] = {
    MANUFACTURER_NAME_UUID: "manufacturer_name",
    MODEL_NUMBER_UUID: "model_number",
    SERIAL_NUMBER_UUID: "serial_number",
    HARDWARE_REVISION_UUID: "hardware_revision",
    FIRMWARE_REVISION_UUID: "firmware_revision",
    SOFTWARE_REVISION_UUID: "software_revision",
}

# The device pads these two values with trailing NUL bytes
NUL_PADDED_FIELDS = frozenset({"manufacturer_name", "model_number"})

# Discovery
DEVICE_NAME_PREFIX = "Aranet4"
SEARCH_TIMEOUT = 10.0
SEARCH_POLL_INTERVAL = 1.0

# Size of the current readings payload in bytes
MEASUREMENT_LENGTH = 13
