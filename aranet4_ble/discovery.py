"""Discovery and connection of Aranet4 devices."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from bleak import BleakClient, BleakScanner
from bleak.backends.device import BLEDevice
from bleak.exc import BleakBluetoothNotAvailableError, BleakError

from .const import (
    ADVERTISED_SERVICE_UUID,
    CURRENT_READINGS_UUID,
    DEVICE_NAME_PREFIX,
    SEARCH_POLL_INTERVAL,
    SEARCH_TIMEOUT,
)
from .device import Aranet4Device
from .exceptions import (
    AdapterUnavailable,
    CharacteristicNotFound,
    ConnectionTransportError,
    SearchTimeout,
)

_LOGGER = logging.getLogger(__name__)


async def connect(
    *,
    name_prefix: str = DEVICE_NAME_PREFIX,
    timeout: float = SEARCH_TIMEOUT,
    poll_interval: float = SEARCH_POLL_INTERVAL,
    adapter: str | None = None,
    scanner: BleakScanner | None = None,
    client_factory: Callable[[BLEDevice], BleakClient] = BleakClient,
) -> Aranet4Device:
    """Find an Aranet4 device and connect to it.

    The first advertising device whose local name starts with ``name_prefix``
    wins. ``scanner`` and ``client_factory`` let the caller supply its own
    Bluetooth objects, e.g. a shared scanner owned by the application.
    """
    if scanner is None:
        kwargs: dict[str, Any] = {}
        if adapter is not None:
            kwargs["adapter"] = adapter
        scanner = BleakScanner(service_uuids=[ADVERTISED_SERVICE_UUID], **kwargs)

    try:
        await scanner.start()
    except BleakBluetoothNotAvailableError as err:
        raise AdapterUnavailable() from err
    except BleakError as err:
        raise ConnectionTransportError(err) from err
    _LOGGER.debug("Scanning for devices named %s*", name_prefix)

    try:
        ble_device = await asyncio.wait_for(
            _find_device(scanner, name_prefix, poll_interval), timeout=timeout
        )
    except asyncio.TimeoutError as err:
        _LOGGER.debug("No Aranet4 device found within %.1f seconds", timeout)
        raise SearchTimeout(timeout) from err
    finally:
        await _stop_scan(scanner)

    _LOGGER.debug("Found Aranet4 device %s (%s)", ble_device.name, ble_device.address)
    client = client_factory(ble_device)
    try:
        await client.connect()
    except (BleakError, asyncio.TimeoutError) as err:
        raise ConnectionTransportError(err) from err
    _LOGGER.debug("Connected to Aranet4 %s", ble_device.address)

    try:
        current_readings = client.services.get_characteristic(CURRENT_READINGS_UUID)
    except BleakError as err:
        raise ConnectionTransportError(err) from err
    if current_readings is None:
        try:
            await client.disconnect()
        except BleakError as err:
            raise ConnectionTransportError(err) from err
        raise CharacteristicNotFound(CURRENT_READINGS_UUID)

    return Aranet4Device(client, current_readings, name=ble_device.name)


async def _find_device(
    scanner: BleakScanner, name_prefix: str, poll_interval: float
) -> BLEDevice:
    """Poll the scanner until a matching device shows up.

    Never returns on its own if nothing matches; the caller bounds it.
    """
    while True:
        discovered = scanner.discovered_devices_and_advertisement_data
        _LOGGER.debug("Checking %d discovered devices", len(discovered))
        for ble_device, advertisement in discovered.values():
            name = advertisement.local_name
            if name is None:
                continue
            if name.startswith(name_prefix):
                return ble_device
            _LOGGER.debug("Skipping %s (%s)", name, ble_device.address)

        await asyncio.sleep(poll_interval)


async def _stop_scan(scanner: BleakScanner) -> None:
    """Stop scanning; a failure here does not change the search outcome."""
    try:
        await scanner.stop()
    except BleakError as err:
        _LOGGER.warning("Failed to stop scanning: %s", err)
        return
    _LOGGER.debug("Stopped scanning")
