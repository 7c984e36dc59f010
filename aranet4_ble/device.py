"""Handle to a connected Aranet4 device."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from bleak import BleakClient
from bleak.backends.characteristic import BleakGATTCharacteristic
from bleak.exc import BleakError

from .const import IDENTITY_CHARACTERISTICS, NUL_PADDED_FIELDS
from .decoder import Aranet4Measurement, decode_measurement
from .exceptions import DeviceTransportError, InvalidAttribute, MissingAttribute

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Aranet4Identity:
    """Device Information Service values of an Aranet4."""

    manufacturer_name: str
    model_number: str
    serial_number: str
    hardware_revision: str
    firmware_revision: str
    software_revision: str


class Aranet4Device:
    """A connection to an Aranet4 device.

    Created by :func:`aranet4_ble.connect`. The current readings
    characteristic is resolved once at connect time; only the underlying
    connection is torn down and re-established afterwards. A handle must not
    be used from several tasks at the same time.
    """

    def __init__(
        self,
        client: BleakClient,
        current_readings: BleakGATTCharacteristic,
        name: str | None = None,
    ) -> None:
        """Initialize the handle."""
        self._client = client
        self._current_readings = current_readings
        self.name = name

    @property
    def address(self) -> str:
        """Return the Bluetooth address of the device."""
        return self._client.address

    @property
    def is_connected(self) -> bool:
        """Return the connection state reported by the Bluetooth stack."""
        return self._client.is_connected

    async def __aenter__(self) -> Aranet4Device:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    async def read_measurement(self) -> Aranet4Measurement:
        """Read and decode the current readings.

        A stale connection is re-established before reading.
        """
        if not self._client.is_connected:
            _LOGGER.debug("Aranet4 %s is not connected, reconnecting", self.address)
            await self.reconnect()

        data = await self._read(self._current_readings)
        return decode_measurement(data)

    async def read_identity(self) -> Aranet4Identity:
        """Read the six Device Information Service values."""
        try:
            services = self._client.services
        except BleakError as err:
            raise DeviceTransportError(err) from err

        values: dict[str, str] = {}
        for service in services:
            for characteristic in service.characteristics:
                field = IDENTITY_CHARACTERISTICS.get(characteristic.uuid)
                if field is None:
                    continue

                raw = await self._read(characteristic)
                if field in NUL_PADDED_FIELDS:
                    raw = bytes(raw).rstrip(b"\x00")
                try:
                    values[field] = bytes(raw).decode("utf-8")
                except UnicodeDecodeError as err:
                    raise InvalidAttribute(field, err) from err

        for field in IDENTITY_CHARACTERISTICS.values():
            if field not in values:
                raise MissingAttribute(field)

        return Aranet4Identity(**values)

    async def reconnect(self) -> None:
        """Connect again using the same peripheral."""
        try:
            await self._client.connect()
        except (BleakError, asyncio.TimeoutError) as err:
            raise DeviceTransportError(err) from err
        _LOGGER.debug("Connected to Aranet4 %s", self.address)

    async def disconnect(self) -> None:
        """Disconnect; the handle can be reconnected later."""
        try:
            await self._client.disconnect()
        except BleakError as err:
            raise DeviceTransportError(err) from err
        _LOGGER.debug("Disconnected from Aranet4 %s", self.address)

    async def _read(self, characteristic: BleakGATTCharacteristic) -> bytearray:
        try:
            data = await self._client.read_gatt_char(characteristic)
        except (BleakError, asyncio.TimeoutError) as err:
            raise DeviceTransportError(err) from err
        _LOGGER.debug(
            "Read %d bytes from characteristic %s", len(data), characteristic.uuid
        )
        return data
