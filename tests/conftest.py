"""Fake Bluetooth objects standing in for bleak."""

from __future__ import annotations

import struct
from types import SimpleNamespace

import pytest
from bleak.exc import BleakError

from aranet4_ble.const import (
    CURRENT_READINGS_UUID,
    FIRMWARE_REVISION_UUID,
    HARDWARE_REVISION_UUID,
    MANUFACTURER_NAME_UUID,
    MODEL_NUMBER_UUID,
    SERIAL_NUMBER_UUID,
    SOFTWARE_REVISION_UUID,
)

GENERIC_ACCESS_NAME_UUID = "00002a00-0000-1000-8000-00805f9b34fb"


def make_payload(
    co2=1000,
    temperature=440,
    pressure=10132,
    humidity=45,
    battery=90,
    status=1,
    interval=60,
    since_last_update=5,
) -> bytes:
    return struct.pack(
        "<HHHBBBHH",
        co2,
        temperature,
        pressure,
        humidity,
        battery,
        status,
        interval,
        since_last_update,
    )


def default_values() -> dict[str, bytes]:
    return {
        CURRENT_READINGS_UUID: make_payload(),
        GENERIC_ACCESS_NAME_UUID: b"Aranet4 1A2B3",
        MANUFACTURER_NAME_UUID: b"SAF Tehnika\x00\x00",
        MODEL_NUMBER_UUID: b"Aranet4\x00",
        SERIAL_NUMBER_UUID: b"123456789",
        HARDWARE_REVISION_UUID: b"12",
        FIRMWARE_REVISION_UUID: b"v1.4.19",
        SOFTWARE_REVISION_UUID: b"1.4.19",
    }


class FakeCharacteristic:
    def __init__(self, uuid: str) -> None:
        self.uuid = uuid


class FakeService:
    def __init__(self, characteristics: list[FakeCharacteristic]) -> None:
        self.characteristics = characteristics


class FakeServices:
    def __init__(self, uuids) -> None:
        self._characteristics = {uuid: FakeCharacteristic(uuid) for uuid in uuids}
        # two services, like GAP + device specific ones on real hardware
        chars = list(self._characteristics.values())
        self._services = [FakeService(chars[:2]), FakeService(chars[2:])]

    def __iter__(self):
        return iter(self._services)

    def get_characteristic(self, uuid: str):
        return self._characteristics.get(uuid)


class FakeClient:
    """Behaves like a connected BleakClient."""

    def __init__(self, values: dict[str, bytes], address="AA:BB:CC:DD:EE:FF") -> None:
        self.address = address
        self.values = values
        self._services = FakeServices(values)
        self.is_connected = False
        self.connect_calls = 0
        self.disconnect_calls = 0
        self.reads: list[str] = []
        self.connect_error: Exception | None = None
        self.read_error: Exception | None = None

    @property
    def services(self) -> FakeServices:
        # bleak drops the service collection while disconnected
        if not self.is_connected:
            raise BleakError("Service Discovery has not been performed yet")
        return self._services

    async def connect(self) -> None:
        self.connect_calls += 1
        if self.connect_error is not None:
            raise self.connect_error
        self.is_connected = True

    async def disconnect(self) -> None:
        self.disconnect_calls += 1
        self.is_connected = False

    async def read_gatt_char(self, characteristic) -> bytearray:
        if not self.is_connected:
            raise BleakError("Not connected")
        if self.read_error is not None:
            raise self.read_error
        self.reads.append(characteristic.uuid)
        return bytearray(self.values[characteristic.uuid])


def advertisement(address: str, local_name: str | None):
    ble_device = SimpleNamespace(address=address, name=local_name)
    return ble_device, SimpleNamespace(local_name=local_name)


class FakeScanner:
    """Scanner whose discovered devices appear over successive polls."""

    def __init__(
        self,
        rounds=None,
        start_error: Exception | None = None,
        stop_error: Exception | None = None,
    ) -> None:
        self._rounds = list(rounds or [])
        self.start_error = start_error
        self.stop_error = stop_error
        self.started = False
        self.stopped = False
        self.polls = 0

    async def start(self) -> None:
        if self.start_error is not None:
            raise self.start_error
        self.started = True

    async def stop(self) -> None:
        self.stopped = True
        if self.stop_error is not None:
            raise self.stop_error

    @property
    def discovered_devices_and_advertisement_data(self):
        self.polls += 1
        if not self._rounds:
            return {}
        current = self._rounds[0]
        if len(self._rounds) > 1:
            self._rounds.pop(0)
        return {ble_device.address: (ble_device, adv) for ble_device, adv in current}


@pytest.fixture
def fake_client() -> FakeClient:
    client = FakeClient(default_values())
    client.is_connected = True
    return client
