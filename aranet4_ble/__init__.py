"""Bluetooth Low Energy client for Aranet4 CO2 monitors."""

from .decoder import Aranet4Measurement, Status, decode_measurement
from .device import Aranet4Device, Aranet4Identity
from .discovery import connect
from .exceptions import (
    AdapterUnavailable,
    Aranet4ConnectionError,
    Aranet4Error,
    CharacteristicNotFound,
    ConnectionTransportError,
    DecodeError,
    DeviceError,
    DeviceTransportError,
    InvalidAttribute,
    MissingAttribute,
    SearchTimeout,
)

__all__ = [
    "AdapterUnavailable",
    "Aranet4ConnectionError",
    "Aranet4Device",
    "Aranet4Error",
    "Aranet4Identity",
    "Aranet4Measurement",
    "CharacteristicNotFound",
    "ConnectionTransportError",
    "DecodeError",
    "DeviceError",
    "DeviceTransportError",
    "InvalidAttribute",
    "MissingAttribute",
    "SearchTimeout",
    "Status",
    "connect",
    "decode_measurement",
]
