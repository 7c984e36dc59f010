"""Decoder for the Aranet4 current readings payload."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum

from .const import MEASUREMENT_LENGTH
from .exceptions import DecodeError

_LOGGER = logging.getLogger(__name__)


class Status(IntEnum):
    """CO2 concentration status, as displayed by the device."""

    GREEN = 1
    AMBER = 2
    RED = 3


@dataclass(frozen=True)
class Aranet4Measurement:
    """One snapshot of the current readings."""

    co2: int
    status: Status
    battery: int
    humidity: int
    pressure: int
    temperature: float
    interval: timedelta
    since_last_update: timedelta


def decode_measurement(data: bytes | bytearray) -> Aranet4Measurement:
    """Decode the little-endian current readings payload.

    Layout: co2 u16, temperature u16 (1/20 °C), pressure u16 (1/10 hPa),
    humidity u8, battery u8, status u8, interval u16 (s), age u16 (s).
    """
    if len(data) < MEASUREMENT_LENGTH:
        raise DecodeError(
            f"Current readings payload too short: expected {MEASUREMENT_LENGTH} bytes, "
            f"got {len(data)}"
        )

    def get_u16_le(offset: int) -> int:
        return int.from_bytes(data[offset : offset + 2], "little")

    raw_status = data[8]
    try:
        status = Status(raw_status)
    except ValueError as err:
        raise DecodeError(f"Invalid status value: {raw_status}") from err

    measurement = Aranet4Measurement(
        co2=get_u16_le(0),
        temperature=get_u16_le(2) / 20.0,
        pressure=get_u16_le(4) // 10,
        humidity=data[6],
        battery=data[7],
        status=status,
        interval=timedelta(seconds=get_u16_le(9)),
        since_last_update=timedelta(seconds=get_u16_le(11)),
    )
    _LOGGER.debug(
        "Decoded Aranet4 data: CO2=%d ppm, temperature=%.2f°C, humidity=%d%%, pressure=%d hPa, battery=%d%%, status=%s",
        measurement.co2,
        measurement.temperature,
        measurement.humidity,
        measurement.pressure,
        measurement.battery,
        measurement.status.name,
    )
    return measurement
