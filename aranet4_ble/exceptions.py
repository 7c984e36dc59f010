"""Exceptions raised by the Aranet4 BLE client.

Two families are kept apart. An ``Aranet4ConnectionError`` ends a connect
attempt and discovery has to start again. A ``DeviceError`` only fails the
operation that raised it; the device handle stays usable.
"""

from __future__ import annotations


class Aranet4Error(Exception):
    """Base class for all Aranet4 client errors."""


class Aranet4ConnectionError(Aranet4Error):
    """Finding or connecting to a device failed."""


class AdapterUnavailable(Aranet4ConnectionError):
    """No usable Bluetooth adapter."""

    def __init__(self) -> None:
        super().__init__("Failed to find a Bluetooth adapter")


class SearchTimeout(Aranet4ConnectionError):
    """No matching device was seen before the search timed out."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Failed to find an Aranet4 device within {timeout:g} seconds")
        self.timeout = timeout


class CharacteristicNotFound(Aranet4ConnectionError):
    """The connected device does not expose a required characteristic."""

    def __init__(self, uuid: str) -> None:
        super().__init__(f"The characteristic {uuid} was not found")
        self.uuid = uuid


class ConnectionTransportError(Aranet4ConnectionError):
    """The Bluetooth stack failed while connecting."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Bluetooth error while connecting: {cause}")
        self.cause = cause


class DeviceError(Aranet4Error):
    """An operation on a connected device failed."""


class MissingAttribute(DeviceError):
    """An identity characteristic is not exposed by the device."""

    def __init__(self, field: str) -> None:
        super().__init__(f"The device does not expose {field}")
        self.field = field


class InvalidAttribute(DeviceError):
    """An identity characteristic holds a value that is not valid UTF-8."""

    def __init__(self, field: str, cause: BaseException) -> None:
        super().__init__(f"Invalid value for {field}: {cause}")
        self.field = field
        self.cause = cause


class DecodeError(DeviceError):
    """A measurement payload is truncated or malformed."""


class DeviceTransportError(DeviceError):
    """The Bluetooth stack failed during a device operation."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Bluetooth error: {cause}")
        self.cause = cause
