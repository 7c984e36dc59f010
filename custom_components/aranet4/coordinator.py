"""Coordinator for Aranet4."""

from __future__ import annotations

import logging
from datetime import timedelta

from aranet4_ble import (
    Aranet4ConnectionError,
    Aranet4Device,
    Aranet4Identity,
    Aranet4Measurement,
    DeviceError,
    connect,
)

from homeassistant.components import bluetooth
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .const import DOMAIN, UPDATE_INTERVAL

_LOGGER = logging.getLogger(__name__)

type Aranet4ConfigEntry = ConfigEntry[Aranet4DataUpdateCoordinator]


class Aranet4DataUpdateCoordinator(DataUpdateCoordinator[Aranet4Measurement]):
    """Class to manage polling an Aranet4 device."""

    def __init__(
        self,
        hass: HomeAssistant,
        logger: logging.Logger,
        entry: Aranet4ConfigEntry,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass=hass,
            logger=logger,
            config_entry=entry,
            name=DOMAIN,
            update_interval=timedelta(seconds=UPDATE_INTERVAL),
        )
        self.device: Aranet4Device | None = None
        self.identity: Aranet4Identity | None = None

    async def _async_update_data(self) -> Aranet4Measurement:
        """Poll the device."""
        if self.device is None:
            _LOGGER.debug("No Aranet4 handle held, starting discovery")
            try:
                self.device = await connect(
                    scanner=bluetooth.async_get_scanner(self.hass)
                )
            except Aranet4ConnectionError as err:
                error_msg = f"Could not connect to an Aranet4 device: {err}"
                _LOGGER.warning(error_msg)
                raise UpdateFailed(error_msg) from err

        device = self.device
        try:
            if self.identity is None:
                self.identity = await device.read_identity()
                _LOGGER.debug("Aranet4 identity: %s", self.identity)
            measurement = await device.read_measurement()
        except DeviceError as err:
            error_msg = f"Error reading Aranet4 device at {device.address}: {err}"
            _LOGGER.warning(error_msg)
            raise UpdateFailed(error_msg) from err
        finally:
            await self._async_release(device)

        _LOGGER.debug("Returning data from Aranet4 device: %s", measurement)
        return measurement

    async def async_shutdown(self) -> None:
        """Disconnect from the device on shutdown."""
        await super().async_shutdown()
        if self.device is not None:
            await self._async_release(self.device)

    async def _async_release(self, device: Aranet4Device) -> None:
        """Drop the connection between polls; the next read reconnects."""
        if not device.is_connected:
            return
        try:
            await device.disconnect()
        except DeviceError as err:
            _LOGGER.warning(
                "Failed to disconnect from Aranet4 device at %s: %s",
                device.address,
                err,
            )
