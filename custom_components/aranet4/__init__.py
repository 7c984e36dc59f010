"""The Aranet4 integration."""

from __future__ import annotations

import logging

from homeassistant.const import Platform
from homeassistant.core import HomeAssistant

from .coordinator import Aranet4ConfigEntry, Aranet4DataUpdateCoordinator

PLATFORMS = [Platform.SENSOR]

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: Aranet4ConfigEntry) -> bool:
    """Set up Aranet4 from a config entry."""
    _LOGGER.debug("Setting up Aranet4 entry: %s", entry.entry_id)
    coordinator = Aranet4DataUpdateCoordinator(hass, _LOGGER, entry)
    await coordinator.async_config_entry_first_refresh()
    entry.runtime_data = coordinator

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: Aranet4ConfigEntry) -> bool:
    """Unload a config entry."""
    _LOGGER.debug("Unloading Aranet4 entry: %s", entry.entry_id)
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        await entry.runtime_data.async_shutdown()
    return unload_ok
