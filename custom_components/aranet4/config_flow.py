"""Config flow for Aranet4."""

from __future__ import annotations

import logging
from typing import Any

from aranet4_ble.const import DEVICE_NAME_PREFIX

from homeassistant.components import bluetooth
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_NAME
from homeassistant.helpers.device_registry import format_mac

from .const import DEFAULT_NAME, DOMAIN

_LOGGER = logging.getLogger(__name__)


class Aranet4ConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Aranet4.

    The client connects to the first advertising Aranet4, so only one entry
    is allowed.
    """

    VERSION = 1

    def __init__(self) -> None:
        """Initialize the config flow."""
        self._discovery_info: bluetooth.BluetoothServiceInfoBleak | None = None

    async def async_step_bluetooth(
        self, discovery_info: bluetooth.BluetoothServiceInfoBleak
    ) -> ConfigFlowResult:
        """Handle the Bluetooth discovery step."""
        _LOGGER.debug(
            "Bluetooth discovery triggered for Aranet4 device: %s (%s)",
            discovery_info.name,
            discovery_info.address,
        )
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()

        self._discovery_info = discovery_info
        return await self.async_step_confirm()

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle a flow started by the user."""
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()

        for discovery_info in bluetooth.async_discovered_service_info(
            self.hass, connectable=True
        ):
            if discovery_info.name and discovery_info.name.startswith(
                DEVICE_NAME_PREFIX
            ):
                self._discovery_info = discovery_info
                return await self.async_step_confirm()

        _LOGGER.debug("No advertising Aranet4 device found")
        return self.async_abort(reason="no_devices_found")

    async def async_step_confirm(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Confirm the setup."""
        assert self._discovery_info is not None
        name = self._discovery_info.name or DEFAULT_NAME

        if user_input is not None:
            _LOGGER.debug("User confirmed setup for Aranet4 device: %s", name)
            return self.async_create_entry(title=name, data={CONF_NAME: name})

        self._set_confirm_only()
        return self.async_show_form(
            step_id="confirm",
            description_placeholders={
                "name": name,
                "address": format_mac(self._discovery_info.address),
            },
        )
