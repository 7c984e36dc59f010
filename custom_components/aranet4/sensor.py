"""Sensor platform for Aranet4."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from aranet4_ble import Aranet4Measurement, Status

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.const import (
    CONCENTRATION_PARTS_PER_MILLION,
    PERCENTAGE,
    UnitOfPressure,
    UnitOfTemperature,
    UnitOfTime,
)
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback
from homeassistant.helpers.typing import StateType
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DEFAULT_NAME, DOMAIN
from .coordinator import Aranet4ConfigEntry, Aranet4DataUpdateCoordinator

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Aranet4SensorEntityDescription(SensorEntityDescription):
    """Describes Aranet4 sensor entity."""

    value_fn: Callable[[Aranet4Measurement], StateType]


SENSORS: tuple[Aranet4SensorEntityDescription, ...] = (
    Aranet4SensorEntityDescription(
        key="co2",
        name="CO₂",
        device_class=SensorDeviceClass.CO2,
        native_unit_of_measurement=CONCENTRATION_PARTS_PER_MILLION,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda data: data.co2,
    ),
    Aranet4SensorEntityDescription(
        key="temperature",
        name="Temperature",
        device_class=SensorDeviceClass.TEMPERATURE,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda data: data.temperature,
    ),
    Aranet4SensorEntityDescription(
        key="humidity",
        name="Humidity",
        device_class=SensorDeviceClass.HUMIDITY,
        native_unit_of_measurement=PERCENTAGE,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda data: data.humidity,
    ),
    Aranet4SensorEntityDescription(
        key="pressure",
        name="Pressure",
        device_class=SensorDeviceClass.ATMOSPHERIC_PRESSURE,
        native_unit_of_measurement=UnitOfPressure.HPA,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda data: data.pressure,
    ),
    Aranet4SensorEntityDescription(
        key="battery",
        name="Battery",
        device_class=SensorDeviceClass.BATTERY,
        native_unit_of_measurement=PERCENTAGE,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda data: data.battery,
    ),
    Aranet4SensorEntityDescription(
        key="status",
        name="Status",
        device_class=SensorDeviceClass.ENUM,
        options=[status.name.lower() for status in Status],
        value_fn=lambda data: data.status.name.lower(),
    ),
    Aranet4SensorEntityDescription(
        key="interval",
        name="Measurement Interval",
        device_class=SensorDeviceClass.DURATION,
        native_unit_of_measurement=UnitOfTime.SECONDS,
        value_fn=lambda data: int(data.interval.total_seconds()),
    ),
    Aranet4SensorEntityDescription(
        key="since_last_update",
        name="Reading Age",
        device_class=SensorDeviceClass.DURATION,
        native_unit_of_measurement=UnitOfTime.SECONDS,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda data: int(data.since_last_update.total_seconds()),
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: Aranet4ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the Aranet4 sensors."""
    coordinator = entry.runtime_data

    sensors = [Aranet4Sensor(coordinator, description) for description in SENSORS]
    _LOGGER.debug("Created %d Aranet4 sensor entities", len(sensors))
    async_add_entities(sensors)


class Aranet4Sensor(CoordinatorEntity[Aranet4DataUpdateCoordinator], SensorEntity):
    """Representation of an Aranet4 sensor."""

    entity_description: Aranet4SensorEntityDescription
    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: Aranet4DataUpdateCoordinator,
        description: Aranet4SensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        assert coordinator.device is not None
        self.entity_description = description
        address = coordinator.device.address
        self._attr_unique_id = f"{address}_{description.key}"

        identity = coordinator.identity
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, address)},
            name=coordinator.device.name or DEFAULT_NAME,
            manufacturer=identity.manufacturer_name if identity else None,
            model=identity.model_number if identity else None,
            serial_number=identity.serial_number if identity else None,
            hw_version=identity.hardware_revision if identity else None,
            sw_version=identity.firmware_revision if identity else None,
        )

    @property
    def native_value(self) -> StateType:
        """Return the native value of the sensor."""
        return self.entity_description.value_fn(self.coordinator.data)
