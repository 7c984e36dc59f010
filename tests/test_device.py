import pytest
from bleak.exc import BleakError

from aranet4_ble import (
    Aranet4Device,
    DeviceTransportError,
    InvalidAttribute,
    MissingAttribute,
    Status,
)
from aranet4_ble.const import (
    CURRENT_READINGS_UUID,
    FIRMWARE_REVISION_UUID,
    MANUFACTURER_NAME_UUID,
    SERIAL_NUMBER_UUID,
)

from conftest import FakeClient, default_values, make_payload


def make_device(client: FakeClient) -> Aranet4Device:
    return Aranet4Device(
        client, client.services.get_characteristic(CURRENT_READINGS_UUID), name="Aranet4 1A2B3"
    )


async def test_read_measurement(fake_client):
    device = make_device(fake_client)

    measurement = await device.read_measurement()

    assert measurement.co2 == 1000
    assert measurement.temperature == 22.0
    assert measurement.pressure == 1013
    assert measurement.status is Status.GREEN
    assert fake_client.connect_calls == 0


async def test_read_measurement_reconnects_stale_connection(fake_client):
    device = make_device(fake_client)
    fake_client.is_connected = False

    measurement = await device.read_measurement()

    assert fake_client.connect_calls == 1
    assert measurement.co2 == 1000


async def test_read_after_disconnect_heals(fake_client):
    device = make_device(fake_client)
    characteristic = device._current_readings

    await device.disconnect()
    assert not device.is_connected

    fake_client.values[CURRENT_READINGS_UUID] = make_payload(co2=1500, status=2)
    measurement = await device.read_measurement()

    assert measurement.co2 == 1500
    assert measurement.status is Status.AMBER
    assert device._current_readings is characteristic


async def test_reconnect_failure_is_wrapped(fake_client):
    device = make_device(fake_client)
    fake_client.is_connected = False
    error = BleakError("Device with address AA:BB:CC:DD:EE:FF was not found")
    fake_client.connect_error = error

    with pytest.raises(DeviceTransportError) as excinfo:
        await device.read_measurement()

    assert excinfo.value.cause is error
    assert excinfo.value.__cause__ is error


async def test_read_failure_is_wrapped_and_handle_reusable(fake_client):
    device = make_device(fake_client)
    fake_client.read_error = BleakError("ATT error")

    with pytest.raises(DeviceTransportError):
        await device.read_measurement()

    fake_client.read_error = None
    assert (await device.read_measurement()).co2 == 1000


async def test_reconnect_when_connected(fake_client):
    device = make_device(fake_client)

    await device.reconnect()

    assert device.is_connected
    assert fake_client.connect_calls == 1


async def test_context_manager_disconnects(fake_client):
    async with make_device(fake_client) as device:
        await device.read_measurement()

    assert fake_client.disconnect_calls == 1
    assert not fake_client.is_connected


async def test_read_identity(fake_client):
    identity = await make_device(fake_client).read_identity()

    assert identity.manufacturer_name == "SAF Tehnika"
    assert identity.model_number == "Aranet4"
    assert identity.serial_number == "123456789"
    assert identity.hardware_revision == "12"
    assert identity.firmware_revision == "v1.4.19"
    assert identity.software_revision == "1.4.19"


async def test_identity_only_strips_padded_fields():
    values = default_values()
    values[MANUFACTURER_NAME_UUID] = b"Acme\x00\x00"
    values[FIRMWARE_REVISION_UUID] = b"1.0\x00"
    client = FakeClient(values)
    client.is_connected = True

    identity = await make_device(client).read_identity()

    assert identity.manufacturer_name == "Acme"
    assert identity.firmware_revision == "1.0\x00"


async def test_identity_reads_only_identity_characteristics(fake_client):
    await make_device(fake_client).read_identity()

    assert CURRENT_READINGS_UUID not in fake_client.reads
    assert len(fake_client.reads) == 6


async def test_identity_missing_serial_number():
    values = default_values()
    del values[SERIAL_NUMBER_UUID]
    client = FakeClient(values)
    client.is_connected = True

    with pytest.raises(MissingAttribute) as excinfo:
        await make_device(client).read_identity()

    assert excinfo.value.field == "serial_number"


async def test_identity_invalid_utf8(fake_client):
    fake_client.values[SERIAL_NUMBER_UUID] = b"\xff\xfe"

    with pytest.raises(InvalidAttribute) as excinfo:
        await make_device(fake_client).read_identity()

    assert excinfo.value.field == "serial_number"
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)


async def test_identity_after_disconnect_is_wrapped(fake_client):
    device = make_device(fake_client)
    await device.disconnect()

    with pytest.raises(DeviceTransportError) as excinfo:
        await device.read_identity()

    assert isinstance(excinfo.value.cause, BleakError)

    await device.reconnect()
    assert (await device.read_identity()).serial_number == "123456789"
