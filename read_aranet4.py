import argparse
import asyncio
import logging
from pathlib import Path

from aranet4_ble import Aranet4Error, connect

_LOGGER = logging.getLogger(__name__)


async def read_once(output: Path | None) -> int:
    print("🔍 Scanning for Aranet4 ...")
    try:
        device = await connect()
    except Aranet4Error as err:
        print(f"❌ {err}")
        return 1
    print(f"🔗 Connected to {device.name} ({device.address})")

    async with device:
        try:
            info = await device.read_identity()
            measurements = await device.read_measurement()
        except Aranet4Error as err:
            print(f"❌ {err}")
            return 1

    print(f"{info.manufacturer_name} {info.model_number} (serial {info.serial_number})")
    print(f"  hardware {info.hardware_revision}, firmware {info.firmware_revision}, software {info.software_revision}")
    print(f"  CO₂:         {measurements.co2} ppm ({measurements.status.name})")
    print(f"  Temperature: {measurements.temperature:.2f} °C")
    print(f"  Humidity:    {measurements.humidity} %")
    print(f"  Pressure:    {measurements.pressure} hPa")
    print(f"  Battery:     {measurements.battery} %")
    print(f"  Updated {int(measurements.since_last_update.total_seconds())} s ago, every {int(measurements.interval.total_seconds())} s")

    if output is not None:
        lines = [
            info.manufacturer_name,
            info.model_number,
            info.serial_number,
            info.hardware_revision,
            info.firmware_revision,
            measurements.temperature,
            measurements.humidity,
            measurements.co2,
            measurements.pressure,
            measurements.battery,
        ]
        output.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        _LOGGER.debug("Wrote readings to %s", output)
    return 0

# ------------------- Main -------------------

if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Read an Aranet4 CO2 monitor once")
    ap.add_argument("-o", "--output", type=Path, help="also write the readings to this file")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    raise SystemExit(asyncio.run(read_once(args.output)))
