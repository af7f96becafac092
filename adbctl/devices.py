from typing import List

from .adb import Adb
from .errors import NoDevicesError

NO_DEVICES_MESSAGE = (
    "No devices connected.\n"
    "Please connect a device using 'adb connect <ip:port>' or ensure USB debugging is enabled.\n"
    "After connecting, run this tool again."
)


def parse_devices(output: str) -> List[str]:
    devices: List[str] = []
    for line in output.splitlines()[1:]:
        line = line.rstrip()
        if not line.strip() or line.endswith("offline"):
            continue
        devices.append(line.split()[0])
    return devices


def list_devices(adb: Adb) -> List[str]:
    result = adb.devices()
    if not result.ok:
        adb.log_debug(f"Error running adb devices: {result.error}")
        return []
    return parse_devices(result.output)


def select_device(devices: List[str]) -> str:
    if not devices:
        raise NoDevicesError(NO_DEVICES_MESSAGE)
    if len(devices) == 1:
        return devices[0]

    print("Multiple devices found. Please select a device:")
    for i, serial in enumerate(devices, start=1):
        print(f"{i}. {serial}")

    while True:
        choice = input("Enter the number of the device you want to use: ").strip()
        if choice.isdecimal() and 1 <= int(choice) <= len(devices):
            return devices[int(choice) - 1]
        print("Invalid selection. Please try again.")
