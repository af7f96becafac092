from typing import Callable, Dict, List

from .adb import Adb
from .config import Settings
from .presenter import format_memory_report, format_report
from .report import collect_device_info, fetch_meminfo
from .ui_strings import INFORMATION_MENU_LINES, PACKAGE_FILTER_MENU_LINES


def confirm(prompt: str) -> bool:
    answer = input(f"{prompt} [y/N]: ").strip().lower()
    return answer in ("y", "yes")


def _print_menu(lines: List[str]) -> None:
    for line in lines:
        print(line)


def show_general_info(adb: Adb, serial: str, settings: Settings) -> None:
    print(format_report(collect_device_info(adb, serial), settings), end="")


def show_memory_info(adb: Adb, serial: str, settings: Settings) -> None:
    print(format_memory_report(fetch_meminfo(adb, serial), settings), end="")


def reboot_device(adb: Adb, serial: str) -> None:
    if not confirm(f"Reboot {serial} now?"):
        return
    print("Rebooting device...")
    result = adb.reboot(serial)
    if not result.ok:
        print(f"Error rebooting device: {result.error}")
        return
    print("Device is rebooting. Please wait...")


def start_application(adb: Adb, serial: str) -> None:
    package = input("Enter the package name of the application to start: ").strip()
    if not package:
        print("Package name is required.")
        return
    activity = input("Activity (optional, e.g. .MainActivity): ").strip()
    result = adb.launch_app(serial, package, activity)
    if not result.ok:
        print(f"Error starting application: {result.error}")
        if result.output.strip():
            print(result.output.strip())
        return
    print(f"Application {package} started successfully.")


def list_installed_apps(adb: Adb, serial: str) -> None:
    _print_menu(PACKAGE_FILTER_MENU_LINES)
    third_party = input("> ").strip() == "1"
    result = adb.list_packages(serial, third_party=third_party)
    if not result.ok:
        print(f"Error listing installed applications: {result.error}")
        return
    packages = [ln.strip().replace("package:", "", 1) for ln in result.output.splitlines() if ln.strip()]
    print("Installed Applications:")
    if not packages:
        print("(no packages found)")
    for package in packages:
        print(package)


def show_information_menu(adb: Adb, serial: str, settings: Settings) -> None:
    handlers: Dict[str, Callable[[], None]] = {
        "1": lambda: show_general_info(adb, serial, settings),
        "2": lambda: show_memory_info(adb, serial, settings),
        "3": lambda: reboot_device(adb, serial),
        "4": lambda: start_application(adb, serial),
        "5": lambda: list_installed_apps(adb, serial),
    }

    while True:
        print("\nWhat action would you like to perform?")
        _print_menu(INFORMATION_MENU_LINES)
        choice = input(f"Enter your choice (1-{len(INFORMATION_MENU_LINES)}): ").strip()

        if choice == "6":
            print("Exiting. Goodbye!")
            return
        handler = handlers.get(choice)
        if handler is None:
            print("Invalid choice. Please try again.")
            continue
        try:
            handler()
        except KeyboardInterrupt:
            print()
