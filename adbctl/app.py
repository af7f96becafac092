import argparse
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from .adb import Adb
from .config import Settings, load_settings
from .devices import list_devices, select_device
from .errors import AdbCtlError, ConnectivityError
from .menus import show_information_menu, show_memory_info
from .probe import check_connectivity
from .ui_strings import WELCOME_LINE

__version__ = "0.1.0"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adbctl",
        description="Query and control Android / Fire OS devices through adb.",
    )
    parser.add_argument("--memory", action="store_true", help="Show detailed memory information and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    if settings is None:
        settings = load_settings()
    adb = Adb(settings)

    print(WELCOME_LINE)
    serial = select_device(list_devices(adb))

    probe = check_connectivity(adb, serial)
    if not probe.ok:
        raise ConnectivityError(probe.message)
    adb.log_debug(probe.message)

    if args.memory:
        show_memory_info(adb, serial, settings)
        return EXIT_OK

    show_information_menu(adb, serial, settings)
    return EXIT_OK


def run() -> None:
    just_fix_windows_console()
    try:
        code = main()
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted. Exiting.")
        code = EXIT_INTERRUPTED
    except AdbCtlError as e:
        print(f"\nError: {e}")
        code = EXIT_ERROR
    sys.exit(code)
