WELCOME_LINE = "Welcome to adbctl - Your Android Device Management Companion"

INFORMATION_MENU_LINES = [
    "1. Show General Device Information",
    "2. Show Detailed Memory Information",
    "3. Reboot Device",
    "4. Start Application",
    "5. List Installed Applications",
    "6. Exit",
]

PACKAGE_FILTER_MENU_LINES = [
    "1) Third-party packages only",
    "2) All packages",
]
