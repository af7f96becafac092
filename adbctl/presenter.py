import re
from typing import Dict, List, Sequence, Tuple

from colorama import Fore, Style

from .config import Settings
from .lookups import icon_for
from .parsers import format_size, is_sentinel, parse_meminfo
from .report import DeviceInfo

REPORT_WIDTH = 70
MEMORY_RULE_WIDTH = 30

GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "Device",
        (
            "Model",
            "Manufacturer",
            "Android Version",
            "API Level",
            "Build Number",
            "Fire OS Version",
            "Fire OS Build Number",
            "IP Address",
            "WiFi SSID",
        ),
    ),
    ("Hardware", ("CPU", "CPU ABI", "Memory", "Storage")),
    ("Display", ("Screen Resolution", "Screen Density")),
    ("Other", ("Battery Level",)),
)
FALLBACK_GROUP = "Other"

HIGHLIGHTED_MEMORY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("MemTotal", "Total RAM"),
    ("MemAvailable", "Available RAM"),
    ("MemFree", "Free RAM"),
    ("SwapTotal", "Total Swap"),
    ("SwapFree", "Free Swap"),
)

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
VALUE_INDENT = " " * len(f"{'':<3} {'':<20} : ")


def _paint(text: str, style: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{style}{text}{Style.RESET_ALL}"


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def _group_of(label: str) -> str:
    for name, labels in GROUPS:
        if label in labels:
            return name
    return FALLBACK_GROUP


def group_entries(info: Sequence[DeviceInfo]) -> List[Tuple[str, List[DeviceInfo]]]:
    grouped: Dict[str, List[DeviceInfo]] = {name: [] for name, _ in GROUPS}
    for entry in info:
        grouped[_group_of(entry.label)].append(entry)
    return [(name, grouped[name]) for name, _ in GROUPS if grouped[name]]


def format_report(info: Sequence[DeviceInfo], settings: Settings) -> str:
    color = settings.color
    out: List[str] = [
        _paint("Device Information", Fore.CYAN + Style.BRIGHT, color),
        "=" * REPORT_WIDTH,
        "",
    ]
    for group, entries in group_entries(info):
        out.append(_paint(f"[ {group} ]", Fore.YELLOW + Style.BRIGHT, color))
        for entry in entries:
            icon = icon_for(entry.label, settings.show_icons)
            key = _paint(f"{icon:<3} {entry.label:<20} : ", Fore.GREEN, color)
            value = ("\n" + VALUE_INDENT).join(entry.value.splitlines() or [""])
            out.append(key + _paint(value, Fore.WHITE, color))
        out.append("")
    return "\n".join(out) + "\n"


def parse_report(text: str) -> List[DeviceInfo]:
    """Recover the (label, value) rows from text produced by :func:`format_report`.

    Lines indented to the value column continue the previous row's value.
    """
    entries: List[DeviceInfo] = []
    for line in strip_ansi(text).splitlines():
        if entries and line.startswith(VALUE_INDENT):
            last = entries[-1]
            entries[-1] = DeviceInfo(last.label, f"{last.value}\n{line[len(VALUE_INDENT):]}")
            continue
        if line.startswith("[") or " : " not in line:
            continue
        left, _, value = line.partition(" : ")
        label = left[4:].strip()
        if label:
            entries.append(DeviceInfo(label, value))
    return entries


def format_memory_report(meminfo: str, settings: Settings) -> str:
    color = settings.color
    out: List[str] = [
        _paint("Detailed Memory Information", Fore.CYAN + Style.BRIGHT, color),
        "=" * MEMORY_RULE_WIDTH,
        "",
    ]
    if is_sentinel(meminfo):
        out.append(f"Memory information unavailable: {meminfo}")
        return "\n".join(out) + "\n"

    fields = parse_meminfo(meminfo)

    def row(label: str, value: str, style: str) -> str:
        return _paint(f"{label:<20} : ", style, color) + _paint(value, Fore.WHITE, color)

    for key, description in HIGHLIGHTED_MEMORY_FIELDS:
        if key in fields:
            out.append(row(description, format_size(fields[key]), Fore.YELLOW + Style.BRIGHT))
    out.append("")

    used_ram = fields.get("MemTotal", 0) - fields.get("MemAvailable", 0)
    used_swap = fields.get("SwapTotal", 0) - fields.get("SwapFree", 0)
    out.append(row("Used RAM", format_size(used_ram), Fore.RED + Style.BRIGHT))
    out.append(row("Used Swap", format_size(used_swap), Fore.MAGENTA + Style.BRIGHT))

    out.append("")
    out.append("Other Memory Information:")
    out.append("-" * 25)
    highlighted = {key for key, _ in HIGHLIGHTED_MEMORY_FIELDS}
    for key, value in fields.items():
        if key not in highlighted:
            out.append(row(key, format_size(value), Fore.GREEN))
    return "\n".join(out) + "\n"
