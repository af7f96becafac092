from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from .adb import Adb
from .lookups import map_cpu_abi, map_fire_os_model
from .parsers import is_sentinel, summarize_cpu, summarize_memory, summarize_storage


class DeviceInfo(NamedTuple):
    label: str
    value: str


class PropertyQuery(NamedTuple):
    label: str
    commands: Tuple[str, ...]
    postprocess: Optional[Callable[..., str]] = None


def _query(label: str, *commands: str, postprocess: Optional[Callable[..., str]] = None) -> PropertyQuery:
    return PropertyQuery(label, tuple(commands), postprocess)


# Ordered to match the presenter's groups: Device, Hardware, Display, Other.
PROPERTY_QUERIES: Tuple[PropertyQuery, ...] = (
    _query("Model", "getprop ro.product.model", postprocess=map_fire_os_model),
    _query("Manufacturer", "getprop ro.product.manufacturer"),
    _query("Android Version", "getprop ro.build.version.release"),
    _query("API Level", "getprop ro.build.version.sdk"),
    _query("Build Number", "getprop ro.build.display.id"),
    _query("Fire OS Version", "getprop ro.build.version.name"),
    _query("Fire OS Build Number", "getprop ro.build.version.number"),
    _query("IP Address", "ip addr show wlan0 | grep 'inet ' | awk '{print $2}' | cut -d/ -f1"),
    _query(
        "WiFi SSID",
        "dumpsys wifi | grep 'mWifiInfo' | grep -o 'SSID:.*' | awk -F', ' '{print $1}' | sed 's/SSID: //'",
    ),
    _query("CPU", "cat /proc/cpuinfo", "top -n 1 | grep 'CPU:'", postprocess=summarize_cpu),
    _query("CPU ABI", "getprop ro.product.cpu.abi", postprocess=map_cpu_abi),
    _query("Memory", "cat /proc/meminfo", postprocess=summarize_memory),
    _query("Storage", "df -k /data", postprocess=summarize_storage),
    _query("Screen Resolution", "wm size"),
    _query("Screen Density", "wm density"),
    _query("Battery Level", "dumpsys battery | grep level | awk '{print $2}'"),
)


def run_query(adb: Adb, serial: str, query: PropertyQuery, timeout: Optional[float] = None) -> DeviceInfo:
    primary = adb.shell(serial, query.commands[0], timeout)
    if is_sentinel(primary):
        return DeviceInfo(query.label, primary)
    if query.postprocess is None:
        return DeviceInfo(query.label, primary)
    extra = [adb.shell(serial, command, timeout) for command in query.commands[1:]]
    return DeviceInfo(query.label, query.postprocess(primary, *extra))


def collect_device_info(
    adb: Adb,
    serial: str,
    queries: Sequence[PropertyQuery] = PROPERTY_QUERIES,
    timeout: Optional[float] = None,
) -> List[DeviceInfo]:
    seen = set()
    info: List[DeviceInfo] = []
    for query in queries:
        if query.label in seen:
            raise ValueError(f"Duplicate property label: {query.label}")
        seen.add(query.label)
        info.append(run_query(adb, serial, query, timeout))
    return info


def fetch_meminfo(adb: Adb, serial: str, timeout: Optional[float] = None) -> str:
    return adb.shell(serial, "cat /proc/meminfo", timeout)
