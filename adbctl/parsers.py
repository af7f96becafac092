"""Parsers for the plaintext output of ``/proc/meminfo``, ``/proc/cpuinfo``,
``top`` and ``df``.

Every summary function passes the ``n/a`` / ``timed out`` sentinels through
unchanged so a failed query stays visible as such in the report.
"""
from dataclasses import dataclass
from typing import Dict

from .adb import NOT_AVAILABLE, TIMED_OUT

KB_PER_MB = 1024
KB_PER_GB = 1048576

SENTINELS = (NOT_AVAILABLE, TIMED_OUT)


def is_sentinel(value: str) -> bool:
    return value in SENTINELS


def format_size(kb: int) -> str:
    if kb > KB_PER_GB:
        return f"{kb / KB_PER_GB:.2f} GB"
    if kb > KB_PER_MB:
        return f"{kb / KB_PER_MB:.2f} MB"
    return f"{kb} KB"


def _usage_line(total_kb: int, used_kb: int, free_kb: int) -> str:
    return (
        f"{total_kb / KB_PER_GB:.2f} GB / {total_kb} kB "
        f"({used_kb / KB_PER_GB:.2f} GB used, {free_kb / KB_PER_GB:.2f} GB free)"
    )


def parse_meminfo(text: str) -> Dict[str, int]:
    fields: Dict[str, int] = {}
    for line in text.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        try:
            fields[parts[0].rstrip(":")] = int(parts[1])
        except ValueError:
            continue
    return fields


@dataclass(frozen=True)
class MemorySummary:
    total_kb: int
    available_kb: int
    free_kb: int

    @property
    def used_kb(self) -> int:
        return self.total_kb - self.available_kb

    @classmethod
    def from_meminfo(cls, text: str) -> "MemorySummary":
        fields = parse_meminfo(text)
        return cls(
            total_kb=fields.get("MemTotal", 0),
            available_kb=fields.get("MemAvailable", 0),
            free_kb=fields.get("MemFree", 0),
        )


def summarize_memory(meminfo: str) -> str:
    if is_sentinel(meminfo):
        return meminfo
    summary = MemorySummary.from_meminfo(meminfo)
    return _usage_line(summary.total_kb, summary.used_kb, summary.free_kb)


def summarize_cpu(cpuinfo: str, usage: str = "") -> str:
    if is_sentinel(cpuinfo):
        return cpuinfo
    cores = sum(1 for line in cpuinfo.splitlines() if line.startswith("processor"))

    used = 0.0
    fields = usage.split()
    if not is_sentinel(usage) and len(fields) >= 4:
        try:
            used = float(fields[3].rstrip("%"))
        except ValueError:
            used = 0.0
    return f"{cores} cores ({used:.2f}% used)"


def summarize_storage(df_output: str) -> str:
    if is_sentinel(df_output):
        return df_output
    lines = df_output.splitlines()
    if len(lines) < 2:
        return NOT_AVAILABLE
    fields = lines[1].split()
    if len(fields) < 4:
        return NOT_AVAILABLE
    try:
        total_kb, used_kb, free_kb = (int(f) for f in fields[1:4])
    except ValueError:
        return NOT_AVAILABLE
    return _usage_line(total_kb, used_kb, free_kb)
