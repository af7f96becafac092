from dataclasses import dataclass
from typing import Optional

from .adb import Adb, adb_cmd

SUCCESS = "success"
TIMED_OUT = "timed_out"
FAILED = "failed"

PROBE_TOKEN = "connected"


@dataclass(frozen=True)
class ProbeResult:
    status: str
    message: str

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS


def _format_seconds(timeout: float) -> str:
    return f"{timeout:g}s"


def check_connectivity(adb: Adb, serial: str, timeout: Optional[float] = None) -> ProbeResult:
    """Round-trip ``echo connected`` through the device shell.

    The outcome is returned, not raised, so the caller decides whether an
    unreachable device is fatal.
    """
    if timeout is None:
        timeout = adb.settings.probe_timeout
    result = adb.run(adb_cmd(adb.adb_path, serial, "shell", "echo", PROBE_TOKEN), timeout)
    if result.timed_out:
        return ProbeResult(TIMED_OUT, f"device connection timed out after {_format_seconds(timeout)}")
    if not result.ok:
        reason = result.output.strip() or result.error or "unknown error"
        return ProbeResult(FAILED, f"failed to connect to device: {reason}")
    return ProbeResult(SUCCESS, f"Device {serial} is reachable.")
