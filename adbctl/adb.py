import subprocess
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .config import Settings

NOT_AVAILABLE = "n/a"
TIMED_OUT = "timed out"


@dataclass
class CommandResult:
    args: List[str]
    returncode: Optional[int]
    output: str = ""
    stderr: str = ""
    timed_out: bool = False
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.timed_out and self.returncode == 0


def command_failure_suggestion(output: str) -> str:
    text = output.lower()
    if "unauthorized" in text:
        return "Suggestion: unlock the device and accept the USB debugging prompt."
    if "no devices/emulators found" in text or "device '" in text:
        return "Suggestion: connect a device with 'adb connect <ip:port>' or enable USB debugging."
    if "more than one device/emulator" in text:
        return "Suggestion: select a single target device."
    if "device offline" in text:
        return "Suggestion: reconnect USB or restart the adb server and retry."
    if "inaccessible or not found" in text or "no such file" in text:
        return "Suggestion: the queried path or property does not exist on this device."
    return "Suggestion: run with DEBUG=1 to see the full command output."


def adb_cmd(adb_path: str, serial: Optional[str], *args: str) -> List[str]:
    cmd = [adb_path]
    if serial:
        cmd += ["-s", serial]
    cmd += list(args)
    return cmd


class Adb:
    """Runs the adb bridge tool as a child process, one attempt per call.

    Failures never raise: :meth:`run` reports them in a :class:`CommandResult`
    and :meth:`shell` collapses them to the ``NOT_AVAILABLE`` or ``TIMED_OUT``
    sentinels.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.adb_path = settings.adb_path

    def log_debug(self, message: str) -> None:
        if not self.settings.debug:
            return
        line = f"{datetime.now().isoformat(timespec='seconds')} {message}"
        print(line, file=sys.stderr)
        if not self.settings.debug_log_file:
            return
        try:
            with open(self.settings.debug_log_file, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            pass

    def run(self, args: List[str], timeout: float, merge_stderr: bool = True) -> CommandResult:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")
        command_text = " ".join(args)
        self.log_debug(f"RUN timeout={timeout}s command={command_text}")
        try:
            proc = subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                text=True,
                errors="replace",
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            self.log_debug(f"TIMEOUT after {timeout}s command={command_text}")
            return CommandResult(args, None, timed_out=True, error=f"timed out after {timeout}s")
        except OSError as e:
            self.log_debug(f"ERROR command={command_text} error={e}")
            return CommandResult(args, None, error=str(e))

        output = proc.stdout or ""
        result = CommandResult(args, proc.returncode, output=output, stderr=proc.stderr or "")
        if proc.returncode != 0:
            result.error = f"exit status {proc.returncode}"
            self.log_debug(
                f"FAILED returncode={proc.returncode} command={command_text} output={output.strip()} "
                f"stderr={result.stderr.strip()} "
                f"{command_failure_suggestion(output + result.stderr)}"
            )
        return result

    def shell(self, serial: Optional[str], command: str, timeout: Optional[float] = None) -> str:
        if timeout is None:
            timeout = self.settings.command_timeout
        result = self.run(adb_cmd(self.adb_path, serial, "shell", command), timeout)
        if result.timed_out:
            return TIMED_OUT
        if not result.ok:
            return NOT_AVAILABLE
        return result.output.strip() or NOT_AVAILABLE

    def devices(self) -> CommandResult:
        return self.run([self.adb_path, "devices"], self.settings.command_timeout, merge_stderr=False)

    def reboot(self, serial: str) -> CommandResult:
        return self.run(adb_cmd(self.adb_path, serial, "reboot"), self.settings.action_timeout)

    def launch_app(self, serial: str, package: str, activity: str = "") -> CommandResult:
        if activity:
            args = ("shell", "am", "start", "-n", f"{package}/{activity}")
        else:
            args = ("shell", "monkey", "-p", package, "-c", "android.intent.category.LAUNCHER", "1")
        return self.run(adb_cmd(self.adb_path, serial, *args), self.settings.action_timeout)

    def list_packages(self, serial: str, third_party: bool = False) -> CommandResult:
        args = ["shell", "pm", "list", "packages"]
        if third_party:
            args.append("-3")
        return self.run(adb_cmd(self.adb_path, serial, *args), self.settings.action_timeout, merge_stderr=False)
