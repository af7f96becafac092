import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ADB = "adb"
DEFAULT_TIMEOUT = 5.0
DEFAULT_ACTION_TIMEOUT = 60.0


@dataclass(frozen=True)
class Settings:
    adb_path: str = DEFAULT_ADB
    debug: bool = False
    debug_log_file: str = ""
    show_icons: bool = False
    color: bool = True
    command_timeout: float = DEFAULT_TIMEOUT
    probe_timeout: float = DEFAULT_TIMEOUT
    action_timeout: float = DEFAULT_ACTION_TIMEOUT


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "y", "on")


def _parse_timeout(value: Optional[str], default: float) -> float:
    if not value:
        return default
    try:
        seconds = float(value)
    except ValueError:
        return default
    return seconds if seconds > 0 else default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        adb_path=env.get("ADBCTL_ADB", "").strip() or DEFAULT_ADB,
        debug=env.get("DEBUG", "") != "",
        debug_log_file=env.get("ADBCTL_DEBUG_LOG", "").strip(),
        show_icons=_parse_bool(env.get("SHOW_ICONS")),
        color="NO_COLOR" not in env,
        command_timeout=_parse_timeout(env.get("ADBCTL_TIMEOUT"), DEFAULT_TIMEOUT),
        probe_timeout=_parse_timeout(env.get("ADBCTL_PROBE_TIMEOUT"), DEFAULT_TIMEOUT),
    )
