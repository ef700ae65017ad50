"""Report facts about the machine the program runs on."""

from __future__ import annotations

import platform
import sys
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

OUTLETS = ("id", "macaddr", "os", "arch", "platform")


@dataclass(frozen=True)
class EnvironmentInfo:
    unique_id: str
    mac_address: str
    os_version: str
    architecture: str
    platform: str


def _architecture() -> str:
    return "x86_64" if sys.maxsize > 2**32 else "i386"


def _platform_name() -> str:
    if sys.platform == "darwin":
        return "mac"
    if sys.platform.startswith("win"):
        return "win"
    return sys.platform


def _os_version() -> str:
    if sys.platform == "darwin":
        parts = (platform.mac_ver()[0].split(".") + ["0", "0", "0"])[:3]
        major, minor, bugfix = (int(p) if p.isdigit() else 0 for p in parts)
        return f"Mac OS X Version {major}.{minor}.{bugfix} {platform.machine()}"
    if sys.platform.startswith("win"):
        release, version, service_pack, _ = platform.win32_ver()
        text = f"Microsoft Windows {release}".rstrip()
        if service_pack:
            text += f" {service_pack}"
        build = version.rsplit(".", 1)[-1] if version else ""
        if build:
            text += f" (build {build})"
        return text + (", 64-bit" if _architecture() == "x86_64" else ", 32-bit")
    return f"{platform.system()} {platform.release()} {platform.machine()}".strip()


def _mac_address() -> str:
    node = uuid.getnode()
    if (node >> 40) & 1:  # a random stand-in, not a hardware address
        return ""
    return ":".join(f"{(node >> shift) & 0xFF:02x}" for shift in range(40, -1, -8))


def _unique_id() -> str:
    if sys.platform.startswith("win"):
        import winreg

        try:
            with winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE, r"SOFTWARE\Microsoft\Cryptography", 0, winreg.KEY_READ
            ) as key:
                value, _ = winreg.QueryValueEx(key, "MachineGuid")
                return str(value)
        except OSError:
            return ""
    for path in (Path("/etc/machine-id"), Path("/var/lib/dbus/machine-id")):
        try:
            text = path.read_text().strip()
        except OSError:
            continue
        if text:
            return text
    return ""


def query_environment() -> EnvironmentInfo:
    """Gather the machine's identifier, MAC address, OS version, architecture and platform."""
    return EnvironmentInfo(
        unique_id=_unique_id(),
        mac_address=_mac_address(),
        os_version=_os_version(),
        architecture=_architecture(),
        platform=_platform_name(),
    )


class Environment:
    """On each bang, send every environment fact out its own outlet."""

    def __init__(self, on_output: Optional[Callable[[str, str], None]] = None):
        self._on_output = on_output

    def bang(self) -> EnvironmentInfo:
        """Query the environment, send each fact as (outlet, value) and return them all."""
        info = query_environment()
        if self._on_output is not None:
            values = (info.unique_id, info.mac_address, info.os_version, info.architecture, info.platform)
            for outlet, value in zip(OUTLETS, values):
                self._on_output(outlet, value)
        return info