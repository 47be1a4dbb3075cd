"""A short system summary with a small logo."""

from __future__ import annotations

import os
import pwd
import socket
import sys
import time
from dataclasses import dataclass

_LOGO = (
    "       .--.",
    "      |o_o |",
    "      |:_/ |",
    r"     //   \ \ ",
    "    (|     | )",
    r"   /'\_   _/`\ ",
    r"   \___)=(___/",
)


@dataclass(frozen=True)
class SystemInfo:
    """What the summary shows."""

    username: str
    hostname: str
    sysname: str
    release: str
    machine: str
    cpus: int
    ram_mb: int
    cwd: str
    uptime_seconds: int


def _username() -> str:
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        return "Desconhecido"


def _total_ram_mb() -> int:
    try:
        return os.sysconf("SC_PHYS_PAGES") * os.sysconf("SC_PAGE_SIZE") // 1024 // 1024
    except (ValueError, OSError):
        return 0


def _online_cpus() -> int:
    try:
        return os.sysconf("SC_NPROCESSORS_ONLN")
    except (ValueError, OSError):
        return os.cpu_count() or 1


def _uptime_seconds() -> int:
    try:
        with open("/proc/uptime", encoding="ascii") as handle:
            return int(float(handle.read().split()[0]))
    except (OSError, ValueError, IndexError):
        pass
    boottime = getattr(time, "CLOCK_BOOTTIME", None)
    if boottime is not None:
        return int(time.clock_gettime(boottime))
    return 0


def gather_system_info() -> SystemInfo:
    """Collect information about the running system."""
    uts = os.uname()
    return SystemInfo(
        username=_username(),
        hostname=socket.gethostname(),
        sysname=uts.sysname,
        release=uts.release,
        machine=uts.machine,
        cpus=_online_cpus(),
        ram_mb=_total_ram_mb(),
        cwd=os.getcwd(),
        uptime_seconds=_uptime_seconds(),
    )


def format_uptime(seconds: int) -> str:
    """Render *seconds* as days, hours and minutes."""
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    return f"{days}d {hours}h {rest // 60}m"


def format_neofetch(info: SystemInfo) -> str:
    """Return the whole summary text for *info*."""
    logo = [line.rstrip(" ") for line in _LOGO]
    details = [
        f"Usuário:      {info.username}",
        f"Host:         {info.hostname}",
        f"OS:           {info.sysname} {info.release}",
        f"Kernel:       {info.release}",
        f"Arquitetura:  {info.machine}",
        f"CPU(s):       {info.cpus}",
        f"RAM total:    {info.ram_mb} MB",
        f"Diretório:    {info.cwd}",
        f"Uptime:       {format_uptime(info.uptime_seconds)}",
    ]
    return "\n".join([*logo, "", "", *details, "", ""])


def neofetch() -> str:
    """Write the summary of the running system to standard output and return it."""
    text = format_neofetch(gather_system_info())
    sys.stdout.write(text)
    sys.stdout.flush()
    return text