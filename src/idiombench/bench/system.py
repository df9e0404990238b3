"""Interpreter and host characterization printed alongside results.

Microbenchmark ratios depend heavily on the interpreter build, so every
report carries the Python version and implementation it was produced
with.
"""

from __future__ import annotations

import json
import os
import platform
import socket
import sys
import sysconfig
import time
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class SystemProfile:
    """Snapshot of the process running the benchmarks."""

    python_version: str = ""
    python_implementation: str = ""
    python_compiler: str = ""
    gil_disabled: bool = False
    os_name: str = ""
    os_release: str = ""
    machine: str = ""
    cpu_count: int = 0
    hostname: str = ""
    timestamp: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def capture_system_profile() -> SystemProfile:
    """Capture the current interpreter and host details."""
    return SystemProfile(
        python_version=platform.python_version(),
        python_implementation=platform.python_implementation(),
        python_compiler=platform.python_compiler(),
        gil_disabled=bool(sysconfig.get_config_var("Py_GIL_DISABLED")),
        os_name=platform.system(),
        os_release=platform.release(),
        machine=platform.machine(),
        cpu_count=os.cpu_count() or 0,
        hostname=socket.gethostname(),
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
    )


def format_system_profile(profile: SystemProfile) -> str:
    """Format a profile as a short indented block."""
    build = profile.python_implementation
    if profile.gil_disabled:
        build += " (free-threaded)"
    lines = [
        "System",
        f"  Python:   {profile.python_version} {build}".rstrip(),
        f"  Compiler: {profile.python_compiler or 'unknown'}",
        f"  OS:       {profile.os_name} {profile.os_release} ({profile.machine})",
        f"  CPUs:     {profile.cpu_count}",
        f"  Host:     {profile.hostname}",
    ]
    if profile.timestamp:
        lines.append(f"  Time:     {profile.timestamp}")
    return "\n".join(lines)


def format_system_line(profile: SystemProfile) -> str:
    """One-line summary used in report headers."""
    return (
        f"{profile.python_implementation} {profile.python_version} on "
        f"{profile.os_name} {profile.machine}, {profile.cpu_count} CPUs"
    )


def running_under_tracer() -> bool:
    """True when a trace or profile hook is installed (coverage, debuggers)."""
    return sys.gettrace() is not None or sys.getprofile() is not None
