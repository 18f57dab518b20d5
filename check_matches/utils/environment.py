"""Snapshot of the host environment stamped onto each report."""

from __future__ import annotations

import getpass
import os
import platform
import socket
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class EnvironmentSnapshot:
    user_name: str
    generated_on: str
    station_name: str
    os_version: str


def format_long_date(moment: datetime) -> str:
    """Full date/time pattern, e.g. ``Monday, December 9, 2024 3:04:05 PM``.

    Day of month and hour are not zero-padded.
    """

    hour = moment.hour % 12 or 12
    return f"{moment:%A, %B} {moment.day}, {moment.year} {hour}:{moment:%M:%S %p}"


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # No passwd entry and no LOGNAME/USER (e.g. some containers).
        return os.getenv("USERNAME", "unknown")


def snapshot_environment(now: datetime | None = None) -> EnvironmentSnapshot:
    """Capture user, timestamp, host and OS once for a report."""

    moment = now or datetime.now().astimezone()
    return EnvironmentSnapshot(
        user_name=_current_user(),
        generated_on=format_long_date(moment),
        station_name=socket.gethostname(),
        os_version=f"{platform.system()} {platform.release()}".strip(),
    )
