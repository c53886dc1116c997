"""Configuration constants for osdistro.

Paths and commands can be overridden through environment variables so the
detection logic can be pointed at a different root (tests, chroots).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

# Directory holding os-release and the legacy distro release files
UNIXCONFDIR = os.environ.get("UNIXCONFDIR", "/etc")

OS_RELEASE_BASENAME = "os-release"

# Files in UNIXCONFDIR that look like release files but never identify a distro
DISTRO_RELEASE_IGNORE_BASENAMES = frozenset(
    {
        "debian_version",
        "lsb-release",
        "oem-release",
        OS_RELEASE_BASENAME,
        "system-release",
    }
)

# Historically known release files, tried when UNIXCONFDIR cannot be listed
DISTRO_RELEASE_FALLBACK_BASENAMES = [
    "SuSE-release",
    "arch-release",
    "base-release",
    "centos-release",
    "fedora-release",
    "gentoo-release",
    "mageia-release",
    "mandrake-release",
    "mandriva-release",
    "mandrivalinux-release",
    "manjaro-release",
    "oracle-release",
    "redhat-release",
    "sl-release",
    "slackware-version",
]

LSB_RELEASE_COMMAND = ("lsb_release", "-a")
UNAME_COMMAND = ("uname", "-rs")

DEFAULT_COMMAND_TIMEOUT = 10.0


def read_command_timeout(environ: dict[str, str] | None = None) -> float:
    """Return the command timeout from OSDISTRO_COMMAND_TIMEOUT.

    A missing or malformed value yields DEFAULT_COMMAND_TIMEOUT.
    """
    if environ is None:
        environ = dict(os.environ)
    raw = environ.get("OSDISTRO_COMMAND_TIMEOUT")
    if raw is None:
        return DEFAULT_COMMAND_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        log.debug(f"Ignoring invalid OSDISTRO_COMMAND_TIMEOUT={raw!r}")
        return DEFAULT_COMMAND_TIMEOUT


# Seconds to wait for lsb_release/uname before treating them as unavailable
COMMAND_TIMEOUT = read_command_timeout()


def default_os_release_file() -> str:
    """Return the os-release path under the current UNIXCONFDIR."""
    return os.path.join(UNIXCONFDIR, OS_RELEASE_BASENAME)


def get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "osdistro"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "osdistro.log"
