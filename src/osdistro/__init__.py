"""OS distribution detection.

Determines the identity of the Linux/BSD distribution the process runs on,
from the os-release file, the lsb_release command, legacy distro release
files and uname, in that priority order.

Usage:
    import osdistro

    print(osdistro.id())                 # "ubuntu"
    print(osdistro.name(pretty=True))    # "Ubuntu 22.04.3 LTS"
    print(osdistro.version(best=True))   # "22.04.3"

    # Control the data sources explicitly
    dist = osdistro.LinuxDistribution(include_lsb=False, os_release_file="/tmp/os-release")
    print(dist.info())

The module-level functions query a process-wide instance describing the
running system. It is created on first use and kept for the life of the
process; the data sources are never re-read.
"""

from __future__ import annotations

import threading

from osdistro.parsers import OSReleaseSyntaxError
from osdistro.resolver import LinuxDistribution, VersionInfo, VersionParts

__version__ = "1.0.0"


# Process-wide instance for the current system, created on first use
_default_distribution: LinuxDistribution | None = None
_default_lock = threading.Lock()


def get_default_distribution() -> LinuxDistribution:
    """Return the shared LinuxDistribution for the current system."""
    global _default_distribution
    if _default_distribution is None:
        with _default_lock:
            if _default_distribution is None:
                _default_distribution = LinuxDistribution()
    return _default_distribution


def linux_distribution(full_distribution_name: bool = True) -> tuple[str, str, str]:
    """Return ``(name or id, version, codename)`` for the current system."""
    return get_default_distribution().linux_distribution(full_distribution_name)


def id() -> str:
    """Return the normalized distro ID of the current system, e.g. "rhel"."""
    return get_default_distribution().id()


def name(pretty: bool = False) -> str:
    """Return the distro name of the current system."""
    return get_default_distribution().name(pretty)


def version(pretty: bool = False, best: bool = False) -> str:
    """Return the distro version of the current system."""
    return get_default_distribution().version(pretty, best)


def version_parts(best: bool = False) -> tuple[str, str, str]:
    return get_default_distribution().version_parts(best)


def major_version(best: bool = False) -> str:
    return get_default_distribution().major_version(best)


def minor_version(best: bool = False) -> str:
    return get_default_distribution().minor_version(best)


def build_number(best: bool = False) -> str:
    return get_default_distribution().build_number(best)


def like() -> str:
    return get_default_distribution().like()


def codename() -> str:
    return get_default_distribution().codename()


def info(pretty: bool = False, best: bool = False) -> VersionInfo:
    return get_default_distribution().info(pretty, best)


def os_release_info() -> dict[str, str]:
    return get_default_distribution().os_release_info()


def lsb_release_info() -> dict[str, str]:
    return get_default_distribution().lsb_release_info()


def distro_release_info() -> dict[str, str]:
    return get_default_distribution().distro_release_info()


def uname_info() -> dict[str, str]:
    return get_default_distribution().uname_info()


def os_release_attr(attribute: str) -> str:
    return get_default_distribution().os_release_attr(attribute)


def lsb_release_attr(attribute: str) -> str:
    return get_default_distribution().lsb_release_attr(attribute)


def distro_release_attr(attribute: str) -> str:
    return get_default_distribution().distro_release_attr(attribute)


def uname_attr(attribute: str) -> str:
    return get_default_distribution().uname_attr(attribute)


__all__ = [
    "LinuxDistribution",
    "OSReleaseSyntaxError",
    "VersionInfo",
    "VersionParts",
    "build_number",
    "codename",
    "distro_release_attr",
    "distro_release_info",
    "get_default_distribution",
    "id",
    "info",
    "like",
    "linux_distribution",
    "lsb_release_attr",
    "lsb_release_info",
    "major_version",
    "minor_version",
    "name",
    "os_release_attr",
    "os_release_info",
    "uname_attr",
    "uname_info",
    "version",
    "version_parts",
]
