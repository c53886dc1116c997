"""Text and JSON report formatting for the osdistro CLI."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from osdistro.resolver import LinuxDistribution

# (key, title) of each data source, in priority order
SOURCES = [
    ("os_release", "os-release file"),
    ("lsb_release", "lsb_release command"),
    ("distro_release", "distro release file"),
    ("uname", "uname command"),
]


def source_info(distribution: "LinuxDistribution", key: str) -> dict[str, str]:
    """Return the attribute map of one source by key (e.g. "lsb_release")."""
    return getattr(distribution, f"{key}_info")()


def sources_as_dict(distribution: "LinuxDistribution") -> dict[str, dict[str, str]]:
    """Return all four attribute maps keyed by source."""
    return {key: source_info(distribution, key) for key, _ in SOURCES}


def summary_rows(
    distribution: "LinuxDistribution", pretty: bool = True, best: bool = False
) -> list[tuple[str, str]]:
    """Return the (label, value) rows shown for the resolved distribution."""
    major, minor, build_number = distribution.version_parts(best)
    return [
        ("ID", distribution.id()),
        ("Name", distribution.name(pretty)),
        ("Version", distribution.version(pretty, best)),
        ("Major", major),
        ("Minor", minor),
        ("Build number", build_number),
        ("Codename", distribution.codename()),
        ("Like", distribution.like()),
    ]


def print_summary(distribution: "LinuxDistribution", best: bool = False) -> None:
    """Print the pretty name, version and codename."""
    print(f"Name: {distribution.name(pretty=True)}")
    print(f"Version: {distribution.version(pretty=True, best=best)}")
    print(f"Codename: {distribution.codename()}")


def print_sources(distribution: "LinuxDistribution") -> None:
    """Print every attribute of every data source.

    Args:
        distribution: The resolver whose sources to dump
    """
    for key, title in SOURCES:
        info = source_info(distribution, key)
        print("=" * 60)
        if key == "os_release":
            print(f"{title}: {distribution.os_release_file}")
        elif key == "distro_release":
            print(f"{title}: {distribution.distro_release_file or '(none found)'}")
        else:
            print(title)
        print("=" * 60)
        if not info:
            print("  (no data)")
        for attr in sorted(info):
            print(f"  {attr}: {info[attr]}")
    print()


def print_json(
    distribution: "LinuxDistribution", show_sources: bool = False, best: bool = False
) -> None:
    """Print ``info()`` (or the raw sources) as indented JSON."""
    if show_sources:
        data = sources_as_dict(distribution)
    else:
        data = distribution.info(best=best).to_dict()
    print(json.dumps(data, indent=4, sort_keys=True))
