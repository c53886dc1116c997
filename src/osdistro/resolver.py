"""Multi-source resolution of the OS distribution identity."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field

from osdistro import config, sources
from osdistro.cached import cached_source
from osdistro.parsers import parse_distro_release_content
from osdistro.tables import (
    NORMALIZED_DISTRO_ID,
    NORMALIZED_LSB_ID,
    NORMALIZED_OS_ID,
    normalize_id,
)

_VERSION_PARTS_PATTERN = re.compile(r"(\d+)\.?(\d+)?\.?(\d+)?")


@dataclass(frozen=True)
class VersionParts:
    """Dot-separated components of a distribution version."""

    major: str = ""
    minor: str = ""
    build_number: str = ""


@dataclass(frozen=True)
class VersionInfo:
    """Machine-readable summary returned by ``LinuxDistribution.info()``.

    Every field is always present; missing data is the empty string.
    """

    id: str = ""
    version: str = ""
    like: str = ""
    codename: str = ""
    version_parts: VersionParts = field(default_factory=VersionParts)

    def to_dict(self) -> dict:
        """Convert to a nested dict suitable for JSON serialization."""
        return asdict(self)


class LinuxDistribution:
    """Information about an OS distribution, gathered from four data sources.

    Sources, in priority order: the os-release file, the ``lsb_release``
    command, a legacy distro release file and the ``uname`` command. Each
    source is read at most once per instance, on first use.

    A process-wide instance describing the running system is available from
    ``osdistro.get_default_distribution()``. Create your own instance to
    control which sources are used, e.g. to read a specific os-release file
    or to avoid running ``lsb_release``.

    Attributes:
        os_release_file: Path of the os-release file used as a source
        distro_release_file: Path of the distro release file used as a
            source. Empty until discovery finds one when not given explicitly.
        include_lsb: Whether ``lsb_release`` output is used
        include_uname: Whether ``uname`` output is used
    """

    def __init__(
        self,
        include_lsb: bool = True,
        os_release_file: str = "",
        distro_release_file: str = "",
        include_uname: bool = True,
    ) -> None:
        """Initialize the resolver. No data source is read here.

        Args:
            include_lsb: Run ``lsb_release -a`` as a data source
            os_release_file: os-release path; "" means <UNIXCONFDIR>/os-release
            distro_release_file: Release file path; "" means search UNIXCONFDIR
            include_uname: Run ``uname -rs`` as a data source
        """
        self.os_release_file = os_release_file or config.default_os_release_file()
        self.distro_release_file = distro_release_file
        self.include_lsb = include_lsb
        self.include_uname = include_uname

    def __repr__(self) -> str:
        return (
            "LinuxDistribution("
            f"os_release_file={self.os_release_file!r}, "
            f"distro_release_file={self.distro_release_file!r}, "
            f"include_lsb={self.include_lsb!r}, "
            f"include_uname={self.include_uname!r}, "
            f"_os_release_info={self._os_release_info!r}, "
            f"_lsb_release_info={self._lsb_release_info!r}, "
            f"_distro_release_info={self._distro_release_info!r}, "
            f"_uname_info={self._uname_info!r})"
        )

    # =========================================================================
    # Cached sources
    # =========================================================================

    @cached_source
    def _os_release_info(self) -> dict[str, str]:
        return sources.load_os_release(self.os_release_file)

    @cached_source
    def _lsb_release_info(self) -> dict[str, str]:
        return sources.load_lsb_release(self.include_lsb)

    @cached_source
    def _distro_release_info(self) -> dict[str, str]:
        distro_info, path = sources.load_distro_release(self.distro_release_file)
        if path:
            self.distro_release_file = path
        return distro_info

    @cached_source
    def _uname_info(self) -> dict[str, str]:
        return sources.load_uname(self.include_uname)

    # =========================================================================
    # Consolidated accessors
    # =========================================================================

    def linux_distribution(self, full_distribution_name: bool = True) -> tuple[str, str, str]:
        """Return ``(name or id, version, codename)``.

        Compatible with the removed ``platform.linux_distribution()``.
        """
        return (
            self.name() if full_distribution_name else self.id(),
            self.version(),
            self.codename(),
        )

    def id(self) -> str:
        """Return the normalized, machine-readable distro ID.

        The first non-empty of os-release ``ID``, lsb_release ``Distributor
        ID``, the distro release file name and the uname kernel name is
        lower-cased, has blanks replaced by underscores and is passed through
        the normalization table for its source.
        """
        distro_id = self.os_release_attr("id")
        if distro_id:
            return normalize_id(distro_id, NORMALIZED_OS_ID)

        distro_id = self.lsb_release_attr("distributor_id")
        if distro_id:
            return normalize_id(distro_id, NORMALIZED_LSB_ID)

        distro_id = self.distro_release_attr("id")
        if distro_id:
            return normalize_id(distro_id, NORMALIZED_DISTRO_ID)

        distro_id = self.uname_attr("id")
        if distro_id:
            return normalize_id(distro_id, NORMALIZED_DISTRO_ID)

        return ""

    def name(self, pretty: bool = False) -> str:
        """Return the human-readable distro name.

        Args:
            pretty: Include version and codename, e.g. "CentOS Linux 7.1.1503 (Core)"
        """
        if not pretty:
            return (
                self.os_release_attr("name")
                or self.lsb_release_attr("distributor_id")
                or self.distro_release_attr("name")
                or self.uname_attr("name")
            )

        name = self.os_release_attr("pretty_name") or self.lsb_release_attr("description")
        if not name:
            name = self.name()
            version = self.version(pretty=True)
            if version:
                name = f"{name} {version}".lstrip()
        return name

    def _version_candidates(self) -> list[str]:
        """Version strings from every source, in priority order."""
        return [
            self.os_release_attr("version_id"),
            self.lsb_release_attr("release"),
            self.distro_release_attr("version_id"),
            parse_distro_release_content(self.os_release_attr("pretty_name")).get("version_id", ""),
            parse_distro_release_content(self.lsb_release_attr("description")).get("version_id", ""),
            self.uname_attr("release"),
        ]

    def version(self, pretty: bool = False, best: bool = False) -> str:
        """Return the distro version.

        Args:
            pretty: Append the codename in parentheses, e.g. "7.0 (Maipo)"
            best: Return the most precise version (most dot-separated parts)
                among all sources instead of the first one in priority order.
                On equal precision the higher-priority source wins.
        """
        version = ""
        if best:
            for candidate in self._version_candidates():
                if candidate.count(".") > version.count(".") or not version:
                    version = candidate
        else:
            for candidate in self._version_candidates():
                if candidate:
                    version = candidate
                    break

        if pretty and version:
            codename = self.codename()
            if codename:
                version = f"{version} ({codename})"
        return version

    def version_parts(self, best: bool = False) -> tuple[str, str, str]:
        """Return ``(major, minor, build_number)``; missing parts are ""."""
        version_str = self.version(best=best)
        if version_str:
            match = _VERSION_PARTS_PATTERN.match(version_str)
            if match:
                major, minor, build_number = match.groups()
                return major, minor or "", build_number or ""
        return "", "", ""

    def major_version(self, best: bool = False) -> str:
        return self.version_parts(best)[0]

    def minor_version(self, best: bool = False) -> str:
        return self.version_parts(best)[1]

    def build_number(self, best: bool = False) -> str:
        return self.version_parts(best)[2]

    def like(self) -> str:
        """Return the space-separated IDs of related distros (os-release ``ID_LIKE``)."""
        return self.os_release_attr("id_like")

    def codename(self) -> str:
        """Return the release codename, or "" if the distro has none."""
        return (
            self.os_release_attr("codename")
            or self.lsb_release_attr("codename")
            or self.distro_release_attr("codename")
        )

    def info(self, pretty: bool = False, best: bool = False) -> VersionInfo:
        """Return a VersionInfo record; see ``version()`` for the parameters."""
        major, minor, build_number = self.version_parts(best)
        return VersionInfo(
            id=self.id(),
            version=self.version(pretty, best),
            like=self.like(),
            codename=self.codename(),
            version_parts=VersionParts(major=major, minor=minor, build_number=build_number),
        )

    # =========================================================================
    # Single source accessors
    # =========================================================================

    def os_release_info(self) -> dict[str, str]:
        return dict(self._os_release_info)

    def lsb_release_info(self) -> dict[str, str]:
        return dict(self._lsb_release_info)

    def distro_release_info(self) -> dict[str, str]:
        return dict(self._distro_release_info)

    def uname_info(self) -> dict[str, str]:
        return dict(self._uname_info)

    def os_release_attr(self, attribute: str) -> str:
        """Return one os-release item, or "" if it does not exist."""
        return self._os_release_info.get(attribute, "")

    def lsb_release_attr(self, attribute: str) -> str:
        """Return one lsb_release item, or "" if it does not exist."""
        return self._lsb_release_info.get(attribute, "")

    def distro_release_attr(self, attribute: str) -> str:
        """Return one distro release file item, or "" if it does not exist."""
        return self._distro_release_info.get(attribute, "")

    def uname_attr(self, attribute: str) -> str:
        """Return one uname item, or "" if it does not exist."""
        return self._uname_info.get(attribute, "")
