"""Loaders for the four distribution data sources.

Each loader reads a file or runs a command, feeds the raw text to the
matching parser and returns an attribute map. A source that is missing,
disabled or unreadable always yields an empty map; errors never propagate
to the caller.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import Sequence

from osdistro import config
from osdistro.parsers import (
    OSReleaseSyntaxError,
    distro_id_from_basename,
    parse_distro_release_content,
    parse_lsb_release,
    parse_os_release,
    parse_uname,
)

log = logging.getLogger(__name__)


# =============================================================================
# Filesystem and process collaborators
# =============================================================================


def read_lines(path: str) -> list[str]:
    """Read a UTF-8 text file and return its lines without line endings."""
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


def read_first_line(path: str) -> str:
    """Read only the first line of a UTF-8 text file."""
    with open(path, encoding="utf-8") as f:
        return f.readline()


def list_basenames(directory: str) -> list[str]:
    """List a directory non-recursively, sorted for deterministic iteration.

    Raises:
        OSError: If the directory cannot be listed
    """
    return sorted(os.listdir(directory))


def _command_encoding() -> str:
    encoding = sys.getfilesystemencoding()
    return "utf-8" if encoding == "ascii" else encoding


def run_command(argv: Sequence[str]) -> list[str]:
    """Run a command and return its stdout as lines.

    stderr is discarded (``lsb_release -a`` prints a notice there).

    Raises:
        FileNotFoundError: If the command is not installed
        subprocess.CalledProcessError: If the command exits non-zero
        subprocess.TimeoutExpired: If the command runs past COMMAND_TIMEOUT
        UnicodeDecodeError: If the output is not valid in the system encoding
    """
    result = subprocess.run(
        list(argv),
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        timeout=config.COMMAND_TIMEOUT,
        check=True,
    )
    return result.stdout.decode(_command_encoding()).splitlines()


def _command_lines(argv: Sequence[str]) -> list[str] | None:
    """Run a source command, returning None when it is unavailable or fails."""
    try:
        return run_command(argv)
    except FileNotFoundError:
        log.debug(f"{argv[0]} is not installed")
    except subprocess.CalledProcessError as e:
        log.debug(f"{argv[0]} exited with status {e.returncode}")
    except subprocess.TimeoutExpired:
        log.debug(f"{argv[0]} timed out after {config.COMMAND_TIMEOUT}s")
    except (OSError, UnicodeDecodeError) as e:
        log.debug(f"{argv[0]} could not be run: {e}")
    return None


# =============================================================================
# Source loaders
# =============================================================================


def load_os_release(path: str) -> dict[str, str]:
    """Load the attribute map of an os-release file.

    Args:
        path: Path to the os-release file

    Returns:
        Parsed attributes, or an empty map if the file is missing or malformed
    """
    if not os.path.isfile(path):
        log.debug(f"No os-release file at {path}")
        return {}
    try:
        return parse_os_release(read_lines(path))
    except (OSError, UnicodeDecodeError, OSReleaseSyntaxError) as e:
        log.warning(f"Ignoring unreadable os-release file {path}: {e}")
        return {}


def load_lsb_release(include: bool = True) -> dict[str, str]:
    """Load the attribute map reported by ``lsb_release -a``.

    Args:
        include: When False, the command is not run at all
    """
    if not include:
        return {}
    lines = _command_lines(config.LSB_RELEASE_COMMAND)
    if lines is None:
        return {}
    return parse_lsb_release(lines)


def load_uname(include: bool = True) -> dict[str, str]:
    """Load the attribute map reported by ``uname -rs``.

    Args:
        include: When False, the command is not run at all
    """
    if not include:
        return {}
    lines = _command_lines(config.UNAME_COMMAND)
    if lines is None:
        return {}
    return parse_uname(lines)


def parse_distro_release_file(path: str) -> dict[str, str]:
    """Parse the first line of a distro release file.

    I/O and decoding errors yield an empty map: a release file can outlive
    the package that owned it and be left unreadable.
    """
    try:
        return parse_distro_release_content(read_first_line(path))
    except (OSError, UnicodeDecodeError) as e:
        log.debug(f"Cannot read distro release file {path}: {e}")
        return {}


def load_distro_release(path: str = "", conf_dir: str | None = None) -> tuple[dict[str, str], str]:
    """Load the attribute map of a legacy distro release file.

    With an explicit ``path`` the file is always parsed, and its basename
    supplies the ``id`` when it follows the ``<id>-release`` naming scheme.
    Without one, ``conf_dir`` is searched for the first release file (in
    sorted order) whose content yields a name.

    Args:
        path: Explicit release file, or "" to search
        conf_dir: Directory to search; defaults to config.UNIXCONFDIR

    Returns:
        Tuple of (attribute map, path of the file actually used). The path is
        "" when nothing was found.
    """
    if path:
        distro_info = parse_distro_release_file(path)
        distro_id = distro_id_from_basename(os.path.basename(path))
        if distro_id:
            distro_info["id"] = distro_id
        return distro_info, path

    if conf_dir is None:
        conf_dir = config.UNIXCONFDIR
    try:
        basenames = list_basenames(conf_dir)
    except OSError as e:
        log.debug(f"Cannot list {conf_dir} ({e}), trying known release files")
        basenames = config.DISTRO_RELEASE_FALLBACK_BASENAMES

    for basename in basenames:
        if basename in config.DISTRO_RELEASE_IGNORE_BASENAMES:
            continue
        distro_id = distro_id_from_basename(basename)
        if not distro_id:
            continue
        filepath = os.path.join(conf_dir, basename)
        distro_info = parse_distro_release_file(filepath)
        if "name" in distro_info:
            distro_info["id"] = distro_id
            log.debug(f"Using distro release file {filepath}")
            return distro_info, filepath

    log.debug(f"No distro release file found in {conf_dir}")
    return {}, ""
