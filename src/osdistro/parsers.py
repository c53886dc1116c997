"""Grammar parsers for the four distribution data sources.

Each parser turns raw text into an attribute map: a ``dict`` from lower-case
attribute name to string value. Parsers are pure and never touch the
filesystem or spawn processes; see ``osdistro.sources`` for the loaders.
"""

from __future__ import annotations

import re
import shlex
from typing import Iterable

# Matched against the *reversed* first line of a distro release file, so it
# can anchor on the trailing "[release] <version> [(<codename>)]" part:
#   group 1: codename inside parentheses (reversed)
#   group 2: version, must end in a digit (reversed)
#   group 3: everything before the version, minus a " release " word
DISTRO_RELEASE_CONTENT_REVERSED_PATTERN = re.compile(
    r"(?:[^)]*\)(.*)\()? *(?:STL )?([\d.+\-a-z]*\d) *(?:esaeler *)?(.+)"
)

# e.g. "centos-release", "slackware-version"
DISTRO_RELEASE_BASENAME_PATTERN = re.compile(r"(\w+)[-_](release|version)$")

# Codename embedded in VERSION: "7.6 (Maipo)" or "18.04, Bionic Beaver"
_VERSION_CODENAME_PATTERN = re.compile(r"(\(\D+\))|,(\s+)?\D+")

_UNAME_PATTERN = re.compile(r"^(\S+)\s+([\d.]+)")


class OSReleaseSyntaxError(ValueError):
    """Raised when os-release content cannot be tokenized (e.g. unterminated quote)."""


def reversed_match(pattern: re.Pattern[str], text: str) -> tuple[str | None, ...] | None:
    """Match a pattern against the reversed text and un-reverse the captures.

    Lets a left-anchored pattern effectively anchor on the end of ``text``.

    Args:
        pattern: Compiled pattern written for the reversed text
        text: Text in normal order

    Returns:
        Tuple of captured groups in normal character order (``None`` for
        groups that did not participate), or ``None`` if there is no match.
    """
    match = pattern.match(text[::-1])
    if match is None:
        return None
    return tuple(group[::-1] if group is not None else None for group in match.groups())


def _extract_codename(version: str) -> str:
    match = _VERSION_CODENAME_PATTERN.search(version)
    if not match:
        return ""
    return match.group().strip("()").strip(",").strip()


def _join_continuations(content: str) -> str:
    """Remove backslash-newline pairs, as a shell does outside single quotes.

    Single-quoted text and comments are copied unchanged.
    """
    out: list[str] = []
    in_single = in_double = False
    i = 0
    while i < len(content):
        char = content[i]
        if in_single:
            in_single = char != "'"
        elif char == "\\":
            if content[i + 1:i + 2] == "\n":
                i += 2
                continue
            # Keep the escape pair intact for shlex
            out.append(content[i:i + 2])
            i += 2
            continue
        elif char == '"':
            in_double = not in_double
        elif char == "'" and not in_double:
            in_single = True
        elif char == "#" and not in_double and (not out or out[-1][-1:].isspace()):
            end = content.find("\n", i)
            end = len(content) if end == -1 else end
            out.append(content[i:end])
            i = end
            continue
        out.append(char)
        i += 1
    return "".join(out)


def parse_os_release(lines: Iterable[str]) -> dict[str, str]:
    """Parse the lines of an os-release file.

    The content is tokenized with shell rules (quotes, escapes, comments and
    line continuations). ``KEY=VALUE`` tokens are stored under the lower-cased
    key; any other token is ignored. The codename embedded in ``VERSION`` is
    additionally stored as ``codename``.

    Args:
        lines: Lines of the file, with or without trailing newlines

    Returns:
        Attribute map of all information items

    Raises:
        OSReleaseSyntaxError: If the content has an unterminated quote or escape
    """
    content = _join_continuations("\n".join(line.rstrip("\n") for line in lines))
    lexer = shlex.shlex(content, posix=True)
    lexer.whitespace_split = True
    try:
        tokens = list(lexer)
    except ValueError as e:
        raise OSReleaseSyntaxError(str(e)) from e

    props: dict[str, str] = {}
    for token in tokens:
        if "=" not in token:
            # Bare words, e.g. an "export" in front of an assignment
            continue
        key, value = token.split("=", 1)
        props[key.lower()] = value
        if key == "VERSION":
            props["codename"] = _extract_codename(value)
    return props


def parse_lsb_release(lines: Iterable[str]) -> dict[str, str]:
    """Parse the output of ``lsb_release -a``.

    Lines look like ``Distributor ID:\\tUbuntu``. The label becomes the key
    (lower case, blanks replaced by underscores) and the stripped remainder
    after the first colon becomes the value. Lines without a colon are skipped.
    """
    props: dict[str, str] = {}
    for line in lines:
        kv = line.strip("\n").split(":", 1)
        if len(kv) != 2:
            continue
        key, value = kv
        props[key.strip().replace(" ", "_").lower()] = value.strip()
    return props


def parse_distro_release_content(line: str) -> dict[str, str]:
    """Parse the first line of a legacy distro release file.

    ``"CentOS Linux release 7.1.1503 (Core)"`` yields
    ``{"name": "CentOS Linux", "version_id": "7.1.1503", "codename": "Core"}``.
    A non-empty line that does not fit the pattern becomes the name as a whole.
    """
    line = line.strip()
    groups = reversed_match(DISTRO_RELEASE_CONTENT_REVERSED_PATTERN, line)
    distro_info: dict[str, str] = {}
    if groups:
        codename, version_id, name = groups
        distro_info["name"] = name or ""
        if version_id:
            distro_info["version_id"] = version_id
        if codename:
            distro_info["codename"] = codename
    elif line:
        distro_info["name"] = line
    return distro_info


def distro_id_from_basename(basename: str) -> str | None:
    """Return the distro ID encoded in a release file name, if any.

    ``"centos-release"`` yields ``"centos"``; ``"motd"`` yields ``None``.
    """
    match = DISTRO_RELEASE_BASENAME_PATTERN.match(basename)
    if match:
        return match.group(1)
    return None


def parse_uname(lines: Iterable[str]) -> dict[str, str]:
    """Parse the output of ``uname -rs``.

    The generic ``Linux`` kernel name is discarded entirely, since its
    release number says nothing about the distribution.
    """
    first = next(iter(lines), "")
    match = _UNAME_PATTERN.search(first.strip())
    if not match:
        return {}
    name, release = match.groups()
    if name == "Linux":
        return {}
    return {
        "id": name.lower(),
        "name": name,
        "release": release,
    }
