"""Translation tables for normalizing distro IDs.

Keys are raw values translated to lower case with blanks replaced by
underscores. Values are the normalized IDs returned by ``id()``.
"""

# "ID" attribute of the os-release file
NORMALIZED_OS_ID: dict[str, str] = {
    "ol": "oracle",  # Oracle Linux
}

# "Distributor ID" reported by lsb_release
NORMALIZED_LSB_ID: dict[str, str] = {
    "enterpriseenterprise": "oracle",  # Oracle Enterprise Linux
    "redhatenterpriseworkstation": "rhel",  # RHEL 6, 7 Workstation
    "redhatenterpriseserver": "rhel",  # RHEL 6, 7 Server
}

# Leading word of the distro release file name, or uname kernel name
NORMALIZED_DISTRO_ID: dict[str, str] = {
    "redhat": "rhel",  # RHEL 6.x, 7.x
}


def normalize_id(distro_id: str, table: dict[str, str]) -> str:
    """Lower-case a distro ID, replace blanks and look it up in a table.

    IDs missing from the table pass through unchanged.
    """
    distro_id = distro_id.lower().replace(" ", "_")
    return table.get(distro_id, distro_id)
