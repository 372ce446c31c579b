"""Java version string parsing."""

from .errors import InvalidVersionFormat


def parse_compliance_level(version: str) -> int:
    """
    Convert a Java version string to its integer compliance level.

    Maven has reported versions both in the legacy dotted form ("1.8",
    "1.8.0_282") and in the bare form ("8", "11"). For dotted strings the
    character at index 2 is the major version, unless it is itself a dot, in
    which case the first two characters are ("11.0.2" -> 11).
    Only unsigned ASCII digits are accepted, so "+8" is rejected even though
    Java's Integer.parseInt would take it.

    Args:
        version: Raw version string from a POM, property or plugin setting

    Returns:
        The compliance level, e.g. 8 for "1.8"

    Raises:
        InvalidVersionFormat: If the string is empty or not numeric
    """
    if version is None:
        raise InvalidVersionFormat(version, "no value")

    normalized = version.strip()
    if not normalized:
        raise InvalidVersionFormat(version, "empty value")

    if "." in normalized:
        major = normalized[2:3]
        if major == ".":
            major = normalized[0:2]
    else:
        major = normalized

    if not major.isdigit() or not major.isascii():
        raise InvalidVersionFormat(version, f"{major!r} is not a number")
    return int(major)
