"""Scheme parsing utilities for location strings."""

import re
from typing import Any

from .exceptions import InvalidLocationError

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def validate_location(location: Any) -> str:
    """
    Check that a location is usable for resolution.

    Args:
        location: Value supplied by the caller

    Returns:
        The location unchanged

    Raises:
        InvalidLocationError: If the location is None, not a string or blank
    """
    if location is None:
        raise InvalidLocationError("Location must not be None", location=location)
    if not isinstance(location, str):
        raise InvalidLocationError(
            f"Location must be a string, got {type(location).__name__}",
            location=location,
        )
    if not location.strip():
        raise InvalidLocationError("Location must not be empty", location=location)
    return location


def extract_scheme(location: str) -> str:
    """
    Extract the leading scheme token of a location.

    "classpath:META-INF/x.nfo" -> "classpath"
    "https://example.com/x"    -> "https"
    "/tmp/x.nfo"               -> ""

    Returns:
        The lower-cased scheme, or an empty string when there is none
    """
    match = SCHEME_PATTERN.match(location)
    return match.group(1).lower() if match else ""


def has_scheme(location: str, scheme: str | None) -> bool:
    """Check if ``location`` starts with ``scheme:``."""
    if not scheme:
        return False
    return extract_scheme(location) == scheme.lower()


def strip_scheme(location: str, scheme: str | None = None) -> str:
    """
    Remove the scheme prefix from a location.

    Only ``scheme`` is removed when given; any scheme otherwise. An empty
    authority is dropped as well, so "file:///tmp/x" becomes "/tmp/x".
    """
    found = extract_scheme(location)
    if not found or (scheme is not None and found != scheme.lower()):
        return location

    rest = location[len(found) + 1 :]
    if rest.startswith("///"):
        rest = rest[2:]
    return rest
