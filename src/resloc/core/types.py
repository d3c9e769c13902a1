"""Core enums and type definitions."""

from enum import StrEnum

from resloc._version import __version__

# Source entity recorded on results that no loader resolved
UNKNOWN_SOURCE = "Unknown"

DEFAULT_USER_AGENT = f"resloc/{__version__}"


class Scheme(StrEnum):
    """URL schemes claimed by the built-in loaders."""

    FILE = "file"
    CLASSPATH = "classpath"

    # Remote loader: no fixed scheme, tries any absolute URL
    ANY = "*"
