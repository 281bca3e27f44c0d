"""HanAssist - Chinese script variant election for localized messages.

Picks, for a message spelled in several Chinese-script variants (or once for
every locale), the string matching a requested locale through a deterministic
fallback chain, and warns with "did you mean" suggestions when code asks for
a message key that does not exist.

Public API:
    LocalizedMessageSet - Message table elected once for one locale
    localize - Elect a one-off message for a locale (default: host language)
    vary - Elect a one-off message for the host's script variant
    elect - Elect from a Candidates mapping
    batch_elect - Elect every entry of a message table
    fallback_order - Candidate keys probed for a locale
    similarity - Normalized edit-distance similarity of two strings
    CandidateKey - The ten recognized variant tags

Host integration:
    Host, HostConfig - Locale settings, message registry, warning sink
    get_host, set_host - Process-wide host

Exceptions:
    HanAssistError - Base exception class
    InvalidParameterError - Malformed input (also a TypeError)
    InvalidCandidateShapeError - Malformed message table entry
    NoMatchingVariantError - No variant covers the locale (also a LookupError)

Submodules:
    hanassist.legacy - Deprecated positional API (uls, uvs, uxs)
    hanassist.diagnostics - Error types, diagnostic codes and formatting
    hanassist.dispatch - Background queue for deferred diagnostics
    hanassist.locale_utils - Locale normalization and detection
"""

from .api import localize, vary
from .diagnostics import (
    HanAssistError,
    InvalidCandidateShapeError,
    InvalidParameterError,
    NoMatchingVariantError,
)
from .election import batch_elect, elect
from .enums import CandidateKey
from .fallback import fallback_order
from .host import Host, HostConfig, get_host, set_host
from .legacy import uls, uvs, uxs
from .message_set import LocalizedMessageSet
from .similarity import similarity

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("hanassist")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "CandidateKey",
    "HanAssistError",
    "Host",
    "HostConfig",
    "InvalidCandidateShapeError",
    "InvalidParameterError",
    "LocalizedMessageSet",
    "NoMatchingVariantError",
    "__version__",
    "batch_elect",
    "elect",
    "fallback_order",
    "get_host",
    "localize",
    "set_host",
    "similarity",
    "uls",
    "uvs",
    "uxs",
    "vary",
]
