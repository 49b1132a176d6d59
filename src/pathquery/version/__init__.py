"""Version comparison module.

Exports ``compatible`` and the normalization helpers it is built on.
"""
from __future__ import annotations

from pathquery.version.compare import (
    VersionLike,
    compatible,
    normalize_version,
    version_string_to_tuple,
)

__all__ = [
    "VersionLike",
    "compatible",
    "normalize_version",
    "version_string_to_tuple",
]
