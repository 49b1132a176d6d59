"""Tool plugin capability module.

Exports the ``ToolConfig`` manifest model, the host ``TOOL_API_VERSION``
and the capability filter functions.
"""
from __future__ import annotations

from pathquery.tools.config import (
    TOOL_API_VERSION,
    ClassSelector,
    ClassWildcard,
    ToolConfig,
    ToolConfigError,
)
from pathquery.tools.filter import Entities, is_suitable, suitable_entities

__all__ = [
    "TOOL_API_VERSION",
    "ClassSelector",
    "ClassWildcard",
    "Entities",
    "ToolConfig",
    "ToolConfigError",
    "is_suitable",
    "suitable_entities",
]
