"""PathQuery model module.

Exports the query model types and the serializer for converting queries
to and from JSON/YAML.
"""
from __future__ import annotations

from pathquery.query.nodes import (
    Constraint,
    Query,
    SortDirection,
    SortOrder,
    infer_origin,
)
from pathquery.query.serializer import QuerySerializer

__all__ = [
    "Constraint",
    "Query",
    "QuerySerializer",
    "SortDirection",
    "SortOrder",
    "infer_origin",
]
