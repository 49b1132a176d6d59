"""PathQuery parser module.

Exports the ``QueryParser`` class, the ``parse_query`` convenience
function, and parse error types.
"""
from __future__ import annotations

from pathquery.parser.errors import MalformedXmlError, MissingViewError, QueryParseError
from pathquery.parser.parser import QueryParser, parse_query

__all__ = [
    "QueryParser",
    "parse_query",
    "QueryParseError",
    "MalformedXmlError",
    "MissingViewError",
]
