"""Parse error types for the PathQuery parser.

Both failure kinds share ``QueryParseError`` as their base so callers
that only care whether a document is usable can catch one type:

``MalformedXmlError``
    The input is not well-formed XML.
``MissingViewError``
    The XML is well-formed but its root has no usable ``view``.
"""
from __future__ import annotations


class QueryParseError(ValueError):
    """Raised when a PathQuery document cannot be turned into a ``Query``.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    line:
        1-based line number where the error occurred, if known.
    col:
        1-based column number where the error occurred, if known.
    """

    def __init__(self, message: str, line: int | None = None, col: int | None = None) -> None:
        self.parse_message = message
        self.line = line
        self.col = col
        if line is not None and col is not None:
            super().__init__(f"{type(self).__name__} at {line}:{col}: {message}")
        else:
            super().__init__(f"{type(self).__name__}: {message}")


class MalformedXmlError(QueryParseError):
    """Raised when the document is not well-formed XML."""


class MissingViewError(QueryParseError):
    """Raised when the root element has no ``view`` paths."""
