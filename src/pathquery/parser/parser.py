"""PathQuery XML parser.

Converts a PathQuery XML document into a ``Query``.

A typical document looks like::

    <query name="genes" model="genomic" view="Gene.symbol Gene.length"
           sortOrder="Gene.symbol asc" constraintLogic="A and B">
      <join path="Gene.proteins" style="OUTER"/>
      <constraint path="Gene.organism.name" op="=" value="D. melanogaster" code="A"/>
      <constraint path="Gene.symbol" op="ONE OF" code="B">
        <value>zen</value>
        <value>eve</value>
      </constraint>
    </query>

Only the root element and its immediate children are inspected.  The
root element's tag is not checked; any element carrying a ``view``
attribute is accepted.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Final

from pathquery.parser.errors import MalformedXmlError, MissingViewError
from pathquery.query.nodes import Constraint, Query, SortOrder, infer_origin

logger = logging.getLogger(__name__)

_TAG_JOIN: Final[str] = "join"
_TAG_CONSTRAINT: Final[str] = "constraint"
_TAG_VALUE: Final[str] = "value"
_OUTER_STYLE: Final[str] = "OUTER"


class QueryParser:
    """Parser that produces a ``Query`` from PathQuery XML text.

    Parameters
    ----------
    source:
        The complete XML document.
    """

    def __init__(self, source: str) -> None:
        self._source = source

    def parse(self) -> Query:
        """Parse the document and return the ``Query``.

        Raises
        ------
        MalformedXmlError
            If the source is not well-formed XML.
        MissingViewError
            If the root element has no ``view`` paths.
        """
        root = self._parse_tree()
        attrs = root.attrib

        select = tuple(attrs.get("view", "").split())
        if not select:
            raise MissingViewError("Invalid PathQuery XML: the 'view' attribute is missing or empty")

        query = Query(
            select=select,
            from_=attrs.get("from") or infer_origin(select),
            order_by=self._parse_order_by(
                attrs["sortOrder"] if "sortOrder" in attrs else attrs.get("orderBy")
            ),
            constraint_logic=attrs.get("constraintLogic"),
            joins=self._parse_joins(root),
            where=self._parse_constraints(root),
            name=attrs.get("name"),
            model=attrs.get("model"),
        )
        logger.debug(
            "Parsed query on %r with %d view path(s) and %d constraint(s)",
            query.from_,
            len(query.select),
            len(query.where),
        )
        return query

    # ------------------------------------------------------------------
    # Tree construction
    # ------------------------------------------------------------------

    def _parse_tree(self) -> ET.Element:
        try:
            return ET.fromstring(self._source)
        except ET.ParseError as exc:
            line, col = exc.position
            raise MalformedXmlError(str(exc), line=line, col=col + 1) from exc

    # ------------------------------------------------------------------
    # Root attributes
    # ------------------------------------------------------------------

    def _parse_order_by(self, raw: str | None) -> tuple[SortOrder, ...]:
        """Pair up ``path direction`` tokens; a trailing lone path is dropped."""
        if not raw:
            return ()
        tokens = raw.split()
        return tuple(
            SortOrder(path=path, direction=direction.upper())
            for path, direction in zip(tokens[0::2], tokens[1::2])
        )

    # ------------------------------------------------------------------
    # Child elements
    # ------------------------------------------------------------------

    def _parse_joins(self, root: ET.Element) -> tuple[str, ...]:
        return tuple(
            child.attrib["path"]
            for child in root
            if child.tag == _TAG_JOIN
            and child.get("style") == _OUTER_STYLE
            and "path" in child.attrib
        )

    def _parse_constraints(self, root: ET.Element) -> tuple[Constraint, ...]:
        return tuple(
            self._parse_constraint(child) for child in root if child.tag == _TAG_CONSTRAINT
        )

    def _parse_constraint(self, element: ET.Element) -> Constraint:
        if len(element) == 0:
            return Constraint(attributes=dict(element.attrib))
        # ONE OF / NONE OF constraints list their values as children
        values = tuple(
            child.text for child in element if child.tag == _TAG_VALUE and child.text
        )
        return Constraint(attributes=dict(element.attrib), values=values)


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def parse_query(source: str) -> Query:
    """Parse a PathQuery XML string and return the ``Query``.

    Parameters
    ----------
    source:
        Complete XML document.

    Returns
    -------
    Query
        The parsed query.

    Raises
    ------
    MalformedXmlError
        If the source is not well-formed XML.
    MissingViewError
        If the root element has no ``view`` paths.

    Example
    -------
    ::

        from pathquery.parser import parse_query
        query = parse_query('<query model="genomic" view="Gene.symbol Gene.length"/>')
        query.from_    # 'Gene'
    """
    return QueryParser(source).parse()
