"""pathquery-lang: PathQuery XML parsing and tool capability filtering.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import pathquery

    # Parse PathQuery XML into a Query
    query = pathquery.parse(
        '<query model="genomic" view="Gene.symbol Gene.length" sortOrder="Gene.symbol asc"/>'
    )
    query.from_          # 'Gene'

    # Check a service version against a minimum requirement
    pathquery.compatible("2.1", "2.3")      # True

    # Narrow entities to those a tool can handle
    config = pathquery.ToolConfig.from_manifest(
        {"accepts": ["ids"], "classes": ["Gene"], "version": 1}
    )
    pathquery.suitable_entities(model, entities, config)

    pathquery.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Container, Mapping
from typing import TYPE_CHECKING, Any, Optional

from pathquery.tools.config import TOOL_API_VERSION, ClassWildcard, ToolConfig

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from pathquery.query.nodes import Query
    from pathquery.tools.filter import Entities
    from pathquery.version.compare import VersionLike


def parse(source: str) -> "Query":
    """Parse a PathQuery XML string into a ``Query``.

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
    pathquery.parser.MalformedXmlError
        If the source is not well-formed XML.
    pathquery.parser.MissingViewError
        If the root element has no ``view`` paths.
    """
    from pathquery.parser.parser import parse_query

    return parse_query(source)


def compatible(required: "VersionLike", actual: "VersionLike") -> bool:
    """Return whether version ``actual`` is at least ``required``.

    Versions with a different number of components are never compatible.
    """
    from pathquery.version.compare import compatible as _compatible

    return _compatible(required, actual)


def suitable_entities(
    model: Container[str],
    entities: "Entities",
    config: ToolConfig | None,
    *,
    api_version: int = TOOL_API_VERSION,
) -> Optional[dict[str, Mapping[str, Any]]]:
    """Return the entities ``config`` can operate on, or ``None``.

    ``None`` means the tool is incompatible with this environment or no
    entity is suitable; it is a normal outcome, not an error.
    """
    from pathquery.tools.filter import suitable_entities as _suitable_entities

    return _suitable_entities(model, entities, config, api_version=api_version)


__all__ = [
    "__version__",
    "TOOL_API_VERSION",
    "ClassWildcard",
    "ToolConfig",
    "compatible",
    "parse",
    "suitable_entities",
]
