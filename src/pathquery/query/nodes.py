"""Query model definitions for the PathQuery dialect.

Every object produced by the parser is a frozen dataclass so that parsed
queries are immutable and can be shared freely between callers.

A ``Query`` mirrors the attributes of a ``<query>`` element: the selected
view paths, sort order, constraint logic, outer joins and constraints.
Paths are dotted strings rooted at a class name, e.g. ``"Gene.symbol"``
or ``"Gene.organism.name"``.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class SortDirection(str, Enum):
    """Sort directions understood by PathQuery services."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, slots=True)
class SortOrder:
    """A single ``path direction`` pair from a query's sort order.

    Parameters
    ----------
    path:
        The dotted path to sort on.
    direction:
        The upper-cased direction token, normally ``"ASC"`` or ``"DESC"``.
    """

    path: str
    direction: str

    def as_dict(self) -> dict[str, str]:
        """Return the single-entry ``{path: direction}`` form."""
        return {self.path: self.direction}


@dataclass(frozen=True)
class Constraint:
    """A filter condition attached to a query.

    Parameters
    ----------
    attributes:
        The raw attributes of the ``<constraint>`` element, e.g. ``path``,
        ``op``, ``value`` and ``code``.
    values:
        Values of a multi-value ("ONE OF") constraint, in document order.
        ``None`` when the element had no child elements.
    """

    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    values: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def path(self) -> str | None:
        return self.attributes.get("path")

    @property
    def op(self) -> str | None:
        return self.attributes.get("op")

    @property
    def value(self) -> str | None:
        return self.attributes.get("value")

    @property
    def code(self) -> str | None:
        return self.attributes.get("code")

    @property
    def has_values(self) -> bool:
        """Return True if the constraint carries an explicit value list."""
        return self.values is not None

    def as_dict(self) -> dict[str, object]:
        """Return the attribute mapping, plus ``"values"`` when present."""
        data: dict[str, object] = dict(self.attributes)
        if self.values is not None:
            data["values"] = list(self.values)
        return data


@dataclass(frozen=True)
class Query:
    """A parsed PathQuery.

    Parameters
    ----------
    select:
        The view: dotted paths to return, in order.  Never empty for a
        query produced by the parser.
    from_:
        The root class of the query, if known.
    order_by:
        Sort instructions in priority order.
    constraint_logic:
        Boolean expression over constraint codes, e.g. ``"A and (B or C)"``.
    joins:
        Paths explicitly marked as outer joins.
    where:
        Constraints in document order.
    name:
        The query's name attribute, if any.
    model:
        The name of the data model the query targets, if given.
    """

    select: tuple[str, ...]
    from_: str | None = None
    order_by: tuple[SortOrder, ...] = ()
    constraint_logic: str | None = None
    joins: tuple[str, ...] = ()
    where: tuple[Constraint, ...] = ()
    name: str | None = None
    model: str | None = None

    @property
    def origin(self) -> str | None:
        """Return the root class, inferring it from the view if needed."""
        if self.from_:
            return self.from_
        return infer_origin(self.select)


def infer_origin(select: tuple[str, ...] | list[str]) -> str | None:
    """Return the class name before the first ``.`` of the first view path.

    Returns ``None`` when ``select`` is empty or the prefix is empty.
    """
    if not select:
        return None
    return select[0].split(".", 1)[0] or None
