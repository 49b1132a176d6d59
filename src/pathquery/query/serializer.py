"""Query serialization to and from plain data, JSON and YAML.

The serialized form is the record shape used by the rest of the
application: ``from``, ``select``, ``orderBy`` (a list of single-entry
``{path: direction}`` dicts), ``constraintLogic``, ``joins`` and
``where`` (constraint attribute dicts, with a ``values`` list for
multi-value constraints).  ``name`` and ``model`` are included only when
set.

Usage
-----
::

    from pathquery.query.serializer import QuerySerializer

    serializer = QuerySerializer()
    data = serializer.to_dict(query)
    json_text = serializer.to_json(query)
    assert serializer.from_json(json_text) == query
"""
from __future__ import annotations

import json
from collections.abc import Mapping

import yaml

from pathquery.query.nodes import Constraint, Query, SortOrder


class QuerySerializer:
    """Converts between ``Query`` objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (Query → dict)
    # ------------------------------------------------------------------

    def to_dict(self, query: Query) -> dict[str, object]:
        """Serialize a ``Query`` to a JSON-compatible dict."""
        data: dict[str, object] = {
            "from": query.from_,
            "select": list(query.select),
            "orderBy": [order.as_dict() for order in query.order_by],
            "constraintLogic": query.constraint_logic,
            "joins": list(query.joins),
            "where": [constraint.as_dict() for constraint in query.where],
        }
        if query.name is not None:
            data["name"] = query.name
        if query.model is not None:
            data["model"] = query.model
        return data

    # ------------------------------------------------------------------
    # Deserialization (dict → Query)
    # ------------------------------------------------------------------

    def from_dict(self, data: Mapping[str, object]) -> Query:
        """Deserialize a ``Query`` from a dict produced by ``to_dict``.

        Raises
        ------
        ValueError
            If ``select`` is missing or empty.
        """
        select = tuple(str(p) for p in data.get("select") or ())  # type: ignore[union-attr]
        if not select:
            raise ValueError("Serialized query has an empty 'select' list")

        order_by: list[SortOrder] = []
        for entry in data.get("orderBy") or ():  # type: ignore[union-attr]
            for path, direction in entry.items():
                order_by.append(SortOrder(path=str(path), direction=str(direction)))

        return Query(
            select=select,
            from_=data.get("from"),  # type: ignore[arg-type]
            order_by=tuple(order_by),
            constraint_logic=data.get("constraintLogic"),  # type: ignore[arg-type]
            joins=tuple(data.get("joins") or ()),  # type: ignore[arg-type]
            where=tuple(self._constraint_from_dict(c) for c in data.get("where") or ()),  # type: ignore[union-attr]
            name=data.get("name"),  # type: ignore[arg-type]
            model=data.get("model"),  # type: ignore[arg-type]
        )

    def _constraint_from_dict(self, data: Mapping[str, object]) -> Constraint:
        attributes = {str(k): str(v) for k, v in data.items() if k != "values"}
        raw_values = data.get("values")
        values = None if raw_values is None else tuple(str(v) for v in raw_values)  # type: ignore[union-attr]
        return Constraint(attributes=attributes, values=values)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, query: Query, indent: int = 2) -> str:
        """Serialize a ``Query`` to a JSON string."""
        return json.dumps(self.to_dict(query), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Query:
        """Deserialize a ``Query`` from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, query: Query) -> str:
        """Serialize a ``Query`` to a YAML string."""
        return yaml.dump(
            self.to_dict(query), default_flow_style=False, allow_unicode=True, sort_keys=False
        )

    def from_yaml(self, text: str) -> Query:
        """Deserialize a ``Query`` from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
