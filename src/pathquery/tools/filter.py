"""Capability filter: which entities may a tool operate on?

Given the data model of the current environment, the candidate entities
(class name to result record) and a tool's ``ToolConfig``, the filter
either narrows the entities to the ones the tool can handle or reports
that the tool cannot run here at all.

Checks are applied in order and short-circuit:

1. the tool declares the host's exact tool-API version;
2. every field the tool depends on exists in the model;
3. entity records whose ``format`` the tool does not accept are dropped;
4. unless the tool accepts any class, only the classes it names are kept.

An empty result is reported as ``None``, the same as an incompatible
tool, so callers can use the filter both to compute what a tool receives
and to decide whether to show the tool at all.
"""
from __future__ import annotations

import logging
from collections.abc import Container, Mapping
from typing import Any, Optional

from pathquery.tools.config import TOOL_API_VERSION, ToolConfig

logger = logging.getLogger(__name__)

Entities = Mapping[str, Mapping[str, Any]]


def suitable_entities(
    model: Container[str],
    entities: Entities,
    config: ToolConfig | None,
    *,
    api_version: int = TOOL_API_VERSION,
) -> Optional[dict[str, Mapping[str, Any]]]:
    """Return the subset of ``entities`` that ``config`` can operate on.

    Parameters
    ----------
    model:
        Field names available in the current environment.  Usually a
        mapping keyed by field name; only membership is tested.
    entities:
        Candidate records keyed by class name, each carrying ``"format"``.
    config:
        The tool's configuration, or ``None`` when the tool has none.
    api_version:
        Tool-API version of the host.

    Returns
    -------
    dict | None
        A new mapping with the suitable entities, or ``None`` when the
        tool is incompatible or no entity survives filtering.
    """
    if config is None:
        return None

    if config.version != api_version:
        logger.debug(
            "Tool %r targets API version %d, host provides %d",
            config.name,
            config.version,
            api_version,
        )
        return None

    missing = sorted(dep for dep in config.depends if dep not in model)
    if missing:
        logger.debug("Tool %r is missing model dependencies %s", config.name, missing)
        return None

    accepted = {
        key: record
        for key, record in entities.items()
        if isinstance(record.get("format"), str) and record["format"] in config.accepts
    }
    if not config.accepts_any_class:
        accepted = {
            key: record for key, record in accepted.items() if key in config.class_names
        }

    if not accepted:
        logger.debug("Tool %r has no suitable entities", config.name)
        return None
    return accepted


def is_suitable(
    model: Container[str],
    entities: Entities,
    config: ToolConfig | None,
    *,
    api_version: int = TOOL_API_VERSION,
) -> bool:
    """Return True if the tool should be offered for ``entities`` at all."""
    return suitable_entities(model, entities, config, api_version=api_version) is not None
