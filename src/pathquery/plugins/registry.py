"""Tool registry for pathquery.

Keeps the ``ToolConfig`` of every known tool under a unique name and
answers which of them are suitable for a given environment.  Tools are
registered programmatically or discovered from installed packages that
declare entry-points in the "pathquery.tools" group.

Example
-------
Register a tool from its manifest::

    from pathquery.plugins.registry import ToolRegistry

    registry = ToolRegistry()
    registry.register_manifest(
        "protein-viewer",
        {"accepts": ["id"], "classes": ["Protein"], "depends": [], "version": 1},
    )

Declare a tool in a downstream package's ``pyproject.toml``::

    [project.entry-points."pathquery.tools"]
    protein-viewer = "my_package.tools:PROTEIN_VIEWER"

where ``PROTEIN_VIEWER`` is a ``ToolConfig`` or a manifest dict, then::

    registry.load_entrypoints()
    shown = registry.suitable_tools(model, entities)
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Container, Mapping
from typing import Any

from pathquery.tools.config import TOOL_API_VERSION, ToolConfig, ToolConfigError
from pathquery.tools.filter import Entities, suitable_entities

logger = logging.getLogger(__name__)

DEFAULT_ENTRYPOINT_GROUP = "pathquery.tools"


class ToolNotFoundError(KeyError):
    """Raised when a requested tool name is not in the registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.tool_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Tool {name!r} is not registered in the {registry_name!r} registry. "
            "Check that the package is installed and its entry-points are declared."
        )


class ToolAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.tool_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Tool {name!r} is already registered in the {registry_name!r} registry. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class ToolRegistry:
    """Named collection of tool configurations.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str = "tools") -> None:
        self._name = name
        self._tools: dict[str, ToolConfig] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str, config: ToolConfig) -> None:
        """Register ``config`` under ``name``.

        Raises
        ------
        ToolAlreadyRegisteredError
            If ``name`` is already registered.
        TypeError
            If ``config`` is not a ``ToolConfig``.
        """
        if name in self._tools:
            raise ToolAlreadyRegisteredError(name, self._name)
        if not isinstance(config, ToolConfig):
            raise TypeError(
                f"Cannot register {config!r} under {name!r}: it must be a ToolConfig."
            )
        self._tools[name] = config
        logger.debug("Registered tool %r in registry %r", name, self._name)

    def register_manifest(self, name: str, manifest: Mapping[str, Any]) -> ToolConfig:
        """Build a ``ToolConfig`` from ``manifest`` and register it.

        Returns
        -------
        ToolConfig
            The registered configuration.

        Raises
        ------
        ToolConfigError
            If the manifest holds values of the wrong type.
        ToolAlreadyRegisteredError
            If ``name`` is already registered.
        """
        config = ToolConfig.from_manifest(manifest)
        self.register(name, config)
        return config

    def deregister(self, name: str) -> None:
        """Remove a tool from the registry.

        Raises
        ------
        ToolNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._tools:
            raise ToolNotFoundError(name, self._name)
        del self._tools[name]
        logger.debug("Deregistered tool %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> ToolConfig:
        """Return the configuration registered under ``name``.

        Raises
        ------
        ToolNotFoundError
            If no tool is registered under ``name``.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name, self._name) from None

    def list_tools(self) -> list[str]:
        """Return a sorted list of all registered tool names."""
        return sorted(self._tools)

    def __contains__(self, name: object) -> bool:
        """Support ``"my-tool" in registry`` membership test."""
        return name in self._tools

    def __len__(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry(name={self._name!r}, tools={self.list_tools()})"

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def suitable_tools(
        self,
        model: Container[str],
        entities: Entities,
        *,
        api_version: int = TOOL_API_VERSION,
    ) -> dict[str, dict[str, Mapping[str, Any]]]:
        """Return the narrowed entities for every tool that can run here.

        Tools for which ``suitable_entities`` reports absence are left
        out, so the keys of the result are exactly the tools to show.
        """
        result: dict[str, dict[str, Mapping[str, Any]]] = {}
        for name in self.list_tools():
            narrowed = suitable_entities(
                model, entities, self._tools[name], api_version=api_version
            )
            if narrowed is not None:
                result[name] = narrowed
        return result

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = DEFAULT_ENTRYPOINT_GROUP) -> None:
        """Discover and register tools declared as package entry-points.

        Each entry-point must resolve to a ``ToolConfig`` or a manifest
        mapping.  Names already registered are skipped, so repeated
        calls are idempotent.  Entry-points that fail to import or hold
        an invalid manifest are logged and skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._tools:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                loaded = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                if isinstance(loaded, Mapping):
                    self.register_manifest(ep.name, loaded)
                else:
                    self.register(ep.name, loaded)
            except (ToolConfigError, ToolAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )
