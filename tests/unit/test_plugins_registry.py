"""Unit tests for pathquery.plugins.registry — ToolRegistry, error types,
entry-point loading, and bulk suitability filtering.
"""
from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from pathquery.plugins.registry import (
    ToolAlreadyRegisteredError,
    ToolNotFoundError,
    ToolRegistry,
)
from pathquery.tools.config import ClassWildcard, ToolConfig, ToolConfigError

_ENTRY_POINTS = "pathquery.plugins.registry.importlib.metadata.entry_points"


# ---------------------------------------------------------------------------
# Test fixtures
# ---------------------------------------------------------------------------

GENE_TOOL = ToolConfig(
    accepts=frozenset({"ids"}),
    classes=frozenset({"Gene"}),
    name="gene-tool",
)
ANY_CLASS_TOOL = ToolConfig(
    accepts=frozenset({"id", "ids"}),
    classes=frozenset({ClassWildcard.ANY}),
    name="any-class-tool",
)
FUTURE_TOOL = ToolConfig(
    accepts=frozenset({"ids"}),
    classes=frozenset({ClassWildcard.ANY}),
    version=2,
    name="future-tool",
)


def _fresh_registry(name: str = "test") -> ToolRegistry:
    """Return a new empty registry for each test."""
    return ToolRegistry(name)


def _entry_point(name: str, loaded: object) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.load.return_value = loaded
    return ep


# ===========================================================================
# Error types
# ===========================================================================


class TestToolNotFoundError:
    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise ToolNotFoundError("my-tool", "my-registry")

    def test_attributes(self) -> None:
        error = ToolNotFoundError("my-tool", "my-registry")
        assert error.tool_name == "my-tool"
        assert error.registry_name == "my-registry"

    def test_message_contains_tool_name(self) -> None:
        assert "my-tool" in str(ToolNotFoundError("my-tool", "my-registry"))


class TestToolAlreadyRegisteredError:
    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise ToolAlreadyRegisteredError("dup-tool", "my-registry")

    def test_message_contains_tool_name(self) -> None:
        assert "dup-tool" in str(ToolAlreadyRegisteredError("dup-tool", "my-registry"))


# ===========================================================================
# Registration
# ===========================================================================


class TestToolRegistryRegister:
    def test_empty_registry(self) -> None:
        registry = _fresh_registry()
        assert len(registry) == 0
        assert registry.list_tools() == []

    def test_register_stores_config(self) -> None:
        registry = _fresh_registry()
        registry.register("gene-tool", GENE_TOOL)
        assert registry.get("gene-tool") is GENE_TOOL

    def test_duplicate_name_raises(self) -> None:
        registry = _fresh_registry()
        registry.register("gene-tool", GENE_TOOL)
        with pytest.raises(ToolAlreadyRegisteredError):
            registry.register("gene-tool", ANY_CLASS_TOOL)

    def test_non_config_raises_type_error(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError):
            registry.register("bad", {"accepts": ["ids"]})  # type: ignore[arg-type]

    def test_register_manifest(self) -> None:
        registry = _fresh_registry()
        config = registry.register_manifest("viewer", {"accepts": ["id"], "classes": ["*"]})
        assert registry.get("viewer") == config
        assert config.accepts_any_class

    def test_register_manifest_invalid_raises(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(ToolConfigError):
            registry.register_manifest("viewer", {"accepts": 5})
        assert "viewer" not in registry

    def test_register_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        with caplog.at_level(logging.DEBUG, logger="pathquery.plugins.registry"):
            registry.register("logged-tool", GENE_TOOL)
        assert "logged-tool" in caplog.text

    def test_repr_contains_name_and_tools(self) -> None:
        registry = _fresh_registry("mine-tools")
        registry.register("gene-tool", GENE_TOOL)
        assert "mine-tools" in repr(registry)
        assert "gene-tool" in repr(registry)


# ===========================================================================
# deregister / get / list
# ===========================================================================


class TestToolRegistryLookup:
    def test_deregister_removes_tool(self) -> None:
        registry = _fresh_registry()
        registry.register("gene-tool", GENE_TOOL)
        registry.deregister("gene-tool")
        assert "gene-tool" not in registry
        assert len(registry) == 0

    def test_deregister_nonexistent_raises(self) -> None:
        with pytest.raises(ToolNotFoundError):
            _fresh_registry().deregister("ghost")

    def test_get_nonexistent_raises(self) -> None:
        with pytest.raises(ToolNotFoundError):
            _fresh_registry().get("ghost")

    def test_list_tools_is_sorted(self) -> None:
        registry = _fresh_registry()
        registry.register("zebra", GENE_TOOL)
        registry.register("alpha", ANY_CLASS_TOOL)
        assert registry.list_tools() == ["alpha", "zebra"]


# ===========================================================================
# suitable_tools
# ===========================================================================


class TestSuitableTools:
    def test_only_suitable_tools_returned(self, model: dict, entities: dict) -> None:
        registry = _fresh_registry()
        registry.register("gene-tool", GENE_TOOL)
        registry.register("any-class-tool", ANY_CLASS_TOOL)
        registry.register("future-tool", FUTURE_TOOL)

        result = registry.suitable_tools(model, entities)

        assert result == {
            "any-class-tool": {"Gene": entities["Gene"], "Protein": entities["Protein"]},
            "gene-tool": {"Gene": entities["Gene"]},
        }

    def test_api_version_forwarded(self, model: dict, entities: dict) -> None:
        registry = _fresh_registry()
        registry.register("gene-tool", GENE_TOOL)
        registry.register("future-tool", FUTURE_TOOL)
        assert list(registry.suitable_tools(model, entities, api_version=2)) == ["future-tool"]

    def test_empty_registry_gives_empty_result(self, model: dict, entities: dict) -> None:
        assert _fresh_registry().suitable_tools(model, entities) == {}


# ===========================================================================
# load_entrypoints
# ===========================================================================


class TestToolRegistryLoadEntrypoints:
    def test_empty_group_does_nothing(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[]):
            registry.load_entrypoints("pathquery.tools.empty")
        assert len(registry) == 0

    def test_registers_tool_config(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("gene-tool", GENE_TOOL)]):
            registry.load_entrypoints()
        assert registry.get("gene-tool") is GENE_TOOL

    def test_registers_manifest_mapping(self) -> None:
        registry = _fresh_registry()
        manifest = {"accepts": ["ids"], "classes": ["Gene"], "version": 1}
        with patch(_ENTRY_POINTS, return_value=[_entry_point("from-manifest", manifest)]):
            registry.load_entrypoints()
        assert registry.get("from-manifest").class_names == frozenset({"Gene"})

    def test_default_group_queried(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[]) as entry_points:
            registry.load_entrypoints()
        entry_points.assert_called_once_with(group="pathquery.tools")

    def test_skips_already_registered(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        registry.register("existing-tool", GENE_TOOL)
        with patch(_ENTRY_POINTS, return_value=[_entry_point("existing-tool", ANY_CLASS_TOOL)]):
            with caplog.at_level(logging.DEBUG, logger="pathquery.plugins.registry"):
                registry.load_entrypoints()
        assert "existing-tool" in caplog.text
        assert registry.get("existing-tool") is GENE_TOOL

    def test_load_exception_is_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        ep = MagicMock()
        ep.name = "bad-tool"
        ep.load.side_effect = ImportError("no module named bad_thing")
        with patch(_ENTRY_POINTS, return_value=[ep]):
            with caplog.at_level(logging.ERROR, logger="pathquery.plugins.registry"):
                registry.load_entrypoints()
        assert len(registry) == 0
        assert "bad-tool" in caplog.text

    def test_invalid_manifest_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("broken", {"version": "x"})]):
            with caplog.at_level(logging.WARNING, logger="pathquery.plugins.registry"):
                registry.load_entrypoints()
        assert len(registry) == 0
        assert "broken" in caplog.text

    def test_wrong_object_is_skipped(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("not-a-tool", object())]):
            registry.load_entrypoints()
        assert len(registry) == 0

    def test_is_idempotent(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("stable-tool", GENE_TOOL)]):
            registry.load_entrypoints()
            registry.load_entrypoints()
        assert len(registry) == 1
