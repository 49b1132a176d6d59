#!/usr/bin/env python3
"""Example: Tool filtering — pathquery-lang

Register a few tool manifests and ask which of them can run on the
current result entities.

Usage:
    python examples/02_tool_filtering.py
"""
from __future__ import annotations

from pathquery.plugins import ToolRegistry
from pathquery.version import compatible

MODEL = {"Gene": {}, "Protein": {}, "GOAnnotation": {}}

ENTITIES = {
    "Gene": {"class": "Gene", "format": "ids", "value": [1001, 1002]},
    "Protein": {"class": "Protein", "format": "id", "value": 2001},
}

MANIFESTS = {
    "go-enrichment": {"accepts": ["ids"], "classes": ["Gene"], "depends": ["GOAnnotation"]},
    "protein-viewer": {"accepts": ["id"], "classes": ["Protein"]},
    "any-list": {"accepts": ["ids"], "classes": ["*"], "version": 2},
}


def main() -> None:
    registry = ToolRegistry("example")
    for name, manifest in MANIFESTS.items():
        registry.register_manifest(name, manifest)

    suitable = registry.suitable_tools(MODEL, ENTITIES)
    for name in registry.list_tools():
        status = ", ".join(sorted(suitable[name])) if name in suitable else "hidden"
        print(f"{name:16} {status}")

    print(f"\nService 5.1 satisfies >= 5.0: {compatible('5.0', '5.1')}")


if __name__ == "__main__":
    main()
