"""Shared test fixtures for pathquery-lang.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "pathquery"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def genes_query_xml() -> str:
    """A realistic PathQuery document exercising every parsed feature."""
    return (
        '<query name="genes" model="genomic" view="Gene.symbol Gene.length Gene.proteins.name"'
        ' sortOrder="Gene.symbol asc Gene.length DESC" constraintLogic="A and B">\n'
        '  <join path="Gene.proteins" style="OUTER"/>\n'
        '  <join path="Gene.organism" style="INNER"/>\n'
        '  <constraint path="Gene.organism.name" op="=" value="D. melanogaster" code="A"/>\n'
        '  <constraint path="Gene.symbol" op="ONE OF" code="B">\n'
        "    <value>zen</value>\n"
        "    <value>eve</value>\n"
        "  </constraint>\n"
        "</query>\n"
    )


@pytest.fixture()
def model() -> dict[str, Any]:
    """A data model keyed by class name."""
    return {"Gene": {}, "Protein": {}, "GOAnnotation": {}}


@pytest.fixture()
def entities() -> dict[str, dict[str, Any]]:
    """Candidate entity records keyed by class name."""
    return {
        "Gene": {"class": "Gene", "format": "ids", "value": [1, 2, 3]},
        "Protein": {"class": "Protein", "format": "id", "value": 42},
        "Publication": {"class": "Publication", "format": "list", "value": "my-list"},
    }
