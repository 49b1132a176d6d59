#!/usr/bin/env python3
"""Example: Quickstart — pathquery-lang

Minimal working example: parse a PathQuery XML document and inspect
the resulting query.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install pathquery-lang
"""
from __future__ import annotations

import pathquery
from pathquery.query import QuerySerializer

QUERY_XML = '''
<query name="fly-genes" model="genomic" view="Gene.symbol Gene.length Gene.proteins.name"
       sortOrder="Gene.symbol asc" constraintLogic="A and B">
  <join path="Gene.proteins" style="OUTER"/>
  <constraint path="Gene.organism.name" op="=" value="D. melanogaster" code="A"/>
  <constraint path="Gene.symbol" op="ONE OF" code="B">
    <value>zen</value>
    <value>eve</value>
  </constraint>
</query>
'''


def main() -> None:
    print(f"pathquery-lang version: {pathquery.__version__}")

    # Step 1: Parse the XML into a Query
    query = pathquery.parse(QUERY_XML)
    print(f"Parsed query on '{query.from_}' with {len(query.select)} view path(s)")

    # Step 2: Inspect constraints
    for constraint in query.where:
        if constraint.has_values:
            print(f"  [{constraint.code}] {constraint.path} {constraint.op} {list(constraint.values)}")
        else:
            print(f"  [{constraint.code}] {constraint.path} {constraint.op} {constraint.value}")

    # Step 3: Dump the record form
    print(QuerySerializer().to_json(query))


if __name__ == "__main__":
    main()
