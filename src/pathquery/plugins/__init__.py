"""Tool plugin subsystem for pathquery.

The registry module keeps tool configurations by name.  Third-party
tools register by declaring entry-points under the "pathquery.tools"
group.

Example
-------
Declare a tool in pyproject.toml:

.. code-block:: toml

    [project.entry-points."pathquery.tools"]
    my_tool = "my_package.tools:MY_TOOL"
"""
from __future__ import annotations

from pathquery.plugins.registry import (
    DEFAULT_ENTRYPOINT_GROUP,
    ToolAlreadyRegisteredError,
    ToolNotFoundError,
    ToolRegistry,
)

__all__ = [
    "DEFAULT_ENTRYPOINT_GROUP",
    "ToolAlreadyRegisteredError",
    "ToolNotFoundError",
    "ToolRegistry",
]
