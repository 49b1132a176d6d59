"""Tool manifest model.

A tool plugin declares, in its manifest, which record formats it
accepts, which classes it can target, which data-model fields it depends
on, and which tool-API version it was built against.  ``ToolConfig`` is
the immutable in-memory form of that manifest.

Manifest shape
--------------
::

    {
        "name": "go-term-enrichment",
        "accepts": ["id", "ids"],
        "classes": ["Gene", "Protein"],     # or ["*"] for any class
        "depends": ["GOAnnotation"],
        "version": 1
    }
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, Union

TOOL_API_VERSION: Final[int] = 1
"""Tool-API version implemented by this host.  Tools must match it exactly."""

WILDCARD_TOKEN: Final[str] = "*"


class ClassWildcard(Enum):
    """Marker accepted in ``ToolConfig.classes`` meaning "every class"."""

    ANY = WILDCARD_TOKEN


ClassSelector = Union[str, ClassWildcard]


class ToolConfigError(ValueError):
    """Raised when a tool manifest holds values of the wrong type.

    Parameters
    ----------
    key:
        The manifest key whose value was rejected.
    message:
        Human-readable description of the problem.
    """

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Invalid tool manifest field {key!r}: {message}")


@dataclass(frozen=True)
class ToolConfig:
    """Capabilities and requirements declared by a tool plugin.

    Parameters
    ----------
    accepts:
        Record-format tags the tool can consume (e.g. ``"id"``, ``"ids"``).
    classes:
        Class names the tool can target, or ``ClassWildcard.ANY``.
    depends:
        Data-model field names that must exist for the tool to run.
    version:
        Tool-API version the tool was built against.
    name:
        Optional display name of the tool.
    """

    accepts: frozenset[str] = field(default_factory=frozenset)
    classes: frozenset[ClassSelector] = field(default_factory=frozenset)
    depends: frozenset[str] = field(default_factory=frozenset)
    version: int = 1
    name: str | None = None

    @property
    def accepts_any_class(self) -> bool:
        """Return True if the tool targets every class."""
        return ClassWildcard.ANY in self.classes

    @property
    def class_names(self) -> frozenset[str]:
        """Return the concrete class names, without the wildcard marker."""
        return frozenset(c for c in self.classes if isinstance(c, str))

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> "ToolConfig":
        """Build a ``ToolConfig`` from a manifest mapping.

        Missing keys fall back to their defaults: empty ``accepts``,
        ``classes`` and ``depends``, and ``version`` 1.  The ``"*"``
        token in ``classes`` becomes ``ClassWildcard.ANY``.

        Raises
        ------
        ToolConfigError
            If a present key holds a value of the wrong type.
        """
        if not isinstance(manifest, Mapping):
            raise ToolConfigError("<root>", f"expected a mapping, got {type(manifest).__name__}")

        classes = frozenset(
            ClassWildcard.ANY if c == WILDCARD_TOKEN else c
            for c in _string_set(manifest, "classes")
        )
        name = manifest.get("name", manifest.get("toolName"))
        if name is not None and not isinstance(name, str):
            # toolName is sometimes a {"human": ..., "cljs": ...} block
            name = name.get("human") if isinstance(name, Mapping) else str(name)

        return cls(
            accepts=_string_set(manifest, "accepts"),
            classes=classes,
            depends=_string_set(manifest, "depends"),
            version=_version(manifest),
            name=name,
        )


def _string_set(manifest: Mapping[str, Any], key: str) -> frozenset[str]:
    raw = manifest.get(key)
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        return frozenset((raw,))
    if not isinstance(raw, Iterable):
        raise ToolConfigError(key, f"expected a list of strings, got {type(raw).__name__}")
    items = list(raw)
    for item in items:
        if not isinstance(item, str):
            raise ToolConfigError(key, f"expected a list of strings, found {item!r}")
    return frozenset(items)


def _version(manifest: Mapping[str, Any]) -> int:
    raw = manifest.get("version", 1)
    if isinstance(raw, bool):
        raise ToolConfigError("version", f"expected an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw)
    raise ToolConfigError("version", f"expected an integer, got {raw!r}")
