"""Dotted-integer version comparison.

Versions are accepted either as free-form strings (``"2.1.0"``,
``"v3-rc2"``) or as already-parsed integer sequences.  Both forms are
normalized at the boundary into a ``tuple[int, ...]`` before any
comparison logic runs, so the comparator itself only ever sees one
canonical representation.

Example
-------
::

    from pathquery.version import compatible

    compatible("2.1", "2.2")      # True  -- newer minor is fine
    compatible("2.1", "2.0")      # False -- older minor is not
    compatible("2.1.0", "2.1")    # False -- differing arity
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final, Union

VersionLike = Union[str, Sequence[int]]
"""A version given as a string of digit runs or as an integer sequence."""

_DIGIT_RUN: Final[re.Pattern[str]] = re.compile(r"\d+")


def version_string_to_tuple(text: str) -> tuple[int, ...]:
    """Extract every maximal run of digits from ``text`` as integers.

    Non-digit characters act as separators, so ``"1.2.3"``, ``"1-2-3"``
    and ``"v1 2 3"`` all normalize to ``(1, 2, 3)``.  A string with no
    digits yields the empty tuple.
    """
    return tuple(int(run) for run in _DIGIT_RUN.findall(text))


def normalize_version(version: VersionLike) -> tuple[int, ...]:
    """Return the canonical integer-tuple form of ``version``.

    Raises
    ------
    TypeError
        If ``version`` is neither a string nor a sequence of integers.
    """
    if isinstance(version, str):
        return version_string_to_tuple(version)
    if isinstance(version, Sequence):
        return tuple(int(part) for part in version)
    raise TypeError(
        f"Version must be a string or a sequence of integers, got {type(version).__name__}"
    )


def compatible(required: VersionLike, actual: VersionLike) -> bool:
    """Return whether ``actual`` satisfies ``required``.

    ``actual`` is compatible when it is greater than or equal to
    ``required``, compared component by component from the most
    significant one.  Versions with a different number of components are
    never compatible, whatever their magnitude.

    Parameters
    ----------
    required:
        The minimum version demanded.
    actual:
        The version available.

    Returns
    -------
    bool
        ``True`` if compatible, ``False`` otherwise.
    """
    required_parts = normalize_version(required)
    actual_parts = normalize_version(actual)

    if len(required_parts) != len(actual_parts):
        return False

    for wanted, have in zip(required_parts, actual_parts):
        if have < wanted:
            return False
        if have > wanted:
            return True
    return True
