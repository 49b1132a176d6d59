"""Unit tests for pathquery.version — dotted-integer version comparison."""
from __future__ import annotations

import pytest

from pathquery.version.compare import compatible, normalize_version, version_string_to_tuple


class TestVersionStringToTuple:
    def test_dotted_version(self) -> None:
        assert version_string_to_tuple("2.1.0") == (2, 1, 0)

    def test_arbitrary_separators(self) -> None:
        assert version_string_to_tuple("v4-12 beta 3") == (4, 12, 3)

    def test_leading_zeros_parsed_as_integers(self) -> None:
        assert version_string_to_tuple("01.007") == (1, 7)

    def test_no_digits_gives_empty_tuple(self) -> None:
        assert version_string_to_tuple("latest") == ()


class TestNormalizeVersion:
    def test_string_is_parsed(self) -> None:
        assert normalize_version("1.2") == (1, 2)

    def test_list_used_as_is(self) -> None:
        assert normalize_version([3, 0, 1]) == (3, 0, 1)

    def test_tuple_used_as_is(self) -> None:
        assert normalize_version((5,)) == (5,)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError):
            normalize_version(2.1)  # type: ignore[arg-type]


class TestCompatible:
    @pytest.mark.parametrize(
        ("required", "actual", "expected"),
        [
            ("2.1", "2.1", True),
            ("2.1", "2.0", False),
            ("2.1", "2.2", True),
            ("2.1.0", "2.1", False),
            ("2.0", "1.9", False),
            ("1.9", "2.0", True),
            ("1.10", "1.9", False),
            ("1.2.3", "1.3.0", True),
        ],
    )
    def test_string_versions(self, required: str, actual: str, expected: bool) -> None:
        assert compatible(required, actual) is expected

    def test_first_differing_component_decides(self) -> None:
        # the larger minor does not matter once the major is newer
        assert compatible("1.9", "2.0") is True
        assert compatible("2.0", "1.99") is False

    def test_arity_mismatch_regardless_of_magnitude(self) -> None:
        assert compatible("1", "9.9") is False
        assert compatible("9.9", "1") is False

    def test_sequences_accepted(self) -> None:
        assert compatible([2, 1], [2, 3]) is True
        assert compatible((2, 1), (2, 0)) is False

    def test_mixed_string_and_sequence(self) -> None:
        assert compatible("2.1", [2, 1]) is True
        assert compatible([2, 1, 0], "2.1") is False

    def test_two_empty_versions_are_compatible(self) -> None:
        assert compatible("dev", "latest") is True

    def test_empty_vs_non_empty_is_incompatible(self) -> None:
        assert compatible("dev", "1.0") is False
        assert compatible("1.0", "dev") is False
