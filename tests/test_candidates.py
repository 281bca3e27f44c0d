"""Tests for candidate validation and relaxed candidate shapes.

Python 3.13+.
"""

from __future__ import annotations

from collections import OrderedDict
from types import MappingProxyType

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hanassist.candidates import (
    MappingCandidate,
    PairCandidate,
    SingleCandidate,
    are_candidates,
    describe_sequence,
    get_type_name,
    parse_candidates,
)
from hanassist.diagnostics import InvalidParameterError
from hanassist.enums import CandidateKey
from tests.strategies import candidate_mappings


class TestCandidateKey:
    """Test the CandidateKey enumeration."""

    def test_ten_keys(self) -> None:
        """Exactly ten candidate keys exist."""
        assert len(CandidateKey) == 10

    def test_declaration_order(self) -> None:
        """Declaration order is the default fallback order."""
        assert [key.value for key in CandidateKey] == [
            "en", "zh", "hans", "hant", "cn", "tw", "hk", "sg", "mo", "my",
        ]

    def test_members_are_strings(self) -> None:
        """StrEnum members compare equal to their values."""
        assert CandidateKey.HANS == "hans"
        assert str(CandidateKey.HANT) == "hant"

    @pytest.mark.parametrize("value", ["en", "hans", CandidateKey.MY])
    def test_is_candidate_key(self, value: str) -> None:
        """Recognized values and members are candidate keys."""
        assert CandidateKey.is_candidate_key(value)

    @pytest.mark.parametrize("value", ["HANS", "zh-hans", "fr", "", 1, None])
    def test_is_not_candidate_key(self, value: object) -> None:
        """Other strings and non-strings are rejected."""
        assert not CandidateKey.is_candidate_key(value)


class TestAreCandidates:
    """Test the Candidates predicate."""

    def test_valid_mapping(self) -> None:
        """Mapping of candidate keys to strings is valid."""
        assert are_candidates({"hans": "条目", "hant": "條目"})

    def test_enum_keys(self) -> None:
        """CandidateKey members are accepted as keys."""
        assert are_candidates({CandidateKey.EN: "article"})

    def test_other_mapping_types(self) -> None:
        """Any Mapping is accepted, not only dict."""
        assert are_candidates(MappingProxyType({"zh": "条目"}))
        assert are_candidates(OrderedDict(tw="條目"))

    def test_empty_mapping_rejected(self) -> None:
        """Candidates need at least one entry."""
        assert not are_candidates({})

    def test_unknown_key_rejected(self) -> None:
        """Any unrecognized key invalidates the mapping."""
        assert not are_candidates({"hans": "条目", "fr": "article"})

    def test_non_string_value_rejected(self) -> None:
        """Every value must be a string."""
        assert not are_candidates({"hans": "条目", "hant": None})
        assert not are_candidates({"hans": 1})

    @pytest.mark.parametrize("value", [None, "hans", ["hans"], ("a", "b"), 42, {"hans"}])
    def test_non_mappings_rejected(self, value: object) -> None:
        """Strings, sequences, sets and scalars are not Candidates."""
        assert not are_candidates(value)

    @given(candidate_mappings())
    def test_generated_mappings_valid(self, mapping: dict[str, str]) -> None:
        """Every generated Candidates mapping passes validation."""
        assert are_candidates(mapping)

    @given(st.dictionaries(st.text(min_size=1, max_size=5), st.text(), min_size=1))
    def test_arbitrary_keys_match_membership(self, mapping: dict[str, str]) -> None:
        """Validity of string-valued mappings depends only on the keys."""
        expected = all(CandidateKey.is_candidate_key(key) for key in mapping)
        assert are_candidates(mapping) == expected


class TestParseCandidates:
    """Test shape decisions for relaxed candidate arguments."""

    def test_plain_string(self) -> None:
        """A string is a single candidate."""
        assert parse_candidates("苹果") == SingleCandidate("苹果")

    def test_one_element_sequence(self) -> None:
        """A one-element sequence is a single candidate."""
        assert parse_candidates(["苹果"]) == SingleCandidate("苹果")
        assert parse_candidates(("苹果",)) == SingleCandidate("苹果")

    def test_two_element_sequence(self) -> None:
        """A two-element sequence is (hans, hant)."""
        assert parse_candidates(["苹果", "蘋果"]) == PairCandidate("苹果", "蘋果")

    def test_mapping(self) -> None:
        """A valid mapping is kept as is."""
        mapping = {"hans": "苹果", "hant": "蘋果"}
        shape = parse_candidates(mapping)
        assert isinstance(shape, MappingCandidate)
        assert shape.candidates is mapping

    def test_pair_as_candidates(self) -> None:
        """Pair shorthand expands to hans and hant."""
        assert dict(PairCandidate("苹果", "蘋果").as_candidates()) == {
            "hans": "苹果",
            "hant": "蘋果",
        }

    def test_single_as_candidates(self) -> None:
        """Single candidate expands to the universal key."""
        assert dict(SingleCandidate("apple").as_candidates()) == {"en": "apple"}

    @pytest.mark.parametrize(
        ("value", "actual"),
        [
            ([], "[]"),
            (["a", "b", "c"], "[str,str,str]"),
            (["a", 1], "[str,int]"),
            ([None], "[None]"),
        ],
    )
    def test_bad_sequences(self, value: list[object], actual: str) -> None:
        """Wrong arity or element types are reported with element types."""
        with pytest.raises(InvalidParameterError) as exc_info:
            parse_candidates(value)
        error = exc_info.value
        assert error.parameter == "candidates"
        assert error.expected == "str | [str] | [str, str]"
        assert error.actual == actual
        assert actual in str(error)

    @pytest.mark.parametrize("value", [None, 42, {}, {"fr": "pomme"}, {"hans": 1}])
    def test_bad_values(self, value: object) -> None:
        """Other values are rejected as invalid candidates."""
        with pytest.raises(InvalidParameterError, match='Invalid parameter "candidates"'):
            parse_candidates(value)

    def test_invalid_parameter_is_type_error(self) -> None:
        """Shape errors can be caught as TypeError."""
        with pytest.raises(TypeError):
            parse_candidates(3.14)


class TestTypeNames:
    """Test type descriptions used in diagnostics."""

    @pytest.mark.parametrize(
        ("value", "name"),
        [(None, "None"), ("x", "str"), (1, "int"), ([], "list"), ({}, "dict")],
    )
    def test_get_type_name(self, value: object, name: str) -> None:
        """Type names are Python type names, None spelled as None."""
        assert get_type_name(value) == name

    def test_describe_sequence(self) -> None:
        """Element types are listed without spaces."""
        assert describe_sequence(["a", 1, None]) == "[str,int,None]"
