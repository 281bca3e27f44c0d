"""Candidate validation and the relaxed candidate shapes.

A Candidates mapping spells one message per variant:

    {"hans": "苹果", "hant": "蘋果", "en": "apple"}

The static entry points also accept shorthand spellings. They are decided
once, at the boundary, into a tagged union:

    "apple"              -> SingleCandidate
    ["apple"]            -> SingleCandidate
    ["苹果", "蘋果"]      -> PairCandidate (hans, hant)
    {"hans": ..., ...}   -> MappingCandidate

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeIs

from hanassist.diagnostics import ErrorTemplate, InvalidParameterError
from hanassist.enums import UNIVERSAL_KEY, CandidateKey

if TYPE_CHECKING:
    from hanassist.types import Candidates

__all__ = [
    "CandidateShape",
    "MappingCandidate",
    "PairCandidate",
    "SingleCandidate",
    "are_candidates",
    "describe_sequence",
    "get_type_name",
    "parse_candidates",
]

_SHORTHAND_EXPECTED = "str | [str] | [str, str]"


def get_type_name(obj: object) -> str:
    """Return the type name of an object for display in diagnostics.

    Example:
        >>> get_type_name({"hans": 1})
        'dict'
        >>> get_type_name(None)
        'None'
    """
    if obj is None:
        return "None"
    return type(obj).__name__


def describe_sequence(items: Sequence[object]) -> str:
    """Return the element types of a sequence, e.g. "[str,int]"."""
    return "[" + ",".join(get_type_name(item) for item in items) + "]"


def are_candidates(obj: object) -> TypeIs[Candidates]:
    """Check if obj is a well-formed Candidates mapping.

    A Candidates mapping is a non-empty Mapping whose keys are all
    recognized candidate keys and whose values are all strings.

    Args:
        obj: Any value

    Returns:
        True if obj can be passed to elect()

    Example:
        >>> are_candidates({"hans": "条目", "hant": "條目"})
        True
        >>> are_candidates({"fr": "article"})
        False
        >>> are_candidates({})
        False
    """
    if not isinstance(obj, Mapping) or not obj:
        return False
    return all(
        CandidateKey.is_candidate_key(key) and isinstance(value, str)
        for key, value in obj.items()
    )


@dataclass(frozen=True, slots=True)
class SingleCandidate:
    """One string shared by every locale."""

    text: str

    def as_candidates(self) -> Candidates:
        return MappingProxyType({UNIVERSAL_KEY: self.text})


@dataclass(frozen=True, slots=True)
class PairCandidate:
    """Positional (simplified, traditional) shorthand."""

    hans: str
    hant: str

    def as_candidates(self) -> Candidates:
        return MappingProxyType({CandidateKey.HANS: self.hans, CandidateKey.HANT: self.hant})


@dataclass(frozen=True, slots=True)
class MappingCandidate:
    """Full Candidates mapping, already validated."""

    candidates: Candidates

    def as_candidates(self) -> Candidates:
        return self.candidates


type CandidateShape = SingleCandidate | PairCandidate | MappingCandidate


def parse_candidates(obj: object) -> CandidateShape:
    """Decide the shape of a relaxed candidate argument.

    Args:
        obj: A string, a 1- or 2-element sequence of strings, or Candidates

    Returns:
        The matching CandidateShape variant

    Raises:
        InvalidParameterError: If obj has none of the accepted shapes
    """
    match obj:
        case str():
            return SingleCandidate(obj)
        case [str() as text]:
            return SingleCandidate(text)
        case [str() as hans, str() as hant]:
            return PairCandidate(hans, hant)
        case Sequence():
            actual = describe_sequence(obj)
            raise InvalidParameterError(
                ErrorTemplate.invalid_parameter("candidates", _SHORTHAND_EXPECTED, actual),
                parameter="candidates",
                expected=_SHORTHAND_EXPECTED,
                actual=actual,
            )
        case _ if are_candidates(obj):
            return MappingCandidate(obj)
        case _:
            raise InvalidParameterError(
                ErrorTemplate.invalid_parameter("candidates"),
                parameter="candidates",
                actual=get_type_name(obj),
            )
