"""String similarity for "did you mean" suggestions.

Similarity is the case-insensitive Levenshtein distance normalized by the
longer string's length:

    similarity = (max_len - edit_distance) / max_len

with similarity("", "") defined as 1.0.

Distances come from the Levenshtein package (C implementation).

Python 3.13+.
"""

from collections.abc import Iterable

import Levenshtein

from hanassist.constants import SIMILARITY_THRESHOLD

__all__ = [
    "closest_match",
    "edit_distance",
    "similarity",
]


def edit_distance(left: str, right: str) -> int:
    """Return the case-insensitive Levenshtein distance of two strings.

    Insertions, deletions and substitutions each cost 1; both strings are
    lowercased first.

    Example:
        >>> edit_distance("Image", "image1")
        1
    """
    return Levenshtein.distance(left.lower(), right.lower())


def similarity(s1: str, s2: str) -> float:
    """Return the similarity of two strings, from 0.0 to 1.0.

    Example:
        >>> similarity("article", "aricle")
        0.8571428571428571
        >>> similarity("", "")
        1.0
    """
    longest = max(len(s1.lower()), len(s2.lower()))
    if longest == 0:
        return 1.0
    return (longest - edit_distance(s1, s2)) / longest


def closest_match(
    key: str, known: Iterable[str], threshold: float = SIMILARITY_THRESHOLD
) -> str | None:
    """Return the known string most similar to key.

    Strings scoring below threshold are ignored. Among equal top scores
    the first one in iteration order wins.

    Args:
        key: String to match, typically a missing message key
        known: Candidate strings, typically the keys of a message set
        threshold: Minimum similarity for a match

    Returns:
        The best match, or None if nothing cleared the threshold

    Example:
        >>> closest_match("image1", ["article", "image", "images"])
        'image'
        >>> closest_match("zzzzz", ["article"]) is None
        True
    """
    best: str | None = None
    best_score = threshold
    for candidate in known:
        score = similarity(candidate, key)
        if score > best_score or (best is None and score >= best_score):
            best, best_score = candidate, score
    return best
