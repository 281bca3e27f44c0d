"""Tests for fallback chain resolution.

Covers the fallback table rows, locale respelling, Babel-based mapping of
BCP-47 tags onto table rows, the default order, and the completeness
property: every chain is a permutation of all ten candidate keys.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from hanassist.enums import UNIVERSAL_KEY, CandidateKey
from hanassist.fallback import (
    DEFAULT_FALLBACK,
    FALLBACK_TABLE,
    fallback_locale,
    fallback_order,
)
from tests.strategies import locale_codes


class TestFallbackTable:
    """Test the static fallback table."""

    def test_table_rows(self) -> None:
        """Table covers generic Chinese, both scripts and six regions."""
        assert set(FALLBACK_TABLE) == {
            "zh", "zh-hans", "zh-hant", "zh-cn", "zh-sg", "zh-my", "zh-tw", "zh-hk", "zh-mo",
        }

    @pytest.mark.parametrize("row", sorted(FALLBACK_TABLE))
    def test_rows_are_permutations(self, row: str) -> None:
        """Each row lists every candidate key exactly once."""
        chain = FALLBACK_TABLE[row]
        assert len(chain) == len(CandidateKey)
        assert set(chain) == set(CandidateKey)

    @pytest.mark.parametrize("row", sorted(FALLBACK_TABLE))
    def test_rows_end_with_universal_key(self, row: str) -> None:
        """Chinese rows only reach the universal form last."""
        assert FALLBACK_TABLE[row][-1] is UNIVERSAL_KEY

    def test_table_is_read_only(self) -> None:
        """Fallback table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            FALLBACK_TABLE["ja"] = DEFAULT_FALLBACK  # type: ignore[index]

    def test_tw_chain_prefers_traditional(self) -> None:
        """zh-tw probes tw, then hant, then other traditional regions."""
        assert fallback_order("zh-tw")[:4] == (
            CandidateKey.TW, CandidateKey.HANT, CandidateKey.HK, CandidateKey.MO,
        )

    def test_cn_chain_prefers_simplified(self) -> None:
        """zh-cn probes cn, then hans, then other simplified regions."""
        assert fallback_order("zh-cn")[:4] == (
            CandidateKey.CN, CandidateKey.HANS, CandidateKey.SG, CandidateKey.MY,
        )

    def test_hk_chain_prefers_macau_over_taiwan(self) -> None:
        """zh-hk falls back to mo before tw."""
        chain = fallback_order("zh-hk")
        assert chain.index(CandidateKey.MO) < chain.index(CandidateKey.TW)


class TestDefaultOrder:
    """Test the order used for locales without a table row."""

    def test_default_is_enumeration_order(self) -> None:
        """Default order follows CandidateKey declaration order."""
        assert DEFAULT_FALLBACK == tuple(CandidateKey)

    def test_default_starts_with_universal_key(self) -> None:
        """Non-Chinese locales get the universal form first."""
        assert DEFAULT_FALLBACK[0] is UNIVERSAL_KEY

    @pytest.mark.parametrize("locale", ["en", "en-US", "ja", "fr_FR", "", "!!", "zh-"])
    def test_unknown_locales_use_default(self, locale: str) -> None:
        """Non-Chinese, empty and malformed locales use the default order."""
        assert fallback_locale(locale) is None
        assert fallback_order(locale) == DEFAULT_FALLBACK


class TestLocaleMapping:
    """Test mapping of locale spellings onto table rows."""

    @pytest.mark.parametrize(
        ("locale", "row"),
        [
            ("zh-tw", "zh-tw"),
            ("ZH-TW", "zh-tw"),
            ("zh_TW", "zh-tw"),
            (" zh-hk ", "zh-hk"),
            ("zh-Hant", "zh-hant"),
            ("zh_Hans", "zh-hans"),
        ],
    )
    def test_respelled_rows(self, locale: str, row: str) -> None:
        """Case, separators and surrounding whitespace are ignored."""
        assert fallback_locale(locale) == row

    @pytest.mark.parametrize(
        ("locale", "row"),
        [
            ("zh-Hant-TW", "zh-tw"),
            ("zh-Hans-CN", "zh-cn"),
            ("zh_Hant_HK", "zh-hk"),
            ("zh-Hans-SG", "zh-sg"),
            ("zh-Hant-MO", "zh-mo"),
            ("zh-Hans-MY", "zh-my"),
        ],
    )
    def test_script_and_region_tags_use_region_row(self, locale: str, row: str) -> None:
        """Full BCP-47 tags map to the row of their region."""
        assert fallback_locale(locale) == row

    @pytest.mark.parametrize(
        ("locale", "row"),
        [
            ("zh-Hant-US", "zh-hant"),
            ("zh-Hans-JP", "zh-hans"),
            ("zh-US", "zh"),
        ],
    )
    def test_unlisted_regions_use_script_or_generic_row(self, locale: str, row: str) -> None:
        """Regions without a row fall back to the script row, then to zh."""
        assert fallback_locale(locale) == row

    @pytest.mark.parametrize(
        ("locale", "row"),
        [
            ("zh-Hant-TW-x-private", "zh-tw"),
            ("zh-cn-u-ca-chinese", "zh-cn"),
            ("zh-Hant-u-nu-hanidec", "zh-hant"),
            ("zh-u-co-pinyin", "zh"),
        ],
    )
    def test_extension_subtags_ignored(self, locale: str, row: str) -> None:
        """Unicode extensions and private-use subtags do not change the row."""
        assert fallback_locale(locale) == row

    def test_order_matches_mapped_row(self) -> None:
        """fallback_order returns the chain of the mapped row."""
        assert fallback_order("zh-Hant-TW") == FALLBACK_TABLE["zh-tw"]


class TestFallbackCompleteness:
    """Completeness property: no locale can leave a candidate unresolvable."""

    @given(locale=locale_codes())
    def test_every_order_is_a_permutation(self, locale: str) -> None:
        """Every chain contains each candidate key exactly once."""
        chain = fallback_order(locale)
        event(f"row={fallback_locale(locale)}")
        assert len(chain) == len(set(chain)) == len(CandidateKey)
        assert set(chain) == set(CandidateKey)

    @given(locale=st.text(max_size=20))
    def test_arbitrary_text_never_raises(self, locale: str) -> None:
        """fallback_order is total over strings."""
        assert set(fallback_order(locale)) == set(CandidateKey)
