"""HanAssist Example - Variant Election and Message Sets.

Demonstrates electing Chinese-script variants for a locale, one-off
localize()/vary() calls, message sets with "did you mean" warnings, and the
deprecated positional API.

Scenarios covered:
1. Electing a single message for several locales
2. Message tables elected once per locale
3. Missing-key warnings with suggestions
4. Host configuration and vary()
5. Legacy positional calls

Python 3.13+.
"""

from __future__ import annotations

import logging
import warnings

from hanassist import (
    Host,
    HostConfig,
    LocalizedMessageSet,
    elect,
    fallback_order,
    localize,
    set_host,
    vary,
)
from hanassist.dispatch import get_dispatcher
from hanassist.legacy import uxs

MESSAGES = {
    "article": {"hans": "条目", "hant": "條目"},
    "category": {"hans": "分类", "hant": "分類"},
    "image": {"hans": "文件", "hant": "檔案"},
    "minute": "分",
    "search": {"hans": "搜索", "hant": "搜尋"},
    "software": {"hans": "软件", "hant": "軟件", "tw": "軟體"},
}


def example_1_elect() -> None:
    """Example 1: One message, many locales."""
    print("=" * 60)
    print("Example 1: Election")
    print("=" * 60)

    software = MESSAGES["software"]
    for locale in ("zh-cn", "zh-tw", "zh-hk", "zh-Hant-MO", "zh_SG", "ja"):
        chain = ",".join(key.value for key in fallback_order(locale)[:3])
        print(f"  {locale:<12} [{chain},...] -> {elect(software, locale)}")

    print(f"\n  universal only, zh-tw -> {elect({'en': 'apple'}, 'zh-tw')}")


def example_2_message_sets() -> None:
    """Example 2: Tables elected once per locale."""
    print("\n" + "=" * 60)
    print("Example 2: Message sets")
    print("=" * 60)

    for locale in ("zh-cn", "zh-tw"):
        ha = LocalizedMessageSet(MESSAGES, locale=locale)
        line = ha.attach(lambda msg: f"{msg('article')} / {msg('image')} / {msg('software')}")
        print(f"  {locale}: {line}")


def example_3_missing_keys() -> None:
    """Example 3: Typos are reported once, off the lookup path."""
    print("\n" + "=" * 60)
    print("Example 3: Missing keys")
    print("=" * 60)

    ha = LocalizedMessageSet(MESSAGES, locale="zh-cn")
    for key in ("aricle", "aricle", "zzzzz"):
        print(f"  get({key!r}) -> {ha.get(key)!r}")

    # Warnings are emitted by the background dispatcher
    get_dispatcher().join()


def example_4_host() -> None:
    """Example 4: Host language and script variant."""
    print("\n" + "=" * 60)
    print("Example 4: Host configuration")
    print("=" * 60)

    set_host(Host(HostConfig(language="zh-hk", variant="zh-cn")))
    apple = ["苹果", "蘋果"]
    print(f"  localize(apple) -> {localize(apple)}")
    print(f"  vary(apple)     -> {vary(apple)}")
    print(f"  localize(apple, locale='zh-sg') -> {localize(apple, locale='zh-sg')}")


def example_5_legacy() -> None:
    """Example 5: Deprecated positional calls."""
    print("\n" + "=" * 60)
    print("Example 5: Legacy API")
    print("=" * 60)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = uxs("zh-tw", "软件", "軟件", None, "軟體")
        print(f"  uxs('zh-tw', '软件', '軟件', None, '軟體') -> {result}")
        print(f"  uxs('zh-tw') -> {uxs('zh-tw')}")
    print(f"  warning: {caught[0].message}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="  [%(levelname)s] %(message)s")
    set_host(Host(HostConfig(language="en")))

    example_1_elect()
    example_2_message_sets()
    example_3_missing_keys()
    example_4_host()
    example_5_legacy()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
