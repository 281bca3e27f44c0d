"""LocalizedMessageSet: a message table resolved once for one locale.

Example, assuming the host language is "zh-cn":

    >>> ha = LocalizedMessageSet({
    ...     "article": {"hans": "条目", "hant": "條目"},
    ...     "category": {"hans": "分类", "hant": "分類"},
    ...     "image": {"hans": "文件", "hant": "檔案"},
    ...     "minute": "分",
    ...     "search": {"hans": "搜索", "hant": "搜尋"},
    ... })
    >>> ha.dump()["article"]
    '条目'
    >>> ha.attach(lambda msg: msg("image"))
    '文件'
    >>> ha.attach(lambda msg: msg("image1"))  # warns later: 您是指“image”吗？
    'image1'

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from hanassist.diagnostics import ErrorTemplate, InvalidParameterError
from hanassist.dispatch import DiagnosticDispatcher, get_dispatcher
from hanassist.election import batch_elect
from hanassist.host import Host, get_host
from hanassist.similarity import closest_match

if TYPE_CHECKING:
    from hanassist.types import LocaleCode, MessageTable, ResolvedMessages

__all__ = ["LocalizedMessageSet"]

logger = logging.getLogger(__name__)

type MessageGetter = Callable[[str], str]


class LocalizedMessageSet:
    """Messages elected for one locale, with diagnostic-aware lookup.

    The table is elected once, at construction, and frozen; a locale change
    requires a new instance. Lookups of unknown keys return the key itself
    and report the miss once per key, off the lookup path, through the
    host's warning sink with a "did you mean" suggestion when a known key
    is similar enough.

    Thread-safe: resolved messages are immutable and the set of reported
    keys is guarded by a lock.

    Attributes:
        locale: Locale the messages were elected for
    """

    __slots__ = ("_dispatcher", "_host", "_locale", "_messages", "_warned", "_warned_lock")

    def __init__(
        self,
        messages: MessageTable,
        *,
        locale: LocaleCode | None = None,
        host: Host | None = None,
        dispatcher: DiagnosticDispatcher | None = None,
    ) -> None:
        """Elect messages for locale.

        Args:
            messages: Non-empty table of strings and Candidates mappings
            locale: Locale code, defaults to the host language
            host: Host providing language and warning sink, defaults to get_host()
            dispatcher: Queue for deferred diagnostics, defaults to get_dispatcher()

        Raises:
            InvalidParameterError: If messages is not a non-empty mapping or
                locale is not a string
            InvalidCandidateShapeError: If an entry is neither str nor Candidates
            NoMatchingVariantError: If an entry has no usable variant
        """
        self._host = host if host is not None else get_host()
        self._host.initialize()
        if locale is None:
            locale = self._host.config.language

        registry = self._host.messages
        if not isinstance(messages, Mapping) or not messages:
            raise InvalidParameterError(
                ErrorTemplate.invalid_parameter("messages", registry=registry),
                parameter="messages",
                registry=registry,
            )
        if not isinstance(locale, str):
            raise InvalidParameterError(
                ErrorTemplate.invalid_parameter(
                    "locale", "str", type(locale).__name__, registry=registry
                ),
                parameter="locale",
                expected="str",
                actual=type(locale).__name__,
                registry=registry,
            )

        self._locale: str = locale
        self._messages: ResolvedMessages = MappingProxyType(
            batch_elect(messages, locale, registry=registry)
        )
        self._dispatcher = dispatcher
        self._warned: set[str] = set()
        self._warned_lock = threading.Lock()
        logger.debug(
            "LocalizedMessageSet created with %d messages for locale '%s'",
            len(self._messages),
            locale,
        )

    @property
    def locale(self) -> str:
        return self._locale

    def dump(self) -> ResolvedMessages:
        """Return all elected messages as a read-only mapping."""
        return self._messages

    def get(self, key: str) -> str:
        """Return the message for key, or key itself if it is unknown.

        The first miss of each key schedules a warning; the lookup itself
        never blocks on it. If the dispatcher is closed the warning is
        dropped and the key stays eligible for a later report.
        """
        try:
            return self._messages[key]
        except KeyError:
            pass

        with self._warned_lock:
            first_miss = key not in self._warned
            self._warned.add(key)
        if first_miss:
            dispatcher = self._dispatcher if self._dispatcher is not None else get_dispatcher()
            try:
                dispatcher.schedule(self._report_missing_key, key)
            except RuntimeError:
                with self._warned_lock:
                    self._warned.discard(key)
                logger.debug("Missing key '%s' not reported: dispatcher closed", key)
        return key

    def attach[R](self, executor: Callable[[MessageGetter], R]) -> R:
        """Call executor with a message getter and return its result.

        Raises:
            InvalidParameterError: If executor is not callable
        """
        if not callable(executor):
            registry = self._host.messages
            raise InvalidParameterError(
                ErrorTemplate.invalid_parameter("executor", registry=registry),
                parameter="executor",
                registry=registry,
            )
        return executor(self.get)

    def _report_missing_key(self, key: str) -> None:
        suggestion = closest_match(key, self._messages)
        diagnostic = ErrorTemplate.key_not_found(key, suggestion, registry=self._host.messages)
        self._host.warn(diagnostic.message)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"LocalizedMessageSet(locale={self._locale!r}, messages={len(self._messages)})"
