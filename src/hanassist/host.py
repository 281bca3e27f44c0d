"""Host environment: locale configuration, message registry, warning sink.

HanAssist runs inside a host application that owns the current user language
and script variant, a message registry, and a warning log. Host bundles these
so the election core never reads global state directly.

A process-wide host is created from the environment on first use; hosts
embedding HanAssist install their own with set_host().

Example:
    >>> host = Host(HostConfig(language="zh-tw"))
    >>> host.initialize()
    >>> set_host(host)
    >>> host.messages.format("similar-key-suggestion", "image")
    '您是指「image」嗎？'

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass

from hanassist.constants import (
    DEFAULT_PREFERRED_VARIANT,
    ENV_LANGUAGE,
    ENV_PREFERRED_VARIANT,
    ENV_VARIANT,
)
from hanassist.election import batch_elect
from hanassist.locale_utils import get_system_locale
from hanassist.messages import CORE_MESSAGES, MessageRegistry

__all__ = [
    "Host",
    "HostConfig",
    "get_host",
    "reset_host",
    "set_host",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HostConfig:
    """Locale settings supplied by the host application.

    Attributes:
        language: User interface language (used by localize() and message sets)
        variant: Explicit script variant for the current page or session, if any
        preferred_variant: The user's preferred variant, used when variant is None
    """

    language: str
    variant: str | None = None
    preferred_variant: str = DEFAULT_PREFERRED_VARIANT

    def __post_init__(self) -> None:
        """Validate HostConfig fields.

        Raises:
            TypeError: If language or preferred_variant is not a string, or
                variant is neither a string nor None.
        """
        if not isinstance(self.language, str):
            msg = f"HostConfig.language must be str, got {type(self.language).__name__}"
            raise TypeError(msg)
        if self.variant is not None and not isinstance(self.variant, str):
            msg = f"HostConfig.variant must be str or None, got {type(self.variant).__name__}"
            raise TypeError(msg)
        if not isinstance(self.preferred_variant, str):
            msg = (
                "HostConfig.preferred_variant must be str, "
                f"got {type(self.preferred_variant).__name__}"
            )
            raise TypeError(msg)

    @property
    def effective_variant(self) -> str:
        """Variant used by vary(): the explicit variant, else the preference."""
        return self.variant or self.preferred_variant

    @classmethod
    def from_environment(cls) -> HostConfig:
        """Build a config from HANASSIST_* environment variables.

        HANASSIST_LANGUAGE falls back to the system locale,
        HANASSIST_PREFERRED_VARIANT to "zh". HANASSIST_VARIANT has no default.
        """
        return cls(
            language=os.environ.get(ENV_LANGUAGE) or get_system_locale(),
            variant=os.environ.get(ENV_VARIANT) or None,
            preferred_variant=os.environ.get(ENV_PREFERRED_VARIANT) or DEFAULT_PREFERRED_VARIANT,
        )


def _log_warning(text: str) -> None:
    logger.warning("%s", text)


class Host:
    """Services HanAssist consumes from its host application.

    Attributes:
        config: Locale settings
        messages: Message registry used to render diagnostics
        warn: Sink for rendered warning text
    """

    __slots__ = ("_initialized", "config", "messages", "warn")

    def __init__(
        self,
        config: HostConfig,
        *,
        messages: MessageRegistry | None = None,
        warn: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config
        self.messages = messages if messages is not None else MessageRegistry()
        self.warn: Callable[[str], None] = warn if warn is not None else _log_warning
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Register HanAssist's diagnostic messages in the host language.

        Must run before message sets are constructed so errors and warnings
        render as text instead of "{message-id}" placeholders. Repeated
        calls are no-ops.
        """
        if self._initialized:
            return
        self.messages.set(batch_elect(CORE_MESSAGES, self.config.language))
        self._initialized = True
        logger.debug("Registered core messages for language '%s'", self.config.language)

    def __repr__(self) -> str:
        return f"Host(config={self.config!r}, initialized={self._initialized})"


_host: Host | None = None
_host_lock = threading.RLock()


def get_host() -> Host:
    """Return the process-wide host, creating it from the environment if needed."""
    global _host  # noqa: PLW0603 - process-wide singleton
    with _host_lock:
        if _host is None:
            _host = Host(HostConfig.from_environment())
            _host.initialize()
        return _host


def set_host(host: Host) -> None:
    """Install a host; it is initialized if it has not been already."""
    global _host  # noqa: PLW0603 - process-wide singleton
    with _host_lock:
        _host = host
        host.initialize()


def reset_host() -> None:
    """Drop the process-wide host; the next get_host() rebuilds it."""
    global _host  # noqa: PLW0603 - process-wide singleton
    with _host_lock:
        _host = None
