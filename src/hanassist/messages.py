"""Message registry and HanAssist's own diagnostic messages.

MessageRegistry is the host's flat name -> string message store. Messages may
contain positional placeholders ($1, $2, ...) filled in by format().

CORE_MESSAGES are the templates HanAssist renders its own errors and
warnings with. They are elected for the host language and registered once,
by Host.initialize().

Python 3.13+.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from hanassist.constants import FALLBACK_MISSING_MESSAGE, HELP_URL

if TYPE_CHECKING:
    from hanassist.types import MessageDefinition

__all__ = [
    "CORE_MESSAGES",
    "MessageRegistry",
]

_PLACEHOLDER = re.compile(r"\$(\d+)")

CORE_MESSAGES: Mapping[str, MessageDefinition] = MappingProxyType({
    "generic-error": {
        "hans": f"HanAssist 错误：$1。\n有关 HanAssist 的更多信息，请参见 {HELP_URL}。",
        "hant": f"HanAssist 錯誤：$1。\n有關 HanAssist 的更多資訊，請參見 {HELP_URL}。",
        "en": f"HanAssist error: $1.\nFor more information of HanAssist, see {HELP_URL}.",
    },
    "invalid-parameter": {
        "hans": "无效参数“$1”$2",
        "hant": "無效參數「$1」$2",
        "en": 'Invalid parameter "$1"$2',
    },
    "invalid-parameter-detail": {
        "hans": "，应为“$1”，实为“$2”",
        "hant": "，應為「$1」，實為「$2」",
        "en": ", Expected $1 but got $2",
    },
    "no-message-found": {
        "hans": "无法从“$1”中选择正确的消息，当前区域设置：$2",
        "hant": "無法從「$1」中選擇正確的訊息，地區設定：$2",
        "en": 'Failed to select message from "$1" in locale "$2"',
    },
    "deprecated-use": {
        "hans": "请使用 $1 作为替代。",
        "hant": "請使用 $1 作為替代。",
        "en": "Use $1 instead.",
    },
    "key-not-found": {
        "hans": "HanAssist：未找到键“$1”。$2",
        "hant": "HanAssist：未找到鍵「$1」。$2",
        "en": 'HanAssist: Key "$1" not found. $2',
    },
    "similar-key-suggestion": {
        "hans": "您是指“$1”吗？",
        "hant": "您是指「$1」嗎？",
        "en": 'Do you mean "$1"?',
    },
})


class MessageRegistry:
    """Thread-safe flat message store with positional placeholders.

    Example:
        >>> registry = MessageRegistry()
        >>> registry.set({"greet": "Hello, $1!"})
        >>> registry.format("greet", "Anna")
        'Hello, Anna!'
        >>> registry.format("missing")
        '{missing}'
    """

    __slots__ = ("_lock", "_messages")

    def __init__(self) -> None:
        self._messages: dict[str, str] = {}
        self._lock = threading.Lock()

    def set(self, messages: Mapping[str, str]) -> None:
        """Register messages, replacing existing entries of the same name."""
        with self._lock:
            self._messages.update(messages)

    def get(self, message_id: str) -> str | None:
        """Return the raw (unformatted) message, or None if unregistered."""
        return self._messages.get(message_id)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def format(self, message_id: str, *args: object) -> str:
        """Render a message, replacing $N with the N-th positional argument.

        Placeholders without a matching argument are left verbatim.
        Unregistered ids render as "{message-id}".
        """
        template = self._messages.get(message_id)
        if template is None:
            return FALLBACK_MISSING_MESSAGE.format(id=message_id)

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1)) - 1
            if 0 <= index < len(args):
                return str(args[index])
            return match.group(0)

        return _PLACEHOLDER.sub(substitute, template)
