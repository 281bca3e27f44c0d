"""Deprecation support for the legacy positional API.

Legacy helpers are wrapped with @deprecated so every call emits a
DeprecationWarning attributed to the caller. The migration hint is the
host's "deprecated-use" message, so it reads in the host language:

    Use of "uls()" is deprecated. Use localize() instead.
    Use of "uls()" is deprecated. 请使用 localize() 作为替代。

Python 3.13+.
"""

import functools
import warnings
from collections.abc import Callable

from hanassist.diagnostics import ErrorTemplate

__all__ = [
    "deprecated",
    "warn_deprecated",
]

_DOC_NOTE = ".. deprecated::\n    Kept for positional call sites only."


def _deprecation_text(feature: str, alternative: str | None) -> str:
    text = f'Use of "{feature}" is deprecated.'
    if not alternative:
        return text
    return f"{text} {ErrorTemplate.deprecated_use(alternative).message}"


def warn_deprecated(
    feature: str,
    *,
    alternative: str | None = None,
    stacklevel: int = 2,
) -> None:
    """Emit a DeprecationWarning for feature.

    Args:
        feature: Display name of the deprecated callable, e.g. "uls()"
        alternative: Replacement to point to, rendered through the host registry
        stacklevel: Frame the warning is attributed to (2 = our caller)
    """
    warnings.warn(
        _deprecation_text(feature, alternative), DeprecationWarning, stacklevel=stacklevel
    )


def deprecated[**P, R](
    *,
    alternative: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Mark a function as deprecated.

    The wrapper warns on every call, then delegates. A deprecation note
    naming the alternative is appended to the docstring.

    Example:
        >>> @deprecated(alternative="localize()")
        ... def uls(hans: str) -> str:
        ...     return hans
        >>> uls("苹果")  # DeprecationWarning: Use of "uls()" is deprecated. ...
        '苹果'
    """

    def wrap(func: Callable[P, R]) -> Callable[P, R]:
        feature = f"{func.__qualname__}()"

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warn_deprecated(feature, alternative=alternative, stacklevel=3)
            return func(*args, **kwargs)

        note = _DOC_NOTE
        if alternative:
            note += f"\n    Use :func:`{alternative}` instead."
        wrapper.__doc__ = f"{wrapper.__doc__}\n\n{note}" if wrapper.__doc__ else note
        return wrapper

    return wrap
