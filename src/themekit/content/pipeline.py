# topmark:header:start
#
#   project      : ThemeKit
#   file         : pipeline.py
#   file_relpath : src/themekit/content/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Priority-ordered text filter pipeline.

Themes often need the formatting of the host's post-content filter chain for
text that is not post content (term descriptions, option fields) without
triggering third-party callbacks hooked onto that chain. `ContentPipeline` is
a private chain of the same shape: callbacks run by ascending priority, and
in registration order within one priority.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from themekit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from themekit.config.logging import ThemekitLogger

    TextFilter = Callable[[str], str]

logger: ThemekitLogger = get_logger(__name__)

DEFAULT_PRIORITY: int = 10


@dataclass(frozen=True, slots=True)
class _Registration:
    priority: int
    sequence: int
    callback: TextFilter


class ContentPipeline:
    """An ordered chain of ``str -> str`` filters."""

    def __init__(self) -> None:
        self._filters: list[_Registration] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._filters)

    def add_filter(self, callback: TextFilter, priority: int = DEFAULT_PRIORITY) -> None:
        """Register ``callback`` to run at ``priority`` (lower runs first)."""
        self._filters.append(_Registration(priority, next(self._sequence), callback))
        logger.trace("Added filter %r at priority %d", callback, priority)

    def remove_filter(self, callback: TextFilter, priority: int = DEFAULT_PRIORITY) -> bool:
        """Unregister ``callback`` at ``priority``.

        Returns:
            bool: True if a registration was removed.
        """
        for index, reg in enumerate(self._filters):
            if reg.callback == callback and reg.priority == priority:
                del self._filters[index]
                return True
        return False

    def has_filter(self, callback: TextFilter) -> bool:
        """Return True if ``callback`` is registered at any priority."""
        return any(reg.callback == callback for reg in self._filters)

    def apply(self, text: str) -> str:
        """Run ``text`` through every registered filter and return the result."""
        ordered: list[_Registration] = sorted(
            self._filters, key=lambda reg: (reg.priority, reg.sequence)
        )
        for reg in ordered:
            text = reg.callback(text)
        return text
