# topmark:header:start
#
#   project      : ThemeKit
#   file         : columns.py
#   file_relpath : src/themekit/layout/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column classes for float-based 12-column grids.

Bootstrap-style classes such as ``col-lg-4`` carry the span of an item. In a
float grid the first item of every row needs a clearing class; for an item at
``current_index`` that starts a row of ``d`` items, the span ``12 // d`` in its
class is swapped for ``first`` (``col-lg-4`` -> ``col-lg-first``).

Divisor passes run in the order 2, 3, 4, 6 over one growing list: a pass
scans the classes present when it starts, so classes derived by an earlier
pass are candidates for the later ones. Classes containing ``12`` (full
width) are never rewritten.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from themekit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from themekit.config.logging import ThemekitLogger

logger: ThemekitLogger = get_logger(__name__)

GRID_COLUMNS: Final[int] = 12
COLUMN_DIVISORS: Final[tuple[int, ...]] = (2, 3, 4, 6)
FIRST_MARKER: Final[str] = "first"
FULL_WIDTH_MARKER: Final[str] = str(GRID_COLUMNS)


def first_classes(classes: Sequence[str], current_index: int) -> list[str]:
    """Return ``classes`` followed by the "first" classes derived for ``current_index``.

    Args:
        classes (Sequence[str]): Grid classes, e.g. ``["col-lg-4", "col-md-6"]``.
        current_index (int): Position of the item in its loop.

    Returns:
        list[str]: A new list; the input is not modified.
    """
    result: list[str] = list(classes)
    for divisor in COLUMN_DIVISORS:
        if current_index % divisor != 0:
            continue
        span: str = str(GRID_COLUMNS // divisor)
        for cls in result[:]:
            if span in cls and FULL_WIDTH_MARKER not in cls:
                result.append(cls.replace(span, FIRST_MARKER))
    logger.trace("column classes for index %d: %s", current_index, result)
    return result


def column_class(
    classes: Sequence[str],
    current_index: int | None = None,
    join: bool = True,
) -> str | Sequence[str]:
    """Add "first" classes for clearing floats in a grid loop.

    Args:
        classes (Sequence[str]): Grid classes, e.g. ``["col-lg-4", "col-md-6"]``.
        current_index (int | None): Position of the item in its loop; None when
            there is no loop context.
        join (bool): Return a space-joined string (True) or a list (False).

    Returns:
        str | Sequence[str]: ``classes`` unchanged when ``current_index`` is None,
            otherwise the extended classes joined or as a list.
    """
    if current_index is None:
        return classes

    result: list[str] = first_classes(classes, current_index)
    if join:
        return " ".join(result)
    return result
