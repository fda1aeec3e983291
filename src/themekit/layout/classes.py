# topmark:header:start
#
#   project      : ThemeKit
#   file         : classes.py
#   file_relpath : src/themekit/layout/classes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small attribute builders used by templates."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Hashable


class ImageUrlLookup(Protocol):
    """Host lookup returning the URL of an image attachment at a given size."""

    def __call__(self, image_id: Hashable, image_size: str) -> str | None: ...


def conditional_class(base_classes: str, optional_class: str, conditional: object) -> str:
    """Return ``base_classes``, plus ``optional_class`` when ``conditional`` is truthy.

    Args:
        base_classes (str): Classes always applied.
        optional_class (str): Class applied only when ``conditional`` holds.
        conditional (object): Condition, evaluated for truthiness.

    Returns:
        str: The class attribute value.
    """
    return f"{base_classes} {optional_class}" if conditional else base_classes


def bg_image_style(
    image_id: Hashable | None,
    image_size: str = "full",
    *,
    image_url: ImageUrlLookup,
) -> str | None:
    """Return an inline ``style`` attribute setting an image as background.

    The returned string starts with a space so it can be appended directly
    after an element name or another attribute.

    Args:
        image_id (Hashable | None): Attachment identifier; empty values yield None.
        image_size (str): Named image size passed to ``image_url``.
        image_url (ImageUrlLookup): Host lookup resolving the attachment URL.

    Returns:
        str | None: `` style="background-image: url(...);"`` or None.
    """
    if not image_id:
        return None
    url: str | None = image_url(image_id, image_size)
    if not url:
        return None
    return f' style="background-image: url({escape(url, quote=True)});"'
