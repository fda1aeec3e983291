# topmark:header:start
#
#   project      : ThemeKit
#   file         : renderer.py
#   file_relpath : src/themekit/icons/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline SVG icon rendering.

`IconRenderer` reads an icon from an `IconCatalog` and rewrites the opening
``<svg `` of its root element to carry the rendering attributes::

    <svg class="svg-icon extra" width="24" height="24" aria-hidden="true"
         role="img" focusable="false" viewBox="0 0 16 16">

then collapses the markup onto one line. A labelled icon is not decorative:
it gets ``aria-label`` right after the class attribute, and every
``aria-hidden="true"`` in its source is removed.

The rewrite is text-level, not an XML parse. It requires the trimmed source
to start with ``<svg `` (one root element, no XML prolog or comments before
it). Sources that do not are returned whitespace-normalized but otherwise
untouched, with ``IconResult.rewritten`` set to False and a warning logged;
a renderer in strict mode raises `IconRewriteError` instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from html import escape
from typing import TYPE_CHECKING, Final

from themekit.config.logging import get_logger
from themekit.constants import DEFAULT_ICON_CLASS, DEFAULT_ICON_GROUP, DEFAULT_ICON_SIZE
from themekit.diagnostic import DiagnosticLog, FrozenDiagnosticLog
from themekit.icons.catalog import IconCatalog

if TYPE_CHECKING:
    from pathlib import Path

    from themekit.config.logging import ThemekitLogger
    from themekit.config.model import Config

logger: ThemekitLogger = get_logger(__name__)

SVG_OPEN_TAG: Final[str] = "<svg "

_NEWLINES_TABS_RE: Final[re.Pattern[str]] = re.compile(r"[\r\n\t]+")
_INTER_TAG_WS_RE: Final[re.Pattern[str]] = re.compile(r">\s*<")
_ARIA_HIDDEN_RE: Final[re.Pattern[str]] = re.compile(r"\s*aria-hidden=(\"|')true\1")


class IconRewriteError(ValueError):
    """Raised in strict mode when an icon source has no leading ``<svg `` root tag."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Icon source does not start with '{SVG_OPEN_TAG.strip()}': {path}")
        self.path = path


@dataclass(frozen=True, slots=True)
class IconResult:
    """Rendered icon with rewrite status.

    Attributes:
        markup (str): Single-line SVG markup.
        path (Path): Source file of the icon.
        rewritten (bool): False when the root tag could not be rewritten and
            ``markup`` is the normalized source as-is.
        diagnostics (FrozenDiagnosticLog): Notes collected while rendering.
    """

    markup: str
    path: Path
    rewritten: bool = True
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)


def collapse_whitespace(svg: str) -> str:
    """Join ``svg`` onto one line and drop the whitespace between adjacent tags."""
    svg = _NEWLINES_TABS_RE.sub(" ", svg)
    return _INTER_TAG_WS_RE.sub("><", svg)


def strip_aria_hidden(svg: str) -> str:
    """Remove every ``aria-hidden="true"`` attribute from ``svg``."""
    return _ARIA_HIDDEN_RE.sub("", svg)


def build_open_tag(class_value: str, size: int, label: str | None = None) -> str:
    """Return the replacement for the leading ``<svg `` of an icon source.

    Args:
        class_value (str): Already escaped class attribute value.
        size (int): Width and height in pixels.
        label (str | None): Accessible label; when set the icon is not hidden from
            assistive technology.

    Returns:
        str: The opening of the root tag, ending with a space.
    """
    attrs: list[str] = [f'class="{class_value}"']
    if label:
        attrs.append(f'aria-label="{escape(label, quote=True)}"')
    attrs.extend((f'width="{size}"', f'height="{size}"'))
    if not label:
        attrs.append('aria-hidden="true"')
    attrs.extend(('role="img"', 'focusable="false"'))
    return f"<svg {' '.join(attrs)} "


class IconRenderer:
    """Render icons from a catalog as inline SVG markup.

    Args:
        catalog (IconCatalog): Source of icon files.
        default_group (str): Group used when callers pass none.
        default_size (int): Size used when callers pass none.
        base_class (str): Class always set on the root element.
        strict (bool): Raise `IconRewriteError` for malformed sources instead of
            passing them through.
    """

    def __init__(
        self,
        catalog: IconCatalog,
        *,
        default_group: str = DEFAULT_ICON_GROUP,
        default_size: int = DEFAULT_ICON_SIZE,
        base_class: str = DEFAULT_ICON_CLASS,
        strict: bool = False,
    ) -> None:
        self.catalog = catalog
        self.default_group = default_group
        self.default_size = _check_size(default_size)
        self.base_class = base_class
        self.strict = strict

    @classmethod
    def from_config(cls, config: Config) -> IconRenderer:
        """Build a renderer from the ``[icons]`` settings of ``config``."""
        return cls(
            IconCatalog(config.icon_root),
            default_group=config.icon_group,
            default_size=config.icon_size,
            base_class=config.icon_base_class,
            strict=config.icon_strict,
        )

    def render_result(
        self,
        icon: str | None,
        group: str | None = None,
        size: int | None = None,
        css_class: str | None = None,
        label: str | None = None,
    ) -> IconResult | None:
        """Render ``icon`` and report whether the root tag was rewritten.

        Args:
            icon (str | None): Icon name, without the ``.svg`` suffix.
            group (str | None): Icon group; defaults to ``default_group``.
            size (int | None): Width and height in pixels; defaults to ``default_size``.
            css_class (str | None): Extra classes for the root element.
            label (str | None): Accessible label for meaningful icons.

        Returns:
            IconResult | None: The rendered icon, or None when ``icon`` is empty or
                the catalog has no such icon.

        Raises:
            ValueError: If ``size`` is not a positive integer.
            IconRewriteError: In strict mode, if the source has no leading ``<svg ``.
        """
        if not icon:
            return None
        px: int = _check_size(size if size is not None else self.default_size)
        found: tuple[Path, str] | None = self.catalog.read(icon, group or self.default_group)
        if found is None:
            return None
        path, source = found

        class_value: str = self.base_class
        if css_class:
            class_value = f"{class_value} {escape(css_class, quote=True)}"

        log = DiagnosticLog()
        svg: str = source.strip()
        rewritten: bool = svg.startswith(SVG_OPEN_TAG)
        if rewritten:
            svg = build_open_tag(class_value, px, label) + svg[len(SVG_OPEN_TAG) :]
        else:
            if self.strict:
                raise IconRewriteError(path)
            logger.warning("Icon %s has no leading %r; attributes not injected", path, "<svg ")
            log.add_warning(f"{path}: no leading <svg root tag; returned unmodified")
        if label:
            # A labelled icon must not be hidden anywhere in its tree.
            svg = strip_aria_hidden(svg)

        return IconResult(
            markup=collapse_whitespace(svg),
            path=path,
            rewritten=rewritten,
            diagnostics=log.freeze(),
        )

    def render(
        self,
        icon: str | None,
        group: str | None = None,
        size: int | None = None,
        css_class: str | None = None,
        label: str | None = None,
    ) -> str | None:
        """Return the inline SVG markup of ``icon``, or None if it does not exist.

        See `render_result` for the arguments and the malformed-source outcome.
        """
        result: IconResult | None = self.render_result(icon, group, size, css_class, label)
        return result.markup if result is not None else None


def render_icon(
    icon: str | None,
    group: str | None = None,
    size: int | None = None,
    css_class: str | None = None,
    label: str | None = None,
    *,
    config: Config,
) -> str | None:
    """Render ``icon`` with a renderer built from ``config``."""
    return IconRenderer.from_config(config).render(icon, group, size, css_class, label)


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValueError(f"Icon size must be a positive integer, got {size!r}")
    return size
