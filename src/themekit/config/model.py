# topmark:header:start
#
#   project      : ThemeKit
#   file         : model.py
#   file_relpath : src/themekit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to the helpers.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Sources, in increasing precedence:
    1. built-in defaults,
    2. ``[tool.themekit]`` in the nearest ``pyproject.toml``,
    3. ``themekit.toml`` next to it,
    4. explicitly passed config files,
    5. overrides (e.g. CLI options).

Unset values are ``None`` in `MutableConfig`; `MutableConfig.freeze`
fills them from the defaults. Relative ``icons.root`` paths declared in a
config file are resolved against that file's directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from themekit.config.io import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_str_list_or_none_checked,
    get_string_value_or_none_checked,
    get_table_list_or_none_checked,
    get_table_value,
    load_toml_dict,
)
from themekit.config.keys import Toml
from themekit.config.logging import get_logger
from themekit.constants import (
    DEFAULT_CONTENT_WIDTH,
    DEFAULT_FONT_FAMILIES,
    DEFAULT_FONT_SUBSET,
    DEFAULT_ICON_CLASS,
    DEFAULT_ICON_GROUP,
    DEFAULT_ICON_ROOT,
    DEFAULT_ICON_SIZE,
    DEFAULT_TAXONOMY,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    THEMEKIT_TOML_NAME,
)
from themekit.diagnostic import DiagnosticLog, FrozenDiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from themekit.config.io import TomlTable
    from themekit.config.logging import ThemekitLogger

logger: ThemekitLogger = get_logger(__name__)

KNOWN_SECTIONS: frozenset[str] = frozenset(
    {Toml.SECTION_ICONS, Toml.SECTION_TERMS, Toml.SECTION_FONTS, Toml.SECTION_THEME}
)


@dataclass(frozen=True, slots=True)
class FontSize:
    """An editor font size preset."""

    name: str
    short_name: str
    size: int
    slug: str


@dataclass(frozen=True, slots=True)
class PaletteColor:
    """An editor color palette entry."""

    name: str
    slug: str
    color: str


DEFAULT_FONT_SIZES: tuple[FontSize, ...] = (
    FontSize("small", "S", 12, "small"),
    FontSize("regular", "M", 16, "regular"),
    FontSize("large", "L", 20, "large"),
)

DEFAULT_COLORS: tuple[PaletteColor, ...] = (
    PaletteColor("Blue", "blue", "#59BACC"),
    PaletteColor("Green", "green", "#58AD69"),
    PaletteColor("Orange", "orange", "#FFBC49"),
    PaletteColor("Red", "red", "#E2574C"),
)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ThemeKit.

    Attributes:
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
        icon_root (Path): Directory of the icon catalog.
        icon_group (str): Default icon group.
        icon_size (int): Default icon size in pixels.
        icon_base_class (str): Class always set on rendered icons.
        icon_strict (bool): Raise instead of passing through malformed icon sources.
        taxonomy (str): Default taxonomy for term resolution.
        font_families (tuple[str, ...]): Web-font families (``Family:variants``).
        font_subset (str): Web-font character subsets.
        content_width (int): Maximum content width in pixels.
        font_sizes (tuple[FontSize, ...]): Editor font size presets.
        colors (tuple[PaletteColor, ...]): Editor color palette.
        diagnostics (FrozenDiagnosticLog): Warnings collected while loading.
    """

    config_files: tuple[Path, ...]
    icon_root: Path
    icon_group: str
    icon_size: int
    icon_base_class: str
    icon_strict: bool
    taxonomy: str
    font_families: tuple[str, ...]
    font_subset: str
    content_width: int
    font_sizes: tuple[FontSize, ...]
    colors: tuple[PaletteColor, ...]
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_ICONS: {
                Toml.KEY_ICON_ROOT: str(self.icon_root),
                Toml.KEY_ICON_GROUP: self.icon_group,
                Toml.KEY_ICON_SIZE: self.icon_size,
                Toml.KEY_ICON_BASE_CLASS: self.icon_base_class,
                Toml.KEY_ICON_STRICT: self.icon_strict,
            },
            Toml.SECTION_TERMS: {
                Toml.KEY_TAXONOMY: self.taxonomy,
            },
            Toml.SECTION_FONTS: {
                Toml.KEY_FONT_FAMILIES: list(self.font_families),
                Toml.KEY_FONT_SUBSET: self.font_subset,
            },
            Toml.SECTION_THEME: {
                Toml.KEY_CONTENT_WIDTH: self.content_width,
                Toml.KEY_FONT_SIZES: [
                    {
                        Toml.KEY_NAME: fs.name,
                        Toml.KEY_SHORT_NAME: fs.short_name,
                        Toml.KEY_SIZE: fs.size,
                        Toml.KEY_SLUG: fs.slug,
                    }
                    for fs in self.font_sizes
                ],
                Toml.KEY_COLORS: [
                    {Toml.KEY_NAME: c.name, Toml.KEY_SLUG: c.slug, Toml.KEY_COLOR: c.color}
                    for c in self.colors
                ],
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            config_files=list(self.config_files),
            icon_root=self.icon_root,
            icon_group=self.icon_group,
            icon_size=self.icon_size,
            icon_base_class=self.icon_base_class,
            icon_strict=self.icon_strict,
            taxonomy=self.taxonomy,
            font_families=list(self.font_families),
            font_subset=self.font_subset,
            content_width=self.content_width,
            font_sizes=list(self.font_sizes),
            colors=list(self.colors),
            diagnostics=DiagnosticLog(items=list(self.diagnostics.items)),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration draft; ``None`` means "not set at this layer"."""

    config_files: list[Path] = field(default_factory=lambda: [])
    icon_root: Path | None = None
    icon_group: str | None = None
    icon_size: int | None = None
    icon_base_class: str | None = None
    icon_strict: bool | None = None
    taxonomy: str | None = None
    font_families: list[str] | None = None
    font_subset: str | None = None
    content_width: int | None = None
    font_sizes: list[FontSize] | None = None
    colors: list[PaletteColor] | None = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> Config:
        """Fill unset values with defaults, validate, and return an immutable `Config`."""
        icon_size: int = self.icon_size if self.icon_size is not None else DEFAULT_ICON_SIZE
        if icon_size < 1:
            self.diagnostics.add_warning(
                f"icons.size must be positive, got {icon_size}; using {DEFAULT_ICON_SIZE}"
            )
            icon_size = DEFAULT_ICON_SIZE
        content_width: int = (
            self.content_width if self.content_width is not None else DEFAULT_CONTENT_WIDTH
        )
        if content_width < 1:
            self.diagnostics.add_warning(
                f"theme.content_width must be positive, got {content_width}; "
                f"using {DEFAULT_CONTENT_WIDTH}"
            )
            content_width = DEFAULT_CONTENT_WIDTH

        return Config(
            config_files=tuple(self.config_files),
            icon_root=self.icon_root if self.icon_root is not None else Path(DEFAULT_ICON_ROOT),
            icon_group=self.icon_group or DEFAULT_ICON_GROUP,
            icon_size=icon_size,
            icon_base_class=self.icon_base_class or DEFAULT_ICON_CLASS,
            icon_strict=bool(self.icon_strict),
            taxonomy=self.taxonomy or DEFAULT_TAXONOMY,
            font_families=tuple(
                self.font_families if self.font_families is not None else DEFAULT_FONT_FAMILIES
            ),
            font_subset=self.font_subset if self.font_subset is not None else DEFAULT_FONT_SUBSET,
            content_width=content_width,
            font_sizes=tuple(
                self.font_sizes if self.font_sizes is not None else DEFAULT_FONT_SIZES
            ),
            colors=tuple(self.colors if self.colors is not None else DEFAULT_COLORS),
            diagnostics=self.diagnostics.freeze(),
        )

    # ------------------------------- Loading -------------------------------

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a parsed ThemeKit TOML table.

        Args:
            data (TomlTable): The ThemeKit table (top level of ``themekit.toml`` or
                ``[tool.themekit]``).
            config_file (Path | None): File the table came from; relative paths are
                resolved against its directory.

        Returns:
            MutableConfig: The draft; type problems are recorded in ``diagnostics``.
        """
        draft = cls()
        diags: DiagnosticLog = draft.diagnostics
        where_prefix: str = f"{config_file}: " if config_file else ""

        for section in data:
            if section not in KNOWN_SECTIONS:
                msg: str = f"{where_prefix}unknown section [{section}] ignored"
                logger.warning(msg)
                diags.add_warning(msg)

        icons: TomlTable = get_table_value(data, Toml.SECTION_ICONS)
        where: str = f"{where_prefix}{Toml.SECTION_ICONS}"
        root: str | None = get_string_value_or_none_checked(
            icons, Toml.KEY_ICON_ROOT, where=where, diagnostics=diags
        )
        if root is not None:
            base: Path = config_file.parent if config_file is not None else Path.cwd()
            root_path = Path(root)
            draft.icon_root = root_path if root_path.is_absolute() else (base / root_path)
        draft.icon_group = get_string_value_or_none_checked(
            icons, Toml.KEY_ICON_GROUP, where=where, diagnostics=diags
        )
        draft.icon_size = get_int_value_or_none_checked(
            icons, Toml.KEY_ICON_SIZE, where=where, diagnostics=diags
        )
        draft.icon_base_class = get_string_value_or_none_checked(
            icons, Toml.KEY_ICON_BASE_CLASS, where=where, diagnostics=diags
        )
        draft.icon_strict = get_bool_value_or_none_checked(
            icons, Toml.KEY_ICON_STRICT, where=where, diagnostics=diags
        )

        terms: TomlTable = get_table_value(data, Toml.SECTION_TERMS)
        draft.taxonomy = get_string_value_or_none_checked(
            terms,
            Toml.KEY_TAXONOMY,
            where=f"{where_prefix}{Toml.SECTION_TERMS}",
            diagnostics=diags,
        )

        fonts: TomlTable = get_table_value(data, Toml.SECTION_FONTS)
        where = f"{where_prefix}{Toml.SECTION_FONTS}"
        draft.font_families = get_str_list_or_none_checked(
            fonts, Toml.KEY_FONT_FAMILIES, where=where, diagnostics=diags
        )
        draft.font_subset = get_string_value_or_none_checked(
            fonts, Toml.KEY_FONT_SUBSET, where=where, diagnostics=diags
        )

        theme: TomlTable = get_table_value(data, Toml.SECTION_THEME)
        where = f"{where_prefix}{Toml.SECTION_THEME}"
        draft.content_width = get_int_value_or_none_checked(
            theme, Toml.KEY_CONTENT_WIDTH, where=where, diagnostics=diags
        )
        raw_sizes: list[TomlTable] | None = get_table_list_or_none_checked(
            theme, Toml.KEY_FONT_SIZES, where=where, diagnostics=diags
        )
        if raw_sizes is not None:
            draft.font_sizes = _parse_entries(raw_sizes, _font_size_from_table, where, diags)
        raw_colors: list[TomlTable] | None = get_table_list_or_none_checked(
            theme, Toml.KEY_COLORS, where=where, diagnostics=diags
        )
        if raw_colors is not None:
            draft.colors = _parse_entries(raw_colors, _color_from_table, where, diags)

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``themekit.toml`` and ``pyproject.toml``; for the latter
        the ``[tool.themekit]`` section is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None when a ``pyproject.toml`` has
                no ``[tool.themekit]`` section.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool_section: Any = get_table_value(data, "tool").get(PYPROJECT_TOOL_SECTION)
            if not isinstance(tool_section, dict):
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = tool_section
        return cls.from_toml_dict(data, config_file=path.resolve())

    @classmethod
    def discover_config_files(cls, start: Path) -> list[Path]:
        """Return the config files of the nearest configured directory at or above ``start``.

        Within that directory ``pyproject.toml`` comes before ``themekit.toml`` so
        the latter wins when merged. The walk stops at a repository root
        (a directory containing ``.git``).
        """
        current: Path = start.resolve()
        if current.is_file():
            current = current.parent
        for directory in (current, *current.parents):
            found: list[Path] = [
                p
                for p in (directory / PYPROJECT_TOML_NAME, directory / THEMEKIT_TOML_NAME)
                if p.is_file()
            ]
            if found:
                return found
            if (directory / ".git").exists():
                break
        return []

    @classmethod
    def load_merged(
        cls,
        start: Path | None = None,
        *,
        extra_config_files: Iterable[Path] = (),
        overrides: Mapping[str, Any] | None = None,
        discover: bool = True,
    ) -> MutableConfig:
        """Merge discovered config, explicit config files and overrides into one draft.

        Args:
            start (Path | None): Directory to start discovery from (defaults to CWD).
            extra_config_files (Iterable[Path]): Explicit config files, applied in order.
            overrides (Mapping[str, Any] | None): Field overrides applied last.
            discover (bool): Whether to look for project config files at all.

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If one of the files cannot be read or parsed.
        """
        merged = cls()
        paths: list[Path] = cls.discover_config_files(start or Path.cwd()) if discover else []
        paths.extend(extra_config_files)
        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        if overrides:
            merged = merged.apply_overrides(overrides)
        logger.debug("Merged config from %d file(s)", len(merged.config_files))
        return merged

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""

        def pick(name: str) -> Any:
            value: Any = getattr(other, name)
            return value if value is not None else getattr(self, name)

        return MutableConfig(
            config_files=self.config_files + other.config_files,
            icon_root=pick("icon_root"),
            icon_group=pick("icon_group"),
            icon_size=pick("icon_size"),
            icon_base_class=pick("icon_base_class"),
            icon_strict=pick("icon_strict"),
            taxonomy=pick("taxonomy"),
            font_families=pick("font_families"),
            font_subset=pick("font_subset"),
            content_width=pick("content_width"),
            font_sizes=pick("font_sizes"),
            colors=pick("colors"),
            diagnostics=DiagnosticLog(items=self.diagnostics.items + other.diagnostics.items),
        )

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableConfig:
        """Return a new draft with the non-None ``overrides`` applied.

        Keys are `MutableConfig` field names (e.g. ``"icon_size"``).

        Raises:
            KeyError: If a key does not name a configurable field.
        """
        layer = MutableConfig()
        for key, value in overrides.items():
            if key in ("config_files", "diagnostics") or not hasattr(layer, key):
                raise KeyError(f"Unknown config override: {key}")
            if value is not None:
                setattr(layer, key, Path(value) if key == "icon_root" else value)
        return self.merge_with(layer)


def _parse_entries(
    raw: list[TomlTable],
    build: Any,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[Any]:
    entries: list[Any] = []
    for index, table in enumerate(raw):
        try:
            entries.append(build(table))
        except (KeyError, TypeError, ValueError) as exc:
            msg: str = f"{where}: entry #{index} ignored ({exc})"
            logger.warning(msg)
            diagnostics.add_warning(msg)
    return entries


def _font_size_from_table(table: TomlTable) -> FontSize:
    name: str = str(table[Toml.KEY_NAME])
    size: object = table[Toml.KEY_SIZE]
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError(f"{Toml.KEY_SIZE} must be an integer")
    return FontSize(
        name=name,
        short_name=str(table.get(Toml.KEY_SHORT_NAME, name[:1].upper())),
        size=size,
        slug=str(table.get(Toml.KEY_SLUG, name)),
    )


def _color_from_table(table: TomlTable) -> PaletteColor:
    name: str = str(table[Toml.KEY_NAME])
    color: str = str(table[Toml.KEY_COLOR])
    if not color.startswith("#"):
        raise ValueError(f"{Toml.KEY_COLOR} must be a hex color, got {color!r}")
    return PaletteColor(name=name, slug=str(table.get(Toml.KEY_SLUG, name.lower())), color=color)
