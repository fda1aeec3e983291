# topmark:header:start
#
#   project      : ThemeKit
#   file         : io.py
#   file_relpath : src/themekit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and typed value extraction for ThemeKit configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are
unwrapped into plain `dict` structures (`TomlTable`). The ``*_checked``
getters record a warning diagnostic when a key is present with the wrong
type and fall back to "unset".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from themekit.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from themekit.config.logging import ThemekitLogger
    from themekit.diagnostic import DiagnosticLog

TomlTable = dict[str, Any]

logger: ThemekitLogger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``themekit.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists (TOML has no null)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict when absent or not a table."""
    value: Any = table.get(key)
    return cast("TomlTable", value) if isinstance(value, dict) else {}


def _warn_type(
    where: str, key: str, expected: str, value: object, diagnostics: DiagnosticLog
) -> None:
    msg: str = f"{where}.{key}: expected {expected}, got {type(value).__name__}; ignored"
    logger.warning(msg)
    diagnostics.add_warning(msg)


def get_string_value_or_none_checked(
    table: TomlTable, key: str, *, where: str, diagnostics: DiagnosticLog
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _warn_type(where, key, "string", value, diagnostics)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable, key: str, *, where: str, diagnostics: DiagnosticLog
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _warn_type(where, key, "boolean", value, diagnostics)
    return None


def get_int_value_or_none_checked(
    table: TomlTable, key: str, *, where: str, diagnostics: DiagnosticLog
) -> int | None:
    """Return an optional integer value, warning when present but not `int`.

    Booleans are rejected even though `bool` subclasses `int`.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _warn_type(where, key, "integer", value, diagnostics)
    return None


def get_str_list_or_none_checked(
    table: TomlTable, key: str, *, where: str, diagnostics: DiagnosticLog
) -> list[str] | None:
    """Return an optional list of strings, warning when present with another shape."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(x, str) for x in cast("list[object]", value)):
        return cast("list[str]", value)
    _warn_type(where, key, "list of strings", value, diagnostics)
    return None


def get_table_list_or_none_checked(
    table: TomlTable, key: str, *, where: str, diagnostics: DiagnosticLog
) -> list[TomlTable] | None:
    """Return an optional array of tables, warning when present with another shape."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(x, dict) for x in cast("list[object]", value)):
        return cast("list[TomlTable]", value)
    _warn_type(where, key, "array of tables", value, diagnostics)
    return None
