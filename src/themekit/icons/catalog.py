# topmark:header:start
#
#   project      : ThemeKit
#   file         : catalog.py
#   file_relpath : src/themekit/icons/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-backed SVG icon catalog.

Icons live under ``<root>/<group>/<icon>.svg``. Each file holds one SVG
fragment whose root element has no ``width``/``height`` attributes; those are
added when rendering. The catalog is read-only and uncached: every lookup
reads the file again.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from themekit.config.logging import get_logger
from themekit.constants import ICON_SUFFIX

if TYPE_CHECKING:
    from themekit.config.logging import ThemekitLogger

logger: ThemekitLogger = get_logger(__name__)

# Group and icon names are single path components.
_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")


def is_valid_name(name: str) -> bool:
    """Return True if ``name`` is usable as an icon or group name."""
    return bool(_NAME_RE.match(name)) and ".." not in name


class IconCatalog:
    """Resolve and read icons below a root directory.

    Args:
        root (Path | str): Directory containing one sub-directory per icon group.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"IconCatalog(root={str(self.root)!r})"

    def path_for(self, icon: str, group: str) -> Path | None:
        """Return the file path of ``icon`` in ``group``, or None for unusable names.

        The path is returned whether or not the file exists.
        """
        if not (is_valid_name(icon) and is_valid_name(group)):
            logger.warning("Rejected icon name %r in group %r", icon, group)
            return None
        return self.root / group / f"{icon}{ICON_SUFFIX}"

    def read(self, icon: str, group: str) -> tuple[Path, str] | None:
        """Read the SVG source of ``icon`` in ``group``.

        Args:
            icon (str): Icon name, without the ``.svg`` suffix.
            group (str): Icon group (sub-directory).

        Returns:
            tuple[Path, str] | None: The file path and its text, or None when the
                icon does not exist or cannot be read.
        """
        path: Path | None = self.path_for(icon, group)
        if path is None:
            return None
        if not path.is_file():
            logger.debug("Icon not found: %s", path)
            return None
        try:
            return path, path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read icon %s: %s", path, exc)
            return None

    def groups(self) -> list[str]:
        """Return the icon groups available in this catalog, sorted."""
        if not self.root.is_dir():
            return []
        return sorted(p.name for p in self.root.iterdir() if p.is_dir() and is_valid_name(p.name))

    def icons(self, group: str) -> list[str]:
        """Return the icon names available in ``group``, sorted."""
        if not is_valid_name(group):
            return []
        group_dir: Path = self.root / group
        if not group_dir.is_dir():
            return []
        return sorted(p.stem for p in group_dir.glob(f"*{ICON_SUFFIX}") if p.is_file())
