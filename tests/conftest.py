# topmark:header:start
#
#   project      : ThemeKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ThemeKit test suite.

Sets up global fixtures (an on-disk icon catalog, an isolated working
directory) and the logging configuration for test runs.

Notes:
    Build configs with `themekit.config.model.MutableConfig`, then `freeze()`
    them into a `Config`. To tweak a frozen `Config`, call `Config.thaw()`,
    edit the draft, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from themekit.config import logging
from themekit.config.model import MutableConfig
from themekit.terms import Term

if TYPE_CHECKING:
    from pathlib import Path

    from themekit.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

ARROW_SVG: str = '<svg viewBox="0 0 16 16">\n\t<path d="M8 0 16 8 8 16"/>\n</svg>\n'
ARROW_SVG_ONE_LINE_BODY: str = 'viewBox="0 0 16 16"><path d="M8 0 16 8 8 16"/></svg>'


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_themekit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ThemeKit's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``THEMEKIT_LOG_LEVEL``.
    """
    monkeypatch.delenv("THEMEKIT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the test session.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    The directory contains a ``.git`` marker so config discovery never walks
    above it.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The project directory, which is also the working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / ".git").mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def icon_root(tmp_path: Path) -> Path:
    """Create an icon catalog with a ``utility`` and a ``social`` group.

    Layout::

        icons/utility/arrow.svg    well-formed, multi-line
        icons/utility/broken.svg   XML prolog before the root tag
        icons/social/mail.svg      well-formed, one line

    Returns:
        Path: The catalog root.
    """
    root: Path = tmp_path / "icons"
    (root / "utility").mkdir(parents=True)
    (root / "social").mkdir()
    (root / "utility" / "arrow.svg").write_text(ARROW_SVG, encoding="utf-8")
    (root / "utility" / "broken.svg").write_text(
        '<?xml version="1.0"?>\n<svg viewBox="0 0 8 8">\n  <rect/>\n</svg>\n', encoding="utf-8"
    )
    (root / "social" / "mail.svg").write_text(
        '<svg viewBox="0 0 24 24"><path d="M0 0h24v24H0z"/></svg>', encoding="utf-8"
    )
    return root


def make_term(slug: str, **kwargs: Any) -> Term:
    """Return a `Term` whose identifier and display name derive from ``slug``.

    Args:
        slug (str): Term slug.
        **kwargs (Any): Further `Term` fields (``usage_count``, ``ordering_hint``, ...).

    Returns:
        Term: The term.
    """
    kwargs.setdefault("identifier", slug)
    kwargs.setdefault("display_name", slug.title())
    return Term(slug=slug, **kwargs)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``.

    Args:
        **overrides (Any): `MutableConfig` field values.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m = MutableConfig()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
