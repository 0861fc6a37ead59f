from __future__ import annotations

from typing import Callable

import pytest

from lexpath_mcp.core.config import DoubleSlashPolicy, PathConfig
from lexpath_mcp.core.models import PathComponents, Platform
from lexpath_mcp.core.parsers import parse_path


ParseFn = Callable[..., PathComponents]


def _parser(platform: Platform) -> ParseFn:
    def _parse(raw: str, double_slash: DoubleSlashPolicy = DoubleSlashPolicy.PRESERVE) -> PathComponents:
        cfg = PathConfig(platform=platform, double_slash=double_slash)
        return parse_path(raw, platform, cfg)
    return _parse


@pytest.fixture(autouse=True)
def _clean_lexpath_env(monkeypatch):
    """
    Tool functions read LEXPATH_* from the environment; keep tests independent
    of whatever the developer has exported.
    """
    for name in ("LEXPATH_PLATFORM", "LEXPATH_DOUBLE_SLASH", "LEXPATH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def posix() -> ParseFn:
    return _parser(Platform.POSIX)


@pytest.fixture()
def windows() -> ParseFn:
    return _parser(Platform.WINDOWS)


@pytest.fixture()
def foreign_platform() -> Platform:
    """A platform that is not the host's."""
    return Platform.WINDOWS if Platform.native() is Platform.POSIX else Platform.POSIX
