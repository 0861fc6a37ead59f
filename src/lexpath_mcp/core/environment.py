from __future__ import annotations

import logging
import os

from .config import PathConfig
from .errors import EnvironmentUnavailableError
from .models import PathComponents, Platform
from .parsers import parse_path

logger = logging.getLogger(__name__)


def current_dir(
    platform: Platform | str | None = None,
    drive: str | None = None,
    config: PathConfig | None = None,
) -> PathComponents:
    """
    Snapshot of the host's current directory as components.

    `drive` asks a Windows host for the current directory of that drive
    ("D:"). Only the host's own platform can be served.
    """
    cfg = config or PathConfig()
    target = Platform.parse(platform) if platform is not None else cfg.platform
    host = Platform.native()
    if target is not host:
        raise EnvironmentUnavailableError(
            f"No current directory for {target.value} paths on a {host.value} host"
        )

    try:
        if drive and host is Platform.WINDOWS:
            raw = os.path.abspath(drive)
        else:
            raw = os.getcwd()
    except OSError as e:
        logger.warning("Current directory lookup failed: %s", e)
        raise EnvironmentUnavailableError(f"Current directory is unavailable: {e}") from e

    return parse_path(raw, target, cfg)
