from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from .models import Platform


class DoubleSlashPolicy(str, Enum):
    """What a POSIX path starting with exactly two slashes parses to."""

    PRESERVE = "preserve"
    COLLAPSE = "collapse"


@dataclass(frozen=True)
class PathConfig:
    """
    Engine configuration.
    """
    platform: Platform = field(default_factory=Platform.native)

    # POSIX leaves the meaning of a leading "//" to the implementation.
    # PRESERVE keeps it as its own prefix (like posixpath), COLLAPSE reads it as "/".
    double_slash: DoubleSlashPolicy = DoubleSlashPolicy.PRESERVE

    log_level: str = "INFO"


def _read_enum(env: Mapping[str, str], name: str, enum_type, default):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError as e:
        allowed = ", ".join(m.value for m in enum_type)
        raise ValueError(f"{name}={raw!r} is invalid. Allowed: {allowed}") from e


def load_config(environ: Mapping[str, str] | None = None) -> PathConfig:
    """Build a PathConfig from LEXPATH_* environment variables."""
    env = os.environ if environ is None else environ
    defaults = PathConfig()

    platform = defaults.platform
    raw_platform = env.get("LEXPATH_PLATFORM")
    if raw_platform and raw_platform.strip():
        try:
            platform = Platform.parse(raw_platform)
        except ValueError as e:
            raise ValueError(f"LEXPATH_PLATFORM={raw_platform!r} is invalid: {e}") from e

    double_slash = _read_enum(env, "LEXPATH_DOUBLE_SLASH", DoubleSlashPolicy, defaults.double_slash)

    log_level = (env.get("LEXPATH_LOG_LEVEL") or defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"LEXPATH_LOG_LEVEL={log_level!r} is not a logging level")

    return PathConfig(platform=platform, double_slash=double_slash, log_level=log_level)
