from __future__ import annotations

from dataclasses import replace
from typing import Any

from ..core.config import PathConfig, load_config
from ..core.errors import LexPathError
from ..core.models import PathComponents, Platform
from ..core.parsers import parse_path


def make_config(platform: str | None = None) -> PathConfig:
    cfg = load_config()
    if platform:
        cfg = replace(cfg, platform=Platform.parse(platform))
    return cfg


def parse(raw: str, cfg: PathConfig) -> PathComponents:
    return parse_path(raw, cfg.platform, cfg)


def error_payload(e: LexPathError) -> dict[str, Any]:
    return {"ok": False, "error": {"type": type(e).__name__, "message": str(e)}}
