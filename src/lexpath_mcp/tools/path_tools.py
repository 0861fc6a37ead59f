from __future__ import annotations

from typing import Any

from .common import error_payload, make_config, parse
from ..core.environment import current_dir
from ..core.errors import LexPathError
from ..core.paths import (
    absolute,
    is_normalized,
    join,
    lexical_join,
    normalize,
    relative_to,
)
from ..core.security import is_inside, rooted_join


def parse_path_info(path: str, platform: str | None = None) -> dict[str, Any]:
    """
    Component breakdown of a path, with absolute/normalized flags.
    """
    cfg = make_config(platform)
    p = parse(path, cfg)
    return {"ok": True, "input": path, "is_normalized": is_normalized(p), **p.to_dict()}


def normalize_path(path: str, platform: str | None = None) -> dict[str, Any]:
    cfg = make_config(platform)
    p = normalize(parse(path, cfg))
    return {"ok": True, "input": path, **p.to_dict()}


def lexical_join_paths(base: str, path: str, platform: str | None = None) -> dict[str, Any]:
    """
    Plain concatenation: an absolute `path` is appended, not substituted.
    """
    cfg = make_config(platform)
    p = lexical_join(parse(base, cfg), parse(path, cfg))
    return {"ok": True, "base": base, "input": path, **p.to_dict()}


def join_paths(base: str, path: str, platform: str | None = None) -> dict[str, Any]:
    """
    Join where an absolute `path` replaces `base`.
    """
    cfg = make_config(platform)
    p = join(parse(base, cfg), parse(path, cfg))
    return {"ok": True, "base": base, "input": path, **p.to_dict()}


def relative_path(path: str, base: str, platform: str | None = None) -> dict[str, Any]:
    """
    Relative path from `base` to `path`, or ok=False with UnrelatedPathsError.
    """
    cfg = make_config(platform)
    try:
        p = relative_to(parse(path, cfg), parse(base, cfg))
    except LexPathError as e:
        return error_payload(e)
    return {"ok": True, "base": base, "input": path, **p.to_dict()}


def rooted_join_path(base: str, path: str, platform: str | None = None) -> dict[str, Any]:
    """
    Confine `path` under `base`. Always succeeds.
    """
    cfg = make_config(platform)
    p = rooted_join(parse(base, cfg), parse(path, cfg))
    return {"ok": True, "base": base, "input": path, **p.to_dict()}


def absolute_path(
    path: str,
    current: str | None = None,
    platform: str | None = None,
) -> dict[str, Any]:
    """
    Absolute form of `path`. Without `current`, the server's own current
    directory is used (same platform only).
    """
    cfg = make_config(platform)
    p = parse(path, cfg)
    try:
        if current is not None:
            cwd = parse(current, cfg)
        elif p.is_absolute:
            cwd = p
        else:
            drive = p.prefix.text if p.prefix is not None and not p.has_root else None
            cwd = current_dir(cfg.platform, drive=drive, config=cfg)
        out = absolute(p, cwd)
    except LexPathError as e:
        return error_payload(e)
    return {"ok": True, "input": path, "current": str(cwd), **out.to_dict()}


def check_inside(path: str, base: str, platform: str | None = None) -> dict[str, Any]:
    cfg = make_config(platform)
    inside = is_inside(parse(path, cfg), parse(base, cfg))
    return {
        "ok": True,
        "platform": cfg.platform.value,
        "path": path,
        "base": base,
        "inside": inside,
    }
