from __future__ import annotations

from .config import DoubleSlashPolicy, PathConfig
from .models import (
    CUR_DIR,
    PARENT_DIR,
    Component,
    ComponentKind,
    PathComponents,
    Platform,
    PrefixKind,
)

_VERBATIM = "\\\\?\\"
_DEVICE = "\\\\.\\"


def classify(segment: str) -> Component:
    if segment == ".":
        return CUR_DIR
    if segment == "..":
        return PARENT_DIR
    return Component.normal(segment)


def split_components(text: str, platform: Platform) -> tuple[Component, ...]:
    return tuple(classify(seg) for seg in platform.split_segments(text))


def parse_path(
    raw: str,
    platform: Platform | str | None = None,
    config: PathConfig | None = None,
) -> PathComponents:
    """
    Parse `raw` into components. Never fails: any string is a path.
    Platform defaults to the configured one.
    """
    cfg = config or PathConfig()
    plat = Platform.parse(platform) if platform is not None else cfg.platform
    text = raw or ""
    if plat is Platform.WINDOWS:
        return _parse_windows(text)
    return _parse_posix(text, cfg.double_slash)


def _parse_posix(raw: str, double_slash: DoubleSlashPolicy) -> PathComponents:
    """
      /usr/lib   -> root, usr, lib
      //net/x    -> prefix "//" (PRESERVE) or root (COLLAPSE), net, x
      ///usr     -> root, usr
    """
    if not raw.startswith("/"):
        return PathComponents(Platform.POSIX, parts=split_components(raw, Platform.POSIX))

    rest = raw.lstrip("/")
    prefix = None
    if len(raw) - len(rest) == 2 and double_slash is DoubleSlashPolicy.PRESERVE:
        prefix = Component(ComponentKind.PREFIX, "//", PrefixKind.DOUBLE_SLASH)
    return PathComponents(
        Platform.POSIX,
        prefix=prefix,
        has_root=True,
        parts=split_components(rest, Platform.POSIX),
    )


def _split_first(text: str) -> tuple[str, bool, str]:
    for i, ch in enumerate(text):
        if ch in "\\/":
            return text[:i], True, text[i + 1 :]
    return text, False, ""


def _looks_like_drive(text: str) -> bool:
    return len(text) >= 2 and text[1] == ":" and text[0].isascii() and text[0].isalpha()


def _device_marker(raw: str) -> tuple[str, PrefixKind] | None:
    if raw.startswith(_VERBATIM):
        return _VERBATIM, PrefixKind.VERBATIM
    seps = Platform.WINDOWS.separators
    if len(raw) < 4 or raw[0] not in seps or raw[1] not in seps or raw[3] not in seps:
        return None
    if raw[2] == ".":
        return _DEVICE, PrefixKind.DEVICE
    if raw[2] == "?":
        # only the all-backslash form skips Win32 normalization
        return raw[:4], PrefixKind.DEVICE
    return None


def _parse_windows(raw: str) -> PathComponents:
    """
    Prefixes are matched greedily, in this order:
      \\\\?\\<tail>          verbatim, tail kept unparsed
      \\\\.\\<tail>          device (also //./ and //?/), tail kept unparsed
      \\\\server\\share\\x   UNC (either separator)
      C:\\x  or  C:x       drive, rooted or drive-relative
      \\x                  root without prefix
    """
    device = _device_marker(raw)
    if device is not None:
        marker, kind = device
        tail = raw[len(marker) :]
        return PathComponents(
            Platform.WINDOWS,
            prefix=Component(ComponentKind.PREFIX, marker, kind),
            parts=(Component.normal(tail),) if tail else (),
        )

    seps = Platform.WINDOWS.separators
    if len(raw) > 2 and raw[0] in seps and raw[1] in seps and raw[2] not in seps:
        server, after_server, after = _split_first(raw[2:])
        share, after_share, rest = _split_first(after)
        text = "\\\\" + server + ("\\" + share if share else "")
        if share:
            has_root, tail = after_share, rest
        else:
            has_root, tail = after_server, after
        return PathComponents(
            Platform.WINDOWS,
            prefix=Component(ComponentKind.PREFIX, text, PrefixKind.UNC),
            has_root=has_root,
            parts=split_components(tail, Platform.WINDOWS),
        )

    prefix = None
    rest = raw
    if _looks_like_drive(raw):
        prefix = Component(ComponentKind.PREFIX, raw[:2], PrefixKind.DRIVE)
        rest = raw[2:]

    return PathComponents(
        Platform.WINDOWS,
        prefix=prefix,
        has_root=rest[:1] != "" and rest[0] in seps,
        parts=split_components(rest, Platform.WINDOWS),
    )


def render_path(path: PathComponents) -> str:
    """Serialize components to a platform-native string."""
    body = path.platform.separator.join(p.text for p in path.parts)

    if path.platform is Platform.POSIX:
        if path.prefix is not None:
            return path.prefix.text + body
        return ("/" if path.has_root else "") + body

    if path.prefix is None:
        if path.has_root:
            return "\\" + body
        if path.parts and path.parts[0].kind is ComponentKind.NORMAL and _looks_like_drive(path.parts[0].text):
            # a leading "C:" name would re-parse as a drive prefix
            return ".\\" + body
        return body
    if path.is_opaque:
        return path.prefix.text + body

    head = path.prefix.text
    if path.has_root or (path.prefix.prefix_kind is PrefixKind.UNC and path.parts):
        head += "\\"
    return head + body
