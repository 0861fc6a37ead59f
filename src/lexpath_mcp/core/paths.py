from __future__ import annotations

import logging
from dataclasses import replace

from .errors import InvalidCurrentDirError, PlatformMismatchError, UnrelatedPathsError
from .models import CUR_DIR, PARENT_DIR, ComponentKind, PathComponents, Platform, PrefixKind
from .parsers import parse_path, split_components

logger = logging.getLogger(__name__)


def _require_same_platform(a: PathComponents, b: PathComponents) -> None:
    if a.platform is not b.platform:
        raise PlatformMismatchError(
            f"Cannot combine {a.platform.value} path {str(a)!r} with {b.platform.value} path {str(b)!r}"
        )


def is_normalized(path: PathComponents) -> bool:
    """
    Cheap check that normalize(path) would return `path` unchanged:
    no ".", no ".." after a name, no ".." directly under a root.
    """
    if path.is_opaque:
        return True

    parts = path.parts
    if not parts:
        return path.prefix is not None or path.has_root
    if len(parts) == 1 and parts[0].kind is ComponentKind.CUR_DIR:
        return path.prefix is None and not path.has_root

    rooted = path.is_rooted
    seen_name = False
    for part in parts:
        if part.kind is ComponentKind.CUR_DIR:
            return False
        if part.kind is ComponentKind.PARENT_DIR:
            if seen_name or rooted:
                return False
        else:
            seen_name = True
    return True


def normalize(path: PathComponents) -> PathComponents:
    """
    Lexical normal form. The prefix and root are kept as-is, "." is dropped,
    ".." cancels the preceding name, and ".." directly under a root is
    dropped. A relative path that ends up empty becomes ".".

      /usr/.//lib/../../var  -> /var
      .././foo/bar/..        -> ../foo

    Verbatim and device paths are returned untouched, and so is any path
    that is already normalized.
    """
    if is_normalized(path):
        return path

    rooted = path.is_rooted
    stack = []
    for part in path.parts:
        if part.kind is ComponentKind.CUR_DIR:
            continue
        if part.kind is ComponentKind.PARENT_DIR:
            if stack and stack[-1].kind is ComponentKind.NORMAL:
                stack.pop()
            elif rooted and not stack:
                continue
            else:
                stack.append(part)
            continue
        stack.append(part)

    if not stack and path.prefix is None and not path.has_root:
        stack.append(CUR_DIR)

    return replace(path, parts=tuple(stack))


def lexical_join(a: PathComponents, b: PathComponents) -> PathComponents:
    """
    Append `b` after `a` without normalizing and without looking at whether
    `b` is absolute: its root is absorbed by the joining separator and its
    prefix text becomes ordinary trailing components.

      lexical_join("/usr", "/lib")  -> /usr/lib
      lexical_join("C:\\a", "D:\\b") -> C:\\a\\D:\\b
    """
    _require_same_platform(a, b)
    if a.is_empty:
        return b

    demoted = ()
    if b.prefix is not None and b.prefix.prefix_kind is not PrefixKind.DOUBLE_SLASH:
        demoted = split_components(b.prefix.text, b.platform)
    return replace(a, parts=(*a.parts, *demoted, *b.parts))


def join(a: PathComponents, b: PathComponents) -> PathComponents:
    """
    Join where an absolute `b` replaces `a`, built on lexical_join.

    On Windows a drive-relative `b` on another drive also replaces `a`, and
    a rooted `b` without prefix keeps `a`'s prefix.
    """
    _require_same_platform(a, b)
    if b.is_absolute:
        return b

    if b.prefix is not None:
        if a.prefix is None or a.prefix.key(a.platform) != b.prefix.key(b.platform):
            return b
        return replace(a, parts=(*a.parts, *b.parts))

    if b.has_root:
        return PathComponents(b.platform, prefix=a.prefix, has_root=True, parts=b.parts)

    return lexical_join(a, b)


def relative_to(path: PathComponents, base: PathComponents) -> PathComponents:
    """
    Relative path that leads from `base` to `path`, computed on normal forms.

    Raises UnrelatedPathsError when no lexical answer exists: absolute vs
    relative input, different anchors (drive, share, root), or `base`
    keeps a ".." above the shared ancestor, whose name is unknown.

      relative_to("/usr/lib", "/usr") -> lib
      relative_to("usr/bin", "var")   -> ../usr/bin
    """
    _require_same_platform(path, base)
    target = normalize(path)
    origin = normalize(base)

    if target.is_absolute != origin.is_absolute:
        logger.debug("relative_to(%s, %s): absolute/relative mix", target, origin)
        raise UnrelatedPathsError(str(path), str(base), "one path is absolute and the other is not")
    if target.anchor_key != origin.anchor_key:
        logger.debug("relative_to(%s, %s): anchors differ", target, origin)
        raise UnrelatedPathsError(str(path), str(base), "paths have different anchors")

    platform = path.platform
    t_body = target.body
    o_body = origin.body

    common = 0
    for t_part, o_part in zip(t_body, o_body):
        if not t_part.same_as(o_part, platform):
            break
        common += 1

    remaining_base = o_body[common:]
    if any(p.kind is ComponentKind.PARENT_DIR for p in remaining_base):
        logger.debug("relative_to(%s, %s): base ascends past the common ancestor", target, origin)
        raise UnrelatedPathsError(str(path), str(base), "base ascends above the common ancestor")

    remaining_path = t_body[common:]
    if target.is_opaque and any(p.text in (".", "..") for p in remaining_path):
        # a literal verbatim "." or ".." would read as a dot component once rendered
        raise UnrelatedPathsError(str(path), str(base), "verbatim dot segments have no relative form")

    parts = (PARENT_DIR,) * len(remaining_base) + remaining_path
    return PathComponents(platform, parts=parts or (CUR_DIR,))


def absolute(path: PathComponents, current_dir: PathComponents | str) -> PathComponents:
    """
    Absolute form of `path` against a caller-supplied current directory.
    The result is not normalized: absolute(".", "/home/user") is "/home/user/.".

    On Windows `\\x` takes only the current directory's prefix, and `D:x`
    expects `current_dir` to be the current directory of drive D:.
    """
    cwd = current_dir
    if not isinstance(cwd, PathComponents):
        cwd = parse_path(cwd, path.platform)
    _require_same_platform(path, cwd)

    if path.is_absolute:
        return path
    if not cwd.is_absolute:
        raise InvalidCurrentDirError(f"Current directory must be absolute: {str(cwd)!r}")

    if path.platform is Platform.WINDOWS and not cwd.is_opaque:
        if path.prefix is not None:
            if cwd.prefix is None or cwd.prefix.key(cwd.platform) != path.prefix.key(path.platform):
                raise InvalidCurrentDirError(
                    f"Current directory {str(cwd)!r} is not on drive {path.prefix.text}"
                )
            return replace(cwd, parts=(*cwd.parts, *path.parts))
        if path.has_root:
            return PathComponents(path.platform, prefix=cwd.prefix, has_root=True, parts=path.parts)

    return lexical_join(cwd, path)


def paths_equal(a: PathComponents, b: PathComponents) -> bool:
    """Equality of normal forms, case-insensitive on Windows."""
    if a.platform is not b.platform:
        return False
    na, nb = normalize(a), normalize(b)
    if na.anchor_key != nb.anchor_key:
        return False
    a_body, b_body = na.body, nb.body
    if len(a_body) != len(b_body):
        return False
    return all(x.same_as(y, a.platform) for x, y in zip(a_body, b_body))


def parent(path: PathComponents) -> PathComponents | None:
    """Normal form without its last name, or None when there is none to drop."""
    norm = normalize(path)
    if norm.is_opaque:
        return None
    body = norm.body
    if not body or body[-1].kind is not ComponentKind.NORMAL:
        return None
    parts = body[:-1]
    if not parts and norm.prefix is None and not norm.has_root:
        parts = (CUR_DIR,)
    return replace(norm, parts=parts)
