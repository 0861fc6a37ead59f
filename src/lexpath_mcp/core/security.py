from __future__ import annotations

import logging

from .models import ComponentKind, PathComponents
from .parsers import split_components
from .paths import lexical_join, normalize

logger = logging.getLogger(__name__)


def sanitize_relative(path: PathComponents) -> PathComponents:
    """
    Strip the prefix and root from `path` and normalize the rest as if it
    sat directly under a root of its own: a ".." with no name left to
    cancel is dropped. The result never contains "." or "..".
    """
    parts = path.parts
    if path.is_opaque:
        parts = split_components(path.platform.separator.join(p.text for p in parts), path.platform)

    kept = []
    dropped = 0
    for part in parts:
        if part.kind is ComponentKind.CUR_DIR:
            continue
        if part.kind is ComponentKind.PARENT_DIR:
            if kept:
                kept.pop()
            else:
                dropped += 1
            continue
        kept.append(part)

    if dropped:
        logger.debug("Dropped %d '..' above the root of %r", dropped, str(path))
    return PathComponents(path.platform, parts=tuple(kept))


def rooted_join(base: PathComponents, path: PathComponents) -> PathComponents:
    """
    Join `path` under `base` so the result cannot leave `base`.

    Ascents are resolved inside `path` only, never against `base`:
      rooted_join("/srv", "foo/../../file.txt") -> /srv/file.txt
      rooted_join("/srv", "../srv/file.txt")    -> /srv/srv/file.txt
    """
    return lexical_join(base, sanitize_relative(path))


def is_inside(path: PathComponents, base: PathComponents) -> bool:
    """
    True when the normal form of `path` equals or lies under the normal form
    of `base`, compared component by component (case-insensitive on Windows).
    """
    if path.platform is not base.platform:
        return False

    target = normalize(path)
    root = normalize(base)
    if target.is_absolute != root.is_absolute or target.anchor_key != root.anchor_key:
        return False

    t_body = target.body
    r_body = root.body
    if len(t_body) < len(r_body):
        return False
    if not all(r.same_as(t, path.platform) for r, t in zip(r_body, t_body)):
        return False
    return all(p.kind is not ComponentKind.PARENT_DIR for p in t_body[len(r_body) :])
