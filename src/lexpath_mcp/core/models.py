from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Platform(str, Enum):
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def native(cls) -> Platform:
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def parse(cls, value: str | Platform) -> Platform:
        """Accept a platform or one of its names ("posix", "windows", "nt", ...)."""
        if isinstance(value, Platform):
            return value
        key = (value or "").strip().lower()
        try:
            return _PLATFORM_ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown platform: {value!r}") from None

    @property
    def separator(self) -> str:
        return "\\" if self is Platform.WINDOWS else "/"

    @property
    def separators(self) -> str:
        return "\\/" if self is Platform.WINDOWS else "/"

    def split_segments(self, text: str) -> list[str]:
        """Split on every separator of this platform, dropping empty segments."""
        return [seg for seg in _SPLITTERS[self].split(text) if seg]


_PLATFORM_ALIASES = {
    "posix": Platform.POSIX,
    "unix": Platform.POSIX,
    "linux": Platform.POSIX,
    "darwin": Platform.POSIX,
    "windows": Platform.WINDOWS,
    "win": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "nt": Platform.WINDOWS,
}

_SPLITTERS = {
    Platform.POSIX: re.compile(r"/"),
    Platform.WINDOWS: re.compile(r"[\\/]"),
}


class ComponentKind(str, Enum):
    PREFIX = "prefix"
    ROOT_DIR = "root_dir"
    CUR_DIR = "cur_dir"
    PARENT_DIR = "parent_dir"
    NORMAL = "normal"


class PrefixKind(str, Enum):
    DOUBLE_SLASH = "double_slash"
    DRIVE = "drive"
    UNC = "unc"
    VERBATIM = "verbatim"
    DEVICE = "device"


_OPAQUE_PREFIXES = (PrefixKind.VERBATIM, PrefixKind.DEVICE)
_IMPLICIT_ROOT_PREFIXES = (PrefixKind.UNC, PrefixKind.VERBATIM, PrefixKind.DEVICE)


@dataclass(frozen=True)
class Component:
    kind: ComponentKind
    text: str
    prefix_kind: PrefixKind | None = None

    @classmethod
    def normal(cls, name: str) -> Component:
        return cls(ComponentKind.NORMAL, name)

    def key(self, platform: Platform) -> str:
        # Windows compares case-insensitively; storage keeps the original text.
        if platform is Platform.WINDOWS:
            return self.text.casefold()
        return self.text

    def same_as(self, other: Component, platform: Platform) -> bool:
        return self.kind is other.kind and self.key(platform) == other.key(platform)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"kind": self.kind.value, "text": self.text}
        if self.prefix_kind is not None:
            out["prefix_kind"] = self.prefix_kind.value
        return out


CUR_DIR = Component(ComponentKind.CUR_DIR, ".")
PARENT_DIR = Component(ComponentKind.PARENT_DIR, "..")


@dataclass(frozen=True)
class PathComponents:
    """
    Parsed path: optional prefix, optional root separator, then the
    CUR_DIR / PARENT_DIR / NORMAL parts in input order.

    The root separator is kept as a flag rather than a part so that `parts`
    only ever holds body components.
    """

    platform: Platform
    prefix: Component | None = None
    has_root: bool = False
    parts: tuple[Component, ...] = ()

    @property
    def is_opaque(self) -> bool:
        return self.prefix is not None and self.prefix.prefix_kind in _OPAQUE_PREFIXES

    @property
    def is_rooted(self) -> bool:
        if self.has_root:
            return True
        return self.prefix is not None and self.prefix.prefix_kind in _IMPLICIT_ROOT_PREFIXES

    @property
    def is_absolute(self) -> bool:
        if self.platform is Platform.POSIX:
            return self.has_root
        if self.prefix is None:
            return False
        if self.prefix.prefix_kind is PrefixKind.DRIVE:
            return self.has_root
        return True

    @property
    def is_empty(self) -> bool:
        return self.prefix is None and not self.has_root and not self.parts

    @property
    def anchor_key(self) -> tuple[str | None, bool]:
        prefix = self.prefix.key(self.platform) if self.prefix is not None else None
        return prefix, self.is_rooted

    @property
    def body(self) -> tuple[Component, ...]:
        """
        Parts used for component-wise comparison.

        A lone "." is the empty body. Opaque tails are split on separators
        into literal NORMAL components so that verbatim paths can be
        compared segment by segment without being normalized.
        """
        if self.is_opaque:
            text = self.platform.separator.join(p.text for p in self.parts)
            return tuple(Component.normal(seg) for seg in self.platform.split_segments(text))
        if len(self.parts) == 1 and self.parts[0].kind is ComponentKind.CUR_DIR:
            return ()
        return self.parts

    @property
    def components(self) -> tuple[Component, ...]:
        head: list[Component] = []
        if self.prefix is not None:
            head.append(self.prefix)
        if self.has_root:
            head.append(Component(ComponentKind.ROOT_DIR, self.platform.separator))
        return (*head, *self.parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": self.platform.value,
            "path": str(self),
            "is_absolute": self.is_absolute,
            "components": [c.to_dict() for c in self.components],
        }

    def __str__(self) -> str:
        from .parsers import render_path

        return render_path(self)
