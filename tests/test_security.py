from __future__ import annotations

import pytest

from lexpath_mcp.core.models import ComponentKind
from lexpath_mcp.core.security import is_inside, rooted_join, sanitize_relative


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("/srv", "foo/../../file.txt", "/srv/file.txt"),
        ("/srv", "../srv/file.txt", "/srv/srv/file.txt"),
        ("/srv", "/etc/passwd", "/srv/etc/passwd"),
        ("/srv", "../../..", "/srv"),
        ("/srv", "", "/srv"),
        ("/srv", "./a/./b", "/srv/a/b"),
        ("/srv", "//host/x", "/srv/host/x"),
    ],
)
def test_rooted_join_posix(posix, base, path, expected):
    assert str(rooted_join(posix(base), posix(path))) == expected


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("C:\\srv", "D:\\evil\\..\\..\\x", "C:\\srv\\x"),
        ("C:\\srv", "\\\\host\\share\\x", "C:\\srv\\x"),
        ("C:\\srv", "..\\..\\x", "C:\\srv\\x"),
        ("C:\\srv", "\\\\?\\C:\\Windows", "C:\\srv\\C:\\Windows"),
        ("C:\\srv", "a/../../b", "C:\\srv\\b"),
    ],
)
def test_rooted_join_windows(windows, base, path, expected):
    assert str(rooted_join(windows(base), windows(path))) == expected


def test_rooted_join_never_escapes_base(posix):
    base = posix("/srv/data")
    for raw in ["../../etc/passwd", "/../../etc", "a/../../../b", "....//x", "./../data2"]:
        out = rooted_join(base, posix(raw))
        assert is_inside(out, base), raw


def test_sanitize_relative_strips_anchor_and_ascents(posix, windows):
    out = sanitize_relative(posix("/../a/../../b/./c"))

    assert str(out) == "b/c"
    assert out.is_absolute is False
    assert all(p.kind is ComponentKind.NORMAL for p in out.parts)

    assert str(sanitize_relative(windows("C:\\..\\x"))) == "x"


@pytest.mark.parametrize(
    "path, base, expected",
    [
        ("/srv/a", "/srv", True),
        ("/srv", "/srv", True),
        ("/srvx", "/srv", False),
        ("/srv/../etc", "/srv", False),
        ("/srv/a/../b", "/srv", True),
        ("srv/a", "/srv", False),
        ("/srv", "/srv/a", False),
        ("a", ".", True),
        ("..", ".", False),
        ("../x", "..", True),
        ("../../x", "..", False),
        ("/SRV/a", "/srv", False),
        ("/anything", "/", True),
    ],
)
def test_is_inside_posix(posix, path, base, expected):
    assert is_inside(posix(path), posix(base)) is expected


@pytest.mark.parametrize(
    "path, base, expected",
    [
        ("c:\\SRV\\a", "C:\\srv", True),
        ("D:\\srv\\a", "C:\\srv", False),
        ("C:srv\\a", "C:\\srv", False),
        ("\\\\?\\C:\\srv\\a", "\\\\?\\C:\\srv", True),
        ("\\\\?\\C:\\srvx", "\\\\?\\C:\\srv", False),
        ("\\\\host\\share\\a", "//HOST/share", True),
        ("\\\\host\\other\\a", "\\\\host\\share", False),
    ],
)
def test_is_inside_windows(windows, path, base, expected):
    assert is_inside(windows(path), windows(base)) is expected


def test_is_inside_mixed_platforms_is_false(posix, windows):
    assert is_inside(posix("a/b"), windows("a")) is False


def test_rooted_join_on_empty_base_renders_relative(windows):
    from lexpath_mcp.core.paths import paths_equal

    out = rooted_join(windows(""), windows("\\\\?\\C:\\Windows"))
    assert str(out) == ".\\C:\\Windows"

    reparsed = windows(str(out))
    assert reparsed.is_absolute is False
    assert paths_equal(reparsed, out)
    assert is_inside(reparsed, windows(""))


def test_rooted_join_under_dotdot_base(posix):
    base = posix("..")
    out = rooted_join(base, posix(""))

    assert str(out) == ".."
    assert is_inside(out, base)
    assert is_inside(rooted_join(base, posix("../../x")), base)
