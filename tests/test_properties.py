"""Invariants checked over a small corpus of awkward paths for both grammars."""

from __future__ import annotations

import itertools

import pytest

from lexpath_mcp.core.errors import UnrelatedPathsError
from lexpath_mcp.core.models import ComponentKind, Platform
from lexpath_mcp.core.parsers import parse_path
from lexpath_mcp.core.paths import lexical_join, normalize, paths_equal, relative_to
from lexpath_mcp.core.security import is_inside, rooted_join, sanitize_relative

POSIX_CORPUS = [
    "",
    ".",
    "..",
    "/",
    "//",
    "///",
    "/usr/.//lib/../../var",
    ".././foo/bar/..",
    "a/b/c",
    "a/../../b",
    "/../..",
    "//net/share/../x",
    "foo/",
    "./././",
    "a//b///c",
    "../a/./b/../../c",
]

WINDOWS_CORPUS = [
    "",
    "C:",
    "C:\\",
    "c:foo\\..\\..",
    "C:\\a\\..\\..\\b",
    "\\\\srv\\share",
    "\\\\srv\\share\\a\\..\\..",
    "//srv/share/x/./y",
    "\\\\?\\C:\\a\\..\\b",
    "\\\\.\\pipe\\name",
    "\\x\\..\\..",
    "a/b\\..\\c",
    "..\\..\\x",
    "D:.\\y",
]

CASES = [(Platform.POSIX, raw) for raw in POSIX_CORPUS] + [
    (Platform.WINDOWS, raw) for raw in WINDOWS_CORPUS
]

PAIRS = [
    (Platform.POSIX, a, b) for a, b in itertools.product(POSIX_CORPUS, repeat=2)
] + [(Platform.WINDOWS, a, b) for a, b in itertools.product(WINDOWS_CORPUS, repeat=2)]


@pytest.mark.parametrize("platform, raw", CASES)
def test_normalize_is_idempotent(platform, raw):
    once = normalize(parse_path(raw, platform))
    assert normalize(once) == once


@pytest.mark.parametrize("platform, raw", CASES)
def test_normalize_preserves_anchor(platform, raw):
    p = parse_path(raw, platform)
    n = normalize(p)
    assert (n.prefix, n.has_root) == (p.prefix, p.has_root)


@pytest.mark.parametrize("platform, raw", CASES)
def test_rooted_paths_never_keep_leading_parent(platform, raw):
    n = normalize(parse_path(raw, platform))
    if n.is_rooted and n.parts:
        assert n.parts[0].kind is not ComponentKind.PARENT_DIR


@pytest.mark.parametrize("platform, raw", CASES)
def test_is_inside_is_reflexive(platform, raw):
    n = normalize(parse_path(raw, platform))
    assert is_inside(n, n)


@pytest.mark.parametrize("platform, base_raw, path_raw", PAIRS)
def test_rooted_join_result_stays_inside_base(platform, base_raw, path_raw):
    base = parse_path(base_raw, platform)
    path = parse_path(path_raw, platform)
    joined = rooted_join(base, path)

    assert is_inside(joined, base)
    assert is_inside(lexical_join(base, sanitize_relative(path)), base)
    # the rendered string must mean the same thing once parsed again
    assert is_inside(parse_path(str(joined), platform), base)


@pytest.mark.parametrize("platform, path_raw, base_raw", PAIRS)
def test_relative_to_round_trips(platform, path_raw, base_raw):
    path = parse_path(path_raw, platform)
    base = parse_path(base_raw, platform)
    if path.is_opaque or base.is_opaque:
        # verbatim tails are never normalized, so only rendering round-trips
        return
    try:
        rel = relative_to(path, base)
    except UnrelatedPathsError:
        return
    assert not rel.is_absolute
    assert paths_equal(normalize(lexical_join(base, rel)), path)

    reparsed = parse_path(str(rel), platform)
    assert not reparsed.is_absolute
    assert paths_equal(lexical_join(base, reparsed), path)
