from .path_tools import (
    parse_path_info,
    normalize_path,
    lexical_join_paths,
    join_paths,
    relative_path,
    rooted_join_path,
    absolute_path,
    check_inside,
)

__all__ = [
    "parse_path_info",
    "normalize_path",
    "lexical_join_paths",
    "join_paths",
    "relative_path",
    "rooted_join_path",
    "absolute_path",
    "check_inside",
]
