from ignorewalk.utils import GitignoreSpec, ReadStatus, read_ignore_file
from ignorewalk.processor import (
    DEFAULT_IGNORE_FILE,
    FileCollector,
    IgnorePattern,
    WalkConfig,
    adapt_patterns,
    collect_patterns,
    is_path_excluded,
    walk,
    walk_async,
)

__all__ = [
    "GitignoreSpec",
    "ReadStatus",
    "read_ignore_file",
    "DEFAULT_IGNORE_FILE",
    "FileCollector",
    "IgnorePattern",
    "WalkConfig",
    "adapt_patterns",
    "collect_patterns",
    "is_path_excluded",
    "walk",
    "walk_async",
]
