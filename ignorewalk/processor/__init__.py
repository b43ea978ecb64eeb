from ignorewalk.processor.patterns import IgnorePattern, PatternScope, adapt_pattern, adapt_patterns, parse_ignore_lines
from ignorewalk.processor.collector import (
    DEFAULT_IGNORE_FILE, METADATA_DIR, FileCollector, WalkConfig,
    collect_patterns, is_path_excluded, walk, walk_async,
)

__all__ = [
    "IgnorePattern", "PatternScope", "adapt_pattern", "adapt_patterns", "parse_ignore_lines",
    "DEFAULT_IGNORE_FILE", "METADATA_DIR", "FileCollector", "WalkConfig",
    "collect_patterns", "is_path_excluded", "walk", "walk_async",
]
