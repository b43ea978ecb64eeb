import re
from dataclasses import dataclass
from enum import StrEnum


_SLASHES = re.compile(r"/{2,}")
_GLOB_CHARS = re.compile(r"([\\*?\[\]])")


class PatternScope(StrEnum):
    SCOPED = "scoped"
    UNSCOPED = "unscoped"


@dataclass(frozen=True, slots=True)
class IgnorePattern:
    raw: str
    core: str
    negated: bool = False
    anchored: bool = False

    @property
    def scope(self) -> PatternScope:
        if self.anchored or "/" in self.core:
            return PatternScope.SCOPED
        return PatternScope.UNSCOPED

    @classmethod
    def parse(cls, line: str) -> "IgnorePattern":
        core = line
        negated = core.startswith("!")
        if negated:
            core = core[1:]
        anchored = core.startswith("/")
        if anchored:
            core = core[1:]
        return cls(raw=line, core=core, negated=negated, anchored=anchored)


def _trim(line: str) -> str:
    trimmed = line.strip()
    # "foo\ " keeps its escaped trailing space
    backslashes = len(trimmed) - len(trimmed.rstrip("\\"))
    if backslashes % 2 and line.lstrip()[len(trimmed):].startswith(" "):
        trimmed += " "
    return trimmed


def parse_ignore_lines(content: str | None) -> list[IgnorePattern]:
    if not content:
        return []
    patterns: list[IgnorePattern] = []
    for line in content.splitlines():
        line = _trim(line)
        if not line or line.startswith("#"):
            continue
        pattern = IgnorePattern.parse(line)
        # a bare "!" or "/" names nothing
        if pattern.core:
            patterns.append(pattern)
    return patterns


def _escape_segment(name: str) -> str:
    return _GLOB_CHARS.sub(r"\\\1", name)


def escape_prefix(prefix: str) -> str:
    """Make a directory path match only itself when used as a pattern prefix."""
    if not prefix:
        return ""
    escaped = "/".join(_escape_segment(segment) for segment in prefix.split("/"))
    if escaped.startswith(("!", "#")):
        escaped = f"\\{escaped}"
    return escaped


def _join(*parts: str) -> str:
    return _SLASHES.sub("/", "/".join(part for part in parts if part))


def adapt_pattern(pattern: IgnorePattern, prefix: str) -> list[str]:
    """Rewrite one pattern from its own directory's frame to the walk root's.

    ``prefix`` is the owning directory relative to the root, with forward
    slashes, and empty for the root itself. Its glob characters are escaped.
    Unscoped patterns get a second ``**`` form because prefixing them with a
    directory anchors them.

    A trailing-slash pattern such as ``build/`` is left as is at the root,
    where pathspec matches it at any depth. Below the root it becomes
    ``a/build/``, which only names ``a/build``.
    """
    base = escape_prefix(prefix)
    direct = _join(base, pattern.core)
    adapted = [direct]

    if pattern.scope is PatternScope.UNSCOPED:
        deep = _join(base, "**", pattern.core)
        if deep != direct:
            adapted.append(deep)

    if pattern.negated:
        return [f"!{p}" for p in adapted]
    return adapted


def adapt_patterns(content: str | None, prefix: str) -> list[str]:
    adapted: list[str] = []
    for pattern in parse_ignore_lines(content):
        adapted.extend(adapt_pattern(pattern, prefix))
    return adapted
