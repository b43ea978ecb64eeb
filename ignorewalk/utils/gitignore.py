from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from pathspec.patterns.gitwildmatch import GitWildMatchPattern, GitWildMatchPatternError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    line: str
    pattern: GitWildMatchPattern
    dir_only: bool

    @classmethod
    def compile(cls, line: str) -> CompiledPattern | None:
        try:
            pattern = GitWildMatchPattern(line)
        except GitWildMatchPatternError as e:
            logger.warning("Skipping invalid ignore pattern %r: %s", line, e)
            return None
        if pattern.include is None:
            return None
        return cls(line=line, pattern=pattern, dir_only=line.rstrip().endswith("/"))


class GitignoreSpec:
    """Append-only chain of root-relative gitignore patterns.

    Each ``extend`` returns a child level that points at its parent, so a
    directory's rules are visible to its descendants but never to siblings.
    """

    def __init__(self, lines: Iterable[str] = (), parent: GitignoreSpec | None = None) -> None:
        compiled = (CompiledPattern.compile(line) for line in lines)
        self._patterns = tuple(p for p in compiled if p is not None)
        self._parent = parent

    @classmethod
    def empty(cls) -> GitignoreSpec:
        return cls()

    def extend(self, patterns: Iterable[str]) -> GitignoreSpec:
        lines = [p for p in patterns if p]
        if not lines:
            return self
        return GitignoreSpec(lines, parent=self)

    @property
    def patterns(self) -> list[str]:
        return [p.line for level in reversed(list(self._levels())) for p in level._patterns]

    @property
    def depth(self) -> int:
        return sum(1 for _ in self._levels())

    def _levels(self) -> Iterator[GitignoreSpec]:
        level: GitignoreSpec | None = self
        while level is not None:
            yield level
            level = level._parent

    def matches(self, rel_path: str, is_dir: bool = False) -> bool:
        rel_path = rel_path.strip("/")
        if not rel_path:
            return False
        # only directory-only patterns see the trailing slash, so "foo/**" leaves "foo" itself alone
        dir_path = f"{rel_path}/"
        for level in self._levels():
            for compiled in reversed(level._patterns):
                candidate = dir_path if is_dir and compiled.dir_only else rel_path
                if compiled.pattern.match_file(candidate) is not None:
                    return bool(compiled.pattern.include)
        return False

    def __len__(self) -> int:
        return sum(len(level._patterns) for level in self._levels())

    def __repr__(self) -> str:
        return f"GitignoreSpec(depth={self.depth}, patterns={len(self)})"
