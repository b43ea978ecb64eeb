import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from ignorewalk.processor.patterns import IgnorePattern, adapt_pattern, parse_ignore_lines
from ignorewalk.utils.file_ops import DirEntry, ReadStatus, list_directory, read_ignore_file
from ignorewalk.utils.gitignore import GitignoreSpec


DEFAULT_IGNORE_FILE = ".gitignore"
METADATA_DIR = ".git"

logger = logging.getLogger(__name__)


@dataclass
class WalkConfig:
    ignore_file_name: str = DEFAULT_IGNORE_FILE


@dataclass(frozen=True, slots=True)
class PendingEntry:
    entry: DirEntry
    path: Path
    rel_path: str
    spec: GitignoreSpec


def _child(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name


def _relative_parts(rel_path: str, root: Path) -> tuple[str, ...]:
    parts = PurePosixPath(rel_path.replace("\\", "/").strip("/")).parts
    if ".." in parts:
        raise ValueError(f"{rel_path} is outside {root}")
    return parts


class FileCollector:
    def __init__(self, root: str | os.PathLike[str], config: WalkConfig | None = None) -> None:
        self._root = Path(root).resolve()
        self._config = config or WalkConfig()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def ignore_file_name(self) -> str:
        return self._config.ignore_file_name

    def describe(self, directory: Path, prefix: str) -> list[tuple[IgnorePattern, list[str]]]:
        read = read_ignore_file(directory / self.ignore_file_name)
        if read.status is ReadStatus.FAILED:
            logger.warning("Could not read %s at %s: %s", self.ignore_file_name, read.path, read.error)
            return []
        if read.status is ReadStatus.MISSING:
            return []
        return [(pattern, adapt_pattern(pattern, prefix)) for pattern in parse_ignore_lines(read.content)]

    def load_rules(self, directory: Path, prefix: str, inherited: GitignoreSpec) -> GitignoreSpec:
        adapted = [p for _, forms in self.describe(directory, prefix) for p in forms]
        if not adapted:
            return inherited
        logger.debug("Loaded %d patterns for %s", len(adapted), prefix or ".")
        return inherited.extend(adapted)

    def _expand(self, directory: Path, prefix: str, inherited: GitignoreSpec, stack: list[PendingEntry]) -> None:
        spec = self.load_rules(directory, prefix, inherited)
        pending: list[PendingEntry] = []
        for entry in list_directory(directory):
            if entry.name == METADATA_DIR or entry.name == self.ignore_file_name:
                continue
            if not (entry.is_file or entry.is_dir):
                continue
            rel_path = _child(prefix, entry.name)
            if spec.matches(rel_path, is_dir=entry.is_dir):
                logger.debug("Excluded %s", rel_path)
                continue
            pending.append(PendingEntry(entry, directory / entry.name, rel_path, spec))
        stack.extend(reversed(pending))

    def collect(self) -> list[str]:
        files: list[str] = []
        stack: list[PendingEntry] = []
        self._expand(self._root, "", GitignoreSpec.empty(), stack)

        while stack:
            item = stack.pop()
            if item.entry.is_file:
                files.append(item.rel_path)
            else:
                self._expand(item.path, item.rel_path, item.spec, stack)

        logger.debug("Collected %d files under %s", len(files), self._root)
        return files

    def is_excluded(self, rel_path: str) -> bool:
        parts = _relative_parts(rel_path, self._root)
        if not parts:
            return False
        if METADATA_DIR in parts or self.ignore_file_name in parts:
            return True

        spec = GitignoreSpec.empty()
        directory = self._root
        prefix = ""
        for index, name in enumerate(parts):
            spec = self.load_rules(directory, prefix, spec)
            prefix = _child(prefix, name)
            directory = directory / name
            is_dir = index < len(parts) - 1 or directory.is_dir()
            if spec.matches(prefix, is_dir=is_dir):
                return True
        return False


def walk(root: str | os.PathLike[str], ignore_file_name: str = DEFAULT_IGNORE_FILE) -> list[str]:
    """List every file under ``root`` that no applicable ignore file excludes.

    Paths are relative to the resolved root and use forward slashes. Order
    follows directory listing order, depth first. Missing or unreadable
    ignore files never fail the walk; unlistable directories raise ``OSError``.
    """
    return FileCollector(root, WalkConfig(ignore_file_name=ignore_file_name)).collect()


async def walk_async(root: str | os.PathLike[str], ignore_file_name: str = DEFAULT_IGNORE_FILE) -> list[str]:
    return await asyncio.to_thread(walk, root, ignore_file_name)


def is_path_excluded(
    root: str | os.PathLike[str],
    rel_path: str,
    ignore_file_name: str = DEFAULT_IGNORE_FILE,
) -> bool:
    return FileCollector(root, WalkConfig(ignore_file_name=ignore_file_name)).is_excluded(rel_path)


def collect_patterns(
    root: str | os.PathLike[str],
    directory: str = "",
    ignore_file_name: str = DEFAULT_IGNORE_FILE,
) -> list[tuple[IgnorePattern, list[str]]]:
    collector = FileCollector(root, WalkConfig(ignore_file_name=ignore_file_name))
    prefix = "/".join(_relative_parts(directory, collector.root))
    return collector.describe(collector.root / prefix, prefix)
