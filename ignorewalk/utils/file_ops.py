from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class ReadStatus(StrEnum):
    FOUND = "found"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class IgnoreFileRead:
    path: Path
    status: ReadStatus
    content: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class DirEntry:
    name: str
    is_file: bool
    is_dir: bool


def read_ignore_file(path: Path) -> IgnoreFileRead:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return IgnoreFileRead(path=path, status=ReadStatus.MISSING)
    except (OSError, UnicodeDecodeError) as e:
        return IgnoreFileRead(path=path, status=ReadStatus.FAILED, error=str(e))
    return IgnoreFileRead(path=path, status=ReadStatus.FOUND, content=content)


def list_directory(path: Path) -> list[DirEntry]:
    with os.scandir(path) as it:
        return [
            DirEntry(
                name=entry.name,
                is_file=entry.is_file(follow_symlinks=False),
                is_dir=entry.is_dir(follow_symlinks=False),
            )
            for entry in it
        ]