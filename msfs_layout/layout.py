from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path, PurePath
from typing import Callable, Iterable

# 100ns intervals between 1601-01-01 and 1970-01-01.
FILETIME_EPOCH_OFFSET = 116444736000000000


@dataclass(frozen=True)
class ContentEntry:
    path: str
    size: int
    date: int


@dataclass(frozen=True)
class Layout:
    entries: tuple[ContentEntry, ...]
    total_size: int

    def as_document(self) -> dict:
        return {"content": [asdict(e) for e in self.entries]}


def to_filetime(mtime_ns: int) -> int:
    """Convert a Unix timestamp in nanoseconds to Windows FILETIME units."""
    return mtime_ns // 100 + FILETIME_EPOCH_OFFSET


def relative_posix(path: Path | str, root: Path | str) -> str:
    rel = os.path.relpath(path, root)
    return PurePath(rel).as_posix()


def build_layout(
    root: Path | str,
    files: Iterable[Path],
    *,
    stat: Callable[[Path], os.stat_result] = os.stat,
) -> Layout:
    """Stat each file and collect content entries in iteration order."""
    root_path = Path(root).absolute()
    entries: list[ContentEntry] = []
    total = 0
    for p in files:
        st = stat(p)
        entries.append(
            ContentEntry(
                path=relative_posix(p, root_path),
                size=int(st.st_size),
                date=to_filetime(int(st.st_mtime_ns)),
            )
        )
        total += int(st.st_size)
    return Layout(entries=tuple(entries), total_size=total)
