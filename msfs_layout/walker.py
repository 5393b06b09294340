from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

LAYOUT_FILENAME = "layout.json"
MANIFEST_FILENAME = "manifest.json"

# Generated outputs live inside the content root; skipping them keeps
# repeated runs from listing their own previous output.
RESERVED_NAMES = frozenset({LAYOUT_FILENAME, MANIFEST_FILENAME})


def iter_package_files(root: Path | str) -> Iterator[Path]:
    """Yield absolute paths of every file under root, depth-first.

    Entries come in the order the filesystem returns them. Any entry named
    like a generated output is skipped at every depth. Errors from
    unreadable directories propagate to the caller.
    """
    root_path = Path(root).absolute()
    with os.scandir(root_path) as it:
        entries = list(it)
    for entry in entries:
        if entry.name in RESERVED_NAMES:
            continue
        path = root_path / entry.name
        if entry.is_dir():
            yield from iter_package_files(path)
        else:
            yield path
