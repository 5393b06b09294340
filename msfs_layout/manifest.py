from __future__ import annotations

from pathlib import Path
from typing import Mapping

from .util import read_json

TOTAL_SIZE_WIDTH = 20


def format_total_package_size(total: int) -> str:
    """Render total as a decimal string left-padded with zeros to 20 chars."""
    if total < 0:
        raise ValueError(f"total package size cannot be negative: {total}")
    text = str(total).zfill(TOTAL_SIZE_WIDTH)
    if len(text) != TOTAL_SIZE_WIDTH:
        raise ValueError(
            f"total package size {total} does not fit in {TOTAL_SIZE_WIDTH} digits"
        )
    return text


def load_base_manifest(path: Path) -> dict:
    doc = read_json(path)
    if not isinstance(doc, dict):
        raise ValueError(f"{path.name} must contain a JSON object")
    return doc


def load_package_version(path: Path) -> str:
    doc = read_json(path)
    if not isinstance(doc, dict):
        raise ValueError(f"{path.name} must contain a JSON object")
    version = doc.get("version")
    if not isinstance(version, str):
        raise ValueError(f"{path.name} must define a string 'version'")
    return version


def build_manifest(base: Mapping[str, object], *, version: str, total_size: int) -> dict:
    """Overlay the computed package fields on a copy of the base manifest."""
    out = dict(base)
    out["package_version"] = version
    out["total_package_size"] = format_total_package_size(total_size)
    return out
