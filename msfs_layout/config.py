from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import jsonschema
import yaml

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "layout.config.schema.json"

DEFAULT_CONTENT_ROOT = "MSFS_C152"
DEFAULT_BASE_MANIFEST = "manifest-base.json"
DEFAULT_PACKAGE_JSON = "package.json"


@dataclass(frozen=True)
class Config:
    base_dir: Path
    content_root: Path
    base_manifest_path: Path
    package_json_path: Path


def default_config(base_dir: Path) -> Config:
    base = base_dir.resolve()
    return Config(
        base_dir=base,
        content_root=base / DEFAULT_CONTENT_ROOT,
        base_manifest_path=base / DEFAULT_BASE_MANIFEST,
        package_json_path=base / DEFAULT_PACKAGE_JSON,
    )


def _read_config_document(path: Path):
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yml", ".yaml"}:
        return yaml.safe_load(text)
    return json.loads(text)


def load_config(path: Path) -> Config:
    """Load a JSON or YAML config file.

    Relative paths are resolved against the config file's directory; keys
    left out fall back to the fixed defaults under that same directory.
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    raw = _read_config_document(path)
    if raw is None:
        raw = {}
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    jsonschema.validate(instance=raw, schema=schema)

    base_dir = path.parent.resolve()

    def _resolve(value: str) -> Path:
        q = Path(value)
        return q.resolve() if q.is_absolute() else (base_dir / q).resolve()

    return Config(
        base_dir=base_dir,
        content_root=_resolve(str(raw.get("content_root", DEFAULT_CONTENT_ROOT))),
        base_manifest_path=_resolve(str(raw.get("base_manifest", DEFAULT_BASE_MANIFEST))),
        package_json_path=_resolve(str(raw.get("package_json", DEFAULT_PACKAGE_JSON))),
    )
