from __future__ import annotations

from .config import Config
from .layout import build_layout
from .manifest import build_manifest, load_base_manifest, load_package_version
from .util import log_event, setup_json_logger, utc_now_iso, write_json
from .walker import LAYOUT_FILENAME, MANIFEST_FILENAME, iter_package_files

_LOG = setup_json_logger("msfs_layout.build")


def build_package(cfg: Config) -> dict:
    """Regenerate layout.json and manifest.json inside the content root.

    Both files are overwritten unconditionally. Inputs are read before the
    tree is walked so a malformed base manifest fails the run before any
    output is touched.
    """
    root = cfg.content_root
    base = load_base_manifest(cfg.base_manifest_path)
    version = load_package_version(cfg.package_json_path)

    layout = build_layout(root, iter_package_files(root))
    log_event(
        _LOG,
        "layout.scan.complete",
        root=str(root),
        file_count=len(layout.entries),
        total_size=layout.total_size,
    )

    manifest = build_manifest(base, version=version, total_size=layout.total_size)

    layout_path = root / LAYOUT_FILENAME
    manifest_path = root / MANIFEST_FILENAME
    write_json(layout_path, layout.as_document())
    write_json(manifest_path, manifest)
    log_event(
        _LOG,
        "package.write.complete",
        layout_path=str(layout_path),
        manifest_path=str(manifest_path),
    )

    return {
        "utc": utc_now_iso(),
        "project_dir": str(cfg.base_dir),
        "root": str(root),
        "layout_path": str(layout_path),
        "manifest_path": str(manifest_path),
        "file_count": len(layout.entries),
        "total_package_size": manifest["total_package_size"],
        "package_version": version,
    }
