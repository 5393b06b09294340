from __future__ import annotations

import hashlib
import json
import os
from collections.abc import Iterator
from pathlib import Path

import pytest


def _canonical_env_hash(env: dict[str, str]) -> str:
    payload = json.dumps(sorted(env.items()), ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


@pytest.fixture(autouse=True)
def isolate_environment() -> Iterator[None]:
    environ_before = dict(os.environ)
    environ_before_hash = _canonical_env_hash(environ_before)

    yield

    for key in list(os.environ.keys()):
        if key not in environ_before:
            os.environ.pop(key, None)
    for key, value in environ_before.items():
        os.environ[key] = value

    assert _canonical_env_hash(dict(os.environ)) == environ_before_hash


def write_tree(root: Path, files: dict[str, bytes]) -> None:
    for rel, data in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory laid out the way the zero-argument build expects."""
    content = tmp_path / "MSFS_C152"
    write_tree(
        content,
        {
            "SimObjects/Airplanes/C152/aircraft.cfg": b"[VERSION]\nmajor=1\n",
            "SimObjects/Airplanes/C152/model/C152.xml": b"<ModelInfo/>" * 10,
            "html_ui/Pages/VCockpit/Instruments/EFB/EFB.js": b"export {};\n",
            "ContentInfo/thumbnail.jpg": bytes(range(256)),
        },
    )
    (tmp_path / "manifest-base.json").write_text(
        json.dumps(
            {
                "dependencies": [],
                "content_type": "AIRCRAFT",
                "title": "Cessna 152",
                "manufacturer": "Cessna",
                "creator": "JPLogistics",
                "minimum_game_version": "1.20.6",
                "release_notes": {"neutral": {"LastUpdate": "", "OlderHistory": ""}},
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "jplogistics-c152", "version": "2.1.0"}), encoding="utf-8"
    )
    return tmp_path
