from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

from .build import build_package
from .config import Config, default_config, load_config
from .util import (
    MetricsEmitter,
    get_request_id,
    log_event,
    set_request_id,
    setup_json_logger,
)

_LOG = setup_json_logger("msfs_layout.cli")


def resolve_config(config_path: Path | None, root: Path | None) -> Config:
    if config_path is not None:
        return load_config(config_path)
    return default_config(root if root is not None else Path.cwd())


def cmd_build(config_path: Path | None, root: Path | None) -> int:
    rep = build_package(resolve_config(config_path, root))
    print(json.dumps(rep, indent=2, sort_keys=True))
    return 0


def _run_command_with_observability(
    *,
    command_name: str,
    fn,
    metrics: MetricsEmitter | None,
) -> int:
    started = time.perf_counter()
    log_event(_LOG, "cli.command.start", command=command_name)
    try:
        rc = fn()
    except Exception as exc:
        latency_ms = (time.perf_counter() - started) * 1000.0
        log_event(
            _LOG,
            "cli.command.error",
            command=command_name,
            error=str(exc),
            error_type=type(exc).__name__,
            latency_ms=round(latency_ms, 3),
        )
        if metrics is not None:
            metrics.emit(
                metric="msfs_layout.command",
                status="error",
                latency_ms=latency_ms,
                outcome="error",
                error=type(exc).__name__,
            )
        raise

    latency_ms = (time.perf_counter() - started) * 1000.0
    status = "success" if rc == 0 else "error"
    log_event(
        _LOG,
        "cli.command.finish",
        command=command_name,
        latency_ms=round(latency_ms, 3),
        status=status,
    )
    if metrics is not None:
        metrics.emit(
            metric="msfs_layout.command",
            status=status,
            latency_ms=latency_ms,
            outcome="success" if rc == 0 else "failure",
            error=(None if rc == 0 else f"exit_code={rc}"),
        )
    return rc


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="msfs-layout",
        description="Generate layout.json and manifest.json for an MSFS package.",
    )
    p.add_argument(
        "--config",
        default=None,
        help="JSON or YAML config file; relative paths resolve against its directory.",
    )
    p.add_argument(
        "--root",
        default=None,
        help="Project directory holding MSFS_C152, manifest-base.json and package.json (default: cwd).",
    )
    p.add_argument(
        "--metrics-out",
        default=None,
        help="Append a JSONL metrics record for this run to the given file.",
    )
    p.add_argument(
        "--request-id",
        default=None,
        help="Correlation identifier for structured logs and metrics.",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    set_request_id(args.request_id)
    metrics = MetricsEmitter(Path(args.metrics_out)) if args.metrics_out else None
    log_event(_LOG, "cli.request.context", request_id=get_request_id(), command="build")

    config_path = Path(args.config) if args.config else None
    root = Path(args.root) if args.root else None
    rc = _run_command_with_observability(
        command_name="build",
        fn=lambda: cmd_build(config_path, root),
        metrics=metrics,
    )
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
