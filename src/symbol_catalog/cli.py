"""Command-line entrypoint: load packs and print the catalog."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from symbol_catalog.catalog import ReloadError, SymbolManager
from symbol_catalog.config import CONFIG_FILE_NAME, CliOverrides, load_effective_config
from symbol_catalog.logging import JsonlAuditLogger
from symbol_catalog.reload import ReloadListenerRegistry
from symbol_catalog.resources import DirectoryResourceProvider, Identifier


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for catalog loading."""
    parser = argparse.ArgumentParser(prog="symbol-catalog")
    parser.add_argument("--config", required=False, default=CONFIG_FILE_NAME)
    parser.add_argument("--pack", action="append", required=False, default=None)
    parser.add_argument("--favorites", required=False, default=None)
    parser.add_argument("--audit-log", required=False, default=None)
    parser.add_argument("--tab", required=False, default=None)
    return parser


def main(argv: list[str] | None = None, out_stream: TextIO | None = None) -> int:
    """Load the configured packs, reload the catalog and print it as JSON."""
    out = out_stream or sys.stdout
    args = build_arg_parser().parse_args(argv)
    overrides = CliOverrides(
        favorite_symbols=args.favorites,
        packs=tuple(Path(pack) for pack in args.pack) if args.pack else None,
        audit_log=Path(args.audit_log) if args.audit_log is not None else None,
    )
    try:
        config = load_effective_config(Path(args.config), overrides)
        tab_id = Identifier.parse(args.tab) if args.tab is not None else None
    except ValueError as error:
        _write(out, _error_envelope("INVALID_CONFIG", str(error)))
        return 1

    audit_logger = JsonlAuditLogger(config.audit_log) if config.audit_log else None
    manager = SymbolManager(audit_logger=audit_logger)
    registry = ReloadListenerRegistry()
    registry.register(manager)
    try:
        registry.reload_all(DirectoryResourceProvider(config.packs))
    except ReloadError as error:
        _write(out, _error_envelope("RELOAD_FAILED", str(error)))
        return 1
    manager.on_config_reload(config)

    if tab_id is None:
        _write(out, {"ok": True, "result": manager.snapshot()})
        return 0
    tab = manager.get_tab(tab_id)
    if tab is None:
        _write(out, _error_envelope("UNKNOWN_TAB", f"Unknown tab: {tab_id}"))
        return 1
    _write(
        out,
        {
            "ok": True,
            "result": {
                "id": str(tab.id),
                "symbols": list(tab.stream_symbols()),
                "favorites_only": manager.is_only_favorites(tab),
            },
        },
    )
    return 0


def _error_envelope(code: str, message: str) -> dict[str, object]:
    return {"ok": False, "error": {"code": code, "message": message}}


def _write(out: TextIO, payload: dict[str, object]) -> None:
    out.write(f"{json.dumps(payload, sort_keys=True, ensure_ascii=False)}\n")
    out.flush()


if __name__ == "__main__":
    raise SystemExit(main())
