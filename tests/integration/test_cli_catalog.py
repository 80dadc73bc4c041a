from __future__ import annotations

import io
import json
from pathlib import Path

from symbol_catalog.cli import main


def _write_pack(pack: Path) -> None:
    tabs = pack / "assets" / "ns" / "symbol_tabs"
    symbols = pack / "assets" / "ns" / "symbols"
    tabs.mkdir(parents=True)
    symbols.mkdir(parents=True)
    (tabs / "arrows.json").write_text(
        json.dumps({"icon": "a", "order": 2, "search_bar": True, "symbols": ["ns:arrows"]}),
        encoding="utf-8",
    )
    (tabs / "favorites.json").write_text(
        json.dumps({"icon": "*", "order": 0, "symbols": ["symbol_catalog:favorites"]}),
        encoding="utf-8",
    )
    (symbols / "arrows.txt").write_text("<>^", encoding="utf-8")


def _run(argv: list[str]) -> tuple[int, dict[str, object]]:
    out = io.StringIO()
    code = main(argv, out_stream=out)
    return code, json.loads(out.getvalue())


def test_cli_prints_catalog_snapshot(tmp_path: Path) -> None:
    pack = tmp_path / "pack"
    _write_pack(pack)
    config_path = tmp_path / "symbol_catalog.toml"
    config_path.write_text(
        '[favorites]\nsymbols = "xy"\n\n[resources]\npacks = ["pack"]\n\n'
        '[logging]\naudit_log = "audit.jsonl"\n',
        encoding="utf-8",
    )

    code, payload = _run(["--config", str(config_path)])

    assert code == 0
    assert payload["ok"] is True
    result = payload["result"]
    assert [tab["id"] for tab in result["tabs"]] == ["ns:favorites", "ns:arrows"]
    assert result["tabs"][1]["search_bar"] is True
    assert result["tabs"][1]["symbol_count"] == 3
    assert result["favorites"] == ["x", "y"]
    audit = (tmp_path / "audit.jsonl").read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["action"] for line in audit] == ["reload", "config_reload"]


def test_cli_prints_single_tab(tmp_path: Path) -> None:
    pack = tmp_path / "pack"
    _write_pack(pack)

    code, payload = _run(
        [
            "--config",
            str(tmp_path / "absent.toml"),
            "--pack",
            str(pack),
            "--favorites",
            "q",
            "--tab",
            "ns:favorites",
        ]
    )

    assert code == 0
    assert payload["result"] == {"id": "ns:favorites", "symbols": ["q"], "favorites_only": True}


def test_cli_reports_reload_failure(tmp_path: Path) -> None:
    pack = tmp_path / "pack"
    _write_pack(pack)
    (pack / "assets" / "ns" / "symbol_tabs" / "broken.json").write_text("{}", encoding="utf-8")

    code, payload = _run(["--config", str(tmp_path / "absent.toml"), "--pack", str(pack)])

    assert code == 1
    assert payload["ok"] is False
    assert payload["error"]["code"] == "RELOAD_FAILED"
    assert "ns:broken" in payload["error"]["message"]


def test_cli_reports_unknown_tab(tmp_path: Path) -> None:
    code, payload = _run(["--config", str(tmp_path / "absent.toml"), "--tab", "ns:none"])

    assert code == 1
    assert payload["error"]["code"] == "UNKNOWN_TAB"


def test_cli_reports_unnamed_tab_file_as_reload_failure(tmp_path: Path) -> None:
    pack = tmp_path / "pack"
    _write_pack(pack)
    (pack / "assets" / "ns" / "symbol_tabs" / ".json").write_text("{}", encoding="utf-8")

    code, payload = _run(["--config", str(tmp_path / "absent.toml"), "--pack", str(pack)])

    assert code == 1
    assert payload["error"]["code"] == "RELOAD_FAILED"
    assert "ns:symbol_tabs/.json" in payload["error"]["message"]
