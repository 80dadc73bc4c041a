"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "symbol_catalog.toml"


@dataclass(slots=True, frozen=True)
class CatalogConfig:
    """Fully merged catalog configuration."""

    favorite_symbols: str
    custom_kaomojis: tuple[str, ...]
    packs: tuple[Path, ...]
    audit_log: Path | None

    def get_favorite_symbols(self) -> str:
        return self.favorite_symbols

    def get_custom_kaomojis(self) -> tuple[str, ...]:
        return self.custom_kaomojis

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "favorites": {"symbols": self.favorite_symbols},
            "kaomojis": {"custom": list(self.custom_kaomojis)},
            "resources": {"packs": [str(pack) for pack in self.packs]},
            "logging": {"audit_log": str(self.audit_log) if self.audit_log else None},
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    favorite_symbols: str | None = None
    packs: tuple[Path, ...] | None = None
    audit_log: Path | None = None


def default_config() -> CatalogConfig:
    """Build the default (empty) configuration."""
    return CatalogConfig(favorite_symbols="", custom_kaomojis=(), packs=(), audit_log=None)


def load_config_file(config_path: Path) -> dict[str, object]:
    """Load a TOML config file; a missing file yields an empty payload."""
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{config_path.name} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Config field '{section}.{field}' must contain only strings.")
        output.append(item)
    return tuple(output)


def _optional_string(value: object, name: str, default: str | None) -> str | None:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"Config field '{name}' must be a string.")
    return value


def merge_config(
    base: CatalogConfig,
    payload: dict[str, object],
    overrides: CliOverrides,
    base_dir: Path,
) -> CatalogConfig:
    """Merge defaults, config file, then CLI/startup overrides.

    Relative pack and audit-log paths in the file resolve against base_dir.
    """
    favorites_payload = _get_table(payload, "favorites")
    kaomojis_payload = _get_table(payload, "kaomojis")
    resources_payload = _get_table(payload, "resources")
    logging_payload = _get_table(payload, "logging")

    favorite_symbols = _optional_string(
        favorites_payload.get("symbols"), "favorites.symbols", base.favorite_symbols
    )
    custom_kaomojis = base.custom_kaomojis
    if "custom" in kaomojis_payload:
        custom_kaomojis = _tuple_of_strings(kaomojis_payload["custom"], "kaomojis", "custom")
    packs = base.packs
    if "packs" in resources_payload:
        packs = tuple(
            (base_dir / pack).resolve()
            for pack in _tuple_of_strings(resources_payload["packs"], "resources", "packs")
        )
    audit_log = base.audit_log
    raw_audit_log = _optional_string(logging_payload.get("audit_log"), "logging.audit_log", None)
    if raw_audit_log is not None:
        audit_log = (base_dir / raw_audit_log).resolve()

    merged = CatalogConfig(
        favorite_symbols=favorite_symbols or "",
        custom_kaomojis=custom_kaomojis,
        packs=packs,
        audit_log=audit_log,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: CatalogConfig, overrides: CliOverrides) -> CatalogConfig:
    """Apply startup overrides at highest precedence."""
    return CatalogConfig(
        favorite_symbols=(
            overrides.favorite_symbols
            if overrides.favorite_symbols is not None
            else config.favorite_symbols
        ),
        custom_kaomojis=config.custom_kaomojis,
        packs=tuple(pack.resolve() for pack in overrides.packs) if overrides.packs else config.packs,
        audit_log=overrides.audit_log.resolve() if overrides.audit_log else config.audit_log,
    )


def load_effective_config(
    config_path: Path, overrides: CliOverrides | None = None
) -> CatalogConfig:
    """Load effective config using merge order defaults -> config file -> overrides."""
    resolved = config_path.resolve()
    payload = load_config_file(resolved)
    return merge_config(default_config(), payload, overrides or CliOverrides(), resolved.parent)
