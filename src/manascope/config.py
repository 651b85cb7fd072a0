"""Configuration: grammar location, rule-engine factory, and log level."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from manascope.engine import MANA_SCOPE_NAME, GrammarRegistry, load_engine
from manascope.errors import ConfigError, GrammarLoadError

CONFIG_FILENAME = "manascope.toml"
DEFAULT_GRAMMAR_PATH = Path("grammars") / "mana.tmLanguage"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved settings for building the grammar registry."""

    scope_name: str
    grammar_path: Path
    engine_factory: str | None
    log_level: str


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", path) from exc


def _table(config: dict[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _string(table: dict[str, Any], key: str, section: str) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{section}.{key} must be a string")
    return value


def resolve_settings(
    config: dict[str, Any],
    base_dir: Path,
    *,
    scope_name: str | None = None,
    grammar_path: Path | None = None,
    engine_factory: str | None = None,
    log_level: str | None = None,
) -> Settings:
    """Merge defaults, config file values and explicit overrides.

    Precedence: defaults < config file < keyword arguments. A relative
    grammar path from the config file is resolved against base_dir.
    """
    grammar = _table(config, "grammar")
    engine = _table(config, "engine")
    logging_cfg = _table(config, "logging")

    # Scope name: default < config < override
    resolved_scope = MANA_SCOPE_NAME
    cfg_scope = _string(grammar, "scope", "grammar")
    if cfg_scope:
        resolved_scope = cfg_scope
    if scope_name is not None:
        resolved_scope = scope_name

    # Grammar path: default < config < override
    resolved_path = base_dir / DEFAULT_GRAMMAR_PATH
    cfg_path = _string(grammar, "path", "grammar")
    if cfg_path:
        resolved_path = base_dir / cfg_path
    if grammar_path is not None:
        resolved_path = grammar_path

    resolved_factory = _string(engine, "factory", "engine")
    if engine_factory is not None:
        resolved_factory = engine_factory

    resolved_level = _string(logging_cfg, "level", "logging") or "WARNING"
    if log_level is not None:
        resolved_level = log_level
    resolved_level = resolved_level.upper()
    if resolved_level not in logging.getLevelNamesMapping():
        raise ConfigError(f"unknown log level: {resolved_level}")

    return Settings(
        scope_name=resolved_scope,
        grammar_path=resolved_path,
        engine_factory=resolved_factory,
        log_level=resolved_level,
    )


def configure_logging(level: str) -> None:
    """Apply a log level to the package logger. No handlers are installed."""
    logging.getLogger("manascope").setLevel(level)


def build_registry(settings: Settings) -> GrammarRegistry:
    """Create a grammar registry from resolved settings."""
    if settings.engine_factory is None:
        raise GrammarLoadError(
            f"no rule engine configured (set [engine] factory in {CONFIG_FILENAME})"
        )
    engine = load_engine(settings.engine_factory)
    return GrammarRegistry(
        engine,
        {settings.scope_name: settings.grammar_path},
        default_scope=settings.scope_name,
    )
