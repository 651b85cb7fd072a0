"""Rule-engine boundary: grammar discovery, loading, and the engine protocol.

The grammar engine itself (pattern matching, rule stacks) is supplied by the
caller as a ``RuleEngine``. This module only reads grammar files, hands
them to the engine, and caches the compiled result per scope name.
"""

from __future__ import annotations

import asyncio
import importlib
import json
import logging
import plistlib
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol
from xml.parsers.expat import ExpatError

from manascope.errors import GrammarLoadError

logger = logging.getLogger(__name__)

MANA_SCOPE_NAME = "source.mana"


@dataclass(frozen=True, slots=True)
class RawToken:
    """One engine token: character range within the line and its scope stack."""

    start_index: int
    end_index: int
    scopes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LineResult:
    """Tokens for one line plus the opaque state to pass to the next line."""

    tokens: tuple[RawToken, ...]
    rule_stack: Any


class Grammar(Protocol):
    def tokenize_line(self, line: str, prev_state: Any) -> LineResult: ...


class RuleEngine(Protocol):
    def compile_grammar(self, raw: dict[str, Any]) -> Grammar: ...


def parse_raw_grammar(path: Path) -> dict[str, Any]:
    """Read a grammar definition file into a plain dict.

    ``.json`` files are parsed as JSON; anything else (``.tmLanguage``,
    ``.plist``) as an XML property list.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise GrammarLoadError(f"cannot read grammar file: {exc.strerror}", path) from exc

    try:
        if path.suffix == ".json":
            raw = json.loads(data)
        else:
            raw = plistlib.loads(data)
    except (ValueError, ExpatError) as exc:
        raise GrammarLoadError(f"malformed grammar file: {exc}", path) from exc

    if not isinstance(raw, dict):
        raise GrammarLoadError("grammar file must contain a dictionary at top level", path)
    return raw


def load_engine(factory: str) -> RuleEngine:
    """Resolve a ``"package.module:attribute"`` string to a rule engine.

    Classes and factory functions are called without arguments; any other
    attribute is used as the engine directly.
    """
    module_name, sep, attr = factory.partition(":")
    if not sep or not module_name or not attr:
        raise GrammarLoadError(f"invalid engine factory (expected module:attribute): {factory}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise GrammarLoadError(f"cannot import engine module '{module_name}': {exc}") from exc

    try:
        target = getattr(module, attr)
    except AttributeError:
        raise GrammarLoadError(f"module '{module_name}' has no attribute '{attr}'") from None

    engine = target() if callable(target) else target
    if not hasattr(engine, "compile_grammar"):
        raise GrammarLoadError(f"engine factory '{factory}' did not produce a rule engine")
    return engine


@dataclass
class GrammarRegistry:
    """Loads and compiles grammars by scope name. Results are cached."""

    engine: RuleEngine
    grammar_paths: dict[str, Path] = field(default_factory=dict)
    default_scope: str = MANA_SCOPE_NAME
    _cache: dict[str, Grammar | None] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    async def load_grammar(self, scope_name: str) -> Grammar | None:
        """Return the compiled grammar for scope_name, or None if unknown."""
        if scope_name in self._cache:
            return self._cache[scope_name]
        return await asyncio.to_thread(self.find_grammar, scope_name)

    def find_grammar(self, scope_name: str) -> Grammar | None:
        """Synchronous lookup; compiles at most once per scope name."""
        with self._lock:
            if scope_name in self._cache:
                return self._cache[scope_name]
            grammar = self._compile(scope_name)
            self._cache[scope_name] = grammar
            return grammar

    def _compile(self, scope_name: str) -> Grammar | None:
        path = self.grammar_paths.get(scope_name)
        if path is None:
            logger.warning("Unknown scope name: %s", scope_name)
            return None

        raw = parse_raw_grammar(path)
        logger.debug("compiling grammar %s from %s", scope_name, path)
        return self.engine.compile_grammar(raw)
