"""Shared test fixtures and helpers."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest

from manascope.engine import MANA_SCOPE_NAME, GrammarRegistry, LineResult, RawToken
from manascope.inputs import Input
from manascope.scopes import ScopeId
from manascope.tokenizer import reset_registry, tokenize
from manascope.tokens import Token

from .fake_engine import FakeEngine

GRAMMAR_DIR = Path(__file__).parent / "grammars"
GRAMMAR_PATH = GRAMMAR_DIR / "mana.tmLanguage"


@pytest.fixture(autouse=True)
def _fresh_default_registry():
    """Keep the process-wide registry from leaking between tests."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def registry(engine: FakeEngine) -> GrammarRegistry:
    """A registry serving the fake grammar under source.mana."""
    return GrammarRegistry(engine, {MANA_SCOPE_NAME: GRAMMAR_PATH})


@pytest.fixture
def lex(registry: GrammarRegistry):
    """Return a helper that tokenizes a string or Input and returns classified tokens."""

    def _lex(source: str | Input, exclude_carriers: bool = True) -> list[Token]:
        return asyncio.run(tokenize(source, exclude_carriers, registry=registry))

    return _lex


def assert_tokens(tokens: list[Token], expected: list[Token]) -> None:
    """Assert that the token list matches the expected list exactly."""
    assert tokens == expected, f"Expected {expected}, got {tokens}"


def assert_types(tokens: list[Token], expected: list[ScopeId]) -> None:
    """Assert that the token scopes match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def texts(tokens: list[Token]) -> list[str]:
    """Return the text of each token."""
    return [t.text for t in tokens]


def raw_token(start: int, end: int, scope: str) -> RawToken:
    """Build an engine token whose innermost scope is *scope*."""
    return RawToken(start, end, (MANA_SCOPE_NAME, scope))


class ScriptedGrammar:
    """Returns canned tokens per line and records the state it was given.

    The rule stack handed back for each line is the number of lines seen so
    far, which makes the threading order visible to tests.
    """

    def __init__(self, script: dict[str, list[RawToken]]) -> None:
        self.script = script
        self.seen_states: list[Any] = []

    def tokenize_line(self, line: str, prev_state: Any) -> LineResult:
        self.seen_states.append(prev_state)
        return LineResult(tuple(self.script.get(line, [])), len(self.seen_states))
