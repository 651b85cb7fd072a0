"""Scope-classification test harness for the mana TextMate grammar."""

from __future__ import annotations

from manascope.errors import (
    ConfigError,
    GrammarLoadError,
    GrammarNotFoundError,
    UnrecognizedScopeError,
)
from manascope.inputs import Input
from manascope.scopes import ScopeId
from manascope.tokenizer import configure, tokenize, tokenize_sync
from manascope.tokens import Span, Token

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "GrammarLoadError",
    "GrammarNotFoundError",
    "Input",
    "ScopeId",
    "Span",
    "Token",
    "UnrecognizedScopeError",
    "configure",
    "tokenize",
    "tokenize_sync",
]
