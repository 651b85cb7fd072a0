"""Map raw (text, scope) pairs from the rule engine onto classified tokens."""

from __future__ import annotations

from typing import Iterable

from manascope.scopes import is_carrier, lookup_scope
from manascope.tokens import Token


def normalize(text: str, raw_scope: str, *, exclude_carriers: bool = True) -> Token | None:
    """Classify one lexeme.

    Returns None for carrier scopes when exclude_carriers is set. Raises
    UnrecognizedScopeError for a scope outside the vocabulary.
    """
    scope = lookup_scope(raw_scope)
    if exclude_carriers and is_carrier(scope):
        return None
    return Token(text, scope)


def normalize_all(
    pairs: Iterable[tuple[str, str]], *, exclude_carriers: bool = True
) -> list[Token]:
    """Classify a sequence of (text, raw scope) pairs, preserving order."""
    tokens: list[Token] = []
    for text, raw_scope in pairs:
        token = normalize(text, raw_scope, exclude_carriers=exclude_carriers)
        if token is not None:
            tokens.append(token)
    return tokens
