"""Token and span data structures shared by the wrapper, tokenizer and taxonomy."""

from __future__ import annotations

from dataclasses import dataclass

from manascope.scopes import ScopeId


@dataclass(frozen=True, slots=True)
class Span:
    """Region of a wrapped text holding the caller's fragment.

    Lines and indices are 0-based; the end index is exclusive.
    """

    start_line: int
    start_index: int
    end_line: int
    end_index: int

    @property
    def is_empty(self) -> bool:
        return self.start_line == self.end_line and self.end_index <= self.start_index


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme: source text plus its scope identifier."""

    text: str
    type: ScopeId

    def __repr__(self) -> str:
        return f"Token({self.text!r}, {self.type.value})"
