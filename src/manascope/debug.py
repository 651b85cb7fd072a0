"""Human-readable token dumps for diagnosing mismatched expectations."""

from __future__ import annotations

import sys
from io import StringIO
from typing import Iterable, TextIO

from manascope.scopes import is_carrier
from manascope.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one token per line to *file*: quoted text, then its scope.

    Carrier scopes (only present when tokenizing with exclude_carriers=False)
    are marked with a leading ``~``.
    """
    rows = [(repr(t.text), t.type) for t in tokens]
    width = max((len(text) for text, _ in rows), default=0)
    for text, scope in rows:
        marker = "~" if is_carrier(scope) else " "
        file.write(f"{marker} {text:<{width}}  {scope.value}\n")


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return the dump_tokens() listing as a string."""
    buf = StringIO()
    dump_tokens(tokens, file=buf)
    return buf.getvalue()
