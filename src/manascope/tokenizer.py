"""Span-filtered tokenization of wrapped inputs.

Each line of an ``Input`` is fed to the grammar in order, threading the
engine's rule stack from one line to the next. Only tokens inside the
fragment span are kept; their innermost scope is then classified.
"""

from __future__ import annotations

import asyncio
import threading
from pathlib import Path
from typing import Iterator

from manascope.config import build_registry, configure_logging, load_config, resolve_settings
from manascope.engine import Grammar, GrammarRegistry, RawToken
from manascope.errors import GrammarNotFoundError, UnrecognizedScopeError
from manascope.inputs import Input
from manascope.normalize import normalize
from manascope.tokens import Token

_registry: GrammarRegistry | None = None
_registry_lock = threading.Lock()


def configure(registry: GrammarRegistry | None) -> None:
    """Install the process-wide registry used when tokenize() gets none."""
    global _registry
    with _registry_lock:
        _registry = registry


def reset_registry() -> None:
    configure(None)


def get_registry(
    config_path: Path | None = None, search_dir: Path | None = None
) -> GrammarRegistry:
    """Return the process-wide registry, building it from config on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            if search_dir is None:
                search_dir = Path.cwd()
            config = load_config(config_path, search_dir)
            base_dir = config_path.parent if config_path is not None else search_dir
            settings = resolve_settings(config, base_dir)
            configure_logging(settings.log_level)
            _registry = build_registry(settings)
        return _registry


def iter_span_tokens(grammar: Grammar, input: Input) -> Iterator[tuple[int, RawToken]]:
    """Yield (line index, raw token) for every token inside the input's span.

    Every line is tokenized, including those outside the span, so the rule
    stack entering each line is the same as for the unfiltered text.
    """
    span = input.span
    state = None

    for line_index, line in enumerate(input.lines):
        result = grammar.tokenize_line(line, state)
        state = result.rule_stack

        if line_index < span.start_line or line_index > span.end_line:
            continue

        for token in result.tokens:
            if line_index == span.start_line and token.start_index < span.start_index:
                continue
            # Engines may report the last token as ending past the line.
            end = min(token.end_index, len(line))
            if line_index == span.end_line and end > span.end_index:
                continue
            if not token.scopes:
                continue
            yield line_index, token


def classify(grammar: Grammar, input: Input, exclude_carriers: bool = True) -> list[Token]:
    """Tokenize an input synchronously and classify the surviving tokens."""
    tokens: list[Token] = []
    for line_index, raw in iter_span_tokens(grammar, input):
        line = input.lines[line_index]
        text = line[raw.start_index : raw.end_index]
        try:
            token = normalize(text, raw.scopes[-1], exclude_carriers=exclude_carriers)
        except UnrecognizedScopeError as exc:
            raise exc.with_context(text, line_index, raw.start_index, line) from None
        if token is not None:
            tokens.append(token)
    return tokens


async def tokenize(
    input: str | Input,
    exclude_carriers: bool = True,
    *,
    registry: GrammarRegistry | None = None,
    scope_name: str | None = None,
) -> list[Token]:
    """Tokenize a fragment and return its classified tokens in source order.

    Plain strings are tokenized unwrapped. With exclude_carriers=False the
    structural carrier scopes are reported too, which is useful when
    diagnosing why an expected token list does not match.
    """
    if isinstance(input, str):
        input = Input.from_text(input)
    if registry is None:
        registry = get_registry()
    if scope_name is None:
        scope_name = registry.default_scope

    grammar = await registry.load_grammar(scope_name)
    if grammar is None:
        raise GrammarNotFoundError(scope_name)

    return classify(grammar, input, exclude_carriers)


def tokenize_sync(
    input: str | Input,
    exclude_carriers: bool = True,
    *,
    registry: GrammarRegistry | None = None,
    scope_name: str | None = None,
) -> list[Token]:
    """Blocking wrapper around tokenize() for scripts and REPL use."""
    return asyncio.run(
        tokenize(input, exclude_carriers, registry=registry, scope_name=scope_name)
    )
