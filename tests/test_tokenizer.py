"""Span filtering, rule-stack threading, and the tokenize() entry points."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from manascope.engine import GrammarRegistry, RawToken
from manascope.errors import GrammarNotFoundError, UnrecognizedScopeError
from manascope.inputs import Input
from manascope.scopes import ScopeId
from manascope.taxonomy import Modifiers, Operators, Punctuation, Variables
from manascope.tokenizer import (
    classify,
    configure,
    get_registry,
    iter_span_tokens,
    tokenize,
    tokenize_sync,
)
from manascope.tokens import Span, Token

from .conftest import GRAMMAR_PATH, ScriptedGrammar, assert_tokens, raw_token, texts

# ---------------------------------------------------------------------------
# Rule-stack threading
# ---------------------------------------------------------------------------


class TestStateThreading:
    def test_state_passed_line_to_line(self):
        grammar = ScriptedGrammar({})
        inp = Input(("a", "b", "c"), Span(1, 0, 1, 1))
        list(iter_span_tokens(grammar, inp))
        # First line starts from no state; each later line gets its predecessor's
        assert grammar.seen_states == [None, 1, 2]

    def test_lines_outside_span_are_still_tokenized(self):
        grammar = ScriptedGrammar({"before": [raw_token(0, 6, "keyword.other.class.mana")]})
        inp = Input(("before", "x", "after"), Span(1, 0, 1, 1))
        assert list(iter_span_tokens(grammar, inp)) == []
        assert len(grammar.seen_states) == 3

    def test_engine_sees_every_wrapped_line(self, lex, engine):
        inp = Input.in_class("x;")
        lex(inp)
        calls = engine.grammars[0].calls
        assert [line for line, _ in calls] == list(inp.lines)
        assert calls[0][1] is None
        assert all(state is not None for _, state in calls[1:])

    def test_comment_opened_before_span_carries_into_it(self, lex):
        inp = Input(("/* open", "still */ x"), Span(1, 0, 1, 10))
        tokens = lex(inp)
        assert texts(tokens) == ["still ", "*/", "x"]
        assert tokens[-1] == Variables.ReadWrite("x")


# ---------------------------------------------------------------------------
# Span boundaries
# ---------------------------------------------------------------------------


class TestSpanBoundaries:
    def test_tokens_before_start_index_dropped(self):
        line = "{ public"
        grammar = ScriptedGrammar(
            {
                line: [
                    raw_token(0, 1, "punctuation.curlybrace.open.mana"),
                    raw_token(2, 8, "storage.modifier.mana"),
                ]
            }
        )
        tokens = classify(grammar, Input((line,), Span(0, 2, 0, 8)))
        assert_tokens(tokens, [Modifiers.Public])

    def test_tokens_after_end_index_dropped(self):
        line = "public }"
        grammar = ScriptedGrammar(
            {
                line: [
                    raw_token(0, 6, "storage.modifier.mana"),
                    raw_token(7, 8, "punctuation.curlybrace.close.mana"),
                ]
            }
        )
        tokens = classify(grammar, Input((line,), Span(0, 0, 0, 6)))
        assert_tokens(tokens, [Modifiers.Public])

    def test_straddling_token_dropped_not_split(self):
        line = "ab"
        grammar = ScriptedGrammar({line: [raw_token(0, 2, "variable.other.readwrite.mana")]})
        assert classify(grammar, Input((line,), Span(0, 1, 0, 2))) == []
        assert classify(grammar, Input((line,), Span(0, 0, 0, 1))) == []

    def test_interior_lines_unconstrained(self):
        grammar = ScriptedGrammar({"mid": [raw_token(0, 3, "variable.other.readwrite.mana")]})
        inp = Input(("xx", "mid", "yy"), Span(0, 2, 2, 0))
        assert classify(grammar, inp) == [Variables.ReadWrite("mid")]

    def test_end_index_past_line_is_clamped(self):
        # Some engines report the final token as ending one past the line
        line = "x"
        grammar = ScriptedGrammar({line: [raw_token(0, 2, "variable.other.readwrite.mana")]})
        assert classify(grammar, Input.from_text(line)) == [Variables.ReadWrite("x")]

    def test_token_without_scopes_skipped(self):
        line = "x"
        grammar = ScriptedGrammar({line: [RawToken(0, 1, ())]})
        assert classify(grammar, Input.from_text(line)) == []

    def test_shift_assignment_at_fragment_end_is_whole(self, lex):
        tokens = lex(Input.in_method("x >>="))
        assert_tokens(
            tokens,
            [Variables.ReadWrite("x"), Operators.CompoundAssignment.Bitwise.ShiftRight],
        )

    def test_span_ending_inside_shift_assignment_drops_it(self, lex):
        inp = Input(("x >>=",), Span(0, 0, 0, 4))
        assert_tokens(lex(inp), [Variables.ReadWrite("x")])

    def test_no_wrapper_tokens_leak(self, lex):
        for factory in (
            Input.in_class,
            Input.in_enum,
            Input.in_interface,
            Input.in_method,
            Input.in_namespace,
            Input.in_struct,
        ):
            assert lex(factory(";")) == [Punctuation.Semicolon], factory.__name__

    def test_empty_fragment_yields_nothing(self, lex):
        assert lex(Input.in_class("")) == []


# ---------------------------------------------------------------------------
# tokenize()
# ---------------------------------------------------------------------------


class TestTokenize:
    def test_plain_string_is_unwrapped(self, lex):
        assert_tokens(lex("x"), [Variables.ReadWrite("x")])

    def test_idempotent(self, lex):
        inp = Input.in_namespace("public class PublicClass { }")
        assert lex(inp) == lex(inp)

    def test_carriers_kept_on_request(self, lex):
        tokens = lex("a b", exclude_carriers=False)
        assert tokens == [
            Variables.ReadWrite("a"),
            Token(" ", ScopeId.SOURCE),
            Variables.ReadWrite("b"),
        ]

    def test_unknown_scope_raises_with_location(self):
        line = "    mystery"
        grammar = ScriptedGrammar({line: [raw_token(4, 11, "keyword.other.mystery.mana")]})
        with pytest.raises(UnrecognizedScopeError) as exc_info:
            classify(grammar, Input(("", line), Span(1, 4, 1, 11)))
        err = exc_info.value
        assert err.scope == "keyword.other.mystery.mana"
        assert err.text == "mystery"
        assert (err.line, err.column) == (1, 4)
        assert err.source_line == line

    def test_missing_grammar_raises_before_tokenizing(self, engine):
        empty = GrammarRegistry(engine, {})
        with pytest.raises(GrammarNotFoundError, match="source.mana"):
            asyncio.run(tokenize("x", registry=empty))
        assert engine.compiled == []

    def test_concurrent_calls_share_one_grammar(self, registry, engine):
        async def run_all() -> list[list[Token]]:
            inputs = [Input.in_class(f"int32 f{i};") for i in range(5)]
            return await asyncio.gather(*(tokenize(i, registry=registry) for i in inputs))

        results = asyncio.run(run_all())
        assert [texts(r) for r in results] == [["int32", f"f{i}", ";"] for i in range(5)]
        assert len(engine.compiled) == 1

    def test_tokenize_sync(self, registry):
        assert tokenize_sync("x", registry=registry) == [Variables.ReadWrite("x")]


# ---------------------------------------------------------------------------
# Process-wide registry
# ---------------------------------------------------------------------------


class TestDefaultRegistry:
    def test_configured_registry_used(self, registry):
        configure(registry)
        assert tokenize_sync("x") == [Variables.ReadWrite("x")]

    def test_built_from_config_once(self, tmp_path: Path):
        cfg = tmp_path / "manascope.toml"
        cfg.write_text(
            f'[grammar]\npath = "{GRAMMAR_PATH.as_posix()}"\n'
            '[engine]\nfactory = "tests.fake_engine:FakeEngine"\n'
        )
        first = get_registry(search_dir=tmp_path)
        second = get_registry(search_dir=tmp_path)
        assert first is second
        assert first.grammar_paths == {"source.mana": GRAMMAR_PATH}
        assert tokenize_sync("x") == [Variables.ReadWrite("x")]
