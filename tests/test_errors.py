"""Test error messages, position accuracy, and context snippets."""

from __future__ import annotations

import pytest

from manascope.errors import (
    ConfigError,
    GrammarLoadError,
    GrammarNotFoundError,
    UnrecognizedScopeError,
)
from manascope.inputs import Input
from manascope.tokenizer import classify

from .conftest import ScriptedGrammar, raw_token


def _located_error() -> UnrecognizedScopeError:
    inp = Input.in_class("int32 mystery;")
    line = inp.lines[2]
    grammar = ScriptedGrammar({line: [raw_token(10, 17, "keyword.other.mystery.mana")]})
    with pytest.raises(UnrecognizedScopeError) as exc_info:
        classify(grammar, inp)
    return exc_info.value


class TestErrorPositions:
    def test_position_in_wrapped_input(self):
        err = _located_error()
        assert err.line == 2
        assert err.column == 10
        assert err.text == "mystery"

    def test_bare_error_has_no_position(self):
        err = UnrecognizedScopeError("made.up.mana")
        assert err.line is None
        assert err.column is None


class TestErrorFormatting:
    def test_format_contains_error_prefix(self):
        assert _located_error().format().startswith("error: unrecognized scope")

    def test_format_contains_line(self):
        assert "    int32 mystery;" in _located_error().format()

    def test_format_contains_position(self):
        # Displayed 1-based
        assert "input:3:11" in _located_error().format()

    def test_format_carets_under_text(self):
        last = _located_error().format().splitlines()[-1]
        assert last.endswith(" " * 10 + "^^^^^^^")

    def test_format_with_custom_filename(self):
        assert "wrapped.mana:3:11" in _located_error().format("wrapped.mana")

    def test_format_without_position(self):
        err = UnrecognizedScopeError("made.up.mana", text="x")
        assert err.format() == "error: unrecognized scope 'made.up.mana' for 'x'"

    def test_str_is_formatted(self):
        err = UnrecognizedScopeError("made.up.mana")
        assert str(err) == "error: unrecognized scope 'made.up.mana'"


class TestOtherErrors:
    def test_grammar_load_error_with_path(self):
        err = GrammarLoadError("cannot read grammar file", "g.tmLanguage")
        assert err.format() == "error: cannot read grammar file\n  --> g.tmLanguage"

    def test_grammar_load_error_without_path(self):
        assert GrammarLoadError("boom").format() == "error: boom"

    def test_grammar_not_found(self):
        err = GrammarNotFoundError("source.x")
        assert err.scope_name == "source.x"
        assert str(err) == "error: no grammar available for scope 'source.x'"

    def test_config_error(self):
        assert str(ConfigError("bad")) == "error: bad"
