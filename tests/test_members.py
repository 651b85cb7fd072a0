"""Members classified inside class, struct, interface, enum and method bodies."""

from manascope.inputs import Input
from manascope.taxonomy import (
    Identifiers,
    Keywords,
    Literals,
    Modifiers,
    Operators,
    PrimitiveType,
    Punctuation,
    Variables,
)

from .conftest import assert_tokens


class TestFields:
    def test_field_in_class(self, lex):
        tokens = lex(Input.in_class("private int32 count;"))
        assert_tokens(
            tokens,
            [
                Modifiers.Private,
                PrimitiveType.Int32,
                Identifiers.FieldName("count"),
                Punctuation.Semicolon,
            ],
        )

    def test_field_in_struct(self, lex):
        tokens = lex(Input.in_struct("public double X;"))
        assert_tokens(
            tokens,
            [
                Modifiers.Public,
                PrimitiveType.Double,
                Identifiers.FieldName("X"),
                Punctuation.Semicolon,
            ],
        )

    def test_field_with_initializer(self, lex):
        tokens = lex(Input.in_class("static readonly int64 Max = 1_000;"))
        assert_tokens(
            tokens,
            [
                Modifiers.Static,
                Modifiers.ReadOnly,
                PrimitiveType.Int64,
                Identifiers.FieldName("Max"),
                Operators.Assignment,
                Literals.Numeric.Decimal("1"),
                Literals.Numeric.Other.Separator.Thousands,
                Literals.Numeric.Decimal("000"),
                Punctuation.Semicolon,
            ],
        )


class TestMethods:
    def test_interface_method(self, lex):
        tokens = lex(Input.in_interface("void Run();"))
        assert_tokens(
            tokens,
            [
                PrimitiveType.Void,
                Identifiers.MethodName("Run"),
                Punctuation.OpenParen,
                Punctuation.CloseParen,
                Punctuation.Semicolon,
            ],
        )

    def test_method_with_body(self, lex):
        tokens = lex(Input.in_class("public bool IsReady() { return true; }"))
        assert_tokens(
            tokens,
            [
                Modifiers.Public,
                PrimitiveType.Bool,
                Identifiers.MethodName("IsReady"),
                Punctuation.OpenParen,
                Punctuation.CloseParen,
                Punctuation.OpenBrace,
                Keywords.Control.Return,
                Literals.Boolean.True_,
                Punctuation.Semicolon,
                Punctuation.CloseBrace,
            ],
        )


class TestEnumMembers:
    def test_members_across_lines(self, lex):
        tokens = lex(Input.in_enum("Red,\nGreen,\nBlue"))
        assert_tokens(
            tokens,
            [
                Identifiers.EnumMemberName("Red"),
                Punctuation.Comma,
                Identifiers.EnumMemberName("Green"),
                Punctuation.Comma,
                Identifiers.EnumMemberName("Blue"),
            ],
        )

    def test_member_with_value(self, lex):
        tokens = lex(Input.in_enum("Flag = 0x1F"))
        assert_tokens(
            tokens,
            [
                Identifiers.EnumMemberName("Flag"),
                Operators.Assignment,
                Literals.Numeric.Other.Prefix.Hexadecimal("0x"),
                Literals.Numeric.Hexadecimal("1F"),
            ],
        )


class TestStatements:
    def test_local_declaration(self, lex):
        tokens = lex(Input.in_method("var total = count + 1;"))
        assert_tokens(
            tokens,
            [
                Keywords.Var,
                Identifiers.LocalName("total"),
                Operators.Assignment,
                Variables.ReadWrite("count"),
                Operators.Arithmetic.Addition,
                Literals.Numeric.Decimal("1"),
                Punctuation.Semicolon,
            ],
        )
