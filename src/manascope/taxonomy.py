"""Expected-token vocabulary for mana grammar tests.

Each lexical category the grammar can produce has exactly one entry here:
a constant ``Token`` when the text is fixed (keywords, punctuation), or a
constructor taking the text when it varies (identifiers, literals, comment
bodies). Tests build their expected lists from these entries::

    [Keywords.Modifiers.Public, Keywords.Class, Identifiers.ClassName("C")]
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Iterator

from manascope.scopes import ScopeId as S
from manascope.tokens import Token

TokenFactory = Callable[[str], Token]


def _kind(scope: S) -> TokenFactory:
    """Return a constructor for tokens whose text is supplied by the caller."""
    return partial(Token, type=scope)


class Comment:
    LeadingWhitespace = _kind(S.PUNCTUATION_WHITESPACE_COMMENT_LEADING)

    class MultiLine:
        End = Token("*/", S.PUNCTUATION_DEFINITION_COMMENT)
        Start = Token("/*", S.PUNCTUATION_DEFINITION_COMMENT)
        Text = _kind(S.COMMENT_BLOCK)

    class SingleLine:
        Start = Token("//", S.PUNCTUATION_DEFINITION_COMMENT)
        Text = _kind(S.COMMENT_LINE_DOUBLE_SLASH)


class Identifiers:
    AliasName = _kind(S.ENTITY_NAME_TYPE_ALIAS)
    ClassName = _kind(S.ENTITY_NAME_TYPE_CLASS)
    DelegateName = _kind(S.ENTITY_NAME_TYPE_DELEGATE)
    EnumMemberName = _kind(S.ENTITY_NAME_VARIABLE_ENUM_MEMBER)
    EnumName = _kind(S.ENTITY_NAME_TYPE_ENUM)
    EventName = _kind(S.ENTITY_NAME_VARIABLE_EVENT)
    FieldName = _kind(S.ENTITY_NAME_VARIABLE_FIELD)
    InterfaceName = _kind(S.ENTITY_NAME_TYPE_INTERFACE)
    LabelName = _kind(S.ENTITY_NAME_LABEL)
    LocalName = _kind(S.ENTITY_NAME_VARIABLE_LOCAL)
    MethodName = _kind(S.ENTITY_NAME_FUNCTION)
    NamespaceName = _kind(S.ENTITY_NAME_TYPE_NAMESPACE)
    ParameterName = _kind(S.ENTITY_NAME_VARIABLE_PARAMETER)
    PreprocessorSymbol = _kind(S.ENTITY_NAME_VARIABLE_PREPROCESSOR_SYMBOL)
    PropertyName = _kind(S.ENTITY_NAME_VARIABLE_PROPERTY)
    RangeVariableName = _kind(S.ENTITY_NAME_VARIABLE_RANGE_VARIABLE)
    RecordName = _kind(S.ENTITY_NAME_TYPE_RECORD)
    StructName = _kind(S.ENTITY_NAME_TYPE_STRUCT)
    TupleElementName = _kind(S.ENTITY_NAME_VARIABLE_TUPLE_ELEMENT)
    TypeParameterName = _kind(S.ENTITY_NAME_TYPE_TYPE_PARAMETER)


class Keywords:
    class Control:
        Break = Token("break", S.KEYWORD_CONTROL_FLOW_BREAK)
        Case = Token("case", S.KEYWORD_CONTROL_CASE)
        Catch = Token("catch", S.KEYWORD_CONTROL_TRY_CATCH)
        Continue = Token("continue", S.KEYWORD_CONTROL_FLOW_CONTINUE)
        Default = Token("default", S.KEYWORD_CONTROL_DEFAULT)
        Do = Token("do", S.KEYWORD_CONTROL_LOOP_DO)
        Else = Token("else", S.KEYWORD_CONTROL_CONDITIONAL_ELSE)
        Finally = Token("finally", S.KEYWORD_CONTROL_TRY_FINALLY)
        For = Token("for", S.KEYWORD_CONTROL_LOOP_FOR)
        ForEach = Token("foreach", S.KEYWORD_CONTROL_LOOP_FOREACH)
        Goto = Token("goto", S.KEYWORD_CONTROL_GOTO)
        If = Token("if", S.KEYWORD_CONTROL_CONDITIONAL_IF)
        In = Token("in", S.KEYWORD_CONTROL_LOOP_IN)
        Return = Token("return", S.KEYWORD_CONTROL_FLOW_RETURN)
        Switch = Token("switch", S.KEYWORD_CONTROL_SWITCH)
        Throw = Token("throw", S.KEYWORD_CONTROL_FLOW_THROW)
        Try = Token("try", S.KEYWORD_CONTROL_TRY)
        When = Token("when", S.KEYWORD_CONTROL_TRY_WHEN)
        While = Token("while", S.KEYWORD_CONTROL_LOOP_WHILE)
        Yield = Token("yield", S.KEYWORD_CONTROL_FLOW_YIELD)

    # All modifiers share one scope; only the text tells them apart.
    class Modifiers:
        Abstract = Token("abstract", S.STORAGE_MODIFIER)
        Async = Token("async", S.STORAGE_MODIFIER)
        Const = Token("const", S.STORAGE_MODIFIER)
        Extern = Token("extern", S.STORAGE_MODIFIER)
        In = Token("in", S.STORAGE_MODIFIER)
        Internal = Token("internal", S.STORAGE_MODIFIER)
        New = Token("new", S.STORAGE_MODIFIER)
        Out = Token("out", S.STORAGE_MODIFIER)
        Override = Token("override", S.STORAGE_MODIFIER)
        Params = Token("params", S.STORAGE_MODIFIER)
        Partial = Token("partial", S.STORAGE_MODIFIER)
        Private = Token("private", S.STORAGE_MODIFIER)
        Protected = Token("protected", S.STORAGE_MODIFIER)
        Public = Token("public", S.STORAGE_MODIFIER)
        ReadOnly = Token("readonly", S.STORAGE_MODIFIER)
        Ref = Token("ref", S.STORAGE_MODIFIER)
        Sealed = Token("sealed", S.STORAGE_MODIFIER)
        Static = Token("static", S.STORAGE_MODIFIER)
        This = Token("this", S.STORAGE_MODIFIER)
        Unsafe = Token("unsafe", S.STORAGE_MODIFIER)
        Virtual = Token("virtual", S.STORAGE_MODIFIER)

    class Preprocessor:
        Checksum = Token("checksum", S.KEYWORD_PREPROCESSOR_CHECKSUM)
        Default = Token("default", S.KEYWORD_PREPROCESSOR_DEFAULT)
        Define = Token("define", S.KEYWORD_PREPROCESSOR_DEFINE)
        Disable = Token("disable", S.KEYWORD_PREPROCESSOR_DISABLE)
        ElIf = Token("elif", S.KEYWORD_PREPROCESSOR_ELIF)
        Else = Token("else", S.KEYWORD_PREPROCESSOR_ELSE)
        EndIf = Token("endif", S.KEYWORD_PREPROCESSOR_ENDIF)
        EndRegion = Token("endregion", S.KEYWORD_PREPROCESSOR_ENDREGION)
        Error = Token("error", S.KEYWORD_PREPROCESSOR_ERROR)
        Hidden = Token("hidden", S.KEYWORD_PREPROCESSOR_HIDDEN)
        If = Token("if", S.KEYWORD_PREPROCESSOR_IF)
        Line = Token("line", S.KEYWORD_PREPROCESSOR_LINE)
        Load = Token("load", S.KEYWORD_PREPROCESSOR_LOAD)
        Pragma = Token("pragma", S.KEYWORD_PREPROCESSOR_PRAGMA)
        R = Token("r", S.KEYWORD_PREPROCESSOR_R)
        Region = Token("region", S.KEYWORD_PREPROCESSOR_REGION)
        Restore = Token("restore", S.KEYWORD_PREPROCESSOR_RESTORE)
        Undef = Token("undef", S.KEYWORD_PREPROCESSOR_UNDEF)
        Warning = Token("warning", S.KEYWORD_PREPROCESSOR_WARNING)

    class Queries:
        Ascending = Token("ascending", S.KEYWORD_QUERY_ASCENDING)
        By = Token("by", S.KEYWORD_QUERY_BY)
        Descending = Token("descending", S.KEYWORD_QUERY_DESCENDING)
        Equals = Token("equals", S.KEYWORD_QUERY_EQUALS)
        From = Token("from", S.KEYWORD_QUERY_FROM)
        Group = Token("group", S.KEYWORD_QUERY_GROUP)
        In = Token("in", S.KEYWORD_QUERY_IN)
        Into = Token("into", S.KEYWORD_QUERY_INTO)
        Join = Token("join", S.KEYWORD_QUERY_JOIN)
        Let = Token("let", S.KEYWORD_QUERY_LET)
        On = Token("on", S.KEYWORD_QUERY_ON)
        OrderBy = Token("orderby", S.KEYWORD_QUERY_ORDERBY)
        Select = Token("select", S.KEYWORD_QUERY_SELECT)
        Where = Token("where", S.KEYWORD_QUERY_WHERE)

    Add = Token("add", S.KEYWORD_OTHER_ADD)
    Alias = Token("alias", S.KEYWORD_OTHER_ALIAS)
    AttributeSpecifier = _kind(S.KEYWORD_OTHER_ATTRIBUTE_SPECIFIER)
    Await = Token("await", S.KEYWORD_OTHER_AWAIT)
    As = Token("as", S.KEYWORD_OTHER_AS)
    Base = Token("base", S.KEYWORD_OTHER_BASE)
    Checked = Token("checked", S.KEYWORD_OTHER_CHECKED)
    Class = Token("class", S.KEYWORD_OTHER_CLASS)
    Default = Token("default", S.KEYWORD_OTHER_DEFAULT)
    Delegate = Token("delegate", S.KEYWORD_OTHER_DELEGATE)
    Enum = Token("enum", S.KEYWORD_OTHER_ENUM)
    Event = Token("event", S.KEYWORD_OTHER_EVENT)
    Explicit = Token("explicit", S.KEYWORD_OTHER_EXPLICIT)
    Extern = Token("extern", S.KEYWORD_OTHER_EXTERN)
    Get = Token("get", S.KEYWORD_OTHER_GET)
    Implicit = Token("implicit", S.KEYWORD_OTHER_IMPLICIT)
    Init = Token("init", S.KEYWORD_OTHER_INIT)
    Interface = Token("interface", S.KEYWORD_OTHER_INTERFACE)
    Is = Token("is", S.KEYWORD_OTHER_IS)
    Lock = Token("lock", S.KEYWORD_OTHER_LOCK)
    NameOf = Token("nameof", S.KEYWORD_OTHER_NAMEOF)
    Namespace = Token("namespace", S.KEYWORD_OTHER_NAMESPACE)
    New = Token("new", S.KEYWORD_OTHER_NEW)
    Stackalloc = Token("stackalloc", S.KEYWORD_OTHER_NEW)
    Operator = Token("operator", S.KEYWORD_OTHER_OPERATOR_DECL)
    Record = Token("record", S.KEYWORD_OTHER_RECORD)
    Remove = Token("remove", S.KEYWORD_OTHER_REMOVE)
    Set = Token("set", S.KEYWORD_OTHER_SET)
    Static = Token("static", S.KEYWORD_OTHER_STATIC)
    Struct = Token("struct", S.KEYWORD_OTHER_STRUCT)
    This = Token("this", S.KEYWORD_OTHER_THIS)
    TypeOf = Token("typeof", S.KEYWORD_OTHER_TYPEOF)
    Unchecked = Token("unchecked", S.KEYWORD_OTHER_UNCHECKED)
    Using = Token("using", S.KEYWORD_OTHER_USING)
    Var = Token("var", S.KEYWORD_OTHER_VAR)
    Where = Token("where", S.KEYWORD_OTHER_WHERE)


class Literals:
    class Boolean:
        False_ = Token("false", S.CONSTANT_LANGUAGE_BOOLEAN_FALSE)
        True_ = Token("true", S.CONSTANT_LANGUAGE_BOOLEAN_TRUE)

    Null = Token("null", S.CONSTANT_LANGUAGE_NULL)

    class Numeric:
        Binary = _kind(S.CONSTANT_NUMERIC_BINARY)
        Decimal = _kind(S.CONSTANT_NUMERIC_DECIMAL)
        Hexadecimal = _kind(S.CONSTANT_NUMERIC_HEX)
        Invalid = _kind(S.INVALID_ILLEGAL_CONSTANT_NUMERIC)

        class Other:
            Exponent = _kind(S.CONSTANT_NUMERIC_OTHER_EXPONENT)
            Suffix = _kind(S.CONSTANT_NUMERIC_OTHER_SUFFIX)

            class Prefix:
                Binary = _kind(S.CONSTANT_NUMERIC_OTHER_PREFIX_BINARY)
                Hexadecimal = _kind(S.CONSTANT_NUMERIC_OTHER_PREFIX_HEX)

            class Separator:
                Decimals = Token(".", S.CONSTANT_NUMERIC_OTHER_SEPARATOR_DECIMALS)
                Thousands = Token("_", S.CONSTANT_NUMERIC_OTHER_SEPARATOR_THOUSANDS)

    Char = _kind(S.STRING_QUOTED_SINGLE)
    CharacterEscape = _kind(S.CONSTANT_CHARACTER_ESCAPE)
    String = _kind(S.STRING_QUOTED_DOUBLE)


class Operators:
    class Arithmetic:
        Addition = Token("+", S.KEYWORD_OPERATOR_ARITHMETIC)
        Division = Token("/", S.KEYWORD_OPERATOR_ARITHMETIC)
        Multiplication = Token("*", S.KEYWORD_OPERATOR_ARITHMETIC)
        Remainder = Token("%", S.KEYWORD_OPERATOR_ARITHMETIC)
        Subtraction = Token("-", S.KEYWORD_OPERATOR_ARITHMETIC)

    class Bitwise:
        And = Token("&", S.KEYWORD_OPERATOR_BITWISE)
        BitwiseComplement = Token("~", S.KEYWORD_OPERATOR_BITWISE)
        ExclusiveOr = Token("^", S.KEYWORD_OPERATOR_BITWISE)
        Or = Token("|", S.KEYWORD_OPERATOR_BITWISE)
        ShiftLeft = Token("<<", S.KEYWORD_OPERATOR_BITWISE_SHIFT)
        ShiftRight = Token(">>", S.KEYWORD_OPERATOR_BITWISE_SHIFT)

    class CompoundAssignment:
        class Arithmetic:
            Addition = Token("+=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND)
            Division = Token("/=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND)
            Multiplication = Token("*=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND)
            Remainder = Token("%=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND)
            Subtraction = Token("-=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND)

        class Bitwise:
            And = Token("&=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND_BITWISE)
            ExclusiveOr = Token("^=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND_BITWISE)
            Or = Token("|=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND_BITWISE)
            ShiftLeft = Token("<<=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND_BITWISE)
            ShiftRight = Token(">>=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND_BITWISE)

        NullCoalescing = Token("??=", S.KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND)

    class Conditional:
        QuestionMark = Token("?", S.KEYWORD_OPERATOR_CONDITIONAL_QUESTION_MARK)
        Colon = Token(":", S.KEYWORD_OPERATOR_CONDITIONAL_COLON)

    class Logical:
        And = Token("&&", S.KEYWORD_OPERATOR_LOGICAL)
        Not = Token("!", S.KEYWORD_OPERATOR_LOGICAL)
        Or = Token("||", S.KEYWORD_OPERATOR_LOGICAL)

    class Relational:
        Equals = Token("==", S.KEYWORD_OPERATOR_COMPARISON)
        NotEqual = Token("!=", S.KEYWORD_OPERATOR_COMPARISON)

        LessThan = Token("<", S.KEYWORD_OPERATOR_RELATIONAL)
        LessThanOrEqual = Token("<=", S.KEYWORD_OPERATOR_RELATIONAL)
        GreaterThan = Token(">", S.KEYWORD_OPERATOR_RELATIONAL)
        GreaterThanOrEqual = Token(">=", S.KEYWORD_OPERATOR_RELATIONAL)

    Arrow = Token("=>", S.KEYWORD_OPERATOR_ARROW)
    Assignment = Token("=", S.KEYWORD_OPERATOR_ASSIGNMENT)
    Decrement = Token("--", S.KEYWORD_OPERATOR_DECREMENT)
    Increment = Token("++", S.KEYWORD_OPERATOR_INCREMENT)
    NullCoalescing = Token("??", S.KEYWORD_OPERATOR_NULL_COALESCING)
    NullConditional = Token("?", S.KEYWORD_OPERATOR_NULL_CONDITIONAL)


class PrimitiveType:
    Bool = Token("bool", S.KEYWORD_TYPE)
    Byte = Token("byte", S.KEYWORD_TYPE)
    Char = Token("char", S.KEYWORD_TYPE)
    Decimal = Token("decimal", S.KEYWORD_TYPE)
    Double = Token("double", S.KEYWORD_TYPE)
    Float = Token("float", S.KEYWORD_TYPE)
    Half = Token("half", S.KEYWORD_TYPE)
    Int32 = Token("int32", S.KEYWORD_TYPE)
    Int64 = Token("int64", S.KEYWORD_TYPE)
    Object = Token("object", S.KEYWORD_TYPE)
    SByte = Token("sbyte", S.KEYWORD_TYPE)
    Short = Token("short", S.KEYWORD_TYPE)
    String = Token("string", S.KEYWORD_TYPE)
    UInt32 = Token("uint32", S.KEYWORD_TYPE)
    UInt64 = Token("uint64", S.KEYWORD_TYPE)
    UShort = Token("ushort", S.KEYWORD_TYPE)
    Void = Token("void", S.KEYWORD_TYPE)


class Punctuation:
    class Char:
        Begin = Token("'", S.PUNCTUATION_DEFINITION_CHAR_BEGIN)
        End = Token("'", S.PUNCTUATION_DEFINITION_CHAR_END)

    class Interpolation:
        Begin = Token("{", S.PUNCTUATION_DEFINITION_INTERPOLATION_BEGIN)
        End = Token("}", S.PUNCTUATION_DEFINITION_INTERPOLATION_END)

    class InterpolatedString:
        Begin = Token('$"', S.PUNCTUATION_DEFINITION_STRING_BEGIN)
        End = Token('"', S.PUNCTUATION_DEFINITION_STRING_END)
        VerbatimBegin = Token('$@"', S.PUNCTUATION_DEFINITION_STRING_BEGIN)
        VerbatimBeginReverse = Token('@$"', S.PUNCTUATION_DEFINITION_STRING_BEGIN)

    class String:
        Begin = Token('"', S.PUNCTUATION_DEFINITION_STRING_BEGIN)
        End = Token('"', S.PUNCTUATION_DEFINITION_STRING_END)
        VerbatimBegin = Token('@"', S.PUNCTUATION_DEFINITION_STRING_BEGIN)

    class TypeParameters:
        Begin = Token("<", S.PUNCTUATION_DEFINITION_TYPEPARAMETERS_BEGIN)
        End = Token(">", S.PUNCTUATION_DEFINITION_TYPEPARAMETERS_END)

    Accessor = Token(".", S.PUNCTUATION_ACCESSOR)
    CloseBrace = Token("}", S.PUNCTUATION_CURLYBRACE_CLOSE)
    CloseBracket = Token("]", S.PUNCTUATION_SQUAREBRACKET_CLOSE)
    CloseParen = Token(")", S.PUNCTUATION_PARENTHESIS_CLOSE)
    Colon = Token(":", S.PUNCTUATION_SEPARATOR_COLON)
    ColonColon = Token("::", S.PUNCTUATION_SEPARATOR_COLONCOLON)
    Comma = Token(",", S.PUNCTUATION_SEPARATOR_COMMA)
    Hash = Token("#", S.PUNCTUATION_SEPARATOR_HASH)
    OpenBrace = Token("{", S.PUNCTUATION_CURLYBRACE_OPEN)
    OpenBracket = Token("[", S.PUNCTUATION_SQUAREBRACKET_OPEN)
    OpenParen = Token("(", S.PUNCTUATION_PARENTHESIS_OPEN)
    QuestionMark = Token("?", S.PUNCTUATION_SEPARATOR_QUESTION_MARK)
    Semicolon = Token(";", S.PUNCTUATION_TERMINATOR_STATEMENT)
    Tilde = Token("~", S.PUNCTUATION_TILDE)


class Variables:
    Alias = _kind(S.VARIABLE_OTHER_ALIAS)
    Object = _kind(S.VARIABLE_OTHER_OBJECT)
    Property = _kind(S.VARIABLE_OTHER_OBJECT_PROPERTY)
    ReadWrite = _kind(S.VARIABLE_OTHER_READWRITE)


class XmlDocComments:
    class Attribute:
        Name = _kind(S.ENTITY_OTHER_ATTRIBUTE_NAME_LOCALNAME)

    class CData:
        Begin = Token("<![CDATA[", S.PUNCTUATION_DEFINITION_STRING_BEGIN)
        End = Token("]]>", S.PUNCTUATION_DEFINITION_STRING_END)
        Text = _kind(S.STRING_UNQUOTED_CDATA)

    class CharacterEntity:
        Begin = Token("&", S.PUNCTUATION_DEFINITION_CONSTANT)
        End = Token(";", S.PUNCTUATION_DEFINITION_CONSTANT)
        Text = _kind(S.CONSTANT_CHARACTER_ENTITY)

    class Comment:
        Begin = Token("<!--", S.PUNCTUATION_DEFINITION_COMMENT)
        End = Token("-->", S.PUNCTUATION_DEFINITION_COMMENT)
        Text = _kind(S.COMMENT_BLOCK)

    class Tag:
        StartTagBegin = Token("<", S.PUNCTUATION_DEFINITION_TAG)
        StartTagEnd = Token(">", S.PUNCTUATION_DEFINITION_TAG)
        EndTagBegin = Token("</", S.PUNCTUATION_DEFINITION_TAG)
        EndTagEnd = Token(">", S.PUNCTUATION_DEFINITION_TAG)
        EmptyTagBegin = Token("<", S.PUNCTUATION_DEFINITION_TAG)
        EmptyTagEnd = Token("/>", S.PUNCTUATION_DEFINITION_TAG)

        Name = _kind(S.ENTITY_NAME_TAG_LOCALNAME)

    class String:
        class DoubleQuoted:
            Begin = Token('"', S.PUNCTUATION_DEFINITION_STRING_BEGIN)
            End = Token('"', S.PUNCTUATION_DEFINITION_STRING_END)
            Text = _kind(S.STRING_QUOTED_DOUBLE)

        class SingleQuoted:
            Begin = Token("'", S.PUNCTUATION_DEFINITION_STRING_BEGIN)
            End = Token("'", S.PUNCTUATION_DEFINITION_STRING_END)
            Text = _kind(S.STRING_QUOTED_SINGLE)

    Begin = Token("///", S.PUNCTUATION_DEFINITION_COMMENT)
    Colon = Token(":", S.PUNCTUATION_SEPARATOR_COLON)
    Equals = Token("=", S.PUNCTUATION_SEPARATOR_EQUALS)
    Text = _kind(S.COMMENT_BLOCK_DOCUMENTATION)


IllegalNewLine = _kind(S.INVALID_ILLEGAL_NEWLINE)
PreprocessorMessage = _kind(S.STRING_UNQUOTED_PREPROCESSOR_MESSAGE)
Type = _kind(S.STORAGE_TYPE)

Modifiers = Keywords.Modifiers

_NAMESPACES = (
    Comment,
    Identifiers,
    Keywords,
    Literals,
    Operators,
    PrimitiveType,
    Punctuation,
    Variables,
    XmlDocComments,
)
_TOP_LEVEL = {
    "IllegalNewLine": IllegalNewLine,
    "PreprocessorMessage": PreprocessorMessage,
    "Type": Type,
}


def iter_entries() -> Iterator[tuple[str, Token | TokenFactory]]:
    """Yield (dotted name, entry) for every constant and constructor."""
    for namespace in _NAMESPACES:
        yield from _walk(namespace, namespace.__name__)
    yield from _TOP_LEVEL.items()


def _walk(namespace: type, prefix: str) -> Iterator[tuple[str, Token | TokenFactory]]:
    for name, value in vars(namespace).items():
        if name.startswith("_"):
            continue
        if isinstance(value, type):
            yield from _walk(value, f"{prefix}.{name}")
        elif isinstance(value, (Token, partial)):
            yield f"{prefix}.{name}", value


def entry_scope(entry: Token | TokenFactory) -> S:
    """Return the scope an entry classifies into."""
    if isinstance(entry, Token):
        return entry.type
    return entry.keywords["type"]


def covered_scopes() -> frozenset[S]:
    """Return the set of scopes reachable from at least one entry."""
    return frozenset(entry_scope(entry) for _, entry in iter_entries())
