"""Closed vocabulary of scope identifiers the mana grammar can emit."""

from __future__ import annotations

from enum import Enum

from manascope.errors import UnrecognizedScopeError


class ScopeId(str, Enum):
    """Every raw scope string the grammar produces, one member each.

    Member values are the exact strings reported by the rule engine. When
    the grammar grows a new scope, it must be added here (and to the
    taxonomy) before any test can observe it.
    """

    # Carrier scopes (wrap other tokens, never reported by default)
    META_INTERPOLATION = "meta.interpolation.mana"
    META_PREPROCESSOR = "meta.preprocessor.mana"
    META_TAG = "meta.tag.mana"
    META_TYPE_PARAMETERS = "meta.type.parameters.mana"
    SOURCE = "source.mana"

    # Comments
    COMMENT_BLOCK_DOCUMENTATION = "comment.block.documentation.mana"
    COMMENT_BLOCK = "comment.block.mana"
    COMMENT_LINE_DOUBLE_SLASH = "comment.line.double-slash.mana"

    # Constants and literals
    CONSTANT_CHARACTER_ENTITY = "constant.character.entity.mana"
    CONSTANT_CHARACTER_ESCAPE = "constant.character.escape.mana"
    CONSTANT_LANGUAGE_BOOLEAN_FALSE = "constant.language.boolean.false.mana"
    CONSTANT_LANGUAGE_BOOLEAN_TRUE = "constant.language.boolean.true.mana"
    CONSTANT_LANGUAGE_NULL = "constant.language.null.mana"
    CONSTANT_NUMERIC_BINARY = "constant.numeric.binary.mana"
    CONSTANT_NUMERIC_DECIMAL = "constant.numeric.decimal.mana"
    CONSTANT_NUMERIC_HEX = "constant.numeric.hex.mana"
    CONSTANT_NUMERIC_OTHER_EXPONENT = "constant.numeric.other.exponent.mana"
    # The grammar spells "prefix" with a double f.
    CONSTANT_NUMERIC_OTHER_PREFIX_BINARY = "constant.numeric.other.preffix.binary.mana"
    CONSTANT_NUMERIC_OTHER_PREFIX_HEX = "constant.numeric.other.preffix.hex.mana"
    CONSTANT_NUMERIC_OTHER_SEPARATOR_DECIMALS = "constant.numeric.other.separator.decimals.mana"
    CONSTANT_NUMERIC_OTHER_SEPARATOR_THOUSANDS = "constant.numeric.other.separator.thousands.mana"
    CONSTANT_NUMERIC_OTHER_SUFFIX = "constant.numeric.other.suffix.mana"

    # Declared names
    ENTITY_NAME_FUNCTION = "entity.name.function.mana"
    ENTITY_NAME_LABEL = "entity.name.label.mana"
    ENTITY_NAME_TAG_LOCALNAME = "entity.name.tag.localname.mana"
    ENTITY_NAME_TYPE_ALIAS = "entity.name.type.alias.mana"
    ENTITY_NAME_TYPE_CLASS = "entity.name.type.class.mana"
    ENTITY_NAME_TYPE_DELEGATE = "entity.name.type.delegate.mana"
    ENTITY_NAME_TYPE_ENUM = "entity.name.type.enum.mana"
    ENTITY_NAME_TYPE_INTERFACE = "entity.name.type.interface.mana"
    ENTITY_NAME_TYPE_NAMESPACE = "entity.name.type.namespace.mana"
    ENTITY_NAME_TYPE_RECORD = "entity.name.type.record.mana"
    ENTITY_NAME_TYPE_STRUCT = "entity.name.type.struct.mana"
    ENTITY_NAME_TYPE_TYPE_PARAMETER = "entity.name.type.type-parameter.mana"
    ENTITY_NAME_VARIABLE_ENUM_MEMBER = "entity.name.variable.enum-member.mana"
    ENTITY_NAME_VARIABLE_EVENT = "entity.name.variable.event.mana"
    ENTITY_NAME_VARIABLE_FIELD = "entity.name.variable.field.mana"
    ENTITY_NAME_VARIABLE_LOCAL = "entity.name.variable.local.mana"
    ENTITY_NAME_VARIABLE_PARAMETER = "entity.name.variable.parameter.mana"
    ENTITY_NAME_VARIABLE_PREPROCESSOR_SYMBOL = "entity.name.variable.preprocessor.symbol.mana"
    ENTITY_NAME_VARIABLE_PROPERTY = "entity.name.variable.property.mana"
    ENTITY_NAME_VARIABLE_RANGE_VARIABLE = "entity.name.variable.range-variable.mana"
    ENTITY_NAME_VARIABLE_TUPLE_ELEMENT = "entity.name.variable.tuple-element.mana"
    ENTITY_OTHER_ATTRIBUTE_NAME_LOCALNAME = "entity.other.attribute-name.localname.mana"

    # Invalid input
    INVALID_ILLEGAL_CONSTANT_NUMERIC = "invalid.illegal.constant.numeric.mana"
    INVALID_ILLEGAL_NEWLINE = "invalid.illegal.newline.mana"

    # Control keywords
    KEYWORD_CONTROL_CASE = "keyword.control.case.mana"
    KEYWORD_CONTROL_CONDITIONAL_ELSE = "keyword.control.conditional.else.mana"
    KEYWORD_CONTROL_CONDITIONAL_IF = "keyword.control.conditional.if.mana"
    KEYWORD_CONTROL_DEFAULT = "keyword.control.default.mana"
    KEYWORD_CONTROL_FLOW_BREAK = "keyword.control.flow.break.mana"
    KEYWORD_CONTROL_FLOW_CONTINUE = "keyword.control.flow.continue.mana"
    KEYWORD_CONTROL_FLOW_RETURN = "keyword.control.flow.return.mana"
    KEYWORD_CONTROL_FLOW_THROW = "keyword.control.flow.throw.mana"
    KEYWORD_CONTROL_FLOW_YIELD = "keyword.control.flow.yield.mana"
    KEYWORD_CONTROL_GOTO = "keyword.control.goto.mana"
    KEYWORD_CONTROL_LOOP_DO = "keyword.control.loop.do.mana"
    KEYWORD_CONTROL_LOOP_FOR = "keyword.control.loop.for.mana"
    KEYWORD_CONTROL_LOOP_FOREACH = "keyword.control.loop.foreach.mana"
    KEYWORD_CONTROL_LOOP_IN = "keyword.control.loop.in.mana"
    KEYWORD_CONTROL_LOOP_WHILE = "keyword.control.loop.while.mana"
    KEYWORD_CONTROL_SWITCH = "keyword.control.switch.mana"
    KEYWORD_CONTROL_TRY_CATCH = "keyword.control.try.catch.mana"
    KEYWORD_CONTROL_TRY_FINALLY = "keyword.control.try.finally.mana"
    KEYWORD_CONTROL_TRY = "keyword.control.try.mana"
    KEYWORD_CONTROL_TRY_WHEN = "keyword.control.try.when.mana"

    # Operators
    KEYWORD_OPERATOR_ARITHMETIC = "keyword.operator.arithmetic.mana"
    KEYWORD_OPERATOR_ARROW = "keyword.operator.arrow.mana"
    KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND_BITWISE = "keyword.operator.assignment.compound.bitwise.mana"
    KEYWORD_OPERATOR_ASSIGNMENT_COMPOUND = "keyword.operator.assignment.compound.mana"
    KEYWORD_OPERATOR_ASSIGNMENT = "keyword.operator.assignment.mana"
    KEYWORD_OPERATOR_BITWISE = "keyword.operator.bitwise.mana"
    KEYWORD_OPERATOR_BITWISE_SHIFT = "keyword.operator.bitwise.shift.mana"
    KEYWORD_OPERATOR_COMPARISON = "keyword.operator.comparison.mana"
    KEYWORD_OPERATOR_CONDITIONAL_COLON = "keyword.operator.conditional.colon.mana"
    KEYWORD_OPERATOR_CONDITIONAL_QUESTION_MARK = "keyword.operator.conditional.question-mark.mana"
    KEYWORD_OPERATOR_DECREMENT = "keyword.operator.decrement.mana"
    KEYWORD_OPERATOR_INCREMENT = "keyword.operator.increment.mana"
    KEYWORD_OPERATOR_LOGICAL = "keyword.operator.logical.mana"
    KEYWORD_OPERATOR_NULL_COALESCING = "keyword.operator.null-coalescing.mana"
    KEYWORD_OPERATOR_NULL_CONDITIONAL = "keyword.operator.null-conditional.mana"
    KEYWORD_OPERATOR_RELATIONAL = "keyword.operator.relational.mana"

    # Other keywords
    KEYWORD_OTHER_ADD = "keyword.other.add.mana"
    KEYWORD_OTHER_ALIAS = "keyword.other.alias.mana"
    KEYWORD_OTHER_AS = "keyword.other.as.mana"
    KEYWORD_OTHER_ATTRIBUTE_SPECIFIER = "keyword.other.attribute-specifier.mana"
    KEYWORD_OTHER_AWAIT = "keyword.other.await.mana"
    KEYWORD_OTHER_BASE = "keyword.other.base.mana"
    KEYWORD_OTHER_CHECKED = "keyword.other.checked.mana"
    KEYWORD_OTHER_CLASS = "keyword.other.class.mana"
    KEYWORD_OTHER_DEFAULT = "keyword.other.default.mana"
    KEYWORD_OTHER_DELEGATE = "keyword.other.delegate.mana"
    KEYWORD_OTHER_ENUM = "keyword.other.enum.mana"
    KEYWORD_OTHER_EVENT = "keyword.other.event.mana"
    KEYWORD_OTHER_EXPLICIT = "keyword.other.explicit.mana"
    KEYWORD_OTHER_EXTERN = "keyword.other.extern.mana"
    KEYWORD_OTHER_GET = "keyword.other.get.mana"
    KEYWORD_OTHER_IMPLICIT = "keyword.other.implicit.mana"
    KEYWORD_OTHER_INIT = "keyword.other.init.mana"
    KEYWORD_OTHER_INTERFACE = "keyword.other.interface.mana"
    KEYWORD_OTHER_IS = "keyword.other.is.mana"
    KEYWORD_OTHER_LOCK = "keyword.other.lock.mana"
    KEYWORD_OTHER_NAMEOF = "keyword.other.nameof.mana"
    KEYWORD_OTHER_NAMESPACE = "keyword.other.namespace.mana"
    KEYWORD_OTHER_NEW = "keyword.other.new.mana"
    KEYWORD_OTHER_OPERATOR_DECL = "keyword.other.operator-decl.mana"
    KEYWORD_OTHER_RECORD = "keyword.other.record.mana"
    KEYWORD_OTHER_REMOVE = "keyword.other.remove.mana"
    KEYWORD_OTHER_SET = "keyword.other.set.mana"
    KEYWORD_OTHER_STATIC = "keyword.other.static.mana"
    KEYWORD_OTHER_STRUCT = "keyword.other.struct.mana"
    KEYWORD_OTHER_THIS = "keyword.other.this.mana"
    KEYWORD_OTHER_TYPEOF = "keyword.other.typeof.mana"
    KEYWORD_OTHER_UNCHECKED = "keyword.other.unchecked.mana"
    KEYWORD_OTHER_USING = "keyword.other.using.mana"
    KEYWORD_OTHER_VAR = "keyword.other.var.mana"
    KEYWORD_OTHER_WHERE = "keyword.other.where.mana"

    # Preprocessor
    KEYWORD_PREPROCESSOR_CHECKSUM = "keyword.preprocessor.checksum.mana"
    KEYWORD_PREPROCESSOR_DEFAULT = "keyword.preprocessor.default.mana"
    KEYWORD_PREPROCESSOR_DEFINE = "keyword.preprocessor.define.mana"
    KEYWORD_PREPROCESSOR_DISABLE = "keyword.preprocessor.disable.mana"
    KEYWORD_PREPROCESSOR_ELIF = "keyword.preprocessor.elif.mana"
    KEYWORD_PREPROCESSOR_ELSE = "keyword.preprocessor.else.mana"
    KEYWORD_PREPROCESSOR_ENDIF = "keyword.preprocessor.endif.mana"
    KEYWORD_PREPROCESSOR_ENDREGION = "keyword.preprocessor.endregion.mana"
    KEYWORD_PREPROCESSOR_ERROR = "keyword.preprocessor.error.mana"
    KEYWORD_PREPROCESSOR_HIDDEN = "keyword.preprocessor.hidden.mana"
    KEYWORD_PREPROCESSOR_IF = "keyword.preprocessor.if.mana"
    KEYWORD_PREPROCESSOR_LINE = "keyword.preprocessor.line.mana"
    KEYWORD_PREPROCESSOR_LOAD = "keyword.preprocessor.load.mana"
    KEYWORD_PREPROCESSOR_PRAGMA = "keyword.preprocessor.pragma.mana"
    KEYWORD_PREPROCESSOR_R = "keyword.preprocessor.r.mana"
    KEYWORD_PREPROCESSOR_REGION = "keyword.preprocessor.region.mana"
    KEYWORD_PREPROCESSOR_RESTORE = "keyword.preprocessor.restore.mana"
    KEYWORD_PREPROCESSOR_UNDEF = "keyword.preprocessor.undef.mana"
    KEYWORD_PREPROCESSOR_WARNING = "keyword.preprocessor.warning.mana"

    # Query expressions
    KEYWORD_QUERY_ASCENDING = "keyword.query.ascending.mana"
    KEYWORD_QUERY_BY = "keyword.query.by.mana"
    KEYWORD_QUERY_DESCENDING = "keyword.query.descending.mana"
    KEYWORD_QUERY_EQUALS = "keyword.query.equals.mana"
    KEYWORD_QUERY_FROM = "keyword.query.from.mana"
    KEYWORD_QUERY_GROUP = "keyword.query.group.mana"
    KEYWORD_QUERY_IN = "keyword.query.in.mana"
    KEYWORD_QUERY_INTO = "keyword.query.into.mana"
    KEYWORD_QUERY_JOIN = "keyword.query.join.mana"
    KEYWORD_QUERY_LET = "keyword.query.let.mana"
    KEYWORD_QUERY_ON = "keyword.query.on.mana"
    KEYWORD_QUERY_ORDERBY = "keyword.query.orderby.mana"
    KEYWORD_QUERY_SELECT = "keyword.query.select.mana"
    KEYWORD_QUERY_WHERE = "keyword.query.where.mana"

    # Primitive types
    KEYWORD_TYPE = "keyword.type.mana"

    # Punctuation
    PUNCTUATION_ACCESSOR = "punctuation.accessor.mana"
    PUNCTUATION_CURLYBRACE_CLOSE = "punctuation.curlybrace.close.mana"
    PUNCTUATION_CURLYBRACE_OPEN = "punctuation.curlybrace.open.mana"
    PUNCTUATION_DEFINITION_CHAR_BEGIN = "punctuation.definition.char.begin.mana"
    PUNCTUATION_DEFINITION_CHAR_END = "punctuation.definition.char.end.mana"
    PUNCTUATION_DEFINITION_COMMENT = "punctuation.definition.comment.mana"
    PUNCTUATION_DEFINITION_CONSTANT = "punctuation.definition.constant.mana"
    PUNCTUATION_DEFINITION_INTERPOLATION_BEGIN = "punctuation.definition.interpolation.begin.mana"
    PUNCTUATION_DEFINITION_INTERPOLATION_END = "punctuation.definition.interpolation.end.mana"
    PUNCTUATION_DEFINITION_STRING_BEGIN = "punctuation.definition.string.begin.mana"
    PUNCTUATION_DEFINITION_STRING_END = "punctuation.definition.string.end.mana"
    PUNCTUATION_DEFINITION_TAG = "punctuation.definition.tag.mana"
    PUNCTUATION_DEFINITION_TYPEPARAMETERS_BEGIN = "punctuation.definition.typeparameters.begin.mana"
    PUNCTUATION_DEFINITION_TYPEPARAMETERS_END = "punctuation.definition.typeparameters.end.mana"
    PUNCTUATION_PARENTHESIS_CLOSE = "punctuation.parenthesis.close.mana"
    PUNCTUATION_PARENTHESIS_OPEN = "punctuation.parenthesis.open.mana"
    PUNCTUATION_SEPARATOR_COLON = "punctuation.separator.colon.mana"
    PUNCTUATION_SEPARATOR_COLONCOLON = "punctuation.separator.coloncolon.mana"
    PUNCTUATION_SEPARATOR_COMMA = "punctuation.separator.comma.mana"
    PUNCTUATION_SEPARATOR_EQUALS = "punctuation.separator.equals.mana"
    PUNCTUATION_SEPARATOR_HASH = "punctuation.separator.hash.mana"
    PUNCTUATION_SEPARATOR_QUESTION_MARK = "punctuation.separator.question-mark.mana"
    PUNCTUATION_SQUAREBRACKET_CLOSE = "punctuation.squarebracket.close.mana"
    PUNCTUATION_SQUAREBRACKET_OPEN = "punctuation.squarebracket.open.mana"
    PUNCTUATION_TERMINATOR_STATEMENT = "punctuation.terminator.statement.mana"
    PUNCTUATION_TILDE = "punctuation.tilde.mana"
    PUNCTUATION_WHITESPACE_COMMENT_LEADING = "punctuation.whitespace.comment.leading.mana"

    # Storage
    STORAGE_MODIFIER = "storage.modifier.mana"
    STORAGE_TYPE = "storage.type.mana"

    # Strings
    STRING_QUOTED_DOUBLE = "string.quoted.double.mana"
    STRING_QUOTED_SINGLE = "string.quoted.single.mana"
    STRING_UNQUOTED_CDATA = "string.unquoted.cdata.mana"
    STRING_UNQUOTED_PREPROCESSOR_MESSAGE = "string.unquoted.preprocessor.message.mana"

    # Variables
    VARIABLE_OTHER_ALIAS = "variable.other.alias.mana"
    VARIABLE_OTHER_OBJECT = "variable.other.object.mana"
    VARIABLE_OTHER_OBJECT_PROPERTY = "variable.other.object.property.mana"
    VARIABLE_OTHER_READWRITE = "variable.other.readwrite.mana"

    def __str__(self) -> str:
        return self.value


CARRIER_SCOPES: frozenset[ScopeId] = frozenset(
    {
        ScopeId.SOURCE,
        ScopeId.META_INTERPOLATION,
        ScopeId.META_PREPROCESSOR,
        ScopeId.META_TAG,
        ScopeId.META_TYPE_PARAMETERS,
    }
)

_BY_VALUE: dict[str, ScopeId] = {member.value: member for member in ScopeId}


def lookup_scope(raw: str) -> ScopeId:
    """Return the ScopeId for a raw scope string.

    Raises UnrecognizedScopeError when the grammar emitted a scope that has
    no entry in the vocabulary.
    """
    try:
        return _BY_VALUE[raw]
    except KeyError:
        raise UnrecognizedScopeError(raw) from None


def is_carrier(scope: ScopeId) -> bool:
    """Return True if scope is a structural carrier scope."""
    return scope in CARRIER_SCOPES
