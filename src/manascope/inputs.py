"""Wrap code fragments in minimal mana scaffolding for grammar tests.

Several grammar rules only fire in context (a name is a class name only
after ``class``, a member declaration only inside a type body), so a
fragment is placed inside boilerplate before tokenizing. The returned
``Input`` remembers where the fragment sits so the tokenizer can discard
everything the wrapper added.
"""

from __future__ import annotations

from dataclasses import dataclass

from manascope.tokens import Span


@dataclass(frozen=True, slots=True)
class _Template:
    """Boilerplate surrounding a fragment: lines before, indent, lines after."""

    header: tuple[str, ...]
    indent: int
    trailer: tuple[str, ...]


def _type_body(keyword: str, name: str) -> _Template:
    return _Template(("", f"{keyword} {name} {{"), 4, ("}",))


_ENUM = _type_body("enum", "TestEnum")
_CLASS = _type_body("class", "TestClass")
_INTERFACE = _type_body("interface", "TestInterface")
_STRUCT = _type_body("struct", "TestStruct")
_NAMESPACE = _type_body("namespace", "TestNamespace")
_METHOD = _Template(
    ("", "class TestClass {", "    void TestMethod() {"),
    8,
    ("    }", "}"),
)


def normalize_newlines(text: str) -> str:
    """Convert CRLF line endings to LF."""
    return text.replace("\r\n", "\n")


@dataclass(frozen=True, slots=True)
class Input:
    """Lines to feed the grammar plus the span of the caller's fragment."""

    lines: tuple[str, ...]
    span: Span

    @classmethod
    def from_text(cls, text: str) -> Input:
        """Use the text as-is; the fragment is the whole input."""
        lines = tuple(normalize_newlines(text).split("\n"))
        return cls(lines, Span(0, 0, len(lines) - 1, len(lines[-1])))

    @classmethod
    def in_enum(cls, fragment: str) -> Input:
        return cls._wrap(fragment, _ENUM)

    @classmethod
    def in_class(cls, fragment: str) -> Input:
        return cls._wrap(fragment, _CLASS)

    @classmethod
    def in_interface(cls, fragment: str) -> Input:
        return cls._wrap(fragment, _INTERFACE)

    @classmethod
    def in_struct(cls, fragment: str) -> Input:
        return cls._wrap(fragment, _STRUCT)

    @classmethod
    def in_method(cls, fragment: str) -> Input:
        """Place the fragment inside a method body of a class."""
        return cls._wrap(fragment, _METHOD)

    @classmethod
    def in_namespace(cls, fragment: str) -> Input:
        return cls._wrap(fragment, _NAMESPACE)

    @classmethod
    def _wrap(cls, fragment: str, template: _Template) -> Input:
        # Only the first fragment line is indented; later lines keep
        # whatever leading whitespace the caller wrote.
        fragment_lines = normalize_newlines(fragment).split("\n")
        first = " " * template.indent + fragment_lines[0]
        body = [first, *fragment_lines[1:]]
        lines = (*template.header, *body, *template.trailer)

        start_line = len(template.header)
        end_line = start_line + len(body) - 1
        span = Span(start_line, template.indent, end_line, len(body[-1]))
        return cls(lines, span)

    @property
    def text(self) -> str:
        """The wrapped source, lines joined with LF."""
        return "\n".join(self.lines)
