"""Error types with formatted source context."""

from __future__ import annotations

from pathlib import Path


class UnrecognizedScopeError(Exception):
    """Raised when the grammar emits a scope missing from the vocabulary."""

    def __init__(
        self,
        scope: str,
        text: str = "",
        line: int | None = None,
        column: int | None = None,
        source_line: str = "",
    ) -> None:
        self.scope = scope
        self.text = text
        self.line = line
        self.column = column
        self.source_line = source_line
        self.message = f"unrecognized scope '{scope}'"
        super().__init__(self.format())

    def with_context(
        self, text: str, line: int, column: int, source_line: str
    ) -> UnrecognizedScopeError:
        """Return a copy of this error located at a token in the wrapped input."""
        return UnrecognizedScopeError(self.scope, text, line, column, source_line)

    def format(self, filename: str = "input") -> str:
        if self.line is None or self.column is None:
            if self.text:
                return f"error: {self.message} for {self.text!r}"
            return f"error: {self.message}"

        # Positions are stored 0-based, displayed 1-based
        line_no = self.line + 1
        col = self.column + 1
        underline_len = max(1, len(self.text))

        pad = " " * self.column
        carets = "^" * underline_len

        line_num = str(line_no)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line_no}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {self.source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class GrammarLoadError(Exception):
    """Raised when a grammar file or rule engine cannot be loaded."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        if self.path is None:
            return f"error: {self.message}"
        return f"error: {self.message}\n  --> {self.path}"


class GrammarNotFoundError(Exception):
    """Raised when the registry has no grammar for the requested scope name."""

    def __init__(self, scope_name: str) -> None:
        self.scope_name = scope_name
        self.message = f"no grammar available for scope '{scope_name}'"
        super().__init__(f"error: {self.message}")


class ConfigError(Exception):
    """Raised on a malformed configuration value."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.message = message
        self.path = path
        where = f" ({path})" if path is not None else ""
        super().__init__(f"error: {message}{where}")
