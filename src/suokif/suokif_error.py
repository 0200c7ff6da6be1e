"""Exception classes for SUO-KIF processing with detailed context."""

from typing import Any, List, Tuple


class SUOKIFError(Exception):
    """Base exception for SUO-KIF errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: str | None = None,
        expected: str | None = None,
        received: str | None = None,
        suggestion: str | None = None,
        line: int | None = None,
        column: int | None = None,
        source_file: str = "",
        source: str | None = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            line: Line number (1-indexed)
            column: Column number (1-indexed)
            source_file: Label of the file the error was found in
            source: Source text for context display
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.line = line
        self.column = column
        self.source_file = source_file
        self.source = source

        super().__init__(self._format_detailed_message())

    def location(self) -> str:
        """Return a compact `file:line:column` location string."""
        parts = [self.source_file or "<input>"]
        if self.line is not None:
            parts.append(str(self.line))

            if self.column is not None:
                parts.append(str(self.column))

        return ":".join(parts)

    def _get_context_lines(self, source: str, line_num: int, before: int, after: int) -> List[Tuple[int, str]]:
        """
        Get lines of context around a specific line.

        Args:
            source: The source text
            line_num: Line number (1-indexed)
            before: Number of lines before to include
            after: Number of lines after to include

        Returns:
            List of (line_number, line_content) tuples
        """
        lines = source.split('\n')
        start_line = max(1, line_num - before)
        end_line = min(len(lines), line_num + after)
        return [(i, lines[i - 1]) for i in range(start_line, end_line + 1)]

    def _format_context_with_marker(self, source: str, line_num: int, column: int | None) -> str:
        """Format source context with a caret pointing to the error location."""
        context_lines = self._get_context_lines(source, line_num, before=2, after=1)
        if not context_lines:
            return "(no context available)"

        line_num_width = len(str(max(ln for ln, _ in context_lines)))

        result_lines = []
        for ln, content in context_lines:
            indicator = ">" if ln == line_num else " "
            result_lines.append(f"  {indicator} {ln:>{line_num_width}}: {content}")

            if ln == line_num and column is not None:
                padding = 2 + 1 + 1 + line_num_width + 2 + (column - 1)
                result_lines.append(" " * padding + "^")

        return "\n".join(result_lines)

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.line is not None and self.column is not None:
            where = f" in {self.source_file}" if self.source_file else ""
            parts.append(f"Location: Line {self.line}, Column {self.column}{where}")

        if self.source is not None and self.line is not None:
            context_str = self._format_context_with_marker(self.source, self.line, self.column)
            parts.append(f"\nSource Context:\n{context_str}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class SUOKIFLexError(SUOKIFError):
    """Lexical errors.  These are collected by the lexer, never raised by it."""


class SUOKIFParseError(SUOKIFError):
    """Structural errors that invalidate one top-level expression."""


class SUOKIFHOLError(SUOKIFError):
    """A formula needs higher-order logic and cannot be written as first-order TPTP."""

    def __init__(self, message: str, formula: str, operator: str, **kwargs: Any) -> None:
        """
        Initialize a higher-order logic error.

        Args:
            message: Core error description
            formula: KIF text of the offending sub-formula
            operator: The logical operator or quantifier found in term position
        """
        self.formula = formula
        self.operator = operator
        kwargs.setdefault("received", formula)
        super().__init__(message, **kwargs)


class SUOKIFBadFormulaError(SUOKIFError):
    """A formula is malformed or cannot be translated at all."""
