"""Token types and token representation for SUO-KIF source text."""

from dataclasses import dataclass
from enum import Enum


class SUOKIFTokenType(Enum):
    """Token types for SUO-KIF expressions."""
    LPAREN = "("
    RPAREN = ")"
    ATOM = "ATOM"
    OPERATOR = "OPERATOR"
    STRING = "STRING"
    NUMBER = "NUMBER"
    VARIABLE = "VARIABLE"
    ROW_VARIABLE = "ROW_VARIABLE"


@dataclass(frozen=True)
class SUOKIFToken:
    """
    Represents a single token in a SUO-KIF document.

    `offset` is the 0-indexed character offset of the token's first character
    in the source text and `length` is the number of source characters it
    spans (including the quotes of a string literal).  `line` and `column` are
    1-indexed.
    """
    type: SUOKIFTokenType
    value: str
    line: int = 1
    column: int = 1
    offset: int = 0
    length: int = 1
    source_file: str = ""

    @property
    def end_offset(self) -> int:
        """Offset one past the last source character of this token."""
        return self.offset + self.length

    def __repr__(self) -> str:
        return f"SUOKIFToken({self.type.name}, {self.value!r}, line={self.line}, col={self.column})"
