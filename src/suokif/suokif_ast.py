"""SUO-KIF AST node hierarchy with source location metadata.

A parsed SUO-KIF document is a sequence of top-level expressions.  Each
expression is either a list or one of five kinds of leaf term: atoms, strings,
numbers, variables and row variables.  All nodes are immutable; a list owns a
tuple of its children.

Every node carries its source location (`line`, `column`, `source_file`) as
keyword-only fields so that later stages can report errors against the
original KIF text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class SUOKIFASTNode(ABC):
    """
    Abstract base class for all SUO-KIF AST nodes.

    Source location fields are keyword-only.
    """
    line: int | None = field(default=None, kw_only=True, compare=False)
    column: int | None = field(default=None, kw_only=True, compare=False)
    source_file: str = field(default="", kw_only=True, compare=False)

    @abstractmethod
    def to_kif(self) -> str:
        """Render the node back to compact SUO-KIF text."""

    @abstractmethod
    def type_name(self) -> str:
        """Return the node kind name for error messages."""


@dataclass(frozen=True)
class SUOKIFASTTerm(SUOKIFASTNode):
    """Base class for leaf nodes."""
    value: str
    offset: int = field(default=0, kw_only=True, compare=False)

    def to_kif(self) -> str:
        return self.value


@dataclass(frozen=True)
class SUOKIFASTAtom(SUOKIFASTTerm):
    """A constant, relation, function or operator symbol."""

    def type_name(self) -> str:
        return "atom"


@dataclass(frozen=True)
class SUOKIFASTString(SUOKIFASTTerm):
    """A string literal.  `value` excludes the delimiting quotes."""

    def to_kif(self) -> str:
        return f'"{self.value}"'

    def type_name(self) -> str:
        return "string"


@dataclass(frozen=True)
class SUOKIFASTNumber(SUOKIFASTTerm):
    """A numeric literal, kept as its source spelling."""

    def type_name(self) -> str:
        return "number"


@dataclass(frozen=True)
class SUOKIFASTVariable(SUOKIFASTTerm):
    """An ordinary variable such as ?X."""

    def type_name(self) -> str:
        return "variable"


@dataclass(frozen=True)
class SUOKIFASTRowVariable(SUOKIFASTTerm):
    """A row variable such as @ROW, standing for a sequence of arguments."""

    def type_name(self) -> str:
        return "row variable"


@dataclass(frozen=True)
class SUOKIFASTList(SUOKIFASTNode):
    """A parenthesized list.  Offsets span from '(' to one past ')'."""
    children: Tuple[SUOKIFASTNode, ...]
    start_offset: int = field(default=0, kw_only=True, compare=False)
    end_offset: int = field(default=0, kw_only=True, compare=False)

    def head(self) -> SUOKIFASTNode | None:
        """Return the first element of the list, if any."""
        return self.children[0] if self.children else None

    def head_symbol(self) -> str | None:
        """Return the head's text when the head is an atom."""
        head = self.head()
        if isinstance(head, SUOKIFASTAtom):
            return head.value

        return None

    def arguments(self) -> Tuple[SUOKIFASTNode, ...]:
        """Return every element after the head."""
        return self.children[1:]

    def to_kif(self) -> str:
        return "(" + " ".join(child.to_kif() for child in self.children) + ")"

    def type_name(self) -> str:
        return "list"


# Leaf and variable groupings used by the scope analyzer and converter
SUOKIFASTAnyVariable = (SUOKIFASTVariable, SUOKIFASTRowVariable)


@dataclass(frozen=True)
class SUOKIFFormula:
    """
    A named top-level SUO-KIF sentence.

    `source` holds the exact source text the node was parsed from, which is
    used for diagnostics and for the trace comment written next to each
    translated axiom.
    """
    name: str
    node: SUOKIFASTNode
    source: str

    def head_symbol(self) -> str | None:
        """Return the head atom of the formula's top-level list, if any."""
        if isinstance(self.node, SUOKIFASTList):
            return self.node.head_symbol()

        return None

    def single_line_source(self) -> str:
        """Return the source text with all whitespace runs collapsed to single spaces."""
        return " ".join(self.source.split())
