"""Parser that builds SUO-KIF ASTs from tokens, collecting structural errors."""

from typing import List, Tuple

from suokif.suokif_ast import (
    SUOKIFASTNode, SUOKIFASTList, SUOKIFASTAtom, SUOKIFASTString, SUOKIFASTNumber,
    SUOKIFASTVariable, SUOKIFASTRowVariable, SUOKIFFormula
)
from suokif.suokif_error import SUOKIFParseError
from suokif.suokif_token import SUOKIFToken, SUOKIFTokenType


class SUOKIFUnclosedListError(Exception):
    """Internal signal: end of input was reached inside a list."""

    def __init__(self, open_token: SUOKIFToken, depth: int) -> None:
        super().__init__("unclosed list")
        self.open_token = open_token
        self.depth = depth


class SUOKIFParser:
    """
    Parses a token stream into top-level SUO-KIF formulas.

    A structural error only invalidates the top-level expression it occurs in:
    a dangling ')' is reported and skipped, and an unclosed '(' reports the
    expression it opens.  Expressions parsed before either problem are kept.
    """

    def __init__(self, tokens: List[SUOKIFToken], source: str = "", source_file: str = ""):
        """
        Initialize parser with tokens and original source.

        Args:
            tokens: List of tokens to parse
            source: Original source text, used to slice each formula's text
            source_file: Label used in formula names and error positions
        """
        self.tokens = tokens
        self.source = source
        self.source_file = source_file
        self.pos = 0
        self.depth = 0

    def parse(self) -> Tuple[List[SUOKIFFormula], List[SUOKIFParseError]]:
        """
        Parse all remaining tokens.

        Returns:
            Tuple of (formulas, errors)
        """
        formulas: List[SUOKIFFormula] = []
        errors: List[SUOKIFParseError] = []

        while self.pos < len(self.tokens):
            try:
                formula = self.parse_next()

            except SUOKIFParseError as e:
                errors.append(e)
                continue

            if formula is not None:
                formulas.append(formula)

        return formulas, errors

    def parse_next(self) -> SUOKIFFormula | None:
        """
        Parse the next top-level expression starting at the cursor.

        Returns:
            The parsed formula, or None when the tokens are exhausted

        Raises:
            SUOKIFParseError: If the expression is malformed; the cursor is left
                after the offending tokens so parsing can resume
        """
        if self.pos >= len(self.tokens):
            return None

        token = self.tokens[self.pos]

        if token.type == SUOKIFTokenType.RPAREN:
            self.pos += 1
            raise SUOKIFParseError(
                message="Dangling right parenthesis",
                line=token.line,
                column=token.column,
                source_file=token.source_file or self.source_file,
                received="')' with no matching '('",
                suggestion="Remove the extra ')' or add the missing '('",
                source=self.source or None
            )

        try:
            self.depth = 0
            node = self._parse_expression()

        except SUOKIFUnclosedListError as e:
            paren_word = "parenthesis" if e.depth == 1 else "parentheses"
            raise SUOKIFParseError(
                message="Unclosed parenthesis",
                line=e.open_token.line,
                column=e.open_token.column,
                source_file=e.open_token.source_file or self.source_file,
                expected="')'",
                context=f"Reached end of input with {e.depth} unclosed {paren_word}",
                suggestion=f"Add {e.depth} closing {paren_word}",
                source=self.source or None
            ) from e

        start, end = self._node_span(node, token)
        if self.source:
            text = self.source[start:end]

        else:
            text = node.to_kif()

        return SUOKIFFormula(name=self._formula_name(token), node=node, source=text)

    def _formula_name(self, token: SUOKIFToken) -> str:
        label = token.source_file or self.source_file or "formula"
        return f"{label}:{token.line}:{token.column}"

    def _node_span(self, node: SUOKIFASTNode, token: SUOKIFToken) -> Tuple[int, int]:
        if isinstance(node, SUOKIFASTList):
            return node.start_offset, node.end_offset

        return token.offset, token.end_offset

    def _parse_expression(self) -> SUOKIFASTNode:
        """Parse a single expression at the cursor."""
        token = self.tokens[self.pos]

        if token.type == SUOKIFTokenType.LPAREN:
            return self._parse_list(token)

        self.pos += 1
        location = {"line": token.line, "column": token.column, "source_file": token.source_file}

        if token.type == SUOKIFTokenType.NUMBER:
            return SUOKIFASTNumber(token.value, offset=token.offset, **location)

        if token.type == SUOKIFTokenType.STRING:
            return SUOKIFASTString(token.value, offset=token.offset, **location)

        if token.type == SUOKIFTokenType.VARIABLE:
            return SUOKIFASTVariable(token.value, offset=token.offset, **location)

        if token.type == SUOKIFTokenType.ROW_VARIABLE:
            return SUOKIFASTRowVariable(token.value, offset=token.offset, **location)

        return SUOKIFASTAtom(token.value, offset=token.offset, **location)

    def _parse_list(self, open_token: SUOKIFToken) -> SUOKIFASTList:
        """Parse (element1 element2 ...) starting at the '(' token."""
        self.pos += 1
        self.depth += 1

        children: List[SUOKIFASTNode] = []
        while self.pos < len(self.tokens) and self.tokens[self.pos].type != SUOKIFTokenType.RPAREN:
            children.append(self._parse_expression())

        if self.pos >= len(self.tokens):
            raise SUOKIFUnclosedListError(open_token, self.depth)

        close_token = self.tokens[self.pos]
        self.pos += 1
        self.depth -= 1

        return SUOKIFASTList(
            tuple(children),
            start_offset=open_token.offset,
            end_offset=close_token.end_offset,
            line=open_token.line,
            column=open_token.column,
            source_file=open_token.source_file
        )


def parse(
    tokens: List[SUOKIFToken],
    source: str = "",
    source_file: str = ""
) -> Tuple[List[SUOKIFFormula], List[SUOKIFParseError]]:
    """Parse tokens into top-level formulas, returning the formulas and any parse errors."""
    return SUOKIFParser(tokens, source, source_file).parse()
