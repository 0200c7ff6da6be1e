"""Shared fixtures and utilities for SUO-KIF tests."""

import pytest

from suokif import (
    SUOKIF, SUOKIFASTNode, SUOKIFConversionOptions, SUOKIFKBAssembler, SUOKIFParser, SUOKIFTPTPConverter,
    tokenize
)


@pytest.fixture
def suokif():
    """Create a translator with default options for each test."""
    return SUOKIF()


@pytest.fixture
def suokif_custom():
    """Factory for translators with custom options."""
    def _create_suokif(**options) -> SUOKIF:
        return SUOKIF(SUOKIFConversionOptions(**options))
    return _create_suokif


@pytest.fixture
def converter():
    """Create a fresh converter with default options."""
    return SUOKIFTPTPConverter()


@pytest.fixture
def assembler():
    """Create a knowledge base assembler with default options."""
    return SUOKIFKBAssembler()


class SUOKIFTestHelpers:
    """Helper utilities for SUO-KIF testing."""

    @staticmethod
    def parse_node(text: str) -> SUOKIFASTNode:
        """Parse text that must contain exactly one well-formed expression."""
        tokens, _lex_errors = tokenize(text)
        formulas, errors = SUOKIFParser(tokens, text).parse()
        assert not errors, f"Unexpected parse errors: {errors}"
        assert len(formulas) == 1, f"Expected one formula, got {len(formulas)}"
        return formulas[0].node

    @staticmethod
    def convert_body(text: str, options: SUOKIFConversionOptions | None = None) -> str:
        """Translate one expression without closing over its free variables."""
        node = SUOKIFTestHelpers.parse_node(text)
        return SUOKIFTPTPConverter(options).convert_node(node)

    @staticmethod
    def formula_lines(content: str) -> list[str]:
        """Return the fof/tff/thf lines of a TPTP document."""
        return [line for line in content.splitlines() if line.startswith(('fof(', 'tff(', 'thf('))]

    @staticmethod
    def axiom_names(content: str) -> list[str]:
        """Return the names of the axiom lines of a TPTP document, in order."""
        names = []
        for line in SUOKIFTestHelpers.formula_lines(content):
            name, role = line[4:].split(',')[:2]
            if role == 'axiom':
                names.append(name)

        return names


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return SUOKIFTestHelpers
