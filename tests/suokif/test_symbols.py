"""Tests for translation of individual symbols, variables and numbers."""

import pytest

from suokif import SUOKIFConversionOptions, SUOKIFOutputLanguage, convert_number, convert_term, convert_variable
from suokif.suokif_symbols import convert_string_constant, is_relation_name, quote_if_needed


class TestSUOKIFVariables:
    """Test variable name translation."""

    @pytest.mark.parametrize("name,expected", [
        ("?X", "V__X"),
        ("?x", "V__X"),
        ("?Agent", "V__AGENT"),
        ("?my-var", "V__MY_VAR"),
        ("@ROW", "V__ROW"),
        ("?X1", "V__X1"),
    ])
    def test_convert_variable(self, name, expected):
        """Test sigil removal, upper-casing and character replacement."""
        assert convert_variable(name) == expected


class TestSUOKIFNumbers:
    """Test numeric literal translation."""

    @pytest.mark.parametrize("text,expected", [
        ("42", "n__42"),
        ("0", "n__0"),
        ("-5", "n__neg_5"),
        ("0.001", "n__0_001"),
        ("-3.5", "n__neg_3_5"),
        ("1e-5", "n__1e_5"),
    ])
    def test_hidden_numbers(self, text, expected):
        """Test that numbers become symbols by default."""
        assert convert_number(text) == expected

    def test_visible_numbers(self):
        """Test that numbers pass through when not hidden."""
        options = SUOKIFConversionOptions(hide_numbers=False)

        assert convert_number("-3.5", options) == "-3.5"

    def test_tff_keeps_numerals(self):
        """Test that typed output keeps numerals even when hiding is requested."""
        options = SUOKIFConversionOptions(output_language=SUOKIFOutputLanguage.TFF)

        assert convert_number("3.5", options) == "3.5"


class TestSUOKIFTerms:
    """Test constant, relation and function symbol translation."""

    def test_prefixing(self):
        """Test the s__ prefix for heads and constants."""
        assert convert_term("instance") == "s__instance"
        assert convert_term("Human") == "s__Human"
        assert convert_term("Human", True) == "s__Human"

    def test_relation_mention_suffix(self):
        """Test that relations and functions mentioned as arguments get __m."""
        assert convert_term("instance", True) == "s__instance__m"
        assert convert_term("equal", True) == "s__equal__m"
        assert convert_term("MotherFn", True) == "s__MotherFn__m"
        assert convert_term("MotherFn", False) == "s__MotherFn"

    def test_math_functions(self):
        """Test renaming of arithmetic functions."""
        assert convert_term("AdditionFn") == "s__sum"
        assert convert_term("SubtractionFn") == "s__difference"
        assert convert_term("MultiplicationFn") == "s__product"
        assert convert_term("DivisionFn") == "s__quotient"
        assert convert_term("AdditionFn", True) == "s__sum__m"

    def test_comparison_aliases(self):
        """Test renaming of symbolic comparison operators."""
        assert convert_term("<") == "s__less"
        assert convert_term("<=") == "s__lesseq"
        assert convert_term(">") == "s__greater"
        assert convert_term(">=") == "s__greatereq"
        assert convert_term("=") == "s__equal"
        assert convert_term("lessThan") == "s__lessThan"

    def test_booleans(self):
        """Test True and False in sentence and argument position."""
        assert convert_term("True") == "$true"
        assert convert_term("False") == "$false"
        assert convert_term("True", True) == "'$true__m'"
        assert convert_term("False", True) == "'$false__m'"

    def test_quoting(self):
        """Test that symbols which are not bare TPTP identifiers are quoted."""
        assert convert_term("my-term") == "'s__my-term'"
        assert convert_term("it's") == "'s__it\\'s'"

    def test_without_prefixes(self):
        """Test translation with prefixing disabled."""
        options = SUOKIFConversionOptions(add_prefixes=False)

        assert convert_term("instance", options=options) == "instance"
        assert convert_term("instance", True, options) == "instance__m"
        assert convert_term("Human", options=options) == "'Human'"

    def test_is_relation_name(self):
        """Test the relation naming convention."""
        assert is_relation_name("instance")
        assert is_relation_name("AdditionFn")
        assert is_relation_name("<=")
        assert is_relation_name("and")
        assert not is_relation_name("Human")
        assert not is_relation_name("")

    def test_quote_if_needed(self):
        """Test bare identifier detection."""
        assert quote_if_needed("s__Foo") == "s__Foo"
        assert quote_if_needed("Foo") == "'Foo'"
        assert quote_if_needed("a b") == "'a b'"
        assert quote_if_needed("back\\slash") == "'back\\\\slash'"

    def test_string_constants(self):
        """Test interned string constant names."""
        assert convert_string_constant(1) == "str_1"
        assert convert_string_constant(12) == "str_12"
