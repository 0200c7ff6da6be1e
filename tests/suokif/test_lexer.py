"""Tests for the SUO-KIF lexer."""

from suokif import SUOKIFLexError, SUOKIFTokenType, tokenize


class TestSUOKIFLexer:
    """Test token classification, positions and error collection."""

    def test_simple_formula_tokens(self):
        """Test the token stream of a flat formula."""
        tokens, errors = tokenize("(instance Foo Bar)")

        assert errors == []
        assert [t.type for t in tokens] == [
            SUOKIFTokenType.LPAREN,
            SUOKIFTokenType.ATOM,
            SUOKIFTokenType.ATOM,
            SUOKIFTokenType.ATOM,
            SUOKIFTokenType.RPAREN,
        ]
        assert [t.value for t in tokens] == ["(", "instance", "Foo", "Bar", ")"]

    def test_empty_and_whitespace_only_input(self):
        """Test that blank input produces no tokens."""
        for text in ["", "   ", "\t\n\r\f", "; only a comment"]:
            tokens, errors = tokenize(text)
            assert tokens == []
            assert errors == []

    def test_offsets_slice_back_to_token_text(self):
        """Test that each token's offset and length cover its source text."""
        text = "(=> (instance ?X Human)\n    (attribute ?X 42))"
        tokens, errors = tokenize(text)

        assert errors == []
        for token in tokens:
            assert text[token.offset:token.end_offset] == token.value

        offsets = [t.offset for t in tokens]
        assert offsets == sorted(offsets)

    def test_line_and_column_tracking(self):
        """Test 1-based line and column numbers across newlines."""
        tokens, _errors = tokenize("(a\n  b)")

        b_token = tokens[2]
        assert b_token.value == "b"
        assert b_token.line == 2
        assert b_token.column == 3

        close = tokens[3]
        assert close.line == 2
        assert close.column == 4

    def test_comments_are_skipped(self):
        """Test that ';' comments run to the end of the line."""
        tokens, errors = tokenize("; a comment (with parens)\n(a) ; trailing\n")

        assert errors == []
        assert [t.value for t in tokens] == ["(", "a", ")"]
        assert tokens[0].line == 2
        assert tokens[0].column == 1

    def test_string_literal(self):
        """Test that string values exclude the quotes but the token spans them."""
        text = '(documentation Foo "A foo.")'
        tokens, errors = tokenize(text)

        assert errors == []
        string_token = tokens[3]
        assert string_token.type == SUOKIFTokenType.STRING
        assert string_token.value == "A foo."
        assert text[string_token.offset:string_token.end_offset] == '"A foo."'

    def test_multiline_string_folds_newlines(self):
        """Test that newlines inside strings become spaces and positions continue correctly."""
        tokens, errors = tokenize('"hello\nworld" Next')

        assert errors == []
        assert tokens[0].value == "hello world"
        assert tokens[1].value == "Next"
        assert tokens[1].line == 2
        assert tokens[1].column == 8

    def test_string_escapes_are_kept(self):
        """Test that backslash escapes stay as backslash/character pairs."""
        tokens, errors = tokenize('"say \\"hi\\""')

        assert errors == []
        assert len(tokens) == 1
        assert tokens[0].value == 'say \\"hi\\"'

    def test_unterminated_string(self):
        """Test that an unterminated string is reported and still emitted."""
        tokens, errors = tokenize('(p "never closed')

        assert len(errors) == 1
        assert isinstance(errors[0], SUOKIFLexError)
        assert "Unterminated string" in errors[0].message
        assert errors[0].line == 1
        assert errors[0].column == 4
        assert tokens[-1].type == SUOKIFTokenType.STRING
        assert tokens[-1].value == "never closed"

    def test_numbers(self):
        """Test numeric literal forms."""
        for text in ["0", "42", "-5", "3.14", "-0.001", "1e10", "2E-5", "6.02e23"]:
            tokens, errors = tokenize(text)
            assert errors == [], text
            assert len(tokens) == 1
            assert tokens[0].type == SUOKIFTokenType.NUMBER, text
            assert tokens[0].value == text

    def test_variables(self):
        """Test ?variables and @row-variables."""
        tokens, errors = tokenize("?X ?my-var @ROW")

        assert errors == []
        assert [t.type for t in tokens] == [
            SUOKIFTokenType.VARIABLE,
            SUOKIFTokenType.VARIABLE,
            SUOKIFTokenType.ROW_VARIABLE,
        ]
        assert [t.value for t in tokens] == ["?X", "?my-var", "@ROW"]

    def test_malformed_variables_are_reported(self):
        """Test that a variable sigil must be followed by a letter."""
        for text, token_type in [
            ("?1", SUOKIFTokenType.VARIABLE),
            ("?", SUOKIFTokenType.VARIABLE),
            ("@", SUOKIFTokenType.ROW_VARIABLE),
            ("@-x", SUOKIFTokenType.ROW_VARIABLE),
        ]:
            tokens, errors = tokenize(text)
            assert len(errors) == 1, text
            assert tokens[0].type == token_type

    def test_symbolic_operators(self):
        """Test that symbolic connectives are operator tokens."""
        tokens, errors = tokenize("=> <=>")

        assert errors == []
        assert [t.type for t in tokens] == [SUOKIFTokenType.OPERATOR, SUOKIFTokenType.OPERATOR]

    def test_alphabetic_operators_are_atoms(self):
        """Test that words starting with a letter are atoms even when they are connectives."""
        tokens, errors = tokenize("and or not forall exists equal")

        assert errors == []
        assert all(t.type == SUOKIFTokenType.ATOM for t in tokens)

    def test_symbols_not_starting_with_a_letter(self):
        """Test that other symbols are reported but still tokenized as atoms."""
        tokens, errors = tokenize("(< 1 2)")

        assert len(errors) == 1
        assert errors[0].column == 2
        assert "must start with a letter" in errors[0].message
        assert tokens[1].type == SUOKIFTokenType.ATOM
        assert tokens[1].value == "<"

    def test_tokens_carry_source_file(self):
        """Test that the source label is attached to tokens and errors."""
        tokens, errors = tokenize("(p ?1)", "Merge.kif")

        assert all(t.source_file == "Merge.kif" for t in tokens)
        assert errors[0].location() == "Merge.kif:1:4"

    def test_lexing_continues_after_errors(self):
        """Test that all errors in a text are collected in one pass."""
        tokens, errors = tokenize("(p ?1 @2 $x)\n(q A)")

        assert len(errors) == 3
        assert [t.value for t in tokens][-4:] == ["(", "q", "A", ")"]
