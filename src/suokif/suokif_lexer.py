"""Lexer for SUO-KIF source text with position tracking and collected errors."""

import re
from typing import List, Tuple

from suokif.suokif_error import SUOKIFLexError
from suokif.suokif_token import SUOKIFToken, SUOKIFTokenType


# Characters that separate tokens and are otherwise discarded
WHITESPACE = frozenset(' \t\r\n\f')

# Reserved operator spellings that do not start with a letter are only reachable
# through this table; alphabetic ones are classified as atoms first.
OPERATORS = frozenset(['and', 'or', 'not', 'exists', 'forall', '=>', '<=>', 'equal'])

NUMBER_PATTERN = re.compile(r'-?\d+(\.\d+)?(e-?\d+)?', re.IGNORECASE)


def is_letter(char: str) -> bool:
    """Check if a character may start a SUO-KIF symbol."""
    return char.isascii() and char.isalpha()


class SUOKIFLexer:
    """
    Lexes SUO-KIF text into tokens.

    The lexer never raises for malformed input.  Every lexical problem is
    recorded as a SUOKIFLexError and the offending token is still produced, so
    that later stages always receive a complete token stream.
    """

    def lex(self, text: str, source_file: str = "") -> Tuple[List[SUOKIFToken], List[SUOKIFLexError]]:
        """
        Lex SUO-KIF text.

        Args:
            text: The source text to lex
            source_file: Label used in token and error positions

        Returns:
            Tuple of (tokens, errors)
        """
        tokens: List[SUOKIFToken] = []
        errors: List[SUOKIFLexError] = []
        i = 0
        line = 1
        column = 1
        length = len(text)

        while i < length:
            char = text[i]

            if char == '\n':
                line += 1
                column = 1
                i += 1
                continue

            if char in WHITESPACE:
                column += 1
                i += 1
                continue

            # Comments run from ';' to end of line
            if char == ';':
                while i < length and text[i] != '\n':
                    column += 1
                    i += 1

                continue

            if char == '(':
                tokens.append(SUOKIFToken(SUOKIFTokenType.LPAREN, '(', line, column, i, 1, source_file))
                column += 1
                i += 1
                continue

            if char == ')':
                tokens.append(SUOKIFToken(SUOKIFTokenType.RPAREN, ')', line, column, i, 1, source_file))
                column += 1
                i += 1
                continue

            if char == '"':
                value, consumed, terminated = self._read_string(text, i)
                tokens.append(SUOKIFToken(SUOKIFTokenType.STRING, value, line, column, i, consumed, source_file))
                if not terminated:
                    errors.append(SUOKIFLexError(
                        message="Unterminated string literal",
                        line=line,
                        column=column,
                        source_file=source_file,
                        received=f"String starting with: {text[i:i + 20]}",
                        expected="Closing quote \" at end of string",
                        suggestion="Add a closing quote \" at the end of the string",
                        source=text
                    ))

                # Strings may span lines, so walk the consumed characters
                for j in range(i, i + consumed):
                    if text[j] == '\n':
                        line += 1
                        column = 1

                    else:
                        column += 1

                i += consumed
                continue

            start = i
            while i < length and text[i] not in WHITESPACE and text[i] not in '()"':
                i += 1

            word = text[start:i]
            token_type, error_message = self._classify(word)
            tokens.append(SUOKIFToken(token_type, word, line, column, start, i - start, source_file))

            if error_message is not None:
                errors.append(SUOKIFLexError(
                    message=error_message,
                    line=line,
                    column=column,
                    source_file=source_file,
                    received=f"Symbol: {word}",
                    expected="A symbol, ?variable or @row-variable starting with a letter, or a number",
                    source=text
                ))

            column += i - start

        return tokens, errors

    def _read_string(self, text: str, start: int) -> Tuple[str, int, bool]:
        """
        Read a string literal starting at the opening quote.

        Escapes are kept verbatim as a backslash/character pair and embedded
        newlines are folded to single spaces.

        Returns:
            Tuple of (string_value, length_consumed, terminated)
        """
        i = start + 1
        result: List[str] = []

        while i < len(text):
            char = text[i]

            if char == '"':
                return ''.join(result), i + 1 - start, True

            if char == '\\' and i + 1 < len(text):
                escaped = text[i + 1]
                result.append('\\')
                result.append(' ' if escaped == '\n' else escaped)
                i += 2
                continue

            result.append(' ' if char == '\n' else char)
            i += 1

        return ''.join(result), i - start, False

    def _classify(self, word: str) -> Tuple[SUOKIFTokenType, str | None]:
        """
        Classify a non-parenthesis, non-string word.

        Returns:
            Tuple of (token_type, error_message or None)
        """
        if NUMBER_PATTERN.fullmatch(word):
            return SUOKIFTokenType.NUMBER, None

        if word.startswith('?'):
            if len(word) < 2 or not is_letter(word[1]):
                return SUOKIFTokenType.VARIABLE, f"Variable names must start with a letter after '?': {word}"

            return SUOKIFTokenType.VARIABLE, None

        if word.startswith('@'):
            if len(word) < 2 or not is_letter(word[1]):
                return SUOKIFTokenType.ROW_VARIABLE, f"Row variable names must start with a letter after '@': {word}"

            return SUOKIFTokenType.ROW_VARIABLE, None

        if is_letter(word[0]):
            return SUOKIFTokenType.ATOM, None

        if word in OPERATORS:
            return SUOKIFTokenType.OPERATOR, None

        return SUOKIFTokenType.ATOM, f"Symbols must start with a letter: {word}"


def tokenize(text: str, source_file: str = "") -> Tuple[List[SUOKIFToken], List[SUOKIFLexError]]:
    """Tokenize SUO-KIF text, returning the tokens and any collected lexical errors."""
    return SUOKIFLexer().lex(text, source_file)
