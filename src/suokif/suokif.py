"""Main SUO-KIF to TPTP translation class."""

from typing import List, Tuple

from suokif.suokif_ast import SUOKIFFormula
from suokif.suokif_error import SUOKIFError, SUOKIFBadFormulaError
from suokif.suokif_kb_assembler import SUOKIFKBAssembler, SUOKIFKBResult
from suokif.suokif_lexer import SUOKIFLexer
from suokif.suokif_options import SUOKIFConversionOptions
from suokif.suokif_parser import SUOKIFParser
from suokif.suokif_token import SUOKIFToken
from suokif.suokif_tptp_converter import SUOKIFTPTPConverter


class SUOKIF:
    """
    SUO-KIF front end and TPTP translator.

    Ties the lexer, parser, formula converter and knowledge base assembler
    together behind a small API.  The instance holds only the conversion
    options; every call starts from fresh state.
    """

    def __init__(self, options: SUOKIFConversionOptions | None = None):
        """
        Initialize the translator.

        Args:
            options: Conversion options used by every translation call
        """
        self.options = options if options is not None else SUOKIFConversionOptions()

    def tokenize(self, text: str, source_file: str = "") -> Tuple[List[SUOKIFToken], List[SUOKIFError]]:
        """Tokenize text, returning tokens and lexical errors."""
        tokens, errors = SUOKIFLexer().lex(text, source_file)
        return tokens, list(errors)

    def parse(self, text: str, source_file: str = "") -> Tuple[List[SUOKIFFormula], List[SUOKIFError]]:
        """
        Tokenize and parse text.

        Returns:
            Tuple of (formulas, errors) where errors holds lexical errors
            followed by parse errors
        """
        tokens, errors = self.tokenize(text, source_file)
        formulas, parse_errors = SUOKIFParser(tokens, text, source_file).parse()
        errors.extend(parse_errors)
        return formulas, errors

    def check(self, text: str, source_file: str = "") -> List[SUOKIFError]:
        """Return every lexical and parse error in text, ordered by position."""
        _formulas, errors = self.parse(text, source_file)
        return sorted(errors, key=lambda e: (e.line or 0, e.column or 0))

    def convert(self, text: str, query: bool = False) -> str:
        """
        Translate a single SUO-KIF formula to a TPTP formula body.

        Args:
            text: Exactly one SUO-KIF formula
            query: Close free variables existentially instead of universally

        Raises:
            SUOKIFBadFormulaError: If the text is not exactly one well-formed formula
            SUOKIFHOLError: If the formula needs higher-order logic
        """
        tokens, _lex_errors = self.tokenize(text)
        formulas, parse_errors = SUOKIFParser(tokens, text).parse()
        if parse_errors:
            first = parse_errors[0]
            raise SUOKIFBadFormulaError(
                message=f"Formula cannot be parsed: {first.message}",
                line=first.line,
                column=first.column,
                received=text
            ) from first

        if len(formulas) != 1:
            raise SUOKIFBadFormulaError(
                message=f"Expected exactly one formula, found {len(formulas)}",
                received=text
            )

        return SUOKIFTPTPConverter(self.options).convert_formula(formulas[0], query)

    def convert_kb(
        self,
        formulas: List[str],
        kb_name: str,
        conjecture: str | None = None,
        is_question: bool = False,
        strict: bool = False
    ) -> SUOKIFKBResult:
        """Translate a list of formulas into a complete TPTP document."""
        assembler = SUOKIFKBAssembler(self.options, strict=strict)
        return assembler.convert_formulas(formulas, kb_name, conjecture, is_question)
