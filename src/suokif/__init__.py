"""SUO-KIF front end (lexer, parser) and SUO-KIF to TPTP translator."""

# Main API
from suokif.suokif import SUOKIF

# Exceptions
from suokif.suokif_error import (
    SUOKIFError, SUOKIFLexError, SUOKIFParseError, SUOKIFHOLError, SUOKIFBadFormulaError
)

# AST types
from suokif.suokif_ast import (
    SUOKIFASTNode, SUOKIFASTTerm, SUOKIFASTList, SUOKIFASTAtom, SUOKIFASTString, SUOKIFASTNumber,
    SUOKIFASTVariable, SUOKIFASTRowVariable, SUOKIFFormula
)

# Options and configuration
from suokif.suokif_options import SUOKIFConversionOptions, SUOKIFOutputLanguage
from suokif.suokif_config import SUOKIFConfig

# Lower-level components (for advanced usage)
from suokif.suokif_token import SUOKIFToken, SUOKIFTokenType
from suokif.suokif_lexer import SUOKIFLexer, tokenize
from suokif.suokif_parser import SUOKIFParser, parse
from suokif.suokif_scope import collect_free_variables
from suokif.suokif_symbols import convert_variable, convert_number, convert_term
from suokif.suokif_tptp_converter import (
    SUOKIFTPTPConverter, SUOKIFTranslationContext, convert_node, convert_formula
)
from suokif.suokif_kb_assembler import (
    SUOKIFKBAssembler, SUOKIFKBResult, SUOKIFSkippedFormula, convert_formulas, write_file,
    parse_kif_formulas, read_kif_file, lang_to_extension, extension_to_lang
)


__all__ = [
    # Main API
    "SUOKIF",

    # Exceptions
    "SUOKIFError", "SUOKIFLexError", "SUOKIFParseError", "SUOKIFHOLError", "SUOKIFBadFormulaError",

    # AST types
    "SUOKIFASTNode", "SUOKIFASTTerm", "SUOKIFASTList", "SUOKIFASTAtom", "SUOKIFASTString", "SUOKIFASTNumber",
    "SUOKIFASTVariable", "SUOKIFASTRowVariable", "SUOKIFFormula",

    # Options and configuration
    "SUOKIFConversionOptions", "SUOKIFOutputLanguage", "SUOKIFConfig",

    # Lower-level components
    "SUOKIFToken", "SUOKIFTokenType", "SUOKIFLexer", "tokenize", "SUOKIFParser", "parse",
    "collect_free_variables", "convert_variable", "convert_number", "convert_term",
    "SUOKIFTPTPConverter", "SUOKIFTranslationContext", "convert_node", "convert_formula",
    "SUOKIFKBAssembler", "SUOKIFKBResult", "SUOKIFSkippedFormula", "convert_formulas", "write_file",
    "parse_kif_formulas", "read_kif_file", "lang_to_extension", "extension_to_lang",
]
