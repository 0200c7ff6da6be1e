"""Translation of individual SUO-KIF symbols and literals into TPTP lexical forms.

Every function here is pure: the result depends only on the arguments and the
conversion options passed in.
"""

import re

from suokif.suokif_options import SUOKIFConversionOptions, SUOKIFOutputLanguage


TERM_SYMBOL_PREFIX = 's__'
TERM_VARIABLE_PREFIX = 'V__'
TERM_MENTION_SUFFIX = '__m'
NUMBER_PREFIX = 'n__'
FUNCTION_SUFFIX = 'Fn'

# Logical operators and their TPTP connectives
LOGICAL_OPERATORS = {
    'forall': '!',
    'exists': '?',
    'not': '~',
    'and': '&',
    'or': '|',
    'xor': '<~>',
    '=>': '=>',
    '<=>': '<=>',
}

QUANTIFIERS = frozenset(['forall', 'exists'])

EQUALITY_OPERATORS = frozenset(['equal', '='])

# Arithmetic functions that TPTP provers know under other names
MATH_FUNCTIONS = {
    'AdditionFn': 'sum',
    'PlusFn': 'sum',
    'SubtractionFn': 'difference',
    'MinusFn': 'difference',
    'MultiplicationFn': 'product',
    'TimesFn': 'product',
    'DivisionFn': 'quotient',
    'DivideFn': 'quotient',
}

# Symbolic spellings that are renamed before prefixing
SYMBOL_ALIASES = {
    '<': 'less',
    '<=': 'lesseq',
    '>': 'greater',
    '>=': 'greatereq',
    '=': 'equal',
}

BOOLEAN_CONSTANTS = {
    'True': '$true',
    'False': '$false',
}

# Predicates whose statements carry no logical content for a prover
EXCLUDED_PREDICATES = frozenset([
    'documentation',
    'domain',
    'domainSubclass',
    'format',
    'termFormat',
    'externalImage',
    'relatedExternalConcept',
    'relatedInternalConcept',
    'formerName',
    'abbreviation',
    'conventionalShortName',
    'conventionalLongName',
])

_BARE_IDENTIFIER = re.compile(r'[a-z][a-zA-Z0-9_]*')
_NON_WORD = re.compile(r'[^A-Za-z0-9_]')

DEFAULT_OPTIONS = SUOKIFConversionOptions()


def convert_variable(name: str) -> str:
    """
    Convert a ?variable or @row-variable to a TPTP variable.

    >>> convert_variable('?my-var')
    'V__MY_VAR'
    """
    if name.startswith('?') or name.startswith('@'):
        name = name[1:]

    return TERM_VARIABLE_PREFIX + _NON_WORD.sub('_', name.upper())


def convert_number(text: str, options: SUOKIFConversionOptions = DEFAULT_OPTIONS) -> str:
    """
    Convert a numeric literal.

    With `hide_numbers` the number becomes a symbol: a leading '-' turns into
    'neg_' and any '.' or remaining '-' into '_'.  TFF output keeps numerals,
    since TFF has built-in arithmetic.
    """
    if not options.hide_numbers or options.output_language == SUOKIFOutputLanguage.TFF:
        return text

    converted = text
    if converted.startswith('-'):
        converted = 'neg_' + converted[1:]

    converted = converted.replace('.', '_').replace('-', '_')
    return NUMBER_PREFIX + converted


def convert_boolean(term: str, is_argument: bool) -> str:
    """
    Convert True or False.

    In sentence position these are the TPTP truth values; mentioned as an
    argument they become quoted constants such as '$true__m'.
    """
    constant = BOOLEAN_CONSTANTS[term]
    if is_argument:
        return f"'{constant}{TERM_MENTION_SUFFIX}'"

    return constant


def is_relation_name(term: str) -> bool:
    """
    Check whether a symbol names something applicable: a relation, a function or an operator.

    SUMO writes relations with a lowercase initial and functions with an 'Fn'
    suffix.
    """
    if not term:
        return False

    if term in LOGICAL_OPERATORS or term in SYMBOL_ALIASES:
        return True

    first = term[0]
    if first.isascii() and first.islower():
        return True

    return term.endswith(FUNCTION_SUFFIX)


def quote_if_needed(symbol: str) -> str:
    """Wrap a symbol in single quotes unless it is a valid bare TPTP identifier."""
    if _BARE_IDENTIFIER.fullmatch(symbol):
        return symbol

    escaped = symbol.replace('\\', '\\\\').replace("'", "\\'")
    return f"'{escaped}'"


def convert_term(term: str, is_argument: bool = False, options: SUOKIFConversionOptions = DEFAULT_OPTIONS) -> str:
    """
    Convert a constant, relation or function symbol.

    Args:
        term: The SUO-KIF symbol
        is_argument: True when the symbol is mentioned as an argument rather
            than applied as the head of a list
        options: Conversion options

    Returns:
        The TPTP symbol, with the mention suffix when a relation is mentioned
    """
    if term in BOOLEAN_CONSTANTS:
        return convert_boolean(term, is_argument)

    name = SYMBOL_ALIASES.get(term, term)
    name = MATH_FUNCTIONS.get(name, name)

    result = (TERM_SYMBOL_PREFIX if options.add_prefixes else '') + name
    if is_argument and is_relation_name(term):
        result += TERM_MENTION_SUFFIX

    return quote_if_needed(result)


def convert_string_constant(index: int) -> str:
    """Name the interned constant for the index-th distinct string literal."""
    return f"str_{index}"
