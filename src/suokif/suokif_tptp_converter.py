"""Converter from SUO-KIF ASTs to TPTP formula text.

The converter is a single recursive walk over the AST.  Two pieces of context
travel with it: the set of variables bound by enclosing quantifiers, and
whether the node being translated sits in a sentence position (where a truth
value is expected) or a term position (where an individual is expected).
Every variable reached outside the bound set is recorded as free, in order of
first occurrence, and a standalone formula is closed over those variables.

Logical formulas may only occur in sentence positions.  A connective or
quantifier found in a term position would need higher-order logic, so the
converter raises SUOKIFHOLError for it instead of producing output.
"""

from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, List

from suokif.suokif_ast import (
    SUOKIFASTNode, SUOKIFASTList, SUOKIFASTAtom, SUOKIFASTString, SUOKIFASTNumber,
    SUOKIFASTAnyVariable, SUOKIFFormula
)
from suokif.suokif_error import SUOKIFBadFormulaError, SUOKIFHOLError
from suokif.suokif_options import SUOKIFConversionOptions, SUOKIFOutputLanguage
from suokif.suokif_symbols import (
    LOGICAL_OPERATORS, QUANTIFIERS, EQUALITY_OPERATORS, TERM_SYMBOL_PREFIX,
    convert_variable, convert_number, convert_term, convert_string_constant
)


@dataclass(frozen=True)
class SUOKIFTranslationContext:
    """Where in a formula a node is being translated."""
    bound: FrozenSet[str] = frozenset()
    sentence: bool = True

    def as_term(self) -> "SUOKIFTranslationContext":
        """Context for an argument slot."""
        return replace(self, sentence=False)

    def as_sentence(self) -> "SUOKIFTranslationContext":
        """Context for a logical operand."""
        return replace(self, sentence=True)

    def binding(self, variables: List[str]) -> "SUOKIFTranslationContext":
        """Context for a quantifier body that binds `variables`."""
        return replace(self, bound=self.bound | frozenset(variables), sentence=True)


class SUOKIFTPTPConverter:
    """
    Translates SUO-KIF formulas to TPTP.

    One converter instance corresponds to one conversion run: string literals
    are interned as str_1, str_2, ... in order of first occurrence, and equal
    strings share a constant for as long as the instance is used.
    """

    def __init__(self, options: SUOKIFConversionOptions | None = None):
        """
        Initialize the converter.

        Args:
            options: Conversion options; defaults are used when omitted
        """
        self.options = options if options is not None else SUOKIFConversionOptions()
        self._strings: Dict[str, str] = {}
        self._free: Dict[str, None] = {}

    def convert_formula(
        self,
        formula: SUOKIFFormula | SUOKIFASTNode,
        query: bool = False,
        context: SUOKIFTranslationContext | None = None
    ) -> str:
        """
        Translate a complete standalone formula.

        Free variables are closed over by an outer universal quantifier, or
        by an existential one when the formula is a query.  Variables already
        bound by `context` are left open.

        Args:
            formula: The formula or its AST
            query: True for a conjecture or question
            context: Enclosing translation context; a top-level sentence when omitted

        Returns:
            The TPTP formula body, without the fof(...) wrapper

        Raises:
            SUOKIFHOLError: If the formula needs higher-order logic
            SUOKIFBadFormulaError: If the formula is malformed
        """
        node = formula.node if isinstance(formula, SUOKIFFormula) else formula
        self._free = {}
        body = self.convert_node(node, context)

        variables: List[str] = []
        for name in self._free:
            converted = convert_variable(name)
            if converted not in variables:
                variables.append(converted)

        if not variables:
            return body

        quantifier = '?' if query else '!'
        return f"({quantifier} [{self._variable_list(variables)}] : ({body}))"

    def convert_node(self, node: SUOKIFASTNode, context: SUOKIFTranslationContext | None = None) -> str:
        """
        Translate a node without closing over its free variables.

        Raises:
            SUOKIFHOLError: If the node needs higher-order logic
            SUOKIFBadFormulaError: If the node is malformed
        """
        if context is None:
            context = SUOKIFTranslationContext()

        result = self._convert(node, context)
        if result is None:
            raise self._bad_formula(node, "Formula consists only of a removed string literal")

        return result

    def _convert(self, node: SUOKIFASTNode, context: SUOKIFTranslationContext) -> str | None:
        """Translate a node; None means the node was elided (a removed string)."""
        if isinstance(node, SUOKIFASTList):
            return self._convert_list(node, context)

        if isinstance(node, SUOKIFASTAnyVariable):
            if node.value not in context.bound:
                self._free.setdefault(node.value, None)

            return convert_variable(node.value)

        if isinstance(node, SUOKIFASTNumber):
            return convert_number(node.value, self.options)

        if isinstance(node, SUOKIFASTString):
            if self.options.remove_strings:
                return None

            return self._intern_string(node.value)

        assert isinstance(node, SUOKIFASTAtom), f"Unexpected node type: {type(node).__name__}"
        return convert_term(node.value, not context.sentence, self.options)

    def _intern_string(self, text: str) -> str:
        constant = self._strings.get(text)
        if constant is None:
            constant = convert_string_constant(len(self._strings) + 1)
            self._strings[text] = constant

        return constant

    def _convert_list(self, node: SUOKIFASTList, context: SUOKIFTranslationContext) -> str:
        head = node.head()
        if head is None:
            raise self._bad_formula(node, "Empty list cannot be translated")

        if isinstance(head, SUOKIFASTAnyVariable):
            return self._convert_variable_application(node, context)

        if not isinstance(head, SUOKIFASTAtom):
            raise self._bad_formula(
                node,
                f"List head must be a symbol or variable, not a {head.type_name()}",
                received=head.to_kif()
            )

        op = head.value

        if op in LOGICAL_OPERATORS:
            if not context.sentence:
                raise SUOKIFHOLError(
                    message=f"Logical operator '{op}' used as a term requires higher-order logic",
                    formula=node.to_kif(),
                    operator=op,
                    line=node.line,
                    column=node.column,
                    source_file=node.source_file,
                    context="A formula cannot be passed as an argument in first-order TPTP"
                )

            return self._convert_logical(node, op, context)

        if op in EQUALITY_OPERATORS:
            return self._convert_equality(node, op, context)

        return self._apply(convert_term(op, False, self.options), self._convert_arguments(node, context))

    def _convert_arguments(self, node: SUOKIFASTList, context: SUOKIFTranslationContext) -> List[str]:
        term_context = context.as_term()
        args = []
        for child in node.arguments():
            converted = self._convert(child, term_context)
            if converted is not None:
                args.append(converted)

        return args

    def _apply(self, functor: str, args: List[str]) -> str:
        if not args:
            return functor

        if self.options.output_language == SUOKIFOutputLanguage.THF:
            return "(" + " @ ".join([functor] + args) + ")"

        return f"{functor}({','.join(args)})"

    def _convert_variable_application(self, node: SUOKIFASTList, context: SUOKIFTranslationContext) -> str:
        """A variable in head position is applied through holds (sentences) or apply (terms)."""
        head = node.children[0]
        assert isinstance(head, SUOKIFASTAnyVariable)
        prefix = TERM_SYMBOL_PREFIX if self.options.add_prefixes else ''
        functor = prefix + ('holds' if context.sentence else 'apply')
        head_variable = self._convert(head, context)
        assert head_variable is not None
        return self._apply(functor, [head_variable] + self._convert_arguments(node, context))

    def _convert_logical(self, node: SUOKIFASTList, op: str, context: SUOKIFTranslationContext) -> str:
        args = node.arguments()
        sentence = context.as_sentence()

        if op in ('and', 'or'):
            operands = [self.convert_node(arg, sentence) for arg in args]
            if not operands:
                return '$true' if op == 'and' else '$false'

            if len(operands) == 1:
                return operands[0]

            return "(" + f" {LOGICAL_OPERATORS[op]} ".join(operands) + ")"

        if op == 'xor':
            operands = [self.convert_node(arg, sentence) for arg in args]
            if not operands:
                return '$false'

            result = operands[0]
            for operand in operands[1:]:
                result = f"({result} <~> {operand})"

            return result

        if op == 'not':
            self._check_arity(node, 1)
            return f"~({self.convert_node(args[0], sentence)})"

        if op == '=>':
            self._check_arity(node, 2)
            antecedent = self.convert_node(args[0], sentence)
            consequent = self.convert_node(args[1], sentence)
            return f"({antecedent} => {consequent})"

        if op == '<=>':
            self._check_arity(node, 2)
            left = self.convert_node(args[0], sentence)
            right = self.convert_node(args[1], sentence)
            return f"(({left} => {right}) & ({right} => {left}))"

        assert op in QUANTIFIERS, f"Unhandled logical operator: {op}"
        return self._convert_quantifier(node, op, context)

    def _convert_quantifier(self, node: SUOKIFASTList, op: str, context: SUOKIFTranslationContext) -> str:
        self._check_arity(node, 2)
        var_list = node.children[1]
        if not isinstance(var_list, SUOKIFASTList) or not all(
            isinstance(v, SUOKIFASTAnyVariable) for v in var_list.children
        ):
            raise self._bad_formula(
                node,
                f"The first argument of '{op}' must be a list of variables",
                received=var_list.to_kif(),
                expected=f"({op} (?X ?Y) body)"
            )

        declared = [v.value for v in var_list.children if isinstance(v, SUOKIFASTAnyVariable)]
        body = self.convert_node(node.children[2], context.binding(declared))
        if not declared:
            return body

        variables: List[str] = []
        for name in declared:
            converted = convert_variable(name)
            if converted not in variables:
                variables.append(converted)

        return f"({LOGICAL_OPERATORS[op]} [{self._variable_list(variables)}] : ({body}))"

    def _variable_list(self, variables: List[str]) -> str:
        if self.options.output_language == SUOKIFOutputLanguage.THF:
            return ",".join(f"{v}:$i" for v in variables)

        return ",".join(variables)

    def _convert_equality(self, node: SUOKIFASTList, op: str, context: SUOKIFTranslationContext) -> str:
        """Equality is infix in sentence position and an ordinary equal(...) term elsewhere."""
        self._check_arity(node, 2)
        args = self._convert_arguments(node, context)
        if len(args) != 2:
            raise self._bad_formula(node, f"'{op}' needs two operands after string removal")

        if context.sentence:
            return f"({args[0]} = {args[1]})"

        return self._apply(convert_term('equal', False, self.options), args)

    def _check_arity(self, node: SUOKIFASTList, expected: int) -> None:
        actual = len(node.children) - 1
        if actual != expected:
            noun = "argument" if expected == 1 else "arguments"
            raise self._bad_formula(node, f"'{node.head_symbol()}' takes {expected} {noun}, got {actual}")

    def _bad_formula(self, node: SUOKIFASTNode, message: str, **details: str) -> SUOKIFBadFormulaError:
        details.setdefault("received", node.to_kif())
        return SUOKIFBadFormulaError(
            message=message,
            line=node.line,
            column=node.column,
            source_file=node.source_file,
            **details
        )


def convert_node(node: SUOKIFASTNode, options: SUOKIFConversionOptions | None = None) -> str:
    """Translate a single node in sentence position without variable closure."""
    return SUOKIFTPTPConverter(options).convert_node(node)


def convert_formula(
    formula: SUOKIFFormula | SUOKIFASTNode,
    options: SUOKIFConversionOptions | None = None,
    query: bool = False
) -> str:
    """Translate a standalone formula, closing over its free variables."""
    return SUOKIFTPTPConverter(options).convert_formula(formula, query)
