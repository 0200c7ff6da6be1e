"""Free-variable analysis for SUO-KIF formulas."""

from typing import AbstractSet, Dict, List

from suokif.suokif_ast import SUOKIFASTNode, SUOKIFASTList, SUOKIFASTAnyVariable
from suokif.suokif_symbols import QUANTIFIERS


def quantified_variables(node: SUOKIFASTList) -> List[str] | None:
    """
    Return the variables declared by a quantifier list.

    Args:
        node: A list whose head may be forall or exists

    Returns:
        The declared variable names in source order, or None when the list is
        not a quantifier with a variable-list second element
    """
    if node.head_symbol() not in QUANTIFIERS or len(node.children) < 2:
        return None

    var_list = node.children[1]
    if not isinstance(var_list, SUOKIFASTList):
        return None

    return [child.value for child in var_list.children if isinstance(child, SUOKIFASTAnyVariable)]


def collect_free_variables(node: SUOKIFASTNode, bound: AbstractSet[str] = frozenset()) -> List[str]:
    """
    Collect the variables of a formula that no enclosing quantifier binds.

    The result lists each free variable or row variable once, in order of
    first occurrence in the formula.

    Args:
        node: The formula to analyze
        bound: Variables already bound by an enclosing context

    Returns:
        Free variable names, including their ? or @ sigil
    """
    free: Dict[str, None] = {}

    def visit(n: SUOKIFASTNode, bound_here: AbstractSet[str]) -> None:
        if isinstance(n, SUOKIFASTAnyVariable):
            if n.value not in bound_here:
                free.setdefault(n.value, None)

            return

        if not isinstance(n, SUOKIFASTList):
            return

        declared = quantified_variables(n)
        if declared is not None:
            body_bound = bound_here | frozenset(declared)
            for child in n.children[2:]:
                visit(child, body_bound)

            return

        for child in n.children:
            visit(child, bound_here)

    visit(node, bound)
    return list(free)
