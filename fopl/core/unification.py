"""
Robinson unification over Terms and Predicates, with occurs check.

Given two expressions, find a substitution that makes them identical,
or report that no such substitution exists.

    unify(Function("f", (X, a)), Function("f", (b, Y)))   ->  {?X -> b, ?Y -> a}
    unify(Function("f", (X, a)), Function("f", (b, X)))   ->  None

Dispatch is on the variant of each side. Whenever a side is a variable
it is resolved through the current bindings first, so a bound variable
unifies as its value does and the variable is always the side that gets
bound, whichever argument position it came in. The substitution passed
in is never mutated: a new binding is added to a copy.
"""

import logging
from typing import Optional, Sequence

from .errors import UnificationFailure
from .formulas import Predicate
from .substitution import Substitution
from .symbols import SymbolRegistry
from .terms import Constant, Function, Variable

logger = logging.getLogger(__name__)


def occurs_in(variable: Variable, expression, substitution: Substitution = None) -> bool:
    """Does variable occur anywhere in expression (following bindings)?"""
    if substitution is not None:
        expression = substitution.walk(expression)
    if expression == variable:
        return True
    if isinstance(expression, (Function, Predicate)):
        return any(occurs_in(variable, arg, substitution) for arg in expression.args)
    return False


def unify(left, right, substitution: Substitution = None,
          occurs_check: bool = True) -> Optional[Substitution]:
    """
    Unify left with right under substitution.

    Returns the updated Substitution (the same object if nothing new had
    to be bound), or None if unification fails.
    """
    if substitution is None:
        substitution = Substitution()

    if left == right:
        return substitution

    left = substitution.walk(left)
    right = substitution.walk(right)

    if left == right:
        return substitution

    if isinstance(left, Variable):
        return _bind(left, right, substitution, occurs_check)

    if isinstance(right, Variable):
        return _bind(right, left, substitution, occurs_check)

    if isinstance(left, Constant) and isinstance(right, Constant):
        return _fail(left, right)  # distinct symbols, else they'd be equal

    if ((isinstance(left, Function) and isinstance(right, Function)) or
            (isinstance(left, Predicate) and isinstance(right, Predicate))):
        if left.symbol != right.symbol or len(left.args) != len(right.args):
            return _fail(left, right)  # different functor or arity
        return unify_sequences(left.args, right.args, substitution, occurs_check)

    return _fail(left, right)  # mismatched variants


def unify_sequences(lefts: Sequence, rights: Sequence, substitution: Substitution = None,
                    occurs_check: bool = True) -> Optional[Substitution]:
    """Unify two sequences pairwise, left to right, threading the substitution."""
    if substitution is None:
        substitution = Substitution()
    if len(lefts) != len(rights):
        return None
    for left, right in zip(lefts, rights):
        substitution = unify(left, right, substitution, occurs_check)
        if substitution is None:
            return None
    return substitution


def mgu(left, right, substitution: Substitution = None,
        occurs_check: bool = True) -> Substitution:
    """Like unify(), but raises UnificationFailure instead of returning None."""
    result = unify(left, right, substitution, occurs_check)
    if result is None:
        raise UnificationFailure(left, right)
    return result


def standardize_apart(expression, rename_map: dict = None,
                      registry: SymbolRegistry = None):
    """
    Rename every variable in expression to a fresh one.

    Call once per clause instance with a new map (the default) so that two
    instances never share a variable.
    """
    if rename_map is None:
        rename_map = {}
    return expression.standardize_apart(rename_map, registry)


def _bind(variable, term, substitution, occurs_check):
    if occurs_check and occurs_in(variable, term, substitution):
        return _fail(variable, term)  # X = f(X) would need an infinite term
    extended = Substitution(substitution)
    extended.add(variable, term)
    return extended


def _fail(left, right):
    logger.debug("unification failed: %s vs %s", left, right)
    return None
