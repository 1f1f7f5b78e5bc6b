"""
fopl: terms, formulas and unification for first-order predicate logic.

The foundational algebra a resolution or rule engine is built on:
interned symbols, immutable terms and formulas, add-only substitutions,
most-general unifiers, and renaming variables apart.

Usage:
    from fopl import Variable, Constant, Function, unify

    X, Y = Variable("X"), Variable("Y")
    a, b = Constant("a"), Constant("b")
    sub = unify(Function("f", (X, a)), Function("f", (b, Y)))
    print(sub)          # {?X -> b, ?Y -> a}
"""

from .core.errors import (
    FoplError, InvalidArgument, Unsupported,
    AlreadyBound, UnboundVariable, UnificationFailure,
)
from .core.symbols import Symbol, SymbolRegistry, default_registry, as_symbol
from .core.expression import Expression, Unifiable
from .core.terms import Term, Variable, Constant, Function
from .core.substitution import Substitution
from .core.formulas import (
    Truth, Formula, Predicate,
    Operator, NaryOperator, And, Or, Not, Implies, Iff,
    interpret,
)
from .core.unification import unify, unify_sequences, mgu, occurs_in, standardize_apart

__all__ = [
    "FoplError", "InvalidArgument", "Unsupported",
    "AlreadyBound", "UnboundVariable", "UnificationFailure",
    "Symbol", "SymbolRegistry", "default_registry", "as_symbol",
    "Expression", "Unifiable",
    "Term", "Variable", "Constant", "Function",
    "Substitution",
    "Truth", "Formula", "Predicate",
    "Operator", "NaryOperator", "And", "Or", "Not", "Implies", "Iff",
    "interpret",
    "unify", "unify_sequences", "mgu", "occurs_in", "standardize_apart",
]
