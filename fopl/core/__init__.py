from .errors import (
    FoplError, InvalidArgument, Unsupported,
    AlreadyBound, UnboundVariable, UnificationFailure,
)
from .symbols import Symbol, SymbolRegistry, default_registry, as_symbol
from .expression import Expression, Unifiable
from .terms import Term, Variable, Constant, Function
from .substitution import Substitution
from .formulas import (
    Truth, Formula, Predicate,
    Operator, NaryOperator, And, Or, Not, Implies, Iff,
    interpret,
)
from .unification import unify, unify_sequences, mgu, occurs_in, standardize_apart

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
