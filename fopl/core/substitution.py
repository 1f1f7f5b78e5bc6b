"""
Substitution: an ordered set of Variable -> term bindings.

Bindings are add-only. A variable is bound at most once, and a binding
is never overwritten in place; to "rebind", build a new Substitution.
Unification extends by copying, so a failed attempt leaves the caller's
substitution exactly as it was:

    sigma = Substitution(theta)     # independent copy
    sigma.add(X, Constant("a"))     # theta is untouched
"""

import logging

from .errors import AlreadyBound, InvalidArgument, UnboundVariable
from .expression import Unifiable
from .terms import Variable

logger = logging.getLogger(__name__)


class Substitution:

    def __init__(self, other: "Substitution" = None):
        self._bindings = dict(other._bindings) if other is not None else {}

    def is_bound(self, variable: Variable) -> bool:
        return variable in self._bindings

    def get_binding(self, variable: Variable):
        try:
            return self._bindings[variable]
        except KeyError:
            raise UnboundVariable(variable) from None

    def add(self, variable: Variable, term) -> "Substitution":
        """Bind variable to term. Returns self so calls can be chained."""
        if not isinstance(variable, Variable):
            raise InvalidArgument(f"only variables can be bound, got {variable!r}")
        if not isinstance(term, Unifiable):
            raise InvalidArgument(f"only terms can be bound to a variable, got {term!r}")
        if variable in self._bindings:
            raise AlreadyBound(variable, self._bindings[variable])
        if self.walk(term) == variable:
            raise InvalidArgument(f"binding {variable} to {term} would be circular")
        self._bindings[variable] = term
        logger.debug("bound %s -> %s", variable, term)
        return self

    def walk(self, term):
        """Follow variable bindings until reaching a non-variable or an unbound variable."""
        while isinstance(term, Variable) and term in self._bindings:
            term = self._bindings[term]
        return term

    def apply(self, expression):
        """Apply this substitution to a term or formula."""
        return expression.replace_variables(self)

    def compose(self, other: "Substitution") -> "Substitution":
        """
        Composition: applying the result equals applying self, then other.

        self's bindings get other applied to them; other's bindings for
        variables self leaves free are appended. Bindings that collapse to
        the variable itself are dropped.
        """
        composed = Substitution()
        for variable, term in self._bindings.items():
            term = term.replace_variables(other)
            if term != variable:
                composed._bindings[variable] = term
        for variable, term in other._bindings.items():
            if variable not in self._bindings:
                composed._bindings[variable] = term
        return composed

    def copy(self) -> "Substitution":
        return Substitution(self)

    def items(self):
        return self._bindings.items()

    def __contains__(self, variable):
        return variable in self._bindings

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)

    def __eq__(self, other):
        return isinstance(other, Substitution) and self._bindings == other._bindings

    __hash__ = None

    def __str__(self):
        pairs = ", ".join(f"{v} -> {t}" for v, t in self._bindings.items())
        return "{" + pairs + "}"

    def __repr__(self):
        return f"Substitution({self})"
