"""
Terms: the value-carrying objects that unification works on.

    Variable("X")                   ->  ?X
    Constant("socrates")            ->  socrates
    Function("f", (X, Constant("a")))  ->  (f ?X a)

Every term is immutable and identified by a Symbol. Equality always
includes the exact runtime type: a Constant and a zero-argument Function
with the same symbol are different terms, and so are a Variable and a
Constant named alike.
"""

from dataclasses import dataclass

from .expression import Unifiable
from .errors import InvalidArgument
from .symbols import Symbol, as_symbol


class Term(Unifiable):
    """Base class for Variable, Constant and Function."""

    symbol: Symbol

    @property
    def name(self) -> str:
        return self.symbol.name


@dataclass(frozen=True)
class Variable(Term):
    """A placeholder that a Substitution can bind to another term."""
    symbol: Symbol

    def __post_init__(self):
        object.__setattr__(self, "symbol", as_symbol(self.symbol))

    def replace_variables(self, substitution):
        if substitution.is_bound(self):
            return substitution.get_binding(self).replace_variables(substitution)
        return Variable(self.symbol)

    def standardize_apart(self, rename_map, registry=None):
        fresh = rename_map.get(self)
        if fresh is None:
            fresh = Variable(fresh_symbol(self.symbol, registry))
            rename_map[self] = fresh
        return fresh

    def variables(self):
        return (self,)

    def __eq__(self, other):
        return type(other) is Variable and self.symbol == other.symbol

    def __hash__(self):
        return hash((Variable, self.symbol))

    def __str__(self):
        return f"?{self.symbol}"

    def __repr__(self):
        return f"Variable({self.symbol.name!r})"


@dataclass(frozen=True)
class Constant(Term):
    """A fixed individual. No sub-structure."""
    symbol: Symbol

    def __post_init__(self):
        object.__setattr__(self, "symbol", as_symbol(self.symbol))

    def replace_variables(self, substitution):
        return Constant(self.symbol)

    def standardize_apart(self, rename_map, registry=None):
        return self

    def variables(self):
        return ()

    def __eq__(self, other):
        return type(other) is Constant and self.symbol == other.symbol

    def __hash__(self):
        return hash((Constant, self.symbol))

    def __str__(self):
        return str(self.symbol)

    def __repr__(self):
        return f"Constant({self.symbol.name!r})"


@dataclass(frozen=True)
class Function(Term):
    """A functor symbol applied to an ordered tuple of argument terms."""
    symbol: Symbol
    args: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "symbol", as_symbol(self.symbol))
        object.__setattr__(self, "args", tuple(self.args))
        for arg in self.args:
            if not isinstance(arg, Term):
                raise TypeError(f"Function argument must be a Term, got {arg!r}")

    @property
    def arity(self) -> int:
        return len(self.args)

    def replace_variables(self, substitution):
        return Function(self.symbol, [arg.replace_variables(substitution) for arg in self.args])

    def standardize_apart(self, rename_map, registry=None):
        return Function(
            self.symbol,
            [arg.standardize_apart(rename_map, registry) for arg in self.args],
        )

    def variables(self):
        return collect_variables(self.args)

    def __eq__(self, other):
        return (type(other) is Function and
                self.symbol == other.symbol and
                self.args == other.args)

    def __hash__(self):
        return hash((Function, self.symbol, self.args))

    def __str__(self):
        if not self.args:
            return f"({self.symbol})"
        return f"({self.symbol} {' '.join(str(a) for a in self.args)})"

    def __repr__(self):
        return f"Function({self.symbol.name!r}, {self.args!r})"


def fresh_symbol(symbol: Symbol, registry=None) -> Symbol:
    """
    A never-used symbol whose name starts with symbol's name.

    Fresh names are drawn from the registry that interned symbol; a
    different registry could hand out a name already in use there.
    """
    if registry is not None and registry is not symbol.registry:
        raise InvalidArgument(f"{symbol} was not interned in {registry!r}")
    return symbol.registry.generate(symbol.name)


def collect_variables(expressions) -> tuple:
    """Variables of several expressions, de-duplicated, first occurrence first."""
    seen = {}
    for expression in expressions:
        for variable in expression.variables():
            seen.setdefault(variable, None)
    return tuple(seen)
