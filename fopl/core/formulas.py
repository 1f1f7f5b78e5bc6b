"""
Formulas: predicates and the logical operators built over them.

Every formula carries a Symbol and a three-valued truth value. A
Predicate's value is assigned from outside (an interpretation); an
operator derives its value from its operands when it is constructed:

    p = Predicate("human", [Constant("socrates")], value=True)
    q = Predicate("mortal", [Variable("X")])          # value UNKNOWN
    And(p, q).value    ->  Truth.UNKNOWN
    Or(p, q).value     ->  Truth.TRUE

Unknown operands propagate with strong-Kleene rules: a definite FALSE
decides an And, a definite TRUE decides an Or, anything else that
touches UNKNOWN stays UNKNOWN.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .errors import InvalidArgument
from .expression import Expression, Unifiable
from .symbols import Symbol, as_symbol
from .terms import Term, collect_variables


class Truth(Enum):
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"

    @classmethod
    def of(cls, value) -> "Truth":
        """Accept a Truth, a bool, or None (unknown)."""
        if isinstance(value, Truth):
            return value
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, bool):
            return cls.TRUE if value else cls.FALSE
        raise InvalidArgument(f"not a truth value: {value!r}")

    def negate(self) -> "Truth":
        if self is Truth.UNKNOWN:
            return self
        return Truth.FALSE if self is Truth.TRUE else Truth.TRUE

    def conjoin(self, other: "Truth") -> "Truth":
        if self is Truth.FALSE or other is Truth.FALSE:
            return Truth.FALSE
        if self is Truth.UNKNOWN or other is Truth.UNKNOWN:
            return Truth.UNKNOWN
        return Truth.TRUE

    def disjoin(self, other: "Truth") -> "Truth":
        return self.negate().conjoin(other.negate()).negate()


class Formula(Expression):
    """Base class for Predicate and the operators."""

    symbol: Symbol
    value: Truth

    @property
    def name(self) -> str:
        return self.symbol.name

    @property
    def is_atomic(self) -> bool:
        return False

    @property
    def is_literal(self) -> bool:
        """Atomic, or the negation of an atomic formula."""
        return self.is_atomic


@dataclass(frozen=True)
class Predicate(Formula, Unifiable):
    """An atomic formula: a predicate symbol applied to argument terms."""
    symbol: Symbol
    args: tuple = ()
    value: Truth = Truth.UNKNOWN

    def __post_init__(self):
        object.__setattr__(self, "symbol", as_symbol(self.symbol))
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "value", Truth.of(self.value))
        for arg in self.args:
            if not isinstance(arg, Term):
                raise TypeError(f"Predicate argument must be a Term, got {arg!r}")

    @property
    def arity(self) -> int:
        return len(self.args)

    @property
    def is_atomic(self) -> bool:
        return True

    def with_value(self, value) -> "Predicate":
        return Predicate(self.symbol, self.args, value)

    def replace_variables(self, substitution):
        return Predicate(
            self.symbol,
            [arg.replace_variables(substitution) for arg in self.args],
            self.value,
        )

    def standardize_apart(self, rename_map, registry=None):
        return Predicate(
            self.symbol,
            [arg.standardize_apart(rename_map, registry) for arg in self.args],
            self.value,
        )

    def variables(self):
        return collect_variables(self.args)

    def __eq__(self, other):
        return (type(other) is Predicate and
                self.symbol == other.symbol and
                self.value is other.value and
                self.args == other.args)

    def __hash__(self):
        return hash((Predicate, self.symbol, self.value, self.args))

    def __str__(self):
        if not self.args:
            return f"({self.symbol})"
        return f"({self.symbol} {' '.join(str(a) for a in self.args)})"

    def __repr__(self):
        return f"Predicate({self.symbol.name!r}, {self.args!r}, {self.value})"


class Operator(Formula):
    """
    A connective over one or more operand formulas.

    Subclasses set `operator_name` and `arity` (None for n-ary) and
    implement `derive_value`, which runs once in the constructor.
    """

    operator_name = None
    arity = None

    def __init__(self, *operands: Formula):
        if not operands:
            raise InvalidArgument(f"{type(self).__name__} needs at least one operand")
        if self.arity is not None and len(operands) != self.arity:
            raise InvalidArgument(
                f"{type(self).__name__} takes {self.arity} operand(s), got {len(operands)}")
        for operand in operands:
            if not isinstance(operand, Formula):
                raise TypeError(f"operand must be a Formula, got {operand!r}")
        object.__setattr__(self, "symbol", as_symbol(self.operator_name))
        object.__setattr__(self, "operands", tuple(operands))
        object.__setattr__(self, "value", self.derive_value())

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def derive_value(self) -> Truth:
        raise NotImplementedError

    def replace_variables(self, substitution):
        return type(self)(*(op.replace_variables(substitution) for op in self.operands))

    def standardize_apart(self, rename_map, registry=None):
        return type(self)(*(op.standardize_apart(rename_map, registry) for op in self.operands))

    def variables(self):
        return collect_variables(self.operands)

    def __eq__(self, other):
        return (type(other) is type(self) and
                self.symbol == other.symbol and
                self.value is other.value and
                self.operands == other.operands)

    def __hash__(self):
        return hash((type(self), self.symbol, self.value, self.operands))

    def __str__(self):
        return f"({self.symbol} {' '.join(str(op) for op in self.operands)})"

    def __repr__(self):
        return f"{type(self).__name__}{self.operands!r}"


class NaryOperator(Operator):

    def operator_tail(self) -> "NaryOperator":
        """The same operator over every operand but the first."""
        if len(self.operands) == 1:
            raise InvalidArgument(f"{type(self).__name__} with one operand has no tail")
        return type(self)(*self.operands[1:])


class And(NaryOperator):
    operator_name = "and"

    def derive_value(self):
        value = Truth.TRUE
        for operand in self.operands:
            value = value.conjoin(operand.value)
            if value is Truth.FALSE:
                break
        return value


class Or(NaryOperator):
    operator_name = "or"

    def derive_value(self):
        value = Truth.FALSE
        for operand in self.operands:
            value = value.disjoin(operand.value)
            if value is Truth.TRUE:
                break
        return value


class Not(Operator):
    operator_name = "not"
    arity = 1

    @property
    def operand(self) -> Formula:
        return self.operands[0]

    @property
    def is_literal(self) -> bool:
        return self.operand.is_atomic

    def derive_value(self):
        return self.operand.value.negate()


class Implies(Operator):
    operator_name = "implies"
    arity = 2

    @property
    def antecedent(self) -> Formula:
        return self.operands[0]

    @property
    def consequent(self) -> Formula:
        return self.operands[1]

    def derive_value(self):
        return self.antecedent.value.negate().disjoin(self.consequent.value)


class Iff(Operator):
    operator_name = "iff"
    arity = 2

    def derive_value(self):
        left, right = (op.value for op in self.operands)
        if Truth.UNKNOWN in (left, right):
            return Truth.UNKNOWN
        return Truth.TRUE if left is right else Truth.FALSE


def interpret(formula: Formula, valuation: Callable) -> Formula:
    """
    Rebuild formula with every predicate's value taken from valuation.

    valuation(predicate) may return a Truth, a bool, or None (unknown).
    Operator values are re-derived bottom-up.
    """
    if isinstance(formula, Predicate):
        return formula.with_value(valuation(formula))
    return type(formula)(*(interpret(op, valuation) for op in formula.operands))
