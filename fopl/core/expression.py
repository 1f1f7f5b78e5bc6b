"""
Capability contracts shared by terms and formulas.

Expression:  variables can be replaced by a Substitution, or renamed apart.
Unifiable:   an Expression that can also be unified against another one.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Expression(ABC):

    @abstractmethod
    def replace_variables(self, substitution) -> "Expression":
        """
        Return a new expression with every bound variable (at any depth)
        replaced by its binding in substitution. Unbound variables stay.
        """

    @abstractmethod
    def standardize_apart(self, rename_map: dict, registry=None) -> "Expression":
        """
        Return a copy whose variables are renamed to fresh ones.

        rename_map (old Variable -> new Variable) is filled in as the
        traversal goes, so repeated occurrences of a variable get the same
        replacement. Pass the same map to rename several expressions
        consistently, or a new map for an independent renaming. Fresh
        names come from the registry that owns each variable's symbol;
        passing any other registry raises InvalidArgument.
        """

    @abstractmethod
    def variables(self) -> tuple:
        """Variables occurring in this expression, first occurrence order."""

    @property
    def is_ground(self) -> bool:
        return not self.variables()


class Unifiable(Expression):

    def unify(self, other: "Unifiable", substitution=None) -> Optional["Substitution"]:
        """
        Unify self with other under substitution.

        Returns the (possibly extended) Substitution, or None when no
        unifier exists. The substitution passed in is never modified.
        """
        from .unification import unify
        return unify(self, other, substitution)
