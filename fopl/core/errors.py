"""
Error taxonomy for the term/formula algebra.

All of these are local, recoverable failures raised to the immediate
caller. Nothing here is fatal.
"""


class FoplError(Exception):
    """Base class for every error raised by fopl."""


class InvalidArgument(FoplError, ValueError):
    """A symbol name, operand list or binding was malformed."""


class Unsupported(FoplError, TypeError):
    """The operation is not allowed on this object (e.g. cloning a Symbol)."""


class AlreadyBound(FoplError):
    """A Substitution already holds a binding for this variable."""

    def __init__(self, variable, binding):
        super().__init__(f"{variable} is already bound to {binding}")
        self.variable = variable
        self.binding = binding


class UnboundVariable(FoplError, LookupError):
    """A binding was requested for a variable the Substitution does not bind."""

    def __init__(self, variable):
        super().__init__(f"{variable} is not bound")
        self.variable = variable


class UnificationFailure(FoplError):
    """No unifier exists for the two expressions."""

    def __init__(self, left, right):
        super().__init__(f"cannot unify {left} with {right}")
        self.left = left
        self.right = right
