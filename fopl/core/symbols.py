"""
Symbols and the registry that interns them.

A Symbol follows the Herbrand interpretation: it is a name that denotes
itself. Within a registry there is exactly one Symbol per name, so two
symbols from the same registry are equal iff they are the same object.

The registry also mints fresh symbols (prefix + counter) for renaming
variables apart. Every access goes through one lock, so two threads can
never be handed the same fresh name.
"""

import logging
import threading

from .errors import InvalidArgument, Unsupported

logger = logging.getLogger(__name__)


class Symbol:
    """
    An interned, immutable name.

    Symbol(name) and Symbol(name, registry) return the registry's unique
    instance for name (default: the process-wide registry), so
    Symbol("a") is Symbol("a").
    """

    __slots__ = ("_name", "_registry")

    def __new__(cls, name: str, registry: "SymbolRegistry" = None):
        return (registry if registry is not None else _default_registry).get(name)

    @classmethod
    def _create(cls, name, registry):
        symbol = object.__new__(cls)
        object.__setattr__(symbol, "_name", name)
        object.__setattr__(symbol, "_registry", registry)
        return symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def registry(self) -> "SymbolRegistry":
        """The registry that interned this symbol."""
        return self._registry

    @classmethod
    def get(cls, name: str) -> "Symbol":
        """Shorthand for default_registry().get(name)."""
        return _default_registry.get(name)

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __copy__(self):
        raise Unsupported("Symbol cannot be cloned")

    def __deepcopy__(self, memo):
        raise Unsupported("Symbol cannot be cloned")

    def __reduce__(self):
        return (_intern, (self._name,))

    def __eq__(self, other):
        if self is other:
            return True
        return isinstance(other, Symbol) and self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"Symbol({self._name!r})"


class SymbolRegistry:
    """
    Name -> Symbol interning table plus a fresh-name counter.

    Tests build their own registries to stay isolated; library code that
    is not handed one uses default_registry().
    """

    def __init__(self):
        self._symbols = {}
        self._counter = 0
        self._lock = threading.Lock()

    def get(self, name: str) -> Symbol:
        """Return the unique Symbol for name, creating it on first use."""
        if not isinstance(name, str) or not name:
            raise InvalidArgument("Attempted to get a Symbol without a name")
        with self._lock:
            return self._intern(name)

    def generate(self, prefix: str = "G") -> Symbol:
        """
        Mint a Symbol named prefix + counter that no one has used yet.

        The counter is shared by every prefix and only moves forward, so
        rejected counter values are never probed again.
        """
        if not isinstance(prefix, str):
            raise InvalidArgument(f"Symbol prefix must be a string, got {prefix!r}")
        with self._lock:
            name = f"{prefix}{self._counter}"
            while name in self._symbols:
                self._counter += 1
                name = f"{prefix}{self._counter}"
            self._counter += 1
            symbol = self._intern(name)
        logger.debug("generated fresh symbol %s", name)
        return symbol

    def _intern(self, name):
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = Symbol._create(name, self)
            self._symbols[name] = symbol
        return symbol

    def __contains__(self, name):
        with self._lock:
            return name in self._symbols

    def __len__(self):
        with self._lock:
            return len(self._symbols)

    def __repr__(self):
        return f"SymbolRegistry({len(self)} symbols)"


_default_registry = SymbolRegistry()


def default_registry() -> SymbolRegistry:
    """The process-wide registry used when no registry is passed in."""
    return _default_registry


def _intern(name):
    return _default_registry.get(name)


def as_symbol(name_or_symbol, registry: SymbolRegistry = None) -> Symbol:
    """Accept a Symbol as-is, or intern a name in registry (default: process-wide)."""
    if isinstance(name_or_symbol, Symbol):
        return name_or_symbol
    return (registry if registry is not None else _default_registry).get(name_or_symbol)
