"""Immutable sets of variable names, used to keep track of free and binding variables of λ-terms.

Set algebra is mapped onto the usual operators:

```
a | b   union
a & b   intersection
a - b   difference            ; order-sensitive: a - b != b - a
a ^ b   symmetric difference  ; commutative
```
"""


class VarSet:
    """Set of variable names (str). Never mutated: every operation returns a new VarSet."""
    __slots__ = ("_inner",)

    def __init__(self, names=()):
        object.__setattr__(self, "_inner", frozenset(names))

    @classmethod
    def of(cls, *names):
        return cls(names)

    @classmethod
    def from_name(cls, name):
        """Singleton set containing name."""
        return cls((name,))

    @staticmethod
    def _names(other):
        """Accepts a VarSet, a single name, or any iterable of names."""
        if isinstance(other, VarSet):
            return other._inner
        if isinstance(other, str):
            return frozenset((other,))
        return frozenset(other)

    def union(self, other):
        return VarSet(self._inner | VarSet._names(other))

    def intersection(self, other):
        return VarSet(self._inner & VarSet._names(other))

    def difference(self, other):
        return VarSet(self._inner - VarSet._names(other))

    def symmetric_difference(self, other):
        return VarSet(self._inner ^ VarSet._names(other))

    def with_name(self, name):
        return self.union(name)

    def without_name(self, name):
        return self.difference(name)

    def contains(self, name):
        return name in self._inner

    def is_empty(self):
        return not self._inner

    __or__ = union
    __and__ = intersection
    __sub__ = difference
    __xor__ = symmetric_difference
    __contains__ = contains

    def __iter__(self):
        return iter(self._inner)

    def __len__(self):
        return len(self._inner)

    def __bool__(self):
        return bool(self._inner)

    def __eq__(self, other):
        if isinstance(other, VarSet):
            return self._inner == other._inner
        if isinstance(other, (set, frozenset)):
            return self._inner == other
        return NotImplemented

    def __hash__(self):
        return hash(self._inner)

    def __setattr__(self, name, value):
        raise AttributeError("VarSet is immutable")

    def __repr__(self):
        return f"VarSet({sorted(self._inner)})"
