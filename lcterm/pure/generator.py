"""Fresh variable names. Names are drawn from a fixed infinite sequence

    a, b, ..., z, aa, ab, ..., az, ba, ..., zz, aaa, ...

and filtered by an exclusion set that the caller always passes explicitly: the generator keeps no record of names it
has already handed out.
"""

from itertools import count, product
from string import ascii_lowercase

from lcterm.pure.term import Variable
from lcterm.pure.varset import VarSet


class NameGenerator:
    """Restartable cursor over the candidate name sequence."""

    def __init__(self):
        self._names = NameGenerator._sequence()

    @staticmethod
    def _sequence():
        for length in count(1):
            for chars in product(ascii_lowercase, repeat=length):
                yield "".join(chars)

    def reset(self):
        """Moves the cursor back to 'a'."""
        self._names = NameGenerator._sequence()

    def __iter__(self):
        return NameGenerator()

    def __next__(self):
        return next(self._names)


def fresh_name(excluded):
    """Returns the first candidate name not in excluded."""
    for name in NameGenerator():
        if name not in excluded:
            return name


def fresh(excluded):
    """Returns a Variable whose name is not in excluded."""
    return Variable(fresh_name(excluded))


def fresh_set(varset):
    """Returns a VarSet of len(varset) distinct names, none of which are in varset."""
    names = []
    candidates = NameGenerator()
    while len(names) < len(varset):
        name = next(candidates)
        if name not in varset:
            names.append(name)
    return VarSet(names)
