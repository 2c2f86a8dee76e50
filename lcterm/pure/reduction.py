"""Beta reduction of λ-terms to beta-normal form.

Three evaluation orders are supported by a single engine:
- normal: the leftmost outermost redex first, arguments are substituted unevaluated
- applicative: the argument of a redex is reduced to normal form before it is substituted
- lazy: normal order, but every reduction is recorded in a memo. A term (or applied function) that was already reduced
  is replaced by its recorded result, and a reduction that produces a term it already stepped from stops, since it would
  only repeat itself

The untyped lambda calculus has terms without a normal form, e.g. (λx.x x) λx.x x, so reduction might never terminate.
Pass max_steps to bound it.

Source: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from enum import Enum

from lcterm.lang.error import GenericException, StepLimitExceeded
from lcterm.pure.substitution import substitute
from lcterm.pure.term import Abstraction, Application


class Order(Enum):
    """Evaluation order."""
    NORMAL = "normal"
    APPLICATIVE = "applicative"
    LAZY = "lazy"

    @classmethod
    def parse(cls, name):
        """Returns the Order called name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(order.value for order in cls)
            raise GenericException("unknown evaluation order '{}', expected one of {}", (name, choices),
                                   diagnosis=False) from None


class Memo:
    """Previously reduced terms, keyed up to alpha-equivalence. Lives as long as a single Reducer."""

    def __init__(self):
        self._inner = {}

    def contains(self, term):
        return term in self._inner

    def get(self, term):
        """If term was previously reduced, returns the result. Otherwise returns term itself."""
        return self._inner.get(term, term)

    def record(self, key, value):
        self._inner[key] = value

    __contains__ = contains

    def __iter__(self):
        return iter(self._inner)

    def __len__(self):
        return len(self._inner)

    def items(self):
        return self._inner.items()

    def __repr__(self):
        return f"Memo({[term.expr for term in self._inner]})"


class Reducer:
    """Reduces terms under a given evaluation order. Holds the memo and step count of one top-level reduction, so a
    new Reducer should be used for every term.
    """

    def __init__(self, order=Order.NORMAL, max_steps=None, error_handler=None):
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")

        self.order = order
        self.max_steps = max_steps
        self.error_handler = error_handler  # receives reduction steps and warnings, may be None

        self.memo = Memo()
        self.visited = set()  # whole terms already stepped from in lazy order, kept apart from redexes
        self.steps = 0

    @property
    def lazy(self):
        return self.order is Order.LAZY

    def beta_step(self, term):
        """One step of beta reduction. Recursive, so several redexes may be reduced in one step."""
        if not term.is_reducible:
            return term

        if self.lazy:
            term = self.memo.get(term)
            if not term.is_reducible:
                return term

        if isinstance(term, Abstraction):
            parameter, body = term.nodes
            return Abstraction(parameter, self.beta_step(body))

        function, argument = term.nodes
        if self.lazy:
            function = self.memo.get(function)

        if isinstance(function, Abstraction):
            return self.reduce_redex(term, function, argument)
        return Application(self.beta_step(function), self.beta_step(argument))

    def reduce_redex(self, redex, function, argument):
        """Reduces redex, i.e. the application of abstraction function to argument."""
        parameter, body = function.nodes
        if self.order is Order.APPLICATIVE:
            argument = self.beta_reduce(argument)

        result = substitute(body, parameter, argument)
        if self.lazy:
            self.memo.record(redex, result)
        return result

    def beta_reduce(self, term):
        """Reduces term until it is in beta-normal form or, in lazy order, until a reduction repeats itself. Raises
        StepLimitExceeded if max_steps is exceeded.
        """
        while term.is_reducible:
            if self.max_steps is not None and self.steps >= self.max_steps:
                raise StepLimitExceeded(term, self.steps)

            reduced = self.beta_step(term)
            self.steps += 1
            if self.error_handler is not None:
                self.error_handler.register_step("β", reduced)

            if self.lazy and reduced.is_reducible:
                self.visited.add(term)
                if reduced in self.visited:
                    if self.error_handler is not None:
                        self.error_handler.warn("'{}' does not have a beta-normal form", str(term), diagnosis=False)
                    return reduced
                self.memo.record(term, reduced)

            term = reduced
        return term


def reduce(term, order=Order.NORMAL, max_steps=None, error_handler=None):
    """Reduces term to beta-normal form under order (an Order or its name)."""
    if isinstance(order, str):
        order = Order.parse(order)
    return Reducer(order, max_steps, error_handler).beta_reduce(term)
