"""Pure lambda calculus terms.

Formally, pure lambda calculus can be defined as

```
<λ-term> ::= <name>                     ; "variable"
           | "λ" <variable> "." <λ-term> ; "abstraction"
           | <λ-term> <λ-term>          ; "application"
```

Terms are immutable. Free variables, binding variables and reducibility are derived once, when a term is constructed,
so the constructors below are the only way to produce a term and the derived attributes can never drift from the term
they describe. Every transformation (renaming, substitution, reduction) builds new terms, sharing unchanged subterms.

Equality between terms is alpha-equivalence (see alpha.py), not structural identity: λx.x == λy.y.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property

from lcterm.lang.error import ConstructionError
from lcterm.pure.varset import VarSet


class LambdaTerm(ABC):
    """Represents a valid λ-term: variable, abstraction, or application."""
    free_vars: VarSet
    binding_vars: VarSet
    is_reducible: bool

    @property
    @abstractmethod
    def nodes(self):
        """Children of this term, left to right."""

    @property
    @abstractmethod
    def tokenizable(self):
        """Whether or not this term has children (i.e. needs parentheses when used as an operand)."""

    @property
    @abstractmethod
    def _shape(self):
        """Hash of this term's structure with every variable name erased. Alpha-equivalent terms share it."""

    @property
    @abstractmethod
    def expr(self):
        """Canonical string representation, parseable by lcterm.grammar."""

    @property
    def all_vars(self):
        """Every name that appears in this term, free or binding."""
        return self.free_vars | self.binding_vars

    @property
    def bound_vars(self):
        """Names that are free in this term and also used as a binder somewhere inside it."""
        return self.free_vars & self.binding_vars

    def display(self, indents=0):
        """Recursively displays term tree with readable format.

        Format:
        <LambdaTerm>(expr='<expr>', nodes=[
            <LambdaTerm>(expr='<expr>', nodes=[
                ...
                <LambdaTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __call__(self, argument):
        return Application(self, argument)

    def __eq__(self, other):
        if not isinstance(other, LambdaTerm):
            return NotImplemented
        if self is other:
            return True
        if hash(self) != hash(other):
            return False

        from lcterm.pure.alpha import alpha_equivalent
        return alpha_equivalent(self, other)

    def __hash__(self):
        return self._hash

    def __lt__(self, other):
        if not isinstance(other, LambdaTerm):
            return NotImplemented
        return self != other and self.expr < other.expr

    def __le__(self, other):
        if not isinstance(other, LambdaTerm):
            return NotImplemented
        return self == other or self.expr < other.expr

    def __gt__(self, other):
        if not isinstance(other, LambdaTerm):
            return NotImplemented
        return other < self

    def __ge__(self, other):
        if not isinstance(other, LambdaTerm):
            return NotImplemented
        return other <= self

    def __str__(self):
        return self.expr


def _check_term(term, role):
    if not isinstance(term, LambdaTerm):
        raise ConstructionError("{} must be a λ-term, got '{}'", (role, repr(term)), diagnosis=False)


@dataclass(frozen=True, eq=False)
class Variable(LambdaTerm):
    """Variable in lambda calculus: a name that may be bound by an enclosing abstraction."""
    name: str
    free_vars: VarSet = field(init=False, repr=False)
    binding_vars: VarSet = field(init=False, repr=False)
    is_reducible: bool = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ConstructionError("variable name must be a non-empty string, got '{}'", repr(self.name),
                                    diagnosis=False)

        object.__setattr__(self, "free_vars", VarSet.from_name(self.name))
        object.__setattr__(self, "binding_vars", VarSet())
        object.__setattr__(self, "is_reducible", False)
        object.__setattr__(self, "_hash", hash((self._shape, self.free_vars)))

    @property
    def nodes(self):
        return ()

    @property
    def tokenizable(self):
        return False

    @property
    def _shape(self):
        return hash(("var",))

    @cached_property
    def expr(self):
        return self.name


@dataclass(frozen=True, eq=False)
class Abstraction(LambdaTerm):
    """Abstraction: λparameter.body. parameter must be a Variable."""
    parameter: Variable
    body: LambdaTerm
    free_vars: VarSet = field(init=False, repr=False)
    binding_vars: VarSet = field(init=False, repr=False)
    is_reducible: bool = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.parameter, Variable):
            raise ConstructionError("abstraction parameter must be a variable, got '{}'", str(self.parameter),
                                    diagnosis=False)
        _check_term(self.body, "abstraction body")

        object.__setattr__(self, "free_vars", self.body.free_vars - self.parameter.name)
        object.__setattr__(self, "binding_vars", self.body.binding_vars.with_name(self.parameter.name))
        object.__setattr__(self, "is_reducible", self.body.is_reducible)
        object.__setattr__(self, "_shape_hash", hash(("abs", self.body._shape)))
        object.__setattr__(self, "_hash", hash((self._shape, self.free_vars)))

    @property
    def nodes(self):
        return self.parameter, self.body

    @property
    def tokenizable(self):
        return True

    @property
    def _shape(self):
        return self._shape_hash

    @cached_property
    def expr(self):
        if isinstance(self.body, Application):
            return f"λ{self.parameter.expr}.({self.body.expr})"
        return f"λ{self.parameter.expr}.{self.body.expr}"


@dataclass(frozen=True, eq=False)
class Application(LambdaTerm):
    """Application of function to argument."""
    function: LambdaTerm
    argument: LambdaTerm
    free_vars: VarSet = field(init=False, repr=False)
    binding_vars: VarSet = field(init=False, repr=False)
    is_reducible: bool = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        _check_term(self.function, "applied function")
        _check_term(self.argument, "function argument")

        reducible = (isinstance(self.function, Abstraction)
                     or self.function.is_reducible or self.argument.is_reducible)

        object.__setattr__(self, "free_vars", self.function.free_vars | self.argument.free_vars)
        object.__setattr__(self, "binding_vars", self.function.binding_vars | self.argument.binding_vars)
        object.__setattr__(self, "is_reducible", reducible)
        object.__setattr__(self, "_shape_hash", hash(("app", self.function._shape, self.argument._shape)))
        object.__setattr__(self, "_hash", hash((self._shape, self.free_vars)))

    @property
    def nodes(self):
        return self.function, self.argument

    @property
    def tokenizable(self):
        return True

    @property
    def _shape(self):
        return self._shape_hash

    @property
    def is_redex(self):
        """Whether or not this application is a redex: (λx.M) N."""
        return isinstance(self.function, Abstraction)

    @cached_property
    def expr(self):
        return " ".join(f"({node.expr})" if node.tokenizable else node.expr for node in self.nodes)


def variable(name):
    """Builds Variable(name)."""
    return Variable(name)


def abstraction(parameter, body):
    """Builds λparameter.body. parameter may also be given as a name."""
    if isinstance(parameter, str):
        parameter = Variable(parameter)
    return Abstraction(parameter, body)


def application(function, argument):
    """Builds (function argument)."""
    return Application(function, argument)
