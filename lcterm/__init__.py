"""Lambda calculus term rewriting.

For reference:
- "Pure lambda calculus": lambda calculus as defined by Church: variables, abstractions and applications only
- lcterm.pure: the term model and everything that manipulates terms (alpha-equivalence, substitution, reduction)
- lcterm.grammar: tokenizer and parser from source text to terms
- lcterm.lang: error handling and the command-line driver

Basic program flow:
    1. Parser: tokenizes source text and builds a term with the constructors in lcterm.pure.term
    2. Reduction: beta-reduces the term under an evaluation order (normal, applicative or lazy), renaming bound
       variables whenever a substitution would capture a free one
    3. Output: terms print as parseable source text; two terms are equal iff they are alpha-equivalent
"""

from lcterm.grammar.parser import evaluate
from lcterm.pure.alpha import alpha_convert, alpha_equivalent, alpha_variant, equals
from lcterm.pure.generator import fresh
from lcterm.pure.reduction import Order, Reducer, reduce
from lcterm.pure.substitution import substitute
from lcterm.pure.term import Abstraction, Application, LambdaTerm, Variable, abstraction, application, variable
from lcterm.pure.varset import VarSet

__all__ = [
    "Abstraction", "Application", "LambdaTerm", "Order", "Reducer", "VarSet", "Variable", "abstraction",
    "alpha_convert", "alpha_equivalent", "alpha_variant", "application", "equals", "evaluate", "fresh", "reduce",
    "substitute", "variable",
]
