"""Capture-avoiding substitution M[x := N]: every free occurrence of x in M is replaced with N.

A binder λy inside M *captures* N if y is free in N: naively substituting into λy.(x y) with x := y would give
λy.(y y), binding a variable that was free. Before descending into such an abstraction, its parameter is renamed to a
name that appears nowhere in the abstraction body or in N, so λy.(x y)[x := y] = λa.(y a).
"""

from lcterm.lang.error import BindingConflict, ConstructionError, NotAVariable
from lcterm.pure.generator import fresh
from lcterm.pure.term import Abstraction, Application, LambdaTerm, Variable


def _name(var):
    """Returns the name of var, a Variable or a str."""
    if isinstance(var, Variable):
        return var.name
    if isinstance(var, str) and var:
        return var
    raise NotAVariable("can only substitute/rename variables, not '{}'", str(var))


def substitute(term, target, replacement):
    """Returns term with every free occurrence of target replaced with replacement. If target doesn't occur free in
    term, term itself is returned.
    """
    name = _name(target)
    if not isinstance(replacement, LambdaTerm):
        raise ConstructionError("can only substitute λ-terms, not '{}'", repr(replacement), diagnosis=False)

    if name not in term.free_vars:
        return term

    # binders in term that could capture a free variable of replacement. If there are none, no renaming can be needed
    capturing = term.binding_vars & replacement.free_vars
    return _substitute(term, name, replacement, capturing)


def _substitute(term, name, replacement, capturing):
    if name not in term.free_vars:
        return term

    if isinstance(term, Variable):
        return replacement  # name is free in term, so term is the variable itself

    if isinstance(term, Application):
        function, argument = term.nodes
        return Application(_substitute(function, name, replacement, capturing),
                           _substitute(argument, name, replacement, capturing))

    parameter, body = term.nodes
    if parameter.name in capturing:
        new_parameter = fresh(body.all_vars | parameter.name | replacement.free_vars)
        body = rename(body, parameter, new_parameter)
        parameter = new_parameter

    return Abstraction(parameter, _substitute(body, name, replacement, capturing))


def rename(term, old, new):
    """Renames every free occurrence of old in term to new. Raises BindingConflict if new would be captured, i.e. if
    an abstraction binding new encloses a free occurrence of old.
    """
    old, new = _name(old), _name(new)
    if old == new or old not in term.free_vars:
        return term

    if isinstance(term, Variable):
        return Variable(new)

    if isinstance(term, Application):
        function, argument = term.nodes
        return Application(rename(function, old, new), rename(argument, old, new))

    parameter, body = term.nodes
    if parameter.name == new:
        raise BindingConflict("renaming '{}' to '{}' in '{}' captures it", (old, new, term), diagnosis=False)
    return Abstraction(parameter, rename(body, old, new))
