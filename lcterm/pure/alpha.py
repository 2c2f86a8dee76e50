"""Alpha-equivalence: two terms are alpha-equivalent if they are equal up to consistent renaming of bound variables,
e.g. λx.(x y) and λz.(z y). Free variables are rigid: λx.(x y) and λx.(x w) are different terms.

The check is an alpha conversion: the second term is converted into an alpha variant of the first, one abstraction at
a time, by substituting the first term's parameter for the second term's parameter. If the conversion reaches the
leaves without a mismatch, the two terms are alpha-equivalent.
"""

from lcterm.lang.error import AlphaConvError, StructureError, SubstitutionError, VariablesError
from lcterm.pure.generator import fresh_name
from lcterm.pure.substitution import substitute
from lcterm.pure.term import Abstraction, Application, Variable


def alpha_convert(term, other):
    """Converts other into an alpha variant of term, returning the converted term. Raises VariablesError if
    the free variables of the two terms differ, StructureError if their shapes differ.
    """
    # free variables are never renamed, so a mismatch here is conclusive
    if term.free_vars != other.free_vars:
        raise VariablesError("'{}' and '{}' have different free variables", (term, other))

    if isinstance(term, Variable) and isinstance(other, Variable):
        if term.name != other.name:
            raise VariablesError("free variables '{}' and '{}' do not match", (term, other))
        return term

    if isinstance(term, Abstraction) and isinstance(other, Abstraction):
        parameter, body = term.nodes
        other_parameter, other_body = other.nodes

        try:
            renamed_body = substitute(other_body, other_parameter, parameter)
        except SubstitutionError as error:
            raise AlphaConvError("could not rename '{}' to '{}' in '{}': {}",
                                 (other_parameter, parameter, other, error.msg)) from error

        return Abstraction(parameter, alpha_convert(body, renamed_body))

    if isinstance(term, Application) and isinstance(other, Application):
        function, argument = term.nodes
        other_function, other_argument = other.nodes
        return Application(alpha_convert(function, other_function), alpha_convert(argument, other_argument))

    raise StructureError("different subterms: '{}' and '{}'", (term, other))


def alpha_equivalent(term, other):
    """Whether or not term and other are alpha-equivalent."""
    try:
        alpha_convert(term, other)
    except AlphaConvError:
        return False
    return True


equals = alpha_equivalent


def remap(term, mapping):
    """Renames binders of term according to mapping (old name: new name), together with every occurrence they bind.
    Free variables are left untouched. New names must not already appear in term, or the result may capture.
    """

    def _remap(node, scope):
        if isinstance(node, Variable):
            return Variable(scope[node.name]) if node.name in scope else node

        if isinstance(node, Application):
            function, argument = node.nodes
            return Application(_remap(function, scope), _remap(argument, scope))

        parameter, body = node.nodes
        new_name = mapping.get(parameter.name, parameter.name)
        return Abstraction(Variable(new_name), _remap(body, {**scope, parameter.name: new_name}))

    return _remap(term, {})


def alpha_variant(term):
    """Returns an alpha-equivalent copy of term in which every binder has a name that doesn't appear in term."""
    excluded = term.all_vars
    mapping = {}
    for name in sorted(term.binding_vars):
        mapping[name] = fresh_name(excluded)
        excluded = excluded.with_name(mapping[name])
    return remap(term, mapping)
