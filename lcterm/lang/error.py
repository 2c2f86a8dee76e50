"""Error handling for lcterm. Every error raised by the core or the front ends is a GenericException: if another type
of error makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Error taxonomy:
- ConstructionError: a term constructor received something that isn't a valid child/name
- AlphaConvError (StructureError, VariablesError): two terms are not alpha-equivalent. Never fatal, used as "not equal"
- SubstitutionError (NotAVariable, BindingConflict): substitution misuse or an unresolvable capture
- EvalError (TokenizationError, ParsingError): malformed source text
- StepLimitExceeded: reduction ran past its step budget
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a lcterm error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class ConstructionError(GenericException):
    """A term was built from something other than valid names/terms."""


class AlphaConvError(GenericException):
    """Two terms could not be converted into alpha variants of each other."""

    def __init__(self, msg, exprs=None, **kwargs):
        super().__init__(msg, exprs, diagnosis=False, **kwargs)


class StructureError(AlphaConvError):
    """Terms have different shapes (e.g. variable against application)."""


class VariablesError(AlphaConvError):
    """Terms have different free variables, or differing identifiers at a leaf."""


class SubstitutionError(GenericException):
    """Substitution could not be performed."""


class NotAVariable(SubstitutionError):
    """Substitution/renaming target is not a variable. Only raised on misuse of the core API."""

    def __init__(self, msg, exprs=None):
        super().__init__(msg, exprs, diagnosis=False, internal=True)


class BindingConflict(SubstitutionError):
    """Renaming would let a free variable be captured by an abstraction."""


class EvalError(GenericException):
    """Source text could not be turned into a term."""


class TokenizationError(EvalError):
    """Source text contains a character that is not part of any token."""


class ParsingError(EvalError):
    """Tokens do not form a valid λ-term."""


class StepLimitExceeded(GenericException):
    """Reduction did not reach a normal form within the allowed number of steps."""

    def __init__(self, term, steps):
        super().__init__("'{}' not reduced to beta-normal form within {} steps", (term, steps), diagnosis=False)
        self.term = term
        self.steps = steps


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom lcterm errors/warnings. Also
    collects reduction steps (see register_step) so that they can be traced.
    """
    ERROR = "red"
    WARNING = "magenta"
    TRACE = "cyan"

    def __init__(self, fatal=True, verbose=False):
        self.fatal = fatal
        self.verbose = verbose  # print reduction steps as they are registered
        self.traceback = {}
        self.steps = []

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    def register_step(self, kind, expr):
        """Records a single reduction step. kind is a one-character tag, e.g. 'β'."""
        self.steps.append((kind, str(expr)))
        if self.verbose:
            print(colored(f"{kind} ", ErrorHandler.TRACE, attrs=["bold"]) + str(expr))

    def clear_steps(self):
        """Forgets recorded steps, returning them."""
        steps, self.steps = self.steps, []
        return steps

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def _location(self, error):
        """Returns 'file:line:col: ' for the innermost registered line, or '' if no line is registered."""
        for file, (line, line_num) in reversed(list(self.traceback.items())):
            if line:
                col = line.find(error.expr)
                col = error.start if col == -1 else col + error.start
                return f"{file}:{line_num}:{col}: "
        return ""

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = colored(self._location(error), attrs=["bold"])
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg

        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # dicts are insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                lines += 1

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # keep registered files, drop lines

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is None:
            return False
        elif issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt"))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(GenericException("beta normal form might exist, but maximum recursion depth exceeded"))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
