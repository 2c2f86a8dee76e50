"""Session control for lcterm. Reads statements from a file or from the command line, parses them, and beta-reduces
them on run.

Statement grammar:

```
<named_term> ::= <var> ":=" <λ-term>   ; only reduced if used later on
<exec_stmt>  ::= <λ-term>              ; will be outputted when the session is run
<comment>    ::= ";;" <char>*
```

Named terms are substituted (capture-avoidingly) for free occurrences of their name in later statements. A line with
more '(' than ')' continues on the next line.
"""

from lcterm.grammar.lexical import EOF, VAR, tokenize
from lcterm.grammar.parser import evaluate
from lcterm.lang.error import GenericException, ParsingError
from lcterm.pure.reduction import Order, reduce
from lcterm.pure.substitution import substitute


class Session:
    """Governs a lcterm session, with control over scope of named terms."""
    SH_FILE = "<in>"  # command-line interpreter filename
    DECLARE = ":="
    COMMENT = ";;"

    def __init__(self, error_handler, path, order=Order.NORMAL, max_steps=None, cmd_line=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.order = order          # evaluation order used by run
        self.max_steps = max_steps  # step budget for each reduction, None for unbounded
        self.cmd_line = cmd_line    # whether or not in command-line mode

        self.namespace = {}  # dict of name: term for named terms in the current session
        self.to_exec = {}    # dict of line num: (expr, term) to reduce on run
        self.results = []    # reduced terms, in order of execution

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r", encoding="utf-8") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for expr, line_num in exprs:
                self.add(expr, line_num)

        elif not cmd_line:
            raise GenericException("'{}' is a reserved filename", Session.SH_FILE, diagnosis=False)

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of file's exprs as [expr, line_num of first line]), but add_to_prev will indicate whether a line
        continuation is necessary. Returns updated value of line and add_to_prev. Must be called before calling run.
        """
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]  # get rid of comments

        line = line.rstrip()
        if exprs is not None:
            if add_to_prev and exprs:
                exprs[-1][0] += " " + line.strip()
                line = exprs[-1][0]
            elif line and not line.isspace():
                exprs.append([line, line_num])

        return line, line.count("(") > line.count(")")

    def add(self, expr, line_num):
        """Parses expr and adds it to the current session. Beta reduction is delayed until run is called."""
        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised

        if not expr.strip():
            raise ValueError("expr cannot be empty")

        if Session.DECLARE in expr:
            name, body = expr.split(Session.DECLARE, 1)
            name = self.check_name(name, expr)
            self.namespace[name] = self.expand(evaluate(body))
        else:
            self.to_exec[line_num] = (expr, evaluate(expr))

        self.error_handler.remove_line(self.path)  # error was not raised

    @staticmethod
    def check_name(name, expr):
        """Returns name stripped, raises ParsingError if it isn't a single variable."""
        tokens = tokenize(name)
        if len(tokens) != 2 or tokens[0].type != VAR or tokens[1].type != EOF:
            start = len(name) - len(name.lstrip())
            raise ParsingError("'{}' names a term with an invalid name", expr, start=start, end=len(name.rstrip()))
        return tokens[0].value

    def expand(self, term):
        """Substitutes named terms for their free occurrences in term. Named terms are expanded when they are added,
        so a single pass suffices.
        """
        for name, named_term in self.namespace.items():
            if name in term.free_vars:
                term = substitute(term, name, named_term)
        return term

    def run(self):
        """Runs this session's executable statements by expanding them and then beta-reducing them. Will raise any
        errors that are encountered.
        """
        for line_num, (expr, term) in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, expr, line_num)

            self.error_handler.clear_steps()
            try:
                result = reduce(self.expand(term), self.order, self.max_steps, self.error_handler)
                self.results.append(result)
            finally:
                del self.to_exec[line_num]

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Removes and returns the latest result."""
        return self.results.pop()
