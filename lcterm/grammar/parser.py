"""Recursive-descent parser producing λ-terms from tokens.

```
<term>   ::= <lambda> | <app>
<lambda> ::= LAMBDA <params> ARROW <term>   ; abstraction bodies are greedy: λx.x y = λx.(x y) != (λx.x) (y)
<params> ::= VAR ("," VAR)*                 ; λx, y.M is sugar for λx.λy.M
<app>    ::= <atom>+                        ; associating by left: a b c d = (((a b) c) d)
<atom>   ::= VAR | "(" <term> ")" | <lambda>
```
"""

from lcterm.grammar.lexical import ARROW, COMMA, EOF, LAMBDA, LPAREN, RPAREN, VAR, tokenize
from lcterm.lang.error import ParsingError
from lcterm.pure.term import Abstraction, Application, Variable

_DESCRIPTIONS = {
    LAMBDA: "λ", ARROW: "'.' or '->'", COMMA: "','", LPAREN: "'('", RPAREN: "')'", VAR: "variable", EOF: "end of input"
}


class Parser:
    """Parses a single λ-term from source. Tokens are produced by tokenize if not given."""

    def __init__(self, source, tokens=None):
        self.source = source
        self.tokens = tokenize(source) if tokens is None else tokens
        self.idx = 0

    def peek(self):
        return self.tokens[self.idx]

    def advance(self):
        token = self.tokens[self.idx]
        if token.type != EOF:
            self.idx += 1
        return token

    def error(self, msg, token):
        end = token.pos + (len(token.value) if token.value else 1)
        return ParsingError(msg, self.source, start=token.pos, end=end)

    def expect(self, kind):
        token = self.peek()
        if token.type != kind:
            found = repr(token.value) if token.value else _DESCRIPTIONS[token.type]
            raise self.error(f"'{{}}' expected {_DESCRIPTIONS[kind]}, found {found}", token)
        return self.advance()

    def parse(self):
        """Parses the whole input. Raises ParsingError if the input isn't a single valid λ-term."""
        if self.peek().type == EOF:
            raise self.error("λ-term cannot be empty", self.peek())

        term = self.term()

        token = self.peek()
        if token.type == RPAREN:
            raise self.error("'{}' has mismatched parentheses", token)
        elif token.type != EOF:
            raise self.error("'{}' has unexpected token", token)
        return term

    def term(self):
        if self.peek().type == LAMBDA:
            return self.abstraction()
        return self.application()

    def abstraction(self):
        self.expect(LAMBDA)
        params = [Variable(self.expect(VAR).value)]
        while self.peek().type == COMMA:
            self.advance()
            params.append(Variable(self.expect(VAR).value))
        self.expect(ARROW)

        term = self.term()
        for param in reversed(params):
            term = Abstraction(param, term)
        return term

    def application(self):
        term = self.atom()
        while self.peek().type in (VAR, LPAREN, LAMBDA):
            term = Application(term, self.atom())
        return term

    def atom(self):
        token = self.peek()
        if token.type == VAR:
            self.advance()
            return Variable(token.value)

        elif token.type == LPAREN:
            self.advance()
            if self.peek().type == RPAREN:
                raise self.error("'{}' contains empty parentheses", self.peek())
            term = self.term()
            if self.peek().type != RPAREN:
                raise self.error("'{}' has mismatched parentheses", token)
            self.advance()
            return term

        elif token.type == LAMBDA:
            return self.abstraction()

        elif token.type == RPAREN:
            raise self.error("'{}' has mismatched parentheses", token)
        elif token.type == EOF:
            raise self.error("'{}' ends unexpectedly", token)
        raise self.error(f"'{{}}' has unexpected {_DESCRIPTIONS[token.type]}", token)


def parse(tokens, source=""):
    """Parses tokens (as produced by tokenize) into a λ-term. source is only used in error messages."""
    return Parser(source, tokens).parse()


def evaluate(source):
    """Tokenizes and parses source into a λ-term. Raises TokenizationError or ParsingError (both EvalErrors)."""
    return parse(tokenize(source), source)
