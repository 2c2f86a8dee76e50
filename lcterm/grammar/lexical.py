"""Tokenizer for λ-term source text.

```
LAMBDA ::= "λ" | "\" | "$"
ARROW  ::= "." | "->"
COMMA  ::= ","
LPAREN ::= "("
RPAREN ::= ")"
VAR    ::= [A-Za-z_][A-Za-z0-9_]*
```

Variables are as long as possible, so `λxy.x` binds a single variable `xy`: application must be separated by spaces or
parentheses (`x y`, `x(y)`). Whitespace is skipped; anything else is a TokenizationError.
"""

import re
from collections import namedtuple

from lcterm.lang.error import TokenizationError

LAMBDA, ARROW, COMMA, LPAREN, RPAREN, VAR, EOF = "LAMBDA", "ARROW", "COMMA", "LPAREN", "RPAREN", "VAR", "EOF"

Token = namedtuple("Token", ["type", "value", "pos"])

TOKEN_SPEC = [
    (LAMBDA, r"λ|\\|\$"),
    (ARROW, r"->|\."),
    (COMMA, r","),
    (LPAREN, r"\("),
    (RPAREN, r"\)"),
    (VAR, r"[A-Za-z_][A-Za-z0-9_]*"),
    ("SKIP", r"\s+"),
    ("MISMATCH", r"."),
]
TOKEN_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in TOKEN_SPEC))


def tokenize(source):
    """Returns list of Tokens in source, terminated by an EOF token."""
    tokens = []
    for match in TOKEN_RE.finditer(source):
        kind = match.lastgroup
        if kind == "SKIP":
            continue
        elif kind == "MISMATCH":
            pos = match.start()
            raise TokenizationError("'{}' contains unexpected character '{}'", (source, match.group()),
                                    start=pos, end=pos + 1)
        tokens.append(Token(kind, match.group(), match.start()))

    tokens.append(Token(EOF, None, len(source)))
    return tokens
