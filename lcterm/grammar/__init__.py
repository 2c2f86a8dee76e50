"""Source text to λ-terms: tokenizer (lexical.py) and recursive-descent parser (parser.py)."""
