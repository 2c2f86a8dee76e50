"""Pure lambda calculus: terms, alpha-equivalence, capture-avoiding substitution and beta reduction. Nothing in here
depends on the grammar or the command-line driver.
"""
