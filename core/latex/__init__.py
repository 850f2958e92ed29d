"""
LaTeX output for the math engine.

Turns the engine's plain-text results into LaTeX fragments for display.

Example usage:
    >>> from core.latex import to_latex, wrap_math
    >>> wrap_math(to_latex("x = 3/4"), "inline")
    '$x = \\\\frac{3}{4}$'

    >>> from core.latex import format_expressions, get_formatter_statistics
    >>> results = format_expressions(["2 * x", "0", "(a ^ 1/2)"])
    >>> get_formatter_statistics(results)['changed']
    2
"""

from core.latex.expression_formatter import (
    FormatResult,
    STAGES,
    are_parentheses_balanced,
    strip_outer_parentheses,
    fold_square_roots,
    fold_fractions,
    elide_multiplication,
    clean_redundant_parentheses,
    format_expression_detailed,
    format_expressions,
    to_latex,
    wrap_math,
    get_formatter_statistics,
)

__all__ = [
    'FormatResult',
    'STAGES',
    'are_parentheses_balanced',
    'strip_outer_parentheses',
    'fold_square_roots',
    'fold_fractions',
    'elide_multiplication',
    'clean_redundant_parentheses',
    'format_expression_detailed',
    'format_expressions',
    'to_latex',
    'wrap_math',
    'get_formatter_statistics',
]
