r"""
Expression Formatter - engine text to LaTeX

Turns the plain-text output of the math engine (``(x + 1) ^ 1/2``,
``x = 3/4``, ``2 * x``) into a LaTeX fragment ready for a renderer.

The conversion is a fixed pipeline of regex rewrites. Each stage works on
the previous stage's output, a stage without a match is a no-op, and there
is no backtracking between stages:

1. strip_outer_parentheses      (x + 1)          -> x + 1
2. fold_square_roots            (x ^ 1/2)        -> \sqrt{x}
3. fold_fractions               a/b, 12/34       -> \frac{a}{b}
4. elide_multiplication         2 * x            -> 2x
5. clean_redundant_parentheses  \sqrt{(x + 1)}   -> \sqrt{x + 1}

Usage:
    >>> from core.latex.expression_formatter import to_latex
    >>> to_latex("((x + 1) ^ 1/2) + 2 * y")
    '\\sqrt{x + 1} + 2y'
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import regex

from config.constants import (
    SENTINEL_VALUES,
    WRAP_NONE, WRAP_INLINE, WRAP_MODES,
)

logger = logging.getLogger(__name__)


# Stage names, in pipeline order
STAGE_OUTER_PARENS = "outer_parens"
STAGE_SQRT = "sqrt"
STAGE_FRACTION = "fraction"
STAGE_MULTIPLY = "multiply"
STAGE_CLEANUP = "cleanup"

STAGES = [STAGE_OUTER_PARENS, STAGE_SQRT, STAGE_FRACTION, STAGE_MULTIPLY, STAGE_CLEANUP]

# (<expr> ^ 1/2), non-greedy so the leftmost opening paren wins
SQRT_PATTERN = regex.compile(r'\((.*?) \^ 1/2\)')

# Tokens are a run of ASCII digits or ONE lowercase letter. Not anchored:
# "ab/cd" folds only the inner "b/c".
FRACTION_PATTERN = regex.compile(r'([0-9]+|[a-z])/([0-9]+|[a-z])')

MULTIPLY_TOKEN = ' * '

SQRT_PAREN_PATTERN = regex.compile(r'\\sqrt\{\((.*?)\)\}')
FRACTION_PAREN_PATTERN = regex.compile(r'\\frac\{\((.*?)\)\}\{\((.*?)\)\}')


@dataclass
class FormatResult:
    """
    Outcome of formatting one engine expression.

    Attributes:
        original: Input text as received from the engine
        latex: Formatted LaTeX fragment
        stages_applied: Names of the stages that changed the text, in order
        is_passthrough: True if the input was a sentinel or empty and bypassed the pipeline
    """
    original: Optional[str]
    latex: Optional[str]
    stages_applied: List[str] = field(default_factory=list)
    is_passthrough: bool = False

    @property
    def changed(self) -> bool:
        return self.latex != self.original


def are_parentheses_balanced(text: str) -> bool:
    """
    Check that every ')' closes an earlier '(' and nothing is left open.

    Fails as soon as the running depth goes negative, so ")(" is
    unbalanced even though the counts match.
    """
    depth = 0
    for char in text:
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
        if depth < 0:
            return False
    return depth == 0


def strip_outer_parentheses(text: str) -> str:
    """
    Remove parenthesis pairs wrapping the whole expression.

    Repeats until the text no longer starts with '(' and ends with ')'
    around a balanced body. "(a)+(b)" is left alone because its body
    "a)+(b" is not balanced.
    """
    while text.startswith('(') and text.endswith(')') and are_parentheses_balanced(text[1:-1]):
        text = text[1:-1]
    return text


def fold_square_roots(text: str) -> str:
    """Rewrite every ``(<expr> ^ 1/2)`` as ``\\sqrt{<expr>}``."""
    return SQRT_PATTERN.sub(r'\\sqrt{\1}', text)


def fold_fractions(text: str) -> str:
    """Rewrite ``<tok>/<tok>`` as ``\\frac{<tok>}{<tok>}`` for digit runs and single letters."""
    return FRACTION_PATTERN.sub(r'\\frac{\1}{\2}', text)


def elide_multiplication(text: str) -> str:
    return text.replace(MULTIPLY_TOKEN, '')


def clean_redundant_parentheses(text: str) -> str:
    """
    Drop one wrapping pair inside root and fraction arguments.

    A single pass: ``\\sqrt{(X)}`` -> ``\\sqrt{X}`` and
    ``\\frac{(A)}{(B)}`` -> ``\\frac{A}{B}``. A fraction is only cleaned
    when both of its arguments are wrapped.
    """
    text = SQRT_PAREN_PATTERN.sub(r'\\sqrt{\1}', text)
    return FRACTION_PAREN_PATTERN.sub(r'\\frac{\1}{\2}', text)


_PIPELINE = [
    (STAGE_OUTER_PARENS, strip_outer_parentheses),
    (STAGE_SQRT, fold_square_roots),
    (STAGE_FRACTION, fold_fractions),
    (STAGE_MULTIPLY, elide_multiplication),
    (STAGE_CLEANUP, clean_redundant_parentheses),
]


def format_expression_detailed(
    text: Optional[str],
    sentinels: Sequence[str] = SENTINEL_VALUES,
) -> FormatResult:
    """
    Format one engine expression and record which stages fired.

    Args:
        text: Engine output. Empty, None and sentinel values pass through.
        sentinels: Literals that bypass every rule (zero and error by default)

    Returns:
        FormatResult with the LaTeX fragment and the applied stage names
    """
    if not text or text in sentinels:
        return FormatResult(original=text, latex=text, is_passthrough=True)

    tex = text
    applied = []
    for name, stage in _PIPELINE:
        rewritten = stage(tex)
        if rewritten != tex:
            applied.append(name)
            tex = rewritten

    if applied:
        logger.debug(f"Formatted {text!r} -> {tex!r} via {', '.join(applied)}")

    return FormatResult(original=text, latex=tex, stages_applied=applied)


def to_latex(text: Optional[str], sentinels: Sequence[str] = SENTINEL_VALUES) -> Optional[str]:
    r"""
    Convert engine output to a LaTeX fragment.

    Never raises on string input; the worst case is the input returned
    unchanged.

    Examples:
        >>> to_latex("(x + 1)")
        'x + 1'
        >>> to_latex("x = 3/4")
        'x = \\frac{3}{4}'
        >>> to_latex("Error")
        'Error'
    """
    return format_expression_detailed(text, sentinels).latex


def format_expressions(
    texts: Iterable[Optional[str]],
    sentinels: Sequence[str] = SENTINEL_VALUES,
) -> List[FormatResult]:
    """Format a batch of engine outputs, preserving order."""
    return [format_expression_detailed(text, sentinels) for text in texts]


def wrap_math(latex: str, mode: str = WRAP_NONE) -> str:
    """
    Embed a fragment in math delimiters for a renderer.

    Args:
        latex: Formatted LaTeX fragment
        mode: 'none' (unchanged), 'inline' ($...$) or 'display' (\\[...\\])

    Raises:
        ValueError: Unknown mode
    """
    if mode not in WRAP_MODES:
        raise ValueError(f"Unknown wrap mode: {mode!r} (expected one of {WRAP_MODES})")

    if not latex or mode == WRAP_NONE:
        return latex
    if mode == WRAP_INLINE:
        return f"${latex}$"
    return f"\\[{latex}\\]"


def get_formatter_statistics(results: List[FormatResult]) -> dict:
    """
    Calculate statistics from a batch of formatting results.

    Args:
        results: List of FormatResult objects

    Returns:
        Dictionary with statistics:
            - total: total results
            - passthrough: sentinel or empty inputs
            - changed: results whose LaTeX differs from the input
            - changed_rate: percentage changed
            - stage_counts: stage name -> number of results where it fired
    """
    if not results:
        return {
            'total': 0,
            'passthrough': 0,
            'changed': 0,
            'changed_rate': 0.0,
            'stage_counts': {},
        }

    total = len(results)
    changed = sum(1 for r in results if r.changed)
    stage_counts = Counter(name for r in results for name in r.stages_applied)

    return {
        'total': total,
        'passthrough': sum(1 for r in results if r.is_passthrough),
        'changed': changed,
        'changed_rate': changed / total * 100,
        'stage_counts': {name: stage_counts[name] for name in STAGES if stage_counts[name]},
    }
