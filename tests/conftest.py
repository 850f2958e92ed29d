"""
Pytest configuration and shared fixtures for the math display formatter tests.
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def engine_outputs():
    """Typical strings produced by the math engine, with expected LaTeX."""
    return {
        "(x + 1)": "x + 1",
        "((x + 1))": "x + 1",
        "x = 3/4": r"x = \frac{3}{4}",
        "2 * x + 1": "2x + 1",
        "a * b * c": "abc",
        "x + (y ^ 1/2)": r"x + \sqrt{y}",
        "(2 * x + 1) / 3": "(2x + 1) / 3",
    }


@pytest.fixture
def reduced_expressions():
    """Expressions with nothing left to rewrite."""
    return [
        "x + 1",
        "2x - y",
        r"\frac{1}{2}",
        r"\sqrt{x + 1}",
        "(a)+(b)",
        "x ^ 2",
    ]


@pytest.fixture(autouse=True)
def clear_formatter_env(monkeypatch):
    """Keep MATHFMT_* variables from the developer shell out of the tests."""
    for key in ("MATHFMT_ZERO_SENTINEL", "MATHFMT_ERROR_SENTINEL",
                "MATHFMT_WRAP_MODE", "MATHFMT_LOG_LEVEL", "MATHFMT_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
