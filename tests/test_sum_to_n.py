"""
Tests for the three sum_to_n variants.
"""

import sys

import pytest

from sum_to_n import sum_to_n_a, sum_to_n_b, sum_to_n_c

VARIANTS = [sum_to_n_a, sum_to_n_b, sum_to_n_c]


@pytest.mark.parametrize("fn", VARIANTS)
def test_zero(fn):
    assert fn(0) == 0


@pytest.mark.parametrize("fn", VARIANTS)
def test_negative_rejected(fn):
    with pytest.raises(ValueError):
        fn(-1)


def test_variants_agree_with_formula():
    for n in range(0, 500):
        expected = n * (n + 1) // 2
        assert sum_to_n_a(n) == expected
        assert sum_to_n_b(n) == expected
        assert sum_to_n_c(n) == expected


def test_recursive_variant_beyond_recursion_limit():
    """Depth grows logarithmically, so n far above the recursion limit is fine."""
    n = sys.getrecursionlimit() * 100
    assert sum_to_n_c(n) == sum_to_n_a(n)
