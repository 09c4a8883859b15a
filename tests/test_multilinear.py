"""Tests for multilinear extension evaluation."""

import pytest

from primitives.errors import ShapeMismatchError
from primitives.field import TOY_FP, galois_field
from primitives.multilinear import eval_multilinear

GF = galois_field(TOY_FP)


class TestEvalMultilinear:
    """Tests for eval_multilinear."""

    @pytest.mark.parametrize("index", range(4))
    def test_hypercube_vertices(self, index: int) -> None:
        """At a boolean point the extension returns the table entry."""
        values = GF([11, 22, 33, 44])
        at = [GF((index >> 1) & 1), GF(index & 1)]
        assert eval_multilinear(at, values) == values[index]

    def test_single_variable(self) -> None:
        """(1 - x) v0 + x v1."""
        values = GF([10, 30])
        assert eval_multilinear([GF(5)], values) == GF(10) + GF(5) * (GF(30) - GF(10))

    def test_two_variables_formula(self) -> None:
        v = [3, 5, 7, 11]
        x, y = 4, 9
        expected = ((1 - x) * (1 - y) * v[0] + (1 - x) * y * v[1]
                    + x * (1 - y) * v[2] + x * y * v[3]) % 97
        assert eval_multilinear([GF(x), GF(y)], GF(v)) == GF(expected)

    def test_no_variables(self) -> None:
        assert eval_multilinear([], GF([42])) == GF(42)

    def test_zero_padding(self) -> None:
        """Short tables behave as if padded with zeros."""
        at = [GF(6), GF(8)]
        assert eval_multilinear(at, GF([1, 2, 3])) == eval_multilinear(at, GF([1, 2, 3, 0]))

    def test_too_many_values(self) -> None:
        with pytest.raises(ShapeMismatchError):
            eval_multilinear([GF(1)], GF([1, 2, 3]))
