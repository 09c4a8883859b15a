"""Tests for projective point arithmetic against the affine reference."""

import pytest

from primitives.curve import SECP256K1, TOY, affine_add, affine_double, affine_mul, affine_neg, is_on_curve
from primitives.field import BigIntEngine
from primitives.projective import (
    IDENTITY,
    AffinePoint,
    ProjectivePoint,
    from_affine,
    proj_add,
    proj_double,
    proj_equal,
    proj_select,
    to_affine,
)

G = TOY.generator


class TestToyCurve:
    """Sanity checks of the toy curve constants."""

    def test_generator_on_curve(self) -> None:
        assert is_on_curve(TOY, G)

    def test_order(self) -> None:
        """79 * G is the point at infinity and no smaller multiple is."""
        assert affine_mul(TOY, G, 79) is None
        assert affine_mul(TOY, G, 78) is not None

    @pytest.mark.parametrize("k,expected", [
        (2, AffinePoint(68, 81)),
        (3, AffinePoint(53, 38)),
        (4, AffinePoint(67, 19)),
        (5, AffinePoint(20, 76)),
    ])
    def test_small_multiples(self, k: int, expected: AffinePoint) -> None:
        assert affine_mul(TOY, G, k) == expected

    def test_secp256k1_generator_on_curve(self) -> None:
        assert is_on_curve(SECP256K1, SECP256K1.generator)


class TestProjectiveAdd:
    """Tests for proj_add."""

    def test_identity_left(self, toy_api: BigIntEngine) -> None:
        assert proj_add(toy_api, IDENTITY, from_affine(G)) == from_affine(G)

    def test_identity_right(self, toy_api: BigIntEngine) -> None:
        assert proj_add(toy_api, from_affine(G), IDENTITY) == from_affine(G)

    def test_identity_both(self, toy_api: BigIntEngine) -> None:
        assert proj_add(toy_api, IDENTITY, IDENTITY) == IDENTITY

    def test_inverse(self, toy_api: BigIntEngine) -> None:
        """P + (-P) is the identity."""
        neg = from_affine(affine_neg(TOY, G))
        assert proj_add(toy_api, from_affine(G), neg) == IDENTITY

    def test_equal_points_double(self, toy_api: BigIntEngine) -> None:
        """P + P falls through to doubling."""
        p = from_affine(G)
        assert proj_equal(toy_api, proj_add(toy_api, p, p), proj_double(toy_api, p))

    def test_scaled_inputs(self, toy_api: BigIntEngine) -> None:
        """Representatives with Z != 1 give the same sum."""
        p = ProjectivePoint(G.x * 3 % 97, G.y * 3 % 97, 3)
        q = from_affine(affine_double(TOY, G))
        assert to_affine(toy_api, proj_add(toy_api, p, q)) == affine_mul(TOY, G, 3)

    @pytest.mark.parametrize("a,b", [(1, 2), (2, 3), (5, 7), (10, 60), (40, 38)])
    def test_matches_affine(self, toy_api: BigIntEngine, a: int, b: int) -> None:
        pa, pb = affine_mul(TOY, G, a), affine_mul(TOY, G, b)
        got = to_affine(toy_api, proj_add(toy_api, from_affine(pa), from_affine(pb)))
        assert got == affine_add(TOY, pa, pb)

    def test_secp256k1_matches_affine(self) -> None:
        api = BigIntEngine(SECP256K1.base.modulus)
        p = SECP256K1.generator
        q = affine_mul(SECP256K1, p, 0xDEADBEEF)
        got = to_affine(api, proj_add(api, from_affine(p), from_affine(q)))
        assert got == affine_mul(SECP256K1, p, 0xDEADBEEF + 1)


class TestProjectiveDouble:
    """Tests for proj_double."""

    def test_identity(self, toy_api: BigIntEngine) -> None:
        assert proj_double(toy_api, IDENTITY) == IDENTITY

    @pytest.mark.parametrize("k", [1, 2, 3, 17, 39])
    def test_matches_affine(self, toy_api: BigIntEngine, k: int) -> None:
        p = affine_mul(TOY, G, k)
        assert to_affine(toy_api, proj_double(toy_api, from_affine(p))) == affine_double(TOY, p)

    def test_result_on_curve(self, toy_api: BigIntEngine) -> None:
        assert is_on_curve(TOY, to_affine(toy_api, proj_double(toy_api, from_affine(G))))


class TestProjectiveSelect:
    """Tests for proj_select."""

    def test_select(self) -> None:
        a, b = from_affine(G), IDENTITY
        assert proj_select(1, a, b) == a
        assert proj_select(0, a, b) == b

    def test_invalid_selector(self) -> None:
        with pytest.raises(ValueError):
            proj_select(2, IDENTITY, IDENTITY)

    def test_to_affine_identity(self, toy_api: BigIntEngine) -> None:
        assert to_affine(toy_api, IDENTITY) is None
