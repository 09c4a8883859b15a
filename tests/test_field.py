"""Tests for field descriptors, the integer engine and the emulated field."""

import pytest

from primitives.errors import InvalidInputError, LimbOverflowError, ShapeMismatchError
from primitives.field import (
    FIELD_PRESETS,
    SECP256K1_FP,
    TOY_FP,
    TOY_FR,
    BigIntEngine,
    FieldParams,
    galois_field,
    get_field_params,
)
from protocol.emulated import EmulatedField, to_binary


class TestFieldParams:
    """Tests for FieldParams validation and presets."""

    def test_modulus_must_exceed_one(self) -> None:
        with pytest.raises(ValueError):
            FieldParams(name="bad", modulus=1, bits_per_limb=4, nb_limbs=1)

    def test_modulus_must_fit_limbs(self) -> None:
        with pytest.raises(ValueError):
            FieldParams(name="bad", modulus=257, bits_per_limb=4, nb_limbs=2)

    def test_byte_length(self) -> None:
        assert SECP256K1_FP.byte_length == 32
        assert TOY_FP.byte_length == 1

    def test_preset_lookup(self) -> None:
        for name, params in FIELD_PRESETS.items():
            assert get_field_params(name) is params

    def test_unknown_preset(self) -> None:
        with pytest.raises(KeyError, match="Available"):
            get_field_params("goldilocks")

    @pytest.mark.parametrize("params,factors", [
        (TOY_FP, (2, 3)),
        (TOY_FR, (2, 3, 13)),
    ])
    def test_toy_primitive_elements(self, params: FieldParams, factors) -> None:
        """Preset generator has full multiplicative order."""
        p, g = params.modulus, params.primitive_element
        for q in factors:
            assert (p - 1) % q == 0
            assert pow(g, (p - 1) // q, p) != 1

    def test_galois_field_cached(self) -> None:
        assert galois_field(TOY_FP) is galois_field(TOY_FP)
        assert galois_field(TOY_FP).order == 97


class TestBigIntEngine:
    """Tests for BigIntEngine."""

    def test_operations(self) -> None:
        api = BigIntEngine(97)
        assert api.add(90, 10) == 3
        assert api.sub(3, 10) == 90
        assert api.mul(10, 10) == 3
        assert api.neg(1) == 96
        assert api.neg(0) == 0
        assert api.mul(api.inv(5), 5) == 1

    def test_invalid_modulus(self) -> None:
        with pytest.raises(ValueError):
            BigIntEngine(1)


class TestEmulatedField:
    """Tests for EmulatedField."""

    def test_new_element(self) -> None:
        field = EmulatedField(TOY_FP)
        assert field.new_element([4, 1]) == field.GF(20)

    def test_new_element_non_canonical(self) -> None:
        """Limbs encoding a value >= p are rejected."""
        field = EmulatedField(TOY_FP)
        with pytest.raises(InvalidInputError):
            field.new_element([1, 6])

    def test_new_element_wrong_length(self) -> None:
        field = EmulatedField(TOY_FP)
        with pytest.raises(InvalidInputError):
            field.new_element([1, 2, 3])

    def test_modulus_limbs(self) -> None:
        assert EmulatedField(TOY_FP).modulus_limbs() == [1, 6]
        assert EmulatedField(SECP256K1_FP).modulus_limbs()[1:] == [2**64 - 1] * 3

    def test_from_bits_reduces(self) -> None:
        """Bits are little-endian and reduced modulo p."""
        field = EmulatedField(TOY_FP)
        assert field.from_bits(to_binary(100, 8)) == field.GF(3)

    def test_from_bits_rejects_non_bits(self) -> None:
        with pytest.raises(InvalidInputError):
            EmulatedField(TOY_FP).from_bits([0, 2])

    def test_to_binary(self) -> None:
        assert to_binary(6, 4) == [0, 1, 1, 0]

    def test_to_binary_overflow(self) -> None:
        with pytest.raises(LimbOverflowError):
            to_binary(16, 4)

    def test_column_empty(self) -> None:
        assert len(EmulatedField(TOY_FP).column([])) == 0

    def test_sum_of_products(self) -> None:
        field = EmulatedField(TOY_FP)
        cols = [field.column([1, 2, 96]), field.column([3, 4, 96])]
        got = field.sum_of_products([field.GF(2), field.GF(50)], cols)
        expected = [(2 * a + 50 * b) % 97 for a, b in zip([1, 2, 96], [3, 4, 96])]
        assert [int(v) for v in got] == expected

    def test_sum_of_products_large_field(self) -> None:
        """No overflow for 256-bit operands."""
        field = EmulatedField(SECP256K1_FP)
        p = SECP256K1_FP.modulus
        cols = [field.column([p - 1, p - 2]), field.column([p - 3, 5])]
        got = field.sum_of_products([field.element(p - 1), field.element(p - 1)], cols)
        expected = [((p - 1) * (p - 1) + (p - 1) * (p - 3)) % p, ((p - 1) * (p - 2) + (p - 1) * 5) % p]
        assert [int(v) for v in got] == expected

    def test_sum_of_products_shape(self) -> None:
        field = EmulatedField(TOY_FP)
        with pytest.raises(ShapeMismatchError):
            field.sum_of_products([field.GF(1)], [field.column([1]), field.column([2])])
        with pytest.raises(ShapeMismatchError):
            field.sum_of_products([field.GF(1), field.GF(1)], [field.column([1]), field.column([2, 3])])
