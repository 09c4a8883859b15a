"""Foreign-field elements on the constrained (Check) side.

EmulatedField stands in for the circuit's emulated-arithmetic engine: values
are galois field elements, and limbs only appear where values cross the
witness-oracle boundary.
"""

from typing import List, Sequence

import galois
import numpy as np

from primitives.errors import InvalidInputError, LimbOverflowError, ShapeMismatchError
from primitives.field import FieldParams, galois_field
from primitives.limbs import decompose, recompose


def to_binary(value: int, nb_digits: int) -> List[int]:
    """Little-endian bits of a non-negative value, exactly nb_digits long."""
    if value < 0:
        raise InvalidInputError(f"cannot take bits of negative value {value}")
    if value.bit_length() > nb_digits:
        raise LimbOverflowError(f"value with {value.bit_length()} bits does not fit {nb_digits} digits")
    return [(value >> i) & 1 for i in range(nb_digits)]


class EmulatedField:
    """Foreign field described by a FieldParams descriptor."""

    def __init__(self, params: FieldParams):
        self.params = params
        self.GF = galois_field(params)

    @property
    def modulus(self) -> int:
        return self.params.modulus

    @property
    def nb_limbs(self) -> int:
        return self.params.nb_limbs

    @property
    def bits_per_limb(self) -> int:
        return self.params.bits_per_limb

    # --- Limb boundary ---

    def value_of(self, value: int) -> List[int]:
        """Limbs of an integer input (not reduced)."""
        return decompose(value, self.params.bits_per_limb, self.params.nb_limbs)

    def modulus_limbs(self) -> List[int]:
        return self.value_of(self.params.modulus)

    def new_element(self, limbs: Sequence[int]) -> galois.FieldArray:
        """Import hint-provided limbs as a field element."""
        if len(limbs) != self.params.nb_limbs:
            raise InvalidInputError(f"expected {self.params.nb_limbs} limbs, got {len(limbs)}")
        value = recompose(limbs, self.params.bits_per_limb)
        if value >= self.params.modulus:
            raise InvalidInputError(f"limbs encode {value}, outside {self.params.name}")
        return self.GF(value)

    # --- Construction helpers ---

    def element(self, value: int) -> galois.FieldArray:
        return self.GF(value % self.params.modulus)

    def column(self, values: Sequence[int]) -> galois.FieldArray:
        """1-D field array from canonical integers."""
        if len(values) == 0:
            return self.GF.Zeros(0)
        return self.GF([int(v) for v in values])

    def from_bits(self, bits: Sequence[int]) -> galois.FieldArray:
        """Element whose little-endian bits are given, reduced modulo p."""
        value = 0
        for i, bit in enumerate(bits):
            if bit not in (0, 1):
                raise InvalidInputError(f"bit {i} is {bit}, expected 0 or 1")
            value |= bit << i
        return self.element(value)

    # --- Arithmetic ---

    def sum_of_products(
        self,
        coefficients: Sequence[galois.FieldArray],
        columns: Sequence[galois.FieldArray],
    ) -> galois.FieldArray:
        """Column-wise sum_k coefficients[k] * columns[k] with a single reduction.

        Products are accumulated as unbounded integers and reduced once at the
        end, mirroring how emulated arithmetic defers reduction.
        """
        if len(coefficients) != len(columns):
            raise ShapeMismatchError(f"{len(coefficients)} coefficients for {len(columns)} columns")
        if len(columns) == 0:
            raise ShapeMismatchError("sum_of_products needs at least one column")
        n = len(columns[0])
        if any(len(col) != n for col in columns):
            raise ShapeMismatchError(f"columns have different lengths: {[len(c) for c in columns]}")

        acc = np.zeros(n, dtype=object)
        for coeff, col in zip(coefficients, columns):
            acc = acc + int(coeff) * _as_int_array(col)
        return self.column([int(v) % self.params.modulus for v in acc])


def _as_int_array(col: galois.FieldArray) -> np.ndarray:
    """Field array as an object array of Python ints (no overflow on products)."""
    return col.view(np.ndarray).astype(object)
