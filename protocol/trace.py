"""Importing the untrusted double-and-add trace into the Check phase.

The hint is looked up in the witness registry, fed limb-encoded inputs, and
its outputs are re-imported coordinate by coordinate as base field elements.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import galois
import numpy as np

from primitives.errors import InvalidInputError
from primitives.field import BN254_FR
from primitives.projective import AffinePoint
from protocol.emulated import EmulatedField
from witness import COORDS_PER_STEP, get_hint, solve_hint

logger = logging.getLogger(__name__)

SCALAR_MUL_HINT = "scalar_mul_steps"


@dataclass
class ScalarMulTrace:
    """Six base-field columns, one row per double-and-add step."""
    result_x: galois.FieldArray
    result_y: galois.FieldArray
    result_z: galois.FieldArray
    acc_x: galois.FieldArray
    acc_y: galois.FieldArray
    acc_z: galois.FieldArray

    def __len__(self) -> int:
        return len(self.result_x)

    def fold_columns(self) -> Tuple[galois.FieldArray, ...]:
        """Columns in folding order: acc coordinates first, then result."""
        return (self.acc_x, self.acc_y, self.acc_z, self.result_x, self.result_y, self.result_z)

    @classmethod
    def from_rows(cls, field: EmulatedField, rows: Sequence[Sequence[int]]) -> "ScalarMulTrace":
        """Build from rows of (result.X, result.Y, result.Z, acc.X, acc.Y, acc.Z)."""
        columns = [field.column([int(row[j]) for row in rows]) for j in range(COORDS_PER_STEP)]
        return cls(*columns)

    @classmethod
    def concatenate(cls, field: EmulatedField, traces: Sequence["ScalarMulTrace"]) -> "ScalarMulTrace":
        """Stack traces of several pairs, pair by pair."""
        if len(traces) == 0:
            return cls.from_rows(field, [])
        stacked = zip(*(trace.columns() for trace in traces))
        return cls(*(field.GF(np.concatenate([col.view(np.ndarray) for col in cols])) for cols in stacked))

    def columns(self) -> Tuple[galois.FieldArray, ...]:
        """Columns in hint output order."""
        return (self.result_x, self.result_y, self.result_z, self.acc_x, self.acc_y, self.acc_z)

    def rows(self) -> List[Tuple[int, ...]]:
        cols = self.columns()
        return [tuple(int(col[i]) for col in cols) for i in range(len(self))]


def scalar_mul_hint_inputs(
    base: EmulatedField,
    scalar_field: EmulatedField,
    point: AffinePoint,
    scalar: int,
) -> List[int]:
    """Flatten one (point, scalar) pair into the hint's input layout."""
    if not 0 <= scalar < 1 << (scalar_field.bits_per_limb * scalar_field.nb_limbs):
        raise InvalidInputError(f"scalar {scalar} does not fit the {scalar_field.params.name} limb layout")
    return [
        base.bits_per_limb,
        base.nb_limbs,
        *base.modulus_limbs(),
        *base.value_of(point.x),
        *base.value_of(point.y),
        scalar_field.bits_per_limb,
        scalar_field.nb_limbs,
        *scalar_field.modulus_limbs(),
        *scalar_field.value_of(scalar),
    ]


def call_hint_scalar_mul_steps(
    base: EmulatedField,
    scalar_field: EmulatedField,
    nb_scalar_bits: int,
    point: AffinePoint,
    scalar: int,
    native_modulus: int = BN254_FR.modulus,
) -> ScalarMulTrace:
    """Ask the witness oracle for nb_scalar_bits steps of scalar * point.

    Every returned coordinate must be a canonical base field element;
    anything else is rejected with InvalidInputError.
    """
    inputs = scalar_mul_hint_inputs(base, scalar_field, point, scalar)
    return solve_scalar_mul_steps(base, nb_scalar_bits, inputs, native_modulus)


def solve_scalar_mul_steps(
    base: EmulatedField,
    nb_scalar_bits: int,
    inputs: Sequence[int],
    native_modulus: int = BN254_FR.modulus,
) -> ScalarMulTrace:
    """Run the registered hint on prepared inputs and import its outputs."""
    row_size = COORDS_PER_STEP * base.nb_limbs
    outputs = solve_hint(get_hint(SCALAR_MUL_HINT), native_modulus, inputs, nb_scalar_bits * row_size)
    logger.debug("scalar_mul_steps returned %d limbs for %d steps", len(outputs), nb_scalar_bits)

    rows = []
    for i in range(nb_scalar_bits):
        row = []
        for j in range(COORDS_PER_STEP):
            start = i * row_size + j * base.nb_limbs
            row.append(int(base.new_element(outputs[start:start + base.nb_limbs])))
        rows.append(row)
    return ScalarMulTrace.from_rows(base, rows)
