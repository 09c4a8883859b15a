"""Double-and-add trace generation for scalar multiplication (Compute phase).

This is the only unconstrained computation of the batch verifier. Nothing
here is trusted: the Check phase re-imports the emitted limbs and verifies
them probabilistically through folding and multilinear compression.

Hint input layout (all integers):
    [base_bits, base_nb_limbs, base_modulus limbs, X limbs, Y limbs,
     scalar_bits, scalar_nb_limbs, scalar_modulus limbs, scalar limbs]

Hint output layout, per step i and in this order, base_nb_limbs limbs each:
    result.X, result.Y, result.Z, acc.X, acc.Y, acc.Z
"""

from typing import List, NamedTuple, Sequence, Tuple

from primitives.errors import InvalidInputError
from primitives.field import BigIntEngine
from primitives.limbs import decompose_into, recompose
from primitives.projective import (
    IDENTITY,
    AffinePoint,
    ProjectivePoint,
    from_affine,
    proj_add,
    proj_double,
    proj_select,
)

# Foreign-field coordinates emitted per step
COORDS_PER_STEP = 6


class TraceStep(NamedTuple):
    """State after processing scalar bit i.

    result = sum_{j <= i} bit_j * 2^j * P
    acc    = 2^(i + 1) * P
    """
    result: ProjectivePoint
    acc: ProjectivePoint


def scalar_mul_trace(api: BigIntEngine, point: AffinePoint, scalar: int, nb_steps: int) -> Tuple[TraceStep, ...]:
    """Run nb_steps rounds of double-and-add, least significant bit first.

    Bits of scalar above nb_steps are dropped without notice; callers must
    pick nb_steps >= scalar.bit_length().
    """
    acc = from_affine(point)
    result = IDENTITY
    steps: List[TraceStep] = []
    for _ in range(nb_steps):
        bit = scalar & 1
        scalar >>= 1
        candidate = proj_add(api, acc, result)
        result = proj_select(bit, candidate, result)
        acc = proj_double(api, acc)
        steps.append(TraceStep(result, acc))
    return tuple(steps)


class ScalarMulHintInputs(NamedTuple):
    """Decoded hint inputs."""
    nb_bits: int
    nb_limbs: int
    base_modulus: int
    point: AffinePoint
    nb_scalar_bits: int
    nb_scalar_limbs: int
    scalar_modulus: int
    scalar: int


def parse_hint_inputs(inputs: Sequence[int]) -> ScalarMulHintInputs:
    """Split and recompose the flat hint input vector."""
    if len(inputs) < 2:
        raise InvalidInputError(f"hint inputs too short: {len(inputs)} values")
    nb_bits, nb_limbs = int(inputs[0]), int(inputs[1])
    idx = 2 + 3 * nb_limbs
    if len(inputs) < idx + 2:
        raise InvalidInputError(f"hint inputs too short for {nb_limbs} base limbs")
    nb_scalar_bits, nb_scalar_limbs = int(inputs[idx]), int(inputs[idx + 1])
    expected = idx + 2 + 2 * nb_scalar_limbs
    if len(inputs) != expected:
        raise InvalidInputError(f"expected {expected} hint inputs, got {len(inputs)}")

    fp_limbs = inputs[2:2 + nb_limbs]
    x_limbs = inputs[2 + nb_limbs:2 + 2 * nb_limbs]
    y_limbs = inputs[2 + 2 * nb_limbs:idx]
    fr_limbs = inputs[idx + 2:idx + 2 + nb_scalar_limbs]
    scalar_limbs = inputs[idx + 2 + nb_scalar_limbs:expected]

    return ScalarMulHintInputs(
        nb_bits=nb_bits,
        nb_limbs=nb_limbs,
        base_modulus=recompose(fp_limbs, nb_bits),
        point=AffinePoint(recompose(x_limbs, nb_bits), recompose(y_limbs, nb_bits)),
        nb_scalar_bits=nb_scalar_bits,
        nb_scalar_limbs=nb_scalar_limbs,
        scalar_modulus=recompose(fr_limbs, nb_scalar_bits),
        scalar=recompose(scalar_limbs, nb_scalar_bits),
    )


def hint_scalar_mul_steps(modulus: int, inputs: Sequence[int], outputs: List[int]) -> None:
    """Emit every double-and-add step of scalar * point as limbs.

    The number of steps is len(outputs) // (6 * base_nb_limbs). The native
    modulus is part of the hint signature but is not used.
    """
    params = parse_hint_inputs(inputs)
    step_size = COORDS_PER_STEP * params.nb_limbs
    if len(outputs) % step_size != 0:
        raise InvalidInputError(f"output length {len(outputs)} is not a multiple of {step_size}")
    nb_steps = len(outputs) // step_size

    api = BigIntEngine(params.base_modulus)
    trace = scalar_mul_trace(api, params.point, params.scalar, nb_steps)

    for i, step in enumerate(trace):
        coords = (*step.result, *step.acc)
        for j, value in enumerate(coords):
            decompose_into(value, params.nb_bits, outputs, i * step_size + j * params.nb_limbs, params.nb_limbs)
