"""Random linear combination of the trace columns (alpha folding)."""

from typing import List

import galois

from primitives.transcript import Transcript
from protocol.emulated import EmulatedField, to_binary
from protocol.trace import ScalarMulTrace

ALPHA = "alpha"

# acc.Y, acc.Z, result.X, result.Y, result.Z each take one power of alpha
NB_ALPHA_POWERS = 5


def derive_challenge(transcript: Transcript, challenge_id: str, field: EmulatedField) -> galois.FieldArray:
    """Compute a native challenge and carry it into the emulated field.

    The native value is decomposed into bits wide enough for both fields and
    recomposed modulo the emulated modulus.
    """
    native = transcript.compute_challenge(challenge_id)
    nb_digits = max(field.params.bit_length, transcript.native_modulus.bit_length())
    return field.from_bits(to_binary(native, nb_digits))


def derive_alpha(transcript: Transcript, field: EmulatedField, challenge_id: str = ALPHA) -> galois.FieldArray:
    return derive_challenge(transcript, challenge_id, field)


def alpha_powers(alpha: galois.FieldArray, count: int = NB_ALPHA_POWERS) -> List[galois.FieldArray]:
    """[alpha, alpha^2, ..., alpha^count]."""
    powers = [alpha]
    for _ in range(count - 1):
        powers.append(powers[-1] * alpha)
    return powers


def fold_trace(field: EmulatedField, trace: ScalarMulTrace, powers: List[galois.FieldArray]) -> galois.FieldArray:
    """claim_i = accX + a accY + a^2 accZ + a^3 resX + a^4 resY + a^5 resZ."""
    if len(powers) != NB_ALPHA_POWERS:
        raise ValueError(f"folding needs {NB_ALPHA_POWERS} powers of alpha, got {len(powers)}")
    coefficients = [field.GF(1), *powers]
    return field.sum_of_products(coefficients, trace.fold_columns())
