"""Compression of the folded claims into one multilinear evaluation."""

from typing import List, Tuple

import galois

from primitives.errors import ShapeMismatchError
from primitives.multilinear import eval_multilinear
from primitives.transcript import Transcript
from protocol.emulated import EmulatedField
from protocol.fold import derive_challenge

BETA = "beta"


def nb_eval_coordinates(nb_claims: int) -> int:
    """floor(log2(nb_claims)); only exact for powers of two."""
    if nb_claims <= 0:
        raise ShapeMismatchError(f"cannot compress {nb_claims} claims")
    return nb_claims.bit_length() - 1


def derive_beta(transcript: Transcript, field: EmulatedField, challenge_id: str = BETA) -> galois.FieldArray:
    return derive_challenge(transcript, challenge_id, field)


def beta_eval_point(beta: galois.FieldArray, nb_coordinates: int) -> List[galois.FieldArray]:
    """[beta, beta^2, ..., beta^k]."""
    point: List[galois.FieldArray] = []
    for i in range(nb_coordinates):
        point.append(beta if i == 0 else point[-1] * beta)
    return point


def compress_claims(
    claims: galois.FieldArray,
    beta: galois.FieldArray,
) -> Tuple[List[galois.FieldArray], galois.FieldArray]:
    """Evaluate the claims' multilinear extension at the beta power point.

    Raises:
        ShapeMismatchError: If there are no claims, or their count is not a
            power of two (the table overflows floor(log2 L) variables)
    """
    k = nb_eval_coordinates(len(claims))
    point = beta_eval_point(beta, k)
    return point, eval_multilinear(point, claims)
