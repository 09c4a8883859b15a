"""Primitives - Field, curve, limb and hashing building blocks."""

from primitives.curve import (
    BN254,
    CURVE_PRESETS,
    SECP256K1,
    TOY,
    CurveParams,
    affine_add,
    affine_mul,
    get_curve,
    is_on_curve,
)
from primitives.errors import (
    InvalidInputError,
    LimbOverflowError,
    ScalarMulError,
    ShapeMismatchError,
    TranscriptError,
)
from primitives.field import (
    BN254_FP,
    BN254_FR,
    FIELD_PRESETS,
    SECP256K1_FP,
    SECP256K1_FR,
    BigIntEngine,
    FieldParams,
    galois_field,
    get_field_params,
)
from primitives.limbs import decompose, decompose_into, recompose
from primitives.multilinear import eval_multilinear
from primitives.poseidon import POSEIDON_PRIME, poseidon_hash, poseidon_hash_bytes, poseidon_permutation
from primitives.projective import (
    IDENTITY,
    AffinePoint,
    ProjectivePoint,
    from_affine,
    proj_add,
    proj_double,
    proj_select,
    to_affine,
)
from primitives.transcript import Transcript

__all__ = [
    # Errors
    "ScalarMulError",
    "ShapeMismatchError",
    "InvalidInputError",
    "LimbOverflowError",
    "TranscriptError",
    # Fields
    "FieldParams",
    "FIELD_PRESETS",
    "SECP256K1_FP",
    "SECP256K1_FR",
    "BN254_FP",
    "BN254_FR",
    "BigIntEngine",
    "galois_field",
    "get_field_params",
    # Curves
    "CurveParams",
    "CURVE_PRESETS",
    "SECP256K1",
    "BN254",
    "TOY",
    "get_curve",
    "is_on_curve",
    "affine_add",
    "affine_mul",
    # Limbs
    "recompose",
    "decompose",
    "decompose_into",
    # Projective
    "AffinePoint",
    "ProjectivePoint",
    "IDENTITY",
    "from_affine",
    "to_affine",
    "proj_add",
    "proj_double",
    "proj_select",
    # Multilinear
    "eval_multilinear",
    # Hashing
    "POSEIDON_PRIME",
    "poseidon_permutation",
    "poseidon_hash",
    "poseidon_hash_bytes",
    # Transcript
    "Transcript",
]
