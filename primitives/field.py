"""Field descriptors and the arbitrary-precision foreign-field engine.

A FieldParams value fixes everything a circuit instantiation knows statically
about a field: its modulus and the limb layout used when elements cross the
witness-oracle boundary. The Check phase turns a descriptor into a galois field
class (see galois_field); the Compute phase only needs BigIntEngine.

galois.GF() searches for a primitive element by factoring p - 1, which is slow
for 256-bit primes. Presets therefore carry a known multiplicative generator.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import galois


# --- Field Descriptors ---

@dataclass(frozen=True)
class FieldParams:
    """Static description of a prime field and its limb representation."""
    name: str
    modulus: int
    bits_per_limb: int
    nb_limbs: int
    primitive_element: Optional[int] = None

    def __post_init__(self) -> None:
        if self.modulus <= 1:
            raise ValueError(f"{self.name}: modulus must be > 1, got {self.modulus}")
        if self.bits_per_limb <= 0 or self.nb_limbs <= 0:
            raise ValueError(f"{self.name}: limb layout must be positive, got "
                             f"{self.nb_limbs}x{self.bits_per_limb}")
        if self.modulus.bit_length() > self.bits_per_limb * self.nb_limbs:
            raise ValueError(f"{self.name}: modulus does not fit into "
                             f"{self.nb_limbs}x{self.bits_per_limb}-bit limbs")

    @property
    def bit_length(self) -> int:
        return self.modulus.bit_length()

    @property
    def byte_length(self) -> int:
        return (self.modulus.bit_length() + 7) // 8


SECP256K1_FP = FieldParams(
    name="secp256k1_fp",
    modulus=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    bits_per_limb=64,
    nb_limbs=4,
    primitive_element=3,
)

SECP256K1_FR = FieldParams(
    name="secp256k1_fr",
    modulus=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    bits_per_limb=64,
    nb_limbs=4,
    primitive_element=7,
)

BN254_FP = FieldParams(
    name="bn254_fp",
    modulus=21888242871839275222246405745257275088696311157297823662689037894645226208583,
    bits_per_limb=64,
    nb_limbs=4,
    primitive_element=3,
)

BN254_FR = FieldParams(
    name="bn254_fr",
    modulus=21888242871839275222246405745257275088548364400416034343698204186575808495617,
    bits_per_limb=64,
    nb_limbs=4,
    primitive_element=5,
)

# Small fields for hand-checkable traces: 2 limbs of 4 bits each.
TOY_FP = FieldParams(name="toy_fp", modulus=97, bits_per_limb=4, nb_limbs=2, primitive_element=5)
TOY_FR = FieldParams(name="toy_fr", modulus=79, bits_per_limb=4, nb_limbs=2, primitive_element=3)

FIELD_PRESETS: dict[str, FieldParams] = {
    params.name: params
    for params in (SECP256K1_FP, SECP256K1_FR, BN254_FP, BN254_FR, TOY_FP, TOY_FR)
}


def get_field_params(name: str) -> FieldParams:
    """Look up a field preset by name."""
    if name not in FIELD_PRESETS:
        raise KeyError(f"Unknown field '{name}'. Available: {list(FIELD_PRESETS.keys())}")
    return FIELD_PRESETS[name]


@lru_cache(maxsize=None)
def galois_field(params: FieldParams) -> type[galois.FieldArray]:
    """Build (once) the galois field class for a descriptor."""
    if params.primitive_element is None:
        return galois.GF(params.modulus)
    return galois.GF(params.modulus, primitive_element=params.primitive_element, verify=False)


# --- Foreign-Field Integer Engine ---

class BigIntEngine:
    """Modular arithmetic on Python ints, used only by off-circuit hints.

    Results are never re-executed under constraints; they are checked later
    through the randomized compression claim.
    """

    def __init__(self, modulus: int):
        if modulus <= 1:
            raise ValueError(f"modulus must be > 1, got {modulus}")
        self.modulus = modulus

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.modulus

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.modulus

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def neg(self, a: int) -> int:
        return -a % self.modulus

    def inv(self, a: int) -> int:
        """Modular inverse; only used when converting results to affine form."""
        return pow(a, -1, self.modulus)
