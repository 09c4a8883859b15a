"""Limb codec for integers crossing the witness-oracle boundary.

Limbs are little-endian digits in base 2^nb_bits. Neither direction performs
modular reduction; callers decide what the recomposed integer means.
"""

from typing import List, Optional, Sequence

from primitives.errors import InvalidInputError, LimbOverflowError


def recompose(limbs: Sequence[Optional[int]], nb_bits: int) -> int:
    """Rebuild an integer from little-endian limbs of nb_bits bits."""
    if len(limbs) == 0:
        raise InvalidInputError("zero length limb input")
    if any(limb is None for limb in limbs):
        raise InvalidInputError("limb input contains unset element")
    res = 0
    for limb in reversed(limbs):
        res = (res << nb_bits) + limb
    return res


def decompose(value: int, nb_bits: int, nb_limbs: int) -> List[int]:
    """Split value into nb_limbs little-endian limbs of nb_bits bits."""
    out = [0] * nb_limbs
    decompose_into(value, nb_bits, out, 0, nb_limbs)
    return out


def decompose_into(value: int, nb_bits: int, out: List[Optional[int]], offset: int, nb_limbs: int) -> None:
    """Write the limbs of value into out[offset:offset + nb_limbs].

    The destination slots must already exist (hint outputs are allocated by
    the caller). All checks run before the first write, so a failure leaves
    out untouched.
    """
    if nb_limbs <= 0:
        raise InvalidInputError("zero length limb output")
    if offset < 0 or offset + nb_limbs > len(out):
        raise InvalidInputError(
            f"destination slots [{offset}, {offset + nb_limbs}) outside output of length {len(out)}")
    if value < 0:
        raise InvalidInputError(f"cannot decompose negative integer {value}")
    if value.bit_length() > nb_limbs * nb_bits:
        raise LimbOverflowError(
            f"decomposed integer ({value.bit_length()} bits) does not fit into "
            f"{nb_limbs}x{nb_bits}-bit limbs")
    if any(slot is None for slot in out[offset:offset + nb_limbs]):
        raise InvalidInputError("result slice element uninitialized")

    mask = (1 << nb_bits) - 1
    tmp = value
    for i in range(nb_limbs):
        out[offset + i] = tmp & mask
        tmp >>= nb_bits
