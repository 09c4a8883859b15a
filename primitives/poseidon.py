"""
Poseidon hash over the BN254 scalar field.

Round constants and MDS matrices are produced with the Grain LFSR procedure of
the Poseidon reference parameter script (field=1, sbox=0 i.e. x^5, n=254,
RF=8). Tables are built lazily, once per state width, and are immutable.

The permutation is the plain (non-optimized) one: add round constants, apply
the S-box to every element in full rounds and to the first element in partial
rounds, then multiply by the MDS matrix.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Sequence, Tuple

from primitives.field import BN254_FR

POSEIDON_PRIME = BN254_FR.modulus
FIELD_SIZE = 254

# Number of full rounds
ROUNDS_F = 8

# Partial rounds for state widths t = 2..13, rounded up to a multiple of t
ROUNDS_P = (56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65)

MIN_WIDTH = 2
MAX_WIDTH = MIN_WIDTH + len(ROUNDS_P) - 1

# Bytes per absorbed element; 31 * 8 < FIELD_SIZE keeps every chunk canonical.
BYTES_PER_ELEMENT = 31


# --- Parameter Generation ---

class _GrainLFSR:
    """80-bit Grain LFSR in self-shrinking mode.

    The register is kept as an int; bit i is position i of the reference
    bit list, so popping the head is a right shift.
    """

    def __init__(self, field_size: int, width: int, rounds_f: int, rounds_p: int):
        init_bits = (
            _to_bits(1, 2)          # prime field
            + _to_bits(0, 4)        # x^alpha S-box
            + _to_bits(field_size, 12)
            + _to_bits(width, 12)
            + _to_bits(rounds_f, 10)
            + _to_bits(rounds_p, 10)
            + [1] * 30
        )
        self._state = 0
        for i, bit in enumerate(init_bits):
            self._state |= bit << i
        for _ in range(160):
            self._clock()

    def _clock(self) -> int:
        s = self._state
        new_bit = ((s >> 62) ^ (s >> 51) ^ (s >> 38) ^ (s >> 23) ^ (s >> 13) ^ s) & 1
        self._state = (s >> 1) | (new_bit << 79)
        return new_bit

    def next_bit(self) -> int:
        while True:
            keep = self._clock()
            bit = self._clock()
            if keep:
                return bit

    def random_bits(self, n: int) -> int:
        """n output bits, most significant first."""
        value = 0
        for _ in range(n):
            value = (value << 1) | self.next_bit()
        return value


def _to_bits(value: int, width: int) -> List[int]:
    return [int(c) for c in format(value, f"0{width}b")]


@dataclass(frozen=True)
class PoseidonParams:
    """Round constants and MDS matrix for one state width."""
    width: int
    rounds_f: int
    rounds_p: int
    round_constants: Tuple[int, ...]
    mds: Tuple[Tuple[int, ...], ...]


def _generate_round_constants(grain: _GrainLFSR, count: int) -> Tuple[int, ...]:
    constants = []
    for _ in range(count):
        value = grain.random_bits(FIELD_SIZE)
        while value >= POSEIDON_PRIME:
            value = grain.random_bits(FIELD_SIZE)
        constants.append(value)
    return tuple(constants)


def _generate_mds(grain: _GrainLFSR, width: int) -> Tuple[Tuple[int, ...], ...]:
    """Cauchy matrix M[i][j] = 1 / (x_i + y_j) from distinct sampled x, y."""
    while True:
        samples = [grain.random_bits(FIELD_SIZE) % POSEIDON_PRIME for _ in range(2 * width)]
        while len(set(samples)) != len(samples):
            samples = [grain.random_bits(FIELD_SIZE) % POSEIDON_PRIME for _ in range(2 * width)]
        xs, ys = samples[:width], samples[width:]
        if any((x + y) % POSEIDON_PRIME == 0 for x in xs for y in ys):
            continue
        return tuple(
            tuple(pow(x + y, -1, POSEIDON_PRIME) for y in ys)
            for x in xs
        )


@lru_cache(maxsize=None)
def poseidon_params(width: int) -> PoseidonParams:
    """Parameters for state width t (number of inputs + 1)."""
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise ValueError(f"width must be in [{MIN_WIDTH}, {MAX_WIDTH}], got {width}")
    rounds_p = ROUNDS_P[width - MIN_WIDTH]
    grain = _GrainLFSR(FIELD_SIZE, width, ROUNDS_F, rounds_p)
    round_constants = _generate_round_constants(grain, (ROUNDS_F + rounds_p) * width)
    mds = _generate_mds(grain, width)
    return PoseidonParams(width, ROUNDS_F, rounds_p, round_constants, mds)


# --- Permutation and Hashing ---

def _pow5(x: int) -> int:
    x2 = (x * x) % POSEIDON_PRIME
    x4 = (x2 * x2) % POSEIDON_PRIME
    return (x4 * x) % POSEIDON_PRIME


def poseidon_permutation(state: Sequence[int]) -> List[int]:
    """Apply the Poseidon permutation to a state of width len(state)."""
    params = poseidon_params(len(state))
    t = params.width
    half_f = params.rounds_f // 2
    rc = params.round_constants
    state = [x % POSEIDON_PRIME for x in state]

    for r in range(params.rounds_f + params.rounds_p):
        state = [(s + rc[r * t + i]) % POSEIDON_PRIME for i, s in enumerate(state)]
        if r < half_f or r >= half_f + params.rounds_p:
            state = [_pow5(s) for s in state]
        else:
            state[0] = _pow5(state[0])
        state = [
            sum(m * s for m, s in zip(row, state)) % POSEIDON_PRIME
            for row in params.mds
        ]
    return state


def poseidon_hash(inputs: Sequence[int]) -> int:
    """Fixed-length hash of 1..12 field elements (width = len(inputs) + 1)."""
    if not 1 <= len(inputs) <= MAX_WIDTH - 1:
        raise ValueError(f"expected 1 to {MAX_WIDTH - 1} inputs, got {len(inputs)}")
    return poseidon_permutation([0] + list(inputs))[0]


def poseidon_sponge(elements: Sequence[int], width: int = 3) -> int:
    """Variable-length sponge: capacity 1, rate width - 1, squeeze state[0]."""
    rate = width - 1
    state = [0] * width
    for start in range(0, len(elements), rate):
        block = elements[start:start + rate]
        for i, e in enumerate(block):
            state[1 + i] = (state[1 + i] + e) % POSEIDON_PRIME
        state = poseidon_permutation(state)
    return state[0]


def poseidon_hash_bytes(data: bytes) -> int:
    """Hash a byte string to a BN254 scalar field element.

    The byte length is absorbed first so that inputs differing only by
    trailing zero bytes do not collide.
    """
    chunks = [
        int.from_bytes(data[i:i + BYTES_PER_ELEMENT], "big")
        for i in range(0, len(data), BYTES_PER_ELEMENT)
    ]
    return poseidon_sponge([len(data)] + chunks)
