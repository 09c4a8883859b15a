"""
Fiat-Shamir transcript with named, ordered challenges.

The transcript is created with the full list of challenge names it will ever
produce. Values are bound to a challenge name; computing a challenge hashes

    name || value of the previous challenge (if any) || bindings in bind order

with the native-field hash. Once computed, a challenge is frozen: later binds
to it are rejected, and recomputing returns the cached value. Challenges must
be computed in declaration order, and the first challenge must have at least
one binding: every later challenge is chained to it.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from primitives.errors import TranscriptError
from primitives.poseidon import POSEIDON_PRIME, poseidon_hash_bytes

# Hash from bytes to a native field element
Hasher = Callable[[bytes], int]


@dataclass
class _ChallengeState:
    position: int
    bindings: List[bytes] = field(default_factory=list)
    value: Optional[int] = None

    @property
    def is_computed(self) -> bool:
        return self.value is not None


class Transcript:
    """
    Labelled Fiat-Shamir transcript over the native field.

    Attributes:
        challenge_ids: Challenge names in derivation order
        native_modulus: Modulus of the field challenges live in
    """

    def __init__(
        self,
        challenge_ids: Sequence[str],
        hasher: Hasher = poseidon_hash_bytes,
        native_modulus: int = POSEIDON_PRIME,
    ):
        if len(challenge_ids) == 0:
            raise ValueError("transcript needs at least one challenge")
        if len(set(challenge_ids)) != len(challenge_ids):
            raise ValueError(f"duplicate challenge names in {list(challenge_ids)}")

        self.challenge_ids = tuple(challenge_ids)
        self.native_modulus = native_modulus
        self._hasher = hasher
        self._challenges: Dict[str, _ChallengeState] = {
            name: _ChallengeState(position=i) for i, name in enumerate(self.challenge_ids)
        }

    def _get(self, challenge_id: str) -> _ChallengeState:
        if challenge_id not in self._challenges:
            raise TranscriptError(f"challenge '{challenge_id}' not found. "
                                  f"Available: {list(self.challenge_ids)}")
        return self._challenges[challenge_id]

    def bind(self, challenge_id: str, data: bytes) -> None:
        """Bind data to a challenge that has not been computed yet."""
        challenge = self._get(challenge_id)
        if challenge.is_computed:
            raise TranscriptError(f"challenge '{challenge_id}' already computed, cannot bind")
        challenge.bindings.append(bytes(data))

    def compute_challenge(self, challenge_id: str) -> int:
        """Derive (or return the cached) native field element for challenge_id."""
        challenge = self._get(challenge_id)
        if challenge.is_computed:
            return challenge.value

        if challenge.position == 0 and not challenge.bindings:
            raise TranscriptError(f"challenge '{challenge_id}' has no bindings")

        payload = bytearray(challenge_id.encode())
        if challenge.position > 0:
            previous_id = self.challenge_ids[challenge.position - 1]
            previous = self._challenges[previous_id]
            if not previous.is_computed:
                raise TranscriptError(f"previous challenge '{previous_id}' not computed "
                                      f"before '{challenge_id}'")
            payload += previous.value.to_bytes(self.native_byte_length, "big")
        for binding in challenge.bindings:
            payload += binding

        challenge.value = self._hasher(bytes(payload)) % self.native_modulus
        return challenge.value

    def is_computed(self, challenge_id: str) -> bool:
        return self._get(challenge_id).is_computed

    def bindings(self, challenge_id: str) -> Tuple[bytes, ...]:
        """Data bound to challenge_id so far, in bind order."""
        return tuple(self._get(challenge_id).bindings)

    @property
    def native_byte_length(self) -> int:
        return (self.native_modulus.bit_length() + 7) // 8
