"""Static parameters of a batch scalar-multiplication instance."""

import json
from dataclasses import dataclass
from typing import Optional, Tuple

from primitives.curve import CurveParams, get_curve
from primitives.field import BN254_FR, FieldParams, get_field_params


@dataclass(frozen=True)
class ScalarMulConfig:
    """Curve, trace length and transcript layout.

    nb_scalar_bits is the number of double-and-add steps per pair. It
    defaults to the full limb width of the scalar field (256 for the 4x64-bit
    presets), which covers every scalar the hint accepts.
    """
    curve: CurveParams
    nb_scalar_bits: Optional[int] = None
    native: FieldParams = BN254_FR
    challenge_ids: Tuple[str, ...] = ("alpha", "beta")

    def __post_init__(self) -> None:
        if self.nb_scalar_bits is None:
            object.__setattr__(self, "nb_scalar_bits", self.curve.scalar.nb_limbs * self.curve.scalar.bits_per_limb)
        if self.nb_scalar_bits < 0:
            raise ValueError(f"nb_scalar_bits must be non-negative, got {self.nb_scalar_bits}")
        if len(self.challenge_ids) != 2:
            raise ValueError(f"expected two challenge names (fold, compress), got {list(self.challenge_ids)}")

    @property
    def alpha_id(self) -> str:
        return self.challenge_ids[0]

    @property
    def beta_id(self) -> str:
        return self.challenge_ids[1]

    @classmethod
    def from_dict(cls, j: dict) -> "ScalarMulConfig":
        """Build from a parsed config, e.g. {"curve": "secp256k1", "nbScalarBits": 256}."""
        kwargs = {"curve": get_curve(j["curve"])}
        if "nbScalarBits" in j:
            kwargs["nb_scalar_bits"] = int(j["nbScalarBits"])
        if "native" in j:
            kwargs["native"] = get_field_params(j["native"])
        if "challenges" in j:
            kwargs["challenge_ids"] = tuple(j["challenges"])
        return cls(**kwargs)

    @classmethod
    def from_json(cls, path: str) -> "ScalarMulConfig":
        """Load a config file."""
        with open(path) as f:
            j = json.load(f)
        return cls.from_dict(j)
