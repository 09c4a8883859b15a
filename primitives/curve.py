"""Curve descriptors and an affine reference group law.

The affine law here is deliberately independent of the projective formulas in
primitives.projective: it is the reference the scalar-multiplication traces are
checked against. The point at infinity is represented by None.
"""

from dataclasses import dataclass
from typing import Optional

from primitives.field import BN254_FP, BN254_FR, SECP256K1_FP, SECP256K1_FR, TOY_FP, TOY_FR, FieldParams
from primitives.projective import AffinePoint


@dataclass(frozen=True)
class CurveParams:
    """Short Weierstrass curve y^2 = x^3 + b with a prime-order generator."""
    name: str
    b: int
    base: FieldParams
    scalar: FieldParams
    generator: AffinePoint
    order: int


SECP256K1 = CurveParams(
    name="secp256k1",
    b=7,
    base=SECP256K1_FP,
    scalar=SECP256K1_FR,
    generator=AffinePoint(
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    order=SECP256K1_FR.modulus,
)

BN254 = CurveParams(
    name="bn254",
    b=3,
    base=BN254_FP,
    scalar=BN254_FR,
    generator=AffinePoint(1, 2),
    order=BN254_FR.modulus,
)

# y^2 = x^3 + 7 over GF(97) has 79 points, so every finite point generates it.
TOY = CurveParams(
    name="toy",
    b=7,
    base=TOY_FP,
    scalar=TOY_FR,
    generator=AffinePoint(1, 28),
    order=79,
)

CURVE_PRESETS: dict[str, CurveParams] = {curve.name: curve for curve in (SECP256K1, BN254, TOY)}


def get_curve(name: str) -> CurveParams:
    """Look up a curve preset by name."""
    if name not in CURVE_PRESETS:
        raise KeyError(f"Unknown curve '{name}'. Available: {list(CURVE_PRESETS.keys())}")
    return CURVE_PRESETS[name]


# --- Affine Reference Arithmetic ---

def is_on_curve(curve: CurveParams, point: Optional[AffinePoint]) -> bool:
    if point is None:
        return True
    p = curve.base.modulus
    x, y = point
    return (y * y - x * x * x - curve.b) % p == 0


def affine_neg(curve: CurveParams, point: Optional[AffinePoint]) -> Optional[AffinePoint]:
    if point is None:
        return None
    return AffinePoint(point.x, -point.y % curve.base.modulus)


def affine_double(curve: CurveParams, point: Optional[AffinePoint]) -> Optional[AffinePoint]:
    if point is None or point.y == 0:
        return None
    p = curve.base.modulus
    x, y = point
    m = 3 * x * x * pow(2 * y, -1, p) % p
    nx = (m * m - 2 * x) % p
    return AffinePoint(nx, (m * (x - nx) - y) % p)


def affine_add(curve: CurveParams, p1: Optional[AffinePoint], p2: Optional[AffinePoint]) -> Optional[AffinePoint]:
    if p1 is None or p2 is None:
        return p1 if p2 is None else p2
    p = curve.base.modulus
    x1, y1 = p1
    x2, y2 = p2
    if x1 == x2:
        return affine_double(curve, p1) if y1 == y2 else None
    m = (y2 - y1) * pow(x2 - x1, -1, p) % p
    nx = (m * m - x1 - x2) % p
    return AffinePoint(nx, (m * (x1 - nx) - y1) % p)


def affine_mul(curve: CurveParams, point: Optional[AffinePoint], n: int) -> Optional[AffinePoint]:
    """Double-and-add scalar multiplication."""
    if n < 0:
        return affine_mul(curve, affine_neg(curve, point), -n)
    out, a = None, point
    while n:
        if n & 1:
            out = affine_add(curve, out, a)
        a, n = affine_double(curve, a), n >> 1
    return out
