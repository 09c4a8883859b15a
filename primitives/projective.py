"""Projective point arithmetic over a foreign base field.

Curves are short Weierstrass with a = 0 (y^2 = x^3 + b). The formulas never
need b, which is why the scalar-multiplication hint does not receive it.
Points are immutable tuples of ints; every operation returns a new point.

Formulas (explicit-formulas database naming):
    addition: add-1998-cmo-2
    doubling: dbl-2007-bl with a = 0
"""

from typing import NamedTuple, Optional

from primitives.field import BigIntEngine


class AffinePoint(NamedTuple):
    """Affine coordinates (x, y) of a finite point."""
    x: int
    y: int


class ProjectivePoint(NamedTuple):
    """Projective coordinates (X : Y : Z), affine point (X/Z, Y/Z); Z = 0 is the identity."""
    x: int
    y: int
    z: int


IDENTITY = ProjectivePoint(0, 1, 0)


def from_affine(point: AffinePoint) -> ProjectivePoint:
    return ProjectivePoint(point.x, point.y, 1)


def is_identity(point: ProjectivePoint) -> bool:
    return point.z == 0


def to_affine(api: BigIntEngine, point: ProjectivePoint) -> Optional[AffinePoint]:
    """Normalize to affine form; None stands for the identity."""
    if is_identity(point):
        return None
    z_inv = api.inv(point.z)
    return AffinePoint(api.mul(point.x, z_inv), api.mul(point.y, z_inv))


def proj_equal(api: BigIntEngine, p1: ProjectivePoint, p2: ProjectivePoint) -> bool:
    """Equality up to projective scaling."""
    if is_identity(p1) or is_identity(p2):
        return is_identity(p1) and is_identity(p2)
    return (api.mul(p1.x, p2.z) == api.mul(p2.x, p1.z)
            and api.mul(p1.y, p2.z) == api.mul(p2.y, p1.z))


def proj_add(api: BigIntEngine, p1: ProjectivePoint, p2: ProjectivePoint) -> ProjectivePoint:
    """Add two projective points."""
    if is_identity(p1):
        return p2
    if is_identity(p2):
        return p1

    y1z2 = api.mul(p1.y, p2.z)
    x1z2 = api.mul(p1.x, p2.z)
    z1z2 = api.mul(p1.z, p2.z)
    u = api.sub(api.mul(p2.y, p1.z), y1z2)
    v = api.sub(api.mul(p2.x, p1.z), x1z2)

    if v == 0:
        # Same x coordinate: either P + P or P + (-P).
        if u == 0:
            return proj_double(api, p1)
        return IDENTITY

    uu = api.mul(u, u)
    vv = api.mul(v, v)
    vvv = api.mul(v, vv)
    r = api.mul(vv, x1z2)
    a = api.sub(api.sub(api.mul(uu, z1z2), vvv), api.add(r, r))

    x3 = api.mul(v, a)
    y3 = api.sub(api.mul(u, api.sub(r, a)), api.mul(vvv, y1z2))
    z3 = api.mul(vvv, z1z2)
    return ProjectivePoint(x3, y3, z3)


def proj_double(api: BigIntEngine, p: ProjectivePoint) -> ProjectivePoint:
    """Double a projective point."""
    if is_identity(p) or p.y % api.modulus == 0:
        return IDENTITY

    xx = api.mul(p.x, p.x)
    w = api.add(api.add(xx, xx), xx)
    s = api.mul(api.add(p.y, p.y), p.z)
    ss = api.mul(s, s)
    sss = api.mul(s, ss)
    r = api.mul(p.y, s)
    rr = api.mul(r, r)
    x_plus_r = api.add(p.x, r)
    b = api.sub(api.sub(api.mul(x_plus_r, x_plus_r), xx), rr)
    h = api.sub(api.mul(w, w), api.add(b, b))

    x3 = api.mul(h, s)
    y3 = api.sub(api.mul(w, api.sub(b, h)), api.add(rr, rr))
    return ProjectivePoint(x3, y3, sss)


def proj_select(bit: int, if_one: ProjectivePoint, if_zero: ProjectivePoint) -> ProjectivePoint:
    """Return if_one when bit is 1, if_zero when bit is 0."""
    if bit == 1:
        return if_one
    if bit == 0:
        return if_zero
    raise ValueError(f"selector must be 0 or 1, got {bit}")
