"""Canonical byte encodings of scalars and points for transcript binding."""

from primitives.errors import InvalidInputError
from primitives.field import FieldParams
from primitives.projective import AffinePoint


def marshal_scalar(scalar: int, params: FieldParams) -> bytes:
    """Scalar reduced modulo the scalar field, big-endian, fixed width."""
    return (scalar % params.modulus).to_bytes(params.byte_length, "big")


def marshal_point(point: AffinePoint, params: FieldParams) -> bytes:
    """X || Y, each big-endian at the base field byte width."""
    for name, coord in zip(("x", "y"), point):
        if not 0 <= coord < params.modulus:
            raise InvalidInputError(f"point {name}-coordinate {coord} is not canonical in {params.name}")
    width = params.byte_length
    return point.x.to_bytes(width, "big") + point.y.to_bytes(width, "big")
