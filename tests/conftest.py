"""Shared fixtures for batch scalar-multiplication tests."""

import pytest

from primitives.curve import SECP256K1, TOY, affine_mul
from primitives.field import BigIntEngine


@pytest.fixture
def toy_api() -> BigIntEngine:
    return BigIntEngine(TOY.base.modulus)


@pytest.fixture(scope="module")
def secp_points():
    """Four deterministic secp256k1 points and 256-bit scalars."""
    scalars = [
        0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
        0x1D6E4D4B8F3A2C0E9B7A6F5E4D3C2B1A09F8E7D6C5B4A39281706F5E4D3C2B1A,
        0x8000000000000000000000000000000000000000000000000000000000000001,
        0x7FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF5D576E7357A4501DDFE92F46681B20A0,
    ]
    points = [affine_mul(SECP256K1, SECP256K1.generator, k) for k in (2, 3, 0xDEADBEEF, 0x1234567890ABCDEF)]
    return points, scalars
