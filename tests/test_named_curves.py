"""
Tests for named_curves.py - Curve parameter presets
"""

import pytest
from weierstrass import named_curves
from weierstrass import point


NAMED = [
    (named_curves.SECP256K1, named_curves.SECP256K1_G, named_curves.SECP256K1_ORDER),
    (named_curves.P256, named_curves.P256_G, named_curves.P256_ORDER),
]


class TestToyCurve:
    """Tests for the small example curve."""

    def test_parameters(self):
        """Test the example curve parameters and rendering."""
        assert str(named_curves.TOY_CURVE) == "y^2 = x^3 + 63*x + 60 mod 97"

    def test_point_on_curve(self):
        """Test the example point lies on the example curve."""
        assert named_curves.TOY_CURVE.is_on_curve(named_curves.TOY_POINT)


class TestSecp256k1:
    """Tests for the secp256k1 preset."""

    def test_double_generator(self):
        """Test 2G against the known secp256k1 value."""
        doubled = named_curves.SECP256K1.double(named_curves.SECP256K1_G)
        assert doubled == point.Point.from_coordinates(
            0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
            0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
        )

    def test_triple_generator(self):
        """Test 3G x-coordinate against the known secp256k1 value."""
        tripled = named_curves.SECP256K1.scalar_multiply(named_curves.SECP256K1_G, 3)
        assert tripled.x == 0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9
        assert tripled.y % 2 == 0

    def test_order_minus_one_is_negation(self):
        """Test (n - 1) * G = -G."""
        c = named_curves.SECP256K1
        result = c.scalar_multiply(named_curves.SECP256K1_G, named_curves.SECP256K1_ORDER - 1)
        assert result == c.negate(named_curves.SECP256K1_G)


@pytest.mark.parametrize("c,g,n", NAMED)
class TestNamedCurveGenerators:
    """Tests shared by all cryptographic presets."""

    def test_generator_valid(self, c, g, n):
        """Test the generator is a reduced point of its curve."""
        assert c.validate_point(g) == g

    def test_order(self, c, g, n):
        """Test n * G = O and (n + 1) * G = G."""
        assert c.scalar_multiply(g, n) == point.INFINITY
        assert c.scalar_multiply(g, n + 1) == g

    def test_combined_scalar(self, c, g, n):
        """Test k * G + (n - k) * G = O."""
        k = 0x1234567890ABCDEF
        assert c.scalar_multiply_add(g, g, k, n - k) == point.INFINITY

    def test_closure(self, c, g, n):
        """Test a large multiple stays on the curve."""
        result = c.scalar_multiply(g, n // 3)
        assert c.validate_point(result) == result
