import dataclasses
import logging
import typing as t

from . import point as pt


logger = logging.getLogger(__name__)


def _inverse_mod(value: int, modulus: int) -> t.Optional[int]:
    """
    Compute the inverse of value modulo modulus.

    Args:
        value: Integer to invert
        modulus: Field modulus

    Returns:
        The inverse in range [0, modulus), or None if value has no inverse
    """
    if value % modulus == 0:
        return None
    try:
        return pow(value, -1, modulus)
    except ValueError:
        # gcd(value, modulus) != 1, only possible for a composite modulus
        return None


def _require_point(value: object) -> pt.Point:
    if not isinstance(value, pt.Point):
        raise TypeError("Can only operate on Point instances")
    return value


def _require_scalar(k: object) -> int:
    if isinstance(k, bool) or not isinstance(k, int):
        raise TypeError("Scalar must be an integer")
    if k < 0:
        raise ValueError("Scalar must be a non-negative integer")
    return k


@dataclasses.dataclass(frozen=True)
class Curve:
    """
    Short Weierstrass curve y^2 = x^3 + a*x + b over the prime field of order p.

    The parameters are stored as given. Nothing checks that p is prime or that
    the curve is non-singular, and a and b are not reduced modulo p.

    Every operation returns a new Point and leaves its inputs untouched, so a
    single Curve may be shared freely between threads.
    """

    a: int
    b: int
    p: int

    @classmethod
    def from_parameters(cls, a: int, b: int, p: int) -> "Curve":
        """Create a curve from its coefficients and field modulus."""
        return cls(a, b, p)

    def __str__(self) -> str:
        return f"y^2 = x^3 + {self.a}*x + {self.b} mod {self.p}"

    def is_on_curve(self, point: pt.Point) -> bool:
        """
        Check whether a point satisfies the curve equation.

        The point at infinity belongs to every curve and always passes.

        Args:
            point: Point to check

        Returns:
            True if y^2 = x^3 + a*x + b (mod p)
        """
        if _require_point(point).is_infinity:
            return True
        x, y = point.coordinates
        left = (y * y) % self.p
        right = (x * x * x + self.a * x + self.b) % self.p
        return left == right

    def coordinates_in_field(self, point: pt.Point) -> bool:
        """
        Check whether both coordinates lie in range [0, p).

        This says nothing about the curve equation; see is_on_curve.
        The point at infinity has no coordinates and always passes.
        """
        if _require_point(point).is_infinity:
            return True
        x, y = point.coordinates
        return 0 <= x < self.p and 0 <= y < self.p

    def validate_point(self, point: pt.Point) -> pt.Point:
        """
        Ensure a point is a reduced point of this curve.

        Args:
            point: Point to validate

        Returns:
            The same point

        Raises:
            ValueError: If a coordinate is out of field range or the point is
                not on the curve
        """
        if not self.coordinates_in_field(point):
            raise ValueError("Point coordinates out of field range")
        if not self.is_on_curve(point):
            raise ValueError("Point is not on the curve")
        return point

    def negate(self, point: pt.Point) -> pt.Point:
        """Return the additive inverse (x, -y mod p) of a point."""
        if _require_point(point).is_infinity:
            return pt.INFINITY
        return pt.Point.from_coordinates(point.x, (self.p - point.y) % self.p)

    def double(self, point: pt.Point) -> pt.Point:
        """
        Double a point.

        Args:
            point: Point to double

        Returns:
            2 * point, which is the point at infinity when the tangent is
            vertical (y = 0) or when point is itself the point at infinity
        """
        if _require_point(point).is_infinity:
            return pt.INFINITY

        x, y = point.coordinates
        inverse = _inverse_mod(2 * y, self.p)
        if inverse is None:
            logger.debug("Vertical tangent at %s, doubling gives infinity", point)
            return pt.INFINITY

        s = ((3 * x * x + self.a) * inverse) % self.p
        x3 = (s * s - 2 * x) % self.p
        y3 = (s * (x - x3) - y) % self.p
        return pt.Point.from_coordinates(x3, y3)

    def add(self, p1: pt.Point, p2: pt.Point) -> pt.Point:
        """
        Add two points with the chord-and-tangent group law.

        Special cases are resolved in order: the point at infinity is the
        identity, a point plus its negation is the point at infinity, and a
        point plus itself is a doubling.

        Args:
            p1: First point
            p2: Second point

        Returns:
            p1 + p2
        """
        _require_point(p1)
        _require_point(p2)

        if p1.is_infinity:
            return p2
        if p2.is_infinity:
            return p1

        if p2 == self.negate(p1):
            logger.debug("%s and %s cancel out", p1, p2)
            return pt.INFINITY

        if p1 == p2:
            return self.double(p1)

        x1, y1 = p1.coordinates
        x2, y2 = p2.coordinates
        inverse = _inverse_mod(x2 - x1, self.p)
        if inverse is None:
            # Same x without being negations, only reachable with unreduced
            # or off-curve inputs
            logger.debug("Vertical secant through %s and %s", p1, p2)
            return pt.INFINITY

        s = ((y2 - y1) * inverse) % self.p
        x3 = (s * s - x1 - x2) % self.p
        y3 = (s * (x1 - x3) - y1) % self.p
        return pt.Point.from_coordinates(x3, y3)

    def scalar_multiply(self, point: pt.Point, k: int) -> pt.Point:
        """
        Multiply a point by a scalar with the Montgomery ladder.

        The ladder keeps r1 - r0 = point while scanning k from its most
        significant bit. It is NOT constant time: each step branches on the
        current bit and the loop length follows k.bit_length(), so the scalar
        leaks through timing. Do not use it with secret scalars where an
        attacker can measure execution.

        Args:
            point: Point to multiply
            k: Non-negative scalar

        Returns:
            k * point, the point at infinity for k = 0

        Raises:
            TypeError: If k is not an integer
            ValueError: If k is negative
        """
        _require_point(point)
        k = _require_scalar(k)

        r0: pt.Point = pt.INFINITY
        r1 = point
        for i in reversed(range(k.bit_length())):
            if (k >> i) & 1:
                r0 = self.add(r0, r1)
                r1 = self.double(r1)
            else:
                r1 = self.add(r1, r0)
                r0 = self.double(r0)
        return r0

    def scalar_multiply_add(
        self, p1: pt.Point, p2: pt.Point, k: int, u: int
    ) -> pt.Point:
        """
        Compute k * p1 + u * p2.

        Runs two independent ladders and adds the results, so it has the same
        timing leaks as scalar_multiply, once per scalar.
        """
        return self.add(self.scalar_multiply(p1, k), self.scalar_multiply(p2, u))
