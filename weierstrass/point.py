import dataclasses
import typing as t


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Coordinate {name} must be an integer")
    return value


class Point:
    """
    A point usable with the curve arithmetic in weierstrass.curve.

    A point is either an AffinePoint carrying two integer coordinates or the
    InfinityPoint identity element. Points are not bound to a curve: the same
    value can be handed to any Curve, and checking that it actually lies on
    that curve is up to the caller (see Curve.is_on_curve).
    """

    def __init__(self) -> None:
        raise TypeError("Use Point.from_coordinates or Point.infinity for construction")

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> "AffinePoint":
        """
        Create an affine point from raw coordinates.

        The coordinates are stored as given, without reduction modulo any
        field prime and without checking the curve equation.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            AffinePoint with the given coordinates

        Raises:
            TypeError: If a coordinate is not an integer
        """
        return AffinePoint(_require_int(x, "x"), _require_int(y, "y"))

    @classmethod
    def infinity(cls) -> "InfinityPoint":
        """Return the point at infinity."""
        return INFINITY

    @property
    def is_infinity(self) -> bool:
        raise NotImplementedError

    @property
    def coordinates(self) -> t.Tuple[int, int]:
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class AffinePoint(Point):
    """A point given by its affine (x, y) coordinates."""

    x: int
    y: int

    @property
    def is_infinity(self) -> bool:
        return False

    @property
    def coordinates(self) -> t.Tuple[int, int]:
        return self.x, self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclasses.dataclass(frozen=True)
class InfinityPoint(Point):
    """
    The point at infinity, identity element of the curve group.

    It carries no coordinates; reading x, y or coordinates raises ValueError.
    Every InfinityPoint compares equal to every other one and to nothing else.
    """

    @property
    def is_infinity(self) -> bool:
        return True

    @property
    def x(self) -> int:
        raise ValueError("Point at infinity has no coordinates")

    @property
    def y(self) -> int:
        raise ValueError("Point at infinity has no coordinates")

    @property
    def coordinates(self) -> t.Tuple[int, int]:
        raise ValueError("Point at infinity has no coordinates")

    def __str__(self) -> str:
        return "Infinity"


INFINITY = InfinityPoint()
