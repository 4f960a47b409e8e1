"""
Shared fixtures: loading curve test vectors from tests/data
"""

import json
import pathlib
import typing as t

import pytest

from weierstrass import curve
from weierstrass import point


_DATA_DIR = pathlib.Path(__file__).parent / "data"


def _to_point(raw: t.Optional[t.Dict[str, int]]) -> point.Point:
    if raw is None:
        return point.Point.infinity()
    return point.Point.from_coordinates(raw["x"], raw["y"])


@pytest.fixture
def load_fixture() -> t.Callable[[str], t.Tuple[curve.Curve, t.Dict[str, t.Any]]]:
    """Return a loader mapping a fixture file name to its curve and raw data."""

    def _load(name: str) -> t.Tuple[curve.Curve, t.Dict[str, t.Any]]:
        data = json.loads((_DATA_DIR / name).read_text())
        c = curve.Curve.from_parameters(data["a"], data["b"], data["p"])
        return c, data

    return _load


@pytest.fixture
def to_point() -> t.Callable[[t.Optional[t.Dict[str, int]]], point.Point]:
    """Return the converter from a JSON point (null for infinity) to a Point."""
    return _to_point
