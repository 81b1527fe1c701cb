"""Various geometry abstractions and functions"""

import logging
import math
from typing import Any, Optional

import attrs
from numpydoc_decorator import doc
import numpy as np

from euclid3d import EQUALITY_TOLERANCE
from euclid3d.numeric_types import NumberLike, is_real_number
from euclid3d.utilities import fail_invalid_argument, warn_if_nan

__all__ = ["Point3D", "cross", "dot"]

logger = logging.getLogger(__name__)


def _to_coordinate(value: NumberLike) -> float:
    if not is_real_number(value):
        raise TypeError(f"Coordinate isn't a real number, but {type(value).__name__}")
    return float(value)


def _warn_if_nan_coordinate(_, attribute: attrs.Attribute, value: float) -> None:
    warn_if_nan(value, logger, f"Attempted to set {attribute.name} to NaN")


def _log_coordinate_update(_, attribute: attrs.Attribute, value: float) -> float:
    logger.info("Updated %s to %s", attribute.name, value)
    return value


def _check_angle(angle: float, axis: str) -> None:
    warn_if_nan(angle, logger, f"NaN angle provided for {axis}-rotation")
    logger.info("Rotating around %s-axis by %s radians", axis, angle)


def _require_other_point(other: Optional["Point3D"], purpose: str) -> "Point3D":
    if other is None:
        fail_invalid_argument(
            "Other point cannot be None",
            logger=logger,
            log_message=f"Null point provided for {purpose}",
        )
    return other


_COORDINATE_FIELD = dict(default=0.0, converter=_to_coordinate, validator=_warn_if_nan_coordinate)


@attrs.define(eq=False, on_setattr=[attrs.setters.convert, attrs.setters.validate, _log_coordinate_update])
class Point3D:
    """
    A point, or equivalently a vector from the origin, in 3D Euclidean space.

    Coordinates may be reassigned in place; every other operation leaves the
    receiver alone and builds a new point. NaN and infinite coordinates are
    accepted, with a warning logged for NaN.

    Equality is within an absolute tolerance on each coordinate, so it's not
    transitive, and the hash agrees with equality only for points whose
    coordinates are bit-for-bit identical.

    Nothing here is synchronised; share a point across threads only if no thread
    reassigns its coordinates, or guard it externally.
    """

    x = attrs.field(**_COORDINATE_FIELD) # type: float
    y = attrs.field(**_COORDINATE_FIELD) # type: float
    z = attrs.field(**_COORDINATE_FIELD) # type: float

    def __attrs_post_init__(self) -> None:
        logger.info("Created Point3D at (%s, %s, %s)", self.x, self.y, self.z)

    @classmethod
    def origin(cls) -> "Point3D":
        return cls(0.0, 0.0, 0.0)

    @property
    def to_tuple(self) -> tuple[float, float, float]:
        return attrs.astuple(self)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_tuple, dtype=np.float64)

    def copy(self) -> "Point3D":
        return Point3D(self.x, self.y, self.z)

    def distance_to(self, other: "Point3D") -> float:
        """Euclidean distance between this point and the other one"""
        other = _require_other_point(other, "distance calculation")
        logger.info("Calculating distance from %s to %s", self, other)
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def rotate_x(self, angle: float) -> "Point3D":
        """Rotate (right-handed) by the given angle, in radians, about the x-axis through the origin."""
        _check_angle(angle, "x")
        cos, sin = float(np.cos(angle)), float(np.sin(angle))
        return Point3D(self.x, self.y * cos - self.z * sin, self.y * sin + self.z * cos)

    def rotate_y(self, angle: float) -> "Point3D":
        """Rotate (right-handed) by the given angle, in radians, about the y-axis through the origin."""
        _check_angle(angle, "y")
        cos, sin = float(np.cos(angle)), float(np.sin(angle))
        return Point3D(self.x * cos + self.z * sin, self.y, -self.x * sin + self.z * cos)

    def rotate_z(self, angle: float) -> "Point3D":
        """Rotate (right-handed) by the given angle, in radians, about the z-axis through the origin."""
        _check_angle(angle, "z")
        cos, sin = float(np.cos(angle)), float(np.sin(angle))
        return Point3D(self.x * cos - self.y * sin, self.x * sin + self.y * cos, self.z)

    def magnitude(self) -> float:
        logger.info("Calculating magnitude of point %s", self)
        return self.distance_to(Point3D.origin())

    def add(self, other: "Point3D") -> "Point3D":
        other = _require_other_point(other, "addition")
        logger.info("Adding point %s", other)
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Point3D") -> "Point3D":
        other = _require_other_point(other, "subtraction")
        logger.info("Subtracting point %s", other)
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: "Point3D") -> "Point3D":
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Point3D") -> "Point3D":
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Point3D":
        return Point3D(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"Point3D[x={self.x}, y={self.y}, z={self.z}]"

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Point3D):
            return NotImplemented
        logger.debug("Comparing points for equality")
        return abs(self.x - other.x) < EQUALITY_TOLERANCE and \
            abs(self.y - other.y) < EQUALITY_TOLERANCE and \
            abs(self.z - other.z) < EQUALITY_TOLERANCE

    def __hash__(self) -> int:
        return hash(self.x) ^ hash(self.y) ^ hash(self.z)


@doc(
    summary="Compute the scalar (dot) product of two vectors",
    parameters=dict(
        a="The left operand",
        b="The right operand",
    ),
    returns="The sum of the coordinate-wise products",
)
def dot(a: Point3D, b: Point3D) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


@doc(
    summary="Compute the vector (cross) product of two vectors",
    parameters=dict(
        a="The left operand",
        b="The right operand",
    ),
    returns="A new vector perpendicular to both operands, oriented by the right-hand rule",
)
def cross(a: Point3D, b: Point3D) -> Point3D:
    return Point3D(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )
