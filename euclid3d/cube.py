"""A cube in 3D space, as eight vertices in a fixed topological order"""

import functools
import logging
import operator
from typing import Any, Callable, Iterable, Optional

import attrs
from expression import Result

from euclid3d.exceptions import InvalidArgumentError
from euclid3d.geometry import Point3D
from euclid3d.line import Line3D
from euclid3d.utilities import fail_invalid_argument, warn_if_nan, wrap_exception

__all__ = ["EDGE_INDICES", "NUMBER_OF_VERTICES", "Cube3D"]

logger = logging.getLogger(__name__)

NUMBER_OF_VERTICES = 8

# Vertices 0-3 go around one face, 4-7 around the opposite face in matching order, and i joins i + 4.
EDGE_INDICES: tuple[tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0), # bottom face
    (4, 5), (5, 6), (6, 7), (7, 4), # top face
    (0, 4), (1, 5), (2, 6), (3, 7), # vertical edges
)

# Sign of the offset from center along (x, y, z) for each vertex
_CORNER_SIGNS: tuple[tuple[int, int, int], ...] = (
    (-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
    (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1),
)


def _copy_vertices(vertices: Optional[Iterable[Point3D]]) -> tuple[Point3D, ...]:
    if vertices is None:
        fail_invalid_argument(
            "Exactly eight vertices must be provided",
            logger=logger,
            log_message="Null vertices provided for Cube3D construction",
        )
    vertices = list(vertices)
    if len(vertices) != NUMBER_OF_VERTICES:
        fail_invalid_argument(
            "Exactly eight vertices must be provided",
            logger=logger,
            log_message=f"Invalid vertex count for Cube3D construction: {len(vertices)}",
        )
    if any(v is None for v in vertices):
        fail_invalid_argument(
            "Vertices cannot be None",
            logger=logger,
            log_message="Null vertex in array for Cube3D construction",
        )
    for v in vertices:
        if not isinstance(v, Point3D):
            raise TypeError(f"Cube vertex isn't a Point3D, but {type(v).__name__}")
    return tuple(v.copy() for v in vertices)


@attrs.define(frozen=True, eq=False)
class Cube3D:
    """
    A cube given by its eight vertices.

    The vertices are not checked for actually forming a cube; side length is
    simply the distance between the first two vertices, and volume, surface area,
    and total edge length all follow from that one measurement.

    Equality compares vertices position by position, so the same eight points in
    a different order make a different cube.
    """

    _vertices = attrs.field(converter=_copy_vertices) # type: tuple[Point3D, ...]

    def __attrs_post_init__(self) -> None:
        logger.info("Created Cube3D from provided vertices")

    @classmethod
    def from_center_and_side(cls, center: Point3D, side_length: float) -> "Cube3D":
        """Build the axis-aligned cube with the given center and side length."""
        if center is None:
            fail_invalid_argument(
                "Center cannot be None",
                logger=logger,
                log_message="Null center provided for Cube3D construction",
            )
        if side_length is None or side_length <= 0:
            fail_invalid_argument(
                "Side length must be positive",
                logger=logger,
                log_message=f"Non-positive side length provided: {side_length}",
            )
        warn_if_nan(side_length, logger, "NaN side length provided for Cube3D construction")
        h = side_length / 2.0
        logger.info("Building Cube3D centered at %s with side length %s", center, side_length)
        return cls([
            Point3D(center.x + sx * h, center.y + sy * h, center.z + sz * h)
            for sx, sy, sz in _CORNER_SIGNS
        ])

    @classmethod
    def try_from_vertices(cls, vertices: Iterable[Point3D]) -> Result["Cube3D", InvalidArgumentError]:
        @wrap_exception(InvalidArgumentError)
        def build(vs: Iterable[Point3D]) -> "Cube3D":
            return cls(vs)
        return build(vertices)

    @property
    def vertices(self) -> list[Point3D]:
        """Independent copies of the vertices, in order"""
        return [v.copy() for v in self._vertices]

    def center(self) -> Point3D:
        logger.info("Calculating center of cube")
        sum_x = sum_y = sum_z = 0.0
        for v in self._vertices:
            sum_x += v.x
            sum_y += v.y
            sum_z += v.z
        return Point3D(sum_x / NUMBER_OF_VERTICES, sum_y / NUMBER_OF_VERTICES, sum_z / NUMBER_OF_VERTICES)

    def side_length(self) -> float:
        logger.info("Calculating side length of cube")
        return warn_if_nan(self._vertices[0].distance_to(self._vertices[1]), logger, "NaN side length calculated")

    def total_edge_length(self) -> float:
        logger.info("Calculating total edge length of cube")
        return len(EDGE_INDICES) * self.side_length()

    def volume(self) -> float:
        logger.info("Calculating volume of cube")
        side = self.side_length()
        return side * side * side

    def surface_area(self) -> float:
        logger.info("Calculating surface area of cube")
        side = self.side_length()
        return 6 * side * side

    def edges(self) -> list[Line3D]:
        logger.info("Generating edges for cube")
        return [Line3D(self._vertices[i], self._vertices[j]) for i, j in EDGE_INDICES]

    def rotate_x(self, angle: float) -> "Cube3D":
        """Rotate about the axis through this cube's center parallel to the x-axis."""
        return self._rotate_about_center(Point3D.rotate_x, angle=angle, axis="x")

    def rotate_y(self, angle: float) -> "Cube3D":
        """Rotate about the axis through this cube's center parallel to the y-axis."""
        return self._rotate_about_center(Point3D.rotate_y, angle=angle, axis="y")

    def rotate_z(self, angle: float) -> "Cube3D":
        """Rotate about the axis through this cube's center parallel to the z-axis."""
        return self._rotate_about_center(Point3D.rotate_z, angle=angle, axis="z")

    def translate(self, vector: Point3D) -> "Cube3D":
        if vector is None:
            fail_invalid_argument(
                "Translation vector cannot be None",
                logger=logger,
                log_message="Null vector provided for translation",
            )
        logger.info("Translating cube by vector %s", vector)
        return Cube3D([v.add(vector) for v in self._vertices])

    def _rotate_about_center(self, rotate: Callable[[Point3D, float], Point3D], *, angle: float, axis: str) -> "Cube3D":
        warn_if_nan(angle, logger, f"NaN angle provided for {axis}-rotation")
        logger.info("Rotating cube around %s-axis by %s radians", axis, angle)
        center = self.center()
        return Cube3D([center.add(rotate(v.subtract(center), angle)) for v in self._vertices])

    def __str__(self) -> str:
        return f"Cube3D[center={self.center()}, sideLength={self.side_length()}]"

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Cube3D):
            return NotImplemented
        logger.debug("Comparing cubes for equality")
        return all(a == b for a, b in zip(self._vertices, other._vertices, strict=True))

    def __hash__(self) -> int:
        return functools.reduce(operator.xor, map(hash, self._vertices), 0)
