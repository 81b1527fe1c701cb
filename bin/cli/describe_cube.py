"""Describe a cube built from a center and side length, optionally rotated about its center and then translated."""

import argparse
import logging
from typing import *

from euclid3d.cube import Cube3D
from euclid3d.exceptions import InvalidArgumentError
from euclid3d.geometry import Point3D


def workflow(
    center: Point3D,
    side_length: float,
    rotation: tuple[float, float, float] = (0.0, 0.0, 0.0),
    translation: Optional[Point3D] = None,
    ) -> Cube3D:
    rot_x, rot_y, rot_z = rotation
    cube = Cube3D.from_center_and_side(center, side_length).rotate_x(rot_x).rotate_y(rot_y).rotate_z(rot_z)
    if translation is not None:
        cube = cube.translate(translation)
    return cube


def report(cube: Cube3D) -> List[str]:
    lines = [
        str(cube),
        f"volume: {cube.volume()}",
        f"surface area: {cube.surface_area()}",
        f"total edge length: {cube.total_edge_length()}",
        ]
    lines.extend(f"edge {i}: {edge}" for i, edge in enumerate(cube.edges()))
    return lines


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Describe a cube: its measurements and edges.")
    parser.add_argument("center", type=float, nargs=3, metavar=("X", "Y", "Z"), help="Coordinates of the cube's center")
    parser.add_argument("side_length", type=float, help="Length of each side of the cube")
    parser.add_argument("--rotate-x", type=float, default=0.0, help="Rotation (radians) about the center, parallel to x-axis")
    parser.add_argument("--rotate-y", type=float, default=0.0, help="Rotation (radians) about the center, parallel to y-axis")
    parser.add_argument("--rotate-z", type=float, default=0.0, help="Rotation (radians) about the center, parallel to z-axis")
    parser.add_argument("--translate", type=float, nargs=3, metavar=("X", "Y", "Z"), help="Vector by which to move the cube, after rotation")
    parser.add_argument("--verbose", action="store_true", help="Log each geometric computation")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        cube = workflow(
            center=Point3D(*args.center),
            side_length=args.side_length,
            rotation=(args.rotate_x, args.rotate_y, args.rotate_z),
            translation=None if args.translate is None else Point3D(*args.translate),
            )
    except InvalidArgumentError as e:
        parser.error(str(e))
    for line in report(cube):
        print(line)
