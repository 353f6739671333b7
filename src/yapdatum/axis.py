## axes in two and three dimensions for yapDatum

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""axes for **yapDatum**

An axis is an origin point plus a direction: a directed line.  Axes
are used as rotation axes, as lines to project onto or measure along,
and (in 2D) as mirror lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yapdatum.direction import Direction2d, Direction3d
from yapdatum.point import Point2d, Point3d

if TYPE_CHECKING:
    from yapdatum.frame import Frame2d, Frame3d, PlanarFrame3d
    from yapdatum.plane import Plane3d
    from yapdatum.vector import Vector2d, Vector3d


@dataclass(frozen=True)
class Axis2d:
    origin: Point2d
    direction: Direction2d

    @classmethod
    def x_axis(cls) -> Axis2d:
        return cls(Point2d.origin(), Direction2d.positive_x())

    @classmethod
    def y_axis(cls) -> Axis2d:
        return cls(Point2d.origin(), Direction2d.positive_y())

    @classmethod
    def through(cls, point: Point2d, direction: Direction2d) -> Axis2d:
        return cls(point, direction)

    def reverse(self) -> Axis2d:
        return Axis2d(self.origin, self.direction.reverse())

    def move_to(self, point: Point2d) -> Axis2d:
        return Axis2d(point, self.direction)

    def translate_by(self, v: Vector2d) -> Axis2d:
        return Axis2d(self.origin.translate_by(v), self.direction)

    def rotate_around(self, center: Point2d, angle: float) -> Axis2d:
        return Axis2d(self.origin.rotate_around(center, angle),
                      self.direction.rotate_by(angle))

    def mirror_across(self, axis: Axis2d) -> Axis2d:
        return Axis2d(self.origin.mirror_across(axis),
                      self.direction.mirror_across(axis))

    def localize_to(self, frame: Frame2d) -> Axis2d:
        return Axis2d(self.origin.localize_to(frame),
                      self.direction.localize_to(frame))

    def place_in(self, frame: Frame2d) -> Axis2d:
        return Axis2d(self.origin.place_in(frame),
                      self.direction.place_in(frame))

    def place_onto(self, frame: PlanarFrame3d) -> Axis3d:
        """The 3D axis lying in the plane of ``frame`` that this axis
        describes in the frame's coordinates."""
        return Axis3d(self.origin.place_onto(frame),
                      self.direction.place_onto(frame))


@dataclass(frozen=True)
class Axis3d:
    origin: Point3d
    direction: Direction3d

    @classmethod
    def x_axis(cls) -> Axis3d:
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def y_axis(cls) -> Axis3d:
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def z_axis(cls) -> Axis3d:
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def through(cls, point: Point3d, direction: Direction3d) -> Axis3d:
        return cls(point, direction)

    def reverse(self) -> Axis3d:
        return Axis3d(self.origin, self.direction.reverse())

    def move_to(self, point: Point3d) -> Axis3d:
        return Axis3d(point, self.direction)

    def translate_by(self, v: Vector3d) -> Axis3d:
        return Axis3d(self.origin.translate_by(v), self.direction)

    def rotate_around(self, axis: Axis3d, angle: float) -> Axis3d:
        return Axis3d(self.origin.rotate_around(axis, angle),
                      self.direction.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> Axis3d:
        return Axis3d(self.origin.mirror_across(plane),
                      self.direction.mirror_across(plane))

    def localize_to(self, frame: Frame3d) -> Axis3d:
        return Axis3d(self.origin.localize_to(frame),
                      self.direction.localize_to(frame))

    def place_in(self, frame: Frame3d) -> Axis3d:
        return Axis3d(self.origin.place_in(frame),
                      self.direction.place_in(frame))


__all__ = [
    'Axis2d',
    'Axis3d',
]
