## planes in three dimensions for yapDatum

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

"""planes for **yapDatum**

A ``Plane3d`` is an origin point plus three directions: two in-plane
directions and the normal.  The directions always form a right-handed
orthonormal basis, ``normal_direction == x_direction x y_direction``.
Every constructor and transformation here re-derives the basis so this
stays true.  Mirroring, which reverses handedness, reflects the x
direction and the normal and recomputes ``y_direction`` from them, so
the normal of a mirrored plane is the mirror image of the normal.

The normal decides sign conventions elsewhere: a point's signed
distance from a plane is positive on the side the normal points toward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from yapdatum.axis import Axis3d
from yapdatum.direction import Direction3d, orthonormal_cross
from yapdatum.geometry_checks import check_basis3d, enforce
from yapdatum.point import Point3d

if TYPE_CHECKING:
    from yapdatum.frame import Frame3d, PlanarFrame3d
    from yapdatum.vector import Vector3d


@dataclass(frozen=True)
class Plane3d:
    origin: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    normal_direction: Direction3d

    def __post_init__(self):
        if __debug__:
            enforce(check_basis3d(self.x_direction.components,
                                  self.y_direction.components,
                                  self.normal_direction.components),
                    'Plane3d')

    @classmethod
    def xy(cls) -> Plane3d:
        return cls(Point3d.origin(), Direction3d.positive_x(),
                   Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def yz(cls) -> Plane3d:
        return cls(Point3d.origin(), Direction3d.positive_y(),
                   Direction3d.positive_z(), Direction3d.positive_x())

    @classmethod
    def zx(cls) -> Plane3d:
        return cls(Point3d.origin(), Direction3d.positive_z(),
                   Direction3d.positive_x(), Direction3d.positive_y())

    @classmethod
    def through(cls, point: Point3d, normal: Direction3d) -> Plane3d:
        """Plane through ``point`` with the given normal; the in-plane
        directions come from ``normal.perpendicular_basis()``."""
        u, v = normal.perpendicular_basis()
        return cls(point, u, v, normal)

    @classmethod
    def with_normal(cls, normal: Direction3d,
                    origin: Optional[Point3d] = None) -> Plane3d:
        return cls.through(Point3d.origin() if origin is None else origin, normal)

    @property
    def normal_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.normal_direction)

    @property
    def planar_frame(self) -> PlanarFrame3d:
        from yapdatum.frame import PlanarFrame3d
        return PlanarFrame3d(self.origin, self.x_direction, self.y_direction)

    def offset_by(self, distance: float) -> Plane3d:
        """Move the plane ``distance`` along its normal."""
        return self.move_to(self.origin.translate_in(self.normal_direction, distance))

    def flip(self) -> Plane3d:
        """Same plane, normal reversed.  ``y_direction`` is reversed too so
        the basis stays right-handed."""
        return Plane3d(self.origin, self.x_direction,
                       self.y_direction.reverse(),
                       self.normal_direction.reverse())

    def move_to(self, point: Point3d) -> Plane3d:
        return Plane3d(point, self.x_direction, self.y_direction,
                       self.normal_direction)

    def translate_by(self, v: Vector3d) -> Plane3d:
        return self.move_to(self.origin.translate_by(v))

    def rotate_around(self, axis: Axis3d, angle: float) -> Plane3d:
        return Plane3d(self.origin.rotate_around(axis, angle),
                       self.x_direction.rotate_around(axis, angle),
                       self.y_direction.rotate_around(axis, angle),
                       self.normal_direction.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> Plane3d:
        x = self.x_direction.mirror_across(plane)
        n = self.normal_direction.mirror_across(plane)
        return Plane3d(self.origin.mirror_across(plane), x,
                       orthonormal_cross(n, x), n)

    def localize_to(self, frame: Frame3d) -> Plane3d:
        return Plane3d(self.origin.localize_to(frame),
                       self.x_direction.localize_to(frame),
                       self.y_direction.localize_to(frame),
                       self.normal_direction.localize_to(frame))

    def place_in(self, frame: Frame3d) -> Plane3d:
        return Plane3d(self.origin.place_in(frame),
                       self.x_direction.place_in(frame),
                       self.y_direction.place_in(frame),
                       self.normal_direction.place_in(frame))


__all__ = ['Plane3d']
