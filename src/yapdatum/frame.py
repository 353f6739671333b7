## coordinate frames for yapDatum

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

"""coordinate frames for **yapDatum**

====================
OVERVIEW
====================

A frame is a local coordinate system: an origin plus an orthonormal,
right-handed set of directions.  Any point, vector, direction or datum
can be moved between global coordinates and a frame's local
coordinates::

    local = p.localize_to(frame)
    p2 = local.place_in(frame)      # p2 == p, to rounding

``localize_to`` takes the displacement from the frame origin and dots
it with each frame direction; ``place_in`` rebuilds
``origin + x*X + y*Y (+ z*Z)``.  The two are exact inverses because the
basis is orthonormal.

frame types
===========

``Frame2d``
  origin plus ``x_direction`` and ``y_direction``, where ``y_direction``
  is ``x_direction`` turned counter-clockwise by 90 degrees.

``Frame3d``
  origin plus ``x_direction``, ``y_direction`` and ``z_direction`` with
  ``z == x cross y``.

``PlanarFrame3d``
  a 2D coordinate system embedded in space: a 3D origin plus two
  orthogonal 3D directions.  The normal ``x cross y`` is derived, never
  stored.  ``Point3d.project_into_2d`` and ``Point2d.place_onto`` move
  between space and the frame's plane.

handedness
==========

Mirroring reverses handedness.  When a frame is mirrored the origin and
the in-plane directions are reflected and the remaining direction is
recomputed from them, so a mirrored frame is still right-handed.  Its
z direction is therefore the reverse of the reflected z direction, and
local x and y coordinates survive the mirror while local z changes
sign.  Planes keep their normal instead (see ``Plane3d.mirror_across``).  The
debug-mode constructor check (see ``yapdatum.geometry_checks``)
rejects left-handed bases outright.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from yapdatum import xform
from yapdatum.axis import Axis2d, Axis3d
from yapdatum.direction import Direction2d, Direction3d, orthonormal_cross
from yapdatum.geometry_checks import (
    check_basis3d,
    check_frame2d,
    check_orthonormal_pair,
    enforce,
)
from yapdatum.plane import Plane3d
from yapdatum.point import Point2d, Point3d

if TYPE_CHECKING:
    from yapdatum.vector import Vector2d, Vector3d


## two dimensional frames
## ----------------------

@dataclass(frozen=True)
class Frame2d:
    origin: Point2d
    x_direction: Direction2d
    y_direction: Direction2d

    def __post_init__(self):
        if __debug__:
            enforce(check_frame2d(self.x_direction.components,
                                  self.y_direction.components),
                    'Frame2d')

    @classmethod
    def at_origin(cls) -> Frame2d:
        return cls.at_point(Point2d.origin())

    @classmethod
    def at_point(cls, point: Point2d) -> Frame2d:
        return cls(point, Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def with_x_direction(cls, direction: Direction2d,
                         origin: Optional[Point2d] = None) -> Frame2d:
        if origin is None:
            origin = Point2d.origin()
        return cls(origin, direction, direction.perpendicular())

    @classmethod
    def with_y_direction(cls, direction: Direction2d,
                         origin: Optional[Point2d] = None) -> Frame2d:
        if origin is None:
            origin = Point2d.origin()
        # x is y turned clockwise by 90 degrees
        return cls(origin, Direction2d(direction.y, -direction.x), direction)

    @property
    def x_axis(self) -> Axis2d:
        return Axis2d(self.origin, self.x_direction)

    @property
    def y_axis(self) -> Axis2d:
        return Axis2d(self.origin, self.y_direction)

    def is_right_handed(self) -> bool:
        return self.x_direction.vector.cross(self.y_direction) > 0.0

    def move_to(self, point: Point2d) -> Frame2d:
        return Frame2d(point, self.x_direction, self.y_direction)

    def translate_by(self, v: Vector2d) -> Frame2d:
        return self.move_to(self.origin.translate_by(v))

    def rotate_around(self, center: Point2d, angle: float) -> Frame2d:
        return Frame2d(self.origin.rotate_around(center, angle),
                       self.x_direction.rotate_by(angle),
                       self.y_direction.rotate_by(angle))

    def mirror_across(self, axis: Axis2d) -> Frame2d:
        x = self.x_direction.mirror_across(axis)
        return Frame2d(self.origin.mirror_across(axis), x, x.perpendicular())

    def localize_to(self, parent: Frame2d) -> Frame2d:
        """This frame expressed in the coordinates of ``parent``."""
        return Frame2d(self.origin.localize_to(parent),
                       self.x_direction.localize_to(parent),
                       self.y_direction.localize_to(parent))

    def place_in(self, parent: Frame2d) -> Frame2d:
        """Treat this frame as defined relative to ``parent`` and return
        it in global coordinates."""
        return Frame2d(self.origin.place_in(parent),
                       self.x_direction.place_in(parent),
                       self.y_direction.place_in(parent))


## three dimensional frames
## ------------------------

@dataclass(frozen=True)
class Frame3d:
    origin: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    def __post_init__(self):
        if __debug__:
            enforce(check_basis3d(self.x_direction.components,
                                  self.y_direction.components,
                                  self.z_direction.components),
                    'Frame3d')

    @classmethod
    def at_origin(cls) -> Frame3d:
        return cls.at_point(Point3d.origin())

    @classmethod
    def at_point(cls, point: Point3d) -> Frame3d:
        return cls(point, Direction3d.positive_x(), Direction3d.positive_y(),
                   Direction3d.positive_z())

    @classmethod
    def with_z_direction(cls, direction: Direction3d,
                         origin: Optional[Point3d] = None) -> Frame3d:
        """Frame whose z direction is ``direction``; x and y are some
        perpendicular pair taken from ``direction.perpendicular_basis()``."""
        if origin is None:
            origin = Point3d.origin()
        u, v = direction.perpendicular_basis()
        return cls(origin, u, v, direction)

    @classmethod
    def from_x_and_y(cls, origin: Point3d, x_direction: Direction3d,
                     y_hint) -> Optional[Frame3d]:
        """Frame with the given x direction and a y direction as close as
        possible to ``y_hint`` (a vector or direction).

        The z direction is ``x_direction x y_hint`` and y completes the
        basis as ``z x x``; returns ``None`` when the cross product is
        zero, i.e. when ``y_hint`` is parallel to ``x_direction`` or zero.
        """
        z = Direction3d.of_vector(x_direction.cross(y_hint))
        if z is None:
            return None
        # a nearly parallel hint leaves z only as perpendicular to x as
        # the rounding in the cross product allows
        z = Direction3d.of_vector(z.vector - x_direction.times(z.dot(x_direction)))
        if z is None:
            return None
        return cls(origin, x_direction, orthonormal_cross(z, x_direction), z)

    @property
    def x_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.x_direction)

    @property
    def y_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.y_direction)

    @property
    def z_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.z_direction)

    @property
    def xy_plane(self) -> Plane3d:
        return Plane3d(self.origin, self.x_direction, self.y_direction,
                       self.z_direction)

    @property
    def yz_plane(self) -> Plane3d:
        return Plane3d(self.origin, self.y_direction, self.z_direction,
                       self.x_direction)

    @property
    def zx_plane(self) -> Plane3d:
        return Plane3d(self.origin, self.z_direction, self.x_direction,
                       self.y_direction)

    @property
    def xy_planar_frame(self) -> PlanarFrame3d:
        return PlanarFrame3d(self.origin, self.x_direction, self.y_direction)

    @property
    def yz_planar_frame(self) -> PlanarFrame3d:
        return PlanarFrame3d(self.origin, self.y_direction, self.z_direction)

    @property
    def zx_planar_frame(self) -> PlanarFrame3d:
        return PlanarFrame3d(self.origin, self.z_direction, self.x_direction)

    def is_right_handed(self) -> bool:
        return self.x_direction.cross(self.y_direction).dot(self.z_direction) > 0.0

    def move_to(self, point: Point3d) -> Frame3d:
        return Frame3d(point, self.x_direction, self.y_direction,
                       self.z_direction)

    def translate_by(self, v: Vector3d) -> Frame3d:
        return self.move_to(self.origin.translate_by(v))

    def rotate_around(self, axis: Axis3d, angle: float) -> Frame3d:
        return Frame3d(self.origin.rotate_around(axis, angle),
                       self.x_direction.rotate_around(axis, angle),
                       self.y_direction.rotate_around(axis, angle),
                       self.z_direction.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> Frame3d:
        x = self.x_direction.mirror_across(plane)
        y = self.y_direction.mirror_across(plane)
        return Frame3d(self.origin.mirror_across(plane), x, y,
                       orthonormal_cross(x, y))

    def localize_to(self, parent: Frame3d) -> Frame3d:
        """This frame expressed in the coordinates of ``parent``."""
        return Frame3d(self.origin.localize_to(parent),
                       self.x_direction.localize_to(parent),
                       self.y_direction.localize_to(parent),
                       self.z_direction.localize_to(parent))

    def place_in(self, parent: Frame3d) -> Frame3d:
        """Treat this frame as defined relative to ``parent`` and return
        it in global coordinates."""
        return Frame3d(self.origin.place_in(parent),
                       self.x_direction.place_in(parent),
                       self.y_direction.place_in(parent),
                       self.z_direction.place_in(parent))

    def placement_matrix(self) -> xform.Matrix:
        """Homogeneous matrix taking local coordinates to global ones."""
        return xform.Placement(self)

    def localization_matrix(self) -> xform.Matrix:
        """Homogeneous matrix taking global coordinates to local ones."""
        return xform.Localization(self)


## planar frames in three dimensions
## ---------------------------------

@dataclass(frozen=True)
class PlanarFrame3d:
    origin: Point3d
    x_direction: Direction3d
    y_direction: Direction3d

    def __post_init__(self):
        if __debug__:
            enforce(check_orthonormal_pair(self.x_direction.components,
                                           self.y_direction.components),
                    'PlanarFrame3d')

    @classmethod
    def xy(cls) -> PlanarFrame3d:
        return cls(Point3d.origin(), Direction3d.positive_x(),
                   Direction3d.positive_y())

    @classmethod
    def yz(cls) -> PlanarFrame3d:
        return cls(Point3d.origin(), Direction3d.positive_y(),
                   Direction3d.positive_z())

    @classmethod
    def zx(cls) -> PlanarFrame3d:
        return cls(Point3d.origin(), Direction3d.positive_z(),
                   Direction3d.positive_x())

    @property
    def normal_direction(self) -> Direction3d:
        return orthonormal_cross(self.x_direction, self.y_direction)

    @property
    def normal_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.normal_direction)

    @property
    def x_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.x_direction)

    @property
    def y_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.y_direction)

    @property
    def plane(self) -> Plane3d:
        return Plane3d(self.origin, self.x_direction, self.y_direction,
                       self.normal_direction)

    def move_to(self, point: Point3d) -> PlanarFrame3d:
        return PlanarFrame3d(point, self.x_direction, self.y_direction)

    def translate_by(self, v: Vector3d) -> PlanarFrame3d:
        return self.move_to(self.origin.translate_by(v))

    def rotate_around(self, axis: Axis3d, angle: float) -> PlanarFrame3d:
        return PlanarFrame3d(self.origin.rotate_around(axis, angle),
                             self.x_direction.rotate_around(axis, angle),
                             self.y_direction.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> PlanarFrame3d:
        return PlanarFrame3d(self.origin.mirror_across(plane),
                             self.x_direction.mirror_across(plane),
                             self.y_direction.mirror_across(plane))

    def localize_to(self, frame: Frame3d) -> PlanarFrame3d:
        return PlanarFrame3d(self.origin.localize_to(frame),
                             self.x_direction.localize_to(frame),
                             self.y_direction.localize_to(frame))

    def place_in(self, frame: Frame3d) -> PlanarFrame3d:
        return PlanarFrame3d(self.origin.place_in(frame),
                             self.x_direction.place_in(frame),
                             self.y_direction.place_in(frame))


__all__ = [
    'Frame2d',
    'Frame3d',
    'PlanarFrame3d',
]
