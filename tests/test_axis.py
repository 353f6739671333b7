import math

from yapdatum.axis import Axis2d, Axis3d
from yapdatum.direction import Direction2d, Direction3d
from yapdatum.frame import Frame2d, Frame3d, PlanarFrame3d
from yapdatum.plane import Plane3d
from yapdatum.point import Point2d, Point3d
from yapdatum.vector import Vector2d, Vector3d


def test_axis3d_constants():
    assert Axis3d.x_axis() == Axis3d(Point3d.origin(), Direction3d.positive_x())
    assert Axis3d.z_axis().direction == Direction3d.positive_z()
    axis = Axis3d.through(Point3d(1, 2, 3), Direction3d.negative_y())
    assert axis.origin == Point3d(1, 2, 3)


def test_axis3d_reverse_and_move():
    axis = Axis3d(Point3d(1, 2, 3), Direction3d.positive_x())
    assert axis.reverse().direction == Direction3d.negative_x()
    assert axis.move_to(Point3d(0, 0, 0)).origin == Point3d(0, 0, 0)
    assert axis.translate_by(Vector3d(1, 1, 1)).origin == Point3d(2, 3, 4)
    assert axis.translate_by(Vector3d(1, 1, 1)).direction == axis.direction


def test_axis3d_rotate_around():
    axis = Axis3d(Point3d(1, 0, 0), Direction3d.positive_x())
    rotated = axis.rotate_around(Axis3d.z_axis(), math.pi / 2)
    assert rotated.origin.isclose(Point3d(0, 1, 0))
    assert rotated.direction.isclose(Direction3d.positive_y())


def test_axis3d_mirror_across():
    axis = Axis3d(Point3d(0, 0, 2), Direction3d.from_components(1, 0, 1))
    mirrored = axis.mirror_across(Plane3d.xy())
    assert mirrored.origin == Point3d(0, 0, -2)
    assert mirrored.direction.isclose(Direction3d.from_components(1, 0, -1))


def test_axis3d_frames():
    frame = Frame3d.with_z_direction(Direction3d.from_components(1, 1, 0),
                                     Point3d(2, 2, 2))
    axis = Axis3d(Point3d(5, -1, 0), Direction3d.from_components(0, 1, 3))
    back = axis.localize_to(frame).place_in(frame)
    assert back.origin.isclose(axis.origin)
    assert back.direction.isclose(axis.direction)
    assert frame.z_axis.localize_to(frame).origin.isclose(Point3d.origin())
    assert frame.z_axis.localize_to(frame).direction.isclose(Direction3d.positive_z())


def test_axis2d_basics():
    axis = Axis2d.through(Point2d(1, 1), Direction2d.positive_y())
    assert Axis2d.x_axis().direction == Direction2d.positive_x()
    assert Axis2d.y_axis().origin == Point2d.origin()
    assert axis.reverse().direction == Direction2d.negative_y()
    assert axis.move_to(Point2d(3, 3)).origin == Point2d(3, 3)
    assert axis.translate_by(Vector2d(-1, 0)).origin == Point2d(0, 1)


def test_axis2d_rotate_and_mirror():
    axis = Axis2d(Point2d(2, 0), Direction2d.positive_x())
    rotated = axis.rotate_around(Point2d(0, 0), math.pi / 2)
    assert rotated.origin.isclose(Point2d(0, 2))
    assert rotated.direction.isclose(Direction2d.positive_y())
    mirrored = axis.mirror_across(Axis2d.y_axis())
    assert mirrored.origin == Point2d(-2, 0)
    assert mirrored.direction.isclose(Direction2d.negative_x())


def test_axis2d_frames():
    frame = Frame2d.with_y_direction(Direction2d.from_angle(2.0), Point2d(1, -1))
    axis = Axis2d(Point2d(4, 4), Direction2d.from_angle(-0.3))
    back = axis.place_in(frame).localize_to(frame)
    assert back.origin.isclose(axis.origin)
    assert back.direction.isclose(axis.direction)


def test_axis2d_place_onto():
    frame = PlanarFrame3d.yz().translate_by(Vector3d(7, 0, 0))
    axis = Axis2d(Point2d(1, 2), Direction2d.positive_x()).place_onto(frame)
    assert axis == Axis3d(Point3d(7, 1, 2), Direction3d.positive_y())
