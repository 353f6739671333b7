"""Tests for coordinate frames and the localize/place round trip."""

import math

import pytest

from yapdatum.axis import Axis2d, Axis3d
from yapdatum.direction import Direction2d, Direction3d
from yapdatum.errors import InvariantError
from yapdatum.frame import Frame2d, Frame3d, PlanarFrame3d
from yapdatum.geometry_checks import check_basis3d, check_frame2d
from yapdatum.plane import Plane3d
from yapdatum.point import Point2d, Point3d
from yapdatum.vector import Vector2d, Vector3d


def _valid3d(frame):
    return bool(check_basis3d(frame.x_direction.components,
                              frame.y_direction.components,
                              frame.z_direction.components))


def _valid2d(frame):
    return bool(check_frame2d(frame.x_direction.components,
                              frame.y_direction.components))


def _frames3d():
    return [
        Frame3d.at_origin(),
        Frame3d.at_point(Point3d(-1, 5, 2)),
        Frame3d.with_z_direction(Direction3d.from_components(1, 1, 1),
                                 Point3d(3, 0, -2)),
        Frame3d.with_z_direction(Direction3d.negative_y()).rotate_around(
            Axis3d(Point3d(1, 1, 1), Direction3d.from_components(0, 2, 1)), 1.3),
        Frame3d.at_origin().mirror_across(
            Plane3d.through(Point3d(0, 0, 4), Direction3d.from_components(1, 0, 1))),
    ]


def _frames_close(a, b, tol=1e-9):
    return (a.origin.isclose(b.origin, tol)
            and a.x_direction.isclose(b.x_direction, tol)
            and a.y_direction.isclose(b.y_direction, tol)
            and a.z_direction.isclose(b.z_direction, tol))


class TestFrame3d:

    def test_at_origin(self):
        frame = Frame3d.at_origin()
        assert frame.origin == Point3d.origin()
        assert frame.z_direction == Direction3d.positive_z()
        assert frame.is_right_handed()

    @pytest.mark.parametrize("frame", _frames3d())
    def test_frames_are_valid(self, frame):
        assert _valid3d(frame)
        assert frame.is_right_handed()

    def test_with_z_direction(self):
        d = Direction3d.from_components(2, -1, 0.5)
        frame = Frame3d.with_z_direction(d, Point3d(1, 1, 1))
        assert frame.z_direction == d
        assert frame.origin == Point3d(1, 1, 1)
        assert Frame3d.with_z_direction(d).origin == Point3d.origin()

    def test_from_x_and_y(self):
        frame = Frame3d.from_x_and_y(Point3d.origin(), Direction3d.positive_x(),
                                     Vector3d(3, 2, 0))
        assert frame.y_direction == Direction3d.positive_y()
        assert frame.z_direction == Direction3d.positive_z()
        tilted = Frame3d.from_x_and_y(Point3d(1, 2, 3),
                                      Direction3d.from_components(1, 1, 0),
                                      Direction3d.positive_z())
        assert _valid3d(tilted)

    @pytest.mark.parametrize("tilt", [1e-6, 1e-9, 1e-12, -1e-14])
    def test_from_x_and_y_nearly_parallel(self, tilt):
        x = Direction3d.from_components(1, 1, 0)
        frame = Frame3d.from_x_and_y(Point3d.origin(), x,
                                     Vector3d(x.x, x.y, tilt))
        assert frame is not None
        assert _valid3d(frame)
        assert frame.x_direction == x
        expected = Direction3d.positive_z() if tilt > 0 else Direction3d.negative_z()
        assert frame.y_direction.isclose(expected, 1e-9)

    def test_from_x_and_y_skew_hint(self):
        x = Direction3d.from_components(3, -1, 2)
        frame = Frame3d.from_x_and_y(Point3d(1, 1, 1), x,
                                     x.times(5) + Vector3d(1e-10, 2e-10, -3e-11))
        assert frame is not None
        assert _valid3d(frame)
        assert frame.x_direction == x

    def test_from_x_and_y_degenerate(self):
        x = Direction3d.positive_x()
        assert Frame3d.from_x_and_y(Point3d.origin(), x, x.times(-4)) is None
        assert Frame3d.from_x_and_y(Point3d.origin(), x, Vector3d.zero()) is None

    def test_left_handed_rejected(self):
        with pytest.raises(InvariantError):
            Frame3d(Point3d.origin(), Direction3d.positive_y(),
                    Direction3d.positive_x(), Direction3d.positive_z())

    def test_axes_and_planes(self):
        frame = Frame3d.at_point(Point3d(1, 2, 3))
        assert frame.x_axis == Axis3d(Point3d(1, 2, 3), Direction3d.positive_x())
        assert frame.y_axis.direction == Direction3d.positive_y()
        assert frame.z_axis.direction == Direction3d.positive_z()
        assert frame.xy_plane.normal_direction == Direction3d.positive_z()
        assert frame.yz_plane.normal_direction == Direction3d.positive_x()
        assert frame.zx_plane.normal_direction == Direction3d.positive_y()
        assert frame.yz_planar_frame.normal_direction == Direction3d.positive_x()
        assert frame.zx_planar_frame.normal_direction == Direction3d.positive_y()
        assert frame.xy_planar_frame.plane == frame.xy_plane

    def test_rotate_around(self):
        frame = Frame3d.at_point(Point3d(1, 0, 0)).rotate_around(
            Axis3d.z_axis(), math.pi / 2)
        assert frame.origin.isclose(Point3d(0, 1, 0))
        assert frame.x_direction.isclose(Direction3d.positive_y())
        assert frame.y_direction.isclose(Direction3d.negative_x())
        assert frame.z_direction.isclose(Direction3d.positive_z())

    def test_mirror_stays_right_handed(self):
        # z is recomputed as x cross y rather than reflected, so it stays +Z
        mirrored = Frame3d.at_point(Point3d(1, 2, 3)).mirror_across(Plane3d.xy())
        assert mirrored.origin == Point3d(1, 2, -3)
        assert mirrored.x_direction == Direction3d.positive_x()
        assert mirrored.y_direction == Direction3d.positive_y()
        assert mirrored.z_direction == Direction3d.positive_z()
        skew = Frame3d.with_z_direction(Direction3d.from_components(1, 2, 3))
        plane = Plane3d.through(Point3d(0, 1, 0), Direction3d.from_components(-1, 1, 0))
        m = skew.mirror_across(plane)
        assert _valid3d(m)
        assert m.is_right_handed()
        # mirroring the in-plane directions matches mirroring the vectors
        assert m.x_direction.isclose(skew.x_direction.mirror_across(plane))

    def test_move_and_translate(self):
        frame = _frames3d()[2]
        assert frame.move_to(Point3d(9, 9, 9)).origin == Point3d(9, 9, 9)
        moved = frame.translate_by(Vector3d(1, 0, 0))
        assert moved.origin == frame.origin + Vector3d(1, 0, 0)
        assert moved.z_direction == frame.z_direction

    @pytest.mark.parametrize("frame", _frames3d())
    def test_round_trip(self, frame):
        for p in (Point3d(0, 0, 0), Point3d(1, -2, 3), Point3d(100, 50, -25)):
            assert p.localize_to(frame).place_in(frame).isclose(p, 1e-9)
            assert p.place_in(frame).localize_to(frame).isclose(p, 1e-9)

    def test_nested_frames(self):
        parent = _frames3d()[3]
        child = _frames3d()[2]
        p = Point3d(4, -1, 2)
        # placing in a child that was itself placed in a parent composes
        assert p.place_in(child.place_in(parent)).isclose(
            p.place_in(child).place_in(parent), 1e-9)
        back = child.place_in(parent).localize_to(parent)
        assert _frames_close(back, child)

    def test_matrices(self):
        frame = _frames3d()[3]
        p = Point3d(2, 3, -4)
        assert frame.placement_matrix().transform_point(p).isclose(p.place_in(frame), 1e-9)
        assert frame.localization_matrix().transform_point(p).isclose(
            p.localize_to(frame), 1e-9)


class TestFrame2d:

    def test_constructors(self):
        assert Frame2d.at_origin().origin == Point2d.origin()
        frame = Frame2d.with_x_direction(Direction2d.from_angle(0.5), Point2d(1, 1))
        assert frame.y_direction.isclose(Direction2d.from_angle(0.5 + math.pi / 2))
        assert frame.is_right_handed()
        other = Frame2d.with_y_direction(Direction2d.positive_y())
        assert other.x_direction == Direction2d.positive_x()
        assert _valid2d(other)

    def test_left_handed_rejected(self):
        with pytest.raises(InvariantError):
            Frame2d(Point2d.origin(), Direction2d.positive_x(), Direction2d.negative_y())

    def test_axes(self):
        frame = Frame2d.at_point(Point2d(2, 3))
        assert frame.x_axis == Axis2d(Point2d(2, 3), Direction2d.positive_x())
        assert frame.y_axis.direction == Direction2d.positive_y()

    def test_transformations(self):
        frame = Frame2d.at_point(Point2d(1, 0))
        rotated = frame.rotate_around(Point2d.origin(), math.pi / 2)
        assert rotated.origin.isclose(Point2d(0, 1))
        assert rotated.x_direction.isclose(Direction2d.positive_y())
        assert _valid2d(rotated)
        mirrored = frame.mirror_across(Axis2d.y_axis())
        assert mirrored.origin == Point2d(-1, 0)
        assert mirrored.x_direction.isclose(Direction2d.negative_x())
        assert mirrored.is_right_handed()
        assert _valid2d(mirrored)
        assert frame.translate_by(Vector2d(0, 2)).origin == Point2d(1, 2)
        assert frame.move_to(Point2d(5, 5)).origin == Point2d(5, 5)

    def test_round_trip(self):
        frame = Frame2d.with_x_direction(Direction2d.from_angle(-2.0), Point2d(3, 4))
        for p in (Point2d(0, 0), Point2d(1, 1), Point2d(-7, 12.5)):
            assert p.localize_to(frame).place_in(frame).isclose(p)
            assert p.place_in(frame).localize_to(frame).isclose(p)

    def test_nested_frames(self):
        parent = Frame2d.with_x_direction(Direction2d.from_angle(0.3), Point2d(1, 2))
        child = Frame2d.with_x_direction(Direction2d.from_angle(1.1), Point2d(-1, 0))
        back = child.place_in(parent).localize_to(parent)
        assert back.origin.isclose(child.origin)
        assert back.x_direction.isclose(child.x_direction)
        assert back.y_direction.isclose(child.y_direction)


class TestPlanarFrame3d:

    def test_cardinal(self):
        assert PlanarFrame3d.xy().normal_direction == Direction3d.positive_z()
        assert PlanarFrame3d.yz().normal_direction == Direction3d.positive_x()
        assert PlanarFrame3d.zx().normal_direction == Direction3d.positive_y()

    def test_non_orthogonal_rejected(self):
        with pytest.raises(InvariantError):
            PlanarFrame3d(Point3d.origin(), Direction3d.positive_x(),
                          Direction3d.from_components(1, 1, 0))

    def test_accessors(self):
        pf = PlanarFrame3d.zx().move_to(Point3d(0, 3, 0))
        assert pf.normal_axis == Axis3d(Point3d(0, 3, 0), Direction3d.positive_y())
        assert pf.x_axis.direction == Direction3d.positive_z()
        assert pf.y_axis.direction == Direction3d.positive_x()
        assert pf.plane.origin == Point3d(0, 3, 0)

    def test_transformations(self):
        pf = PlanarFrame3d.xy().translate_by(Vector3d(0, 0, 2))
        rotated = pf.rotate_around(Axis3d.x_axis(), math.pi / 2)
        assert rotated.origin.isclose(Point3d(0, -2, 0))
        assert rotated.normal_direction.isclose(Direction3d.negative_y())
        mirrored = pf.mirror_across(Plane3d.xy())
        assert mirrored.origin == Point3d(0, 0, -2)
        assert mirrored.normal_direction == Direction3d.positive_z()

    def test_projection_round_trip(self):
        pf = Frame3d.with_z_direction(Direction3d.from_components(1, -1, 2),
                                      Point3d(0.5, 0.5, 0.5)).xy_planar_frame
        p = Point3d(3, 2, 1)
        flat = p.project_into_2d(pf)
        assert flat.place_onto(pf).isclose(p.project_onto(pf.plane), 1e-9)
        q = Point2d(-1, 4)
        assert q.place_onto(pf).project_into_2d(pf).isclose(q, 1e-9)

    def test_frames(self):
        frame = _frames3d()[3]
        pf = PlanarFrame3d.yz().translate_by(Vector3d(1, 2, 3))
        back = pf.place_in(frame).localize_to(frame)
        assert back.origin.isclose(pf.origin)
        assert back.normal_direction.isclose(pf.normal_direction)
