"""Tests for the frame, leg, stretcher and tab assemblers.

All dimensions are inch-native here so expected values read like a cut list.
"""
import pytest

from build123_tubeframe.parts import (
    build_frame,
    build_legs,
    build_stretchers,
    build_tab_holes,
    build_tabs,
    floor_z,
    stretcher_center_z,
    stretcher_length,
    tab_centers,
    tab_top_z,
)
from build123_tubeframe.model import TableFrameModel

TOL = 1e-3
OD = 1.125
WALL = 0.1


@pytest.fixture
def frame():
    return build_frame(48, 22, OD, WALL)


@pytest.fixture
def legs():
    return build_legs(48, 22, OD, 32, WALL)


@pytest.fixture
def stretchers():
    return build_stretchers(48, 22, OD, WALL, 32, 6, 0, 0.25)


@pytest.fixture
def tabs():
    return build_tabs(45.75, 19.75, OD, 0.75, 0, 0, 1, 1, 0.125, 5)


def by_name(parts, name):
    return next(p for p in parts if p.name == name)


class TestFrame:
    def test_four_rails(self, frame):
        assert len(frame) == 4
        assert [p.category for p in frame].count("frame_long") == 2
        assert [p.category for p in frame].count("frame_short") == 2

    def test_nominal_lengths(self, frame):
        assert by_name(frame, "rail_front").length == 48
        assert by_name(frame, "rail_left").length == pytest.approx(19.75)

    def test_long_rails_flush_with_outer_y(self, frame):
        bbox = by_name(frame, "rail_back").global_shape.bounding_box()
        assert abs(bbox.max.Y - 11) < TOL
        assert abs(bbox.min.Y - (11 - OD)) < TOL

    def test_short_rails_between_long_rails(self, frame):
        bbox = by_name(frame, "rail_right").global_shape.bounding_box()
        assert abs(bbox.max.X - 24) < TOL
        assert abs(bbox.min.X - (24 - OD)) < TOL
        # Butt joint overlap only reaches into the long rails' walls
        assert bbox.max.Y < 11 - OD + WALL
        assert bbox.max.Y > 11 - OD

    def test_outer_envelope_exact(self, frame):
        bbox = TableFrameModel(parts=frame).bounding_box()
        assert abs(bbox.size.X - 48) < TOL
        assert abs(bbox.size.Y - 22) < TOL
        assert abs(bbox.size.Z - OD) < TOL

    @pytest.mark.parametrize("outer_x,outer_y,od", [(30, 30, 1.5), (72.5, 36.25, 2.0), (20, 12, 0.75)])
    def test_outer_envelope_for_other_sizes(self, outer_x, outer_y, od):
        bbox = TableFrameModel(parts=build_frame(outer_x, outer_y, od, 0.1)).bounding_box()
        assert abs(bbox.size.X - outer_x) < TOL
        assert abs(bbox.size.Y - outer_y) < TOL

    def test_every_rail_keeps_wall_invariant(self, frame):
        for rail in frame:
            assert rail.inner_side == pytest.approx(OD - 2 * WALL)


class TestLegs:
    def test_four_corner_legs(self, legs):
        assert len(legs) == 4
        centers = sorted((round(l.position.X, 4), round(l.position.Y, 4)) for l in legs)
        assert centers == [(-23.4375, -10.4375), (-23.4375, 10.4375), (23.4375, -10.4375), (23.4375, 10.4375)]

    def test_top_at_frame_underside(self, legs):
        for leg in legs:
            assert leg.position.Z == pytest.approx(-OD / 2)

    def test_reaches_floor(self, legs):
        for leg in legs:
            bbox = leg.global_shape.bounding_box()
            assert abs(bbox.min.Z - floor_z(OD, 32)) < TOL

    def test_floor_reference(self):
        assert floor_z(OD, 32) == pytest.approx(-32.5625)

    def test_legs_inside_envelope(self, legs):
        bbox = TableFrameModel(parts=legs).bounding_box()
        assert abs(bbox.size.X - 48) < TOL
        assert abs(bbox.size.Y - 22) < TOL


class TestStretchers:
    def test_length_law(self):
        assert stretcher_length(45.75, 0, 0.25) == pytest.approx(46.25)
        assert stretcher_length(19.75, 0, 0.25) == pytest.approx(20.25)
        assert stretcher_length(45.75, 0.5, 0.25) == pytest.approx(45.25)

    def test_four_stretchers(self, stretchers):
        assert len(stretchers) == 4
        assert by_name(stretchers, "stretcher_front").length == pytest.approx(46.25)
        assert by_name(stretchers, "stretcher_left").length == pytest.approx(20.25)

    def test_height_above_floor(self, stretchers):
        assert stretcher_center_z(OD, 32, 6) == pytest.approx(-26.0)
        for s in stretchers:
            bbox = s.global_shape.bounding_box()
            assert abs(bbox.min.Z - (floor_z(OD, 32) + 6)) < TOL

    def test_outer_face_coplanar_with_leg_inner_face(self, stretchers, legs):
        back = by_name(stretchers, "stretcher_back").global_shape.bounding_box()
        leg = by_name(legs, "leg_back_right").global_shape.bounding_box()
        assert abs(back.max.Y - leg.min.Y) < TOL

        right = by_name(stretchers, "stretcher_right").global_shape.bounding_box()
        assert abs(right.max.X - leg.min.X) < TOL

    def test_ends_penetrate_legs_by_overlap(self, stretchers, legs):
        front = by_name(stretchers, "stretcher_front").global_shape.bounding_box()
        leg = by_name(legs, "leg_front_right").global_shape.bounding_box()
        assert abs(front.max.X - (leg.min.X + 0.25)) < TOL

    def test_offset_from_center(self, stretchers):
        assert by_name(stretchers, "stretcher_front").position.Y == pytest.approx(-(11 - 1.5 * OD))
        assert by_name(stretchers, "stretcher_right").position.X == pytest.approx(24 - 1.5 * OD)


class TestTabs:
    def test_eight_tabs_two_per_wall(self, tabs):
        assert len(tabs) == 8
        for side in ("front", "back", "left", "right"):
            assert sum(1 for t in tabs if t.name.startswith(f"tab_{side}_")) == 2

    def test_centers_symmetric(self):
        assert tab_centers(45.75, 5) == pytest.approx([-17.875, 17.875])
        assert tab_centers(19.75, 5) == pytest.approx([-4.875, 4.875])

    def test_top_face_under_plywood(self, tabs):
        top = tab_top_z(OD, 0.75, 0, 0)
        assert top == pytest.approx(-0.1875)
        for tab in tabs:
            bbox = tab.global_shape.bounding_box()
            assert abs(bbox.max.Z - top) < TOL
            assert abs(bbox.min.Z - (top - 0.125)) < TOL

    def test_recess_and_clearance_lower_tabs(self):
        assert tab_top_z(OD, 0.5, 0.05, 0.1) == pytest.approx(0.5625 - 0.1 - 0.5 - 0.05)

    def test_front_and_back_tab_placement(self, tabs):
        back = by_name(tabs, "tab_back_1").global_shape.bounding_box()
        assert abs(back.center().X - 17.875) < TOL
        assert abs(back.min.Y - (9.875 - 1)) < TOL
        front = by_name(tabs, "tab_front_0").global_shape.bounding_box()
        assert abs(front.center().X + 17.875) < TOL
        assert abs(front.max.Y - (-9.875 + 1)) < TOL

    def test_side_tab_placement(self, tabs):
        left = by_name(tabs, "tab_left_0").global_shape.bounding_box()
        assert abs(left.center().Y + 4.875) < TOL
        assert abs(left.max.X - (-22.875 + 1)) < TOL
        assert abs(left.size.Y - 1) < TOL

    def test_holes_align_with_tabs(self, tabs):
        holes = build_tab_holes(tabs, 0.25, 0.5)
        assert len(holes) == 8
        for tab, hole in zip(tabs, holes):
            tab_bbox = tab.global_shape.bounding_box()
            hole_bbox = hole.bounding_box()
            assert tab_bbox.min.X < hole_bbox.min.X and hole_bbox.max.X < tab_bbox.max.X
            assert tab_bbox.min.Y < hole_bbox.min.Y and hole_bbox.max.Y < tab_bbox.max.Y
            assert hole_bbox.min.Z < tab_bbox.min.Z and hole_bbox.max.Z > tab_bbox.max.Z

    def test_hole_inset_from_wall(self, tabs):
        hole = build_tab_holes([by_name(tabs, "tab_right_0")], 0.25, 0.5)[0]
        assert abs(hole.bounding_box().center().X - (22.875 - 0.5)) < TOL
