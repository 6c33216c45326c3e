import math

import pytest
from build123d import Box, Location

from build123_tubeframe.elements import Tab, TubeSegment
from build123_tubeframe.model import GeometryKernelError, TableFrameModel
from build123_tubeframe.primitives import TubeAxis

TOL = 1e-3


@pytest.fixture
def empty_model():
    return TableFrameModel(name="TestFrame")


@pytest.fixture
def model_with_parts():
    model = TableFrameModel(name="TestFrame")
    model.add_part(TubeSegment(length=10, outer_side=1, wall=0.1, name="rail_a", category="frame_long"))
    model.add_part(
        TubeSegment(length=10, outer_side=1, wall=0.1, name="rail_b", category="frame_long",
                    location=Location((0, 5, 0)))
    )
    model.add_part(Tab(length=1, depth=1, thickness=0.125, name="tab_a", location=Location((0, 0.5, 0.5))))
    return model


class TestTableFrameModel:
    def test_create_model(self, empty_model):
        assert empty_model.name == "TestFrame"
        assert len(empty_model) == 0
        assert empty_model.cuts == []

    def test_add_parts(self, empty_model):
        empty_model.add_parts([TubeSegment(length=5, outer_side=1, wall=0.1) for _ in range(3)])
        assert len(empty_model) == 3

    def test_find_by_category(self, model_with_parts):
        assert len(model_with_parts.find_by_category("frame_long")) == 2
        assert len(model_with_parts.find_by_category("tab")) == 1

    def test_find_by_name(self, model_with_parts):
        results = model_with_parts.find_by_name("rail_b")
        assert len(results) == 1
        assert results[0].position.Y == pytest.approx(5)

    def test_tubes_and_tabs(self, model_with_parts):
        assert len(model_with_parts.tubes) == 2
        assert len(model_with_parts.tabs) == 1

    def test_iteration(self, model_with_parts):
        assert [p.name for p in model_with_parts] == ["rail_a", "rail_b", "tab_a"]

    def test_repr(self, model_with_parts):
        assert "TestFrame" in repr(model_with_parts)
        assert "parts=3" in repr(model_with_parts)

    def test_get_compound(self, model_with_parts):
        compound = model_with_parts.get_compound()
        assert compound is not None
        assert len(compound.solids()) == 3


class TestCompose:
    def test_empty_model_rejected(self, empty_model):
        with pytest.raises(GeometryKernelError, match="no parts"):
            empty_model.compose()

    def test_disjoint_parts_keep_volume(self):
        model = TableFrameModel(parts=[
            TubeSegment(length=10, outer_side=1, wall=0.1),
            TubeSegment(length=10, outer_side=1, wall=0.1, location=Location((0, 5, 0))),
        ])
        assert abs(model.compose().volume - 2 * 10 * (1 - 0.8**2)) < TOL

    def test_single_part(self):
        model = TableFrameModel(parts=[TubeSegment(length=4, outer_side=1, wall=0.1)])
        assert abs(model.compose().volume - 4 * 0.36) < TOL

    def test_cuts_applied_after_union(self):
        tab = Tab(length=1, depth=1, thickness=0.125, epsilon=0.01).with_hole(0.25, 0.5)
        model = TableFrameModel(parts=[tab], cuts=[tab.hole_shape])
        expected = 1 * 1.01 * 0.125 - math.pi * 0.125**2 * 0.125
        assert abs(model.compose().volume - expected) < TOL

    def test_cut_spans_several_parts(self):
        model = TableFrameModel(parts=[
            TubeSegment(length=10, outer_side=1, wall=0.1),
            TubeSegment(length=10, outer_side=1, wall=0.1, location=Location((0, 2, 0))),
        ])
        # One cutter removes a 1-long slice from both tubes
        model.add_cut(Box(1, 10, 10))
        assert abs(model.compose().volume - 2 * 9 * 0.36) < TOL

    def test_kernel_failure_wrapped(self, monkeypatch):
        model = TableFrameModel(parts=[
            TubeSegment(length=10, outer_side=1, wall=0.1),
            TubeSegment(length=10, outer_side=1, wall=0.1, axis=TubeAxis.Y),
        ])

        def broken_fuse(self, *others, **kwargs):
            raise RuntimeError("BRepAlgoAPI_Fuse failed")

        shape_type = type(model.parts[0].global_shape)
        monkeypatch.setattr(shape_type, "fuse", broken_fuse)
        with pytest.raises(GeometryKernelError, match="boolean operation failed") as excinfo:
            model.compose()
        assert isinstance(excinfo.value.__cause__, RuntimeError)
