from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from build123d import Location, Part, Vector

from build123_tubeframe.primitives import (
    TubeAnchor,
    TubeAxis,
    default_anchor,
    hollow_tube_along_axis,
    tab_slab,
    through_hole,
    tube_cross_section_area,
)
from build123_tubeframe.units import BOOLEAN_EPSILON


@dataclass(frozen=True)
class TubeSegment:
    """A hollow square tube placed in the frame coordinate system.

    ``length`` is the nominal cut length. ``joint_overlap`` is extra modeled
    length that only exists so neighbouring solids fuse cleanly; it never
    shows up in the cut list. For CENTER-anchored tubes the overlap is split
    evenly between both ends, for TOP-anchored tubes it is added above the
    top face.
    """

    length: float
    outer_side: float
    wall: float
    axis: TubeAxis = TubeAxis.X
    anchor: TubeAnchor | None = None
    category: str = ""
    name: str = ""
    location: Location = field(default_factory=Location)
    joint_overlap: float = 0.0
    epsilon: float = BOOLEAN_EPSILON

    def __post_init__(self) -> None:
        for dim, val in [("length", self.length), ("outer_side", self.outer_side), ("wall", self.wall)]:
            if val <= 0:
                raise ValueError(f"{dim} must be positive, got {val}")
        if self.inner_side <= 0:
            raise ValueError(f"wall {self.wall} leaves no bore in a {self.outer_side} tube")
        if self.anchor is None:
            object.__setattr__(self, "anchor", default_anchor(self.axis))

    @property
    def inner_side(self) -> float:
        return self.outer_side - 2 * self.wall

    @property
    def modeled_length(self) -> float:
        return self.length + self.joint_overlap

    @property
    def cross_section_area(self) -> float:
        return tube_cross_section_area(self.outer_side, self.wall)

    @property
    def volume(self) -> float:
        return self.cross_section_area * self.length

    @property
    def position(self) -> Vector:
        return self.location.position

    @property
    def shape(self) -> Part:
        shape = hollow_tube_along_axis(
            self.modeled_length,
            self.outer_side,
            self.wall,
            axis=self.axis,
            anchor=self.anchor,
            epsilon=self.epsilon,
        )
        if self.anchor is TubeAnchor.TOP and self.joint_overlap:
            shape = shape.moved(Location((0, 0, self.joint_overlap)))
        return shape

    @property
    def global_shape(self) -> Part:
        return self.shape.moved(self.location)

    def moved(self, loc: Location) -> TubeSegment:
        return replace(self, location=self.location * loc)

    def __repr__(self) -> str:
        name_str = f"'{self.name}' " if self.name else ""
        return f"TubeSegment({name_str}{self.axis.name}, L={self.length}, OD={self.outer_side}, wall={self.wall})"


class WallSide(Enum):
    """Inner wall of the frame a tab hangs from, with the yaw that points the tab inward."""

    FRONT = (0.0, "-y")
    BACK = (180.0, "+y")
    RIGHT = (90.0, "+x")
    LEFT = (-90.0, "-x")

    @property
    def yaw(self) -> float:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class HoleSpec:
    diameter: float
    inset: float

    def __post_init__(self) -> None:
        if self.diameter <= 0:
            raise ValueError(f"diameter must be positive, got {self.diameter}")
        if self.inset <= 0:
            raise ValueError(f"inset must be positive, got {self.inset}")


@dataclass(frozen=True)
class Tab:
    """A flat support tab hanging from an inner wall of the frame.

    Local coordinate system:
    - X: along the wall, centered on the tab
    - Y: inward from the wall face (wall face at Y=0)
    - Z: top face at Z=0, tab extends downward by thickness

    ``location`` places that local origin on the wall face and yaws it so
    local Y points into the opening.
    """

    length: float
    depth: float
    thickness: float
    wall_side: WallSide = WallSide.FRONT
    category: str = "tab"
    name: str = ""
    location: Location = field(default_factory=Location)
    hole: HoleSpec | None = None
    epsilon: float = BOOLEAN_EPSILON

    def __post_init__(self) -> None:
        for dim, val in [("length", self.length), ("depth", self.depth), ("thickness", self.thickness)]:
            if val <= 0:
                raise ValueError(f"{dim} must be positive, got {val}")

    @property
    def volume(self) -> float:
        return self.length * self.depth * self.thickness

    @property
    def position(self) -> Vector:
        return self.location.position

    @property
    def shape(self) -> Part:
        return tab_slab(self.length, self.depth, self.thickness, embed=self.epsilon)

    @property
    def global_shape(self) -> Part:
        return self.shape.moved(self.location)

    @property
    def hole_shape(self) -> Part | None:
        """The hole cutter in world coordinates, placed with the tab's own location."""
        if self.hole is None:
            return None
        local = through_hole(self.hole.diameter, self.thickness, epsilon=self.epsilon)
        return local.moved(self.location * Location((0, self.hole.inset, 0)))

    def with_hole(self, diameter: float, inset: float) -> Tab:
        return replace(self, hole=HoleSpec(diameter, inset))

    def __repr__(self) -> str:
        name_str = f"'{self.name}' " if self.name else ""
        return f"Tab({name_str}{self.wall_side.label}, {self.length} x {self.depth} x {self.thickness})"
