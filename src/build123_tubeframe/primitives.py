from __future__ import annotations

from enum import Enum

from build123d import Align, Box, Cylinder, Location, Part

from build123_tubeframe.units import BOOLEAN_EPSILON


class TubeAxis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class TubeAnchor(Enum):
    """Where the local origin sits on a tube.

    - CENTER: tube spans [-length/2, +length/2] along its axis
    - TOP: top face at the origin, tube extends downward by length (Z only)
    """

    CENTER = "center"
    TOP = "top"


def default_anchor(axis: TubeAxis) -> TubeAnchor:
    return TubeAnchor.TOP if axis is TubeAxis.Z else TubeAnchor.CENTER


def _axis_box(axis: TubeAxis, length: float, side: float, align_along: Align) -> Box:
    dims = {
        TubeAxis.X: (length, side, side),
        TubeAxis.Y: (side, length, side),
        TubeAxis.Z: (side, side, length),
    }[axis]
    align = [Align.CENTER, Align.CENTER, Align.CENTER]
    align[list(TubeAxis).index(axis)] = align_along
    return Box(*dims, align=tuple(align))


def hollow_tube_along_axis(
    length: float,
    outer_side: float,
    wall: float,
    axis: TubeAxis = TubeAxis.X,
    anchor: TubeAnchor | None = None,
    epsilon: float = BOOLEAN_EPSILON,
) -> Part:
    """Create a hollow square tube in local coordinates.

    The outer prism is exactly ``length`` long; the inner prism is cut
    ``epsilon`` past each end face so the bore never shares a face with
    the outer prism.

    Args:
        length: Modeled length along ``axis``
        outer_side: Outside width of the square section
        wall: Wall thickness
        axis: Principal axis the tube runs along
        anchor: Origin convention, defaults to CENTER for X/Y and TOP for Z

    Raises:
        ValueError: If the section has no bore (``outer_side - 2*wall <= 0``)
    """
    inner_side = outer_side - 2 * wall
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    if inner_side <= 0:
        raise ValueError(f"wall {wall} leaves no bore in a {outer_side} tube")

    anchor = anchor or default_anchor(axis)
    if anchor is TubeAnchor.TOP and axis is not TubeAxis.Z:
        raise ValueError("TOP anchor is only defined for Z tubes")

    if anchor is TubeAnchor.TOP:
        outer = _axis_box(axis, length, outer_side, Align.MAX)
        inner = _axis_box(axis, length + 2 * epsilon, inner_side, Align.MAX)
        inner = inner.moved(Location((0, 0, epsilon)))
    else:
        outer = _axis_box(axis, length, outer_side, Align.CENTER)
        inner = _axis_box(axis, length + 2 * epsilon, inner_side, Align.CENTER)
    return outer - inner


def tab_slab(length: float, depth: float, thickness: float, embed: float = BOOLEAN_EPSILON) -> Part:
    """Flat tab in local coordinates.

    X: along the wall, centered. Y: inward from the wall face at Y=0, with
    ``embed`` reaching back into the wall. Z: top face at Z=0.
    """
    box = Box(length, depth + embed, thickness, align=(Align.CENTER, Align.MIN, Align.MAX))
    return box.moved(Location((0, -embed, 0)))


def through_hole(diameter: float, thickness: float, epsilon: float = BOOLEAN_EPSILON) -> Part:
    """Vertical cylinder through a slab whose top face is at Z=0."""
    height = thickness + 2 * epsilon
    return Cylinder(diameter / 2, height, align=(Align.CENTER, Align.CENTER, Align.MAX)).moved(
        Location((0, 0, epsilon))
    )


def tube_cross_section_area(outer_side: float, wall: float) -> float:
    inner_side = outer_side - 2 * wall
    return outer_side**2 - inner_side**2
