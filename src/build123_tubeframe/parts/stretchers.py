"""Lower perimeter of stretchers tying the legs together.

Stretchers sit one tube width inside the legs: the outer face of each
stretcher is coplanar with the inner face of the legs it runs between, and
its ends reach ``end_overlap`` into the legs' footprint along its length.
"""

from __future__ import annotations

import logging

from build123d import Location

from build123_tubeframe.elements import TubeSegment
from build123_tubeframe.parts.legs import floor_z
from build123_tubeframe.primitives import TubeAxis
from build123_tubeframe.units import BOOLEAN_EPSILON

logger = logging.getLogger(__name__)


def stretcher_length(inner_span: float, end_gap: float, end_overlap: float) -> float:
    """Nominal stretcher cut length for an inner opening ``inner_span``."""
    return inner_span - 2 * end_gap + 2 * end_overlap


def stretcher_center_z(outer_side: float, leg_length: float, height_above_floor: float) -> float:
    return floor_z(outer_side, leg_length) + height_above_floor + outer_side / 2


def build_stretchers(
    outer_x: float,
    outer_y: float,
    outer_side: float,
    wall: float,
    leg_length: float,
    height_above_floor: float,
    end_gap: float,
    end_overlap: float,
    epsilon: float = BOOLEAN_EPSILON,
) -> list[TubeSegment]:
    z = stretcher_center_z(outer_side, leg_length, height_above_floor)
    length_x = stretcher_length(outer_x - 2 * outer_side, end_gap, end_overlap)
    length_y = stretcher_length(outer_y - 2 * outer_side, end_gap, end_overlap)
    # Leg centers sit at half_outer - outer_side/2; one tube width further in.
    offset_y = outer_y / 2 - 1.5 * outer_side
    offset_x = outer_x / 2 - 1.5 * outer_side

    stretchers = [
        TubeSegment(
            length=length_x,
            outer_side=outer_side,
            wall=wall,
            axis=TubeAxis.X,
            category="stretcher_x",
            name=name,
            location=Location((0, sign * offset_y, z)),
            epsilon=epsilon,
        )
        for name, sign in (("stretcher_front", -1), ("stretcher_back", 1))
    ]
    stretchers += [
        TubeSegment(
            length=length_y,
            outer_side=outer_side,
            wall=wall,
            axis=TubeAxis.Y,
            category="stretcher_y",
            name=name,
            location=Location((sign * offset_x, 0, z)),
            epsilon=epsilon,
        )
        for name, sign in (("stretcher_left", -1), ("stretcher_right", 1))
    ]
    logger.debug(
        "stretchers at z=%.3f: 2 x %.3f (x), 2 x %.3f (y)", z, length_x, length_y
    )
    return stretchers
