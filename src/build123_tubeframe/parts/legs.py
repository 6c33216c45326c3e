from __future__ import annotations

import logging

from build123d import Location

from build123_tubeframe.elements import TubeSegment
from build123_tubeframe.primitives import TubeAnchor, TubeAxis
from build123_tubeframe.units import BOOLEAN_EPSILON

logger = logging.getLogger(__name__)

# (name, x sign, y sign)
CORNERS = (
    ("front_left", -1, -1),
    ("front_right", 1, -1),
    ("back_right", 1, 1),
    ("back_left", -1, 1),
)


def floor_z(outer_side: float, leg_length: float) -> float:
    """Z of the floor plane the legs stand on."""
    return -outer_side / 2 - leg_length


def build_legs(
    outer_x: float,
    outer_y: float,
    outer_side: float,
    leg_length: float,
    wall: float,
    epsilon: float = BOOLEAN_EPSILON,
) -> list[TubeSegment]:
    """Four vertical legs under the outer corners.

    Each leg is TOP-anchored at the underside of the frame rails
    (Z = -outer_side/2) and reaches down to the floor. The modeled leg pokes
    ``epsilon`` up into the rail's bottom wall.
    """
    leg_x = outer_x / 2 - outer_side / 2
    leg_y = outer_y / 2 - outer_side / 2
    top_z = -outer_side / 2

    legs = [
        TubeSegment(
            length=leg_length,
            outer_side=outer_side,
            wall=wall,
            axis=TubeAxis.Z,
            anchor=TubeAnchor.TOP,
            category="leg",
            name=f"leg_{name}",
            location=Location((sx * leg_x, sy * leg_y, top_z)),
            joint_overlap=epsilon,
            epsilon=epsilon,
        )
        for name, sx, sy in CORNERS
    ]
    logger.debug("legs: 4 x %.3f, floor at z=%.3f", leg_length, floor_z(outer_side, leg_length))
    return legs
