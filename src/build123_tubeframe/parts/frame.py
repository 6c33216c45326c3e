"""Perimeter frame: two long rails over the full length, two short rails butted between them."""

from __future__ import annotations

import logging

from build123d import Location

from build123_tubeframe.elements import TubeSegment
from build123_tubeframe.primitives import TubeAxis
from build123_tubeframe.units import BOOLEAN_EPSILON

logger = logging.getLogger(__name__)


def short_rail_length(outer_y: float, outer_side: float) -> float:
    return outer_y - 2 * outer_side


def build_frame(
    outer_x: float,
    outer_y: float,
    outer_side: float,
    wall: float,
    epsilon: float = BOOLEAN_EPSILON,
) -> list[TubeSegment]:
    """Build the four frame rails, centered on the origin with rail centerlines at Z=0.

    Long rails run along X at the full ``outer_x`` with their outer faces on
    the ``outer_y`` boundary. Short rails run along Y between them (butt
    joints) and are modeled ``epsilon`` longer at each end so they sink
    into the long rails' walls. The outer footprint is exactly
    ``outer_x`` x ``outer_y``.
    """
    rail_y = outer_y / 2 - outer_side / 2
    rail_x = outer_x / 2 - outer_side / 2
    short_length = short_rail_length(outer_y, outer_side)

    rails = [
        TubeSegment(
            length=outer_x,
            outer_side=outer_side,
            wall=wall,
            axis=TubeAxis.X,
            category="frame_long",
            name=name,
            location=Location((0, sign * rail_y, 0)),
            epsilon=epsilon,
        )
        for name, sign in (("rail_front", -1), ("rail_back", 1))
    ]
    rails += [
        TubeSegment(
            length=short_length,
            outer_side=outer_side,
            wall=wall,
            axis=TubeAxis.Y,
            category="frame_short",
            name=name,
            location=Location((sign * rail_x, 0, 0)),
            joint_overlap=2 * epsilon,
            epsilon=epsilon,
        )
        for name, sign in (("rail_left", -1), ("rail_right", 1))
    ]
    logger.debug("frame rails: 2 x %.3f long, 2 x %.3f short", outer_x, short_length)
    return rails
