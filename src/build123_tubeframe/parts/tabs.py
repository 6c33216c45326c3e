"""Plywood support tabs along the inner walls of the frame.

Two tabs per wall, eight in total. Each tab's top face is the plywood
underside: ``outer_side/2 - recess - ply_thickness - ply_clearance``. Along
a wall the tab centers are at ``±(span/2 - edge_margin)`` from the wall's
midpoint, where span is ``inner_x`` for the front/back walls and
``inner_y`` for the left/right walls.

Holes are built from the very same tab placements, so a hole cutter can
never drift away from its tab.
"""

from __future__ import annotations

import logging

from build123d import Location, Part

from build123_tubeframe.elements import Tab, WallSide
from build123_tubeframe.layout import LinearLayout
from build123_tubeframe.units import BOOLEAN_EPSILON

logger = logging.getLogger(__name__)


def tab_top_z(outer_side: float, ply_thickness: float, ply_clearance: float, recess: float) -> float:
    return outer_side / 2 - recess - ply_thickness - ply_clearance


def tab_centers(span: float, edge_margin: float) -> list[float]:
    """Tab centers along a wall of length ``span``, relative to its midpoint."""
    layout = LinearLayout(length=span, count=2, start_offset=edge_margin, end_offset=edge_margin)
    return layout.centered_positions()


def build_tabs(
    inner_x: float,
    inner_y: float,
    outer_side: float,
    ply_thickness: float,
    ply_clearance: float,
    recess: float,
    tab_length: float,
    tab_depth: float,
    tab_thickness: float,
    edge_margin: float,
    epsilon: float = BOOLEAN_EPSILON,
) -> list[Tab]:
    top = tab_top_z(outer_side, ply_thickness, ply_clearance, recess)
    walls = [
        # (side, wall face position, runs along X)
        (WallSide.FRONT, -inner_y / 2, True),
        (WallSide.BACK, inner_y / 2, True),
        (WallSide.LEFT, -inner_x / 2, False),
        (WallSide.RIGHT, inner_x / 2, False),
    ]

    tabs = []
    for side, face, along_x in walls:
        span = inner_x if along_x else inner_y
        for i, center in enumerate(tab_centers(span, edge_margin)):
            position = (center, face, top) if along_x else (face, center, top)
            tabs.append(
                Tab(
                    length=tab_length,
                    depth=tab_depth,
                    thickness=tab_thickness,
                    wall_side=side,
                    name=f"tab_{side.name.lower()}_{i}",
                    location=Location(position, (0, 0, side.yaw)),
                    epsilon=epsilon,
                )
            )
    logger.debug("tabs: %d with top face at z=%.3f", len(tabs), top)
    return tabs


def build_tab_holes(tabs: list[Tab], hole_diameter: float, hole_inset: float) -> list[Part]:
    """Through-hole cutters for ``tabs``, ``hole_inset`` in from the wall face."""
    holes = [tab.with_hole(hole_diameter, hole_inset).hole_shape for tab in tabs]
    logger.debug("tab holes: %d x diameter %.3f at inset %.3f", len(holes), hole_diameter, hole_inset)
    return holes
