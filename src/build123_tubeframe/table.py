"""Table frame builder - high-level API for a welded tube table frame.

A table frame consists of:
- A rectangular perimeter of four rails (butt-jointed)
- Four legs under the outer corners
- A lower perimeter of four stretchers tying the legs together
- Eight tabs along the inner walls carrying a plywood top, optionally drilled
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from build123d import Part

from build123_tubeframe.bom import BomReport, compute_bom
from build123_tubeframe.config import DimensionSet, TableFrameConfig
from build123_tubeframe.model import TableFrameModel
from build123_tubeframe.parts import build_frame, build_legs, build_stretchers, build_tab_holes, build_tabs

logger = logging.getLogger(__name__)

PART_COLORS = {
    "frame_long": "steelblue",
    "frame_short": "steelblue",
    "leg": "slategray",
    "stretcher_x": "lightslategray",
    "stretcher_y": "lightslategray",
    "tab": "orange",
}


@dataclass
class TableFrame:
    """A complete table frame.

    Example::

        frame = TableFrame.build(get_config(outer_x=60, leg_length=30))
        solid = frame.solid
        print("\\n".join(format_bom(frame.bom())))
    """

    config: TableFrameConfig
    dims: DimensionSet
    model: TableFrameModel = field(default_factory=TableFrameModel)
    _solid: Part | None = field(default=None, init=False, repr=False)

    @classmethod
    def build(cls, config: TableFrameConfig) -> TableFrame:
        """Validate ``config`` and lay out every part. Raises ``ConfigurationError`` first."""
        dims = DimensionSet.from_config(config)
        frame = cls(config=config, dims=dims)
        frame._build_parts()
        logger.info("built %r", frame.model)
        return frame

    def _build_parts(self) -> None:
        d = self.dims
        eps = d.epsilon
        self.model.add_parts(build_frame(d.outer_x, d.outer_y, d.tube_od, d.wall, epsilon=eps))
        if d.add_legs:
            self.model.add_parts(build_legs(d.outer_x, d.outer_y, d.tube_od, d.leg_length, d.wall, epsilon=eps))
        if d.add_stretchers:
            self.model.add_parts(
                build_stretchers(
                    d.outer_x,
                    d.outer_y,
                    d.tube_od,
                    d.wall,
                    d.leg_length,
                    d.stretcher_height,
                    d.stretcher_gap,
                    d.stretcher_overlap,
                    epsilon=eps,
                )
            )
        if d.add_tabs:
            tabs = build_tabs(
                d.inner_x,
                d.inner_y,
                d.tube_od,
                d.ply_thickness,
                d.ply_clearance,
                d.ply_recess,
                d.tab_length,
                d.tab_depth,
                d.tab_thickness,
                d.tab_edge_margin,
                epsilon=eps,
            )
            if d.tabs_with_holes:
                tabs = [t.with_hole(d.hole_diameter, d.hole_inset) for t in tabs]
                self.model.add_cuts(build_tab_holes(tabs, d.hole_diameter, d.hole_inset))
            self.model.add_parts(tabs)

    @property
    def solid(self) -> Part:
        """The composed solid, built on first access."""
        if self._solid is None:
            self._solid = self.model.compose()
        return self._solid

    def bom(self) -> BomReport:
        return compute_bom(self.dims)

    def all_parts(self) -> list[tuple[Part, str]]:
        return [(p.global_shape, p.name) for p in self.model]

    def show(self, show_object_func) -> None:
        """Display the uncomposed parts using provided show_object function."""
        for part in self.model:
            color = PART_COLORS.get(part.category)
            if color:
                show_object_func(part.global_shape, name=part.name, options={"color": color})
            else:
                show_object_func(part.global_shape, name=part.name)

    def summary(self) -> str:
        d = self.dims
        unit = d.units.value
        lines = [
            "Table Frame Summary",
            "===================",
            f"Outer: {d.outer_x:.3f} x {d.outer_y:.3f} {unit}, inner: {d.inner_x:.3f} x {d.inner_y:.3f} {unit}",
            f"Tube: {d.tube_od:.3f} {unit} square, {d.wall:.3f} {unit} wall",
        ]
        if d.add_legs:
            lines.append(f"Legs: {d.leg_length:.3f} {unit}")
        if d.add_stretchers:
            lines.append(f"Stretchers: {d.stretcher_height:.3f} {unit} above floor")
        if d.add_tabs:
            holes = ", drilled" if d.tabs_with_holes else ""
            lines.append(f"Tabs: top face at z={d.tab_top_z:.3f} {unit}{holes}")
        lines.append(f"Parts: {len(self.model)} solids, {len(self.model.cuts)} holes")
        return "\n".join(lines)


def build_table_frame(config: TableFrameConfig) -> TableFrame:
    return TableFrame.build(config)
