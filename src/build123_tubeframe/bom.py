"""Bill of materials for a table frame.

The BOM is computed from the dimension set alone, never from the solid, and
always reports in inches and pounds regardless of the model unit.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from build123_tubeframe.config import DimensionSet
from build123_tubeframe.parts import short_rail_length, stretcher_length
from build123_tubeframe.primitives import tube_cross_section_area

logger = logging.getLogger(__name__)

INCHES_PER_FOOT = 12.0


@dataclass(frozen=True)
class BomEntry:
    part: str
    quantity: int
    length: float           # Nominal cut length, inches
    size: str
    stock: str
    is_tube: bool = True

    @property
    def total_length(self) -> float:
        return self.quantity * self.length


@dataclass(frozen=True)
class BomReport:
    material_name: str
    material_density: float             # lb/in^3
    entries: tuple[BomEntry, ...]
    tube_cross_section_area: float      # in^2
    total_tube_length: float            # in
    tube_weight: float                  # lb
    tab_weight: float                   # lb
    inner_x: float                      # in
    inner_y: float                      # in

    @property
    def total_tube_length_ft(self) -> float:
        return self.total_tube_length / INCHES_PER_FOOT

    @property
    def total_weight(self) -> float:
        return self.tube_weight + self.tab_weight

    def find(self, part: str) -> BomEntry | None:
        return next((e for e in self.entries if e.part == part), None)

    def as_rows(self) -> list[dict]:
        return [asdict(e) for e in self.entries]


def _fmt(value: float) -> str:
    return f"{value:g}"


def compute_bom(dims: DimensionSet) -> BomReport:
    """Derive the cut list, total tube length and weight from ``dims``."""
    inch = dims.to_inches
    od = inch(dims.tube_od)
    wall = inch(dims.wall)
    tube_stock = f'{_fmt(od)}" sq tube x {_fmt(wall)}" wall'
    tube_size = f'{_fmt(od)} x {_fmt(od)}'

    entries = [
        BomEntry("Frame long rail", 2, inch(dims.outer_x), tube_size, tube_stock),
        BomEntry("Frame short rail", 2, inch(short_rail_length(dims.outer_y, dims.tube_od)), tube_size, tube_stock),
    ]
    if dims.add_legs:
        entries.append(BomEntry("Leg", 4, inch(dims.leg_length), tube_size, tube_stock))
    if dims.add_stretchers:
        for label, span in (("Stretcher X", dims.inner_x), ("Stretcher Y", dims.inner_y)):
            length = stretcher_length(span, dims.stretcher_gap, dims.stretcher_overlap)
            entries.append(BomEntry(label, 2, inch(length), tube_size, tube_stock))

    tab_weight = 0.0
    if dims.add_tabs:
        tab_l, tab_d, tab_t = inch(dims.tab_length), inch(dims.tab_depth), inch(dims.tab_thickness)
        stock = f'{_fmt(tab_t)}" flat bar'
        if dims.tabs_with_holes:
            stock += f', {_fmt(inch(dims.hole_diameter))}" hole'
        tabs = BomEntry(
            "Tab", 8, tab_l, f"{_fmt(tab_l)} x {_fmt(tab_d)} x {_fmt(tab_t)}", stock, is_tube=False
        )
        entries.append(tabs)
        tab_weight = tabs.quantity * tab_l * tab_d * tab_t * dims.material_density

    area = tube_cross_section_area(od, wall)
    total_length = sum(e.total_length for e in entries if e.is_tube)
    report = BomReport(
        material_name=dims.material_name,
        material_density=dims.material_density,
        entries=tuple(entries),
        tube_cross_section_area=area,
        total_tube_length=total_length,
        tube_weight=area * total_length * dims.material_density,
        tab_weight=tab_weight,
        inner_x=inch(dims.inner_x),
        inner_y=inch(dims.inner_y),
    )
    logger.info(
        "BOM: %.3f in of tube, %.2f lb total", report.total_tube_length, report.total_weight
    )
    return report


def format_bom(report: BomReport) -> list[str]:
    """Render ``report`` as text lines in the standard report order."""
    lines = [f"Material: {report.material_name} ({_fmt(report.material_density)} lb/in^3)"]
    for e in report.entries:
        if e.is_tube:
            lines.append(f"{e.part}: {e.quantity} @ {e.length:.3f} in ({e.stock})")
        else:
            lines.append(f"{e.part}: {e.quantity} @ {e.size} in ({e.stock})")
    lines += [
        f"Total tube length: {report.total_tube_length:.3f} in ({report.total_tube_length_ft:.3f} ft)",
        f"Tube weight: {report.tube_weight:.2f} lb",
        f"Tab weight: {report.tab_weight:.2f} lb",
        f"Total weight: {report.total_weight:.2f} lb",
        f"Inner opening: {report.inner_x:.3f} x {report.inner_y:.3f} in",
    ]
    return lines
