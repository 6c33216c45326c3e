"""Table frame parameters and the resolved dimension set.

Raw parameters are given in inches. ``DimensionSet.from_config`` validates
them and converts every length into model units once, so the assemblers
only ever see a single consistent set of numbers.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from build123_tubeframe.units import UnitConverter, Units

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a parameter combination cannot produce a valid frame."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("Invalid table frame configuration:\n  - " + "\n  - ".join(self.problems))


@dataclass(frozen=True)
class TableFrameConfig:
    """Raw table frame parameters (lengths in inches)."""

    # Frame footprint and tube stock
    outer_x: float = 48.0
    outer_y: float = 22.0
    tube_od: float = 1.125
    wall: float = 0.100

    # Legs
    add_legs: bool = True
    leg_length: float = 32.0

    # Stretchers
    add_stretchers: bool = True
    stretcher_height: float = 6.0       # Underside above floor
    stretcher_gap: float = 0.0          # Relief at each end
    stretcher_overlap: float = 0.25     # Penetration into each leg

    # Plywood and tabs
    add_tabs: bool = True
    ply_thickness: float = 0.75
    ply_clearance: float = 0.0
    ply_recess: float = 0.0             # Plywood top below frame top
    tab_length: float = 1.0
    tab_depth: float = 1.0
    tab_thickness: float = 0.125
    tab_edge_margin: float = 5.0

    # Tab holes
    tabs_with_holes: bool = False
    hole_diameter: float = 0.25
    hole_inset: float = 0.5

    # Material
    material_name: str = "mild steel"
    material_density: float = 0.283    # lb/in^3

    model_units: Units = Units.MM

    @property
    def inner_x(self) -> float:
        return self.outer_x - 2 * self.tube_od

    @property
    def inner_y(self) -> float:
        return self.outer_y - 2 * self.tube_od

    @property
    def tab_top(self) -> float:
        """Height of the tab top face relative to the frame rail centerline."""
        return self.tube_od / 2 - self.ply_recess - self.ply_thickness - self.ply_clearance

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> TableFrameConfig:
        """Build a config from a loosely typed mapping, e.g. one parsed from JSON or TOML.

        Numeric values given as strings are converted; anything that is not a
        finite number is reported as a ``ConfigurationError`` naming the parameter.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError([f"unknown parameter '{name}'" for name in unknown])

        kwargs = dict(values)
        problems = []
        for name in _NUMERIC_FIELDS:
            if name not in kwargs:
                continue
            value = kwargs[name]
            try:
                if isinstance(value, bool):
                    raise TypeError(name)
                number = float(value)
            except (TypeError, ValueError):
                problems.append(f"{name} must be a number, got {value!r}")
                continue
            if not math.isfinite(number):
                problems.append(f"{name} must be a finite number, got {value!r}")
            kwargs[name] = number
        if "model_units" in kwargs:
            try:
                kwargs["model_units"] = Units.parse(kwargs["model_units"])
            except ValueError as exc:
                problems.append(str(exc))
        if problems:
            raise ConfigurationError(problems)
        return cls(**kwargs)


DEFAULT_CONFIG = TableFrameConfig()

# Parameters that hold a length, density or offset (``float`` fields).
_NUMERIC_FIELDS = tuple(f.name for f in fields(TableFrameConfig) if f.type == "float")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def get_config(**overrides: Any) -> TableFrameConfig:
    """Get the default configuration, optionally with some parameters replaced."""
    if not overrides:
        return DEFAULT_CONFIG
    return replace(DEFAULT_CONFIG, **overrides)


def _config_problems(config: TableFrameConfig) -> list[str]:
    problems: list[str] = []
    c = config

    wrong_type = [name for name in _NUMERIC_FIELDS if not _is_number(getattr(c, name))]
    if wrong_type:
        return [f"{name} must be a number, got {getattr(c, name)!r}" for name in wrong_type]

    positive = ["outer_x", "outer_y", "tube_od", "wall", "material_density"]
    non_negative: list[str] = []
    if c.add_legs or c.add_stretchers:
        positive.append("leg_length")
    if c.add_stretchers:
        non_negative += ["stretcher_height", "stretcher_gap", "stretcher_overlap"]
    if c.add_tabs:
        positive += ["ply_thickness", "tab_length", "tab_depth", "tab_thickness"]
        non_negative += ["ply_clearance", "ply_recess", "tab_edge_margin"]
        if c.tabs_with_holes:
            positive += ["hole_diameter", "hole_inset"]
    for name in positive:
        if getattr(c, name) <= 0:
            problems.append(f"{name} must be positive, got {getattr(c, name)}")
    for name in non_negative:
        if getattr(c, name) < 0:
            problems.append(f"{name} must not be negative, got {getattr(c, name)}")
    if problems:
        return problems

    if c.wall >= c.tube_od / 2:
        problems.append(
            f"wall ({c.wall}) must be less than half of tube_od ({c.tube_od}); "
            f"inner tube side would be {c.tube_od - 2 * c.wall}"
        )
    if c.inner_x <= 0 or c.inner_y <= 0:
        problems.append(
            f"tube_od ({c.tube_od}) leaves no inner opening in a {c.outer_x} x {c.outer_y} frame "
            f"(inner {c.inner_x} x {c.inner_y})"
        )
        return problems

    if c.add_stretchers:
        if not c.add_legs:
            problems.append("add_stretchers requires add_legs")
        if c.stretcher_overlap >= c.tube_od:
            problems.append(
                f"stretcher_overlap ({c.stretcher_overlap}) must be less than tube_od ({c.tube_od}) "
                "or the stretcher protrudes through the leg"
            )
        if min(c.inner_x, c.inner_y) <= 2 * c.tube_od:
            problems.append(
                f"inner opening {c.inner_x} x {c.inner_y} is too small for opposite stretchers "
                f"of tube_od {c.tube_od}"
            )
        if c.stretcher_gap >= c.stretcher_overlap:
            problems.append(
                f"stretcher_gap ({c.stretcher_gap}) must be less than stretcher_overlap "
                f"({c.stretcher_overlap}) or the stretchers stop short of the legs"
            )
        if c.stretcher_height + c.tube_od > c.leg_length:
            problems.append(
                f"stretcher_height ({c.stretcher_height}) plus tube_od ({c.tube_od}) "
                f"exceeds leg_length ({c.leg_length})"
            )

    if c.add_tabs:
        for axis, span in (("x", c.inner_x), ("y", c.inner_y)):
            if 2 * (span / 2 - c.tab_edge_margin) <= c.tab_length:
                problems.append(
                    f"tab_edge_margin ({c.tab_edge_margin}) is too large for inner_{axis} ({span}): "
                    f"tabs of length {c.tab_length} would overlap"
                )
        if c.tab_edge_margin < c.tab_length / 2 + c.tab_depth:
            problems.append(
                f"tab_edge_margin ({c.tab_edge_margin}) must be at least "
                f"tab_length/2 + tab_depth ({c.tab_length / 2 + c.tab_depth}) "
                "so tabs on adjacent walls stay clear"
            )
        if c.tab_depth >= min(c.inner_x, c.inner_y) / 2:
            problems.append(f"tab_depth ({c.tab_depth}) reaches past the middle of the opening")
        if c.tab_top - c.tab_thickness < -c.tube_od / 2:
            problems.append(
                f"tab bottom ({c.tab_top - c.tab_thickness}) falls below the frame rails "
                f"({-c.tube_od / 2}); reduce ply_thickness, ply_clearance or ply_recess"
            )
        if c.tabs_with_holes:
            radius = c.hole_diameter / 2
            if c.hole_inset - radius <= 0 or c.hole_inset + radius >= c.tab_depth:
                problems.append(
                    f"hole of diameter {c.hole_diameter} at inset {c.hole_inset} "
                    f"does not fit in tab_depth {c.tab_depth}"
                )
            if c.hole_diameter >= c.tab_length:
                problems.append(
                    f"hole_diameter ({c.hole_diameter}) must be less than tab_length ({c.tab_length})"
                )
    return problems


def validate_config(config: TableFrameConfig) -> TableFrameConfig:
    """Check every derived constraint, raising one ``ConfigurationError`` listing all failures."""
    problems = _config_problems(config)
    if problems:
        for problem in problems:
            logger.debug("configuration problem: %s", problem)
        raise ConfigurationError(problems)
    return config


@dataclass(frozen=True)
class DimensionSet:
    """Validated frame dimensions in model units.

    Every assembler and the BOM read from this one object; nothing else
    carries dimensional state.
    """

    outer_x: float
    outer_y: float
    tube_od: float
    wall: float
    leg_length: float
    stretcher_height: float
    stretcher_gap: float
    stretcher_overlap: float
    ply_thickness: float
    ply_clearance: float
    ply_recess: float
    tab_length: float
    tab_depth: float
    tab_thickness: float
    tab_edge_margin: float
    hole_diameter: float
    hole_inset: float
    add_legs: bool = True
    add_stretchers: bool = True
    add_tabs: bool = True
    tabs_with_holes: bool = False
    material_name: str = "mild steel"
    material_density: float = 0.283
    converter: UnitConverter = field(default_factory=UnitConverter)

    _LENGTHS = (
        "outer_x", "outer_y", "tube_od", "wall", "leg_length",
        "stretcher_height", "stretcher_gap", "stretcher_overlap",
        "ply_thickness", "ply_clearance", "ply_recess",
        "tab_length", "tab_depth", "tab_thickness", "tab_edge_margin",
        "hole_diameter", "hole_inset",
    )

    @classmethod
    def from_config(cls, config: TableFrameConfig, units: Units | None = None) -> DimensionSet:
        validate_config(config)
        try:
            model_units = Units.parse(units or config.model_units)
        except ValueError as exc:
            raise ConfigurationError([str(exc)]) from exc
        converter = UnitConverter(model_units)
        lengths = {name: converter.to_model_units(getattr(config, name)) for name in cls._LENGTHS}
        dims = cls(
            **lengths,
            add_legs=config.add_legs,
            add_stretchers=config.add_stretchers,
            add_tabs=config.add_tabs,
            tabs_with_holes=config.tabs_with_holes,
            material_name=config.material_name,
            material_density=config.material_density,
            converter=converter,
        )
        logger.debug(
            "resolved dimensions in %s: outer %.3f x %.3f, inner %.3f x %.3f",
            converter.model_units.value, dims.outer_x, dims.outer_y, dims.inner_x, dims.inner_y,
        )
        return dims

    @property
    def units(self) -> Units:
        return self.converter.model_units

    @property
    def epsilon(self) -> float:
        return self.converter.epsilon

    @property
    def inner_x(self) -> float:
        return self.outer_x - 2 * self.tube_od

    @property
    def inner_y(self) -> float:
        return self.outer_y - 2 * self.tube_od

    @property
    def tube_inner_side(self) -> float:
        return self.tube_od - 2 * self.wall

    @property
    def floor_z(self) -> float:
        return -self.tube_od / 2 - self.leg_length

    @property
    def tab_top_z(self) -> float:
        return self.tube_od / 2 - self.ply_recess - self.ply_thickness - self.ply_clearance

    def to_inches(self, value: float) -> float:
        return self.converter.to_inches(value)
