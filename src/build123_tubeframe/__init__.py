import logging

from build123_tubeframe.units import BOOLEAN_EPSILON, UnitConverter, Units, to_model_units
from build123_tubeframe.config import (
    DEFAULT_CONFIG,
    ConfigurationError,
    DimensionSet,
    TableFrameConfig,
    get_config,
    validate_config,
)
from build123_tubeframe.primitives import (
    TubeAnchor,
    TubeAxis,
    hollow_tube_along_axis,
    tube_cross_section_area,
)
from build123_tubeframe.elements import HoleSpec, Tab, TubeSegment, WallSide
from build123_tubeframe.layout import LinearLayout
from build123_tubeframe.parts import (
    build_frame,
    build_legs,
    build_stretchers,
    build_tab_holes,
    build_tabs,
)
from build123_tubeframe.model import GeometryKernelError, TableFrameModel
from build123_tubeframe.bom import BomEntry, BomReport, compute_bom, format_bom
from build123_tubeframe.table import TableFrame, build_table_frame
from build123_tubeframe.logging_config import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BOOLEAN_EPSILON",
    "UnitConverter",
    "Units",
    "to_model_units",
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "DimensionSet",
    "TableFrameConfig",
    "get_config",
    "validate_config",
    "TubeAnchor",
    "TubeAxis",
    "hollow_tube_along_axis",
    "tube_cross_section_area",
    "HoleSpec",
    "Tab",
    "TubeSegment",
    "WallSide",
    "LinearLayout",
    "build_frame",
    "build_legs",
    "build_stretchers",
    "build_tab_holes",
    "build_tabs",
    "GeometryKernelError",
    "TableFrameModel",
    "BomEntry",
    "BomReport",
    "compute_bom",
    "format_bom",
    "TableFrame",
    "build_table_frame",
    "setup_logging",
]
