from build123_tubeframe.parts.frame import build_frame, short_rail_length
from build123_tubeframe.parts.legs import build_legs, floor_z
from build123_tubeframe.parts.stretchers import build_stretchers, stretcher_length, stretcher_center_z
from build123_tubeframe.parts.tabs import build_tabs, build_tab_holes, tab_centers, tab_top_z

__all__ = [
    "build_frame",
    "short_rail_length",
    "build_legs",
    "floor_z",
    "build_stretchers",
    "stretcher_length",
    "stretcher_center_z",
    "build_tabs",
    "build_tab_holes",
    "tab_centers",
    "tab_top_z",
]
