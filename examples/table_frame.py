# %%
"""Welded tube table frame: 48 x 22 in top, 1-1/8 in square tube, plywood on tabs."""

import logging
from pathlib import Path

from build123d import export_step
from ocp_vscode import show_object, set_defaults, Camera

from build123_tubeframe import build_table_frame, format_bom, get_config, setup_logging

setup_logging(logging.INFO)
set_defaults(reset_camera=Camera.CENTER)

# %%
config = get_config(
    outer_x=48,
    outer_y=22,
    leg_length=32,
    stretcher_height=6,
    tabs_with_holes=True,
)
frame = build_table_frame(config)
print(frame.summary())

# %%
# Fast preview of the separate parts
frame.show(show_object)

# %%
# Composed solid and cut list
show_object(frame.solid, name="table_frame", options={"color": "steelblue"})
print("\n".join(format_bom(frame.bom())))

# %%
output_dir = Path(__file__).parent / "table_frame_output"
output_dir.mkdir(parents=True, exist_ok=True)
export_step(frame.solid, str(output_dir / "table_frame.step"))
