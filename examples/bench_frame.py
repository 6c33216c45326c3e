# %%
"""Low bench frame in inch-native model units, no stretchers, tabs recessed under a 1/2 in top."""

from ocp_vscode import show_object

from build123_tubeframe import (
    ConfigurationError,
    TableFrame,
    TableFrameConfig,
    Units,
    format_bom,
)

config = TableFrameConfig(
    outer_x=60,
    outer_y=14,
    tube_od=1.5,
    wall=0.120,
    leg_length=16,
    add_stretchers=False,
    ply_thickness=0.5,
    ply_recess=0.125,
    tab_edge_margin=3,
    model_units=Units.INCH,
)

# %%
try:
    bench = TableFrame.build(config)
except ConfigurationError as exc:
    for problem in exc.problems:
        print("config:", problem)
    raise

show_object(bench.solid, name="bench_frame")
print("\n".join(format_bom(bench.bom())))
