"""Pipeline Monitor - SystemVerilog status monitors for instruction pipelines."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pipeline-monitor")
except PackageNotFoundError:
    # Package not installed (running from source without pip install -e)
    __version__ = "0.0.0.dev"

from .models import Edge, EdgeKind, Forward, Hazard, Pipeline, Stage
from .stitch import stitch
from .testbench import TestbenchGenerator, generate_testbench

__all__ = [
    "Edge",
    "EdgeKind",
    "Forward",
    "Hazard",
    "Pipeline",
    "Stage",
    "TestbenchGenerator",
    "generate_testbench",
    "stitch",
    "__version__",
]
