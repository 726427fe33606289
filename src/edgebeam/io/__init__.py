"""Input and output layer for edgebeam.

This module moves cutouts and PathSpecs in and out of files: batch files of
cutout mappings, their JSON results, and a standalone SVG preview drawn the
way the rendering layer draws the beam.

Key functions:
- read_cutouts / write_results: Batch JSON input and output
- render_svg: PathSpec to SVG document text
- write_svg: Write the SVG document to a file
"""

from edgebeam.io.batch import read_cutouts, results_to_dict, write_results
from edgebeam.io.svg import render_svg, write_svg

__all__ = [
    "read_cutouts",
    "render_svg",
    "results_to_dict",
    "write_results",
    "write_svg",
]
