"""Embed shader sources into a generated C header.

The package is split the same way the generation pipeline runs:

``minify``
    Strips comments and collapses whitespace in a single shader source.

``collect``
    Walks a shader tree and turns every matching file into a
    :class:`~shdr.collect.ShaderEntry`.

``emit``
    Renders the collected entries into a header with a lookup function.

``cli``
    Command line driver tying the pieces together.
"""

from .collect import ShaderEntry, process_folder, read_file_to_c_string
from .emit import write_output
from .minify import minify

__all__ = [
    "ShaderEntry",
    "minify",
    "process_folder",
    "read_file_to_c_string",
    "write_output",
]
