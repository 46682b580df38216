"""Command line driver for ``shdr2h``.

Usage::

    shdr2h <hdrname> <glsl-inputfolder> <shaderdef-file> [<plain text>] <outfile>

``<plain text>`` selects readable string literals when it is ``true``, any
other value keeps the byte array form.  Exit status is ``0`` on success,
``1`` when the output cannot be written and ``0xFF`` on a usage error.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import config
from .collect import ShaderEntry, process_folder, read_file_to_c_string
from .emit import write_output

logger = logging.getLogger(__name__)

USAGE = "syntax error, usage :  shdr2h hdrname glsl-inputfolder shaderdef-file <plain text> outfile"
EXIT_USAGE = 0xFF


class UsageError(Exception):
    """Raised when the command line is missing required arguments."""


@dataclass
class Options:
    array_name: str
    shader_folder: str
    definitions_file: str
    out_file: str
    plain_text: bool = False


def parse_args(argv: Sequence[str]) -> Options:
    """Build :class:`Options` from positional arguments (program name excluded).

    The plain text flag is only read when exactly five arguments are given.
    With more than five the extra ones are ignored and the fourth argument is
    the output file.
    """

    if len(argv) < 4:
        raise UsageError(USAGE)
    array_name, shader_folder, definitions_file = argv[:3]
    if len(argv) == 5:
        return Options(array_name, shader_folder, definitions_file, argv[4], argv[3] == "true")
    return Options(array_name, shader_folder, definitions_file, argv[3])


def generate(options: Options) -> int:
    """Collect shaders, minify the definitions file and write the header."""

    shaders: List[ShaderEntry] = []
    process_folder(shaders, options.shader_folder, plain_text=options.plain_text)
    shader_def = read_file_to_c_string(options.definitions_file, options.plain_text)
    logger.debug(
        "Collected %d shaders from %s, definitions %s",
        len(shaders),
        options.shader_folder,
        "found" if shader_def else "missing",
    )
    return write_output(
        options.out_file,
        options.array_name,
        shaders,
        shader_def,
        options.plain_text,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return EXIT_USAGE
    return generate(options)


def run() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(main())


if __name__ == "__main__":
    run()
