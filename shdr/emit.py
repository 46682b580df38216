"""Render collected shaders into a C header."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from . import config
from .collect import ShaderEntry

logger = logging.getLogger(__name__)

HEADER_BANNER = """\
/*
===========================================================================
Copyright (C) 2006-2008 Robert Beckebans <trebor_7@users.sourceforge.net>

This file is part of XreaL source code.

XreaL source code is free software; you can redistribute it
and/or modify it under the terms of the GNU General Public License as
published by the Free Software Foundation; either version 2 of the License,
or (at your option) any later version.

XreaL source code is distributed in the hope that it will be
useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with XreaL source code; if not, write to the Free Software
Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA  02110-1301  USA
===========================================================================
*/
/* This file was generated by shdr2h, do not modify as it will get overwritten */"""


def _c_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_byte_rows(data: bytes, bytes_per_line: Optional[int] = None) -> str:
    """Return the body of a byte array initializer for ``data``.

    A terminating ``0x00`` is always appended, on its own row when the last
    row of content is full.
    """

    if bytes_per_line is None:
        bytes_per_line = config.BYTES_PER_LINE
    values = ["0x%02x" % b for b in data]
    rows = [
        ", ".join(values[i:i + bytes_per_line])
        for i in range(0, len(values), bytes_per_line)
    ]
    if rows and len(values) % bytes_per_line:
        rows[-1] += ", 0x00"
    else:
        rows.append("0x00")
    return ",\n".join("\t" + row for row in rows)


def format_const_char(
    name: str,
    text: str,
    plain_text: bool = False,
    comment: str = "",
) -> str:
    """Render one constant holding ``text``.

    In plain text mode ``text`` is expected to already be a quoted string
    literal, otherwise it is written as a ``const char`` array with room for
    the terminating zero.
    """

    out = ""
    if comment:
        out += "//%s\n" % comment
    if plain_text:
        return out + "const char *%s =\n\t%s;\n\n" % (name, text)

    data = text.encode("utf-8", errors="surrogateescape")
    out += "const char %s[%d] =\n{\n" % (name, len(data) + 1)
    out += format_byte_rows(data)
    return out + "\n};\n\n"


def format_dispatch(shaders: Iterable[ShaderEntry]) -> str:
    """Render ``GetFallbackShader`` mapping logical names to constants.

    Names are compared with ``Q_stricmp``, the first match wins and unknown
    names yield ``NULL``.
    """

    out = "static const char* GetFallbackShader(const char *name)\n{\n"
    first = True
    for shader in shaders:
        out += "\t" if first else "\telse "
        first = False
        out += "if(!Q_stricmp(name,%s))\n\t{\n\t\treturn %s;\n\t}\n" % (
            _c_string(shader.name),
            shader.var_name,
        )
    return out + "\treturn NULL;\n}\n"


def render_header(
    array_name: str,
    shaders: Sequence[ShaderEntry],
    shader_def: Optional[str] = None,
    plain_text: bool = False,
    extension: Optional[str] = None,
) -> str:
    """Return the complete header text."""

    if extension is None:
        extension = config.SHADER_EXTENSION

    parts: List[str] = [
        HEADER_BANNER + "\n",
        "#ifndef  SHADER_HEADER_%s\n" % array_name,
        "#define  SHADER_HEADER_%s\n\n" % array_name,
    ]
    for shader in shaders:
        parts.append(
            format_const_char(
                shader.var_name,
                shader.text,
                plain_text,
                "GLSL shader from %s.%s" % (shader.name, extension),
            )
        )

    if shader_def:
        parts.append(
            format_const_char(
                config.DEFINITIONS_SYMBOL,
                shader_def,
                plain_text,
                "GLSL Shader default definitions found in renderer2/gldef folder",
            )
        )
        parts.append("#define GetFallbackShaderDef() %s\n\n" % config.DEFINITIONS_SYMBOL)

    parts.append(format_dispatch(shaders))
    parts.append("#endif  // #ifdef SHADER_HEADER_%s\n" % array_name)
    return "".join(parts)


def write_output(
    out_file: str,
    array_name: str,
    shaders: Sequence[ShaderEntry],
    shader_def: Optional[str] = None,
    plain_text: bool = False,
) -> int:
    """Write the header to ``out_file``.

    Returns ``0`` on success and ``1`` when ``out_file`` cannot be opened for
    writing.  The header is rendered before the file is opened so a failure
    never leaves partial output behind.
    """

    header = render_header(array_name, shaders, shader_def, plain_text)
    try:
        f = open(out_file, "w", encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        logger.error("Unable to open %s for writing: %s", out_file, exc)
        return 1
    with f:
        f.write(header)
    logger.info("Wrote %d shaders to %s", len(shaders), out_file)
    return 0
