"""Collect shader sources from a directory tree."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import List, Optional

from . import config
from .minify import minify

logger = logging.getLogger(__name__)

_NOT_IDENTIFIER = re.compile(r"[^0-9A-Za-z_]")


@dataclass(frozen=True)
class ShaderEntry:
    """A minified shader ready to be written into the header.

    ``name`` is the path relative to the shader root without its extension
    (``lighting/phong``), ``var_name`` the C symbol holding ``text``
    (``fallbackShader_lighting_phong``).
    """

    text: str
    var_name: str
    name: str
    valid: bool = True


def read_file_to_c_string(path: str, plain_text: bool = False) -> Optional[str]:
    """Read ``path`` and return its minified contents.

    Returns ``None`` when the file cannot be read.
    """

    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            content = f.read()
    except OSError as exc:
        logger.debug("Skipping unreadable shader %s: %s", path, exc)
        return None
    return minify(content, plain_text)


def make_var_name(name: str, prefix: Optional[str] = None) -> str:
    """Turn a logical shader name into a C identifier."""
    if prefix is None:
        prefix = config.IDENTIFIER_PREFIX
    return prefix + _NOT_IDENTIFIER.sub("_", name)


def read_file(
    file_path: str,
    name: str,
    plain_text: bool = False,
    prefix: Optional[str] = None,
) -> ShaderEntry:
    text = read_file_to_c_string(file_path, plain_text)
    if text is None:
        return ShaderEntry("", "", "", valid=False)
    return ShaderEntry(text, make_var_name(name, prefix), name)


def process_folder(
    shaders: List[ShaderEntry],
    folder: str,
    path: str = "",
    plain_text: bool = False,
    extension: Optional[str] = None,
    prefix: Optional[str] = None,
) -> List[ShaderEntry]:
    """Append an entry for every shader below ``folder`` to ``shaders``.

    Directories are visited depth first in the order the filesystem lists
    them.  ``path`` is the location of ``folder`` relative to the shader root
    and is empty on the outermost call.  Only files whose extension is exactly
    ``extension`` are collected, files that cannot be read are left out.
    """

    if extension is None:
        extension = config.SHADER_EXTENSION

    try:
        entries = os.scandir(folder)
    except OSError as exc:
        logger.warning("Unable to list shader folder %s: %s", folder, exc)
        return shaders

    with entries:
        for entry in entries:
            if entry.name in (".", ".."):
                continue
            if entry.is_dir():
                rel_path = entry.name if not path else path + "/" + entry.name
                process_folder(shaders, entry.path, rel_path, plain_text, extension, prefix)
                continue

            stem, dot, ext = entry.name.rpartition(".")
            if not dot or ext != extension:
                continue
            name = stem if not path else path + "/" + stem
            shader = read_file(entry.path, name, plain_text, prefix)
            if shader.valid:
                logger.debug("Collected shader %s as %s", shader.name, shader.var_name)
                shaders.append(shader)

    return shaders
