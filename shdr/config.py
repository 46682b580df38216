"""Runtime settings for header generation.

Values are read from the environment once at import time.  Dotted setting
names map to ``SHDR__FOO`` style variables, so ``shdr.extension`` is
configured through ``SHDR__EXTENSION``.
"""

from __future__ import annotations

import os


def _env(name: str, default: str | None = None) -> str | None:
    """Fetch configuration values using ``shdr.foo`` style names."""

    return os.getenv(name.replace(".", "__").upper(), default)


# File extension (without the dot) of the shader sources to embed.
SHADER_EXTENSION: str = _env("shdr.extension", "glsl") or "glsl"
IDENTIFIER_PREFIX: str = _env("shdr.identifier_prefix", "fallbackShader_") or "fallbackShader_"
DEFINITIONS_SYMBOL: str = (
    _env("shdr.definitions_symbol", "defaultShaderDefinitions") or "defaultShaderDefinitions"
)
# Number of bytes written per row in byte-array mode.
BYTES_PER_LINE: int = max(1, int(_env("shdr.bytes_per_line", "16") or "16"))
LOG_LEVEL: str = (_env("shdr.log_level", "WARNING") or "WARNING").upper()
