import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


@pytest.fixture
def shader_tree(tmp_path):
    """Create a small shader tree and return its root."""

    root = tmp_path / "glsl"
    (root / "lighting").mkdir(parents=True)
    (root / "post" / "bloom").mkdir(parents=True)

    (root / "generic.glsl").write_text(
        "/* generic */\nvoid main()\n{\n\tgl_FragColor = vec4(1.0);\n}\n"
    )
    (root / "lighting" / "phong.glsl").write_text("// phong\nvec3 phong;\n")
    (root / "post" / "bloom" / "blur.glsl").write_text("float blur;   \n\n\n")
    (root / "notes.txt").write_text("not a shader\n")
    (root / "lighting" / "legacy.GLSL").write_text("vec3 legacy;\n")
    return root
