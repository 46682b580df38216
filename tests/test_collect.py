import os

import pytest

from shdr.collect import (
    ShaderEntry,
    make_var_name,
    process_folder,
    read_file,
    read_file_to_c_string,
)


def test_process_folder_collects_matching_files(shader_tree):
    shaders = process_folder([], str(shader_tree))

    by_name = {s.name: s for s in shaders}
    assert set(by_name) == {"generic", "lighting/phong", "post/bloom/blur"}
    assert by_name["post/bloom/blur"].var_name == "fallbackShader_post_bloom_blur"
    assert by_name["lighting/phong"].text == "vec3 phong;\n"
    assert by_name["generic"].text == "void main()\n{\n\tgl_FragColor = vec4(1.0);\n}\n"
    assert all(s.valid for s in shaders)


def test_process_folder_appends_to_accumulator(shader_tree):
    existing = ShaderEntry("x\n", "fallbackShader_x", "x")
    shaders = [existing]

    result = process_folder(shaders, str(shader_tree / "lighting"))

    assert result is shaders
    assert shaders[0] is existing
    assert [s.name for s in shaders[1:]] == ["phong"]


def test_process_folder_prefixes_relative_path(shader_tree):
    shaders = process_folder([], str(shader_tree / "post"), "post")
    assert [(s.name, s.var_name) for s in shaders] == [
        ("post/bloom/blur", "fallbackShader_post_bloom_blur")
    ]


def test_process_folder_visits_subfolders_depth_first(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "c.glsl").write_text("c\n")
    (tmp_path / "a" / "d.glsl").write_text("d\n")
    (tmp_path / "e.glsl").write_text("e\n")

    shaders = process_folder([], str(tmp_path))

    # Listing order is up to the filesystem, but nothing from another folder
    # may appear between the members of ``a``.
    names = [s.name for s in shaders]
    assert sorted(names) == ["a/b/c", "a/d", "e"]
    assert abs(names.index("a/b/c") - names.index("a/d")) == 1


def test_identifier_derivation(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "c.glsl").write_text("void main() {}\n")

    [shader] = process_folder([], str(tmp_path))

    assert shader.var_name == "fallbackShader_a_b_c"
    assert shader.name == "a/b/c"


def test_unreadable_file_is_skipped(tmp_path):
    (tmp_path / "good.glsl").write_text("vec4 good;\n")
    os.symlink(str(tmp_path / "missing.glsl"), str(tmp_path / "broken.glsl"))

    shaders = process_folder([], str(tmp_path))

    assert [s.name for s in shaders] == ["good"]


def test_missing_folder_yields_nothing(tmp_path):
    assert process_folder([], str(tmp_path / "nope")) == []


def test_extension_override(shader_tree):
    (shader_tree / "sky.vert").write_text("vec3 sky;\n")
    shaders = process_folder([], str(shader_tree), extension="vert")
    assert [s.name for s in shaders] == ["sky"]


def test_double_extension_keeps_inner_suffix(tmp_path):
    (tmp_path / "water.vert.glsl").write_text("vec3 water;\n")
    [shader] = process_folder([], str(tmp_path))
    assert shader.name == "water.vert"
    assert shader.var_name == "fallbackShader_water_vert"


def test_plain_text_entries_are_string_literals(shader_tree):
    shaders = process_folder([], str(shader_tree / "lighting"), plain_text=True)
    assert [s.text for s in shaders] == ['"vec3 phong;\\n"']


def test_read_file_to_c_string_missing(tmp_path):
    assert read_file_to_c_string(str(tmp_path / "nope.glsl")) is None


def test_read_file_normalises_crlf(tmp_path):
    path = tmp_path / "dos.glsl"
    path.write_bytes(b"vec4 a;\r\n\r\nvec4 b;\r\n")
    assert read_file_to_c_string(str(path)) == "vec4 a;\nvec4 b;\n"


def test_read_file_invalid(tmp_path):
    shader = read_file(str(tmp_path / "nope.glsl"), "nope")
    assert not shader.valid


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a/b/c", "fallbackShader_a_b_c"),
        ("post-fx/bloom.v2", "fallbackShader_post_fx_bloom_v2"),
        ("generic", "fallbackShader_generic"),
    ],
)
def test_make_var_name(name, expected):
    assert make_var_name(name) == expected


def test_make_var_name_custom_prefix():
    assert make_var_name("a/b", prefix="shader_") == "shader_a_b"
