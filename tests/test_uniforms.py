import numpy as np
from pytest import raises

from shadermodules import UniformSpec, extract_uniforms
from shadermodules._uniforms import parse_default


def test_extract_uniforms_empty():
    assert extract_uniforms("") == ("", {})
    assert extract_uniforms(None) == ("", {})


def test_extract_uniforms_none_present():
    code = "attribute vec2 a_Position;\nvoid main() {}\n"
    content, uniforms = extract_uniforms(code)
    assert content == code
    assert uniforms == {}


def test_extract_uniforms_plain():
    code = "uniform float u_a;\nuniform   vec2  u_b ;\nvoid main() {}"
    content, uniforms = extract_uniforms(code)

    assert content == "uniform float u_a;\nuniform vec2 u_b;\nvoid main() {}"
    assert list(uniforms) == ["u_a", "u_b"]
    assert uniforms["u_a"] == UniformSpec("float", 0.0)
    assert uniforms["u_b"].type == "vec2"
    assert uniforms["u_b"].default.dtype == np.float32
    assert np.all(uniforms["u_b"].default == [0, 0])


def test_extract_uniforms_with_defaults():
    code = """
    uniform float u_Opacity : 1.0;
    uniform int u_Count:3;
    uniform bool u_Visible : true;
    uniform vec4 u_Color : [1.0, 0.0, 0.5, 1.0];
    uniform ivec2 u_Size : [2, 3];
    uniform bvec2 u_Flags : [true, false];
    """
    content, uniforms = extract_uniforms(code)

    assert ":" not in content
    assert "uniform float u_Opacity;" in content
    assert "uniform int u_Count;" in content
    assert "uniform vec4 u_Color;" in content

    assert uniforms["u_Opacity"] == UniformSpec("float", 1.0)
    assert uniforms["u_Count"] == UniformSpec("int", 3)
    assert uniforms["u_Visible"] == UniformSpec("bool", True)
    assert uniforms["u_Color"] == UniformSpec(
        "vec4", np.array([1.0, 0.0, 0.5, 1.0], np.float32)
    )
    assert uniforms["u_Size"].default.dtype == np.int32
    assert uniforms["u_Size"].default.tolist() == [2, 3]
    assert uniforms["u_Flags"].default.tolist() == [True, False]


def test_extract_uniforms_matrices():
    _, uniforms = extract_uniforms(
        "uniform mat3 u_Projection;\nuniform mat2 u_Rotation : [1, 2, 3, 4];"
    )

    assert np.all(uniforms["u_Projection"].default == np.eye(3))
    # Column-major, like GLSL
    assert uniforms["u_Rotation"].default.tolist() == [[1, 3], [2, 4]]


def test_extract_uniforms_samplers():
    content, uniforms = extract_uniforms("uniform sampler2D u_Texture;")
    assert content == "uniform sampler2D u_Texture;"
    assert uniforms["u_Texture"] == UniformSpec("sampler2D", None)


def test_extract_uniforms_unsupported_pass_through():
    # Arrays and unknown types are left alone
    code = "uniform vec3 u_Lights[4];\nuniform Foo u_foo;\nfloat my_uniform;"
    content, uniforms = extract_uniforms(code)
    assert content == code
    assert uniforms == {}


def test_extract_uniforms_is_pure():
    code = "uniform float u_a : 2.0;"
    assert extract_uniforms(code) == extract_uniforms(code)


def test_parse_default_wrong_size():
    with raises(ValueError):
        parse_default("vec3", "[1, 2]")
    with raises(ValueError):
        parse_default("float", "1.0f")


def test_extract_uniforms_bad_default(caplog):
    code = (
        "uniform mat2 u_m : [1, 2, 3];\nuniform float u_f : 1.0f;\nuniform int u_i : 7;"
    )
    content, uniforms = extract_uniforms(code)

    assert content == "uniform mat2 u_m;\nuniform float u_f;\nuniform int u_i;"
    assert uniforms["u_m"] == UniformSpec("mat2", None)
    assert uniforms["u_f"] == UniformSpec("float", None)
    assert uniforms["u_i"] == UniformSpec("int", 7)
    assert "Ignoring default of uniform 'u_m'" in caplog.text
    assert "Ignoring default of uniform 'u_f'" in caplog.text


def test_uniform_spec():
    assert UniformSpec("float", 1.0) == UniformSpec("float", 1.0)
    assert UniformSpec("float", 1.0) != UniformSpec("float", 2.0)
    assert UniformSpec("float", 1.0) != UniformSpec("int", 1.0)
    assert UniformSpec("vec2", np.zeros(2)) == UniformSpec("vec2", np.zeros(2))
    assert UniformSpec("vec2", np.zeros(2)) != UniformSpec("vec2", np.ones(2))
    assert UniformSpec("float", 1.0) != 1.0
    assert "float" in repr(UniformSpec("float", 1.0))
