"""
Extraction of uniform declarations from GLSL source.

A uniform can be annotated with a default value, using a colon after the name::

    uniform float u_opacity : 1.0;
    uniform vec4 u_color : [1.0, 0.0, 0.0, 1.0];

Such declarations are rewritten to valid GLSL (``uniform float u_opacity;``),
and the type and default of each uniform are collected into ``UniformSpec``
objects.
"""

import re

import numpy as np

from .utils import logger


# GLSL type -> (numpy dtype, shape)
uniform_types = {
    "bool": ("bool", ()),
    "int": ("int32", ()),
    "float": ("float32", ()),
    "vec2": ("float32", (2,)),
    "vec3": ("float32", (3,)),
    "vec4": ("float32", (4,)),
    "ivec2": ("int32", (2,)),
    "ivec3": ("int32", (3,)),
    "ivec4": ("int32", (4,)),
    "bvec2": ("bool", (2,)),
    "bvec3": ("bool", (3,)),
    "bvec4": ("bool", (4,)),
    "mat2": ("float32", (2, 2)),
    "mat3": ("float32", (3, 3)),
    "mat4": ("float32", (4, 4)),
    "sampler2D": (None, None),
    "samplerCube": (None, None),
}

re_uniform = re.compile(
    r"\buniform\s+(" + "|".join(uniform_types) + r")\s+(\w+)\s*(?::\s*([^;]*?))?\s*;"
)


class UniformSpec:
    """The declared type and default value of a uniform."""

    __slots__ = ["type", "default"]

    def __init__(self, type, default=None):
        self.type = type
        self.default = default

    def __repr__(self):
        return f"<UniformSpec {self.type} default={self.default!r}>"

    def __eq__(self, other):
        if not isinstance(other, UniformSpec):
            return NotImplemented
        if self.type != other.type:
            return False
        if isinstance(self.default, np.ndarray) or isinstance(
            other.default, np.ndarray
        ):
            return np.array_equal(self.default, other.default)
        return self.default == other.default


def extract_uniforms(source):
    """Strip default-value annotations from the uniform declarations in the given
    GLSL source.

    Returns a tuple ``(content, uniforms)``, with ``content`` the rewritten
    source and ``uniforms`` a dict that maps uniform names to ``UniformSpec``
    objects, in order of declaration. Source that contains no uniforms is
    returned as-is. A default that cannot be parsed is logged and recorded
    as None.
    """
    if not source:
        return "", {}

    uniforms = {}

    def replace(match):
        type, name, default_str = match.group(1), match.group(2), match.group(3)
        try:
            default = parse_default(type, default_str)
        except (ValueError, OverflowError) as err:
            logger.warning(f"Ignoring default of uniform {name!r}: {err}")
            default = None
        uniforms[name] = UniformSpec(type, default)
        return f"uniform {type} {name};"

    content = re_uniform.sub(replace, source)
    return content, uniforms


def parse_default(type, text):
    """Parse the textual default of a uniform of the given GLSL type.

    When ``text`` is empty or None, the type's zero value is returned (identity
    for matrices, None for samplers).
    """
    dtype, shape = uniform_types[type]
    text = (text or "").strip()

    if dtype is None:
        return None

    if not shape:
        if not text:
            return {"bool": False, "int32": 0, "float32": 0.0}[dtype]
        if dtype == "bool":
            return text.lower() == "true"
        elif dtype == "int32":
            return int(text)
        else:
            return float(text)

    if not text:
        if len(shape) == 2:
            return np.eye(shape[0], dtype=dtype)
        return np.zeros(shape, dtype=dtype)

    items = [s.strip() for s in text.strip("[]").split(",") if s.strip()]
    if dtype == "bool":
        values = [s.lower() == "true" for s in items]
    else:
        values = [float(s) for s in items]
    n = int(np.prod(shape))
    if len(values) != n:
        raise ValueError(
            f"Default for uniform of type {type} needs {n} values, got {len(values)}: {text!r}"
        )
    # GLSL matrices are column-major
    return np.array(values, dtype=dtype).reshape(shape).T.copy()
