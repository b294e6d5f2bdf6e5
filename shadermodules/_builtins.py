"""
The shader modules that ship with shadermodules. Each entry maps a module
name to the snippets (in the "shadermodules" load context) that provide its
vertex and fragment source. None means the stage is empty.
"""

from ._loading import load_glsl


BUILTIN_MODULES = {
    "decode": ("decode.glsl", None),
    "sdf_2d": (None, "sdf_2d.glsl"),
    "circle": ("circle_vert.glsl", "circle_frag.glsl"),
    "picking": ("picking.glsl", "picking.glsl"),
}


def load_builtin_sources(name):
    """Get the (vs, fs) source of a builtin module."""
    return tuple(
        load_glsl("shadermodules." + filename) if filename else ""
        for filename in BUILTIN_MODULES[name]
    )
