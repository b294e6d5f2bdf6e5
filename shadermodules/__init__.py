"""
Shader module registry and preprocessor.

Register named GLSL modules, and get their final source with includes
inlined, uniforms merged, and a default fragment precision in place::

    import shadermodules

    registry = shadermodules.ShaderModuleRegistry()
    registry.register_builtin_modules()
    registry.register_module("dot", vs=vs_source, fs='#pragma include "sdf_2d"\n...')
    module = registry.get_module("dot")
    module.vs, module.fs, module.uniforms
"""

# ruff: noqa: F401

from ._version import __version__, version_info
from . import utils
from .utils import logger

from ._uniforms import UniformSpec, extract_uniforms
from ._resolve import (
    UnknownModuleError,
    DEFAULT_PRECISION,
    include_names,
    has_precision,
    ensure_precision,
)
from ._registry import ShaderModule, ShaderModuleRegistry
from ._loading import register_glsl_loader, load_glsl
