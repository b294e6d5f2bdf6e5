"""
Implements the registry of shader modules. A module is a named pair of
vertex and fragment source, plus the uniforms it declares. Modules can include
other modules with ``#pragma include <name>``; these are resolved by
``ShaderModuleRegistry.get_module()``.
"""

from .utils import logger, unique
from ._uniforms import extract_uniforms
from ._resolve import (
    UnknownModuleError,
    _process_module,
    ensure_precision,
    include_names,
)
from ._builtins import BUILTIN_MODULES, load_builtin_sources


class ShaderModule:
    """Simple object to hold the vertex source, fragment source, and uniforms of a module.

    * vs: the vertex shader source.
    * fs: the fragment shader source.
    * uniforms: dict that maps uniform names to their ``UniformSpec`` (or caller-provided value).
    """

    __slots__ = ["vs", "fs", "uniforms"]

    def __init__(self, vs, fs, uniforms):
        self.vs = vs
        self.fs = fs
        self.uniforms = uniforms

    def __repr__(self):
        return f"<ShaderModule with {len(self.uniforms)} uniforms at {hex(id(self))}>"

    def __getitem__(self, key):
        if key not in self.__slots__:
            raise KeyError(key)
        return getattr(self, key)

    def __eq__(self, other):
        if not isinstance(other, ShaderModule):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def as_dict(self):
        return {"vs": self.vs, "fs": self.fs, "uniforms": self.uniforms}


class ShaderModuleRegistry:
    """A collection of named shader modules.

    Modules are registered with ``register_module()``, and their final source is
    obtained with ``get_module()``. The result of ``get_module()`` is cached, and
    re-registering a module does not affect modules that were already resolved.
    Therefore, register all modules before using them.
    """

    def __init__(self):
        self._raw_modules = {}
        self._resolved_modules = {}

    def __contains__(self, name):
        return name in self._raw_modules

    def has_module(self, name):
        """Get whether a module with the given name is registered."""
        return name in self._raw_modules

    def module_names(self):
        """Get the names of the registered modules, in order of registration."""
        return list(self._raw_modules)

    def register_builtin_modules(self):
        """Register the modules that ship with shadermodules."""
        for name in BUILTIN_MODULES:
            vs, fs = load_builtin_sources(name)
            self.register_module(name, vs=vs, fs=fs)
        logger.info("builtin modules compiled")

    def register_module(self, name, vs="", fs="", uniforms=None):
        """Register a shader module.

        The uniform declarations in ``vs`` and ``fs`` are extracted (see
        ``extract_uniforms()``). The uniforms declared via ``uniforms`` take
        precedence over the extracted ones. A module previously registered
        under the same name is replaced. This never raises; includes are
        only looked up by ``get_module()``.

        Parameters
        ----------
        name : str
            The name of the module, which other modules use to include it.
        vs : str
            The vertex shader source. Can be empty.
        fs : str
            The fragment shader source. Can be empty.
        uniforms : dict | None
            Extra uniform declarations, mapping name to metadata.
        """
        extracted_vs, vs_uniforms = extract_uniforms(vs)
        extracted_fs, fs_uniforms = extract_uniforms(fs)

        self._raw_modules[name] = ShaderModule(
            extracted_vs,
            extracted_fs,
            {**vs_uniforms, **fs_uniforms, **(uniforms or {})},
        )
        vs_includes = include_names(extracted_vs)
        fs_includes = include_names(extracted_fs)
        logger.debug(
            f"Registered shader module {name!r}, vs includes {vs_includes}, fs includes {fs_includes}"
        )

    def get_module(self, name):
        """Get the resolved module for the given name.

        Includes are inlined (each included module at most once), the
        uniforms of all included modules are merged, and a default precision
        is added to the fragment shader if it has none. The result is
        cached, so subsequent calls return the same object.

        Raises UnknownModuleError if the module, or a module that it includes,
        is not registered.
        """
        try:
            return self._resolved_modules[name]
        except KeyError:
            pass

        raw = self._get_raw_module(name)

        lookup = self._get_raw_source
        vs, vs_visited = _process_module(raw.vs, [], "vs", lookup, root=name)
        fs, fs_visited = _process_module(raw.fs, [], "fs", lookup, root=name)

        uniforms = {}
        for visited_name in unique(vs_visited + fs_visited + [name]):
            uniforms.update(self._raw_modules[visited_name].uniforms)

        fs = ensure_precision(fs)

        logger.debug(
            f"Resolved shader module {name!r}, vs includes {vs_visited}, fs includes {fs_visited}"
        )

        module = ShaderModule(vs.strip(), fs.strip(), uniforms)
        self._resolved_modules[name] = module
        return module

    def _get_raw_module(self, name):
        try:
            return self._raw_modules[name]
        except KeyError:
            raise UnknownModuleError(name) from None

    def _get_raw_source(self, name, stage):
        return getattr(self._get_raw_module(name), stage)
