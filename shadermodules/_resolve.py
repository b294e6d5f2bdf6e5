"""
Resolving of ``#pragma include`` directives, and the default precision of
fragment shaders.
"""

import re


re_include = re.compile(r'#pragma include[ \t]+"?(\w[^\s"]*)"?')
re_precision = re.compile(r"precision\s+(high|low|medium)p\s+float")

DEFAULT_PRECISION = (
    "#ifdef GL_FRAGMENT_PRECISION_HIGH\n"
    " precision highp float;\n"
    " #else\n"
    " precision mediump float;\n"
    "#endif\n"
)

STAGES = ("vs", "fs")


class UnknownModuleError(KeyError):
    """Raised when a shader module is requested (or included) that is not registered."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"No shader module registered with name {self.name!r}."


def include_names(code):
    """Get the names of the modules included directly by the given code."""
    return [match.group(1) for match in re_include.finditer(code)]


def _process_module(raw_content, visited, stage, lookup, root=None):
    """Inline the includes in ``raw_content``, recursively.

    Each ``#pragma include <name>`` is replaced with the ``stage`` source of
    the named module, as returned by ``lookup(name, stage)``. The names of
    inlined modules are appended to ``visited``, which is shared by all
    recursive calls. A module that is already in ``visited`` is replaced with
    the empty string, so each module is inlined only once, and cycles end.
    The ``root`` module being resolved is never inlined, but it is appended
    to ``visited`` where a cycle first reaches it.

    Returns ``(content, visited)``.
    """
    assert stage in STAGES

    def replace(match):
        name = match.group(1)
        if name in visited:
            return ""
        if name == root:
            visited.append(name)
            return ""
        code = lookup(name, stage)
        visited.append(name)
        content, _ = _process_module(code, visited, stage, lookup, root)
        return content

    content = re_include.sub(replace, raw_content)
    return content, visited


def has_precision(fs):
    """Get whether the given fragment source declares a float precision."""
    return re_precision.search(fs) is not None


def ensure_precision(fs):
    """Prepend the default precision preamble if ``fs`` declares no float precision."""
    if has_precision(fs):
        return fs
    return DEFAULT_PRECISION + fs
