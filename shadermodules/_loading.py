"""
Loading of raw GLSL text for shader modules.

Snippets are addressed as ``"context.filename"``, e.g.
``"shadermodules.sdf_2d.glsl"``. The context selects a loader, and the
loader provides the text for the filename. The builtin modules are read from
the ``shadermodules.glsl`` package, under the "shadermodules" context.
Jinja2 is only used to find and read the text; no templating is applied.
"""

import jinja2


root_loader = jinja2.PrefixLoader({}, delimiter=".")

jinja_env = jinja2.Environment(loader=root_loader)


def _as_jinja_loader(loader):
    if isinstance(loader, jinja2.BaseLoader):
        return loader
    elif isinstance(loader, dict):
        return jinja2.DictLoader(loader)
    elif callable(loader):
        return jinja2.FunctionLoader(loader)
    raise TypeError(
        f"A glsl loader must be a jinja2.BaseLoader, a dict of sources, or a function. Not {loader!r}"
    )


def register_glsl_loader(context, loader):
    """Make GLSL snippets available to ``load_glsl()`` under the given context.

    Use this to ship the sources of your own shader modules with your package,
    and read them back with ``load_glsl("yourcontext.name.glsl")``.

    Parameters
    ----------
    context : str
        The first part of the snippet address. Cannot contain dots, and
        each context can be registered only once.
    loader: jinja2.BaseLoader | callable | dict
        Where the snippets come from. A dict maps filenames to source. A
        function is called with the filename and returns the source, or None
        if it does not exist.
    """
    if not isinstance(context, str) or "." in context:
        raise TypeError(f"Glsl load context must be a str without dots, not {context!r}.")
    if context in root_loader.mapping:
        raise RuntimeError(f"The glsl load context {context!r} is already taken.")
    root_loader.mapping[context] = _as_jinja_loader(loader)


register_glsl_loader("shadermodules", jinja2.PackageLoader("shadermodules.glsl", "."))


def load_glsl(uri):
    """Get the raw text of the GLSL snippet at ``"context.filename"``.

    Raises FileNotFoundError if the snippet does not exist.
    """
    try:
        source, _, _ = root_loader.get_source(jinja_env, uri)
    except jinja2.TemplateNotFound:
        raise FileNotFoundError(f"Cannot load glsl snippet {uri!r}.") from None
    return source
