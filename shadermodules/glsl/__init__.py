# Builtin GLSL snippets, loaded via shadermodules._loading.
