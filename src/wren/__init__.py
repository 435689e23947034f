"""Wren — URL parsing helpers and shared handler factory registration.

Parses the parts of a URL the standard library leaves alone (matrix
parameters, repeated query keys, mixed path separators) and lets several
libraries install handlers for custom schemes even though the process
holds only one handler factory slot.

Parsing::

    from wren import resolve_query_parameters, resolve_matrix_parameters

    resolve_query_parameters("https://example.com/search?q=wren&q=finch")
    # {'q': ['wren', 'finch']}
    resolve_matrix_parameters("https://example.com/cars;color=red")
    # {'color': ['red']}

Custom schemes::

    from wren import attach_handler_factory, open_url

    attach_handler_factory(MemoryFactory())
    attach_handler_factory(S3Factory())  # merged, not rejected
    open_url("mem://bucket/key")
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "DEFAULT_CONFIG",
    "CompositeHandlerFactory",
    "ConfigurationError",
    "HandlerFactory",
    "HandlerRegistry",
    "HandlerSlot",
    "SlotOccupiedError",
    "StandardHandlerFactory",
    "URLConfig",
    "WrenError",
    "attach_handler_factory",
    "build_matrix_string",
    "clear_handler_factory",
    "decode",
    "encode",
    "get_handler_factory",
    "get_module_url",
    "is_directory_url",
    "normalize_path",
    "open_url",
    "resolve_archive_file",
    "resolve_matrix_parameters",
    "resolve_query_parameters",
    "resolve_relative_path",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_CONFIG": "wren.config",
    "URLConfig": "wren.config",
    "ConfigurationError": "wren.errors",
    "SlotOccupiedError": "wren.errors",
    "WrenError": "wren.errors",
    "CompositeHandlerFactory": "wren.handlers.composite",
    "HandlerFactory": "wren.handlers.protocol",
    "HandlerRegistry": "wren.handlers.registry",
    "attach_handler_factory": "wren.handlers.registry",
    "clear_handler_factory": "wren.handlers.registry",
    "get_handler_factory": "wren.handlers.registry",
    "HandlerSlot": "wren.handlers.slot",
    "StandardHandlerFactory": "wren.handlers.standard",
    "open_url": "wren.handlers.opener",
    "build_matrix_string": "wren.parsing",
    "decode": "wren.parsing",
    "encode": "wren.parsing",
    "normalize_path": "wren.parsing",
    "resolve_matrix_parameters": "wren.parsing",
    "resolve_query_parameters": "wren.parsing",
    "get_module_url": "wren.resources",
    "is_directory_url": "wren.resources",
    "resolve_archive_file": "wren.resources",
    "resolve_relative_path": "wren.resources",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
