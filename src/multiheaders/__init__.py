"""multiheaders — case-insensitive, multi-valued HTTP headers.

A small mutable container for header name/value pairs: build, merge,
override, serialize to JSON-ready dicts, and parse raw response headers.

Basic usage::

    from multiheaders import Headers

    headers = Headers.from_response_header_string("Content-Type: text/html\nVary: Accept")
    headers.append("Vary", "Cookie")
    headers.get_all("vary")  # ['Accept', 'Cookie']
    headers.to_json()  # {'content-type': ['text/html'], 'vary': ['Accept', 'Cookie']}
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Headers",
    "HeadersConfig",
    "HeadersNotImplementedError",
    "MultiHeadersError",
    "MultiValueMapping",
    "parse_header_lines",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "multiheaders.errors",
    "Headers": "multiheaders.headers",
    "HeadersConfig": "multiheaders.config",
    "HeadersNotImplementedError": "multiheaders.errors",
    "MultiHeadersError": "multiheaders.errors",
    "MultiValueMapping": "multiheaders._internal.multimap",
    "parse_header_lines": "multiheaders.parsing",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import multiheaders`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
