"""Mutable, case-insensitive, multi-valued HTTP headers.

Implements the ``MultiValueMapping`` protocol. Names are lower-cased on
every entry point; values are stored as given, in append order.

Basic usage::

    headers = Headers()
    headers.append("Content-Type", "image/jpeg")
    headers.get("content-type")  # 'image/jpeg'

    custom = Headers.from_record({"X-My-Custom-Header": "multiheaders"})
    copied = Headers.copy_from(custom)
"""

from collections.abc import Iterator, Sequence
from typing import NoReturn, Self

from multiheaders._internal.types import HeaderRecord, HeaderVisitor
from multiheaders.config import DEFAULT_CONFIG, HeadersConfig
from multiheaders.errors import HeadersNotImplementedError
from multiheaders.parsing import parse_header_lines

ENTRIES_NOT_IMPLEMENTED = "entries method is not implemented on Headers class."


def normalize(name: str) -> str:
    """Header names are case-insensitive tokens; lower-case is the canonical form."""
    return name.lower()


class Headers:
    """Mutable, case-insensitive HTTP headers.

    ``get`` returns the first value for a header.
    ``get_all`` returns every value (e.g. multiple ``Set-Cookie``).

    Attributes:
        _map: Normalized header name -> non-empty list of values.
        _config: Separators used by ``set_all``, ``to_json`` and parsing.
    """

    _map: dict[str, list[str]]
    _config: HeadersConfig

    __slots__ = ("_config", "_map")

    def __init__(self, config: HeadersConfig | None = None) -> None:
        self._map = {}
        self._config = config if config is not None else DEFAULT_CONFIG

    # -- Construction --

    @classmethod
    def copy_from(cls, other: "Headers") -> Self:
        """Independent copy of *other*.

        Value lists are copied too, so an ``append`` on either instance is
        never visible through the other.
        """
        headers = cls(other._config)
        headers._map = {name: list(values) for name, values in other._map.items()}
        return headers

    @classmethod
    def from_record(cls, record: HeaderRecord, config: HeadersConfig | None = None) -> Self:
        """Build from a plain ``{name: value | [values]}`` mapping.

        A string value becomes a one-element list. Empty sequences are
        skipped, since a present header always has at least one value.
        """
        headers = cls(config)
        for name, value in record.items():
            values = [value] if isinstance(value, str) else list(value)
            if values:
                headers._map[normalize(name)] = values
        return headers

    @classmethod
    def from_response_header_string(cls, text: str, config: HeadersConfig | None = None) -> Self:
        """Build from raw ``Name: value`` response-header text.

        Later duplicates replace earlier ones. Malformed lines are dropped.
        """
        headers = cls(config)
        for name, value in parse_header_lines(text, headers._config):
            headers.set(name, value)
        return headers

    def copy(self) -> Self:
        """Shorthand for ``Headers.copy_from(self)``."""
        return self.copy_from(self)

    @property
    def config(self) -> HeadersConfig:
        return self._config

    # -- Mutation --

    def append(self, name: str, value: str) -> None:
        """Add *value* after any existing values for *name*."""
        self._map.setdefault(normalize(name), []).append(value)

    def set(self, name: str, value: str) -> None:
        """Replace all values for *name* with *value*."""
        self._map[normalize(name)] = [value]

    def set_all(self, name: str, values: Sequence[str]) -> None:
        """Replace all values for *name* with *values* joined into one string.

        The join is lossy: ``set_all("X", ["a", "b"])`` stores the single
        value ``"a,b"``. Use ``append`` to keep values separate.
        """
        self._map[normalize(name)] = [self._config.join_separator.join(values)]

    def delete(self, name: str) -> None:
        """Remove *name* and all its values. Missing names are ignored."""
        self._map.pop(normalize(name), None)

    # -- Lookup --

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for *name*, or *default* if missing."""
        values = self._map.get(normalize(name))
        if values:
            return values[0]
        return default

    def get_all(self, name: str) -> list[str]:
        """Return all values for *name*, or an empty list."""
        return list(self._map.get(normalize(name), ()))

    def has(self, name: str) -> bool:
        return normalize(name) in self._map

    def keys(self) -> list[str]:
        return list(self._map)

    def values(self) -> list[list[str]]:
        """Return one list of values per header, in storage order."""
        return [list(values) for values in self._map.values()]

    def for_each(self, visitor: HeaderVisitor) -> None:
        """Call ``visitor(values, name)`` once per header.

        *values* is the stored list itself. The store must not be modified
        from inside *visitor*.
        """
        for name, values in self._map.items():
            visitor(values, name)

    def entries(self) -> NoReturn:
        raise HeadersNotImplementedError(ENTRIES_NOT_IMPLEMENTED)

    # -- Serialization --

    def to_json(self) -> dict[str, list[str]]:
        """Return a JSON-ready ``{name: [values]}`` snapshot.

        Each value is split on the join separator and the pieces flattened,
        so ``"a,b"`` and ``"c"`` serialize as ``["a", "b", "c"]``.
        """
        if not self._config.split_on_serialize:
            return {name: list(values) for name, values in self._map.items()}
        separator = self._config.join_separator
        return {
            name: [piece for value in values for piece in value.split(separator)]
            for name, values in self._map.items()
        }

    # -- Mapping dunders --

    def __getitem__(self, name: str) -> str:
        values = self._map.get(normalize(name))
        if not values:
            raise KeyError(name)
        return values[0]

    def __delitem__(self, name: str) -> None:
        try:
            del self._map[normalize(name)]
        except KeyError:
            raise KeyError(name) from None

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return normalize(name) in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {values!r}" for name, values in self._map.items())
        return f"Headers({{{items}}})"
