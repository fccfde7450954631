"""MultiValueMapping protocol — read interface shared by multi-valued containers.

A structural protocol so utilities can accept any case-insensitive,
multi-valued mapping without coupling to ``Headers``.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A string mapping where keys can have multiple values.

    ``get`` returns the first value for a key.
    ``get_all`` returns all values for a key, or an empty list.
    """

    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_all(self, key: str) -> list[str]: ...
