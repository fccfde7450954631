"""Shared type aliases used across multiheaders modules."""

from collections.abc import Callable, Mapping, Sequence
from typing import TypeAlias

# A header value as accepted from a record: one string or an ordered sequence
HeaderValue: TypeAlias = str | Sequence[str]

# Plain name -> value(s) record accepted by Headers.from_record
HeaderRecord: TypeAlias = Mapping[str, HeaderValue]

# for_each visitor — receives (values, normalized name)
HeaderVisitor: TypeAlias = Callable[[list[str], str], object]
