"""Raw response-header text parsing.

Turns a newline-delimited ``Name: value`` blob, as handed over by a
transport, into name/value pairs. Malformed lines are dropped.
"""

import logging
from collections.abc import Iterator

from multiheaders.config import DEFAULT_CONFIG, HeadersConfig

logger = logging.getLogger("multiheaders.parse")


def parse_header_lines(
    text: str,
    config: HeadersConfig = DEFAULT_CONFIG,
) -> Iterator[tuple[str, str]]:
    """Yield ``(name, value)`` pairs from raw response-header text.

    The name is everything before the first colon, untouched. The value is
    everything after it, stripped. Lines without a colon, or with an empty
    name, are skipped.
    """
    for line in text.split(config.line_separator):
        index = line.find(":")
        if index <= 0:
            if line.strip():
                logger.debug("Skipping malformed header line: %r", line)
            continue
        yield line[:index], line[index + 1 :].strip()
