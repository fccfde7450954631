"""Headers configuration.

HeadersConfig is a frozen dataclass — immutable after creation, shared
freely between ``Headers`` instances and their copies.
"""

from dataclasses import dataclass

from multiheaders.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class HeadersConfig:
    """Separators used when combining, splitting, and parsing header values.

    The defaults match the usual HTTP conventions::

        config = HeadersConfig(join_separator=";")
    """

    # Joins values in ``set_all``; splits them again in ``to_json``
    join_separator: str = ","

    # Splits raw response-header text into lines
    line_separator: str = "\n"

    # Re-split every value on join_separator when serializing
    split_on_serialize: bool = True

    def __post_init__(self) -> None:
        if not self.join_separator:
            msg = "HeadersConfig.join_separator must not be empty"
            raise ConfigurationError(msg)
        if not self.line_separator:
            msg = "HeadersConfig.line_separator must not be empty"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = HeadersConfig()
