"""Exceptions raised by namesearch.

The search engine itself has no failure modes in normal operation; these
cover programmer errors (bad index writes) and invalid configuration.
"""


class NameSearchError(ValueError):
    """Base exception for all namesearch errors."""


class InvalidHighlightIndexError(NameSearchError):
    """Raised when the highlighted index is set outside ``[-1, len(matches) - 1]``."""

    def __init__(self, index: int, match_count: int):
        self.index = index
        self.match_count = match_count
        super().__init__(
            f"Highlighted index {index} is out of range for {match_count} match(es); "
            f"expected a value between -1 and {match_count - 1}"
        )


class ConfigError(NameSearchError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, variable: str, value: str, reason: str):
        self.variable = variable
        self.value = value
        super().__init__(f"Invalid value {value!r} for {variable}: {reason}")
