"""
Error types for themekit colour parsing, theme building, and configuration.
"""


class ThemekitError(Exception):
    """Base exception for all themekit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidColorFormat(ThemekitError, ValueError):
    """
    Raised when a colour string cannot be parsed as hex.

    Examples:
    - Wrong number of digits ("#12345")
    - Non-hex characters ("#GGGGGG")
    - Named colours ("red")
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class ThemeConfigError(ThemekitError):
    """
    Raised when a themekit.yaml configuration cannot be loaded.

    Examples:
    - File missing and defaults disabled
    - Malformed YAML
    - Values rejected by the configuration schema
    """

    pass
