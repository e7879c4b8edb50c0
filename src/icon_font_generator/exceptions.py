"""Exception hierarchy for icon-font-generator."""


class IconFontError(Exception):
    """Base exception for all icon-font-generator errors."""

    pass


class ValidationError(IconFontError):
    """User-correctable problem with the generation options.

    Raised for bad arguments, missing files or directories and malformed
    codepoint data. The message is meant to be shown to the user as-is.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EngineError(IconFontError):
    """Error raised by the bundled font compilation engine."""

    pass


class IconLoadError(EngineError):
    """Error reading an SVG icon."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load icon '{path}': {reason}")


class DuplicateIconError(EngineError):
    """Two input files map to the same icon name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate icon name '{name}'")


class StylingValueError(EngineError):
    """A styling option could not be read as a number."""

    def __init__(self, option: str, value: object) -> None:
        self.option = option
        self.value = value
        super().__init__(f"Option '{option}' must be numeric, got {value!r}")
