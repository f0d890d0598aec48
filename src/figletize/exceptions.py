"""Exception hierarchy for Figletize."""


class FigletizeError(Exception):
    """Base exception for all Figletize errors."""

    pass


class FontError(FigletizeError):
    """Errors related to locating or parsing a font."""

    pass


class MalformedFontError(FontError):
    """Font definition does not follow the FIGlet font grammar."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed font at line {line_number}: {reason}")


class UnknownFontError(FontError):
    """No font definition exists with the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No font exists with name '{name}'")


class FontArchiveError(FontError):
    """A font source (directory or archive) cannot be opened."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Unable to open font source '{source}': {reason}")


class CodeGenerationError(FigletizeError):
    """One or more banners could not be generated.

    Attributes:
        diagnostics: Every problem found, in input order
    """

    def __init__(self, diagnostics: list) -> None:
        self.diagnostics = diagnostics
        count = len(diagnostics)
        plural = "diagnostic" if count == 1 else "diagnostics"
        super().__init__(f"Code generation failed with {count} {plural}")
