class PaletteError(Exception):
    """Base class for errors raised by the palette pipeline."""


class ExtractionError(PaletteError):
    """Fatal extraction failure: navigation, missing inputs, broken session."""

    def __init__(self, message: str, stage: str = ""):
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} (stage: {self.stage})" if self.stage else base


class DialogStillOpen(PaletteError):
    """A swatch detail dialog was still attached after being dismissed."""
