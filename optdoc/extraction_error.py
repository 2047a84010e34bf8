"""Error raised when the external schema extractor fails."""


class ExtractionError(RuntimeError):
    """The extractor exited non-zero or printed something that is not JSON."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr
