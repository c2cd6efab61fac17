class PrueferError(Exception):
    """Base exception for Pruefer service."""

    status_code: int = 500


class InvalidSubmissionError(PrueferError):
    """Raised when a submission is rejected before any model call."""

    status_code = 400


class BackendError(PrueferError):
    """Raised by a backend adapter when the model provider call fails."""


class BackendUnavailableError(PrueferError):
    """Raised when the selected backend failed; names an alternative to retry with."""

    status_code = 503

    def __init__(self, backend: str, fallback: str | None = None) -> None:
        self.backend = backend
        self.fallback = fallback
        message = f"{backend} Service nicht verfügbar."
        if fallback:
            message += f" Versuchen Sie es mit {fallback}."
        super().__init__(message)


class InternalServiceError(PrueferError):
    """Raised at the router boundary for unexpected faults."""

    def __init__(
        self, message: str = "Interner Server Fehler. Bitte versuchen Sie es später erneut."
    ) -> None:
        super().__init__(message)
