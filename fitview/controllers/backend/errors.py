"""Backend error types."""


class BackendError(RuntimeError):
    """Raised by backend fetchers when a round trip fails."""
