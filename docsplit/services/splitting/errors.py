"""Errors raised by the splitting engine. Route handlers translate them to HTTP responses."""

INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
SPLIT_FAILED = "SPLIT_FAILED"


class SplitError(Exception):
    """Base splitting error carrying a machine-readable code and the underlying cause."""

    code = SPLIT_FAILED

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(SplitError, ValueError):
    """Configuration cannot be served: unknown splitter, unsupported language or encoding."""

    code = INVALID_CONFIGURATION


class SplitFailure(SplitError):
    """A strategy failed mid-run, usually because the tokenizer or embedding provider did."""

    code = SPLIT_FAILED


def wrap_split_failure(exc: Exception) -> SplitFailure:
    """Wrap a provider error, keeping its message so callers can diagnose the root cause."""
    detail = str(exc) or type(exc).__name__
    return SplitFailure(f"Failed to split text: {detail}", cause=exc)
