"""Exceptions raised by the resizer services and mapped to HTTP responses."""
from __future__ import annotations


class ResizerError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InputValidationError(ResizerError):
    """Raised when the submitted form cannot be processed as given."""

    status_code = 400


class BlobNotFoundError(ResizerError):
    """Raised for unknown, expired or already downloaded image ids."""

    status_code = 404


class RateLimitExceededError(ResizerError):
    status_code = 429


class ImageTransformError(ResizerError):
    """Raised when the uploaded bytes cannot be decoded or re-encoded."""

    status_code = 500
