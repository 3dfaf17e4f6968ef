"""
Error types raised by the extraction and Gemini services.

Routers catch these at their own boundary and turn them into an
``HTTPException`` carrying the public message for that endpoint.
"""

from typing import Optional


class InterviewServiceError(Exception):
    """Base class for every failure raised by the service layer."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class UnsupportedFormatError(InterviewServiceError):
    """Uploaded file is neither PDF nor DOCX."""


class ExtractionError(InterviewServiceError):
    """PDF/DOCX decoding failed."""


class GatewayError(InterviewServiceError):
    """The Gemini call failed or Gemini is not configured."""


class DecodeError(InterviewServiceError):
    """Gemini replied with something that is not JSON."""
