"""
Exception hierarchy for the API client.

Two failure kinds are distinguished:
- TransportError: the request could not be sent or no response came back
- DecodeError: a response came back, but its body is not a JSON array of objects

Server-side validation errors (e.g. a /courses call without the minimum
parameters) are reported by the server with a non-array body and therefore
surface as DecodeError; status_code and body are kept for inspection.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class NUCoursesError(Exception):
    """
    Base class of all errors raised by nucourses.

    Attributes:
        message: human readable description
        url: request URL (without query string) if known
        cause: underlying exception, if any (only its type is reported by to_dict)
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "url": self.url,
            "cause": type(self.cause).__name__ if self.cause else None,
        }

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message


class TransportError(NUCoursesError):
    """Request could not be built or sent, or no response was received."""


class DecodeError(NUCoursesError):
    """
    Response body is not valid JSON, not an array, or contains non-object items.
    """

    # keep error payloads short in logs / to_dict()
    MAX_BODY_CHARS = 500

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message, url=url, cause=cause)
        self.status_code = status_code
        self.body = body[: self.MAX_BODY_CHARS] if body is not None else None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        data["body"] = self.body
        return data
