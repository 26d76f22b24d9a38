"""
Typed errors raised by the VoyaGo agents.

Callable handlers raise CallableError subclasses; the API layer maps the
error code onto the callable error envelope and HTTP status.
"""

from typing import Optional


class CallableError(Exception):
    """Structured error surfaced to callable clients"""

    code = "INTERNAL"
    http_status = 500

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self):
        return {"status": self.code, "message": self.message}


class UnauthenticatedError(CallableError):
    code = "UNAUTHENTICATED"
    http_status = 401


class InvalidArgumentError(CallableError):
    code = "INVALID_ARGUMENT"
    http_status = 400


class TranslationError(Exception):
    """The external translation service failed"""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message
