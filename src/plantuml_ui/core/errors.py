"""Exceptions raised by the PlantUML client."""

from typing import Optional

from .models import ErrorKind


class PlantUMLError(Exception):
    """Base exception for PlantUML client errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.INTERNAL_ERROR,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.cause = cause


class InvalidRendererAddressError(PlantUMLError):
    """Error for a PlantUML server address that is not an absolute URL."""

    def __init__(self, address: str, cause: Optional[BaseException] = None):
        super().__init__(
            f"invalid PlantUML server address: {address!r}",
            kind=ErrorKind.INVALID_RENDERER_ADDRESS,
            cause=cause
        )
        self.address = address
