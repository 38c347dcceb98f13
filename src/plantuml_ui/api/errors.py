"""Errors reported to the UI through the error envelope."""

from typing import Optional

from .models.responses import ErrorCode, ErrorResponse, SyntaxErrorData


class RenderAPIError(Exception):
    """A failed render request, answered with HTTP 500 and an error code."""

    status_code = 500

    def __init__(self, code: ErrorCode, data: Optional[SyntaxErrorData] = None):
        super().__init__(f"render request failed with error code {int(code)}")
        self.code = code
        self.data = data

    def to_response(self) -> ErrorResponse:
        """Build the JSON envelope for this error."""
        return ErrorResponse(error_code=int(self.code), error_data=self.data)
