"""Response models for the API."""

from enum import IntEnum
from typing import Optional
from pydantic import BaseModel


class ErrorCode(IntEnum):
    """Error codes the UI understands."""
    MALFORMED_REQUEST = 2
    SYNTAX_ERROR = 3
    RENDER_FAILED = 4


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class SyntaxErrorData(BaseModel):
    """Where the syntax error is in the description."""
    syntax_error_line: int
    line_with_error: str
    raw: str


class ErrorResponse(BaseModel):
    """Error response model."""
    ok: bool = False
    error_code: int
    error_data: Optional[SyntaxErrorData] = None
