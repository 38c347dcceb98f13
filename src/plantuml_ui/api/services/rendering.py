"""Rendering service that wraps the PlantUML client."""

import logging

from ...core import (
    DiagramFormat,
    OperationalFailure,
    PlantUMLClient,
    SyntaxFailure,
)
from ..errors import RenderAPIError
from ..models.responses import ErrorCode, SyntaxErrorData

logger = logging.getLogger(__name__)


class RenderingService:
    """Service for turning render requests into diagrams."""

    def __init__(self, client: PlantUMLClient):
        self.client = client

    async def render(self, description: str, fmt: DiagramFormat) -> bytes:
        """
        Render a diagram description.

        Args:
            description: PlantUML diagram description
            fmt: Output format

        Returns:
            The rendered diagram

        Raises:
            RenderAPIError: Syntax error or failed render
        """
        outcome = await self.client.render(description, fmt)

        if isinstance(outcome, SyntaxFailure):
            error = outcome.error
            raise RenderAPIError(
                ErrorCode.SYNTAX_ERROR,
                SyntaxErrorData(
                    syntax_error_line=error.line_number,
                    line_with_error=error.line_with_error,
                    raw=error.raw_error
                )
            )

        if isinstance(outcome, OperationalFailure):
            logger.info("Render failed (%s): %s", outcome.kind.value, outcome.message)
            raise RenderAPIError(ErrorCode.RENDER_FAILED)

        return outcome.artifact

    @staticmethod
    def parse_format(name: str) -> DiagramFormat:
        """Map the format name from the request, rejecting unknown ones."""
        try:
            return DiagramFormat.from_name(name)
        except ValueError:
            logger.info("Rejected unknown diagram format %r", name)
            raise RenderAPIError(ErrorCode.RENDER_FAILED) from None
