"""Render endpoint for diagram descriptions."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ..models.requests import RenderDiagramRequest
from ..models.responses import ErrorResponse
from ..services.rendering import RenderingService


router = APIRouter(prefix="/api")


def get_rendering_service(request: Request) -> RenderingService:
    """Get rendering service instance."""
    return RenderingService(request.app.state.plantuml_client)


@router.post(
    "/render-diagram",
    response_class=Response,
    responses={
        200: {"content": {"image/svg+xml": {}, "image/png": {}, "text/plain": {}}},
        500: {"model": ErrorResponse},
    },
)
async def render_diagram(
    body: RenderDiagramRequest,
    rendering_service: RenderingService = Depends(get_rendering_service)
):
    """
    Render a diagram description in the requested format.

    Returns the raw diagram on success. Failures come back as HTTP 500 with
    an error envelope; error code 3 carries the location of the syntax error.
    """
    fmt = rendering_service.parse_format(body.format)
    artifact = await rendering_service.render(body.data, fmt)

    return Response(content=artifact, media_type=fmt.media_type)
