"""Request models for the API."""

from pydantic import BaseModel, Field


class RenderDiagramRequest(BaseModel):
    """Body of a render request."""
    data: str = Field(default="", description="PlantUML diagram description")
    format: str = Field(default="", description="Output format: svg, png or txt")
