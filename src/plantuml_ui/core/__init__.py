"""PlantUML server client: the rendering protocol and its outcomes."""

from .client import PlantUMLClient
from .errors import InvalidRendererAddressError, PlantUMLError
from .models import (
    DiagramFormat,
    DiagramSyntaxError,
    ErrorKind,
    OperationalFailure,
    RenderOutcome,
    RenderSuccess,
    SyntaxFailure,
)

__all__ = [
    "PlantUMLClient",
    "PlantUMLError",
    "InvalidRendererAddressError",
    "DiagramFormat",
    "DiagramSyntaxError",
    "ErrorKind",
    "OperationalFailure",
    "RenderOutcome",
    "RenderSuccess",
    "SyntaxFailure",
]
