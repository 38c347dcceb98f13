"""
Rendering Outcomes

Value types passed between the PlantUML client and its callers. Every
render call ends in exactly one of RenderSuccess, SyntaxFailure or
OperationalFailure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class DiagramFormat(Enum):
    """Output format of a rendered diagram."""
    TXT = "txt"
    PNG = "png"
    SVG = "svg"

    @classmethod
    def from_name(cls, name: str) -> "DiagramFormat":
        """Map a wire name ("txt", "png", "svg") to a format."""
        for fmt in cls:
            if fmt.value == name:
                return fmt
        raise ValueError(f"Unknown diagram format: {name!r}")

    @property
    def url_part(self) -> str:
        return self.value

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    DiagramFormat.TXT: "text/plain; charset=utf-8",
    DiagramFormat.PNG: "image/png",
    DiagramFormat.SVG: "image/svg+xml",
}


class ErrorKind(Enum):
    """Kinds of failure a render can end in."""
    INVALID_DESCRIPTION = "invalid_description"
    INVALID_FORMAT = "invalid_format"
    INVALID_RENDERER_ADDRESS = "invalid_renderer_address"
    SERVER_UNAVAILABLE = "server_unavailable"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class DiagramSyntaxError:
    """A problem the server found in a diagram description."""
    line_number: int  # 1-based, 0 when the server output was unparseable
    line_with_error: str
    raw_error: str


@dataclass(frozen=True)
class RenderSuccess:
    """The rendered diagram."""
    artifact: bytes


@dataclass(frozen=True)
class SyntaxFailure:
    """The server rejected the description."""
    error: DiagramSyntaxError


@dataclass(frozen=True)
class OperationalFailure:
    """The render could not be carried out."""
    kind: ErrorKind
    message: str = ""


RenderOutcome = Union[RenderSuccess, SyntaxFailure, OperationalFailure]
