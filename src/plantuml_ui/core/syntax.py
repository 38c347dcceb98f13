"""
Syntax Error Detection

Pulls the line number and offending line out of the plaintext rendering a
PlantUML server produces for a broken description, e.g.::

    [From string (line 5) ]

    @startuml
    Bob -> Alice
    ...
     Syntax error: expected '@enduml'
"""

from typing import List, Optional

from ..utils.config import Config
from .models import DiagramSyntaxError


def split_lines(text: str) -> List[str]:
    """Split a rendering into lines, ignoring trailing line breaks."""
    return [line.rstrip("\r") for line in text.rstrip("\r\n").split("\n")]


def parse_line_number(first_line: str, marker: str = Config.SYNTAX_ERROR_MARKER) -> int:
    """Read the number out of '[From string (line N) ]', 0 if it is not a number."""
    number = first_line[len(marker):].rstrip(") ]")
    try:
        return int(number)
    except ValueError:
        return 0


def strip_error_prefix(last_line: str, prefix: str = Config.SYNTAX_ERROR_PREFIX) -> str:
    """Drop the ' Syntax error: ' lead-in from the last line."""
    stripped = last_line.lstrip()
    label = prefix.strip()
    if stripped.startswith(label):
        return stripped[len(label):].lstrip()
    return last_line


def parse_syntax_error(diagram_as_txt: str,
                       config: Optional[Config] = None) -> Optional[DiagramSyntaxError]:
    """
    Describe the syntax error in a plaintext rendering.

    An error is recognized only when the first line starts with the
    '[From string (line ' marker.

    Args:
        diagram_as_txt: Body of the server's TXT rendering
        config: Protocol constants

    Returns:
        DiagramSyntaxError, or None when the marker is missing
    """
    config = config or Config()
    lines = split_lines(diagram_as_txt)
    first_line, last_line = lines[0], lines[-1]

    if not first_line.startswith(config.SYNTAX_ERROR_MARKER):
        return None

    return DiagramSyntaxError(
        line_number=parse_line_number(first_line, config.SYNTAX_ERROR_MARKER),
        line_with_error=strip_error_prefix(last_line, config.SYNTAX_ERROR_PREFIX),
        raw_error=diagram_as_txt
    )
