"""
PlantUML Server Client

This module drives the rendering protocol of a PlantUML server: submit the
description through the server's form, probe the plaintext rendering for
syntax errors, then download the rendering in the requested format.
"""

import logging
from typing import Optional, Tuple

import httpx

from ..utils.config import Config
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
from .syntax import parse_syntax_error

logger = logging.getLogger(__name__)


def validate_server_addr(server_addr: str) -> str:
    """Check that the address is an absolute http(s) URL and normalize it."""
    try:
        url = httpx.URL(server_addr or "")
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidRendererAddressError(server_addr, cause=e) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidRendererAddressError(server_addr)

    return str(url).rstrip("/")


class PlantUMLClient:
    """Renders diagram descriptions on a remote PlantUML server."""

    def __init__(self, server_addr: str, config: Optional[Config] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the client for one PlantUML server.

        Raises:
            InvalidRendererAddressError: server_addr is not an absolute URL
        """
        self.config = config or Config()
        self.server_addr = validate_server_addr(server_addr)
        self._transport = transport

    def __repr__(self) -> str:
        return f"PlantUMLClient({self.server_addr!r})"

    async def render(self, description: str, fmt: DiagramFormat) -> RenderOutcome:
        """
        Render a diagram description in the given format.

        Expected failures (empty description, unknown format, unreachable
        server, unexpected status) come back as OperationalFailure instead
        of being raised.

        Args:
            description: PlantUML diagram description
            fmt: Output format

        Returns:
            RenderSuccess, SyntaxFailure or OperationalFailure
        """
        description = (description or "").strip()
        if not description:
            return OperationalFailure(ErrorKind.INVALID_DESCRIPTION, "diagram description is empty")

        if not isinstance(fmt, DiagramFormat):
            return OperationalFailure(ErrorKind.INVALID_FORMAT, f"unknown diagram format: {fmt!r}")

        try:
            async with self._http_client() as client:
                return await self._render(client, description, fmt)
        except PlantUMLError as e:
            logger.warning("Render failed: %s", e.message)
            return OperationalFailure(e.kind, e.message)

    async def _render(self, client: httpx.AsyncClient, description: str,
                      fmt: DiagramFormat) -> RenderOutcome:
        # 1. Submit the description to get the diagram ID
        diagram_id = await self.submit(client, description)

        # 2. Render as TXT to find out whether there is a syntax error
        diagram_file, has_syntax_error = await self.download(
            client, self._diagram_url(DiagramFormat.TXT, diagram_id))

        # 3. Describe the syntax error
        if has_syntax_error:
            diagram_as_txt = diagram_file.decode("utf-8", errors="replace")
            syntax_error = parse_syntax_error(diagram_as_txt, self.config)
            if syntax_error is None:
                logger.info("Server flagged diagram %s without an error marker", diagram_id)
                syntax_error = DiagramSyntaxError(
                    line_number=0, line_with_error="", raw_error=diagram_as_txt)
            else:
                logger.info("Syntax error in diagram %s at line %d",
                            diagram_id, syntax_error.line_number)
            return SyntaxFailure(syntax_error)

        # 4. Render in the requested format
        if fmt is DiagramFormat.TXT:
            return RenderSuccess(diagram_file)

        diagram_file, _ = await self.download(client, self._diagram_url(fmt, diagram_id))
        return RenderSuccess(diagram_file)

    async def submit(self, client: httpx.AsyncClient, description: str) -> str:
        """POST the description to the server's form and return the diagram ID."""
        link = f"{self.server_addr}/{self.config.FORM_PATH}"
        logger.debug("Submitting diagram to %s", link)

        response = await self._send(client, "POST", link,
                                    data={self.config.FORM_FIELD: description})
        diagram_id = self.artifact_id(response)
        if not diagram_id:
            raise PlantUMLError(f"no diagram ID in {response.url}", ErrorKind.INTERNAL_ERROR)
        return diagram_id

    def artifact_id(self, response: httpx.Response) -> str:
        """
        Extract the diagram ID from the submission response.

        The server redirects the form POST to a URL ending with the ID.
        Override for servers that hand the ID out differently.
        """
        path = response.url.raw_path.decode("ascii").split("?", 1)[0]
        return path.rstrip("/").rsplit("/", 1)[-1]

    async def download(self, client: httpx.AsyncClient, link: str) -> Tuple[bytes, bool]:
        """GET a rendering; returns its body and a 'has syntax error' flag."""
        logger.debug("Downloading %s", link)
        response = await self._send(client, "GET", link)
        return response.content, response.status_code == self.config.ERROR_STATUS_CODE

    async def _send(self, client: httpx.AsyncClient, method: str, link: str,
                    **kwargs) -> httpx.Response:
        try:
            response = await client.request(method, link, **kwargs)
        except httpx.TransportError as e:
            raise PlantUMLError(f"server is unavailable: {e!r}",
                                ErrorKind.SERVER_UNAVAILABLE, cause=e) from e
        except httpx.HTTPError as e:
            raise PlantUMLError(f"{method} {link} failed: {e!r}",
                                ErrorKind.INTERNAL_ERROR, cause=e) from e

        if response.status_code not in self.config.ACCEPTED_STATUS_CODES:
            raise PlantUMLError(
                f"server is unavailable: {method} {link} returned {response.status_code}",
                ErrorKind.SERVER_UNAVAILABLE
            )
        return response

    def _diagram_url(self, fmt: DiagramFormat, diagram_id: str) -> str:
        return f"{self.server_addr}/{fmt.url_part}/{diagram_id}"

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.REQUEST_TIMEOUT_SECONDS,
            follow_redirects=True,
            transport=self._transport
        )
