"""
Web UI and HTTP API in front of a PlantUML server.

Diagram descriptions posted by the browser are rendered by a remote
PlantUML server; syntax errors it reports are returned as structured data.
"""

__version__ = "1.0.0"
