"""
HTTP API for the PlantUML UI.

This package provides the FastAPI application that serves the bundled UI and
forwards render requests to the PlantUML server.
"""
