"""Configuration models for the API."""

from typing import Optional
from pydantic import BaseModel, Field
import os


class APIConfig(BaseModel):
    """API configuration settings."""

    # Server settings
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8080, description="Port to bind to")

    # PlantUML server
    plantuml_server_addr: str = Field(default="", description="PlantUML server base URL")

    # UI
    static_dir: Optional[str] = Field(default=None, description="Directory with UI assets (bundled UI if unset)")

    # Logging
    log_level: str = Field(default="info", description="Log level")

    # Security
    cors_origins: list = Field(default=["*"], description="CORS allowed origins")

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Create config from environment variables."""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8080")),
            plantuml_server_addr=os.getenv("PLANTUML_SERVER_ADDR", ""),
            static_dir=os.getenv("STATIC_DIR") or None,
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            cors_origins=os.getenv("CORS_ORIGINS", "*").split(","),
        )

    @property
    def api_addr(self) -> str:
        return f"{self.host}:{self.port}"
