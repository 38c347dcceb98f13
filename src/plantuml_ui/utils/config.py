"""Configuration parameters for the PlantUML rendering protocol."""

import os
from typing import Dict, Any


class Config:
    """Configuration class for talking to a PlantUML server."""

    # Network
    REQUEST_TIMEOUT_SECONDS = float(os.getenv('PLANTUML_REQUEST_TIMEOUT', '30'))

    # Submission form
    FORM_PATH = "form"
    FORM_FIELD = "text"

    # Syntax error detection in the plaintext rendering
    SYNTAX_ERROR_MARKER = "[From string (line "
    SYNTAX_ERROR_PREFIX = " Syntax error: "

    # Status codes the server answers with when it rendered something
    ACCEPTED_STATUS_CODES = (200, 400)
    ERROR_STATUS_CODE = 400

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'request_timeout_seconds': cls.REQUEST_TIMEOUT_SECONDS,
            'form_path': cls.FORM_PATH,
            'form_field': cls.FORM_FIELD,
            'syntax_error_marker': cls.SYNTAX_ERROR_MARKER,
            'syntax_error_prefix': cls.SYNTAX_ERROR_PREFIX,
            'accepted_status_codes': list(cls.ACCEPTED_STATUS_CODES),
        }
