"""
Configuration for the Passport AutoFill parser service
"""

import os
import re

from pydantic_settings import BaseSettings

from passport_autofill.core.errors import ConfigurationError
from passport_autofill.core.profile import (
    DEFAULT_AUTHORITY,
    DEFAULT_NATIONALITY,
    ParserProfile,
)


class Settings(BaseSettings):
    """Settings for the Passport AutoFill service"""

    # API configuration
    API_ROOT_PATH: str = ""
    PROJECT_NAME: str = "Passport AutoFill Parser API"
    PROJECT_DESCRIPTION: str = """
    Extracts identity document fields (MRZ and printed data page) from the text
    of a scanned passport or ID card and validates them, including the 12-digit
    national ID checksum. Includes API Key auth you can disable for local use.
    """
    VERSION: str = "0.1.0"

    # Server configuration
    HOST: str = os.getenv("HOST", "localhost")
    PORT: int = int(os.getenv("PORT", "8080"))

    # Environment configuration
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"

    # Security configuration
    USE_API_KEY: bool = os.getenv("USE_API_KEY", "true").lower() == "true"
    API_KEY: str = os.getenv("API_KEY", "")

    # CORS configuration
    CORS_ORIGINS: list[str] = ["*"]

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "text")

    # Parser defaults
    DEFAULT_AUTHORITY: str = DEFAULT_AUTHORITY
    DEFAULT_NATIONALITY: str = DEFAULT_NATIONALITY

    # Document tools
    EXPIRY_WARNING_MONTHS: int = 6
    ADULT_AGE: int = 18
    CHILD_AGE: int = 2

    class Config:
        env_file = ".env"

    def parser_profile(self) -> ParserProfile:
        """
        Build the immutable parser profile from the configured defaults.

        Raises:
            ConfigurationError: If the default nationality is not a three letter
                code or the default authority is blank
        """
        if not re.fullmatch(r"[A-Z]{3}", self.DEFAULT_NATIONALITY):
            msg = f"DEFAULT_NATIONALITY must be a three letter code, got {self.DEFAULT_NATIONALITY!r}"
            raise ConfigurationError(msg)
        if not self.DEFAULT_AUTHORITY.strip():
            raise ConfigurationError("DEFAULT_AUTHORITY must not be empty")
        return ParserProfile(
            default_authority=self.DEFAULT_AUTHORITY,
            default_nationality=self.DEFAULT_NATIONALITY,
        )


settings = Settings()
