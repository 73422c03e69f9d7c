"""Generation client configuration with environment variable loading.

Pydantic-based configuration for the generateContent client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp"


class GenerationConfig(BaseModel):
    """Configuration for the generative-language client.

    Attributes:
        api_key: API key sent as the ``key`` query parameter.
        base_url: API base URL, without the ``/models`` suffix.
        model_name: Model identifier to use.
        timeout: Seconds to wait for the remote call.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", "")),
        description="API key for the generative-language service",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    timeout: float = Field(
        default=120.0,
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_generation_config() -> GenerationConfig:
    """Create generation configuration from environment.

    Returns:
        Configured GenerationConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return GenerationConfig()
