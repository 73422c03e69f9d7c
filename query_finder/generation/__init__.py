"""Client for the remote generative-language service.

Sends one prompt per call to the generateContent endpoint and returns the
first candidate's text.

Responsibilities:
    - Configuration loading from the environment
    - Request body construction and response validation
    - Mapping transport, status and shape errors to GenerationError

Single attempt per call: no retries, no streaming.
"""

from query_finder.generation.client import (
    GenerationClient,
    GenerationError,
    get_generation_client,
)
from query_finder.generation.config import GenerationConfig, get_generation_config

__all__ = [
    "GenerationClient",
    "GenerationConfig",
    "GenerationError",
    "get_generation_client",
    "get_generation_config",
]
