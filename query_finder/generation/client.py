"""httpx client for the generateContent endpoint.

One POST per prompt. The body is ``{"contents": [{"parts": [{"text": ...}]}]}``
and the answer is read from ``candidates[0].content.parts[0].text``. Any
deviation from that shape is an error, as is any transport failure or
non-2xx status.
"""

import logging

import httpx
from pydantic import ValidationError

from query_finder.generation.config import GenerationConfig, get_generation_config
from query_finder.models.schemas import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)

# httpx logs each request URL at INFO, and the URL carries the API key
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


class GenerationError(Exception):
    """Raised when the remote service fails or returns an unexpected shape."""

    pass


class GenerationClient:
    """Single-shot client for the generative-language service."""

    def __init__(
        self,
        config: GenerationConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional configuration. Loads from environment if not provided.
            transport: Optional httpx transport, used by tests.
        """
        self._config = config or get_generation_config()
        self._transport = transport

    async def generate(self, prompt: str) -> str:
        """Send a prompt and return the first candidate's text.

        Args:
            prompt: The entire prompt, context included.

        Returns:
            The answer text.

        Raises:
            GenerationError: On transport errors, error statuses or a
                response missing the expected fields.
        """
        body = GenerateContentRequest.from_prompt(prompt)
        logger.debug(f"Sending prompt of {len(prompt)} characters to {self._config.model_name}")

        async with httpx.AsyncClient(
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self._config.endpoint,
                    params={"key": self._config.api_key},
                    json=body.model_dump(),
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise GenerationError(f"HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise GenerationError(f"Connection failed: {type(e).__name__}") from e

        try:
            parsed = GenerateContentResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise GenerationError(f"Malformed response: {e.error_count()} errors") from e

        return parsed.text


# Module-level singleton instance
_generation_client: GenerationClient | None = None


def get_generation_client() -> GenerationClient:
    """Get or create the global generation client.

    Returns:
        The GenerationClient instance.

    Raises:
        ValueError: If no API key is configured.
    """
    global _generation_client
    if _generation_client is None:
        _generation_client = GenerationClient()
    return _generation_client
