from abc import ABC, abstractmethod


class BaseNormalizationClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        """Return provider response as plain text.

        When ``json_schema`` is given the provider is asked for structured
        JSON output; otherwise free text is expected.

        Raises:
            NormalizationNetworkError: transport or API failure.
            NormalizationError: the response envelope carried no content.
        """

    async def close(self) -> None:
        """Release network resources. Clients without any keep the no-op."""
