from typing import Any

import httpx
import openai

from talent_intake.normalization.client_base import BaseNormalizationClient
from talent_intake.normalization.exceptions import NormalizationError, NormalizationNetworkError


class OpenAIClientAdapter(BaseNormalizationClient):
    """Async client for any provider exposing the OpenAI chat completions API.

    The SDK's own retries are disabled; a failed call is reported once and the
    caller degrades.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        request: dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "max_tokens": max_output_tokens,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if json_schema is not None:
            request["response_format"] = _schema_response_format(json_schema)

        try:
            response = await self._client.chat.completions.create(**request)
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise NormalizationNetworkError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.TransportError) as exc:
            raise NormalizationNetworkError(f"AI provider unreachable: {exc}") from exc
        except openai.APIStatusError as exc:
            raise NormalizationNetworkError(
                f"AI provider returned HTTP {exc.status_code}"
            ) from exc
        except openai.APIError as exc:
            raise NormalizationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise NormalizationError("AI returned no choices")
        choice = response.choices[0]
        if choice.finish_reason == "length":
            raise NormalizationError("AI response was cut off at the output token limit")
        if choice.message.content is None:
            raise NormalizationError("AI returned empty response")
        return choice.message.content

    async def close(self) -> None:
        await self._client.close()


def _schema_response_format(json_schema: dict[str, object]) -> dict[str, object]:
    # Non-strict: the local validator enforces the schema, and several
    # compatible providers reject strict mode.
    return {
        "type": "json_schema",
        "json_schema": {
            "name": "structured_record",
            "strict": False,
            "schema": json_schema,
        },
    }
