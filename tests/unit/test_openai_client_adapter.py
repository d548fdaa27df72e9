from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from talent_intake.normalization.exceptions import NormalizationError, NormalizationNetworkError
from talent_intake.normalization.openai_client_adapter import OpenAIClientAdapter

_PATCH_TARGET = "talent_intake.normalization.openai_client_adapter.openai.AsyncOpenAI"


def _make_mock_response(content: str | None, finish_reason: str = "stop") -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    choice.finish_reason = finish_reason
    response = MagicMock()
    response.choices = [choice]
    return response


def _mock_client(**create_kwargs: object) -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(**create_kwargs)
    return mock_client


async def _call(adapter: OpenAIClientAdapter, json_schema: dict[str, object] | None = None) -> str:
    return await adapter.create_chat_completion(
        model="m",
        temperature=0.1,
        system_prompt="system",
        user_prompt="user",
        max_output_tokens=4000,
        json_schema=json_schema,
    )


def _adapter() -> OpenAIClientAdapter:
    return OpenAIClientAdapter(api_key="k", timeout_seconds=60, base_url=None)


class TestOpenAIClientAdapter:
    def test_client_has_timeout_and_no_retries(self) -> None:
        with patch(_PATCH_TARGET) as client_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=60, base_url="https://api.perplexity.ai")
        client_cls.assert_called_once_with(
            api_key="k",
            timeout=60,
            base_url="https://api.perplexity.ai",
            max_retries=0,
        )

    @pytest.mark.asyncio
    async def test_returns_content(self) -> None:
        mock_client = _mock_client(return_value=_make_mock_response('{"ok": true}'))
        with patch(_PATCH_TARGET, return_value=mock_client):
            content = await _call(_adapter(), json_schema={"type": "object"})
        assert content == '{"ok": true}'

    @pytest.mark.asyncio
    async def test_sends_schema_as_response_format(self) -> None:
        mock_client = _mock_client(return_value=_make_mock_response("{}"))
        with patch(_PATCH_TARGET, return_value=mock_client):
            await _call(_adapter(), json_schema={"type": "object"})
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"]["type"] == "json_schema"
        assert kwargs["response_format"]["json_schema"]["schema"] == {"type": "object"}
        assert kwargs["max_tokens"] == 4000
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    @pytest.mark.asyncio
    async def test_free_text_request_has_no_response_format(self) -> None:
        mock_client = _mock_client(return_value=_make_mock_response("analysis"))
        with patch(_PATCH_TARGET, return_value=mock_client):
            assert await _call(_adapter()) == "analysis"
        assert "response_format" not in mock_client.chat.completions.create.call_args.kwargs

    @pytest.mark.asyncio
    async def test_raises_error_for_empty_content(self) -> None:
        mock_client = _mock_client(return_value=_make_mock_response(None))
        with patch(_PATCH_TARGET, return_value=mock_client):
            with pytest.raises(NormalizationError, match="empty response"):
                await _call(_adapter())

    @pytest.mark.asyncio
    async def test_raises_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = _mock_client(return_value=response)
        with patch(_PATCH_TARGET, return_value=mock_client):
            with pytest.raises(NormalizationError, match="no choices"):
                await _call(_adapter())

    @pytest.mark.asyncio
    async def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = _mock_client(
            side_effect=openai.APIConnectionError(request=MagicMock())
        )
        with patch(_PATCH_TARGET, return_value=mock_client):
            with pytest.raises(NormalizationNetworkError, match="unreachable"):
                await _call(_adapter())

    @pytest.mark.asyncio
    async def test_raises_network_error_on_timeout(self) -> None:
        mock_client = _mock_client(side_effect=httpx.ReadTimeout("slow"))
        with patch(_PATCH_TARGET, return_value=mock_client):
            with pytest.raises(NormalizationNetworkError, match="timed out"):
                await _call(_adapter())

    @pytest.mark.asyncio
    async def test_raises_network_error_on_api_status(self) -> None:
        request = httpx.Request("POST", "https://api.example.com/v1/chat/completions")
        error = openai.APIStatusError(
            "rate limited",
            response=httpx.Response(429, request=request),
            body=None,
        )
        mock_client = _mock_client(side_effect=error)
        with patch(_PATCH_TARGET, return_value=mock_client):
            with pytest.raises(NormalizationNetworkError, match="HTTP 429"):
                await _call(_adapter())

    @pytest.mark.asyncio
    async def test_raises_error_when_cut_off_at_token_limit(self) -> None:
        mock_client = _mock_client(
            return_value=_make_mock_response('{"contact": {"na', finish_reason="length")
        )
        with patch(_PATCH_TARGET, return_value=mock_client):
            with pytest.raises(NormalizationError, match="token limit"):
                await _call(_adapter(), json_schema={"type": "object"})

    @pytest.mark.asyncio
    async def test_close_closes_sdk_client(self) -> None:
        mock_client = _mock_client()
        mock_client.close = AsyncMock()
        with patch(_PATCH_TARGET, return_value=mock_client):
            adapter = _adapter()
            await adapter.close()
        mock_client.close.assert_awaited_once()
