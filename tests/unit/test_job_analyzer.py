from unittest.mock import AsyncMock

import pytest

from talent_intake.acquisition.models import AcquiredContent
from talent_intake.normalization.exceptions import NormalizationNetworkError
from talent_intake.normalization.job_analyzer import JobAnalyzer


def _analyzer(client: AsyncMock) -> JobAnalyzer:
    return JobAnalyzer(client=client, model="test-model")


class TestJobAnalyzer:
    @pytest.mark.asyncio
    async def test_returns_analysis_and_preview(self) -> None:
        client = AsyncMock()
        client.create_chat_completion.return_value = "  Key requirements: Python.  "
        content = AcquiredContent(text="Backend engineer role.", strategy="rendered")
        analysis = await _analyzer(client).analyze(content)
        assert analysis.analyzed is True
        assert analysis.analysis_text == "Key requirements: Python."
        assert analysis.content_preview == "Backend engineer role."
        assert analysis.source_strategy == "rendered"

    @pytest.mark.asyncio
    async def test_requests_free_text_with_token_limit(self) -> None:
        client = AsyncMock()
        client.create_chat_completion.return_value = "analysis"
        await _analyzer(client).analyze(AcquiredContent(text="Data role", strategy="pasted"))
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["max_output_tokens"] == 1500
        assert "json_schema" not in kwargs
        assert "Data role" in kwargs["user_prompt"]

    @pytest.mark.asyncio
    async def test_preview_is_truncated_at_500_chars(self) -> None:
        client = AsyncMock()
        client.create_chat_completion.return_value = "analysis"
        content = AcquiredContent(text="x" * 800, strategy="scraped-fallback")
        analysis = await _analyzer(client).analyze(content)
        assert analysis.content_preview == "x" * 500 + "..."

    @pytest.mark.asyncio
    async def test_model_failure_degrades(self) -> None:
        client = AsyncMock()
        client.create_chat_completion.side_effect = NormalizationNetworkError("timeout")
        content = AcquiredContent(text="Backend engineer role.", strategy="rendered")
        analysis = await _analyzer(client).analyze(content)
        assert analysis.analyzed is False
        assert analysis.analysis_text == ""
        assert analysis.content_preview == "Backend engineer role."
