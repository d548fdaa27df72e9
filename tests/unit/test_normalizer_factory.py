"""Tests for NormalizerFactory."""

from unittest.mock import patch

import pytest

from talent_intake.acquisition.models import AcquiredContent
from talent_intake.config.settings import Settings
from talent_intake.normalization.base import BaseNormalizer
from talent_intake.normalization.example_client_adapter import ExampleClientAdapter
from talent_intake.normalization.factory import NormalizerFactory
from talent_intake.normalization.job_analyzer import JobAnalyzer
from talent_intake.normalization.normalizer import Normalizer

_ADAPTER = "talent_intake.normalization.factory.OpenAIClientAdapter"


class TestNormalizerFactory:
    @pytest.mark.asyncio
    async def test_example_provider_works_offline(self) -> None:
        settings = Settings(normalization_provider="example")
        normalizer = NormalizerFactory.create(settings)
        assert isinstance(normalizer, BaseNormalizer)
        record = await normalizer.normalize("any text")
        assert record.structured is True
        assert record.contact.name == "Example Candidate"

    def test_example_client_for_example_provider(self) -> None:
        client = NormalizerFactory.create_client(Settings(normalization_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_creates_normalizer(self) -> None:
        settings = Settings(
            normalization_provider="openai",
            normalization_openai_api_key="test-key",
        )
        with patch(_ADAPTER):
            normalizer = NormalizerFactory.create(settings)
        assert isinstance(normalizer, Normalizer)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            normalization_provider="openai",
            normalization_openai_api_key="openai-key",
            normalization_openai_timeout_seconds=42,
        )
        with patch(_ADAPTER) as mock_adapter:
            NormalizerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    @pytest.mark.parametrize(
        ("provider", "base_url"),
        [
            ("perplexity", "https://api.perplexity.ai"),
            ("openrouter", "https://openrouter.ai/api/v1"),
        ],
    )
    def test_uses_provider_default_base_url(self, provider: str, base_url: str) -> None:
        settings = Settings(normalization_provider=provider)
        with patch(_ADAPTER) as mock_adapter:
            NormalizerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == base_url
        assert mock_adapter.call_args.kwargs["timeout_seconds"] == 60

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(normalization_provider="openai_compatible")
        with pytest.raises(ValueError, match="base_url is required"):
            NormalizerFactory.create(settings)

    def test_openai_compatible_uses_configured_base_url(self) -> None:
        settings = Settings(
            normalization_provider="openai_compatible",
            normalization_openai_compatible_base_url=" http://localhost:8080/v1 ",
            normalization_openai_compatible_api_key="local",
        )
        with patch(_ADAPTER) as mock_adapter:
            NormalizerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://localhost:8080/v1"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown normalization provider"):
            NormalizerFactory.create(Settings(normalization_provider="mystery"))

    def test_provider_name_is_case_insensitive(self) -> None:
        with patch(_ADAPTER) as mock_adapter:
            NormalizerFactory.create(Settings(normalization_provider="OpenAI"))
        assert mock_adapter.call_args.kwargs["base_url"] is None


class TestJobAnalyzerFactory:
    @pytest.mark.asyncio
    async def test_creates_job_analyzer(self) -> None:
        analyzer = NormalizerFactory.create_job_analyzer(Settings(normalization_provider="example"))
        assert isinstance(analyzer, JobAnalyzer)
        analysis = await analyzer.analyze(AcquiredContent(text="Backend role", strategy="pasted"))
        assert analysis.analysis_text == ExampleClientAdapter.DEFAULT_ANALYSIS


class TestSharedClient:
    def test_normalizer_and_analyzer_reuse_given_client(self) -> None:
        settings = Settings(normalization_provider="openai")
        with patch(_ADAPTER) as mock_adapter:
            client = NormalizerFactory.create_client(settings)
            normalizer = NormalizerFactory.create(settings, client=client)
            analyzer = NormalizerFactory.create_job_analyzer(settings, client=client)
        mock_adapter.assert_called_once()
        assert normalizer._client is client
        assert analyzer._client is client
