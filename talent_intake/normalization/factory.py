from typing import ClassVar

from talent_intake.config.settings import Settings
from talent_intake.normalization.base import BaseNormalizer
from talent_intake.normalization.client_base import BaseNormalizationClient
from talent_intake.normalization.example_client_adapter import ExampleClientAdapter
from talent_intake.normalization.job_analyzer import JobAnalyzer
from talent_intake.normalization.normalizer import Normalizer
from talent_intake.normalization.openai_client_adapter import OpenAIClientAdapter


class NormalizerFactory:
    """Creates the configured text-generation client, normalizer and job analyzer.

    Every provider except ``example`` speaks the OpenAI chat completions API
    and differs only in base URL and credentials. Credentials, model and
    timeout are read from ``normalization_<provider>_*`` settings.
    """

    DEFAULT_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "perplexity": "https://api.perplexity.ai",
        "openrouter": "https://openrouter.ai/api/v1",
    }
    PROVIDERS: ClassVar[tuple[str, ...]] = (
        "example",
        "openai",
        "perplexity",
        "openrouter",
        "openai_compatible",
    )

    @classmethod
    def create(
        cls, settings: Settings, client: BaseNormalizationClient | None = None
    ) -> BaseNormalizer:
        """Create a configured normalizer, reusing ``client`` when one is given."""
        return Normalizer(
            client=client or cls.create_client(settings),
            model=cls.model_name(settings),
            temperature=settings.normalization_temperature,
            max_output_tokens=settings.normalization_max_output_tokens,
        )

    @classmethod
    def create_job_analyzer(
        cls, settings: Settings, client: BaseNormalizationClient | None = None
    ) -> JobAnalyzer:
        return JobAnalyzer(
            client=client or cls.create_client(settings),
            model=cls.model_name(settings),
            temperature=settings.normalization_temperature,
            max_output_tokens=settings.analysis_max_output_tokens,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseNormalizationClient:
        provider = cls._provider(settings)
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._provider_setting(settings, provider, "api_key"),
            timeout_seconds=cls._provider_setting(settings, provider, "timeout_seconds"),
            base_url=cls._base_url(settings, provider),
        )

    @classmethod
    def model_name(cls, settings: Settings) -> str:
        provider = cls._provider(settings)
        if provider == "example":
            return "example"
        return cls._provider_setting(settings, provider, "model_name")

    @classmethod
    def _provider(cls, settings: Settings) -> str:
        provider = settings.normalization_provider.strip().lower()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown normalization provider '{provider}'. "
                f"Choose from: {', '.join(cls.PROVIDERS)}"
            )
        return provider

    @staticmethod
    def _provider_setting(settings: Settings, provider: str, name: str):  # type: ignore[no-untyped-def]
        return getattr(settings, f"normalization_{provider}_{name}")

    @classmethod
    def _base_url(cls, settings: Settings, provider: str) -> str | None:
        if provider != "openai_compatible":
            return cls.DEFAULT_BASE_URLS[provider]
        url = settings.normalization_openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "normalization_openai_compatible_base_url is required for "
                "normalization_provider=openai_compatible"
            )
        return url
