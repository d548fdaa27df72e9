from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "intake"
    db_username: str = "intake"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_pool_timeout_seconds: float = 10.0

    storage_root: str = "/app/files"
    max_document_bytes: int = 10 * 1024 * 1024

    pdf_engine: str = "pdfplumber"
    temp_dir: str | None = None
    min_content_length: int = 50

    max_content_length: int = 10_000
    job_selector_min_length: int = 200
    renderer_enabled: bool = True
    renderer_navigation_timeout_seconds: int = 10
    fetch_timeout_seconds: int = 10
    fetch_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    normalization_provider: str = "openai"
    normalization_temperature: float = 0.1
    normalization_max_output_tokens: int = 4000
    analysis_max_output_tokens: int = 1500

    normalization_openai_api_key: str = ""
    normalization_openai_model_name: str = "gpt-4o-mini"
    normalization_openai_timeout_seconds: int = 60

    normalization_perplexity_api_key: str = ""
    normalization_perplexity_model_name: str = "llama-3.1-8b-online"
    normalization_perplexity_timeout_seconds: int = 60

    normalization_openrouter_api_key: str = ""
    normalization_openrouter_model_name: str = ""
    normalization_openrouter_timeout_seconds: int = 60

    normalization_openai_compatible_api_key: str = ""
    normalization_openai_compatible_model_name: str = ""
    normalization_openai_compatible_base_url: str = ""
    normalization_openai_compatible_timeout_seconds: int = 60
