from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Environment
    app_env: str = "prod"
    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    static_dir: str = "public"
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    # Hugging Face Inference
    hf_api_key: str = ""
    hf_api_url: str = (
        "https://api-inference.huggingface.co/models/facebook/bart-large-cnn"
    )
    hf_max_length: int = 220
    hf_min_length: int = 60
    # Brevo
    brevo_api_key: str = ""
    brevo_sender_email: str = ""
    brevo_sender_name: str = "AI Notes Summarizer"
    brevo_api_url: str = "https://api.brevo.com/v3/smtp/email"
    # Outbound HTTP
    request_timeout_seconds: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", frozen=True
    )


@lru_cache
def get_settings() -> Settings:
    """Returns the process-wide settings, read once from the environment."""
    return Settings()
