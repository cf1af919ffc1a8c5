from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "jobboard-api"
    environment: str = "dev"
    log_level: str = "INFO"
    database_url: str | None = None
    database_pool_min_size: int = 1
    database_pool_max_size: int = 10
    database_command_timeout_seconds: float = 15.0
    default_page_size: int = 5
    max_page_size: int = 100
    max_job_categories: int = 10
    default_currency: str = "INR"
    default_salary_period: str = "MONTH"
    otel_enabled: bool = True
    otel_service_name: str = "jobboard-api"
    otel_exporter_otlp_endpoint: str | None = None
    otel_exporter_otlp_headers: str | None = None
    otel_trace_sample_ratio: float = 1.0
    otel_log_correlation: bool = True

    model_config = SettingsConfigDict(env_prefix="JB_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
