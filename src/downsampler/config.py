"""Configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Downsampler settings."""

    # Point budgets for the HTTP service
    default_max_points: int = 2000
    min_max_points: int = 3
    max_max_points: int = 100000

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Acceptance benchmark defaults
    bench_points: int = 100000
    bench_target: int = 1000
    bench_top_k: int = 50
    bench_threshold: float = 0.7
    bench_seed: int = 1337

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="DOWNSAMPLER_",
    )


# Global settings instance
settings = Settings()
