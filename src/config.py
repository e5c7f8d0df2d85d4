"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "momo-sentinel"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = True

    host: str = "0.0.0.0"
    port: int = 8000

    # Maximum accepted SMS body length on the HTTP surface
    max_message_length: int = 2000

    model_config = {"env_prefix": "MOMO_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
