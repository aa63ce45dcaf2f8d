from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    log_level: str = "INFO"

    # CORS — comma-separated origins allowed to access the API
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Content safety
    content_safety_enabled: bool = False
    content_safety_block_high_risk: bool = False     # block HIGH instead of warning
    content_safety_risk_threshold_medium: int = 50
    content_safety_risk_threshold_high: int = 80

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
