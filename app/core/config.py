from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Supplier Matching API"
    API_V1_STR: str = "/api/v1"
    DATABASE_URL: str = "sqlite:///./matching.db"
    LOG_LEVEL: str = "INFO"

    # Candidate pool sizes and ranked output cap
    LOCATION_POOL_LIMIT: int = 20
    FALLBACK_POOL_LIMIT: int = 30
    MATCH_RESULT_LIMIT: int = 10

    HIGH_TRUST_THRESHOLD: int = 70

    # Workflow automation webhook (disabled when unset)
    WORKFLOW_WEBHOOK_URL: Optional[str] = None
    WORKFLOW_WEBHOOK_TIMEOUT: float = 5.0

    # This configures Pydantic to read variables from the ".env" file
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
