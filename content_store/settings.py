from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/lab"
    CONTENT_EXTENSION: str = ".md"
    LOAD_WORKERS: int = 8

    # Execution mode ("production" hides drafts)
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
