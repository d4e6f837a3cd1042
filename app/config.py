from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # GitHub configuration - required at request time, not at startup
    github_token: Optional[str] = None
    github_username: Optional[str] = None
    github_repo: str = "static"
    github_api_url: str = "https://api.github.com"
    github_timeout: float = 30.0

    public_base_url: str = "https://static.thegreekdirectory.org"
    user_agent: str = "StaticMediaUploader"
    log_level: str = "INFO"
    environment: str = "development"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the process-wide settings."""
    return settings
