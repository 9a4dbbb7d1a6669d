from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "HeroTrumps"
    debug: bool = False
    log_level: str = "INFO"

    superhero_api_url: str = "https://cdn.jsdelivr.net/gh/akabab/superhero-api@0.3.0/api/all.json"
    feed_timeout: float = 30.0

    # Publisher used when a feed-backed game does not name one (None = all)
    default_publisher: str | None = None


settings = Settings()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
