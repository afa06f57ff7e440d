from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MTGDECK_")

    app_name: str = "mtgdeck"
    debug: bool = False

    # Sent with every request to deck sites; some reject the default httpx agent
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # Seconds, applied per request by remote sources
    http_timeout: float = Field(default=30.0, gt=0)


settings = Settings()
