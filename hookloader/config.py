from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False

    # Plugin settings
    plugins_config_file: Path = Path("data/plugins_config.json")

    model_config = SettingsConfigDict(
        env_prefix="HOOKLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
