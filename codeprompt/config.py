"""CLI configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CODEPROMPT_",
        env_file=".env",
        extra="ignore",
    )

    output_dir: str = "."  # where --save writes documents
    default_format: str = "txt"  # txt or md
    share_base_url: str = "https://codeprompt.me/"
    log_level: str = "WARNING"
    detect_context: bool = True  # inspect package.json in the project directory


settings = Settings()


def get_settings() -> Settings:
    """Get the Settings instance"""
    return settings
