import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TONWALLET_", env_file=".env")

    testnet: bool = False
    bounceable_default: bool = False
    explorer_title: str = "tonscan.org"
    explorer_url_template: str = "https://tonscan.org/tx/{hash}"
    transactions_page_limit: int = 20
    log_level: str = "INFO"
    debug: bool = False


settings = Settings()


def configure_logging(config: Settings) -> None:
    """Set the package logger level; ``debug`` overrides ``log_level``."""
    level = logging.DEBUG if config.debug else config.log_level.upper()
    logging.getLogger("tonwallet").setLevel(level)
