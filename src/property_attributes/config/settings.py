import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    log_level: str = "INFO"
    log_extractions: bool = False
    cache_max_size: int = 1024

    model_config = SettingsConfigDict(env_prefix="PROPERTY_ATTRIBUTES_", env_file=".env", extra="ignore")


settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Log Level: {settings.log_level}")
logger.debug(f"Log Extractions: {settings.log_extractions}")
logger.debug(f"Cache Max Size: {settings.cache_max_size}")
logger.debug("=== End Settings Debug ===")
