import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///railway_management.db"
    SQL_ECHO: bool = False
    SEED_DATA: bool = True

    # Application
    PROJECT_NAME: str = "Rail Safar Railway Management System"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level=None):
    """Attach a single console handler to the package logger"""
    if level is None:
        level = get_settings().LOG_LEVEL

    logger = logging.getLogger("railsafar")
    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.handlers.clear()
    logger.addHandler(console_handler)
    return logger
