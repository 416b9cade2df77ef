import logging
from typing import Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GMAPS_STATIC_", env_file=".env", extra="ignore")

    BASE_URL: str = "https://maps.googleapis.com/maps/api/staticmap?"
    DEFAULT_ZOOM: int = 14
    DEFAULT_SIZE: str = "320x240"
    # injected as `key` only when the caller's options carry none
    API_KEY: str = ""

    CONNECT_TIMEOUT: float = 10.0
    READ_TIMEOUT: float = 30.0

    LOG_DIR: str = "logs"
    LOG_FILE: str = "app.log"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    @property
    def REQUEST_TIMEOUT(self) -> Tuple[float, float]:
        return self.CONNECT_TIMEOUT, self.READ_TIMEOUT


def init_logging(level: str = "") -> None:
    """Install the project's rich/file handlers once."""
    from gmaps_static.logger import setup_logging

    root = logging.getLogger()
    if getattr(root, "_gmaps_static_inited", False):
        return
    setup_logging(level or settings.LOG_LEVEL)
    setattr(root, "_gmaps_static_inited", True)


settings = Settings()
