import os
from typing import Optional
from dotenv import load_dotenv

from pydantic_settings import BaseSettings, SettingsConfigDict
load_dotenv()


class Settings(BaseSettings):
    # Item source
    data_dir: str = os.getenv("DATA_DIR", default="data")
    items_file: str = os.getenv("ITEMS_FILE", default="farmacos.json")
    items_url: Optional[str] = os.getenv("ITEMS_URL")
    http_timeout: float = os.getenv("HTTP_TIMEOUT", default=10.0)

    # Logging
    logs_dir: str = os.getenv("LOGS_DIR", default="logs")
    log_level: str = os.getenv("LOG_LEVEL", default="INFO")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
