import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    STORAGE_BACKEND: str = "file"
    STORAGE_DIR: str = ".kisan_storage"
    SEED_DATABASE: bool = True
    DIAGNOSIS_MODEL: str = "gemini-2.5-flash"
    FAST_MODEL: str = "gemini-2.5-flash-lite"
    CHAT_MODEL: str = "gemini-3-pro-preview"
    SEARCH_MODEL: str = "gemini-2.5-flash"
    AUTH_NETWORK_DELAY_SECONDS: float = 0.8
    DEFAULT_LANGUAGE: str = "en"
    LOG_LEVEL: str = "INFO"


settings = Settings()
