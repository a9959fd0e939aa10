from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal

class Settings(BaseSettings):
    # Environment
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API Settings
    PROJECT_NAME: str = "Evensplit API"
    API_V1_STR: str = "/api/v1"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Shared expense tracking and equal-split settlement API"

    # Storage
    STORAGE_BACKEND: Literal["memory", "file", "mongo"] = "file"
    STORAGE_DIR: str = "data"
    STORAGE_KEY: str = "users"

    # MongoDB
    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "evensplit"
    MONGODB_COLLECTION: str = "blobs"

    # Settlement
    SETTLEMENT_TOLERANCE: float = 0.01

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()
