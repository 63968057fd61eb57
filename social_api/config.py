from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str

    # Security
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # File Upload
    upload_dir: str = "./public/assets"
    max_file_size: int = 31457280  # 30MB

    # Server
    host: str = "0.0.0.0"
    port: int = 6001
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Read settings from the environment once per process"""
    return Settings()
