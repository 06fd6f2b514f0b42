from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    ENV: str = "local"  # Environment setting
    HOST: str = "localhost"
    PORT: int = 2022
    LOG_LEVEL: str = "INFO"

    # File storage
    DATA_DIR: str = "data"
    SECTIONS_DIR: Optional[str] = None
    WEEKLY_PLANS_DIR: Optional[str] = None

    # Comma-separated list, "*" allows any origin
    CORS_ORIGINS: str = "*"

    class Config:
        env_file = ".env"

    @property
    def sections_dir(self) -> Path:
        if self.SECTIONS_DIR:
            return Path(self.SECTIONS_DIR)
        return Path(self.DATA_DIR) / "sections"

    @property
    def weekly_plans_dir(self) -> Path:
        if self.WEEKLY_PLANS_DIR:
            return Path(self.WEEKLY_PLANS_DIR)
        return Path(self.DATA_DIR) / "weekly-plans"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
