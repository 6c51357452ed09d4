"""
Configuration management for the Print Shop Back Office
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Print Shop Back Office"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Money
    CURRENCY_SYMBOL: str = "RM"
    DEFAULT_TAX_RATE: float = 0.0  # flat percentage, e.g. 6 for 6%

    # Documents
    QUOTE_VALID_DAYS: int = 30
    INVOICE_DUE_DAYS: int = 30
    NUMBER_GENERATION_ATTEMPTS: int = 5  # retries on a colliding QT-/INV- number
    ENFORCE_STATUS_TRANSITIONS: bool = False

    # Production
    DEFAULT_DEPARTMENT_ID: str = "dept-general"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()
