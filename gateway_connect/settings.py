from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # HTTP
    HTTP_TIMEOUT_SEC: int = 15

    # Валюта по умолчанию для create_payment
    DEFAULT_CURRENCY: str = "RUB"

    # --- Tinkoff ---
    TINKOFF_API_URL: str = "https://securepay.tinkoff.ru/v2"
    TINKOFF_MERCHANT_ID: str = ""
    TINKOFF_SECRET_KEY: str = ""

settings = Settings()
