from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # "json" | "memory"; empty picks from ENV (memory under "test", json otherwise)
    STORE_PROVIDER: str = ""
    DATA_DIR: str = "./data/store"

    # Share of total_amount credited to providers while a booking is in progress.
    IN_PROGRESS_EARNINGS_SHARE: float = 0.0


settings = Settings()
