from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Your Salon"
    BUSINESS_TIMEZONE: str = "Europe/Moscow"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"  # "memory" or "json"
    DATA_DIR: str = "./data"

    SLOT_STEP_MINUTES: int = 30
    LEAD_TIME_MINUTES: int = 30
    MIN_PROBE_DURATION: int = 30
    DEFAULT_SERVICE_DURATION: int = 60
    DEFAULT_WORK_START: str = "10:00"
    DEFAULT_WORK_END: str = "20:00"
    BOOKING_BUFFER_MINUTES: int = 0

    DEFAULT_MASTER_ID: str = "master-1"


settings = Settings()
