from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # DB
    DB_URL: str = "sqlite:///./salon_agenda.db"

    # Agenda
    SLOT_INTERVAL_MINUTES: int = 30
    DEFAULT_SERVICE_DURATION_MINUTES: int = 60
    # window pre-filled when a day is switched on in the schedule form
    DEFAULT_START_TIME: str = "09:00"
    DEFAULT_END_TIME: str = "18:00"


settings = Settings()
