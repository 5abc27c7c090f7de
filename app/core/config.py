from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Sasha K"
    ARTIST_NAME: str = "Sasha"
    BUSINESS_TIMEZONE: str = "America/New_York"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    OPEN_HOUR: int = 9
    CLOSE_HOUR: int = 18
    SLOT_INTERVAL_MINUTES: int = 30
    BUSINESS_DAYS: list[int] = [1, 2, 3, 4, 5, 6]  # ISO weekdays, Monday=1

    AVAILABILITY_DAYS_AHEAD: int = 21
    AVAILABILITY_REPLY_COUNT: int = 5


settings = Settings()
