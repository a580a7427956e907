from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "GUESSER_API"

    GUARD_SECRET: str = "CHANGE_ME_SUPER_SECRET"

    RATE_LIMIT_MAX_REQUESTS: int = 20
    RATE_LIMIT_WINDOW_SECONDS: int = 10

    LOG_LEVEL: str = "INFO"


settings = Settings()
