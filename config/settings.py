from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_NAME: str = "Payments Engine"

    # Logging (always to stderr; stdout carries the report)
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"

    # Replay
    VERIFY_INVARIANTS: bool = True
    STRICT_INVARIANTS: bool = False  # raise instead of only logging violations
    SORT_OUTPUT: bool = True


settings = Settings()
