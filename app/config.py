from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite+aiosqlite:///data.db"
    DB_ECHO: bool = False

    HOST: str = "127.0.0.1"
    PORT: int = 8080
    ALLOW_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    GREETING: str = "Welcome to the song server!"


settings = Settings()
