from pydantic_settings import BaseSettings, SettingsConfigDict


class settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Session Chat API"
    APP_VERSION: str = "0.1.0"
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None
    OPENAI_TIMEOUT_SECONDS: float = 60.0
    GENERATION_MODEL_ID: str = "gpt-5.2-chat-latest"
    DATABASE_URL: str | None = None
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_USERNAME: str = "postgres"
    POSTGRES_MAIN_DATABASE: str = "chat_app"
    POSTGRES_PORT: int = 5432
    POSTGRES_HOST: str = "localhost"
    DB_AUTO_CREATE: bool = False
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USERNAME}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_MAIN_DATABASE}"
        )


def get_settings():
    return settings()
