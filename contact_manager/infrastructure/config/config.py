from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AppConfig(BaseConfig):
    APP_NAME: str = "Contact Manager"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ALLOWED_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]


class DBConfig(BaseConfig):
    DB_URL: str | None = None

    DB_USER: str = "postgres"
    DB_PASS: str = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "contacts"

    def get_url(self, is_async: bool = True) -> str:
        if self.DB_URL:
            return self.DB_URL
        driver = "asyncpg" if is_async else "psycopg2"
        return (
            f"postgresql+{driver}://{self.DB_USER}:{self.DB_PASS}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


class ClientConfig(BaseConfig):
    CONTACTS_API_URL: str = "http://localhost:5000"
    CONTACTS_API_TIMEOUT: float = 10.0


APP_CONFIG = AppConfig()
DB_CONFIG = DBConfig()
CLIENT_CONFIG = ClientConfig()
