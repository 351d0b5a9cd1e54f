from typing import Any, Dict, Optional

from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    DATABASE_URL: Optional[str] = None
    DATABASE_PORT: int = 5432
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_USER: str = "postgres"
    POSTGRES_DB: str = "courseplatform"
    POSTGRES_HOST: str = "localhost"
    SQL_ECHO: bool = False

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return "postgresql://{}:{}@{}:{}/{}".format(
            self.POSTGRES_USER,
            self.POSTGRES_PASSWORD,
            self.POSTGRES_HOST,
            self.DATABASE_PORT,
            self.POSTGRES_DB,
        )


class AuthSettings(BaseSettings):
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_DAYS: int = 7
    BCRYPT_ROUNDS: int = 12


class AppSettings(DatabaseSettings, AuthSettings):
    APP_ENV: str = "development"
    ALLOWED_ORIGINS: str = ""
    SEED_DEMO_DATA: bool = False

    class Config:
        env_file = "./.env"
        extra = "allow"

    @property
    def allowed_origins(self) -> list[str]:
        origins = self.ALLOWED_ORIGINS.split(",")
        return [origin.strip() for origin in origins if origin.strip()]

    def validate_runtime(self) -> None:
        if self.APP_ENV.lower() == "production" and self.SECRET_KEY == "change-me":
            raise RuntimeError("SECRET_KEY must be set in production.")


class LogConfig(BaseSettings):
    LOGGER_NAME: str = "courseplatform"
    LOG_FORMAT: str = "%(levelprefix)s | %(asctime)s | %(name)s | %(message)s"
    LOG_LEVEL: str = "INFO"

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: Dict[str, Any] = {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": LOG_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
    handlers: Dict[str, Any] = {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    }
    loggers: Dict[str, Any] = {
        LOGGER_NAME: {"handlers": ["default"], "level": LOG_LEVEL},
    }


config = AppSettings()
