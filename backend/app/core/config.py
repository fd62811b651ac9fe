from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url
from typing import Optional, Union


class Settings(BaseSettings):
    # Database connection - composed from the DB_* parts unless DATABASE_URL is set
    # DATABASE_URL wins so tests and local setups can point at any SQLAlchemy URL
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "mysql+pymysql"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "inventory"

    # Connection pool - each request checks out one connection and returns it
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds to wait for a free connection
    DB_POOL_RECYCLE: int = 1800  # MySQL drops idle connections after wait_timeout

    # Startup reconnect policy (exponential backoff between attempts)
    DB_CONNECT_ATTEMPTS: int = 5
    DB_CONNECT_BACKOFF_MAX: int = 30

    # bcrypt work factor - each +1 doubles hashing time
    BCRYPT_ROUNDS: int = 10

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS origins - "*" allows any origin
    # Can be string (comma-separated) or list for flexibility
    CORS_ORIGINS: Union[str, list[str]] = "*"

    LOG_LEVEL: str = "INFO"

    def get_database_url(self) -> Union[str, URL]:
        """Return DATABASE_URL if given, otherwise build one from the DB_* settings"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        # URL.create escapes special characters in the password
        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    def is_sqlite(self) -> bool:
        return make_url(self.get_database_url()).get_backend_name() == "sqlite"

    def get_cors_origins(self) -> list[str]:
        """Parse CORS_ORIGINS string into list"""
        if isinstance(self.CORS_ORIGINS, str):
            return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
        return self.CORS_ORIGINS if isinstance(self.CORS_ORIGINS, list) else []

    class Config:
        # Load settings from .env file if it exists
        # Environment variables override defaults
        env_file = ".env"
        case_sensitive = True


settings = Settings()
