from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import List, Optional

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dev.db"
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USERNAME: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_DATABASE: Optional[str] = None
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def database_url(self):
        """
        MySQL URL assembled from the DB_* variables when DB_HOST is set,
        otherwise DATABASE_URL as given.
        """
        if not self.DB_HOST:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
        )

settings = Settings()
