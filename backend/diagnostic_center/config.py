from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Diagnostic Center Management System"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"  # Environment: "dev", "staging", "prod"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database (MongoDB Atlas)
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    DB_HOST: str = "cluster0.mufx5zx.mongodb.net"
    DB_APP_NAME: str = "Cluster0"
    MONGODB_URI: Optional[str] = None  # Overrides the DB_* assembly when set
    MONGODB_DB_NAME: str = "diagnosticCenterDb"

    # Security
    ACCESS_TOKEN_SECRET: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # CORS
    CORS_ORIGINS: List[str] = [
        "https://assignment12-bf39b.firebaseapp.com",
        "https://assignment12-bf39b.web.app",
        "http://localhost:5173",
        "http://localhost:5174",
    ]

    @model_validator(mode="after")
    def _require_database_credentials(self) -> "Settings":
        """Credentials are mandatory unless a full MONGODB_URI is given."""
        if not self.MONGODB_URI and not (self.DB_USER and self.DB_PASS):
            raise ValueError("DB_USER and DB_PASS must be set when MONGODB_URI is not")
        return self

    @property
    def mongodb_uri(self) -> str:
        if self.MONGODB_URI:
            return self.MONGODB_URI
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.DB_HOST}/?retryWrites=true&w=majority&appName={self.DB_APP_NAME}"
        )

    @property
    def is_dev(self) -> bool:
        return self.ENV.lower() == "dev"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Load settings once; a missing required value fails here, at startup."""
    return Settings()
