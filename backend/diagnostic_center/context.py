"""Application context: the handles every request shares, built once at startup."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from diagnostic_center.config import Settings
from diagnostic_center.services.token_service import TokenService


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    db: Database
    tokens: TokenService
    # Set only when the context opened the client itself
    client: Optional[MongoClient] = None

    @classmethod
    def build(cls, settings: Settings, db: Optional[Database] = None) -> "AppContext":
        """Connect to MongoDB (unless a database is given) and set up token signing."""
        client = None
        if db is None:
            client = MongoClient(settings.mongodb_uri)
            db = client[settings.MONGODB_DB_NAME]
        tokens = TokenService(
            settings.ACCESS_TOKEN_SECRET,
            algorithm=settings.ALGORITHM,
            expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        )
        return cls(settings=settings, db=db, tokens=tokens, client=client)

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


def get_context(request: Request) -> AppContext:
    return request.app.state.context
