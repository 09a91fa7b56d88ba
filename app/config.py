import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()  # Load environment variables from .env file


class Settings(BaseModel):
    # Async SQLAlchemy URL; any driver supported by create_async_engine works
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./users.db")
    sql_echo: bool = os.getenv("SQL_ECHO", "false").lower() in ("true", "1", "yes")


settings = Settings()
