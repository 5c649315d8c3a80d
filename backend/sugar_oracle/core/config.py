from typing import List

from pydantic import BaseModel, Field
import os
from dotenv import load_dotenv

load_dotenv()

def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]

class Settings(BaseModel):
    app_env: str = os.getenv("APP_ENV", "dev")
    database_path: str = os.getenv("DATABASE_PATH", "")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    stream_interval_seconds: float = Field(float(os.getenv("STREAM_INTERVAL_SECONDS", "10")), gt=0)
    cors_origins: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000"))

settings = Settings()
