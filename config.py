# config.py
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError as PydanticValidationError, field_validator

load_dotenv()

DEFAULT_ORIGINS = ["https://boot-camp-topaz.vercel.app", "http://localhost:3000"]
STORAGE_BACKENDS = ("disk", "embedded")


class ConfigError(Exception):
    """Required startup configuration is missing or invalid."""


class Settings(BaseModel):
    mongodb_uri: str
    database_name: str = "bootcamp"
    host: str = "0.0.0.0"
    port: int = 3001
    allowed_origins: List[str] = DEFAULT_ORIGINS
    upload_dir: Path = Path("uploads")
    assessment_storage: str = "disk"

    @field_validator("assessment_storage")
    @classmethod
    def check_storage(cls, value: str) -> str:
        if value not in STORAGE_BACKENDS:
            raise ValueError(f"must be one of {', '.join(STORAGE_BACKENDS)}")
        return value


def get_settings() -> Settings:
    mongodb_uri = os.getenv("MONGODB_URI")
    if not mongodb_uri:
        raise ConfigError("MONGODB_URI is not set")

    values = {"mongodb_uri": mongodb_uri}
    env_map = {
        "MONGODB_DB": "database_name",
        "HOST": "host",
        "PORT": "port",
        "UPLOAD_DIR": "upload_dir",
        "ASSESSMENT_STORAGE": "assessment_storage",
    }
    for env_name, field in env_map.items():
        value = os.getenv(env_name)
        if value:
            values[field] = value

    origins = os.getenv("ALLOWED_ORIGINS")
    if origins:
        values["allowed_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    try:
        return Settings(**values)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
