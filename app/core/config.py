import os
import json
from typing import List, Union
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API configuration
    API_PREFIX: str = ""
    API_VERSION: str = "v1"
    PROJECT_NAME: str = "Movies API"
    PROJECT_DESCRIPTION: str = "API for managing movies and genres"
    DOCS_URL: str = "/api-docs"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if not v:
            return ["http://localhost:3000"]

        if isinstance(v, str):
            try:
                # If string starts with [ and ends with ], try to parse as JSON
                if v.startswith("[") and v.endswith("]"):
                    parsed = json.loads(v)
                    if isinstance(parsed, list):
                        return parsed
            except json.JSONDecodeError:
                pass

            # Not a JSON array, treat as comma-separated
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    # MongoDB settings
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "movies")
    GENRES_COLLECTION: str = "genres"
    MOVIES_COLLECTION: str = "movies"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Environment
    ENV: str = os.getenv("ENV", "development")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()
