# careerconnect/core/config.py
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Atlas credentials; the connection string is built from these unless
    # MONGODB_URI overrides it (local servers, CI).
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    MONGODB_CLUSTER: str = "cluster0.rs9y1es.mongodb.net"
    MONGODB_URI: Optional[str] = None
    MONGODB_DB: str = "careerConnect"

    # Collection names. Deployments that merged jobs and applied jobs into
    # one collection can point both names at it.
    USERS_COLLECTION: str = "users"
    JOBS_COLLECTION: str = "jobs"
    APPLIED_JOBS_COLLECTION: str = "appliedJobs"
    RESUMES_COLLECTION: str = "resumes"

    # Uploaded resumes
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def mongodb_uri(self) -> str:
        if self.MONGODB_URI:
            return self.MONGODB_URI
        user = quote_plus(self.DB_USER or "")
        password = quote_plus(self.DB_PASS or "")
        return (
            f"mongodb+srv://{user}:{password}@{self.MONGODB_CLUSTER}/"
            "?retryWrites=true&w=majority"
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.MONGODB_URI or (self.DB_USER and self.DB_PASS))

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
