# careerconnect/db/mongo.py
"""
Motor client and collection handles.

The client is built once per application by `create_store` and handed to
the routers through `app.state`; nothing here is a process-wide singleton.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.server_api import ServerApi

from careerconnect.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class Store:
    client: Any
    db: Any
    users: Any
    jobs: Any
    applied_jobs: Any
    resumes: Any


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Returns a Motor client pinned to Stable API v1.
    """
    if not settings.has_credentials:
        logger.warning("DB_USER/DB_PASS not set and no MONGODB_URI given; connecting will fail")
    return AsyncIOMotorClient(
        settings.mongodb_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        tz_aware=True,
    )


def create_store(settings: Settings, client: Optional[Any] = None) -> Store:
    client = client if client is not None else create_mongo_client(settings)
    db = client[settings.MONGODB_DB]
    return Store(
        client=client,
        db=db,
        users=db[settings.USERS_COLLECTION],
        jobs=db[settings.JOBS_COLLECTION],
        applied_jobs=db[settings.APPLIED_JOBS_COLLECTION],
        resumes=db[settings.RESUMES_COLLECTION],
    )


async def connect_store(store: Store) -> bool:
    # A failed ping is logged only; routes report store errors per request.
    try:
        await store.client.admin.command("ping")
    except Exception:
        logger.exception("MongoDB connection failed")
        return False
    logger.info("MongoDB connected (db=%s)", store.db.name)
    return True


def close_store(store: Store) -> None:
    store.client.close()
