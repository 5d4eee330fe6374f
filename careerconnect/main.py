# careerconnect/main.py
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from careerconnect.api.errors import register_exception_handlers
from careerconnect.api.v1.routes import api_router, root_router
from careerconnect.core.config import Settings, get_settings
from careerconnect.db.mongo import close_store, connect_store, create_store
from careerconnect.services.storage import ensure_upload_dir


def create_app(settings: Optional[Settings] = None, client: Optional[Any] = None) -> FastAPI:
    """
    Build the API. `client` replaces the Motor client built from settings
    (tests pass an in-memory one).
    """
    settings = settings or get_settings()
    store = create_store(settings, client=client)
    upload_dir = ensure_upload_dir(settings.UPLOAD_DIR)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        await connect_store(store)
        try:
            yield
        finally:
            close_store(store)

    app = FastAPI(title="Career Connect API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(api_router, prefix="/api")
    app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=upload_dir), name="uploads")
    return app
