# careerconnect/api/v1/deps.py
from fastapi import Request

from careerconnect.core.config import Settings
from careerconnect.db.mongo import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
