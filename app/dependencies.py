from fastapi import Request

from .config import Settings
from .services.gemini_service import GeminiGateway


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gemini_gateway(request: Request) -> GeminiGateway:
    return request.app.state.gemini
