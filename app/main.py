import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from dotenv import load_dotenv

load_dotenv()

from app.config import Settings, get_settings
from app.exception_handlers import register_exception_handlers
from app.routers import interview, resume
from app.services.gemini_service import GeminiGateway

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("GEMINI_API_KEY exists: %s", bool(settings.gemini_api_key))

    app = FastAPI(
        title="AI Interview API",
        description="Parse resumes and generate, grade and summarize interviews with Gemini.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.gemini = GeminiGateway(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(resume.router, prefix="/api", tags=["Resume Parsing"])
    app.include_router(interview.router, prefix="/api", tags=["Interview"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "AI Interview Backend is live!"

    return app


app = create_app()


# Local development runner
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Backend running on http://%s:%s", settings.host, settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
