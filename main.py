# main.py
import sys
import os
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config import ConfigError, Settings, get_settings
from database import connect, ping
from errors import register_error_handlers
from routes import answers, assessments, feedback, notifications, questions, registration
from storage import DiskStorage, build_storage

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CORS_REJECTION = "The CORS policy for this site does not allow access from the specified Origin."


def create_app(settings: Settings, db=None) -> FastAPI:
    app = FastAPI(title="Bootcamp API")

    # One database handle and one storage backend per process, shared by every request.
    app.state.settings = settings
    app.state.db = db if db is not None else connect(settings)
    app.state.storage = build_storage(settings, app.state.db)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Registered after CORSMiddleware so it runs first.
    @app.middleware("http")
    async def reject_unknown_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in settings.allowed_origins:
            logger.warning(f"Rejected request from origin {origin}")
            return PlainTextResponse(CORS_REJECTION, status_code=403)
        return await call_next(request)

    register_error_handlers(app)

    app.include_router(registration.router)
    app.include_router(questions.router)
    app.include_router(answers.router)
    app.include_router(feedback.router)
    app.include_router(notifications.router)
    app.include_router(assessments.router)

    if isinstance(app.state.storage, DiskStorage):
        app.mount("/uploads", StaticFiles(directory=app.state.storage.upload_dir), name="uploads")

    @app.on_event("startup")
    async def startup_event():
        await ping(app.state.db)

    return app


try:
    settings = get_settings()
except ConfigError as e:
    logger.critical(f"Configuration error: {e}")
    sys.exit(1)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.host, port=settings.port)
