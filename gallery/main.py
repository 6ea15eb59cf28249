"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from gallery.api.routes import router
from gallery.config import check_access_key, get_settings
from gallery.logging_config import setup_logging
from gallery.session import SessionStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting gallery service")
    check_access_key(settings)

    # One connection pool shared by every session
    http = httpx.AsyncClient()
    app.state.settings = settings
    app.state.sessions = SessionStore(settings, http)

    logger.info(
        "gallery service ready",
        extra={
            "api_url": settings.unsplash_api_url,
            "photo_count": settings.photo_count,
            "photo_query": settings.photo_query,
            "max_sessions": settings.max_sessions,
        },
    )

    yield

    logger.info("shutting down gallery service")
    app.state.sessions.close_all()
    await http.aclose()


app = FastAPI(title="Photo Gallery", lifespan=lifespan)
app.include_router(router)


@app.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse((STATIC_DIR / "index.html").read_text(encoding="utf-8"))


@app.get("/health")
async def health():
    return {"status": "ok"}


def main() -> None:
    """Run the service with uvicorn."""
    settings = get_settings()
    uvicorn.run("gallery.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
