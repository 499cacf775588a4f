"""FastAPI application wiring the news search front end."""
from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .config import Settings
from .errors import (
    ConfigError,
    PageParseError,
    ParseError,
    TransportError,
    UpstreamError,
    UpstreamStatusError,
)
from .news import NewsClient
from .search import ArticleFetcher, search_news

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    # ``force=True`` replaces uvicorn's default handlers so every logger
    # shares one format.
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "urllib3"):
        logging.getLogger(name).setLevel(level)
    logger.info("Logging configured at %s", level_name.upper())


def _upstream_http_error(exc: UpstreamError) -> HTTPException:
    if isinstance(exc, TransportError) and exc.timeout:
        return HTTPException(status_code=504, detail="News service timed out")
    if isinstance(exc, UpstreamStatusError):
        return HTTPException(status_code=502, detail=f"News service returned {exc.status_code}")
    if isinstance(exc, ParseError):
        return HTTPException(status_code=502, detail="News service sent an unreadable response")
    return HTTPException(status_code=502, detail="News service is unreachable")


def create_app(settings: Settings, client: ArticleFetcher | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    news_client = client if client is not None else NewsClient(settings)
    templates = Jinja2Templates(directory=settings.templates_dir)

    app = FastAPI(title="News Search")
    app.mount("/assets", StaticFiles(directory=settings.assets_dir), name="assets")
    app.state.settings = settings
    app.state.news_client = news_client

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(request, "index.html", {"search": None})

    @app.get("/search", response_class=HTMLResponse)
    async def search(
        request: Request,
        q: str = Query("", description="Search query"),
        page: str = Query("1", description="Page number, starting at 1"),
    ) -> HTMLResponse:
        try:
            result_page = await search_news(news_client, q, page)
        except PageParseError as exc:
            logger.warning("rejected search q=%r: %s", q, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except UpstreamError as exc:
            logger.warning("search failed q=%r page=%s: %s", q, page, exc)
            raise _upstream_http_error(exc) from exc
        return templates.TemplateResponse(request, "index.html", {"search": result_page})

    @app.get("/health")
    async def health() -> dict:
        return {
            "status": "ok",
            "page_size": settings.page_size,
            "upstream": settings.news_api_url,
        }

    return app


def run() -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        logging.basicConfig(format=LOG_FORMAT)
        logger.critical("%s", exc)
        raise SystemExit(1) from exc
    app = create_app(settings)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
