# questionnaire/main.py
from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from questionnaire.config import Settings
from questionnaire.errors import IngestionError, describe_errors
from questionnaire.routers import answers, questions, submissions
from questionnaire.services.catalog import Catalog
from questionnaire.services.store import SubmissionStore

logger = logging.getLogger(__name__)

PAGE_TITLE = "Анкета"

# (method, path, description) as announced at start-up
ENDPOINTS = [
    ("GET", "/", "Главная страница"),
    ("GET", "/questions", "Получить вопросы анкеты"),
    ("POST", "/answers", "Отправить ответы"),
    ("GET", "/submissions", "Получить все ответы"),
]


def _load_catalog(settings: Settings) -> Catalog:
    if settings.questions_file:
        return Catalog.from_file(settings.questions_file)
    return Catalog.default()


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Catalog] = None,
    store: Optional[SubmissionStore] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title=PAGE_TITLE)
    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else _load_catalog(settings)
    app.state.store = store if store is not None else SubmissionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"], allow_headers=["*"],
    )

    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        # CORSMiddleware only answers requests that carry an Origin header.
        response = await call_next(request)
        if settings.allow_any_origin:
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    @app.exception_handler(RequestValidationError)
    async def decode_error(request: Request, exc: RequestValidationError):
        return PlainTextResponse(describe_errors(exc.errors()), status_code=400)

    @app.exception_handler(IngestionError)
    async def ingestion_error(request: Request, exc: IngestionError):
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(Exception)
    async def server_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = PlainTextResponse(str(exc), status_code=500)
        # Runs outside the CORS middlewares, so set the header here.
        if settings.allow_any_origin:
            response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(questions.router)
    app.include_router(answers.router)
    app.include_router(submissions.router)

    # Presentation assets are optional
    if os.path.isdir(settings.templates_dir):
        templates = Jinja2Templates(directory=settings.templates_dir)

        @app.get("/", response_class=HTMLResponse, include_in_schema=False)
        def home_page(request: Request):
            return templates.TemplateResponse(request, "index.html", {"title": PAGE_TITLE})
    else:
        logger.warning("Templates directory %s not found, / is disabled", settings.templates_dir)

    if os.path.isdir(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    return app
