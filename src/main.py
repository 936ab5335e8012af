import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SettingsValidationError

from routes import api

from helpers.config import get_settings
from helpers.database import create_db_engine, create_db_client
from helpers.errors import AppError, StoreError, ProviderError, ValidationError, translate_error
from models.session_chat_DB.schemes import SQLAlchemyBase
from stores.LLM import OpenAIProvider


def _setup_logging():
    """Configure logging so app and library loggers (e.g. OpenAI errors) show in the terminal."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
        level = getattr(logging, level_name, logging.INFO)
    except SettingsValidationError:
        level = logging.INFO
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        root.addHandler(handler)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)  # optional: reduce access log noise


_setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.db_engine = create_db_engine(settings.database_url())
    app.db_client = create_db_client(app.db_engine)
    if settings.DB_AUTO_CREATE:
        async with app.db_engine.begin() as conn:
            await conn.run_sync(SQLAlchemyBase.metadata.create_all)
        logger.info("Database tables created.")

    app.openai_provider = OpenAIProvider(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
    )
    app.openai_provider.set_generation_model(model_id=settings.GENERATION_MODEL_ID)
    logger.info("Application startup complete (DB and OpenAI provider ready).")
    yield
    await app.openai_provider.close()
    await app.db_engine.dispose()
    logger.info("Application shutdown complete.")


_settings = get_settings()
app = FastAPI(title=_settings.APP_NAME, version=_settings.APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    error = ValidationError(details or "Invalid request")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(StoreError)
@app.exception_handler(ProviderError)
async def upstream_error_handler(request: Request, exc: Exception):
    error = translate_error(exc)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


app.include_router(api.api_router, prefix="/api/v1")
