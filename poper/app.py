from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from poper.domain.exceptions import ConfigurationError
from poper.infrastructure.config.dependencies import get_settings
from poper.infrastructure.logging.logger import Logger, setup_logging
from poper.presentation.routers import pages, suggestions

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    missing = settings.missing_credentials()
    if missing:
        logger.warning("starting without credentials: %s", ", ".join(missing))
    else:
        logger.info("starting with model=%s", settings.GEMINI_MODEL)
    yield


app = FastAPI(title="poper", lifespan=lifespan)

app.include_router(pages.router)
app.include_router(suggestions.router)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("configuration error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=HTTPStatus.SERVICE_UNAVAILABLE,
        content={"detail": str(exc), "missing_credentials": exc.missing},
    )
