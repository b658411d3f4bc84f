import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from personas_api.core.config import get_settings
from personas_api.core.observability import setup_logging
from personas_api.core.problems import errors_from_request_validation, validation_problem
from personas_api.db.create_tables import create_all
from personas_api.routers import personas as personas_router
from personas_api.services.person_service import PersonService

logger = logging.getLogger(__name__)

GREETING = "API de Personas"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    create_all()
    logger.info("Personas API started (env=%s)", settings.app_env)
    yield
    logger.info("Personas API shutting down")


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request on %s", request.url.path, extra={"path": request.url.path})
        return validation_problem(errors_from_request_validation(exc.errors()))


def create_app() -> FastAPI:
    """Factory compatível com uvicorn/gunicorn (--factory)."""
    settings = get_settings()
    docs = settings.docs_enabled
    app = FastAPI(
        title="Personas API",
        lifespan=lifespan,
        docs_url="/swagger" if docs else None,
        redoc_url=None,
        openapi_url="/swagger/v1/swagger.json" if docs else None,
    )
    app.state.person_service = PersonService()

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return GREETING

    app.include_router(personas_router.router)
    _register_error_handlers(app)
    return app


app = create_app()
