# member_registry/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from member_registry.api.middleware import CorrelationIdMiddleware, RequestAuditMiddleware
from member_registry.api.routers import admin, health, public
from member_registry.application.exceptions import (
    ApplicationError,
    RenderError,
    StorageError,
)
from member_registry.application.seed_importer import SeedImporter
from member_registry.config.logging import configure_logging
from member_registry.config.settings import get_settings
from member_registry.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidInputError,
    MemberNotFoundError,
)
from member_registry.infrastructure.database.member_repository_db import DbMemberRepository
from member_registry.infrastructure.database.session import (
    get_engine,
    get_sessionmaker,
    init_models,
)
from member_registry.security.exceptions import ForbiddenError

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


async def bootstrap_storage() -> None:
    """Create tables, then seed members from CSV if the table is empty. Seed failures are not fatal."""
    await init_models(get_engine())
    async with get_sessionmaker()() as session:
        importer = SeedImporter(
            repository=DbMemberRepository(session),
            logger=logging.getLogger("member_registry.seed"),
        )
        try:
            await importer.run(settings.seed_csv_path)
        except StorageError as e:
            logger.error("seed_import_failed", extra={"error": e.message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    await bootstrap_storage()
    yield
    await get_engine().dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost). Request flow: CORS -> CorrelationId -> RequestAudit.
app.add_middleware(RequestAuditMiddleware)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "x-admin-pin"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request, exc: RequestValidationError):
    return _error(400, "Datos inválidos")


@app.exception_handler(ForbiddenError)
async def forbidden_error_handler(request, exc: ForbiddenError):
    return _error(403, exc.message)


@app.exception_handler(InvalidInputError)
async def invalid_input_error_handler(request, exc: InvalidInputError):
    return _error(400, exc.message)


@app.exception_handler(ConflictError)
async def conflict_error_handler(request, exc: ConflictError):
    return _error(409, exc.message)


@app.exception_handler(MemberNotFoundError)
async def not_found_error_handler(request, exc: MemberNotFoundError):
    return _error(404, exc.message)


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return _error(400, exc.message)


@app.exception_handler(RenderError)
async def render_error_handler(request, exc: RenderError):
    logger.error("credential_render_failed", extra={"error": exc.message})
    return _error(500, "Error generando el PDF")


@app.exception_handler(StorageError)
async def storage_error_handler(request, exc: StorageError):
    logger.error("storage_failed", extra={"error": exc.message})
    return _error(500, "Error en la base de datos")


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    return _error(500, exc.message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    logger.exception("unexpected_error")
    return _error(500, "Error interno del servidor")


# Routers: /health, /verificar, /credencial, /admin/*
app.include_router(health.router)
app.include_router(public.router)
app.include_router(admin.router, prefix="/admin")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "member_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
