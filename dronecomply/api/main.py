from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dronecomply import __version__
from dronecomply.api.routers import roles
from dronecomply.api.schemas.common import ErrorResponse
from dronecomply.core.config import get_settings
from dronecomply.core.logger import setup_logger
from dronecomply.core.rbac import InvalidPermissionError, InvalidRoleError

settings = get_settings()

logger = setup_logger(settings)

app = FastAPI(
    title=settings.app_name,
    description="Role-based access control for drone operations compliance",
    version=__version__,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.include_router(roles.router, prefix="/api")


@app.exception_handler(InvalidRoleError)
async def invalid_role_handler(request: Request, exc: InvalidRoleError):
    logger.warning(f"Invalid role on {request.url.path}: {exc.value!r}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="invalid_role", detail=str(exc)).model_dump(),
    )


@app.exception_handler(InvalidPermissionError)
async def invalid_permission_handler(request: Request, exc: InvalidPermissionError):
    logger.warning(f"Invalid permission on {request.url.path}: {exc.value!r}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="invalid_permission", detail=str(exc)).model_dump(),
    )


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs" if settings.debug else None,
    }
