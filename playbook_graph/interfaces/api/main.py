"""FastAPI 应用入口"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from playbook_graph.config import settings
from playbook_graph.domain.exceptions import DomainError, DomainValidationError
from playbook_graph.interfaces.api.routes import health
from playbook_graph.interfaces.api.routes import playbook_graph as playbook_graph_routes
from playbook_graph.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _get_display_host() -> str:
    """Return a host suitable for displaying in links."""
    if settings.host in {"0.0.0.0", "::"}:
        return "127.0.0.1"
    return settings.host


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    display_host = _get_display_host()
    logger.info(
        "%s v%s 启动中 (env=%s, docs=http://%s:%s/docs)",
        settings.app_name,
        settings.app_version,
        settings.env,
        display_host,
        settings.port,
    )
    try:
        yield
    finally:
        logger.info("%s 关闭中...", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Playbook 工作流图结构校验服务",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainValidationError)
async def domain_validation_error_handler(
    request: Request, exc: DomainValidationError
) -> JSONResponse:
    logger.info(
        "domain_validation_failed",
        extra={"path": request.url.path, "code": exc.code, "error_count": len(exc.errors)},
    )
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": {"code": exc.code, "message": str(exc), "issues": exc.errors},
        },
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("domain_error", extra={"path": request.url.path, "detail": str(exc)})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": {"code": "DOMAIN_ERROR", "message": str(exc)},
        },
    )


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    return JSONResponse(
        content={
            "status": "healthy",
            "app_name": settings.app_name,
            "version": settings.app_version,
            "env": settings.env,
        }
    )


@app.get("/", tags=["Root"])
async def root() -> JSONResponse:
    display_host = _get_display_host()
    return JSONResponse(
        content={
            "message": f"欢迎使用 {settings.app_name}",
            "version": settings.app_version,
            "docs": f"http://{display_host}:{settings.port}/docs",
        }
    )


app.include_router(playbook_graph_routes.router, prefix="/api", tags=["Playbook Graph"])
app.include_router(health.router, prefix="/api", tags=["Health"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "playbook_graph.interfaces.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
