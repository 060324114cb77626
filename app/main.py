"""
Controle Fotógrafo - Main Application
Orçamentos, contratos e cadastros de fotógrafos sobre um backend hospedado
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core import AppError, ConfigurationError, FormValidationError, SelectionError, limiter, settings
from app.database import AuthChangeEvent, AuthSession, BackendConnection
from app.api import (
    auth_router,
    config_router,
    catalog_router,
    quotes_router,
    contracts_router,
    dashboard_router,
    settings_router,
    profile_router
)

# Rate limiting
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def log_auth_change(event: AuthChangeEvent, session: Optional[AuthSession]):
    if event == AuthChangeEvent.TOKEN_INVALID:
        logger.warning("Sessão inválida detectada, usuário precisa entrar novamente")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle do aplicativo"""
    # Startup
    print(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f"Environment: {settings.ENVIRONMENT}")

    backend = getattr(app.state, "backend", None) or BackendConnection()
    app.state.backend = backend
    if backend.credentials is None:
        backend.configure()
    subscription = backend.events.subscribe(log_auth_change)

    if backend.is_configured:
        print(f"Backend: Configurado (origem: {backend.credentials.source})")
    else:
        print("Backend: Não configurado - use /api/config/backend")

    yield

    # Shutdown
    print("Shutting down...")
    subscription.unsubscribe()
    await backend.close()


# Middleware de headers de seguranca
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adiciona headers de seguranca em todas as respostas"""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Sessão nunca em cache
        if "/auth" in request.url.path or "/config" in request.url.path:
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
            response.headers["Pragma"] = "no-cache"
        return response


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "reconfigure": True}
    )


async def form_validation_error_handler(request: Request, exc: FormValidationError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "errors": exc.errors}
    )


async def selection_error_handler(request: Request, exc: SelectionError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "errors": {exc.field: exc.message}}
    )


# Cria aplicação
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Orçamentos e contratos para fotógrafos",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)

# Configura rate limiter na aplicacao
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_exception_handler(ConfigurationError, configuration_error_handler)
app.add_exception_handler(FormValidationError, form_validation_error_handler)
app.add_exception_handler(SelectionError, selection_error_handler)
app.add_exception_handler(AppError, app_error_handler)

# Headers de seguranca (adicionar ANTES do CORS)
app.add_middleware(SecurityHeadersMiddleware)

# CORS (deve vir DEPOIS dos headers de seguranca)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(config_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(catalog_router, prefix="/api")
app.include_router(quotes_router, prefix="/api")
app.include_router(contracts_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
app.include_router(settings_router, prefix="/api")
app.include_router(profile_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health(request: Request):
    """Health check"""
    backend = getattr(request.app.state, "backend", None)
    return {
        "status": "healthy",
        "backend_configured": bool(backend and backend.is_configured)
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
