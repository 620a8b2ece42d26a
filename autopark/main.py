# autopark/main.py
"""
FastAPI application entry point.
Includes security middleware, error handlers, startup maintenance and all routers.
"""

import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from autopark.config import settings
from autopark.routers import dispatch_requests, drivers, health, trips, users, vehicles
from autopark.services.errors import ServiceError
from autopark.services.maintenance_service import run_startup_maintenance
from autopark.store import get_store
from autopark.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Autopark Dispatch API",
    description="Vehicles, drivers, trip log and dispatch requests for a unit motor pool.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (the web client is served from another origin) ─────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Optional shared key in front of the whole API, for deployments exposed
    beyond the unit network. Health check and docs stay open.
    Set API_KEY in .env. Leave empty to disable.
    """
    open_paths = {"/api/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


if settings.API_KEY:
    app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(health.router,            prefix="/api", tags=["💚 Health"])
app.include_router(users.router,             prefix="/api", tags=["👤 Users & registrations"])
app.include_router(vehicles.router,          prefix="/api", tags=["🚚 Vehicles"])
app.include_router(drivers.router,           prefix="/api", tags=["🪖 Drivers"])
app.include_router(trips.router,             prefix="/api", tags=["🛣️  Trips"])
app.include_router(dispatch_requests.router, prefix="/api", tags=["📋 Dispatch requests"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Autopark backend starting up...")
    store = get_store()
    logger.info(f"🗄️  Store backend: {store.backend}")
    run_startup_maintenance(store, settings)
    logger.info("✅ Store ready")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Autopark backend shutting down...")
