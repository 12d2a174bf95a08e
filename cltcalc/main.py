"""FastAPI application entry point.

Serves the CLT payroll calculators (salary, overtime, vacation,
termination) over HTTP.

Usage:
    uvicorn cltcalc.main:app --host 0.0.0.0 --port 8000 --reload
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cltcalc.config import settings
from cltcalc.routers import payroll, performance
from cltcalc.routers.performance import record_response_time

# ── Logging ──────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan (startup + shutdown) ────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting CLT payroll calculator on port %s …", settings.APP_PORT)
    yield
    logger.info("Application shutdown complete.")


# ── Application factory ──────────────────────────────────────────────────

app = FastAPI(
    title="CLT Payroll Calculator",
    description=(
        "Brazilian CLT payroll figures: net salary, vacation settlement, "
        "overtime pay and termination severance, computed from the "
        "2024/2025 INSS and IRRF progressive tables."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request-level timing middleware ──────────────────────────────────────

@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"

    # Record for the /performance endpoint
    record_response_time(elapsed_ms)
    return response


# ── Global exception handler ─────────────────────────────────────────────

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. Please check the logs."},
    )


# ── Register routers ─────────────────────────────────────────────────────
app.include_router(payroll.router)
app.include_router(performance.router)


# ── Health check ──────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy", "port": settings.APP_PORT}


# ── Dev entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cltcalc.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
    )
