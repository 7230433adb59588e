import logging
from fastapi import FastAPI, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

from tinytok.api import tokenize
from tinytok.middlewares.access_logger import AccessLoggingMiddleware
from tinytok.middlewares.logging import setup_logging
from tinytok.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from tinytok.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
)
from tinytok.core.config import settings


# ✅ SETUP LOGGING FIRST
setup_logging()

logging.getLogger(__name__).info(
    "Starting %s (env=%s, segmenter=%s)",
    settings.SERVICE_NAME,
    settings.ENV,
    settings.DEFAULT_SEGMENTER,
)

app = FastAPI(
    title="TinyTok API",
    description="Multilingual text to unique, normalized tokens for indexing and matching",
    version="1.0.0",
    debug=(not settings.ENV == "production"),
)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(tokenize.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/liveness", status_code=204)
def liveness():
    return Response(status_code=204)


@app.api_route("/readiness", methods=["GET", "HEAD"], status_code=200)
def readiness():
    # No external dependencies to wait for
    return {"status": "ready"}


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
