from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging
import time

logger = logging.getLogger("access")


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        x_forwarded_for = request.headers.get("x-forwarded-for")
        ip = (
            x_forwarded_for.split(",")[0].strip()
            if x_forwarded_for
            else (request.client.host if request.client else "-")
        )

        path = request.url.path
        method = request.method
        user_agent = request.headers.get("user-agent", "")

        # Skip known system pings (probes with no user-agent)
        if path in ["/", "/health", "/liveness", "/readiness"] and not user_agent:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            method,
            path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
            extra={"ip": ip, "path": path, "method": method, "user_agent": user_agent},
        )
        return response
