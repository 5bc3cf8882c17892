import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from typing import Callable, Awaitable
from logging import getLogger

logger = getLogger(__name__)

class RequestLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        start_time = time.time()
        response = await call_next(request)
        latency = round((time.time() - start_time) * 1000, 2)
        client = request.client.host if request.client else '-'
        logger.info(
            f'"{request.method} {request.url.path}" from {client} - '
            f'{response.status_code} in {latency} ms'
        )
        return response
