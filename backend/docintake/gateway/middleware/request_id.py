"""
Request ID Middleware

Tags each request with an ID so log lines from one extraction can be correlated.
"""
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Reuses an upstream X-Request-ID header or generates one, exposes it as
    request.state.request_id and echoes it on the response.
    """
    
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        
        response: Response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
