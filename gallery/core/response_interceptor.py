"""
Response envelope middleware.

Every successful JSON response is wrapped as
    {"success": true, "data": <body>, "count": <len>}
where `count` is present only for list bodies. Routes decorated with
@skip_interceptor return their body untouched.
"""

from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware
import json


SKIP_INTERCEPTOR_KEY = "skip_interceptor"

# FastAPI documentation endpoints are never wrapped
EXCLUDED_PATHS = frozenset({"/openapi.json", "/docs", "/redoc"})


def wrap_payload(payload) -> dict:
    envelope = {"success": True, "data": payload}
    if isinstance(payload, list):
        envelope["count"] = len(payload)
    return envelope


class SuccessResponseInterceptor(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        if request.url.path in EXCLUDED_PATHS:
            return response
        if not (200 <= response.status_code < 300):
            return response
        if getattr(request.state, SKIP_INTERCEPTOR_KEY, False):
            return response
        if "application/json" not in response.headers.get("content-type", ""):
            return response

        body = b""
        async for chunk in response.body_iterator:
            body += chunk

        try:
            payload = json.loads(body.decode())
        except (json.JSONDecodeError, UnicodeDecodeError):
            return Response(
                content=body,
                status_code=response.status_code,
                headers=dict(response.headers),
            )

        # Content-Length is recalculated by JSONResponse
        headers = dict(response.headers)
        headers.pop("content-length", None)

        return JSONResponse(
            content=wrap_payload(payload),
            status_code=response.status_code,
            headers=headers,
        )


def skip_interceptor(func: Callable) -> Callable:
    """
    Mark a route so its response is returned without the envelope.

    Usage:
        @router.delete("/{item_id}")
        @skip_interceptor
        async def delete_item(...):
            return {"message": "Item deleted successfully"}
    """
    setattr(func, SKIP_INTERCEPTOR_KEY, True)
    return func


class CustomAPIRoute(APIRoute):
    """Copies the skip_interceptor flag from the endpoint onto request.state."""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()
        skip = getattr(self.endpoint, SKIP_INTERCEPTOR_KEY, False)

        async def custom_route_handler(request: Request) -> Response:
            setattr(request.state, SKIP_INTERCEPTOR_KEY, skip)
            return await original_route_handler(request)

        return custom_route_handler
