"""
API middleware: CORS, preflight handling.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from app.formatting import cors_headers


async def preflight_middleware(request, call_next):
    """
    Answer every OPTIONS request with 204 and the CORS headers, no body.
    CORSMiddleware would reply 200 "OK" to a preflight.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=cors_headers())

    return await call_next(request)


def register_middleware(app: FastAPI) -> None:
    """Attach all middleware to the FastAPI app."""
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=86400,
    )

    # Preflight, outermost so it runs before CORSMiddleware
    app.middleware("http")(preflight_middleware)
