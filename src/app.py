"""Dino Kicks storefront FastAPI application.

Web server that processes commands synchronously via HTTP. Every API request
runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the domain.toml overlay (e.g. "production" → PostgreSQL).
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront.domain import storefront
from storefront.utils.logging import get_logger, request_context

storefront.init()

logger = get_logger(__name__)

_DOMAIN_PREFIX = "/api"


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Dino Kicks API",
    description="Dinosaur-themed shoe storefront: catalogue, cart, checkout and style quiz",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Session-ID"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind request log context."""
    if not request.url.path.startswith(_DOMAIN_PREFIX):
        # Health check, docs, etc.
        return await call_next(request)

    context = request_context(
        request_id=str(uuid.uuid4()),
        method=request.method,
        path=request.url.path,
        session_id=request.headers.get("x-session-id"),
    )
    with context, storefront.domain_context():
        response = await call_next(request)
        logger.info("request_completed", status_code=response.status_code)
    return response


# ---------------------------------------------------------------------------
# Routers and error handlers
# ---------------------------------------------------------------------------
from storefront.api import register_error_handlers, routers  # noqa: E402

for router in routers:
    app.include_router(router)

register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": storefront.name}})
