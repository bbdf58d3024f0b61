"""Fulfilment FastAPI application.

Web server for the warehouse, store and product back office. Commands are
processed synchronously within each request's domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay in fulfilment/domain.toml.
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from fulfilment.domain import fulfilment
from fulfilment.utils.logging import bind_request_context, clear_request_context

fulfilment.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Fulfilment API",
    description="Warehouse placement, stores and products",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the fulfilment domain context and tag log lines with the request."""
    bind_request_context(request_id=str(uuid4()), path=request.url.path, method=request.method)
    try:
        with fulfilment.domain_context():
            response = await call_next(request)
    finally:
        clear_request_context()
    return response


register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from fulfilment.api import product_router, store_router, warehouse_router  # noqa: E402

app.include_router(warehouse_router)
app.include_router(store_router)
app.include_router(product_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": fulfilment.name})
