"""EasyPOS FastAPI application.

Processes customer commands over HTTP. Every request runs inside the
EasyPOS domain context so repositories resolve against the configured
providers.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay from domain.toml is applied.
from easypos.domain import easypos
from fastapi import FastAPI

easypos.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
from easypos.api import domain_context_middleware, router as customers_router  # noqa: E402

app = FastAPI(
    title="EasyPOS API",
    description="Point-of-sale backend: customer registration",
)

app.middleware("http")(domain_context_middleware(easypos))

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(customers_router)
