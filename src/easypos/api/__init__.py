"""EasyPOS API package."""

from easypos.api.middleware import domain_context_middleware
from easypos.api.routes import router

__all__ = ["domain_context_middleware", "router"]
