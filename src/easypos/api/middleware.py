"""Per-request context for the EasyPOS API."""

from uuid import uuid4

from fastapi import Request
from protean.domain import Domain

from easypos.utils.logging import add_context, clear_context

TRACE_HEADER = "X-Trace-Id"


def domain_context_middleware(domain: Domain):
    """Build an HTTP middleware that runs each request inside ``domain``'s context.

    Every request gets a trace id (taken from the ``X-Trace-Id`` header when the
    caller sends one). It is bound to the log context, kept on
    ``request.state.trace_id`` for error responses and echoed back.
    """

    async def middleware(request: Request, call_next):
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id
        add_context(trace_id=trace_id, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()

        response.headers[TRACE_HEADER] = trace_id
        return response

    return middleware
