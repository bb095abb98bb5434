"""FastAPI endpoints for the EasyPOS domain."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from easypos.api.schemas import CreateCustomerRequest, MessageResponse, ProblemDetails
from easypos.customer.creation import CreateCustomer
from easypos.shared.result import Error, ErrorType

router = APIRouter(prefix="/customers", tags=["customers"])

PROBLEM_JSON = "application/problem+json"


def problem_response(error: Error, trace_id: str | None = None) -> JSONResponse:
    """Translate a command error into a problem details response.

    Validation errors become 400 with the error listed under its code;
    anything else is reported as 500. Both carry the error code in
    ``errorCodes`` and the request's ``traceId``.
    """
    if error.type == ErrorType.VALIDATION:
        problem = ProblemDetails(
            title="One or more validation errors occurred.",
            status=400,
            errors={error.code: [error.description]},
            error_codes=[error.code],
            trace_id=trace_id,
        )
    else:
        problem = ProblemDetails(
            title=error.description,
            status=500,
            detail=error.description,
            error_codes=[error.code],
            trace_id=trace_id,
        )

    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(by_alias=True, exclude_none=True),
        media_type=PROBLEM_JSON,
    )


@router.post(
    "",
    response_model=MessageResponse,
    responses={400: {"model": ProblemDetails}, 500: {"model": ProblemDetails}},
)
def create_customer(body: CreateCustomerRequest, request: Request):
    # Runs in the threadpool: the command handler drives its own event loop.
    command = CreateCustomer(**body.model_dump())
    result = current_domain.process(command, asynchronous=False)

    if isinstance(result, Error):
        return problem_response(result, getattr(request.state, "trace_id", None))
    return MessageResponse(message="Customer created successfully")
