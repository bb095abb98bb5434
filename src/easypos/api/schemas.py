"""Pydantic request/response schemas for the EasyPOS API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ana",
                    "last_name": "Torres",
                    "email": "ana.torres@example.com",
                    "phone_number": "5555-1234",
                    "country": "Costa Rica",
                    "line1": "Avenida Central 120",
                    "line2": "Local 4",
                    "city": "San Jose",
                    "state": "San Jose",
                    "zip_code": "10101",
                }
            ]
        }
    }

    name: str = Field(..., max_length=50)
    last_name: str = Field(..., max_length=50)
    email: str = Field(..., max_length=100)
    phone_number: str = Field(..., max_length=20)
    country: str = Field(..., max_length=50)
    line1: str = Field(..., max_length=100)
    line2: str | None = Field(None, max_length=100)
    city: str = Field(..., max_length=50)
    state: str = Field(..., max_length=50)
    zip_code: str = Field(..., max_length=20)


# --- Response Schemas ---


class MessageResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"message": "Customer created successfully"}]}}

    message: str


class ProblemDetails(BaseModel):
    """RFC 9457 problem details body returned for rejected or failed commands.

    ``errorCodes`` lists the codes of the errors behind the response and
    ``traceId`` identifies the request in the logs.
    """

    model_config = {"populate_by_name": True}

    type: str = "about:blank"
    title: str
    status: int
    detail: str | None = None
    errors: dict[str, list[str]] | None = None
    error_codes: list[str] | None = Field(None, alias="errorCodes")
    trace_id: str | None = Field(None, alias="traceId")
