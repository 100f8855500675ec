"""Small response schemas shared across routers."""
from pydantic import BaseModel

# Owner section reads and section writes report the company's
# sections_version in this response header
SECTIONS_VERSION_HEADER = "X-Sections-Version"


class SuccessResponse(BaseModel):
    """Plain acknowledgement for writes that return no resource."""
    success: bool = True


class ErrorDetail(BaseModel):
    """One field-level validation problem."""
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body of every 400 produced by request validation."""
    error: str = "Validation failed"
    details: list[ErrorDetail]


VALIDATION_RESPONSES = {400: {"model": ValidationErrorResponse, "description": "Validation failed"}}
