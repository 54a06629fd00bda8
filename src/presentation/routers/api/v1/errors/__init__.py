"""RFC 7807 error responses for the v1 API.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 error response schema
    ErrorResponseBuilder: ApplicationError -> Problem Details response
    register_exception_handlers: Install global exception handlers on the app
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
