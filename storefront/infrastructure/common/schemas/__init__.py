from .response_wrappers import ErrorResponse, HealthResponse, SuccessResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "SuccessResponse",
]
